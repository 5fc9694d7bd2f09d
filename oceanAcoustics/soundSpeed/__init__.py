# -- Speed of Sound Subpackage -- #

'''
Speed of sound in air, fresh water and sea water.
'''

from oceanAcoustics.soundSpeed.air import speedOfSoundAir, speedOfSoundDryAir, speedOfSoundHumidAir
from oceanAcoustics.soundSpeed.seaWater import (
    speedOfSoundSeaWaterChenAndMillero,
    speedOfSoundSeaWaterCoppens,
    speedOfSoundSeaWaterMackenzie,
    speedOfSoundSeaWaterSkone,
)
