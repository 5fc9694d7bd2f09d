# -- Absorption Subpackage -- #

'''
Sound absorption in sea water and fresh water [dB/km].
'''

from oceanAcoustics.absorption.seaWaterAbsorption import (
    absorptionAlphaAinslieMcColm,
    absorptionAlphaFisherSimmons,
    absorptionSoundFreshWaterFrancoisGarrison,
    absorptionSoundSeaWaterFrancoisGarrison,
)
