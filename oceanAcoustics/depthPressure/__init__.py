# -- Depth and Pressure Subpackage -- #

'''
Depth/pressure conversions and simplified hydrostatic pressure laws.
'''

from oceanAcoustics.depthPressure.conversions import (
    depthFromPressureInverseLeroyParthiot,
    depthToPressureLeroyParthiot,
    pressureToDepthLeroyParthiot,
    pressureToDepthSaundersFofonoff,
)
