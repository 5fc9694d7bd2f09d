# -- Simplified Depth-to-Pressure Laws -- #

'''
Closed-form hydrostatic pressure as a function of depth.

These are the compact pressure laws that accompany the Leroy (1968,
1969) and Lovett (1978) sound-speed work. Their units differ:
- Leroy 1968: absolute pressure in Pa
- Lovett modified Leroy: gauge pressure in decibars
- Leroy 1969 simplified, Black Sea, Baltic: absolute pressure in kg/cm^2

Latitudes are in degrees.

References:
-----------
Leroy, C.C. (1968) -- Formulas for the calculation of underwater pressure
    in acoustics, J. Acoust. Soc. Am. 44, 651-653
Leroy, C.C. (1969) -- Development of simple equations for accurate and
    more realistic calculations of the speed of sound in sea water,
    J. Acoust. Soc. Am. 46, 216-226
Lovett, J.R. (1978) -- Merged seawater sound-speed equations,
    J. Acoust. Soc. Am. 63, 1713-1718
'''

from __future__ import annotations

import numpy as np

from oceanAcoustics.units import degreesToRadians


def _sin2(latitudeDeg: float) -> float:
    return np.sin(degreesToRadians(latitudeDeg)) ** 2


def pressureLeroy68(depthM: float, latitudeDeg: float) -> float:
    '''
    Absolute hydrostatic pressure, Leroy (1968) [Pa].

    Catalogued under its historical name SpeedOfSoundSeaWaterLeroy68,
    although the quantity computed is pressure.

    Parameters:
    -----------
    depthM : float
        Depth [m]
    latitudeDeg : float
        Latitude [deg]

    Returns:
    --------
    float : Absolute pressure [Pa]
    '''
    z = depthM
    return (1.0052405 * (1.0 + 5.28e-3 * _sin2(latitudeDeg)) * z + 2.36e-6 * z ** 2 + 10.196) * 1e4


def pressureModifiedSimplifiedLeroy(depthM: float, latitudeDeg: float) -> float:
    '''Gauge pressure, Lovett's modified Leroy law [dbar].'''
    z = depthM
    return 1.0052405 * (1.0 + 5.28e-3 * _sin2(latitudeDeg)) * z + 2.36e-6 * z ** 2


def pressureSimplifiedLeroy(depthM: float, latitudeDeg: float) -> float:
    '''Absolute pressure, Leroy (1969) simplified law [kg/cm^2].'''
    z = depthM
    return 1.04 + 0.102506 * (1.0 + 0.00528 * _sin2(latitudeDeg)) * z + 2.524e-7 * z ** 2


def pressureBlackSeaSimplifiedLeroy(depthM: float) -> float:
    '''Absolute pressure in the Black Sea, Leroy (1969) [kg/cm^2].'''
    return 1.03 + 0.10168 * depthM + 2.6e-7 * depthM ** 2


def pressureBalticSimplifiedLeroy(depthM: float) -> float:
    '''Absolute pressure in the Baltic, Leroy (1969) [kg/cm^2].'''
    return 1.03 + 0.1008 * depthM + 1.4e-6 * depthM ** 2
