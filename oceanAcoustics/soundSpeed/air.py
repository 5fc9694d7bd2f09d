# -- Speed of Sound in Air -- #

'''
Speed of sound in dry and humid air.

Key equations:
- Dry air: c = 20.05 * sqrt(T + 273.16)
- Humid air (linear humidity correction):
  c = c_dry + Hr * (1.0059e-3 + 1.7776e-7 * (T + 17.78)^3)
- Humid air with pressure: c = 20.05 * sqrt(T_K / (1 - 3.79e-3 * Hr * Psat / P))
  with Psat from the Goff-Gratch saturation vapour pressure equation

Temperatures are in degrees Celsius, relative humidity in percent,
pressure in kPa. Valid for -30 C to 43 C.

References:
-----------
National Physical Laboratory -- Speed of sound in air, Technical Guides
Goff, J.A. & Gratch, S. (1946) -- Low-pressure properties of water
    from -160 to 212 F
'''

from __future__ import annotations

import numpy as np

from oceanAcoustics import constants as c


def speedOfSoundDryAir(temperatureC: float) -> float:
    '''
    Speed of sound in dry air at one atmosphere [m/s].

    Parameters:
    -----------
    temperatureC : float
        Air temperature [C]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    return c.dryAirSoundSpeedCoefficient * np.sqrt(temperatureC + c.waterTriplePointK)


def speedOfSoundHumidAir(temperatureC: float, relativeHumidityPct: float) -> float:
    '''
    Speed of sound in humid air [m/s].

    Parameters:
    -----------
    temperatureC : float
        Air temperature [C]
    relativeHumidityPct : float
        Relative humidity [%]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    humidityTerm = 1.0059e-3 + 1.7776e-7 * (temperatureC + 17.78) ** 3
    return speedOfSoundDryAir(temperatureC) + relativeHumidityPct * humidityTerm


def saturationVapourPressure(temperatureC: float) -> float:
    '''
    Saturation vapour pressure over water, Goff-Gratch form [kPa].

    Parameters:
    -----------
    temperatureC : float
        Air temperature [C]

    Returns:
    --------
    float : Saturation vapour pressure [kPa]
    '''
    t01 = c.waterTriplePointK
    temperatureK = temperatureC + c.celsiusToKelvin

    exponent = (
        10.796 * (1.0 - t01 / temperatureK)
        - 5.0261 * np.log10(temperatureK / t01)
        + 1.5047e-4 * (1.0 - 10.0 ** (-8.2927 * (temperatureK / t01 - 1.0)))
        + 0.42873e-3 * (-1.0 + 10.0 ** (4.7696 * (1.0 - t01 / temperatureK)))
        - 2.2196
    )
    return c.standardAtmosphereKpa * 10.0 ** exponent


def speedOfSoundAir(temperatureC: float, relativeHumidityPct: float, pressureKpa: float) -> float:
    '''
    Speed of sound in humid air at a given pressure [m/s].

    Parameters:
    -----------
    temperatureC : float
        Air temperature [C]
    relativeHumidityPct : float
        Relative humidity [%]
    pressureKpa : float
        Atmospheric pressure [kPa]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    psat = saturationVapourPressure(temperatureC)
    denominator = 1.0 - 3.79e-3 * (relativeHumidityPct * psat / pressureKpa)
    return c.dryAirSoundSpeedCoefficient * np.sqrt((temperatureC + c.waterTriplePointK) / denominator)
