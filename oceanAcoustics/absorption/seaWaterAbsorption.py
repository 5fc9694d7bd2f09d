# -- Sound Absorption in Sea and Fresh Water -- #

'''
Frequency-dependent absorption of sound in water.

Each model sums relaxation contributions of the form
A * P * f_r * f^2 / (f_r^2 + f^2) for boric acid and magnesium
sulphate, plus a viscous pure-water term A3 * P3 * f^2.

Key conventions:
- Frequencies are in kHz; results are in dB/km
- Francois & Garrison switch their pure-water coefficients at 20 C:
  the T <= 20 set applies at exactly 20 C, the T > 20 set above it
- Fisher & Simmons work internally in Hz with pressure P = D/10 (atm)
- Ainslie & McColm use depth in km inside their exponentials

References:
-----------
Francois, R.E. & Garrison, G.R. (1982) -- Sound absorption based on ocean
    measurements, Part II, J. Acoust. Soc. Am. 72(6), 1879-1890
Fisher, F.H. & Simmons, V.P. (1977) -- Sound absorption in sea water,
    J. Acoust. Soc. Am. 62(3), 558-564
Ainslie, M.A. & McColm, J.G. (1998) -- A simplified formula for viscous and
    chemical absorption in sea water, J. Acoust. Soc. Am. 103(3), 1671-1672
Waite, A.D. (2002) -- Sonar for Practising Engineers, 3rd ed., p. 47
'''

from __future__ import annotations

import numpy as np

from oceanAcoustics import constants as c
from oceanAcoustics.tables.coefficientTables import MOLECULAR_RELAXATION_ATTENUATION


# Pure-water coefficient switch temperature [C]
PURE_WATER_SWITCH_C: float = 20.0


######################################################################
# -- Francois & Garrison -- #
######################################################################

def _francoisGarrisonPureWater(frequencyKhz: float, temperatureC: float, depthM: float) -> float:
    '''Pure-water viscous term A3 * P3 * f^2 [dB/km].'''
    t = temperatureC
    if t <= PURE_WATER_SWITCH_C:
        a3 = 4.937e-4 - 2.59e-5 * t + 9.11e-7 * t ** 2 - 1.50e-8 * t ** 3
    else:
        a3 = 3.964e-4 - 1.146e-5 * t + 1.45e-7 * t ** 2 - 6.50e-10 * t ** 3
    p3 = 1.0 - 3.83e-5 * depthM + 4.9e-10 * depthM ** 2
    return a3 * p3 * frequencyKhz ** 2


def absorptionSoundSeaWaterFrancoisGarrison(
    frequencyKhz: float,
    temperatureC: float,
    salinity: float,
    depthM: float,
    pH: float,
) -> float:
    '''
    Absorption in sea water, Francois & Garrison (1982) [dB/km].

    Parameters:
    -----------
    frequencyKhz : float
        Sound frequency [kHz]
    temperatureC : float
        Temperature [C]
    salinity : float
        Salinity [ppt]
    depthM : float
        Depth [m]
    pH : float
        Acidity

    Returns:
    --------
    float : Absorption coefficient [dB/km]
    '''
    f2 = frequencyKhz ** 2
    temperatureK = temperatureC + c.celsiusToKelvin
    soundSpeed = 1412.0 + 3.21 * temperatureC + 1.19 * salinity + 0.0167 * depthM

    # Boric acid
    a1 = (8.86 / soundSpeed) * 10.0 ** (0.78 * pH - 5.0)
    fBoric = 2.8 * np.sqrt(salinity / 35.0) * 10.0 ** (4.0 - 1245.0 / temperatureK)
    boric = a1 * fBoric * f2 / (f2 + fBoric ** 2)

    # Magnesium sulphate
    a2 = 21.44 * (salinity / soundSpeed) * (1.0 + 0.025 * temperatureC)
    p2 = 1.0 - 1.37e-4 * depthM + 6.2e-9 * depthM ** 2
    fMgSO4 = (8.17 * 10.0 ** (8.0 - 1990.0 / temperatureK)) / (1.0 + 0.0018 * (salinity - 35.0))
    mgso4 = a2 * p2 * fMgSO4 * f2 / (f2 + fMgSO4 ** 2)

    return boric + mgso4 + _francoisGarrisonPureWater(frequencyKhz, temperatureC, depthM)


def absorptionSoundFreshWaterFrancoisGarrison(
    frequencyKhz: float, temperatureC: float, depthM: float,
) -> float:
    '''
    Absorption in fresh water, Francois & Garrison pure-water term [dB/km].

    Parameters:
    -----------
    frequencyKhz : float
        Sound frequency [kHz]
    temperatureC : float
        Temperature [C]
    depthM : float
        Depth [m]

    Returns:
    --------
    float : Absorption coefficient [dB/km]
    '''
    return _francoisGarrisonPureWater(frequencyKhz, temperatureC, depthM)


######################################################################
# -- Fisher & Simmons -- #
######################################################################

def absorptionAlphaFisherSimmons(frequencyKhz: float, temperatureC: float, depthM: float) -> float:
    '''
    Absorption in sea water, Fisher & Simmons (1977) [dB/km].

    Salinity is fixed at 35 ppt and pH at 8 by the fit.

    Parameters:
    -----------
    frequencyKhz : float
        Sound frequency [kHz]
    temperatureC : float
        Temperature [C]
    depthM : float
        Depth [m]

    Returns:
    --------
    float : Absorption coefficient [dB/km]
    '''
    t = temperatureC
    temperatureK = t + c.celsiusToKelvin
    pressureAtm = depthM / 10.0
    f = frequencyKhz * 1e3
    f2 = f ** 2

    # Boric acid
    a1 = 1.03e-8 + 2.36e-10 * t - 5.22e-12 * t ** 2
    f1 = 1.32e3 * temperatureK * np.exp(-1700.0 / temperatureK)
    boric = a1 * f1 * f2 / (f1 ** 2 + f2)

    # Magnesium sulphate
    a2 = 5.62e-8 + 7.52e-10 * t
    p2 = 1.0 - 10.3e-4 * pressureAtm + 3.7e-7 * pressureAtm ** 2
    fMg = 1.55e7 * temperatureK * np.exp(-3052.0 / temperatureK)
    mgso4 = a2 * p2 * fMg * f2 / (fMg ** 2 + f2)

    # Pure water
    a3 = (55.9 - 2.37 * t + 4.77e-2 * t ** 2 - 3.48e-4 * t ** 3) * 1e-15
    p3 = 1.0 - 3.84e-4 * pressureAtm + 7.57e-8 * pressureAtm ** 2
    water = a3 * p3 * f2

    return (boric + mgso4 + water) * c.nepersToDbPerKm


######################################################################
# -- Ainslie & McColm -- #
######################################################################

def absorptionAlphaAinslieMcColm(
    frequencyKhz: float,
    temperatureC: float,
    salinity: float,
    depthM: float,
    pH: float,
) -> float:
    '''
    Absorption in sea water, Ainslie & McColm (1998) [dB/km].

    Parameters:
    -----------
    frequencyKhz : float
        Sound frequency [kHz]
    temperatureC : float
        Temperature [C]
    salinity : float
        Salinity [ppt]
    depthM : float
        Depth [m]
    pH : float
        Acidity

    Returns:
    --------
    float : Absorption coefficient [dB/km]
    '''
    t = temperatureC
    depthKm = depthM * 1e-3
    f2 = frequencyKhz ** 2

    f1 = 0.78 * np.sqrt(salinity / 35.0) * np.exp(t / 26.0)
    boric = 0.106 * f1 * f2 / (f1 ** 2 + f2) * np.exp((pH - 8.0) / 0.56)

    fMg = 42.0 * np.exp(t / 17.0)
    mgso4 = 0.52 * (1.0 + t / 43.0) * (salinity / 35.0) * fMg * f2 / (fMg ** 2 + f2) * np.exp(-depthKm / 6.0)

    water = 0.00049 * f2 * np.exp(-(t / 27.0 + depthKm / 17.0))

    return boric + mgso4 + water


######################################################################
# -- Molecular Relaxation Approximation and Table -- #
######################################################################

def molecularRelaxationAttenuationApproximation(frequencyKhz: float) -> float:
    '''Rule-of-thumb absorption 0.05 * f^1.4, f in kHz [dB/km].'''
    return 0.05 * frequencyKhz ** 1.4


def molecularRelaxationAttenuation(temperatureC: float, frequencyKhz: float) -> float:
    '''
    Tabulated molecular relaxation absorption [dB/km].

    Only tabulated keys are accepted (4, 10, 20 C by 0.5 to 500 kHz);
    anything else raises NoTableEntryError.
    '''
    return MOLECULAR_RELAXATION_ATTENUATION.lookup(temperatureC, frequencyKhz)
