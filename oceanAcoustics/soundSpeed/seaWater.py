# -- Speed of Sound in Sea Water -- #

'''
Empirical speed-of-sound equations for sea water.

The equations differ in their pressure/depth argument and its unit:
- depth in metres: Leroy 1969, Mackenzie, Medwin, Skone, Leroy et al. 2008
- depth in kilometres: Coppens
- pressure in kg/cm^2: Del Grosso, Frye & Pugh
- pressure in bar: Chen & Millero
- pressure in MPa: Wilson
- pressure in decibars: Lovett

Temperature is in degrees Celsius and salinity in parts per thousand
throughout. Argument order follows each equation's customary form and
is kept stable because the catalog binds positional calls to it.

References:
-----------
Leroy, C.C. (1969) -- Development of simple equations for accurate and
    more realistic calculations of the speed of sound in sea water,
    J. Acoust. Soc. Am. 46, 216-226
Mackenzie, K.V. (1981) -- Nine-term equation for the sound speed in the
    oceans, J. Acoust. Soc. Am. 70(3), 807-812
Coppens, A.B. (1981) -- Simple equations for the speed of sound in
    Neptunian waters, J. Acoust. Soc. Am. 69(3), 862-863
Del Grosso, V.A. (1974) -- New equation for the speed of sound in natural
    waters, J. Acoust. Soc. Am. 56(4), 1084-1091
Chen, C.T. & Millero, F.J. (1977) -- Speed of sound in seawater at high
    pressures, J. Acoust. Soc. Am. 62(5), 1129-1135
Medwin, H. (1975) -- Speed of sound in water: a simple equation for
    realistic parameters, J. Acoust. Soc. Am. 58, 1318-1319
Skone, S. et al. (2002) as summarised by Lurton, X. -- An Introduction to
    Underwater Acoustics
Wilson, W.D. (1960) -- Speed of sound in sea water as a function of
    temperature, pressure and salinity, J. Acoust. Soc. Am. 32, 641-644
Frye, H.W. & Pugh, J.D. (1971) -- A new equation for the speed of sound
    in seawater, J. Acoust. Soc. Am. 50, 384-386
Lovett, J.R. (1978) -- Merged seawater sound-speed equations,
    J. Acoust. Soc. Am. 63, 1713-1718
Leroy, C.C., Robinson, S.P. & Goldsmith, M.J. (2008) -- A new equation for
    the accurate calculation of sound speed in all oceans,
    J. Acoust. Soc. Am. 124, 2774-2782
'''

from __future__ import annotations

import numpy as np

from oceanAcoustics.catalog.protocols import Rule, RuleSet, ranges


######################################################################
# -- Depth-Based Equations -- #
######################################################################

def speedOfSoundSeaWaterLeroy69(depthM: float, salinity: float, temperatureC: float) -> float:
    '''
    Sea water, Leroy (1969) [m/s].

    Declared validity -2 to 23 C, 30 to 40 ppt, 0 to 500 m; error +-0.1 m/s.

    Parameters:
    -----------
    depthM : float
        Depth [m]
    salinity : float
        Salinity [ppt]
    temperatureC : float
        Temperature [C]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    return (
        1492.9 + 3.0 * (temperatureC - 10.0)
        - 0.006 * (temperatureC - 10.0) ** 2
        - 0.04 * (temperatureC - 18.0) ** 2
        + 1.2 * (salinity - 35.0)
        - 0.01 * (temperatureC - 18.0) * (salinity - 35.0)
        + depthM / 61.0
    )


def speedOfSoundSeaWaterMackenzie(depthM: float, salinity: float, temperatureC: float) -> float:
    '''
    Sea water, Mackenzie (1981) nine-term equation [m/s].

    Declared validity -2 to 30 C, 25 to 40 ppt, 0 to 8000 m.

    Parameters:
    -----------
    depthM : float
        Depth [m]
    salinity : float
        Salinity [ppt]
    temperatureC : float
        Temperature [C]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    t = temperatureC
    s35 = salinity - 35.0
    return (
        1448.96 + 4.591 * t - 5.304e-2 * t ** 2 + 2.374e-4 * t ** 3
        + 1.340 * s35 + 1.630e-2 * depthM + 1.675e-7 * depthM ** 2
        - 1.025e-2 * t * s35 - 7.139e-13 * t * depthM ** 3
    )


def speedOfSoundSeaWaterCoppens(depthKm: float, salinity: float, temperatureC: float) -> float:
    '''
    Sea water, Coppens (1981) [m/s].

    Depth is in kilometres. Declared validity 0 to 35 C, 0 to 45 ppt,
    0 to 4 km.

    Parameters:
    -----------
    depthKm : float
        Depth [km]
    salinity : float
        Salinity [ppt]
    temperatureC : float
        Temperature [C]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    t = temperatureC / 10.0
    s35 = salinity - 35.0
    return (
        1449.05 + 45.7 * t - 5.21 * t ** 2 + 0.23 * t ** 3
        + (1.333 - 0.126 * t + 0.009 * t ** 2) * s35
        + (16.23 + 0.253 * t) * depthKm
        + (0.213 - 0.1 * t) * depthKm ** 2
        + (0.016 + 0.0002 * s35) * s35 * t * depthKm
    )


def speedOfSoundSeaWaterMedwin(temperatureC: float, depthM: float, salinity: float) -> float:
    '''
    Sea water, Medwin (1975) simple equation [m/s].

    Declared validity 0 to 35 C, 0 to 1000 m, 0 to 45 ppt.

    Parameters:
    -----------
    temperatureC : float
        Temperature [C]
    depthM : float
        Depth [m]
    salinity : float
        Salinity [ppt]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    t = temperatureC
    return (
        1449.2 + 4.6 * t - 5.5e-2 * t ** 2 + 2.9e-4 * t ** 3
        + (1.34 - 1e-2 * t) * (salinity - 35.0) + 1.62e-2 * depthM
    )


def speedOfSoundSeaWaterLeroyEtAl2008(
    temperatureC: float, salinity: float, depthM: float, latitudeDeg: float,
) -> float:
    '''
    Sea water, Leroy, Robinson & Goldsmith (2008) [m/s].

    Fourteen-term equation valid for all oceans, including the
    latitude correction 1.2e-6 * D * (latitude - 45).

    Parameters:
    -----------
    temperatureC : float
        Temperature, ITS-90 [C]
    salinity : float
        Salinity [ppt]
    depthM : float
        Depth [m]
    latitudeDeg : float
        Latitude [deg]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    t = temperatureC
    s = salinity
    d = depthM
    return (
        1402.5 + 5.0 * t - 5.44e-2 * t ** 2 + 2.1e-4 * t ** 3
        + 1.33 * s - 1.23e-2 * s * t + 8.7e-5 * s * t ** 2
        + 1.56e-2 * d + 2.55e-7 * d ** 2 - 7.3e-12 * d ** 3
        + 1.2e-6 * d * (latitudeDeg - 45.0) - 9.5e-13 * t * d ** 3
        + 3e-7 * t ** 2 * d + 1.43e-5 * s * d
    )


######################################################################
# -- Skone Rule Set -- #
######################################################################

def _skoneLeroyForm(temperatureC: float, depthM: float, salinity: float) -> float:
    t = temperatureC
    s35 = salinity - 35.0
    return (
        1492.9 + 3.0 * (t - 10.0) - 6e-3 * (t - 10.0) ** 2 - 4e-2 * (t - 18.0) ** 2
        + 1.2 * s35 - 1e-2 * (t - 18.0) * s35 + 1.6e-2 * depthM
    )


def _skoneMedwinForm(temperatureC: float, depthM: float, salinity: float) -> float:
    t = temperatureC
    return (
        1449.2 + 4.6 * t - 5.5e-2 * t ** 2 + 2.9e-4 * t ** 3
        + (1.34 - 1e-2 * t) * (salinity - 35.0) + 1.6e-2 * depthM
    )


def _skoneMackenzieForm(temperatureC: float, depthM: float, salinity: float) -> float:
    return speedOfSoundSeaWaterMackenzie(depthM, salinity, temperatureC)


# Ordered: the first rule whose ranges contain the inputs is used, the
# last rule is evaluated when none match
SKONE_RULES = RuleSet((
    Rule('leroy', ranges(temperatureC=(-2.0, 24.5), depthM=(0.0, 1000.0), salinity=(30.0, 42.0)), _skoneLeroyForm),
    Rule('medwin', ranges(temperatureC=(0.0, 35.0), depthM=(0.0, 1000.0), salinity=(0.0, 45.0)), _skoneMedwinForm),
    Rule('mackenzie', ranges(temperatureC=(0.0, 30.0), depthM=(0.0, 8000.0), salinity=(30.0, 40.0)), _skoneMackenzieForm),
))


def speedOfSoundSeaWaterSkone(temperatureC: float, depthM: float, salinity: float) -> float:
    '''
    Sea water, Skone et al. (2002) range-selected equation [m/s].

    Picks the Leroy, Medwin or Mackenzie form by the first validity
    window containing the inputs; outside all three the Mackenzie form
    is used. The catalog reports that case as a diagnostic.

    Parameters:
    -----------
    temperatureC : float
        Temperature [C]
    depthM : float
        Depth [m]
    salinity : float
        Salinity [ppt]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    return SKONE_RULES.evaluate(temperatureC=temperatureC, depthM=depthM, salinity=salinity)


######################################################################
# -- Pressure-Based Equations -- #
######################################################################

def speedOfSoundSeaWaterDelGrosso(salinity: float, temperatureC: float, pressureKgCm2: float) -> float:
    '''
    Sea water, Del Grosso (1974) nineteen-term equation [m/s].

    Pressure is gauge pressure in kg/cm^2 (100 kPa = 1.019716 kg/cm^2).
    Declared validity 0 to 30 C, 30 to 40 ppt, 0 to 1000 kg/cm^2.

    Parameters:
    -----------
    salinity : float
        Salinity [ppt]
    temperatureC : float
        Temperature [C]
    pressureKgCm2 : float
        Gauge pressure [kg/cm^2]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    s = salinity
    t = temperatureC
    p = pressureKgCm2

    deltaT = 0.5012285e1 * t - 0.551184e-1 * t ** 2 + 0.221649e-3 * t ** 3
    deltaS = 0.1329530e1 * s + 0.1288598e-3 * s ** 2
    deltaP = 0.1560592 * p + 0.2449993e-4 * p ** 2 - 0.8833959e-8 * p ** 3
    deltaSTP = (
        -0.1275936e-1 * s * t
        + 0.6353509e-2 * t * p
        - 0.1593895e-5 * t * p ** 2
        - 0.4383615e-6 * t ** 3 * p
        + 0.2656174e-7 * t ** 2 * p ** 2
        + 0.5222483e-9 * t * p ** 3
        + 0.9688441e-4 * s * t ** 2
        - 0.3406824e-3 * s * t * p
        + 0.4857614e-5 * s ** 2 * t * p
        - 0.1616745e-8 * s ** 2 * p ** 2
    )
    return 1402.392 + deltaT + deltaS + deltaP + deltaSTP


def _polynomial(x: float, coefficients: tuple[float, ...]) -> float:
    return sum(a * x ** i for i, a in enumerate(coefficients))


def speedOfSoundSeaWaterChenAndMillero(salinity: float, temperatureC: float, pressureBar: float) -> float:
    '''
    Sea water, Chen & Millero (1977), UNESCO form [m/s].

    c = Cw(T, P) + A(T, P)*S + B(T, P)*S^1.5 + D(P)*S^2
    Declared validity 0 to 40 C, 0 to 40 ppt, 0 to 1000 bar.

    Parameters:
    -----------
    salinity : float
        Salinity [ppt]
    temperatureC : float
        Temperature [C]
    pressureBar : float
        Gauge pressure [bar]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    t = temperatureC
    p = pressureBar

    cw = (
        _polynomial(t, (1402.388, 5.03830, -5.81090e-2, 3.3432e-4, -1.47797e-6, 3.1419e-9))
        + _polynomial(t, (0.153563, 6.8999e-4, -8.1829e-6, 1.3632e-7, -6.1260e-10)) * p
        + _polynomial(t, (3.1260e-5, -1.7111e-6, 2.5986e-8, -2.5353e-10, 1.0415e-12)) * p ** 2
        + _polynomial(t, (-9.7729e-9, 3.8513e-10, -2.3654e-12)) * p ** 3
    )
    a = (
        _polynomial(t, (1.389, -1.262e-2, 7.166e-5, 2.008e-6, -3.21e-8))
        + _polynomial(t, (9.4742e-5, -1.2583e-5, -6.4928e-8, 1.0515e-8, -2.0142e-10)) * p
        + _polynomial(t, (-3.9064e-7, 9.1061e-9, -1.6009e-10, 7.994e-12)) * p ** 2
        + _polynomial(t, (1.100e-10, 6.651e-12, -3.391e-13)) * p ** 3
    )
    b = -1.922e-2 - 4.42e-5 * t + (7.3637e-5 + 1.7950e-7 * t) * p
    d = 1.727e-3 - 7.9836e-6 * p

    return cw + a * salinity + b * salinity ** 1.5 + d * salinity ** 2


def speedOfSoundSeaWaterWilson(temperatureC: float, salinity: float, pressureMPa: float) -> float:
    '''
    Sea water, Wilson (1960) [m/s].

    The published equation is quoted to 0.01 m/s, so the result is
    rounded to two decimals. Declared validity -4 to 30 C, 0 to 37 ppt,
    0.1 to 100 MPa.

    Parameters:
    -----------
    temperatureC : float
        Temperature [C]
    salinity : float
        Salinity [ppt]
    pressureMPa : float
        Hydrostatic pressure [MPa]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    t = temperatureC
    s35 = salinity - 35.0
    p = pressureMPa

    vt = 4.5721 * t - 4.4532e-2 * t ** 2 - 2.6045e-4 * t ** 3 + 7.9851e-6 * t ** 4
    vs = 1.39799 * s35 + 1.69202e-3 * s35 ** 2
    vp = 1.63432 * p + 1.06768e-3 * p ** 2 + 3.73403e-6 * p ** 3 - 3.6332e-8 * p ** 4
    vstp = (
        s35 * (
            -1.1244e-2 * t + 7.7711e-7 * t ** 2 + 7.85344e-4 * p - 1.3458e-5 * p ** 2
            + 3.2203e-7 * p * t + 1.6101e-8 * t ** 2 * p
        )
        + p * (-1.8974e-3 * t + 7.6287e-5 * t ** 2 + 4.6176e-7 * t ** 3)
        + p ** 2 * (-2.6301e-5 * t + 1.9302e-7 * t ** 2)
        - p ** 3 * 2.0831e-7 * t
    )
    v = 1449.14 + vt + vs + vp + vstp
    return np.round(v * 100.0) / 100.0


def speedOfSoundSeaWaterFryeAndPugh(temperatureC: float, salinity: float, pressureKgCm2: float) -> float:
    '''
    Sea water, Frye & Pugh (1971) [m/s].

    Declared validity -3 to 30 C, 33.1 to 36.6 ppt, 1.033 to 984.3 kg/cm^2.

    Parameters:
    -----------
    temperatureC : float
        Temperature [C]
    salinity : float
        Salinity [ppt]
    pressureKgCm2 : float
        Absolute pressure [kg/cm^2]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    t = temperatureC
    s35 = salinity - 35.0
    p = pressureKgCm2
    return (
        1449.3 + 1.5848e-1 * p + 1.572e-5 * p ** 2 - 3.46e-12 * p ** 4
        + 4.587 * t - 5.356e-2 * t ** 2 + 2.604e-4 * t ** 3
        + 1.19 * s35 + 9.6e-2 * s35 ** 3
        + 1.354e-5 * t ** 2 * p - 7.19e-7 * t * p ** 2
        - 1.2e-2 * s35 * t
    )


######################################################################
# -- Lovett (1978) Merged Equations -- #
######################################################################

def speedOfSoundSeaWaterLovett1(temperatureC: float, salinity: float, pressureDbar: float) -> float:
    '''
    Sea water, Lovett (1978) merged equation (a) [m/s].

    Check value: T = 2 C, S = 34.7, P = 6000 dbar gives 1559.462 m/s.

    Parameters:
    -----------
    temperatureC : float
        Temperature, IPTS-48 [C]
    salinity : float
        Salinity [ppt]
    pressureDbar : float
        Gauge pressure [dbar]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    t = temperatureC
    s = salinity
    p = pressureDbar

    ct = 5.011094 * t - 5.509468e-2 * t ** 2 + 2.21536e-4 * t ** 3
    cs = 1.329523 * s + 1.289558e-4 * s ** 2
    cp = 1.598938e-2 * p + 2.478901e-7 * p ** 2 - 8.485727e-12 * p ** 3
    ctsp = (
        -1.275628e-2 * t * s + 6.477152e-4 * t * p
        + 2.760566e-10 * t ** 2 * p ** 2 - 1.65695e-8 * t * p ** 2
        + 5.536118e-13 * t * p ** 3 - 4.466674e-8 * t ** 3 * p
        - 1.681126e-11 * s ** 2 * p ** 2 + 9.684032e-5 * t ** 2 * s
        + 4.952146e-7 * t * s ** 2 * p - 3.473123e-5 * t * s * p
    )
    return 1402.392 + ct + cs + cp + ctsp


def speedOfSoundSeaWaterLovett2(temperatureC: float, salinity: float, pressureDbar: float) -> float:
    '''
    Sea water, Lovett (1978) merged equation (b) [m/s].

    Check value: T = 2 C, S = 34.7, P = 6000 dbar gives 1559.393 m/s.
    The salinity-pressure cross term is S^2 P^3, as the check value
    requires.

    Parameters:
    -----------
    temperatureC : float
        Temperature, IPTS-48 [C]
    salinity : float
        Salinity [ppt]
    pressureDbar : float
        Gauge pressure [dbar]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    t = temperatureC
    s = salinity
    p = pressureDbar

    ct = 5.028849 * t - 5.723758e-2 * t ** 2 + 2.858485e-4 * t ** 3 - 1.404216e-8 * t ** 5
    cs = 1.280746 * s + 2.830167e-3 * s ** 2 - 3.787896e-5 * s ** 3
    cp = 1.594777e-2 * p + 2.778778e-7 * p ** 2 + 7.069489e-21 * p ** 5
    ctsp = (
        -1.280898e-2 * t * s + 1.040187e-4 * t ** 2 * s
        - 9.301259e-11 * t ** 3 * s ** 3 + 9.466535e-5 * t * p
        - 1.23743e-8 * t * p ** 2 - 7.100174e-6 * t ** 2 * p
        + 8.592724e-14 * t ** 2 * p ** 3 - 9.02519e-8 * t ** 3 * p
        - 2.70148e-11 * t ** 3 * p ** 2 - 7.816551e-13 * s * p ** 3
        + 1.303142e-14 * s ** 2 * p ** 3 - 6.265617e-13 * s ** 3 * p ** 2
        - 2.238383e-6 * t * s * p + 2.85346e-7 * t ** 2 * s * p
    )
    return 1402.394 + ct + cs + cp + ctsp


def speedOfSoundSeaWaterLovett3(temperatureC: float, salinity: float, pressureDbar: float) -> float:
    '''
    Sea water, Lovett (1978) merged equation (c) [m/s].

    Check value: T = 2 C, S = 34.7, P = 6000 dbar gives 1559.499 m/s.

    Parameters:
    -----------
    temperatureC : float
        Temperature, IPTS-48 [C]
    salinity : float
        Salinity [ppt]
    pressureDbar : float
        Gauge pressure [dbar]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    t = temperatureC
    s = salinity
    p = pressureDbar

    ct = 5.01132 * t - 5.513036e-2 * t ** 2 + 2.221008e-4 * t ** 3
    cs = 1.332947 * s
    cp = 1.605336e-2 * p + 2.12448e-7 * p ** 2
    ctsp = (
        -1.266383e-2 * t * s + 9.543664e-5 * t ** 2 * s
        - 1.052396e-8 * t * p ** 2 + 2.183988e-13 * t * p ** 3
        - 2.253828e-13 * s * p ** 3 + 2.062107e-8 * t * s ** 2 * p
    )
    return 1402.394 + ct + cs + cp + ctsp
