# -- Speed of Sound in Pure and Fresh Water -- #

'''
Empirical speed-of-sound equations for pure (distilled) and fresh water.

Most fits are polynomials in temperature at atmospheric pressure.
Kinsler et al. and Belogol'skii, Sekoyan et al. add a pressure
dependence; note their different pressure units (bar and MPa).

References:
-----------
National Physical Laboratory (2015) -- Underwater Acoustics Technical
    Guides, Speed of Sound in Pure Water
Kinsler, L.E. et al. (1982) -- Fundamentals of Acoustics, 3rd ed.
Lubbers, J. & Graaff, R. (1998) -- A simple and accurate formula for the
    sound velocity in water, Ultrasound Med. Biol. 24(7), 1065-1068
Bilaniuk, N. & Wong, G.S.K. (1993) -- Speed of sound in pure water as a
    function of temperature, J. Acoust. Soc. Am. 93(3), 1609-1612
Marczak, W. (1997) -- Water as a standard in the measurements of speed
    of sound in liquids, J. Acoust. Soc. Am. 102(5), 2776-2779
Belogol'skii, V.A., Sekoyan, S.S. et al. (1999) -- Pressure dependence
    of the sound velocity in distilled water, Measurement Techniques 42(4)
Del Grosso, V.A. & Mader, C.W. (1972) -- Speed of sound in pure water,
    J. Acoust. Soc. Am. 52, 1442-1446
'''

from __future__ import annotations

from oceanAcoustics import constants as c


######################################################################
# -- Pressure-Dependent Fits -- #
######################################################################

def speedOfSoundKinslerEtal(pressureBar: float, temperatureC: float) -> float:
    '''
    Speed of sound in fresh water, Kinsler et al. [m/s].

    Valid 0-100 C, 0-200 bar.

    Parameters:
    -----------
    pressureBar : float
        Gauge pressure [bar]
    temperatureC : float
        Water temperature [C]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    t = temperatureC / 100.0
    return (
        1402.7 + 488.0 * t - 482.0 * t ** 2 + 135.0 * t ** 3
        + (15.9 + 2.8 * t + 2.4 * t ** 2) * pressureBar / 100.0
    )


# Belogol'skii, Sekoyan et al. coefficients a[i][j] for T^i * (P - P0)^j
_BELOGOLSKII_COEFFICIENTS = (
    (1402.38744, 5.03836171, -5.81172916e-2, 3.34638117e-4, -1.48259672e-6, 3.16585020e-9),
    (1.49043589, 1.077850609e-2, -2.232794656e-4, 2.718246452e-6),
    (4.31532833e-3, -2.938590293e-4, 6.822485943e-6, -6.674551162e-8),
    (-1.852993525e-5, 1.481844713e-6, -3.940994021e-8, 3.939902307e-10),
)


def speedOfSoundPureWaterBelogolskiiSekoyanEtal(temperatureC: float, pressureMPa: float) -> float:
    '''
    Speed of sound in pure water with pressure, Belogol'skii et al. [m/s].

    c = c(T, P0) + M1(T)*(P - P0) + M2(T)*(P - P0)^2 + M3(T)*(P - P0)^3
    with P0 = 0.101325 MPa. Valid 0-40 C, 0.1-60 MPa.

    Parameters:
    -----------
    temperatureC : float
        Water temperature [C]
    pressureMPa : float
        Absolute pressure [MPa]

    Returns:
    --------
    float : Speed of sound [m/s]
    '''
    deltaP = pressureMPa - c.standardAtmosphereMPa

    total = 0.0
    for j, row in enumerate(_BELOGOLSKII_COEFFICIENTS):
        polynomial = sum(a * temperatureC ** i for i, a in enumerate(row))
        total = total + polynomial * deltaP ** j
    return total


######################################################################
# -- Atmospheric-Pressure Fits -- #
######################################################################

def speedOfSoundPureWaterLubbersandGraaffSEa(temperatureC: float) -> float:
    '''Pure water, Lubbers & Graaff simplified equation (a), 15-35 C [m/s].'''
    return 1404.3 + 4.7 * temperatureC - 0.04 * temperatureC ** 2


def speedOfSoundPureWaterLubbersandGraaffSEb(temperatureC: float) -> float:
    '''Pure water, Lubbers & Graaff simplified equation (b), 10-40 C [m/s].'''
    return 1405.03 + 4.624 * temperatureC - 0.0383 * temperatureC ** 2


def _fifthOrder(temperatureC: float, coefficients: tuple[float, ...]) -> float:
    return sum(a * temperatureC ** i for i, a in enumerate(coefficients))


def speedOfSoundPureWaterBilaniukWong112(temperatureC: float) -> float:
    '''Pure water, Bilaniuk & Wong 112-point fit, 0-100 C [m/s].'''
    return _fifthOrder(temperatureC, (
        1.40238742e3, 5.03821344, -5.80539349e-2, 3.32000870e-4, -1.44537900e-6, 2.99402365e-9,
    ))


def speedOfSoundPureWaterBilaniukWong36(temperatureC: float) -> float:
    '''Pure water, Bilaniuk & Wong 36-point fit, 0-100 C [m/s].'''
    return _fifthOrder(temperatureC, (
        1.40238677e3, 5.03798765, -5.80980033e-2, 3.34296650e-4, -1.47936902e-6, 3.14893508e-9,
    ))


def speedOfSoundPureWaterBilaniukWong148(temperatureC: float) -> float:
    '''Pure water, Bilaniuk & Wong 148-point fit, 0-100 C [m/s].'''
    return _fifthOrder(temperatureC, (
        1.40238744e3, 5.03836171, -5.81172916e-2, 3.34638117e-4, -1.48259672e-6, 3.16585020e-9,
    ))


def speedOfSoundPureWaterMarczak(temperatureC: float) -> float:
    '''Pure water, Marczak (1997), 0-95 C [m/s].'''
    return _fifthOrder(temperatureC, (
        1.402385e3, 5.038813, -5.799136e-2, 3.287156e-4, -1.398845e-6, 2.787860e-9,
    ))


def speedOfSoundFreshWaterGrossoMader(temperatureC: float) -> float:
    '''Fresh water, Del Grosso & Mader (1972), 0-95 C, error +-0.015 m/s [m/s].'''
    return _fifthOrder(temperatureC, (
        1402.388, 5.03711, -0.0580852, 0.3342e-3, -0.1478e-5, 0.315e-8,
    ))
