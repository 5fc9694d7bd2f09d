# -- Depth / Pressure Conversions and Gravity -- #

'''
Conversions between hydrostatic pressure and depth in sea water.

Implements:
- International formula for gravity (1967) as a function of latitude
- Leroy & Parthiot (1998) pressure -> depth and depth -> pressure fits
  (pressure in MPa, gauge), each with an optional corrective term for
  regional water masses
- Exact numeric inverse of the depth -> pressure fit (brentq)
- Saunders & Fofonoff (1976) pressure -> depth (pressure in decibars)

The two Leroy & Parthiot fits are independent least-squares inverses,
so composing them is not the identity: the residual is below 1 m over
0-10000 m at any latitude and grows with depth.

Latitudes are in degrees and converted to radians internally.

References:
-----------
Leroy, C.C. & Parthiot, F. (1998) -- Depth-pressure relationships in the
    oceans and seas, J. Acoust. Soc. Am. 103(3), 1346-1352
Saunders, P.M. & Fofonoff, N.P. (1976) -- Conversion of pressure to depth
    in the ocean, Deep-Sea Research 23, 109-111
UNESCO (1983) -- Algorithms for computation of fundamental properties of
    seawater, Technical Papers in Marine Science 44
'''

from __future__ import annotations

import numpy as np
from scipy.optimize import brentq

from oceanAcoustics import constants as c
from oceanAcoustics.catalog.protocols import CorrectiveTerm, applyCorrection
from oceanAcoustics.units import degreesToRadians


# Upper depth bracket for the numeric inverse [m]
INVERSE_MAX_DEPTH_M: float = 20000.0


######################################################################
# -- Gravity -- #
######################################################################

def _gravity(latitudeDeg: float) -> float:
    sin2 = np.sin(degreesToRadians(latitudeDeg)) ** 2
    return c.equatorialGravity * (1.0 + 5.2788e-3 * sin2 - 2.36e-5 * sin2 ** 2)


def internationalFormulaForGravity(
    latitudeDeg: float, correctiveTerm: CorrectiveTerm | None = None,
) -> float:
    '''
    Gravitational acceleration at sea level, 1967 international formula.

    Parameters:
    -----------
    latitudeDeg : float
        Latitude [deg]
    correctiveTerm : CorrectiveTerm | None
        Optional correction added to the result

    Returns:
    --------
    float : Gravity [m/s^2]
    '''
    return applyCorrection(_gravity(latitudeDeg), correctiveTerm)


######################################################################
# -- Leroy & Parthiot -- #
######################################################################

def pressureToDepthLeroyParthiot(
    pressureMPa: float, latitudeDeg: float, correctiveTerm: CorrectiveTerm | None = None,
) -> float:
    '''
    Depth from gauge pressure, Leroy & Parthiot (1998) [m].

    Z = (9.72659e2 P - 2.2512e-1 P^2 + 2.279e-4 P^3 - 1.82e-7 P^4)
        / (g(latitude) + 1.092e-4 P)

    Parameters:
    -----------
    pressureMPa : float
        Gauge pressure [MPa]
    latitudeDeg : float
        Latitude [deg]
    correctiveTerm : CorrectiveTerm | None
        Optional regional correction added to the depth

    Returns:
    --------
    float : Depth [m]
    '''
    p = pressureMPa
    numerator = 9.72659e2 * p - 2.2512e-1 * p ** 2 + 2.279e-4 * p ** 3 - 1.82e-7 * p ** 4
    depth = numerator / (_gravity(latitudeDeg) + 1.092e-4 * p)
    return applyCorrection(depth, correctiveTerm)


def depthToPressureLeroyParthiot(
    depthM: float, latitudeDeg: float, correctiveTerm: CorrectiveTerm | None = None,
) -> float:
    '''
    Gauge pressure from depth, Leroy & Parthiot (1998) [MPa].

    P = h45(Z) * k(Z, latitude), where h45 is the pressure at 45 deg
    latitude and k corrects for the local gravity.

    Parameters:
    -----------
    depthM : float
        Depth [m]
    latitudeDeg : float
        Latitude [deg]
    correctiveTerm : CorrectiveTerm | None
        Optional regional correction added to the pressure

    Returns:
    --------
    float : Gauge pressure [MPa]
    '''
    z = depthM
    h45 = 1.00818e-2 * z + 2.465e-8 * z ** 2 - 1.25e-13 * z ** 3 + 2.8e-19 * z ** 4
    g = 9.7803 * (1.0 + 5.3e-3 * np.sin(degreesToRadians(latitudeDeg)) ** 2)
    k = (g - 2e-5 * z) / (c.gravityAt45Deg - 2e-5 * z)
    return applyCorrection(h45 * k, correctiveTerm)


def depthFromPressureInverseLeroyParthiot(pressureMPa: float, latitudeDeg: float) -> float:
    '''
    Depth whose Leroy & Parthiot pressure equals the given pressure [m].

    Solves depthToPressureLeroyParthiot(Z, latitude) = P with Brent's
    method on [0, 20000] m, so the two conversions round-trip exactly
    to solver tolerance. Pressures outside the bracket return NaN.

    Parameters:
    -----------
    pressureMPa : float
        Gauge pressure [MPa]
    latitudeDeg : float
        Latitude [deg]

    Returns:
    --------
    float : Depth [m]
    '''
    def residual(z: float) -> float:
        return depthToPressureLeroyParthiot(z, latitudeDeg) - pressureMPa

    if residual(0.0) > 0.0 or residual(INVERSE_MAX_DEPTH_M) < 0.0:
        return np.nan

    return brentq(residual, 0.0, INVERSE_MAX_DEPTH_M, xtol=1e-9)


######################################################################
# -- Saunders & Fofonoff -- #
######################################################################

def pressureToDepthSaundersFofonoff(pressureDbar: float, latitudeDeg: float) -> float:
    '''
    Depth from pressure, Saunders & Fofonoff (1976) [m].

    Check value: 9712.653 m at 10000 dbar, 30 deg latitude.

    Parameters:
    -----------
    pressureDbar : float
        Gauge pressure [dbar]
    latitudeDeg : float
        Latitude [deg]

    Returns:
    --------
    float : Depth [m]
    '''
    p = pressureDbar
    x = np.sin(latitudeDeg / 57.29578) ** 2
    gr = c.equatorialGravity * (1.0 + (5.2788e-3 + 2.36e-5 * x) * x) + 1.092e-6 * p
    depth = (((-1.82e-15 * p + 2.279e-10) * p - 2.2512e-5) * p + 9.72659) * p
    return depth / gr
