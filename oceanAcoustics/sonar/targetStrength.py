# -- Target Strength -- #

'''
Target strength of simple geometric reflectors.

TS = 10 log10(Ir / Ii), with Ir referred to 1 m from the acoustic
centre of the target. The geometric forms are the high-frequency
(ka >> 1) limits:
- Sphere of radius r: 10 log10(r^2 / 4)
- Convex surface with radii r1, r2: 10 log10(r1 r2 / 4)
- Plate of area A at normal incidence: 20 log10(A / lambda)
- Cylinder of radius r, length L at normal incidence:
  10 log10(r L^2 / (2 lambda))

Off-normal forms add the beam pattern 20 log10|sin(x) / x| with
x = (2 pi L / lambda) sin(theta), plus 20 log10|cos(theta)|. Sidelobes
are finite; exact nulls give -inf.
Angles are in radians; sin(x)/x is taken as 1 at x = 0.

References:
-----------
Waite, A.D. (2002) -- Sonar for Practising Engineers, 3rd ed., ch. 6
Urick, R.J. (1983) -- Principles of Underwater Sound, 3rd ed., table 9.1
'''

from __future__ import annotations

import numpy as np


def _beamPattern(lengthM: float, wavelengthM: float, thetaRad: float) -> float:
    '''20 log10|sin(x)/x| + 20 log10|cos(theta)| off-normal loss [dB].'''
    x = (2.0 * np.pi * lengthM / wavelengthM) * np.sin(thetaRad)
    # np.sinc is sin(pi u)/(pi u); pass x/pi to get sin(x)/x
    return 20.0 * np.log10(np.abs(np.sinc(x / np.pi))) + 20.0 * np.log10(np.abs(np.cos(thetaRad)))


######################################################################
# -- Intensity and Pressure Ratios -- #
######################################################################

def targetStrength(reflectedIntensity: float, incidentIntensity: float) -> float:
    '''Target strength 10 log10(Ir / Ii) [dB].'''
    return 10.0 * np.log10(reflectedIntensity / incidentIntensity)


def peakTargetStrength(reflectedPressure: float, incidentPressure: float) -> float:
    '''Peak target strength 20 log10(Pr / Pi) [dB].'''
    return 20.0 * np.log10(reflectedPressure / incidentPressure)


######################################################################
# -- Geometric Targets -- #
######################################################################

def targetStrengthSphere(radiusM: float) -> float:
    '''Sphere of radius r, 10 log10(r^2 / 4) [dB].'''
    return 10.0 * np.log10(radiusM ** 2 / 4.0)


def targetStrengthConvexSurface(radius1M: float, radius2M: float) -> float:
    '''Convex surface with principal radii r1, r2, 10 log10(r1 r2 / 4) [dB].'''
    return 10.0 * np.log10(radius1M * radius2M / 4.0)


def targetStrengthPlateAnyShape(areaM2: float, wavelengthM: float) -> float:
    '''Flat plate of any shape at normal incidence, 10 log10((A / lambda)^2) [dB].'''
    return 10.0 * np.log10((areaM2 / wavelengthM) ** 2)


def targetStrengthRectangularPlateNormal(lengthM: float, widthM: float, wavelengthM: float) -> float:
    '''Rectangular plate a x b at normal incidence, 10 log10((ab / lambda)^2) [dB].'''
    return 10.0 * np.log10((lengthM * widthM / wavelengthM) ** 2)


def targetStrengthRectangularPlateThetaToNormal(
    lengthM: float, widthM: float, wavelengthM: float, thetaRad: float,
) -> float:
    '''
    Rectangular plate at angle theta to the normal [dB].

    The angle is measured in the plane containing the side of length a.

    Parameters:
    -----------
    lengthM : float
        Side a, in the plane of incidence [m]
    widthM : float
        Side b [m]
    wavelengthM : float
        Acoustic wavelength [m]
    thetaRad : float
        Angle to the plate normal [rad]

    Returns:
    --------
    float : Target strength [dB]
    '''
    normal = targetStrengthRectangularPlateNormal(lengthM, widthM, wavelengthM)
    return normal + _beamPattern(lengthM, wavelengthM, thetaRad)


def targetStrengthCircularPlateNormal(radiusM: float, wavelengthM: float) -> float:
    '''Circular plate of radius r at normal incidence, 10 log10((pi r^2 / lambda)^2) [dB].'''
    return 10.0 * np.log10((np.pi * radiusM ** 2 / wavelengthM) ** 2)


def targetStrengthCylinderNormal(radiusM: float, lengthM: float, wavelengthM: float) -> float:
    '''Cylinder at normal incidence, 10 log10(r L^2 / (2 lambda)) [dB].'''
    return 10.0 * np.log10(radiusM * lengthM ** 2 / (2.0 * wavelengthM))


def targetStrengthCylinderThetaToNormal(
    radiusM: float, lengthM: float, wavelengthM: float, thetaRad: float,
) -> float:
    '''
    Cylinder at angle theta to the normal [dB].

    Parameters:
    -----------
    radiusM : float
        Cylinder radius [m]
    lengthM : float
        Cylinder length [m]
    wavelengthM : float
        Acoustic wavelength [m]
    thetaRad : float
        Angle to the cylinder normal [rad]

    Returns:
    --------
    float : Target strength [dB]
    '''
    normal = targetStrengthCylinderNormal(radiusM, lengthM, wavelengthM)
    return normal + _beamPattern(lengthM, wavelengthM, thetaRad)
