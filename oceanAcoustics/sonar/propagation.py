# -- Propagation Loss and Spreading Laws -- #

'''
Propagation loss between a source and a receiver.

Key equations:
- PL = 10 log10(I0 / Ir)
- Spherical spreading: P = 4 pi r^2 I, PL = 20 log10(r)
- Cylindrical spreading between planes h apart: P = 2 pi r h I,
  PL = 10 log10(r)
- Spherical spreading plus absorption: PL = 20 log10(r) + alpha * r / 1000
  with alpha in dB/km and r in metres

References:
-----------
Waite, A.D. (2002) -- Sonar for Practising Engineers, 3rd ed., ch. 5
'''

from __future__ import annotations

import numpy as np


def propagationLoss(sourceIntensity: float, receivedIntensity: float) -> float:
    '''Propagation loss 10 log10(I0 / Ir) [dB].'''
    return 10.0 * np.log10(sourceIntensity / receivedIntensity)


def powerSphericalSpreadingLaw(rangeM: float, intensity: float) -> float:
    '''Power crossing a sphere of radius r, 4 pi r^2 I [W].'''
    return 4.0 * np.pi * rangeM ** 2 * intensity


def plSphericalSpreadingLaw(rangeM: float) -> float:
    '''Spherical spreading loss 20 log10(r) [dB].'''
    return 20.0 * np.log10(rangeM)


def powerCylindricalSpreadingLaw(rangeM: float, layerThicknessM: float, intensity: float) -> float:
    '''Power crossing a cylinder of radius r between planes h apart, 2 pi r h I [W].'''
    return 2.0 * np.pi * rangeM * layerThicknessM * intensity


def plCylindricalSpreadingLaw(rangeM: float) -> float:
    '''Cylindrical spreading loss 10 log10(r) [dB].'''
    return 10.0 * np.log10(rangeM)


def plSphericalSpreadingAndAbsorption(rangeM: float, absorptionDbPerKm: float) -> float:
    '''
    Spherical spreading plus absorption loss [dB].

    Parameters:
    -----------
    rangeM : float
        Range [m]
    absorptionDbPerKm : float
        Absorption coefficient [dB/km]

    Returns:
    --------
    float : Propagation loss [dB]
    '''
    return plSphericalSpreadingLaw(rangeM) + absorptionDbPerKm * rangeM * 1e-3
