# -- Plane Waves, Resolution and Cutoff Frequencies -- #

'''
Basic plane-wave relations and sonar geometry limits.

Key equations:
- Speed of sound: c = lambda * f
- Plane-wave pressure: p = rho * c * u
- Plane-wave intensity: I = p^2 / (rho * c)
- Range resolution: tau * c / 2 (monotonic pulse), c / (2 B) (CHIRP)
- Cutoff frequency of a water channel: c / (0.008 * D^1.5)
- Lowest mode cutoff in a shallow-water waveguide over a fast bottom:
  f0 = c_w / (4 D sqrt(1 - (c_w / c_b)^2))

References:
-----------
Waite, A.D. (2002) -- Sonar for Practising Engineers, 3rd ed.
Jensen, F.B. et al. (2011) -- Computational Ocean Acoustics, 2nd ed.
'''

from __future__ import annotations

import numpy as np


def speedOfSound(wavelengthM: float, frequencyHz: float) -> float:
    '''Speed of sound from wavelength and frequency [m/s].'''
    return wavelengthM * frequencyHz


def planeWavePressure(density: float, soundSpeed: float, particleVelocity: float) -> float:
    '''
    Acoustic pressure of a plane wave [Pa].

    Parameters:
    -----------
    density : float
        Medium density [kg/m^3]
    soundSpeed : float
        Speed of sound [m/s]
    particleVelocity : float
        Particle velocity amplitude [m/s]

    Returns:
    --------
    float : Acoustic pressure [Pa]
    '''
    return density * soundSpeed * particleVelocity


def planeWaveIntensity(pressurePa: float, density: float, soundSpeed: float) -> float:
    '''
    Intensity of a plane wave [W/m^2].

    Parameters:
    -----------
    pressurePa : float
        Acoustic pressure [Pa]
    density : float
        Medium density [kg/m^3]
    soundSpeed : float
        Speed of sound [m/s]

    Returns:
    --------
    float : Intensity [W/m^2]
    '''
    return pressurePa ** 2 / (density * soundSpeed)


def rangeResolutionMonotonic(pulseDurationS: float, soundSpeed: float) -> float:
    '''Range resolution of a single-frequency pulse [m].'''
    return pulseDurationS * soundSpeed / 2.0


def rangeResolutionCHIRP(bandwidthHz: float, soundSpeed: float) -> float:
    '''Range resolution of a frequency-modulated (CHIRP) pulse [m].'''
    return soundSpeed / bandwidthHz / 2.0


def cutoffFrequencyWater(soundSpeed: float, depthM: float) -> float:
    '''Cutoff frequency of a water channel of depth D [Hz].'''
    return soundSpeed / (0.008 * depthM ** 1.5)


def cutoffFrequencyShallowWater(soundSpeedWater: float, soundSpeedBottom: float, depthM: float) -> float:
    '''
    Lowest-mode cutoff frequency of a shallow-water waveguide [Hz].

    Below this frequency no mode propagates without bottom loss.
    Requires a bottom faster than the water; otherwise the result is NaN.

    Parameters:
    -----------
    soundSpeedWater : float
        Speed of sound in the water column [m/s]
    soundSpeedBottom : float
        Compressional speed in the bottom [m/s]
    depthM : float
        Water depth [m]

    Returns:
    --------
    float : Cutoff frequency [Hz]
    '''
    ratio = soundSpeedWater / soundSpeedBottom
    return soundSpeedWater / (4.0 * depthM * np.sqrt(1.0 - ratio ** 2))
