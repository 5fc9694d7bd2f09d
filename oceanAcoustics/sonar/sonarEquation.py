# -- Sonar Equations and Detection Index -- #

'''
Sonar equations in decibel form and the detection index.

- Echo level: SL - 2 PL + TS
- Basic sonar equation: S - N + DT
- Passive signal excess: (SL - PL) - N
- Active signal excess: (SL + TS - 2 PL) - N - DT
- Detection index from sampled signal-plus-noise and noise:
  d = ((mean(S + N) - mean(N)) / std(N))^2, sample standard deviation

References:
-----------
Waite, A.D. (2002) -- Sonar for Practising Engineers, 3rd ed., ch. 1 and 8
Urick, R.J. (1983) -- Principles of Underwater Sound, 3rd ed., ch. 12
'''

from __future__ import annotations

import numpy as np

from oceanAcoustics.catalog.exceptions import InvalidInputError


def sonarEquation(sourceLevel: float, propagationLoss: float, targetStrength: float) -> float:
    '''Echo level SL - 2 PL + TS [dB].'''
    return sourceLevel - 2.0 * propagationLoss + targetStrength


def basicSonarEquation(signalLevel: float, noiseLevel: float, detectionThreshold: float) -> float:
    '''Basic sonar equation S - N + DT [dB].'''
    return signalLevel - noiseLevel + detectionThreshold


def basicPassiveSonarEquation(sourceLevel: float, propagationLoss: float, noiseLevel: float) -> float:
    '''Passive signal-to-noise (SL - PL) - N [dB].'''
    return (sourceLevel - propagationLoss) - noiseLevel


def basicActiveSonarEquation(
    sourceLevel: float,
    targetStrength: float,
    propagationLoss: float,
    noiseLevel: float,
    detectionThreshold: float,
) -> float:
    '''
    Active signal excess (SL + TS - 2 PL) - N - DT [dB].

    Parameters:
    -----------
    sourceLevel : float
        Source level [dB]
    targetStrength : float
        Target strength [dB]
    propagationLoss : float
        One-way propagation loss [dB]
    noiseLevel : float
        Noise level [dB]
    detectionThreshold : float
        Detection threshold [dB]

    Returns:
    --------
    float : Signal excess [dB]
    '''
    return (sourceLevel + targetStrength - 2.0 * propagationLoss) - noiseLevel - detectionThreshold


def detectionIndex(signal: np.ndarray, noise: np.ndarray) -> float:
    '''
    Detection index of a sampled signal in noise.

    Signal and noise are paired samples (element-wise sums form the
    signal-plus-noise record), so they must have the same length.
    Fewer than two noise samples give NaN.

    Parameters:
    -----------
    signal : np.ndarray
        Signal samples
    noise : np.ndarray
        Noise samples

    Returns:
    --------
    float : Detection index d (dimensionless)
    '''
    signal = np.asarray(signal, dtype=float)
    noise = np.asarray(noise, dtype=float)
    if signal.shape != noise.shape:
        raise InvalidInputError(
            f'Signal and noise must have the same length, got {signal.size} and {noise.size}'
        )
    if noise.size < 2:
        return np.nan
    return float(((np.mean(signal + noise) - np.mean(noise)) / np.std(noise, ddof=1)) ** 2)
