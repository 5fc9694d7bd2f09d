# -- Source Levels, Sensitivities and Band Levels -- #

'''
Decibel quantities describing projectors, hydrophones and spectra.

All levels use base-10 logarithms. Projector source levels are
referred to 1 uPa at 1 m, where a 1 W omnidirectional projector
radiates 170.8 dB.

Cavitation limits follow Waite's straight-line fits through (5, 2) and
(50, 50): the threshold grows linearly with depth, and the radiated
power must stay below area * threshold.

References:
-----------
Waite, A.D. (2002) -- Sonar for Practising Engineers, 3rd ed., ch. 2-4
Urick, R.J. (1983) -- Principles of Underwater Sound, 3rd ed.
'''

from __future__ import annotations

import numpy as np

from oceanAcoustics import constants as c


######################################################################
# -- Source Level and Directivity -- #
######################################################################

def sourceLevel(intensity: float, referenceIntensity: float) -> float:
    '''Source level 10 log10(I1 / Ir) [dB].'''
    return 10.0 * np.log10(intensity / referenceIntensity)


def slOmnidirectionalProjector(powerW: float) -> float:
    '''Source level of an omnidirectional projector, 10 log10(P) + 170.8 [dB].'''
    return 10.0 * np.log10(powerW) + c.omniProjectorSourceLevelDb


def transmitDirectivityIndex(intensityDirectional: float, intensityOmnidirectional: float) -> float:
    '''Transmit directivity index 10 log10(Idir / Iomni) [dB].'''
    return 10.0 * np.log10(intensityDirectional / intensityOmnidirectional)


def slDirectionalProjector(powerW: float, directivityIndex: float) -> float:
    '''Source level of a directional projector [dB].'''
    return slOmnidirectionalProjector(powerW) + directivityIndex


######################################################################
# -- Cavitation -- #
######################################################################

def cavitationThresholdFromDepth(depthM: float) -> float:
    '''Cavitation threshold estimate 16/15 * d - 10/3 as a function of depth.'''
    return 16.0 / 15.0 * depthM - 10.0 / 3.0


def cavitationThresholdFromIntensity(intensity: float) -> float:
    '''Inverse of the depth fit: 15/16 * Ir + 25/8.'''
    return 15.0 / 16.0 * intensity + 25.0 / 8.0


def maximumRadiatedPowerToAvoidCavitation(radiatingSurfaceArea: float, cavitationThreshold: float) -> float:
    '''Largest radiated power below the cavitation threshold [W].'''
    return radiatingSurfaceArea * cavitationThreshold


def sourceLevelToAvoidCavitation(
    radiatingSurfaceArea: float, cavitationThreshold: float, directivityIndex: float,
) -> float:
    '''
    Highest source level that does not cavitate [dB].

    SL = 10 log10(A * Ic) + 170.8 + DIt, i.e. the directional source
    level of the maximum radiated power.

    Parameters:
    -----------
    radiatingSurfaceArea : float
        Radiating face area [m^2]
    cavitationThreshold : float
        Cavitation threshold intensity [W/m^2]
    directivityIndex : float
        Transmit directivity index [dB]

    Returns:
    --------
    float : Source level [dB re 1 uPa at 1 m]
    '''
    power = maximumRadiatedPowerToAvoidCavitation(radiatingSurfaceArea, cavitationThreshold)
    return slDirectionalProjector(power, directivityIndex)


######################################################################
# -- Transducer Sensitivities -- #
######################################################################

def projectorSensitivityVoltage(intensity: float, referenceIntensity: float, voltage: float) -> float:
    '''Projector transmitting response per volt, 10 log10(I1 / Ir / v^2) [dB].'''
    return 10.0 * np.log10(intensity / referenceIntensity / voltage ** 2)


def projectorSensitivityPower(intensity: float, referenceIntensity: float, powerW: float) -> float:
    '''Projector transmitting response per watt, 10 log10(I1 / Ir / P) [dB].'''
    return 10.0 * np.log10(intensity / referenceIntensity / powerW)


def hydrophoneSensitivity(pressureUpa: float, voltage: float) -> float:
    '''Hydrophone receiving sensitivity 20 log10(v) - 20 log10(p) [dB re 1 V/uPa].'''
    return 20.0 * np.log10(voltage) - 20.0 * np.log10(pressureUpa)


######################################################################
# -- Band Levels -- #
######################################################################

def bandLevelFlatSpectrum(spectrumLevel: float, bandwidthHz: float) -> float:
    '''Band level of a flat spectrum, SpL + 10 log10(delta f) [dB].'''
    return spectrumLevel + 10.0 * np.log10(bandwidthHz)


def bandLevelFromCompleteBand(spectrumLevel: float, lowerFrequencyHz: float, upperFrequencyHz: float) -> float:
    '''Band level between f1 and f2, I0 + 10 log10(f2 / f1) [dB].'''
    return spectrumLevel + 10.0 * np.log10(upperFrequencyHz / lowerFrequencyHz)
