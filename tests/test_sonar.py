# -- Sonar Tests -- #

'''
Plane waves, levels, spreading loss, target strength and the sonar
equations.
'''

import numpy as np
import pytest

from oceanAcoustics.catalog.exceptions import InvalidInputError
from oceanAcoustics.sonar import levels, propagation, sonarEquation, targetStrength, waves


class TestWaves:
    '''Plane-wave relations and resolution limits.'''

    def testSpeedOfSound(self):
        assert waves.speedOfSound(1.5, 1000.0) == pytest.approx(1500.0)

    def testPlaneWave(self):
        '''p = rho c u and I = p^2 / (rho c).'''
        pressure = waves.planeWavePressure(1000.0, 1500.0, 1e-3)
        assert pressure == pytest.approx(1500.0)
        assert waves.planeWaveIntensity(pressure, 1000.0, 1500.0) == pytest.approx(1.5)

    def testRangeResolution(self):
        '''A 1 ms pulse and a 1 kHz CHIRP both resolve 0.75 m.'''
        assert waves.rangeResolutionMonotonic(1e-3, 1500.0) == pytest.approx(0.75)
        assert waves.rangeResolutionCHIRP(1000.0, 1500.0) == pytest.approx(0.75)

    def testCutoffFrequencies(self):
        assert waves.cutoffFrequencyWater(1500.0, 100.0) == pytest.approx(187.5)
        expected = 1500.0 / (4.0 * 100.0 * np.sqrt(1.0 - (1500.0 / 1800.0) ** 2))
        assert waves.cutoffFrequencyShallowWater(1500.0, 1800.0, 100.0) == pytest.approx(expected)


class TestLevels:
    '''Source levels, cavitation and sensitivities.'''

    def testSourceLevel(self):
        assert levels.sourceLevel(100.0, 1.0) == pytest.approx(20.0)

    def testProjectors(self):
        '''1 W omnidirectional is 170.8 dB; directivity adds on top.'''
        assert levels.slOmnidirectionalProjector(1.0) == pytest.approx(170.8)
        assert levels.slOmnidirectionalProjector(10.0) == pytest.approx(180.8)
        assert levels.slDirectionalProjector(1.0, 15.0) == pytest.approx(185.8)
        assert levels.transmitDirectivityIndex(10.0, 1.0) == pytest.approx(10.0)

    def testCavitationFitsAreInverse(self):
        '''The depth and intensity fits invert one another.'''
        threshold = levels.cavitationThresholdFromDepth(50.0)
        assert levels.cavitationThresholdFromIntensity(threshold) == pytest.approx(50.0)
        assert levels.cavitationThresholdFromDepth(5.0) == pytest.approx(2.0)

    def testCavitationLimitedSourceLevel(self):
        '''SL = 10 log10(A Ic) + 170.8 + DIt.'''
        assert levels.maximumRadiatedPowerToAvoidCavitation(0.1, 1e4) == pytest.approx(1e3)
        assert levels.sourceLevelToAvoidCavitation(0.1, 1e4, 20.0) == pytest.approx(30.0 + 170.8 + 20.0)

    def testSensitivities(self):
        assert levels.projectorSensitivityVoltage(100.0, 1.0, 10.0) == pytest.approx(0.0)
        assert levels.projectorSensitivityPower(100.0, 1.0, 10.0) == pytest.approx(10.0)
        assert levels.hydrophoneSensitivity(1e6, 1e-3) == pytest.approx(-180.0)

    def testBandLevels(self):
        assert levels.bandLevelFlatSpectrum(50.0, 1000.0) == pytest.approx(80.0)
        assert levels.bandLevelFromCompleteBand(50.0, 100.0, 1000.0) == pytest.approx(60.0)


class TestPropagation:
    '''Spreading laws and absorption.'''

    def testSphericalAndCylindrical(self):
        assert propagation.plSphericalSpreadingLaw(1000.0) == pytest.approx(60.0)
        assert propagation.plCylindricalSpreadingLaw(1000.0) == pytest.approx(30.0)
        assert propagation.propagationLoss(1.0, 1e-6) == pytest.approx(60.0)

    def testPowerThroughSurfaces(self):
        assert propagation.powerSphericalSpreadingLaw(2.0, 1.0) == pytest.approx(16.0 * np.pi)
        assert propagation.powerCylindricalSpreadingLaw(2.0, 3.0, 1.0) == pytest.approx(12.0 * np.pi)

    def testAbsorptionAddsLinearly(self):
        '''1 dB/km over 10 km adds 10 dB to 80 dB of spreading.'''
        assert propagation.plSphericalSpreadingAndAbsorption(10000.0, 1.0) == pytest.approx(90.0)


class TestTargetStrength:
    '''Geometric targets.'''

    def testRatios(self):
        assert targetStrength.targetStrength(1.0, 100.0) == pytest.approx(-20.0)
        assert targetStrength.peakTargetStrength(1.0, 10.0) == pytest.approx(-20.0)

    def testSphereOfRadiusTwoIsZeroDb(self):
        assert targetStrength.targetStrengthSphere(2.0) == pytest.approx(0.0)
        assert targetStrength.targetStrengthSphere(30.0) == pytest.approx(10.0 * np.log10(900.0 / 4.0))
        assert targetStrength.targetStrengthConvexSurface(2.0, 2.0) == pytest.approx(0.0)

    def testSphereGrowsWithRadius(self):
        assert targetStrength.targetStrengthSphere(900.0) == pytest.approx(10.0 * np.log10(900.0 ** 2 / 4.0))
        radii = np.array([0.5, 1.0, 5.0, 50.0, 900.0])
        assert np.all(np.diff(targetStrength.targetStrengthSphere(radii)) > 0.0)

    def testPlates(self):
        '''A 1 m^2 plate at 0.1 m wavelength is 20 dB.'''
        assert targetStrength.targetStrengthPlateAnyShape(1.0, 0.1) == pytest.approx(20.0)
        assert targetStrength.targetStrengthRectangularPlateNormal(1.0, 1.0, 0.1) == pytest.approx(20.0)
        circular = targetStrength.targetStrengthCircularPlateNormal(1.0, 0.1)
        assert circular == pytest.approx(targetStrength.targetStrengthPlateAnyShape(np.pi, 0.1))

    def testOffNormalReducesToNormalAtZero(self):
        '''At theta = 0 the beam pattern contributes nothing.'''
        plate = targetStrength.targetStrengthRectangularPlateThetaToNormal(1.0, 1.0, 0.1, 0.0)
        assert plate == pytest.approx(20.0)
        cylinder = targetStrength.targetStrengthCylinderThetaToNormal(2.0, 1.0, 1.0, 0.0)
        assert cylinder == pytest.approx(targetStrength.targetStrengthCylinderNormal(2.0, 1.0, 1.0))

    def testOffNormalIsLower(self):
        '''Tilting away from the normal lowers the echo.'''
        normal = targetStrength.targetStrengthRectangularPlateNormal(1.0, 1.0, 0.1)
        tilted = targetStrength.targetStrengthRectangularPlateThetaToNormal(1.0, 1.0, 0.1, 0.01)
        assert tilted < normal

    def testSidelobeAnglesAreFinite(self):
        '''At 10 deg a 1 m plate at 0.1 m wavelength sits in a sidelobe where sin(x)/x < 0.'''
        theta = np.radians(10.0)
        plate = targetStrength.targetStrengthRectangularPlateThetaToNormal(1.0, 1.0, 0.1, theta)
        assert plate == pytest.approx(-0.921342, abs=1e-5)
        cylinder = targetStrength.targetStrengthCylinderThetaToNormal(0.5, 1.0, 0.1, theta)
        assert cylinder == pytest.approx(-16.941942, abs=1e-5)

    def testSidelobeThroughCatalog(self, defaultCatalog):
        thetas = np.radians([5.0, 10.0, 20.0, 40.0])
        for theta in thetas:
            result = defaultCatalog.evaluate('TargetStrengthRectangularPlateThetaToNormal', 1.0, 1.0, 0.1, theta)
            assert np.isfinite(result.value)
            assert result.value < 20.0

    def testCylinderNormal(self):
        assert targetStrength.targetStrengthCylinderNormal(2.0, 1.0, 1.0) == pytest.approx(0.0)


class TestSonarEquations:
    '''Decibel bookkeeping and the detection index.'''

    def testEchoLevel(self):
        assert sonarEquation.sonarEquation(220.0, 60.0, 10.0) == pytest.approx(110.0)

    def testBasicForms(self):
        assert sonarEquation.basicSonarEquation(100.0, 60.0, 10.0) == pytest.approx(50.0)
        assert sonarEquation.basicPassiveSonarEquation(140.0, 60.0, 50.0) == pytest.approx(30.0)
        assert sonarEquation.basicActiveSonarEquation(220.0, 10.0, 60.0, 70.0, 10.0) == pytest.approx(30.0)

    def testDetectionIndex(self):
        '''Sample standard deviation in the denominator.'''
        signal = np.array([2.0, 2.0, 2.0])
        noise = np.array([0.0, 1.0, 2.0])
        assert sonarEquation.detectionIndex(signal, noise) == pytest.approx(4.0)

    def testDetectionIndexLengthMismatch(self):
        with pytest.raises(InvalidInputError):
            sonarEquation.detectionIndex([1.0, 2.0], [1.0])
