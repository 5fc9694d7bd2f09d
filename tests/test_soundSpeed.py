# -- Speed of Sound Tests -- #

'''
Published check values and qualitative behaviour of the air,
fresh-water and sea-water speed-of-sound equations.
'''

import numpy as np
import pytest

from oceanAcoustics.soundSpeed import air, freshWater, seaWater


class TestAir:
    '''Speed of sound in dry and humid air.'''

    def testDryAirAt20C(self):
        '''Dry air at 20 C is 20.05 * sqrt(293.16).'''
        assert air.speedOfSoundDryAir(20.0) == pytest.approx(343.294411, abs=1e-5)

    def testZeroHumidityMatchesDryAir(self):
        '''Both humid-air forms reduce to dry air at 0 % humidity.'''
        dry = air.speedOfSoundDryAir(15.0)
        assert air.speedOfSoundHumidAir(15.0, 0.0) == pytest.approx(dry)
        assert air.speedOfSoundAir(15.0, 0.0, 101.325) == pytest.approx(dry)

    def testHumidityRaisesSpeed(self):
        '''Moist air is lighter, so sound travels faster.'''
        assert air.speedOfSoundHumidAir(20.0, 80.0) > air.speedOfSoundDryAir(20.0)
        assert air.speedOfSoundAir(20.0, 80.0, 101.325) > air.speedOfSoundDryAir(20.0)

    def testSaturationVapourPressureAt20C(self):
        '''Goff-Gratch gives about 2.34 kPa at 20 C.'''
        assert air.saturationVapourPressure(20.0) == pytest.approx(2.3374, rel=1e-3)

    def testSaturationVapourPressureAtSteamPoint(self):
        '''At 100 C the saturation pressure is one atmosphere.'''
        assert air.saturationVapourPressure(99.99) == pytest.approx(101.325, rel=5e-3)


class TestFreshWater:
    '''Pure and fresh water equations.'''

    @pytest.mark.parametrize('function', [
        freshWater.speedOfSoundPureWaterBilaniukWong112,
        freshWater.speedOfSoundPureWaterBilaniukWong36,
        freshWater.speedOfSoundPureWaterBilaniukWong148,
        freshWater.speedOfSoundPureWaterMarczak,
        freshWater.speedOfSoundFreshWaterGrossoMader,
    ])
    def testFifthOrderFitsAgreeAt20C(self, function):
        '''The fifth-order pure-water fits agree to within 0.5 m/s at 20 C.'''
        assert function(20.0) == pytest.approx(1482.3, abs=0.5)

    def testLubbersFormsAgree(self):
        '''Both Lubbers & Graaff simplified equations agree within 0.5 m/s at 25 C.'''
        a = freshWater.speedOfSoundPureWaterLubbersandGraaffSEa(25.0)
        b = freshWater.speedOfSoundPureWaterLubbersandGraaffSEb(25.0)
        assert a == pytest.approx(b, abs=0.5)

    def testPureWaterMaximumNear74C(self):
        '''Sound speed in pure water peaks near 74 C.'''
        temperatures = np.linspace(50.0, 95.0, 451)
        speeds = [freshWater.speedOfSoundPureWaterBilaniukWong148(t) for t in temperatures]
        assert temperatures[int(np.argmax(speeds))] == pytest.approx(74.0, abs=1.5)

    def testPressureRaisesSpeed(self):
        '''Kinsler and Belogol'skii forms increase with pressure.'''
        assert freshWater.speedOfSoundKinslerEtal(100.0, 10.0) > freshWater.speedOfSoundKinslerEtal(0.0, 10.0)
        low = freshWater.speedOfSoundPureWaterBelogolskiiSekoyanEtal(10.0, 0.101325)
        high = freshWater.speedOfSoundPureWaterBelogolskiiSekoyanEtal(10.0, 40.0)
        assert high > low

    def testBelogolskiiAtAtmosphere(self):
        '''At one atmosphere Belogol'skii matches the pure-water fits.'''
        value = freshWater.speedOfSoundPureWaterBelogolskiiSekoyanEtal(20.0, 0.101325)
        assert value == pytest.approx(1482.3, abs=0.5)


class TestSeaWater:
    '''Sea-water equations against hand-evaluated and published values.'''

    def testLeroy69(self):
        '''Leroy 1969 at 100 m, 35 ppt, 10 C.'''
        value = seaWater.speedOfSoundSeaWaterLeroy69(100.0, 35.0, 10.0)
        assert value == pytest.approx(1492.9 - 2.56 + 100.0 / 61.0)

    def testMackenzie(self):
        '''Mackenzie nine-term equation at two reference points.'''
        assert seaWater.speedOfSoundSeaWaterMackenzie(1000.0, 35.0, 10.0) == pytest.approx(1506.263761, abs=1e-5)
        assert seaWater.speedOfSoundSeaWaterMackenzie(0.0, 35.0, 25.0) == pytest.approx(1534.294375, abs=1e-5)

    def testCoppensUsesKilometres(self):
        '''Coppens at the surface, 35 ppt, 25 C.'''
        value = seaWater.speedOfSoundSeaWaterCoppens(0.0, 35.0, 25.0)
        assert value == pytest.approx(1449.05 + 45.7 * 2.5 - 5.21 * 6.25 + 0.23 * 15.625)

    def testMedwin(self):
        '''Medwin simple equation at 10 C, 100 m, 35 ppt.'''
        assert seaWater.speedOfSoundSeaWaterMedwin(10.0, 100.0, 35.0) == pytest.approx(1491.61)

    def testLeroyEtAl2008(self):
        '''Leroy et al. 2008 at 10 C, 35 ppt, 1000 m, 45 deg.'''
        value = seaWater.speedOfSoundSeaWaterLeroyEtAl2008(10.0, 35.0, 1000.0, 45.0)
        assert value == pytest.approx(1506.1882, abs=1e-3)

    def testChenAndMilleroUnescoCheckValue(self):
        '''UNESCO check value 1731.995 m/s at 40 ppt, 40 C, 1000 bar.'''
        value = seaWater.speedOfSoundSeaWaterChenAndMillero(40.0, 40.0, 1000.0)
        assert value == pytest.approx(1731.995, abs=0.05)

    def testDelGrossoSurface(self):
        '''Del Grosso at 0 C, 35 ppt, zero pressure reduces to its salinity terms.'''
        value = seaWater.speedOfSoundSeaWaterDelGrosso(35.0, 0.0, 0.0)
        assert value == pytest.approx(1449.0834, abs=1e-4)

    def testWilsonRoundsToCentimetres(self):
        '''Wilson keeps its published 0.01 m/s rounding.'''
        value = seaWater.speedOfSoundSeaWaterWilson(12.345, 34.2, 10.0)
        assert value * 100.0 == pytest.approx(round(value * 100.0), abs=1e-6)
        assert seaWater.speedOfSoundSeaWaterWilson(0.0, 35.0, 0.0) == pytest.approx(1449.14)

    def testFryeAndPughNearSurface(self):
        '''Frye & Pugh at 10 C, 35 ppt, one atmosphere.'''
        value = seaWater.speedOfSoundSeaWaterFryeAndPugh(10.0, 35.0, 1.033)
        assert value == pytest.approx(1490.2395, abs=1e-3)

    def testLovettCheckValues(self):
        '''All three Lovett equations reproduce their check values.'''
        assert seaWater.speedOfSoundSeaWaterLovett1(2.0, 34.7, 6000.0) == pytest.approx(1559.462, abs=1e-3)
        assert seaWater.speedOfSoundSeaWaterLovett2(2.0, 34.7, 6000.0) == pytest.approx(1559.393, abs=1e-3)
        assert seaWater.speedOfSoundSeaWaterLovett3(2.0, 34.7, 6000.0) == pytest.approx(1559.499, abs=1e-3)

    def testLovettMergedFormsAgreeNearSurface(self):
        '''The three Lovett forms agree within 0.5 m/s in surface water.'''
        values = [
            function(10.0, 35.0, 0.0)
            for function in (
                seaWater.speedOfSoundSeaWaterLovett1,
                seaWater.speedOfSoundSeaWaterLovett2,
                seaWater.speedOfSoundSeaWaterLovett3,
            )
        ]
        assert max(values) - min(values) < 0.5

    @pytest.mark.parametrize('function, args', [
        (seaWater.speedOfSoundSeaWaterLeroy69, (100.0, 35.0, 10.0)),
        (seaWater.speedOfSoundSeaWaterMackenzie, (100.0, 35.0, 10.0)),
        (seaWater.speedOfSoundSeaWaterCoppens, (0.1, 35.0, 10.0)),
        (seaWater.speedOfSoundSeaWaterMedwin, (10.0, 100.0, 35.0)),
        (seaWater.speedOfSoundSeaWaterLeroyEtAl2008, (10.0, 35.0, 100.0, 45.0)),
    ])
    def testDepthEquationsAgree(self, function, args):
        '''Depth-based equations agree within 1 m/s at 10 C, 35 ppt, 100 m.'''
        assert function(*args) == pytest.approx(1491.7, abs=1.0)


class TestSkone:
    '''Range-selected Skone equation.'''

    def testLeroyFormSelectedFirst(self):
        '''Inputs inside the Leroy window use the Leroy form.'''
        rule, matched = seaWater.SKONE_RULES.select(temperatureC=10.0, depthM=100.0, salinity=35.0)
        assert (rule.name, matched) == ('leroy', True)
        assert seaWater.speedOfSoundSeaWaterSkone(10.0, 100.0, 35.0) == pytest.approx(1491.94)

    def testMedwinFormAboveLeroyTemperature(self):
        '''At 30 C the Leroy window no longer applies and Medwin is used.'''
        rule, matched = seaWater.SKONE_RULES.select(temperatureC=30.0, depthM=100.0, salinity=35.0)
        assert (rule.name, matched) == ('medwin', True)
        assert seaWater.speedOfSoundSeaWaterSkone(30.0, 100.0, 35.0) == pytest.approx(1547.13)

    def testMackenzieFormForDeepWater(self):
        '''Below 1000 m only the Mackenzie window applies.'''
        rule, matched = seaWater.SKONE_RULES.select(temperatureC=5.0, depthM=3000.0, salinity=35.0)
        assert (rule.name, matched) == ('mackenzie', True)
        assert seaWater.speedOfSoundSeaWaterSkone(5.0, 3000.0, 35.0) == pytest.approx(
            seaWater.speedOfSoundSeaWaterMackenzie(3000.0, 35.0, 5.0)
        )

    def testFallbackWhenNoWindowMatches(self):
        '''Outside every window the last rule is evaluated and reported unmatched.'''
        rule, matched = seaWater.SKONE_RULES.select(temperatureC=32.0, depthM=2000.0, salinity=35.0)
        assert (rule.name, matched) == ('mackenzie', False)
        assert seaWater.speedOfSoundSeaWaterSkone(32.0, 2000.0, 35.0) == pytest.approx(1582.425405, abs=1e-5)
