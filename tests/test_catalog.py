# -- Formula Catalog Tests -- #

'''
Registration, argument binding, validation, diagnostics and logging
of the formula catalog.
'''

import inspect
import logging
import math

import numpy as np
import pytest

from oceanAcoustics.catalog import (
    CatalogError,
    CorrectiveTerm,
    FormulaCatalog,
    FormulaSpec,
    InvalidInputError,
    NoTableEntryError,
    Parameter,
    Rule,
    RuleSet,
    UnknownFormulaError,
    ValidityRange,
    evaluate,
    getFormula,
    listFormulas,
)
from oceanAcoustics.catalog.protocols import NO_RULE_MATCHED, OUT_OF_DECLARED_RANGE, ranges
from oceanAcoustics.soundSpeed import seaWater
from oceanAcoustics.utilsOA import StabilizerDose


EXPECTED_COUNTS = {
    'soundSpeed': 26,
    'absorption': 6,
    'depthPressure': 10,
    'sonar': 40,
    'utility': 1,
}


#--------------------------------------------------------------------#
# -- Registry Contents -- #
#--------------------------------------------------------------------#

class TestRegistry:
    '''What the bundled catalog holds.'''

    def testCategoryCounts(self, catalog):
        '''Every category holds the expected number of formulas.'''
        assert catalog.categories() == sorted(EXPECTED_COUNTS)
        for category, count in EXPECTED_COUNTS.items():
            assert len(catalog.listFormulas(category)) == count
        assert len(catalog) == sum(EXPECTED_COUNTS.values())

    def testParameterNamesMatchFunctionSignatures(self, catalog):
        '''Declared parameters are exactly the function arguments, in order.'''
        for spec in catalog:
            signature = inspect.signature(spec.function)
            assert tuple(signature.parameters) == spec.parameterNames, spec.name

    def testOptionalParametersHaveFunctionDefaults(self, catalog):
        '''Optional parameters mirror the defaults of their functions.'''
        for spec in catalog:
            signature = inspect.signature(spec.function)
            for parameter in spec.parameters:
                default = signature.parameters[parameter.name].default
                if parameter.optional:
                    assert default == parameter.default, (spec.name, parameter.name)
                else:
                    assert default is inspect.Parameter.empty, (spec.name, parameter.name)

    def testEveryFormulaHasCitationAndUnit(self, catalog):
        '''Citations and descriptions are never empty.'''
        for spec in catalog:
            assert spec.citation, spec.name
            assert spec.description, spec.name

    def testListIsSorted(self, catalog):
        names = catalog.listFormulas()
        assert names == sorted(names)
        assert 'SpeedOfSoundSeaWaterMackenzie' in catalog

    def testDuplicateRegistrationRejected(self, catalog):
        '''A name can only be registered once.'''
        spec = catalog.getFormula('SpeedOfSoundDryAir')
        with pytest.raises(ValueError):
            catalog.register(spec)

    def testUnknownFormula(self, catalog):
        '''Unknown names raise UnknownFormulaError, which is also a KeyError.'''
        with pytest.raises(UnknownFormulaError) as excinfo:
            catalog.getFormula('SpeedOfSoundOnMars')
        assert isinstance(excinfo.value, KeyError)
        assert isinstance(excinfo.value, CatalogError)
        assert str(excinfo.value) == 'Unknown formula: SpeedOfSoundOnMars'

    def testModuleLevelHelpers(self, defaultCatalog):
        '''Module functions delegate to the bundled catalog.'''
        assert listFormulas('utility') == ['fuelStabilizer']
        assert getFormula('SpeedOfSoundSeaWaterCoppens') is defaultCatalog.getFormula('SpeedOfSoundSeaWaterCoppens')
        assert evaluate('SpeedOfSoundSeaWaterCoppens', 0.0, 35.0, 25.0).value == pytest.approx(1534.33125)


#--------------------------------------------------------------------#
# -- Evaluation -- #
#--------------------------------------------------------------------#

class TestEvaluation:
    '''Binding, validation and result values.'''

    def testPositionalAndKeywordAgree(self, catalog):
        '''Positional calls follow the declared parameter order.'''
        positional = catalog.evaluate('SpeedOfSoundSeaWaterMackenzie', 1000.0, 35.0, 10.0)
        keyword = catalog.evaluate('SpeedOfSoundSeaWaterMackenzie', temperatureC=10.0, salinity=35.0, depthM=1000.0)
        assert positional.value == keyword.value == pytest.approx(1506.263761, abs=1e-5)

    def testCallReturnsBareValue(self, catalog):
        '''Calling a spec returns the value only.'''
        spec = catalog.getFormula('SpeedOfSoundSeaWaterCoppens')
        assert spec(0.0, 35.0, 25.0) == pytest.approx(1534.33125)

    def testIntegersAccepted(self, catalog):
        assert catalog.evaluate('SpeedOfSoundDryAir', 20).value == pytest.approx(343.294411, abs=1e-5)

    def testDeterministic(self, catalog):
        '''Equal inputs give equal outputs.'''
        first = catalog.evaluate('AbsorptionSoundSeaWaterFrancoisGarrison', 10.0, 10.0, 35.0, 0.0, 8.0)
        second = catalog.evaluate('AbsorptionSoundSeaWaterFrancoisGarrison', 10.0, 10.0, 35.0, 0.0, 8.0)
        assert first.value == second.value

    @pytest.mark.parametrize('value', ['35', None, True, float('nan'), float('inf'), -float('inf'), [1.0]])
    def testNonFiniteOrNonNumericRejected(self, catalog, value):
        '''Only finite real numbers are accepted for scalar parameters.'''
        with pytest.raises(InvalidInputError):
            catalog.evaluate('SpeedOfSoundSeaWaterCoppens', 0.0, value, 25.0)

    def testInvalidInputIsValueError(self, catalog):
        with pytest.raises(ValueError):
            catalog.evaluate('SpeedOfSoundDryAir', 'warm')

    def testArityErrors(self, catalog):
        '''Missing, surplus, unexpected and duplicated arguments are rejected.'''
        with pytest.raises(InvalidInputError):
            catalog.evaluate('SpeedOfSoundSeaWaterCoppens', 0.0, 35.0)
        with pytest.raises(InvalidInputError):
            catalog.evaluate('SpeedOfSoundSeaWaterCoppens', 0.0, 35.0, 25.0, 1.0)
        with pytest.raises(InvalidInputError):
            catalog.evaluate('SpeedOfSoundSeaWaterCoppens', 0.0, 35.0, 25.0, depthM=1.0)
        with pytest.raises(InvalidInputError):
            catalog.evaluate('SpeedOfSoundSeaWaterCoppens', 0.0, 35.0, depthKm=1.0)

    def testIeeeResultsPassThrough(self, catalog):
        '''Division by zero and log of zero give inf and -inf instead of raising.'''
        assert catalog.evaluate('SourceLevel', 0.0, 1.0).value == -np.inf
        assert catalog.evaluate('TargetStrengthSphere', 0.0).value == -np.inf
        assert catalog.evaluate('RangeResolutionCHIRP', 0.0, 1500.0).value == np.inf
        assert math.isnan(catalog.evaluate('CutoffFrequencyShallowWater', 1500.0, 1400.0, 100.0).value)

    def testTableLookupErrorsPropagate(self, catalog):
        '''Untabulated keys raise NoTableEntryError through the catalog.'''
        with pytest.raises(NoTableEntryError):
            catalog.evaluate('MolecularRelaxationAttenuationCoeficient', 15.0, 10.0)
        assert catalog.evaluate('MolecularRelaxationAttenuationCoeficient', 10.0, 10.0).value == 0.9565

    def testOptionalDefaults(self, catalog):
        '''fuelStabilizer uses the label dose when only fuel is given.'''
        dose = catalog.evaluate('fuelStabilizer', 1.0).value
        assert isinstance(dose, StabilizerDose)
        assert dose.milliliters == pytest.approx(1.25)
        assert dose.drops == pytest.approx(25.0)
        assert catalog.evaluate('fuelStabilizer', 20.0, mlPerDrop=0.1).value.drops == pytest.approx(250.0)


class TestArrayAndCorrectionParameters:
    '''Non-scalar parameter kinds.'''

    def testDetectionIndex(self, catalog):
        '''d = (mean(S) / std(N))^2 with the sample standard deviation.'''
        result = catalog.evaluate('DetectionIndex', [1.0, 1.0, 1.0, 1.0], [-1.0, 1.0, -1.0, 1.0])
        assert result.value == pytest.approx(0.75)

    def testDetectionIndexLengthMismatch(self, catalog):
        with pytest.raises(InvalidInputError):
            catalog.evaluate('DetectionIndex', [1.0, 2.0, 3.0], [1.0, 2.0])

    def testDetectionIndexSingleSampleIsNan(self, catalog):
        assert math.isnan(catalog.evaluate('DetectionIndex', [1.0], [0.5]).value)

    @pytest.mark.parametrize('value', [[], [[1.0, 2.0]], [1.0, float('nan')], 'abc', 3.0])
    def testDetectionIndexRejectsBadSequences(self, catalog, value):
        '''Empty, nested, non-finite, string and scalar inputs are rejected.'''
        with pytest.raises(InvalidInputError):
            catalog.evaluate('DetectionIndex', value, [1.0, 2.0])

    def testCorrectiveTermThroughCatalog(self, catalog):
        '''A constant correction shifts the computed depth.'''
        raw = catalog.evaluate('PressureToDepthLeroyParthiot', 10.0, 45.0).value
        corrected = catalog.evaluate(
            'PressureToDepthLeroyParthiot', 10.0, 45.0, correctiveTerm=CorrectiveTerm.constant(2.5)
        ).value
        assert corrected == pytest.approx(raw + 2.5)

    def testCorrectiveTermMustBeExplicit(self, catalog):
        '''Bare numbers are not accepted as corrective terms.'''
        with pytest.raises(InvalidInputError):
            catalog.evaluate('PressureToDepthLeroyParthiot', 10.0, 45.0, 2.5)

    @pytest.mark.parametrize('amount', [float('nan'), float('inf'), '1', True])
    def testConstantTermValidated(self, amount):
        with pytest.raises(InvalidInputError):
            CorrectiveTerm.constant(amount)


#--------------------------------------------------------------------#
# -- Diagnostics -- #
#--------------------------------------------------------------------#

class TestDiagnostics:
    '''Out-of-range and rule-selection diagnostics.'''

    def testOutOfRangeStillComputes(self, catalog):
        '''Leroy 1969 at 30 C is outside its window but still evaluated.'''
        result = catalog.evaluate('SpeedOfSoundSeaWaterLeroy69', 100.0, 35.0, 30.0)
        assert result.value == pytest.approx(seaWater.speedOfSoundSeaWaterLeroy69(100.0, 35.0, 30.0))
        assert not result.inRange
        assert len(result.diagnostics) == 1
        diagnostic = result.diagnostics[0]
        assert diagnostic.kind == OUT_OF_DECLARED_RANGE
        assert diagnostic.parameter == 'temperatureC'
        assert diagnostic.value == 30.0
        assert '[-2, 23]' in diagnostic.message

    def testMedwinWindow(self, catalog):
        '''Medwin is declared for 0-35 C, 0-45 ppt and 0-1000 m.'''
        inside = catalog.evaluate('SpeedOfSoundSeaWaterMedwin', 10.0, 100.0, 35.0)
        assert inside.inRange
        assert inside.value == pytest.approx(1491.61)

        outside = catalog.evaluate('SpeedOfSoundSeaWaterMedwin', 40.0, 2000.0, 35.0)
        assert outside.value == pytest.approx(seaWater.speedOfSoundSeaWaterMedwin(40.0, 2000.0, 35.0))
        assert [d.kind for d in outside.diagnostics] == [OUT_OF_DECLARED_RANGE] * 2
        assert {d.parameter for d in outside.diagnostics} == {'temperatureC', 'depthM'}

    def testRangeBoundsAreInclusive(self, catalog):
        '''Values exactly on the declared bounds are in range.'''
        assert catalog.evaluate('SpeedOfSoundSeaWaterLeroy69', 500.0, 40.0, 23.0).inRange
        assert catalog.evaluate('SpeedOfSoundSeaWaterLeroy69', 0.0, 30.0, -2.0).inRange

    def testSeveralParametersOutOfRange(self, catalog):
        '''One diagnostic per offending parameter.'''
        result = catalog.evaluate('SpeedOfSoundSeaWaterLeroy69', 600.0, 45.0, 30.0)
        assert {d.parameter for d in result.diagnostics} == {'depthM', 'salinity', 'temperatureC'}

    def testFormulasWithoutWindowNeverDiagnose(self, catalog):
        '''Lovett and Leroy 2008 declare no window.'''
        assert catalog.evaluate('SpeedOfSoundSeaWaterLovett1', 50.0, 60.0, 20000.0).inRange
        assert catalog.evaluate('SpeedOfSoundSeaWaterLeroyEtAl2008', 50.0, 60.0, 20000.0, 0.0).inRange

    def testSkoneFallbackDiagnostic(self, catalog):
        '''No Skone window matches, so the Mackenzie form is used and reported.'''
        result = catalog.evaluate('SpeedOfSoundSeaWaterSkone', 32.0, 2000.0, 35.0)
        assert result.value == pytest.approx(1582.425405, abs=1e-5)
        assert [d.kind for d in result.diagnostics] == [NO_RULE_MATCHED]
        assert 'mackenzie' in result.diagnostics[0].message

    def testSkoneMatchedRuleIsSilent(self, catalog):
        assert catalog.evaluate('SpeedOfSoundSeaWaterSkone', 10.0, 100.0, 35.0).inRange

    def testDiagnosticsLoggedAtWarning(self, caplog):
        '''A logging catalog emits one WARNING per diagnostic.'''
        from oceanAcoustics.catalog.definitions import buildDefaultCatalog

        loggingCatalog = buildDefaultCatalog(logDiagnostics=True)
        with caplog.at_level(logging.WARNING, logger='oceanAcoustics.catalog.registry'):
            loggingCatalog.evaluate('SpeedOfSoundSeaWaterLeroy69', 100.0, 35.0, 30.0)
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert 'SpeedOfSoundSeaWaterLeroy69' in warnings[0].getMessage()

    def testSilentCatalogDoesNotLog(self, catalog, caplog):
        with caplog.at_level(logging.WARNING, logger='oceanAcoustics.catalog.registry'):
            catalog.evaluate('SpeedOfSoundSeaWaterLeroy69', 100.0, 35.0, 30.0)
        assert not caplog.records


#--------------------------------------------------------------------#
# -- Spec Construction -- #
#--------------------------------------------------------------------#

class TestSpecConstruction:
    '''Checks made when specs and rule sets are built.'''

    def testValidityForUnknownParameter(self):
        with pytest.raises(ValueError):
            FormulaSpec(
                name='Broken', function=lambda x: x, parameters=(Parameter('x', 'm'),),
                resultUnit='m', citation='none', validity={'y': ValidityRange(0.0, 1.0)},
            )

    def testDuplicateParameterNames(self):
        with pytest.raises(ValueError):
            FormulaSpec(
                name='Broken', function=lambda x: x,
                parameters=(Parameter('x', 'm'), Parameter('x', 'm')),
                resultUnit='m', citation='none',
            )

    def testInvertedRange(self):
        with pytest.raises(ValueError):
            ValidityRange(2.0, 1.0)

    def testEmptyRuleSet(self):
        with pytest.raises(ValueError):
            RuleSet(())

    def testCustomCatalog(self):
        '''A catalog can be built from user specs.'''
        rules = RuleSet((
            Rule('small', ranges(x=(0.0, 1.0)), lambda x: 10.0 * x),
            Rule('large', ranges(x=(1.0, 100.0)), lambda x: x),
        ))
        spec = FormulaSpec(
            name='Piecewise', function=rules.evaluate, parameters=(Parameter('x', ''),),
            resultUnit='', citation='test', description='piecewise', rules=rules,
        )
        custom = FormulaCatalog([spec], logDiagnostics=False)
        assert custom.evaluate('Piecewise', 0.5).value == pytest.approx(5.0)
        assert custom.evaluate('Piecewise', 1.0).value == pytest.approx(10.0)
        result = custom.evaluate('Piecewise', 200.0)
        assert result.value == pytest.approx(200.0)
        assert result.diagnostics[0].kind == NO_RULE_MATCHED

    def testDescribe(self, catalog):
        '''describe() lists parameters with units and windows.'''
        info = catalog.getFormula('SpeedOfSoundSeaWaterMackenzie').describe()
        assert info['category'] == 'soundSpeed'
        assert info['resultUnit'] == 'm/s'
        assert [p['name'] for p in info['parameters']] == ['depthM', 'salinity', 'temperatureC']
        assert info['parameters'][2]['validity'] == [-2, 30]
        assert info['ruleBased'] is False
