# -- Formula Catalog Protocols -- #

'''
Protocols and immutable record types for the formula catalog.

A FormulaSpec wraps one published equation: its ordered parameters
with units, the validity window its authors claimed, the citation,
and the pure function that evaluates it. Evaluation never fails on
an out-of-window input; instead the FormulaResult carries Diagnostic
records next to the computed value.

Two small policy types live here as well:
- RuleSet: ordered first-match selection between candidate equations
  (used by Skone's sea-water sound speed)
- CorrectiveTerm: optional additive correction applied to a raw result
  (used by the Leroy & Parthiot depth/pressure conversions)
'''

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Protocol

import numpy as np

from oceanAcoustics.catalog.exceptions import InvalidInputError


# Parameter kinds
SCALAR = 'scalar'
ARRAY = 'array'
CORRECTION = 'correction'

# Diagnostic kinds
OUT_OF_DECLARED_RANGE = 'outOfDeclaredRange'
NO_RULE_MATCHED = 'noRuleMatched'


######################################################################
# -- Callable Protocols -- #
######################################################################

class FormulaFunction(Protocol):
    '''Protocol for the pure function behind a catalog entry.'''

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        ...


class CorrectionFunction(Protocol):
    '''Protocol for a result-dependent correction supplied by the caller.'''

    def __call__(self, raw: float) -> float:
        ...


######################################################################
# -- Parameters and Validity -- #
######################################################################

@dataclass(frozen=True)
class Parameter:
    '''
    One named input of a formula.

    Parameters:
    -----------
    name : str
        Keyword name, identical to the Python function argument
    unit : str
        Physical unit the published equation expects
    description : str
        Semantic role (e.g. 'water temperature')
    kind : str
        'scalar', 'array' or 'correction'
    optional : bool
        True when the parameter may be omitted
    default : Any
        Value used when an optional parameter is omitted
    '''

    name: str
    unit: str
    description: str = ''
    kind: str = SCALAR
    optional: bool = False
    default: Any = None


@dataclass(frozen=True)
class ValidityRange:
    '''Inclusive validity interval [minimum, maximum] of one parameter.'''

    minimum: float
    maximum: float

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(
                f'Validity range minimum {self.minimum} exceeds maximum {self.maximum}'
            )

    def contains(self, value: float) -> bool:
        return bool(self.minimum <= value <= self.maximum)


def ranges(**bounds: tuple[float, float]) -> dict[str, ValidityRange]:
    '''Build a parameter -> ValidityRange mapping from (min, max) pairs.'''
    return {name: ValidityRange(lo, hi) for name, (lo, hi) in bounds.items()}


######################################################################
# -- Results -- #
######################################################################

@dataclass(frozen=True)
class Diagnostic:
    '''
    Non-fatal finding attached to a formula result.

    Parameters:
    -----------
    kind : str
        'outOfDeclaredRange' or 'noRuleMatched'
    formula : str
        Name of the formula that produced the diagnostic
    message : str
        Human-readable description
    parameter : str | None
        Offending parameter, when the diagnostic concerns one input
    value : float | None
        Offending input value
    '''

    kind: str
    formula: str
    message: str
    parameter: str | None = None
    value: float | None = None


@dataclass(frozen=True)
class FormulaResult:
    '''
    Value of one formula evaluation plus its diagnostics.

    Parameters:
    -----------
    formula : str
        Catalog name of the evaluated formula
    value : Any
        Computed result (float, numpy array or labeled tuple)
    diagnostics : tuple[Diagnostic, ...]
        Out-of-range and rule-selection findings (empty when in range)
    '''

    formula: str
    value: Any
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def inRange(self) -> bool:
        return not self.diagnostics


######################################################################
# -- Ordered Rule Selection -- #
######################################################################

@dataclass(frozen=True, eq=False)
class Rule:
    '''One candidate equation guarded by inclusive parameter ranges.'''

    name: str
    ranges: Mapping[str, ValidityRange]
    equation: FormulaFunction

    def __post_init__(self) -> None:
        object.__setattr__(self, 'ranges', MappingProxyType(dict(self.ranges)))

    def matches(self, values: Mapping[str, float]) -> bool:
        return all(rng.contains(values[name]) for name, rng in self.ranges.items())


@dataclass(frozen=True, eq=False)
class RuleSet:
    '''
    Ordered first-match rule evaluator.

    The first rule whose ranges all contain the inputs is selected.
    When none match, the last rule is the fallback and select()
    reports matched=False so the caller can surface a diagnostic.
    '''

    rules: tuple[Rule, ...]

    def __post_init__(self) -> None:
        if not self.rules:
            raise ValueError('RuleSet needs at least one rule')
        object.__setattr__(self, 'rules', tuple(self.rules))

    @property
    def fallback(self) -> Rule:
        return self.rules[-1]

    @property
    def parameterNames(self) -> tuple[str, ...]:
        names: list[str] = []
        for rule in self.rules:
            for name in rule.ranges:
                if name not in names:
                    names.append(name)
        return tuple(names)

    def select(self, **values: float) -> tuple[Rule, bool]:
        '''
        Pick the rule for the given inputs.

        Returns:
        --------
        tuple[Rule, bool] : Selected rule and whether a declared range matched
        '''
        for rule in self.rules:
            if rule.matches(values):
                return rule, True
        return self.fallback, False

    def evaluate(self, **values: float) -> float:
        rule, _ = self.select(**values)
        return rule.equation(**values)


######################################################################
# -- Corrective Terms -- #
######################################################################

@dataclass(frozen=True, eq=False)
class CorrectiveTerm:
    '''
    Explicit optional correction added to a raw formula result.

    Build with CorrectiveTerm.none(), CorrectiveTerm.constant(value)
    or CorrectiveTerm.fromFunction(fn). A function term receives the
    raw result and returns the amount to add (e.g. a regional
    correction read from the caller's own tables).
    '''

    mode: str = 'none'
    amount: float = 0.0
    function: CorrectionFunction | None = None

    @classmethod
    def none(cls) -> CorrectiveTerm:
        return cls('none')

    @classmethod
    def constant(cls, amount: float) -> CorrectiveTerm:
        if isinstance(amount, bool) or not isinstance(amount, numbers.Real):
            raise InvalidInputError(f'Corrective term must be a real number, got {amount!r}')
        if not math.isfinite(amount):
            raise InvalidInputError(f'Corrective term must be finite, got {amount!r}')
        return cls('constant', amount=float(amount))

    @classmethod
    def fromFunction(cls, function: CorrectionFunction) -> CorrectiveTerm:
        if not callable(function):
            raise InvalidInputError(f'Corrective term function must be callable, got {function!r}')
        return cls('function', function=function)

    def apply(self, raw: float) -> float:
        '''Return raw plus the correction.'''
        if self.mode == 'none':
            return raw
        elif self.mode == 'constant':
            return raw + self.amount
        elif self.mode == 'function':
            return raw + self.function(raw)
        else:
            raise ValueError(f'Unknown corrective term mode: {self.mode}')


def applyCorrection(raw: float, correctiveTerm: CorrectiveTerm | None) -> float:
    '''Apply an optional corrective term; None means no correction.'''
    if correctiveTerm is None:
        return raw
    return correctiveTerm.apply(raw)


######################################################################
# -- Formula Specification -- #
######################################################################

def _validateValue(formula: str, parameter: Parameter, value: Any) -> Any:
    '''Check one bound argument against its parameter kind.'''
    if parameter.kind == CORRECTION:
        if value is None or isinstance(value, CorrectiveTerm):
            return value
        raise InvalidInputError(
            f'{formula}: {parameter.name} must be a CorrectiveTerm or None, got {value!r}'
        )

    if parameter.kind == ARRAY:
        if isinstance(value, (str, bytes)):
            raise InvalidInputError(f'{formula}: {parameter.name} must be a numeric sequence')
        try:
            array = np.asarray(value, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(
                f'{formula}: {parameter.name} must be a numeric sequence'
            ) from exc
        if array.ndim != 1 or array.size == 0:
            raise InvalidInputError(
                f'{formula}: {parameter.name} must be a non-empty one-dimensional sequence'
            )
        if not np.all(np.isfinite(array)):
            raise InvalidInputError(f'{formula}: {parameter.name} contains non-finite values')
        return array

    # Scalars are carried as numpy float64 so that division by zero and
    # logarithms of non-positive values follow IEEE-754 instead of raising
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise InvalidInputError(
            f'{formula}: {parameter.name} must be a real number, got {value!r}'
        )
    if not math.isfinite(value):
        raise InvalidInputError(f'{formula}: {parameter.name} must be finite, got {value!r}')
    return np.float64(value)


@dataclass(frozen=True, eq=False)
class FormulaSpec:
    '''
    Immutable description of one published equation.

    Parameters:
    -----------
    name : str
        Stable catalog name (e.g. 'SpeedOfSoundSeaWaterCoppens')
    function : FormulaFunction
        Pure function taking the parameters as keywords
    parameters : tuple[Parameter, ...]
        Ordered parameter list; positional calls follow this order
    resultUnit : str
        Unit of the returned value
    citation : str
        Literature reference for the equation
    description : str
        One-line summary
    category : str
        Catalog grouping ('soundSpeed', 'absorption', 'depthPressure',
        'sonar' or 'utility')
    validity : Mapping[str, ValidityRange]
        Declared validity window per parameter (inclusive)
    rules : RuleSet | None
        Ordered rule set for formulas that select between equations
    '''

    name: str
    function: FormulaFunction
    parameters: tuple[Parameter, ...]
    resultUnit: str
    citation: str
    description: str = ''
    category: str = 'utility'
    validity: Mapping[str, ValidityRange] = field(default_factory=dict)
    rules: RuleSet | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'parameters', tuple(self.parameters))
        names = self.parameterNames
        if len(set(names)) != len(names):
            raise ValueError(f'{self.name}: duplicate parameter names {names}')
        unknown = [key for key in self.validity if key not in names]
        if unknown:
            raise ValueError(f'{self.name}: validity given for unknown parameters {unknown}')
        object.__setattr__(self, 'validity', MappingProxyType(dict(self.validity)))

    @property
    def parameterNames(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.parameters)

    def bindArguments(self, args: tuple, kwargs: Mapping[str, Any]) -> dict[str, Any]:
        '''
        Bind positional and keyword arguments to the declared parameters.

        Raises:
        -------
        InvalidInputError : On wrong arity, unknown keywords or bad values
        '''
        names = self.parameterNames
        if len(args) > len(names):
            raise InvalidInputError(
                f'{self.name} takes at most {len(names)} arguments ({len(args)} given)'
            )

        values = dict(zip(names, args))
        for key, value in kwargs.items():
            if key not in names:
                raise InvalidInputError(f'{self.name} got an unexpected argument {key!r}')
            if key in values:
                raise InvalidInputError(f'{self.name} got multiple values for argument {key!r}')
            values[key] = value

        bound: dict[str, Any] = {}
        for parameter in self.parameters:
            if parameter.name in values:
                value = values[parameter.name]
            elif parameter.optional:
                value = parameter.default
            else:
                raise InvalidInputError(
                    f'{self.name} missing required argument {parameter.name!r}'
                )
            bound[parameter.name] = _validateValue(self.name, parameter, value)

        return bound

    def checkRanges(self, values: Mapping[str, Any]) -> tuple[Diagnostic, ...]:
        '''Diagnostics for every input outside its declared validity window.'''
        units = {p.name: p.unit for p in self.parameters}
        diagnostics = []
        for name, rng in self.validity.items():
            value = values[name]
            if not rng.contains(value):
                diagnostics.append(Diagnostic(
                    kind=OUT_OF_DECLARED_RANGE,
                    formula=self.name,
                    message=(
                        f'{name}={float(value):g} {units[name]} outside declared range '
                        f'[{rng.minimum:g}, {rng.maximum:g}]'
                    ),
                    parameter=name,
                    value=float(value),
                ))
        return tuple(diagnostics)

    def diagnose(self, values: Mapping[str, Any]) -> tuple[Diagnostic, ...]:
        '''Range diagnostics plus the rule-selection diagnostic, if any.'''
        diagnostics = list(self.checkRanges(values))
        if self.rules is not None:
            rule, matched = self.rules.select(
                **{name: values[name] for name in self.rules.parameterNames}
            )
            if not matched:
                diagnostics.append(Diagnostic(
                    kind=NO_RULE_MATCHED,
                    formula=self.name,
                    message=f'no declared range matched; evaluated fallback rule {rule.name}',
                ))
        return tuple(diagnostics)

    def evaluate(self, *args: Any, **kwargs: Any) -> FormulaResult:
        '''
        Validate the inputs, compute the value and collect diagnostics.

        Returns:
        --------
        FormulaResult : Value plus diagnostics (empty when in range)
        '''
        values = self.bindArguments(args, kwargs)
        with np.errstate(all='ignore'):
            value = self.function(**values)
        return FormulaResult(self.name, value, self.diagnose(values))

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.evaluate(*args, **kwargs).value

    def describe(self) -> dict:
        '''Plain-dict metadata for documentation and the command line.'''
        return {
            'name': self.name,
            'description': self.description,
            'category': self.category,
            'resultUnit': self.resultUnit,
            'citation': self.citation,
            'parameters': [
                {
                    'name': p.name,
                    'unit': p.unit,
                    'description': p.description,
                    'kind': p.kind,
                    'optional': p.optional,
                    **({'validity': [self.validity[p.name].minimum, self.validity[p.name].maximum]}
                       if p.name in self.validity else {}),
                }
                for p in self.parameters
            ],
            'ruleBased': self.rules is not None,
        }
