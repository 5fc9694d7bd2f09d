# -- Formula Registry -- #

'''
Name -> FormulaSpec registry with diagnostic logging.

FormulaCatalog holds the registered specs and evaluates them by name.
The process-wide default catalog is built once, the first time it is
requested, from oceanAcoustics.catalog.definitions.

Usage:
    from oceanAcoustics.catalog import evaluate, getFormula

    result = evaluate('SpeedOfSoundSeaWaterLeroy69', 100.0, 35.0, 30.0)
    result.value          # computed even though 30 C is out of range
    result.diagnostics    # one outOfDeclaredRange record

    getFormula('SpeedOfSoundSeaWaterCoppens')(0.0, 35.0, 25.0)
'''

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from oceanAcoustics.catalog.exceptions import UnknownFormulaError
from oceanAcoustics.catalog.protocols import FormulaResult, FormulaSpec


logger = logging.getLogger(__name__)


class FormulaCatalog:
    '''
    Registry of formula specifications addressed by stable name.

    Parameters:
    -----------
    specs : Iterable[FormulaSpec]
        Specs to register up front
    logDiagnostics : bool
        Log every diagnostic of evaluate() at WARNING level
    '''

    def __init__(self, specs: Iterable[FormulaSpec] = (), logDiagnostics: bool = True) -> None:
        self._specs: dict[str, FormulaSpec] = {}
        self.logDiagnostics = logDiagnostics
        for spec in specs:
            self.register(spec)

    def register(self, spec: FormulaSpec) -> FormulaSpec:
        '''
        Add a spec to the catalog.

        Raises:
        -------
        ValueError : If a spec with the same name is already registered
        '''
        if spec.name in self._specs:
            raise ValueError(f'Formula already registered: {spec.name}')
        self._specs[spec.name] = spec
        logger.debug('Registered formula %s (%s)', spec.name, spec.category)
        return spec

    def getFormula(self, name: str) -> FormulaSpec:
        '''
        Spec registered under name.

        Raises:
        -------
        UnknownFormulaError : If no formula has that name
        '''
        try:
            return self._specs[name]
        except KeyError:
            raise UnknownFormulaError(name) from None

    def listFormulas(self, category: str | None = None) -> list[str]:
        '''Sorted names, optionally restricted to one category.'''
        return sorted(
            name for name, spec in self._specs.items()
            if category is None or spec.category == category
        )

    def categories(self) -> list[str]:
        return sorted({spec.category for spec in self._specs.values()})

    def evaluate(self, name: str, *args: Any, **kwargs: Any) -> FormulaResult:
        '''
        Evaluate a formula by name.

        Parameters:
        -----------
        name : str
            Registered formula name
        *args, **kwargs
            Formula arguments, positionally in declared order or by keyword

        Returns:
        --------
        FormulaResult : Value plus diagnostics
        '''
        result = self.getFormula(name).evaluate(*args, **kwargs)
        if self.logDiagnostics:
            for diagnostic in result.diagnostics:
                logger.warning('%s: %s', diagnostic.formula, diagnostic.message)
        return result

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[FormulaSpec]:
        return iter(self._specs[name] for name in sorted(self._specs))


#--------------------------------------------------------------------#
# -- Default Catalog -- #
#--------------------------------------------------------------------#

def getCatalog() -> FormulaCatalog:
    '''The process-wide catalog of every bundled formula.'''
    # Deferred so the formula modules can import catalog.protocols
    from oceanAcoustics.catalog.definitions import CATALOG
    return CATALOG


def getFormula(name: str) -> FormulaSpec:
    '''Look up a bundled formula by name.'''
    return getCatalog().getFormula(name)


def evaluate(name: str, *args: Any, **kwargs: Any) -> FormulaResult:
    '''Evaluate a bundled formula by name.'''
    return getCatalog().evaluate(name, *args, **kwargs)


def listFormulas(category: str | None = None) -> list[str]:
    '''Sorted names of the bundled formulas.'''
    return getCatalog().listFormulas(category)
