# -- oceanAcoustics Package -- #

'''
Catalog of published ocean-acoustics formulas.

Speed of sound in air, fresh water and sea water; sea-water absorption;
depth/pressure conversions; and the sonar equations with their level,
propagation and target-strength terms. Every formula is registered by a
stable name with its parameters, units, validity window and citation.
'''

__version__ = '0.1.0'

from oceanAcoustics.catalog import (
    CatalogError,
    CorrectiveTerm,
    FormulaCatalog,
    FormulaResult,
    FormulaSpec,
    InvalidInputError,
    NoTableEntryError,
    UnknownFormulaError,
    evaluate,
    getCatalog,
    getFormula,
    listFormulas,
)
