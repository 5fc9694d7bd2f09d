# -- Catalog Subpackage -- #

'''
Formula specifications, the name registry and the error hierarchy.
'''

from oceanAcoustics.catalog.exceptions import (
    CatalogError,
    InvalidInputError,
    NoTableEntryError,
    UnknownFormulaError,
)
from oceanAcoustics.catalog.protocols import (
    CorrectiveTerm,
    Diagnostic,
    FormulaResult,
    FormulaSpec,
    Parameter,
    Rule,
    RuleSet,
    ValidityRange,
)
from oceanAcoustics.catalog.registry import (
    FormulaCatalog,
    evaluate,
    getCatalog,
    getFormula,
    listFormulas,
)
