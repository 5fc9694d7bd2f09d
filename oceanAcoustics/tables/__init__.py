# -- Tables Subpackage -- #

'''
Bundled read-only coefficient tables, loaded once from JSON.
'''

from oceanAcoustics.tables.coefficientTables import (
    MOLECULAR_RELAXATION_ATTENUATION,
    SPEED_ALGORITHM_PARAMETER_RANGES,
    CoefficientTable,
    RecordTable,
)
