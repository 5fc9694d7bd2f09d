# -- Catalog Exceptions -- #

'''
Error conditions raised by the formula catalog and coefficient tables.

Out-of-range inputs are not errors: they are reported as Diagnostic
records on the FormulaResult and the value is still returned.
'''


class CatalogError(Exception):
    '''Base class for every condition raised by oceanAcoustics.'''


class InvalidInputError(CatalogError, ValueError):
    '''Non-numeric, non-finite or wrong-arity arguments to a formula.'''


class UnknownFormulaError(CatalogError, KeyError):
    '''Lookup of a formula name that is not registered.'''

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f'Unknown formula: {self.name}'


class NoTableEntryError(CatalogError, KeyError):
    '''Coefficient table lookup with a key that is not tabulated.'''

    def __init__(self, table: str, key: object, available: tuple = ()) -> None:
        super().__init__(key)
        self.table = table
        self.key = key
        self.available = tuple(available)

    def __str__(self) -> str:
        if self.available:
            return (
                f'No entry for {self.key!r} in table {self.table} '
                f'(available: {", ".join(repr(k) for k in self.available)})'
            )
        return f'No entry for {self.key!r} in table {self.table}'
