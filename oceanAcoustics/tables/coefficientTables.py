# -- Static Coefficient Tables -- #

'''
Read-only tables of empirical coefficients bundled with the package.

Tables are loaded once from JSON files under tables/data when this
module is imported and are never mutated afterwards. Lookups match
keys exactly; there is no interpolation and no extrapolation, so a
key that is not tabulated raises NoTableEntryError.

Bundled tables:
- MOLECULAR_RELAXATION_ATTENUATION: absorption (dB/km) by
  temperature (C) x frequency (kHz)
- SPEED_ALGORITHM_PARAMETER_RANGES: declared temperature, salinity
  and pressure/depth ranges of the speed-of-sound algorithms
'''

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import numpy as np

from oceanAcoustics.catalog.exceptions import NoTableEntryError
from oceanAcoustics.catalog.protocols import ValidityRange


DATA_DIR = Path(__file__).parent / 'data'

# Keys closer than this are the same tabulated key
KEY_TOLERANCE = 1e-9


def _findKey(tableName: str, keys: tuple[float, ...], key: float) -> int:
    '''Index of key in keys, or NoTableEntryError.'''
    for index, candidate in enumerate(keys):
        if abs(candidate - key) <= KEY_TOLERANCE:
            return index
    raise NoTableEntryError(tableName, key, keys)


######################################################################
# -- Two-Key Table -- #
######################################################################

@dataclass(frozen=True, eq=False)
class CoefficientTable:
    '''
    Static 2-D table addressed by a row key and a column key.

    Parameters:
    -----------
    name : str
        Table name used in error messages
    rowName, columnName : str
        Names of the row and column keys (e.g. 'temperatureC')
    rowUnit, columnUnit, valueUnit : str
        Units of the keys and of the tabulated values
    rowKeys, columnKeys : tuple[float, ...]
        Tabulated key values
    values : np.ndarray
        Read-only array of shape (len(rowKeys), len(columnKeys))
    source : str
        Provenance of the tabulated values
    '''

    name: str
    rowName: str
    rowUnit: str
    columnName: str
    columnUnit: str
    valueUnit: str
    rowKeys: tuple[float, ...]
    columnKeys: tuple[float, ...]
    values: np.ndarray
    source: str = ''

    def __post_init__(self) -> None:
        values = np.array(self.values, dtype=float)
        expected = (len(self.rowKeys), len(self.columnKeys))
        if values.shape != expected:
            raise ValueError(
                f'Table {self.name}: values shape {values.shape} does not match keys {expected}'
            )
        values.setflags(write=False)
        object.__setattr__(self, 'values', values)
        object.__setattr__(self, 'rowKeys', tuple(float(k) for k in self.rowKeys))
        object.__setattr__(self, 'columnKeys', tuple(float(k) for k in self.columnKeys))

    @classmethod
    def fromJson(cls, path: Path) -> CoefficientTable:
        '''Load a table from a JSON file.'''
        with open(path, 'r') as f:
            data = json.load(f)

        return cls(
            name=data['name'],
            rowName=data['rowName'],
            rowUnit=data['rowUnit'],
            columnName=data['columnName'],
            columnUnit=data['columnUnit'],
            valueUnit=data['valueUnit'],
            rowKeys=tuple(data['rowKeys']),
            columnKeys=tuple(data['columnKeys']),
            values=np.asarray(data['values'], dtype=float),
            source=data.get('source', ''),
        )

    def lookup(self, rowKey: float, columnKey: float) -> float:
        '''
        Tabulated value at (rowKey, columnKey).

        Raises:
        -------
        NoTableEntryError : If either key is not tabulated
        '''
        i = _findKey(f'{self.name}.{self.rowName}', self.rowKeys, rowKey)
        j = _findKey(f'{self.name}.{self.columnName}', self.columnKeys, columnKey)
        return float(self.values[i, j])

    def row(self, rowKey: float) -> np.ndarray:
        '''All tabulated values for one row key (read-only view).'''
        return self.values[_findKey(f'{self.name}.{self.rowName}', self.rowKeys, rowKey)]


######################################################################
# -- Keyed Record Table -- #
######################################################################

@dataclass(frozen=True, eq=False)
class RecordTable:
    '''Static list of records addressed by one key field.'''

    name: str
    keyField: str
    fields: tuple[str, ...]
    records: tuple[Mapping[str, Any], ...]
    source: str = ''

    def __post_init__(self) -> None:
        frozen = []
        for record in self.records:
            missing = [f for f in self.fields if f not in record]
            if missing:
                raise ValueError(f'Table {self.name}: record missing fields {missing}')
            frozen.append(MappingProxyType(dict(record)))
        object.__setattr__(self, 'records', tuple(frozen))
        object.__setattr__(self, 'fields', tuple(self.fields))

    @classmethod
    def fromJson(cls, path: Path) -> RecordTable:
        '''Load a record table from a JSON file.'''
        with open(path, 'r') as f:
            data = json.load(f)

        return cls(
            name=data['name'],
            keyField=data['keyField'],
            fields=tuple(data['fields']),
            records=tuple(data['records']),
            source=data.get('source', ''),
        )

    def keys(self) -> tuple[Any, ...]:
        return tuple(record[self.keyField] for record in self.records)

    def lookup(self, key: Any) -> Mapping[str, Any]:
        '''
        Record whose key field equals key.

        Raises:
        -------
        NoTableEntryError : If no record has that key
        '''
        for record in self.records:
            if record[self.keyField] == key:
                return record
        raise NoTableEntryError(self.name, key, self.keys())


######################################################################
# -- Bundled Tables (loaded once) -- #
######################################################################

MOLECULAR_RELAXATION_ATTENUATION = CoefficientTable.fromJson(
    DATA_DIR / 'molecularRelaxationAttenuation.json'
)

SPEED_ALGORITHM_PARAMETER_RANGES = RecordTable.fromJson(
    DATA_DIR / 'speedAlgorithmParameterRanges.json'
)


def speedAlgorithmParameterRange(reference: str) -> Mapping[str, Any]:
    '''Declared parameter ranges of one speed-of-sound algorithm.'''
    return SPEED_ALGORITHM_PARAMETER_RANGES.lookup(reference)


def speedAlgorithmValidity(reference: str) -> dict[str, ValidityRange]:
    '''
    Validity window of a speed-of-sound algorithm as catalog ranges.

    Temperature maps to 'temperatureC', salinity to 'salinity' (omitted
    for pure-water algorithms) and the pressure or depth range to the
    parameter named in the record.

    Parameters:
    -----------
    reference : str
        Catalog name of the algorithm

    Returns:
    --------
    dict[str, ValidityRange] : Parameter name -> inclusive range
    '''
    record = speedAlgorithmParameterRange(reference)
    validity = {
        'temperatureC': ValidityRange(record['temperatureMin'], record['temperatureMax']),
        record['pressureOrDepthParameter']: ValidityRange(
            record['pressureOrDepthMin'], record['pressureOrDepthMax']
        ),
    }
    if record['salinityMax'] > 0:
        validity['salinity'] = ValidityRange(record['salinityMin'], record['salinityMax'])
    return validity
