# -- Shared Test Fixtures -- #

'''
Fixtures shared across the oceanAcoustics test modules.
'''

import json

import pytest

from oceanAcoustics.catalog.definitions import buildDefaultCatalog
from oceanAcoustics.catalog.registry import getCatalog


@pytest.fixture
def catalog():
    '''Fresh catalog of every bundled formula, without diagnostic logging.'''
    return buildDefaultCatalog(logDiagnostics=False)


@pytest.fixture
def defaultCatalog():
    '''The process-wide bundled catalog.'''
    return getCatalog()


@pytest.fixture
def batchFile(tmp_path):
    '''JSON batch file with one good, one out-of-range and one unknown entry.'''
    path = tmp_path / 'batch.json'
    data = {
        'evaluations': [
            {
                'formula': 'SpeedOfSoundSeaWaterCoppens',
                'inputs': {'depthKm': 0, 'salinity': 35, 'temperatureC': 25},
            },
            {
                'formula': 'SpeedOfSoundSeaWaterLeroy69',
                'inputs': {'depthM': 100, 'salinity': 35, 'temperatureC': 30},
            },
            {
                'formula': 'NotAFormula',
                'inputs': {'x': 1},
            },
        ],
    }
    with open(path, 'w') as f:
        json.dump(data, f)
    return path
