# -- Ocean Acoustics Runner -- #

'''
Command-line entry point for the formula catalog.

Lists, describes and evaluates catalog formulas, and runs batches of
evaluations from a JSON file.

Usage:
    python -m oceanAcoustics list --category soundSpeed
    python -m oceanAcoustics describe SpeedOfSoundSeaWaterMackenzie
    python -m oceanAcoustics eval SpeedOfSoundSeaWaterMackenzie depthM=1000 salinity=35 temperatureC=10
    python -m oceanAcoustics eval DetectionIndex signal=1,2,3 noise=0.5,0.1,0.3
    python -m oceanAcoustics batch inputs.json --output results.json

Batch file layout:
    {"evaluations": [{"formula": "SpeedOfSoundSeaWaterCoppens",
                      "inputs": {"depthKm": 0, "salinity": 35, "temperatureC": 25}}]}
A bare list of evaluations is accepted as well. A numeric correctiveTerm
is applied as a constant correction.
'''

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

import numpy as np

from oceanAcoustics.catalog.exceptions import CatalogError, InvalidInputError
from oceanAcoustics.catalog.protocols import ARRAY, CORRECTION, CorrectiveTerm, FormulaResult, FormulaSpec
from oceanAcoustics.catalog.registry import FormulaCatalog, getCatalog


logger = logging.getLogger(__name__)

# Exit status for invalid input and unknown formulas
EXIT_CATALOG_ERROR = 2


#--------------------------------------------------------------------#
# -- CLI Argument Parser -- #
#--------------------------------------------------------------------#

def buildParser() -> argparse.ArgumentParser:
    '''Build the CLI argument parser.'''
    parser = argparse.ArgumentParser(
        prog='ocean-acoustics',
        description='oceanAcoustics -- catalog of ocean-acoustics formulas',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--verbose', action='store_true',
        help='Log catalog activity at DEBUG level',
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    listParser = subparsers.add_parser('list', help='List registered formula names')
    listParser.add_argument(
        '--category', type=str, default=None,
        help='Only list formulas in this category',
    )

    describeParser = subparsers.add_parser('describe', help='Show parameters, units and citation')
    describeParser.add_argument('name', type=str, help='Formula name')

    evalParser = subparsers.add_parser('eval', help='Evaluate one formula')
    evalParser.add_argument('name', type=str, help='Formula name')
    evalParser.add_argument(
        'assignments', nargs='*', metavar='key=value',
        help='Inputs by parameter name; sequences are comma separated',
    )

    batchParser = subparsers.add_parser('batch', help='Evaluate a JSON file of inputs')
    batchParser.add_argument('file', type=str, help='Path to the JSON input file')
    batchParser.add_argument(
        '--output', type=str, default=None,
        help='Write JSON results to this path instead of stdout',
    )

    return parser


#--------------------------------------------------------------------#
# -- Input and Output Conversion -- #
#--------------------------------------------------------------------#

def _coerceInput(spec: FormulaSpec, key: str, value: Any) -> Any:
    '''Convert a raw CLI or JSON value to what the parameter expects.'''
    kinds = {p.name: p.kind for p in spec.parameters}
    kind = kinds.get(key)
    try:
        if kind == ARRAY:
            if isinstance(value, str):
                return [float(v) for v in value.split(',') if v.strip()]
            return value
        if kind == CORRECTION:
            if value is None or isinstance(value, CorrectiveTerm):
                return value
            return CorrectiveTerm.constant(float(value))
        if isinstance(value, str):
            return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f'{spec.name}: cannot read {key}={value!r}') from exc
    return value


def parseAssignments(spec: FormulaSpec, assignments: list[str]) -> dict[str, Any]:
    '''
    Parse key=value command-line tokens into keyword arguments.

    Raises:
    -------
    InvalidInputError : If a token has no '=' or a value is not numeric
    '''
    inputs: dict[str, Any] = {}
    for token in assignments:
        key, sep, value = token.partition('=')
        if not sep or not key:
            raise InvalidInputError(f'Expected key=value, got {token!r}')
        inputs[key.strip()] = _coerceInput(spec, key.strip(), value.strip())
    return inputs


def _jsonValue(value: Any) -> Any:
    '''Plain JSON-compatible form of a formula value.'''
    if hasattr(value, '_asdict'):
        return {k: _jsonValue(v) for k, v in value._asdict().items()}
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, (np.floating, np.integer)):
        return value.item()
    return value


def resultToDict(result: FormulaResult) -> dict:
    '''Serializable summary of one evaluation.'''
    return {
        'formula': result.formula,
        'value': _jsonValue(result.value),
        'inRange': result.inRange,
        'diagnostics': [
            {
                'kind': d.kind,
                'message': d.message,
                'parameter': d.parameter,
                'value': d.value,
            }
            for d in result.diagnostics
        ],
    }


def _formatValue(value: Any) -> str:
    value = _jsonValue(value)
    if isinstance(value, dict):
        return ', '.join(f'{k}={v:.6g}' for k, v in value.items())
    if isinstance(value, float):
        return f'{value:.10g}'
    return str(value)


#--------------------------------------------------------------------#
# -- Runner Class -- #
#--------------------------------------------------------------------#

class AcousticsRunner:
    '''
    Runs catalog queries and evaluations and prints the results.

    Parameters:
    -----------
    catalog : FormulaCatalog
        Catalog to query (default: the bundled catalog)
    '''

    def __init__(self, catalog: FormulaCatalog | None = None) -> None:
        self.catalog = catalog if catalog is not None else getCatalog()

    def listFormulas(self, category: str | None = None) -> list[str]:
        '''Print and return the registered names.'''
        names = self.catalog.listFormulas(category)
        if category is not None and not names:
            raise InvalidInputError(
                f'Unknown category: {category} (available: {", ".join(self.catalog.categories())})'
            )
        for name in names:
            print(name)
        return names

    def describe(self, name: str) -> dict:
        '''Print and return the metadata of one formula.'''
        info = self.catalog.getFormula(name).describe()

        print()
        print('=' * 62)
        print(f'  {info["name"]}')
        print('=' * 62)
        print(f'  Description:  {info["description"]}')
        print(f'  Category:     {info["category"]}')
        print(f'  Result unit:  {info["resultUnit"]}')
        print(f'  Citation:     {info["citation"]}')
        if info['ruleBased']:
            print('  Selection:    first matching rule, last rule as fallback')
        print('-' * 62)
        print(f'  {"Parameter":<24}{"Unit":<10}{"Validity":<20}')
        print('  ' + '-' * 58)
        for p in info['parameters']:
            validity = ''
            if 'validity' in p:
                validity = f'[{p["validity"][0]:g}, {p["validity"][1]:g}]'
            elif p['optional']:
                validity = '(optional)'
            print(f'  {p["name"]:<24}{p["unit"]:<10}{validity:<20}')
        print('=' * 62)
        print()

        return info

    def _evaluateInputs(self, name: str, inputs: Any) -> FormulaResult:
        # Diagnostics go to the printed or JSON output only, not to the catalog log
        spec = self.catalog.getFormula(name)
        if not isinstance(inputs, dict):
            raise InvalidInputError(f'{name}: inputs must be an object of name -> value, got {inputs!r}')
        coerced = {key: _coerceInput(spec, key, value) for key, value in inputs.items()}
        return spec.evaluate(**coerced)

    def evaluate(self, name: str, inputs: dict[str, Any]) -> FormulaResult:
        '''Evaluate one formula by keyword inputs and print the value.'''
        spec = self.catalog.getFormula(name)
        result = self._evaluateInputs(name, inputs)

        unit = f' {spec.resultUnit}' if spec.resultUnit else ''
        print(f'{name} = {_formatValue(result.value)}{unit}')
        for diagnostic in result.diagnostics:
            print(f'  [{diagnostic.kind}] {diagnostic.message}')

        return result

    def runFromConfig(self, configPath: str, outputPath: str | None = None) -> list[dict]:
        '''
        Evaluate every entry of a JSON batch file.

        Entries that fail with a catalog error are reported with an
        'error' field; the remaining entries are still evaluated.

        Parameters:
        -----------
        configPath : str
            Path to the JSON input file
        outputPath : str | None
            Where to write the JSON results (stdout when None)

        Returns:
        --------
        list[dict] : One result record per entry
        '''
        with open(configPath, 'r') as f:
            data = json.load(f)

        if isinstance(data, dict):
            if 'evaluations' not in data:
                raise InvalidInputError(f'{configPath}: missing "evaluations" list')
            entries = data['evaluations']
        else:
            entries = data
        if not isinstance(entries, list):
            raise InvalidInputError(f'{configPath}: expected a list of evaluations')

        results = []
        for index, entry in enumerate(entries):
            name = entry.get('formula') if isinstance(entry, dict) else None
            inputs = entry.get('inputs', {}) if isinstance(entry, dict) else {}
            try:
                if not isinstance(name, str):
                    raise InvalidInputError(f'Entry {index} has no formula name')
                record = resultToDict(self._evaluateInputs(name, inputs))
            except CatalogError as exc:
                logger.error('Entry %d (%s): %s', index, name, exc)
                record = {'formula': name, 'error': str(exc)}
            record['inputs'] = inputs
            results.append(record)

        text = json.dumps({'results': results}, indent=2)
        if outputPath is None:
            print(text)
        else:
            with open(outputPath, 'w') as f:
                f.write(text + '\n')
            nFailed = sum('error' in r for r in results)
            print(f'  Evaluated {len(results)} entries ({nFailed} failed) -> {outputPath}')

        return results


#--------------------------------------------------------------------#
# -- CLI Entry Point -- #
#--------------------------------------------------------------------#

def main(argv: list[str] | None = None) -> int:
    '''CLI entry point; returns the process exit status.'''
    parser = buildParser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    runner = AcousticsRunner()

    try:
        if args.command == 'list':
            runner.listFormulas(args.category)
        elif args.command == 'describe':
            runner.describe(args.name)
        elif args.command == 'eval':
            spec = runner.catalog.getFormula(args.name)
            runner.evaluate(args.name, parseAssignments(spec, args.assignments))
        elif args.command == 'batch':
            results = runner.runFromConfig(args.file, outputPath=args.output)
            if any('error' in r for r in results):
                return EXIT_CATALOG_ERROR
    except CatalogError as exc:
        print(f'error: {exc}', file=sys.stderr)
        return EXIT_CATALOG_ERROR

    return 0


if __name__ == '__main__':
    sys.exit(main())
