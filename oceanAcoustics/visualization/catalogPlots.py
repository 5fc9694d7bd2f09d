# -- Catalog Visualizations -- #

'''
Plotly figures built by evaluating catalog formulas.

Each trace is one formula evaluated over a sweep. Points outside a
formula's declared validity window are still plotted; the number of
such points is appended to the trace name so that extrapolated curves
are visible in the legend.
'''

from __future__ import annotations

from typing import Iterable

import numpy as np
import plotly.graph_objects as go

from oceanAcoustics import units
from oceanAcoustics.catalog.registry import FormulaCatalog, getCatalog
from oceanAcoustics.depthPressure.conversions import depthToPressureLeroyParthiot
from oceanAcoustics.tables.coefficientTables import MOLECULAR_RELAXATION_ATTENUATION
from oceanAcoustics.visualization import theme


DEFAULT_PROFILE_FORMULAS = (
    'SpeedOfSoundSeaWaterLeroy69',
    'SpeedOfSoundSeaWaterMackenzie',
    'SpeedOfSoundSeaWaterCoppens',
    'SpeedOfSoundSeaWaterMedwin',
    'SpeedOfSoundSeaWaterChenAndMillero',
    'SpeedOfSoundSeaWaterLeroyEtAl2008',
)

DEFAULT_ABSORPTION_FORMULAS = (
    'AbsorptionSoundSeaWaterFrancoisGarrison',
    'AbsorptionSoundFreshWaterFrancoisGarrison',
    'AbsorptionAlphaFisherSimmons',
    'AbsorptionAlphaAinslieMcColm',
    'MolecularRelaxationAttenuationCoeficientApproximation',
)


def _traceName(name: str, nOutOfRange: int) -> str:
    if nOutOfRange:
        return f'{name} ({nOutOfRange} out of range)'
    return name


def _sweep(
    catalog: FormulaCatalog,
    name: str,
    inputs: Iterable[dict],
) -> tuple[np.ndarray, int]:
    '''Evaluate one formula for each input dict; return values and the out-of-range count.'''
    spec = catalog.getFormula(name)
    values = []
    nOutOfRange = 0
    for kwargs in inputs:
        result = spec.evaluate(**{key: kwargs[key] for key in spec.parameterNames if key in kwargs})
        values.append(float(result.value))
        if not result.inRange:
            nOutOfRange += 1
    return np.asarray(values), nOutOfRange


def _profileInputs(parameterNames: tuple[str, ...], depthM: float, temperatureC: float,
                   salinity: float, latitudeDeg: float) -> dict:
    '''Express one profile point in the depth or pressure parameter a formula expects.'''
    gaugeMpa = depthToPressureLeroyParthiot(depthM, latitudeDeg)
    available = {
        'temperatureC': temperatureC,
        'salinity': salinity,
        'latitudeDeg': latitudeDeg,
        'depthM': depthM,
        'depthKm': units.mToKm(depthM),
        'pressureBar': units.mpaToBar(gaugeMpa),
        'pressureDbar': units.mpaToDecibar(gaugeMpa),
    }
    missing = [p for p in parameterNames if p not in available]
    if missing:
        raise ValueError(f'Cannot build a depth profile for parameters {missing}')
    return {p: float(available[p]) for p in parameterNames}


def plotSoundSpeedProfiles(
    temperatureC: float = 10.0,
    salinity: float = 35.0,
    latitudeDeg: float = 45.0,
    depthRange: np.ndarray | None = None,
    formulas: Iterable[str] = DEFAULT_PROFILE_FORMULAS,
    catalog: FormulaCatalog | None = None,
) -> go.Figure:
    '''
    Sound speed vs depth for several sea-water equations.

    Temperature and salinity are held constant so the curves differ
    only through each equation's pressure/depth dependence. Pressure
    inputs are gauge pressures from the Leroy & Parthiot conversion.

    Parameters:
    -----------
    temperatureC : float
        Water temperature [C]
    salinity : float
        Salinity [ppt]
    latitudeDeg : float
        Latitude used for the depth to pressure conversion [deg]
    depthRange : np.ndarray
        Depths in m (default: 0 to 1000)
    formulas : Iterable[str]
        Catalog names to plot
    catalog : FormulaCatalog
        Catalog to evaluate (default: the bundled catalog)

    Returns:
    --------
    go.Figure : Plotly figure with depth increasing downward
    '''
    if depthRange is None:
        depthRange = np.linspace(0.0, 1000.0, 51)
    if catalog is None:
        catalog = getCatalog()

    fig = go.Figure()

    for i, name in enumerate(formulas):
        spec = catalog.getFormula(name)
        inputs = [
            _profileInputs(spec.parameterNames, float(z), temperatureC, salinity, latitudeDeg)
            for z in depthRange
        ]
        speeds, nOutOfRange = _sweep(catalog, name, inputs)
        fig.add_trace(go.Scatter(
            x=speeds, y=depthRange,
            mode='lines', name=_traceName(name, nOutOfRange),
            line=dict(color=theme.PALETTE[i % len(theme.PALETTE)]),
        ))

    fig.update_layout(
        title=f'Sound Speed Profiles (T = {temperatureC:g} C, S = {salinity:g} ppt)',
        xaxis_title='Speed of Sound (m/s)',
        yaxis_title='Depth (m)',
        template=theme.TEMPLATE,
        height=500,
    )
    fig.update_yaxes(autorange='reversed')

    return fig


def plotAbsorptionSpectrum(
    temperatureC: float = 10.0,
    salinity: float = 35.0,
    depthM: float = 0.0,
    pH: float = 8.0,
    frequencyRange: np.ndarray | None = None,
    formulas: Iterable[str] = DEFAULT_ABSORPTION_FORMULAS,
    catalog: FormulaCatalog | None = None,
) -> go.Figure:
    '''
    Absorption coefficient vs frequency on log-log axes.

    When temperatureC is one of the tabulated rows, the molecular
    relaxation table is overlaid as markers.

    Parameters:
    -----------
    temperatureC : float
        Water temperature [C]
    salinity : float
        Salinity [ppt]
    depthM : float
        Depth [m]
    pH : float
        Acidity
    frequencyRange : np.ndarray
        Frequencies in kHz (default: 0.1 to 1000, log spaced)
    formulas : Iterable[str]
        Catalog names to plot
    catalog : FormulaCatalog
        Catalog to evaluate (default: the bundled catalog)

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    if frequencyRange is None:
        frequencyRange = np.logspace(-1.0, 3.0, 81)
    if catalog is None:
        catalog = getCatalog()

    fixed = {'temperatureC': temperatureC, 'salinity': salinity, 'depthM': depthM, 'pH': pH}
    inputs = [dict(fixed, frequencyKhz=float(f)) for f in frequencyRange]

    fig = go.Figure()

    for i, name in enumerate(formulas):
        alpha, nOutOfRange = _sweep(catalog, name, inputs)
        fig.add_trace(go.Scatter(
            x=frequencyRange, y=alpha,
            mode='lines', name=_traceName(name, nOutOfRange),
            line=dict(color=theme.PALETTE[i % len(theme.PALETTE)]),
        ))

    table = MOLECULAR_RELAXATION_ATTENUATION
    if any(abs(temperatureC - key) <= 1e-9 for key in table.rowKeys):
        fig.add_trace(go.Scatter(
            x=list(table.columnKeys), y=table.row(temperatureC),
            mode='markers', name=f'{table.name} table',
            marker=dict(color=theme.WHITE, size=8, symbol='diamond'),
        ))

    fig.update_layout(
        title=f'Absorption Spectrum (T = {temperatureC:g} C, S = {salinity:g} ppt, z = {depthM:g} m)',
        xaxis_title='Frequency (kHz)',
        yaxis_title='Absorption (dB/km)',
        xaxis_type='log',
        yaxis_type='log',
        template=theme.TEMPLATE,
        height=400,
    )

    return fig


def plotCatalogCoverage(catalog: FormulaCatalog | None = None) -> go.Figure:
    '''Bar chart of the number of registered formulas per category.'''
    if catalog is None:
        catalog = getCatalog()
    categories = catalog.categories()
    counts = [len(catalog.listFormulas(category)) for category in categories]

    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=categories, y=counts,
        marker_color=[theme.CATEGORY_COLORS.get(c, theme.REFERENCE_LINE) for c in categories],
        text=counts, textposition='outside',
        name='Formulas',
    ))

    fig.update_layout(
        title=f'Catalog Coverage ({len(catalog)} formulas)',
        xaxis_title='Category',
        yaxis_title='Number of Formulas',
        template=theme.TEMPLATE,
        height=400,
    )

    return fig
