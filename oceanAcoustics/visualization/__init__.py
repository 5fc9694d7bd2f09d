# -- Visualization Subpackage -- #

'''
Plotly figures built from catalog evaluations.
'''

from oceanAcoustics.visualization.catalogPlots import (
    plotAbsorptionSpectrum,
    plotCatalogCoverage,
    plotSoundSpeedProfiles,
)
