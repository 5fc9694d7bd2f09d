# -- Visualization Theme -- #

'''
Dark-mode theme shared by every oceanAcoustics Plotly figure.
'''

# Plotly template
TEMPLATE = 'plotly_dark'

# Primary colors (Material Design, readable on dark backgrounds)
BLUE = '#42A5F5'
RED = '#EF5350'
GREEN = '#66BB6A'
ORANGE = '#FFA726'
PURPLE = '#AB47BC'
BROWN = '#A1887F'
CYAN = '#26C6DA'

# Neutrals
WHITE = '#E0E0E0'
REFERENCE_LINE = '#888888'

# Ordered palette for multi-series plots
PALETTE = [BLUE, RED, GREEN, ORANGE, PURPLE, BROWN, CYAN]

# One color per catalog category
CATEGORY_COLORS = {
    'soundSpeed': BLUE,
    'absorption': RED,
    'depthPressure': GREEN,
    'sonar': ORANGE,
    'utility': PURPLE,
}
