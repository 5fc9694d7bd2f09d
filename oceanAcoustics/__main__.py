# -- oceanAcoustics Module Entry Point -- #

'''
Allows running the catalog CLI with: python -m oceanAcoustics
'''

import sys

from oceanAcoustics.runner import main

sys.exit(main())
