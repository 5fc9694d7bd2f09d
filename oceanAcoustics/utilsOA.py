# -- General Utilities for Ocean Acoustics -- #

'''
Small field-work helpers that sit alongside the acoustics formulas.
'''

# Global imports
from typing import NamedTuple

#--------------------------------------------------------------------#
# -- Fuel Stabilizer Dosing -- #
#--------------------------------------------------------------------#

class StabilizerDose(NamedTuple):
    '''Stabilizer dose as a volume and an equivalent number of drops.'''

    milliliters: float
    drops: float


def fuelStabilizer(
    litersFuel: float,
    mlStabilizer: float = 25.0,
    litersFuelPerDose: float = 20.0,
    mlPerDrop: float = 0.05,
) -> StabilizerDose:

    '''
    Fuel stabilizer needed for a given volume of fuel.

    The product label gives mlStabilizer millilitres per litersFuelPerDose
    litres of fuel; the dose scales linearly with the fuel volume.

    Parameters:
    -----------
    litersFuel : float
        Volume of fuel to treat [L]
    mlStabilizer : float
        Stabilizer volume per label dose [mL]
    litersFuelPerDose : float
        Fuel volume treated by one label dose [L]
    mlPerDrop : float
        Volume of one drop [mL]

    Returns:
    --------
    StabilizerDose : (milliliters, drops)
    '''

    milliliters = litersFuel * 1e3 * mlStabilizer / (litersFuelPerDose * 1e3)
    return StabilizerDose(milliliters=milliliters, drops=milliliters / mlPerDrop)
