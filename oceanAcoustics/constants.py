# -- Physical Constants for Ocean Acoustics -- #

'''
Physical and reference constants shared by the formula modules.

All values in SI units unless otherwise noted. Empirical fit
coefficients stay inside the formula that owns them; only values
reused across formulas live here.
'''

######################################################################
# -- Temperature -- #
######################################################################

# Celsius to kelvin offset [K]
celsiusToKelvin: float = 273.15

# Triple point of water [K]
# Also the offset in the dry-air sound speed fit 20.05*sqrt(T + 273.16)
waterTriplePointK: float = 273.16

######################################################################
# -- Pressure -- #
######################################################################

# Standard atmosphere [kPa]
standardAtmosphereKpa: float = 101.325

# Standard atmosphere [MPa]
standardAtmosphereMPa: float = 0.101325

######################################################################
# -- Gravity -- #
######################################################################

# Equatorial gravity of the 1967 international gravity formula [m/s^2]
equatorialGravity: float = 9.780318

# Gravity at 45 deg latitude used by Leroy & Parthiot [m/s^2]
gravityAt45Deg: float = 9.806

######################################################################
# -- Air -- #
######################################################################

# Dry-air sound speed coefficient [m/s/sqrt(K)]
dryAirSoundSpeedCoefficient: float = 20.05

######################################################################
# -- Sonar Reference Levels -- #
######################################################################

# Source level of a 1 W omnidirectional projector re 1 uPa at 1 m [dB]
omniProjectorSourceLevelDb: float = 170.8

# Nepers to decibels per kilometre (20*log10(e)*1000) rounded as published
nepersToDbPerKm: float = 8686.0
