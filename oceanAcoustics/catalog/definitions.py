# -- Bundled Formula Definitions -- #

'''
FormulaSpec entries for every bundled formula.

Names are stable identifiers used by the command line, the plots and
table-driven tests. Parameter names match the keyword arguments of the
underlying functions exactly, and their order is the positional order.
Speed-of-sound validity windows are taken from the bundled
SpeedAlgorithmParameterRanges table where the algorithm is listed there.
'''

from __future__ import annotations

from oceanAcoustics.absorption import seaWaterAbsorption as absorption
from oceanAcoustics.catalog.protocols import (
    ARRAY, CORRECTION, FormulaSpec, Parameter, ranges,
)
from oceanAcoustics.catalog.registry import FormulaCatalog
from oceanAcoustics.depthPressure import conversions, simplifiedPressure
from oceanAcoustics.sonar import levels, propagation, sonarEquation, targetStrength, waves
from oceanAcoustics.soundSpeed import air, freshWater, seaWater
from oceanAcoustics.tables.coefficientTables import speedAlgorithmValidity
from oceanAcoustics.utilsOA import fuelStabilizer


######################################################################
# -- Shared Parameters -- #
######################################################################

TEMPERATURE = Parameter('temperatureC', 'C', 'temperature')
SALINITY = Parameter('salinity', 'ppt', 'salinity')
DEPTH_M = Parameter('depthM', 'm', 'depth')
DEPTH_KM = Parameter('depthKm', 'km', 'depth')
LATITUDE = Parameter('latitudeDeg', 'deg', 'latitude')
FREQUENCY_KHZ = Parameter('frequencyKhz', 'kHz', 'sound frequency')
PH = Parameter('pH', '', 'acidity')
SOUND_SPEED = Parameter('soundSpeed', 'm/s', 'speed of sound')
WAVELENGTH = Parameter('wavelengthM', 'm', 'acoustic wavelength')
THETA = Parameter('thetaRad', 'rad', 'angle to the normal')
CORRECTIVE_TERM = Parameter(
    'correctiveTerm', '', 'optional additive correction', kind=CORRECTION, optional=True,
)

SOUND_SPEED_UNIT = 'm/s'
ABSORPTION_UNIT = 'dB/km'


def _spec(name, function, parameters, resultUnit, citation, description, category, **extra) -> FormulaSpec:
    return FormulaSpec(
        name=name,
        function=function,
        parameters=tuple(parameters),
        resultUnit=resultUnit,
        citation=citation,
        description=description,
        category=category,
        **extra,
    )


######################################################################
# -- Speed of Sound -- #
######################################################################

def _airSpecs() -> list[FormulaSpec]:
    humidity = Parameter('relativeHumidityPct', '%', 'relative humidity')
    airRange = ranges(temperatureC=(-30.0, 43.0))
    citation = 'National Physical Laboratory, Technical Guides - Speed of Sound in Air'
    return [
        _spec('SpeedOfSoundDryAir', air.speedOfSoundDryAir, [TEMPERATURE], SOUND_SPEED_UNIT,
              citation, 'Speed of sound in dry air at one atmosphere', 'soundSpeed'),
        _spec('SpeedOfSoundHumidAir', air.speedOfSoundHumidAir, [TEMPERATURE, humidity], SOUND_SPEED_UNIT,
              citation, 'Speed of sound in humid air', 'soundSpeed', validity=airRange),
        _spec('SpeedOfSoundAir', air.speedOfSoundAir,
              [TEMPERATURE, humidity, Parameter('pressureKpa', 'kPa', 'atmospheric pressure')],
              SOUND_SPEED_UNIT, citation + '; Goff & Gratch (1946)',
              'Speed of sound in humid air at a given pressure', 'soundSpeed', validity=airRange),
    ]


def _freshWaterSpecs() -> list[FormulaSpec]:
    npl = 'National Physical Laboratory (2015), Technical Guides - Speed of Sound in Pure Water'

    def pureWater(name, function, citation, lo, hi, description):
        return _spec(name, function, [TEMPERATURE], SOUND_SPEED_UNIT, citation, description,
                     'soundSpeed', validity=ranges(temperatureC=(lo, hi)))

    return [
        _spec('SpeedOfSoundKinslerEtal', freshWater.speedOfSoundKinslerEtal,
              [Parameter('pressureBar', 'bar', 'gauge pressure'), TEMPERATURE], SOUND_SPEED_UNIT,
              'Kinsler et al. (1982) Fundamentals of Acoustics',
              'Speed of sound in fresh water with pressure', 'soundSpeed',
              validity=speedAlgorithmValidity('SpeedOfSoundKinslerEtal')),
        pureWater('SpeedOfSoundPureWaterLubbersandGraaffSEa', freshWater.speedOfSoundPureWaterLubbersandGraaffSEa,
                  'Lubbers & Graaff (1998) Ultrasound Med. Biol. 24, 1065', 15.0, 35.0,
                  'Pure water, simplified equation (a)'),
        pureWater('SpeedOfSoundPureWaterLubbersandGraaffSEb', freshWater.speedOfSoundPureWaterLubbersandGraaffSEb,
                  'Lubbers & Graaff (1998) Ultrasound Med. Biol. 24, 1065', 10.0, 40.0,
                  'Pure water, simplified equation (b)'),
        pureWater('SpeedOfSoundPureWaterBilaniukWong112', freshWater.speedOfSoundPureWaterBilaniukWong112,
                  'Bilaniuk & Wong (1993) J. Acoust. Soc. Am. 93, 1609', 0.0, 100.0,
                  'Pure water, 112-point fit'),
        pureWater('SpeedOfSoundPureWaterBilaniukWong36', freshWater.speedOfSoundPureWaterBilaniukWong36,
                  'Bilaniuk & Wong (1993) J. Acoust. Soc. Am. 93, 1609', 0.0, 100.0,
                  'Pure water, 36-point fit'),
        pureWater('SpeedOfSoundPureWaterBilaniukWong148', freshWater.speedOfSoundPureWaterBilaniukWong148,
                  'Bilaniuk & Wong (1993) J. Acoust. Soc. Am. 93, 1609', 0.0, 100.0,
                  'Pure water, 148-point fit'),
        pureWater('SpeedOfSoundPureWaterMarczak', freshWater.speedOfSoundPureWaterMarczak,
                  'Marczak (1997) J. Acoust. Soc. Am. 102, 2776', 0.0, 95.0,
                  'Pure water, Marczak fit'),
        _spec('SpeedOfSoundPureWaterBelogolskiiSekoyanEtal', freshWater.speedOfSoundPureWaterBelogolskiiSekoyanEtal,
              [TEMPERATURE, Parameter('pressureMPa', 'MPa', 'absolute pressure')], SOUND_SPEED_UNIT,
              "Belogol'skii, Sekoyan et al. (1999) Measurement Techniques 42; " + npl,
              'Pure water with pressure', 'soundSpeed',
              validity=speedAlgorithmValidity('SpeedOfSoundPureWaterBelogolskiiSekoyanEtal')),
        pureWater('SpeedOfSoundFreshWaterGrossoMader', freshWater.speedOfSoundFreshWaterGrossoMader,
                  'Del Grosso & Mader (1972) J. Acoust. Soc. Am. 52, 1442; ' + npl, 0.0, 95.0,
                  'Fresh water at atmospheric pressure'),
    ]


def _seaWaterSpecs() -> list[FormulaSpec]:
    pressureKgCm2 = Parameter('pressureKgCm2', 'kg/cm^2', 'pressure')
    pressureDbar = Parameter('pressureDbar', 'dbar', 'gauge pressure')
    lovett = 'Lovett (1978) J. Acoust. Soc. Am. 63, 1713'

    def tabulated(name, function, parameters, citation, description):
        return _spec(name, function, parameters, SOUND_SPEED_UNIT, citation, description,
                     'soundSpeed', validity=speedAlgorithmValidity(name))

    return [
        tabulated('SpeedOfSoundSeaWaterLeroy69', seaWater.speedOfSoundSeaWaterLeroy69,
                  [DEPTH_M, SALINITY, TEMPERATURE],
                  'Leroy (1969) J. Acoust. Soc. Am. 46, 216', 'Sea water, Leroy 1969'),
        tabulated('SpeedOfSoundSeaWaterMackenzie', seaWater.speedOfSoundSeaWaterMackenzie,
                  [DEPTH_M, SALINITY, TEMPERATURE],
                  'Mackenzie (1981) J. Acoust. Soc. Am. 70, 807', 'Sea water, nine-term equation'),
        tabulated('SpeedOfSoundSeaWaterCoppens', seaWater.speedOfSoundSeaWaterCoppens,
                  [DEPTH_KM, SALINITY, TEMPERATURE],
                  'Coppens (1981) J. Acoust. Soc. Am. 69, 862', 'Sea water, Coppens'),
        tabulated('SpeedOfSoundSeaWaterDelGrosso', seaWater.speedOfSoundSeaWaterDelGrosso,
                  [SALINITY, TEMPERATURE, pressureKgCm2],
                  'Del Grosso (1974) J. Acoust. Soc. Am. 56, 1084', 'Sea water, nineteen-term equation'),
        tabulated('SpeedOfSoundSeaWaterChenAndMillero', seaWater.speedOfSoundSeaWaterChenAndMillero,
                  [SALINITY, TEMPERATURE, Parameter('pressureBar', 'bar', 'gauge pressure')],
                  'Chen & Millero (1977) J. Acoust. Soc. Am. 62, 1129', 'Sea water, UNESCO equation'),
        tabulated('SpeedOfSoundSeaWaterMedwin', seaWater.speedOfSoundSeaWaterMedwin,
                  [TEMPERATURE, DEPTH_M, SALINITY],
                  'Medwin (1975) J. Acoust. Soc. Am. 58, 1318', 'Sea water, simple equation'),
        _spec('SpeedOfSoundSeaWaterSkone', seaWater.speedOfSoundSeaWaterSkone,
              [TEMPERATURE, DEPTH_M, SALINITY], SOUND_SPEED_UNIT,
              'Skone et al. (2002); Lurton (2002) An Introduction to Underwater Acoustics',
              'Sea water, range-selected Leroy/Medwin/Mackenzie form', 'soundSpeed',
              rules=seaWater.SKONE_RULES),
        tabulated('SpeedOfSoundSeaWaterWilson', seaWater.speedOfSoundSeaWaterWilson,
                  [TEMPERATURE, SALINITY, Parameter('pressureMPa', 'MPa', 'hydrostatic pressure')],
                  'Wilson (1960) J. Acoust. Soc. Am. 32, 641', 'Sea water, Wilson'),
        tabulated('SpeedOfSoundSeaWaterFryeAndPugh', seaWater.speedOfSoundSeaWaterFryeAndPugh,
                  [TEMPERATURE, SALINITY, pressureKgCm2],
                  'Frye & Pugh (1971) J. Acoust. Soc. Am. 50, 384', 'Sea water, Frye & Pugh'),
        _spec('SpeedOfSoundSeaWaterLovett1', seaWater.speedOfSoundSeaWaterLovett1,
              [TEMPERATURE, SALINITY, pressureDbar], SOUND_SPEED_UNIT, lovett,
              'Sea water, Lovett merged equation (a)', 'soundSpeed'),
        _spec('SpeedOfSoundSeaWaterLovett2', seaWater.speedOfSoundSeaWaterLovett2,
              [TEMPERATURE, SALINITY, pressureDbar], SOUND_SPEED_UNIT, lovett,
              'Sea water, Lovett merged equation (b)', 'soundSpeed'),
        _spec('SpeedOfSoundSeaWaterLovett3', seaWater.speedOfSoundSeaWaterLovett3,
              [TEMPERATURE, SALINITY, pressureDbar], SOUND_SPEED_UNIT, lovett,
              'Sea water, Lovett merged equation (c)', 'soundSpeed'),
        _spec('SpeedOfSoundSeaWaterLeroyEtAl2008', seaWater.speedOfSoundSeaWaterLeroyEtAl2008,
              [TEMPERATURE, SALINITY, DEPTH_M, LATITUDE], SOUND_SPEED_UNIT,
              'Leroy, Robinson & Goldsmith (2008) J. Acoust. Soc. Am. 124, 2774',
              'Sea water, all-oceans equation', 'soundSpeed'),
        _spec('SpeedOfSound', waves.speedOfSound,
              [WAVELENGTH, Parameter('frequencyHz', 'Hz', 'frequency')], SOUND_SPEED_UNIT,
              'Waite (2002) Sonar for Practising Engineers', 'Speed of sound from wavelength and frequency',
              'soundSpeed'),
    ]


######################################################################
# -- Absorption -- #
######################################################################

def _absorptionSpecs() -> list[FormulaSpec]:
    francoisGarrison = 'Francois & Garrison (1982) J. Acoust. Soc. Am. 72, 1879'
    waite = 'Waite (2002) Sonar for Practising Engineers, p. 47'
    return [
        _spec('AbsorptionSoundSeaWaterFrancoisGarrison', absorption.absorptionSoundSeaWaterFrancoisGarrison,
              [FREQUENCY_KHZ, TEMPERATURE, SALINITY, DEPTH_M, PH], ABSORPTION_UNIT, francoisGarrison,
              'Absorption in sea water (boric acid, MgSO4, pure water)', 'absorption'),
        _spec('AbsorptionSoundFreshWaterFrancoisGarrison', absorption.absorptionSoundFreshWaterFrancoisGarrison,
              [FREQUENCY_KHZ, TEMPERATURE, DEPTH_M], ABSORPTION_UNIT, francoisGarrison,
              'Absorption in fresh water (pure-water term)', 'absorption'),
        _spec('AbsorptionAlphaFisherSimmons', absorption.absorptionAlphaFisherSimmons,
              [FREQUENCY_KHZ, TEMPERATURE, DEPTH_M], ABSORPTION_UNIT,
              'Fisher & Simmons (1977) J. Acoust. Soc. Am. 62, 558',
              'Absorption in sea water at S = 35, pH = 8', 'absorption'),
        _spec('AbsorptionAlphaAinslieMcColm', absorption.absorptionAlphaAinslieMcColm,
              [FREQUENCY_KHZ, TEMPERATURE, SALINITY, DEPTH_M, PH], ABSORPTION_UNIT,
              'Ainslie & McColm (1998) J. Acoust. Soc. Am. 103, 1671',
              'Simplified absorption in sea water', 'absorption'),
        _spec('MolecularRelaxationAttenuationCoeficientApproximation',
              absorption.molecularRelaxationAttenuationApproximation,
              [FREQUENCY_KHZ], ABSORPTION_UNIT, waite,
              'Rule-of-thumb absorption 0.05 f^1.4', 'absorption'),
        _spec('MolecularRelaxationAttenuationCoeficient', absorption.molecularRelaxationAttenuation,
              [TEMPERATURE, FREQUENCY_KHZ], ABSORPTION_UNIT, waite,
              'Tabulated molecular relaxation absorption (exact keys only)', 'absorption'),
    ]


######################################################################
# -- Depth and Pressure -- #
######################################################################

def _depthPressureSpecs() -> list[FormulaSpec]:
    pressureMPa = Parameter('pressureMPa', 'MPa', 'gauge pressure')
    leroyParthiot = 'Leroy & Parthiot (1998) J. Acoust. Soc. Am. 103, 1346'
    leroy69 = 'Leroy (1969) J. Acoust. Soc. Am. 46, 216'
    return [
        _spec('InternationalFormulaForGravity', conversions.internationalFormulaForGravity,
              [LATITUDE, CORRECTIVE_TERM], 'm/s^2', 'International gravity formula (1967); ' + leroyParthiot,
              'Gravity at sea level by latitude', 'depthPressure'),
        _spec('PressureToDepthLeroyParthiot', conversions.pressureToDepthLeroyParthiot,
              [pressureMPa, LATITUDE, CORRECTIVE_TERM], 'm', leroyParthiot,
              'Depth from gauge pressure', 'depthPressure'),
        _spec('DepthToPressureLeroyParthiot', conversions.depthToPressureLeroyParthiot,
              [DEPTH_M, LATITUDE, CORRECTIVE_TERM], 'MPa', leroyParthiot,
              'Gauge pressure from depth', 'depthPressure'),
        _spec('DepthFromPressureInverseLeroyParthiot', conversions.depthFromPressureInverseLeroyParthiot,
              [pressureMPa, LATITUDE], 'm', leroyParthiot,
              'Exact numeric inverse of DepthToPressureLeroyParthiot', 'depthPressure'),
        _spec('PressureToDepthSaundersFofonoff', conversions.pressureToDepthSaundersFofonoff,
              [Parameter('pressureDbar', 'dbar', 'gauge pressure'), LATITUDE], 'm',
              'Saunders & Fofonoff (1976) Deep-Sea Research 23, 109',
              'Depth from pressure (UNESCO 1983)', 'depthPressure'),
        _spec('SpeedOfSoundSeaWaterLeroy68', simplifiedPressure.pressureLeroy68,
              [DEPTH_M, LATITUDE], 'Pa', 'Leroy (1968) J. Acoust. Soc. Am. 44, 651',
              'Absolute hydrostatic pressure (historical name)', 'depthPressure'),
        _spec('PressureModifiedSimplifiedLeroy', simplifiedPressure.pressureModifiedSimplifiedLeroy,
              [DEPTH_M, LATITUDE], 'dbar', 'Lovett (1978) J. Acoust. Soc. Am. 63, 1713',
              'Gauge pressure, modified Leroy law', 'depthPressure'),
        _spec('PressureSimplifiedLeroy', simplifiedPressure.pressureSimplifiedLeroy,
              [DEPTH_M, LATITUDE], 'kg/cm^2', leroy69,
              'Absolute pressure, simplified law', 'depthPressure'),
        _spec('PressureBlackSeaSimplifiedLeroy', simplifiedPressure.pressureBlackSeaSimplifiedLeroy,
              [DEPTH_M], 'kg/cm^2', leroy69, 'Absolute pressure in the Black Sea', 'depthPressure'),
        _spec('PressureBalticSimplifiedLeroy', simplifiedPressure.pressureBalticSimplifiedLeroy,
              [DEPTH_M], 'kg/cm^2', leroy69, 'Absolute pressure in the Baltic', 'depthPressure'),
    ]


######################################################################
# -- Sonar -- #
######################################################################

def _sonarSpecs() -> list[FormulaSpec]:
    waite = 'Waite (2002) Sonar for Practising Engineers'
    jensen = 'Jensen et al. (2011) Computational Ocean Acoustics'
    density = Parameter('density', 'kg/m^3', 'medium density')
    intensity = Parameter('intensity', 'W/m^2', 'source intensity at the standard range')
    referenceIntensity = Parameter('referenceIntensity', 'W/m^2', 'reference intensity')
    powerW = Parameter('powerW', 'W', 'radiated acoustic power')
    directivityIndex = Parameter('directivityIndex', 'dB', 'transmit directivity index')
    voltage = Parameter('voltage', 'V', 'drive or output voltage')
    spectrumLevel = Parameter('spectrumLevel', 'dB', 'spectrum level')
    rangeM = Parameter('rangeM', 'm', 'range')
    radiusM = Parameter('radiusM', 'm', 'radius')
    lengthM = Parameter('lengthM', 'm', 'length')
    sourceLevel = Parameter('sourceLevel', 'dB', 'source level')
    propagationLoss = Parameter('propagationLoss', 'dB', 'one-way propagation loss')
    targetStrengthDb = Parameter('targetStrength', 'dB', 'target strength')
    noiseLevel = Parameter('noiseLevel', 'dB', 'noise level')
    detectionThreshold = Parameter('detectionThreshold', 'dB', 'detection threshold')
    area = Parameter('radiatingSurfaceArea', 'm^2', 'radiating surface area')
    threshold = Parameter('cavitationThreshold', 'W/m^2', 'cavitation threshold intensity')

    def sonar(name, function, parameters, unit, description, citation=waite):
        return _spec(name, function, parameters, unit, citation, description, 'sonar')

    return [
        # Plane waves and geometry
        sonar('PlaneWavePressure', waves.planeWavePressure,
              [density, SOUND_SPEED, Parameter('particleVelocity', 'm/s', 'particle velocity')],
              'Pa', 'Acoustic pressure of a plane wave'),
        sonar('PlaneWaveIntensity', waves.planeWaveIntensity,
              [Parameter('pressurePa', 'Pa', 'acoustic pressure'), density, SOUND_SPEED],
              'W/m^2', 'Intensity of a plane wave'),
        sonar('RangeResolutionMonotonic', waves.rangeResolutionMonotonic,
              [Parameter('pulseDurationS', 's', 'pulse duration'), SOUND_SPEED],
              'm', 'Range resolution of a single-frequency pulse'),
        sonar('RangeResolutionCHIRP', waves.rangeResolutionCHIRP,
              [Parameter('bandwidthHz', 'Hz', 'pulse bandwidth'), SOUND_SPEED],
              'm', 'Range resolution of a CHIRP pulse'),
        sonar('CutoffFrequencyWater', waves.cutoffFrequencyWater, [SOUND_SPEED, DEPTH_M],
              'Hz', 'Cutoff frequency of a water channel'),
        sonar('CutoffFrequencyShallowWater', waves.cutoffFrequencyShallowWater,
              [Parameter('soundSpeedWater', 'm/s', 'speed of sound in water'),
               Parameter('soundSpeedBottom', 'm/s', 'speed of sound in the bottom'), DEPTH_M],
              'Hz', 'Lowest-mode cutoff frequency of a shallow-water waveguide', citation=jensen),

        # Levels
        sonar('SourceLevel', levels.sourceLevel, [intensity, referenceIntensity], 'dB', 'Source level'),
        sonar('SLomnidirectionalProjector', levels.slOmnidirectionalProjector, [powerW],
              'dB', 'Source level of an omnidirectional projector'),
        sonar('TransmitDirectivityIndex', levels.transmitDirectivityIndex,
              [Parameter('intensityDirectional', 'W/m^2', 'on-axis intensity of the directional source'),
               Parameter('intensityOmnidirectional', 'W/m^2', 'intensity of an omnidirectional source')],
              'dB', 'Transmit directivity index'),
        sonar('SLdirectionalProjector', levels.slDirectionalProjector, [powerW, directivityIndex],
              'dB', 'Source level of a directional projector'),
        sonar('CavitationThresholdEstimateFunctionOfDepth', levels.cavitationThresholdFromDepth,
              [DEPTH_M], '', 'Cavitation threshold estimate from depth'),
        sonar('CavitationThresholdEstimateFunctionOfRadiatedAcousticPowerIntensity',
              levels.cavitationThresholdFromIntensity,
              [Parameter('intensity', '', 'radiated acoustic power intensity')],
              '', 'Cavitation threshold estimate from radiated intensity'),
        sonar('MaximumRadiatedPowerToAvoidCavitation', levels.maximumRadiatedPowerToAvoidCavitation,
              [area, threshold], 'W', 'Maximum radiated power without cavitation'),
        sonar('SourceLevelToAvoidCavitation', levels.sourceLevelToAvoidCavitation,
              [area, threshold, directivityIndex], 'dB', 'Highest source level without cavitation'),
        sonar('ProjectorSensitivityVoltage', levels.projectorSensitivityVoltage,
              [intensity, referenceIntensity, voltage], 'dB', 'Projector transmitting response per volt'),
        sonar('ProjectorSensitivityPower', levels.projectorSensitivityPower,
              [intensity, referenceIntensity, powerW], 'dB', 'Projector transmitting response per watt'),
        sonar('HydrophoneSensitivity', levels.hydrophoneSensitivity,
              [Parameter('pressureUpa', 'uPa', 'acoustic pressure'), voltage],
              'dB re 1 V/uPa', 'Hydrophone receiving sensitivity'),
        sonar('BandLevelFlatSpectrum', levels.bandLevelFlatSpectrum,
              [spectrumLevel, Parameter('bandwidthHz', 'Hz', 'bandwidth')], 'dB', 'Band level of a flat spectrum'),
        sonar('BandLevelFromCompleteBand', levels.bandLevelFromCompleteBand,
              [spectrumLevel, Parameter('lowerFrequencyHz', 'Hz', 'lower band edge'),
               Parameter('upperFrequencyHz', 'Hz', 'upper band edge')],
              'dB', 'Band level between two frequencies'),

        # Propagation
        sonar('PropagationLoss', propagation.propagationLoss,
              [Parameter('sourceIntensity', 'W/m^2', 'intensity at 1 m'),
               Parameter('receivedIntensity', 'W/m^2', 'intensity at the receiver')],
              'dB', 'Propagation loss'),
        sonar('PowerSphericalSpreadingLaw', propagation.powerSphericalSpreadingLaw,
              [rangeM, Parameter('intensity', 'W/m^2', 'intensity at range r')], 'W',
              'Power through a sphere of radius r'),
        sonar('PLsphericalSpreadingLaw', propagation.plSphericalSpreadingLaw, [rangeM],
              'dB', 'Spherical spreading loss'),
        sonar('PowerCylindricalSpreadingLaw', propagation.powerCylindricalSpreadingLaw,
              [rangeM, Parameter('layerThicknessM', 'm', 'distance between the bounding planes'),
               Parameter('intensity', 'W/m^2', 'intensity at range r')],
              'W', 'Power through a cylinder between two planes'),
        sonar('PLcylindricalSpreadingLaw', propagation.plCylindricalSpreadingLaw, [rangeM],
              'dB', 'Cylindrical spreading loss'),
        sonar('PLSphericalSpreadingAndAbsorption', propagation.plSphericalSpreadingAndAbsorption,
              [rangeM, Parameter('absorptionDbPerKm', 'dB/km', 'absorption coefficient')],
              'dB', 'Spherical spreading plus absorption loss'),

        # Target strength
        sonar('TargetStrength', targetStrength.targetStrength,
              [Parameter('reflectedIntensity', 'W/m^2', 'reflected intensity at 1 m'),
               Parameter('incidentIntensity', 'W/m^2', 'incident intensity')],
              'dB', 'Target strength'),
        sonar('PeakTS', targetStrength.peakTargetStrength,
              [Parameter('reflectedPressure', 'Pa', 'peak reflected pressure at 1 m'),
               Parameter('incidentPressure', 'Pa', 'peak incident pressure')],
              'dB', 'Peak target strength'),
        sonar('TargetStrengthSphere', targetStrength.targetStrengthSphere, [radiusM],
              'dB', 'Target strength of a sphere'),
        sonar('TargetStrengthConvexSurface', targetStrength.targetStrengthConvexSurface,
              [Parameter('radius1M', 'm', 'first principal radius'),
               Parameter('radius2M', 'm', 'second principal radius')],
              'dB', 'Target strength of a convex surface'),
        sonar('TargetStrengthPlateAnyShape', targetStrength.targetStrengthPlateAnyShape,
              [Parameter('areaM2', 'm^2', 'plate area'), WAVELENGTH],
              'dB', 'Target strength of a plate at normal incidence'),
        sonar('TargetStrengthRectangularPlateNormal', targetStrength.targetStrengthRectangularPlateNormal,
              [lengthM, Parameter('widthM', 'm', 'width'), WAVELENGTH],
              'dB', 'Target strength of a rectangular plate at normal incidence'),
        sonar('TargetStrengthRectangularPlateThetaToNormal',
              targetStrength.targetStrengthRectangularPlateThetaToNormal,
              [lengthM, Parameter('widthM', 'm', 'width'), WAVELENGTH, THETA],
              'dB', 'Target strength of a rectangular plate off normal'),
        sonar('TargetStrengthCircularPlateNormal', targetStrength.targetStrengthCircularPlateNormal,
              [radiusM, WAVELENGTH], 'dB', 'Target strength of a circular plate at normal incidence'),
        sonar('TargetStrengthCylinderNormal', targetStrength.targetStrengthCylinderNormal,
              [radiusM, lengthM, WAVELENGTH], 'dB', 'Target strength of a cylinder at normal incidence'),
        sonar('TargetStrengthCylinderThetaToNormal', targetStrength.targetStrengthCylinderThetaToNormal,
              [radiusM, lengthM, WAVELENGTH, THETA], 'dB', 'Target strength of a cylinder off normal'),

        # Sonar equations
        sonar('SonarEquation', sonarEquation.sonarEquation,
              [sourceLevel, propagationLoss, targetStrengthDb], 'dB', 'Echo level'),
        sonar('BasicSonarEquation', sonarEquation.basicSonarEquation,
              [Parameter('signalLevel', 'dB', 'signal level'), noiseLevel, detectionThreshold],
              'dB', 'Basic sonar equation'),
        sonar('BasicPassiveSonarEquation', sonarEquation.basicPassiveSonarEquation,
              [sourceLevel, propagationLoss, noiseLevel], 'dB', 'Passive signal-to-noise'),
        sonar('BasicActiveSonarEquation', sonarEquation.basicActiveSonarEquation,
              [sourceLevel, targetStrengthDb, propagationLoss, noiseLevel, detectionThreshold],
              'dB', 'Active signal excess'),
        sonar('DetectionIndex', sonarEquation.detectionIndex,
              [Parameter('signal', '', 'signal samples', kind=ARRAY),
               Parameter('noise', '', 'noise samples', kind=ARRAY)],
              '', 'Detection index of sampled signal in noise'),
    ]


######################################################################
# -- Utilities -- #
######################################################################

def _utilitySpecs() -> list[FormulaSpec]:
    return [
        _spec('fuelStabilizer', fuelStabilizer,
              [Parameter('litersFuel', 'L', 'fuel volume'),
               Parameter('mlStabilizer', 'mL', 'stabilizer per label dose', optional=True, default=25.0),
               Parameter('litersFuelPerDose', 'L', 'fuel treated per label dose', optional=True, default=20.0),
               Parameter('mlPerDrop', 'mL', 'volume of one drop', optional=True, default=0.05)],
              'mL, drops', 'Product label dosing (25 mL per 20 L)',
              'Fuel stabilizer dose in millilitres and drops', 'utility'),
    ]


def buildDefaultCatalog(logDiagnostics: bool = True) -> FormulaCatalog:
    '''Fresh catalog holding every bundled formula.'''
    catalog = FormulaCatalog(logDiagnostics=logDiagnostics)
    for group in (_airSpecs, _freshWaterSpecs, _seaWaterSpecs, _absorptionSpecs,
                  _depthPressureSpecs, _sonarSpecs, _utilitySpecs):
        for spec in group():
            catalog.register(spec)
    return catalog


CATALOG = buildDefaultCatalog()
