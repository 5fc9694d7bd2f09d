# -- Unit Conversion Helpers -- #

'''
Conversion functions between the unit systems used by the formulas.

Each published equation keeps the units its authors fitted it in
(pressure in MPa, bar, decibars or kg/cm^2; frequency in Hz or kHz;
depth in metres or kilometres). These helpers convert at the
boundaries so callers can move between formulas safely.

All helpers accept numpy arrays as well as scalars.
'''

from __future__ import annotations

import numpy as np


######################################################################
# -- Angles -- #
######################################################################

def degreesToRadians(deg: float) -> float:
    '''Convert degrees to radians.'''
    return deg * np.pi / 180.0


def radiansToDegrees(rad: float) -> float:
    '''Convert radians to degrees.'''
    return rad * 180.0 / np.pi


######################################################################
# -- Temperature -- #
######################################################################

def celsiusToKelvin(temperatureC: float) -> float:
    '''Convert degrees Celsius to kelvin.'''
    return temperatureC + 273.15


def kelvinToCelsius(temperatureK: float) -> float:
    '''Convert kelvin to degrees Celsius.'''
    return temperatureK - 273.15


######################################################################
# -- Pressure -- #
######################################################################

def mpaToBar(valueMpa: float) -> float:
    '''Convert megapascals to bar.'''
    return valueMpa * 10.0


def barToMpa(valueBar: float) -> float:
    '''Convert bar to megapascals.'''
    return valueBar * 0.1


def mpaToDecibar(valueMpa: float) -> float:
    '''Convert megapascals to decibars.'''
    return valueMpa * 100.0


def decibarToMpa(valueDbar: float) -> float:
    '''Convert decibars to megapascals.'''
    return valueDbar * 0.01


def kgfPerCm2ToMpa(valueKgCm2: float) -> float:
    '''Convert kilogram-force per square centimetre to megapascals.'''
    return valueKgCm2 * 0.0980665


def mpaToKgfPerCm2(valueMpa: float) -> float:
    '''Convert megapascals to kilogram-force per square centimetre.'''
    return valueMpa / 0.0980665


def pascalToMpa(valuePa: float) -> float:
    '''Convert pascals to megapascals.'''
    return valuePa * 1e-6


######################################################################
# -- Frequency and Length -- #
######################################################################

def khzToHz(valueKhz: float) -> float:
    '''Convert kilohertz to hertz.'''
    return valueKhz * 1e3


def hzToKhz(valueHz: float) -> float:
    '''Convert hertz to kilohertz.'''
    return valueHz * 1e-3


def mToKm(valueM: float) -> float:
    '''Convert metres to kilometres.'''
    return valueM * 1e-3


def kmToM(valueKm: float) -> float:
    '''Convert kilometres to metres.'''
    return valueKm * 1e3
