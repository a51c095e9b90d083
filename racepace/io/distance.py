from __future__ import annotations
import math

from racepace.errors import InvalidInputError

METERS_PER_KM = 1000.0
YARDS_PER_MILE = 1760.0
KM_PER_MILE = 1.60934
FEET_PER_METER = 3.28084


def _check(value: float, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f'{name} must be a number: {value!r}')
    if math.isnan(value):
        raise InvalidInputError(f'{name} cannot be NaN')
    if value < 0:
        raise InvalidInputError(f'{name} cannot be negative: {value}')
    return float(value)


def to_km_h(m_s: float) -> float:
    '''meters per second -> kilometers per hour'''
    return _check(m_s, 'speed') * 3.6


def to_mph(y_s: float) -> float:
    '''yards per second -> miles per hour'''
    return _check(y_s, 'speed') * 2.04545


def to_km(m: float) -> float:
    return _check(m, 'distance') / METERS_PER_KM


def to_mile(y: float) -> float:
    return _check(y, 'distance') / YARDS_PER_MILE


def mile_to_km(mile: float) -> float:
    return _check(mile, 'distance') * KM_PER_MILE


def km_to_mile(km: float) -> float:
    return _check(km, 'distance') / KM_PER_MILE


def meter_to_feet(m: float) -> float:
    return _check(m, 'distance') * FEET_PER_METER


def feet_to_meter(f: float) -> float:
    return _check(f, 'distance') / FEET_PER_METER
