from __future__ import annotations
import math
import numbers
from datetime import timedelta
from typing import Union

from racepace.errors import InvalidInputError

DurationLike = Union[timedelta, int, float]


def to_seconds(value: DurationLike) -> int:
    '''
    Whole seconds of a timedelta or a plain number of seconds.
    Sub-second precision is truncated.
    '''
    if isinstance(value, bool):
        raise InvalidInputError(f'Not a duration: {value!r}')
    if isinstance(value, timedelta):
        secs = value.total_seconds()
    elif isinstance(value, numbers.Real):
        secs = float(value)
    else:
        raise InvalidInputError(f'Not a duration: {value!r}')

    if math.isnan(secs) or math.isinf(secs):
        raise InvalidInputError(f'duration must be finite: {value!r}')
    if secs < 0:
        raise InvalidInputError(f'duration cannot be negative: {value!r}')
    return int(secs)


def _as_timedelta(value: DurationLike) -> timedelta:
    return timedelta(seconds=to_seconds(value))


def to_duration(hours: int, minutes: int, seconds: int) -> timedelta:
    '''
    Builds a duration from clock parts, e.g. to_duration(4, 5, 19) -> 04:05:19 (14719s)
    '''
    for name, part in (('hours', hours), ('minutes', minutes), ('seconds', seconds)):
        if part < 0:
            raise InvalidInputError(f'{name} cannot be negative: {part}')
    return timedelta(seconds=int(hours) * 3600 + int(minutes) * 60 + int(seconds))


def format_duration(duration: DurationLike, include_hours_always: bool = False) -> str:
    '''
    "MM:SS", or "HH:MM:SS" once there is at least one hour.
    Hours are not wrapped, so 135h renders as "135:59:01".
    '''
    total = to_seconds(duration)
    hours, rem = divmod(total, 3600)
    mins, secs = divmod(rem, 60)

    if hours == 0 and not include_hours_always:
        return f'{mins:02d}:{secs:02d}'
    return f'{hours:02d}:{mins:02d}:{secs:02d}'


def parse_duration(value) -> timedelta:
    '''
    This accepts either:
        - Seconds numeric
        - h:mm:ss or mm:ss strings
    '''
    if value is None:
        raise InvalidInputError('Missing duration')

    if isinstance(value, timedelta):
        return _as_timedelta(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return _as_timedelta(value)

    s = str(value).strip()
    if not s:
        raise InvalidInputError('Missing duration')

    try:
        if ':' not in s:
            return _as_timedelta(float(s))
        parts = [int(p) for p in s.split(':')]
    except ValueError:
        raise InvalidInputError(f'Unrecognized time format: {value}') from None

    if len(parts) == 2:
        mm, ss = parts
        return to_duration(0, mm, ss)
    if len(parts) == 3:
        hh, mm, ss = parts
        return to_duration(hh, mm, ss)

    raise InvalidInputError(f'Unrecognized time format: {value}')
