from __future__ import annotations
import logging
from datetime import timedelta
from typing import List

from racepace.errors import InvalidInputError, ZeroDistanceError, ZeroDurationError
from racepace.io.durations import DurationLike, to_seconds

logger = logging.getLogger(__name__)


def _require_distance(distance: int) -> None:
    if distance <= 0:
        raise ZeroDistanceError()


def num_splits(distance: int, split_distance: int) -> int:
    '''
    Number of splits covering the distance, rounded up: 42195m -> 42 full km + 1 partial = 43
    '''
    _require_distance(distance)
    full, rem = divmod(distance, split_distance)
    return full + (1 if rem > 0 else 0)


def average_pace(distance: int, duration_s: int, split_distance: int) -> timedelta:
    '''
    Time to cover one split distance at the overall average speed,
    floored to whole seconds.
    '''
    _require_distance(distance)
    return timedelta(seconds=(split_distance * duration_s) // distance)


def speed(distance: int, duration_s: int) -> float:
    '''Native units per second (m/s or yd/s).'''
    _require_distance(distance)
    if duration_s <= 0:
        raise ZeroDurationError()
    return distance / duration_s


def speed_per_hour(distance: int, duration_s: int, split_distance: int) -> float:
    '''Split units per hour (km/h or mph).'''
    _require_distance(distance)
    if duration_s <= 0:
        raise ZeroDurationError()
    return (distance / split_distance) / (duration_s / 3600)


def duration_from_pace(distance: int, pace: DurationLike, split_distance: int) -> int:
    '''
    Seconds needed to run the distance at pace-per-split. The partial
    last split is prorated and the total floored:
        42195m @ 341s/km -> 14388s
    '''
    if distance < 0:
        raise InvalidInputError(f'distance cannot be negative: {distance}')
    return (distance * to_seconds(pace)) // split_distance


def splits_with_pace(count: int, pace: DurationLike) -> List[timedelta]:
    step = timedelta(seconds=to_seconds(pace))
    return [step for _ in range(count)]


def _stepped_splits(count: int, start_s: int, step: int, degree_s: int) -> List[timedelta]:
    # distinct paces from one extreme to the other, average included
    variation = 2 * degree_s + 1
    # splits held at the same pace before stepping
    block = count // variation

    if count > 0 and block == 0:
        logger.warning(
            "Only %s split(s) for a degree of %ss; schedule collapses to a single step.",
            count, degree_s,
        )
    logger.debug(
        "Stepped schedule: count=%s start=%ss step=%s variation=%s block=%s",
        count, start_s, step, variation, block,
    )

    out: List[timedelta] = []
    pace = start_s
    block_count = 0
    for _ in range(count):
        if block_count == block:
            # the first split of the new block already runs at the new pace
            pace += step
            block_count = 0
        if pace < 0:
            raise InvalidInputError(f'split pace would drop below zero (degree {degree_s}s)')
        out.append(timedelta(seconds=pace))
        block_count += 1
    return out


def negative_splits(count: int, average: DurationLike, degree: DurationLike) -> List[timedelta]:
    '''
    Starts `degree` seconds slower than average and gets 1s faster every block.
    '''
    degree_s = to_seconds(degree)
    start = to_seconds(average) + degree_s
    return _stepped_splits(count, start, -1, degree_s)


def positive_splits(count: int, average: DurationLike, degree: DurationLike) -> List[timedelta]:
    '''
    Starts `degree` seconds faster than average and gets 1s slower every block.
    '''
    degree_s = to_seconds(degree)
    start = to_seconds(average) - degree_s
    if start < 0:
        raise InvalidInputError(
            f'degree {degree_s}s is larger than the average pace {to_seconds(average)}s'
        )
    return _stepped_splits(count, start, 1, degree_s)
