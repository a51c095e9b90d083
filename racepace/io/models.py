from __future__ import annotations
import numbers
from dataclasses import dataclass
from datetime import timedelta
from typing import List, Optional, Sequence

from racepace.errors import InvalidInputError, MissingDurationError
from racepace.io.durations import DurationLike, to_seconds
from racepace.metrics import pacing


@dataclass(frozen=True)
class Scale:
    name: str
    split_distance: int     # base units in one split
    distance_unit: str      # "m" | "yd"
    split_unit: str         # "km" | "mi"
    speed_unit: str         # "km/h" | "mph"


METRIC = Scale(name="metric", split_distance=1000, distance_unit="m", split_unit="km", speed_unit="km/h")
IMPERIAL = Scale(name="imperial", split_distance=1760, distance_unit="yd", split_unit="mi", speed_unit="mph")

SCALES = {s.name: s for s in (METRIC, IMPERIAL)}


def scale_by_name(name: str) -> Scale:
    scale = SCALES.get(str(name).strip().lower())
    if scale is None:
        raise InvalidInputError(f"Unknown scale {name!r}; expected one of: {', '.join(SCALES)}")
    return scale


def _check_distance(distance: int) -> int:
    if isinstance(distance, bool) or not isinstance(distance, numbers.Integral):
        raise InvalidInputError(f'distance must be an integer: {distance!r}')
    if distance < 0:
        raise InvalidInputError(f'distance cannot be negative: {distance}')
    return int(distance)


def _sum_splits(splits: Sequence[DurationLike]) -> int:
    return sum(to_seconds(s) for s in splits)


@dataclass(frozen=True)
class Race:
    distance: int                       # base units of the scale
    duration_s: Optional[int] = None    # None = not set
    scale: Scale = METRIC

    def __post_init__(self) -> None:
        object.__setattr__(self, 'distance', _check_distance(self.distance))
        if self.duration_s is not None:
            object.__setattr__(self, 'duration_s', to_seconds(self.duration_s))

    @classmethod
    def new(cls, distance: int, duration: Optional[DurationLike] = None, scale: Scale = METRIC) -> Race:
        return cls(distance=distance, duration_s=None if duration is None else to_seconds(duration), scale=scale)

    @classmethod
    def from_pace(cls, distance: int, pace: DurationLike, scale: Scale = METRIC) -> Race:
        _check_distance(distance)
        return cls(
            distance=distance,
            duration_s=pacing.duration_from_pace(distance, pace, scale.split_distance),
            scale=scale,
        )

    @classmethod
    def from_splits(cls, splits: Sequence[DurationLike], scale: Scale = METRIC) -> Race:
        return cls(
            distance=len(splits) * scale.split_distance,
            duration_s=_sum_splits(splits),
            scale=scale,
        )

    @property
    def split_distance(self) -> int:
        return self.scale.split_distance

    @property
    def has_duration(self) -> bool:
        return self.duration_s is not None

    @property
    def duration(self) -> timedelta:
        # unset reads as zero; pace/speed refuse to work from it
        return timedelta(seconds=self.duration_s or 0)

    def _known_duration(self) -> int:
        if self.duration_s is None:
            raise MissingDurationError()
        return self.duration_s

    def num_splits(self) -> int:
        return pacing.num_splits(self.distance, self.split_distance)

    def average_pace(self) -> timedelta:
        return pacing.average_pace(self.distance, self._known_duration(), self.split_distance)

    def speed(self) -> float:
        return pacing.speed(self.distance, self._known_duration())

    def speed_per_hour(self) -> float:
        return pacing.speed_per_hour(self.distance, self._known_duration(), self.split_distance)

    def speed_miles_hour(self) -> float:
        if self.scale != IMPERIAL:
            raise InvalidInputError('speed_miles_hour is only defined for imperial races')
        return self.speed_per_hour()

    def splits(self) -> List[timedelta]:
        return self.splits_with_pace(self.average_pace())

    def splits_with_pace(self, pace: DurationLike) -> List[timedelta]:
        return pacing.splits_with_pace(self.num_splits(), pace)

    def negative_splits(self, degree: DurationLike) -> List[timedelta]:
        return pacing.negative_splits(self.num_splits(), self.average_pace(), degree)

    def positive_splits(self, degree: DurationLike) -> List[timedelta]:
        return pacing.positive_splits(self.num_splits(), self.average_pace(), degree)


@dataclass(frozen=True)
class Running:
    '''
    Time spent running, kept apart from the distance it is measured against.
    '''
    duration_s: int

    def __post_init__(self) -> None:
        object.__setattr__(self, 'duration_s', to_seconds(self.duration_s))

    @classmethod
    def new(cls, duration: DurationLike) -> Running:
        return cls(duration_s=to_seconds(duration))

    @classmethod
    def from_pace(cls, race: Race, pace: DurationLike) -> Running:
        return cls(duration_s=pacing.duration_from_pace(race.distance, pace, race.split_distance))

    @classmethod
    def from_splits(cls, splits: Sequence[DurationLike]) -> Running:
        return cls(duration_s=_sum_splits(splits))

    @property
    def duration(self) -> timedelta:
        return timedelta(seconds=self.duration_s)

    def on(self, race: Race) -> Race:
        '''The race evaluated with this running's duration.'''
        return Race(distance=race.distance, duration_s=self.duration_s, scale=race.scale)

    def average_pace(self, race: Race) -> timedelta:
        return self.on(race).average_pace()

    def speed(self, race: Race) -> float:
        return self.on(race).speed()

    def speed_per_hour(self, race: Race) -> float:
        return self.on(race).speed_per_hour()

    def speed_miles_hour(self, race: Race) -> float:
        return self.on(race).speed_miles_hour()

    def splits(self, race: Race) -> List[timedelta]:
        return self.on(race).splits()

    def splits_with_pace(self, race: Race, pace: DurationLike) -> List[timedelta]:
        return race.splits_with_pace(pace)

    def negative_splits(self, race: Race, degree: DurationLike) -> List[timedelta]:
        return self.on(race).negative_splits(degree)

    def positive_splits(self, race: Race, degree: DurationLike) -> List[timedelta]:
        return self.on(race).positive_splits(degree)
