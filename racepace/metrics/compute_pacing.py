from __future__ import annotations
from datetime import timedelta
from typing import Any, Dict, List

import pandas as pd

from racepace.io.distance import to_km, to_mile
from racepace.io.durations import DurationLike, to_seconds
from racepace.io.models import IMPERIAL, Race


def _secs(schedule: List[timedelta]) -> List[int]:
    return [to_seconds(s) for s in schedule]


def _split_marks(race: Race) -> List[int]:
    '''
    Cumulative distance at the end of each split; the last one stops at the finish
    '''
    step = race.split_distance
    return [min((i + 1) * step, race.distance) for i in range(race.num_splits())]


def _distance_in_split_units(race: Race) -> float:
    convert = to_mile if race.scale == IMPERIAL else to_km
    return round(convert(race.distance), 3)


def splits_table(race: Race, degree: DurationLike) -> pd.DataFrame:
    '''
    One row per split with the pace of each schedule and the running clock.
    Pace columns are seconds per split, elapsed columns seconds since the start.
    '''
    schedules = {
        'even': _secs(race.splits()),
        'negative': _secs(race.negative_splits(degree)),
        'positive': _secs(race.positive_splits(degree)),
    }

    df = pd.DataFrame({'split': range(1, race.num_splits() + 1), 'distance': _split_marks(race)})
    for name, paces in schedules.items():
        df[name] = paces
        df[f'{name}_elapsed'] = df[name].cumsum()
    return df


def compute_pacing(race: Race, degree: DurationLike = 0) -> Dict[str, Any]:
    '''
    Produces the payload consumed by the report renderers
    '''
    out: Dict[str, Any] = {
        'scale': race.scale.name,
        'distance': race.distance,
        'distance_unit': race.scale.distance_unit,
        'distance_split_units': _distance_in_split_units(race),
        'split_unit': race.scale.split_unit,
        'speed_unit': race.scale.speed_unit,
        'split_distance': race.split_distance,
        'num_splits': race.num_splits(),
        'degree_s': to_seconds(degree),
        'duration_s': race.duration_s,
    }

    if not race.has_duration:
        return out

    table = splits_table(race, degree)
    out.update({
        'average_pace_s': to_seconds(race.average_pace()),
        'speed': round(race.speed(), 4),           # units/s
        'speed_per_hour': round(race.speed_per_hour(), 2),
        'even_splits': table['even'].tolist(),
        'negative_splits': table['negative'].tolist(),
        'positive_splits': table['positive'].tolist(),
        'splits': table.to_dict(orient='records'),
    })
    return out
