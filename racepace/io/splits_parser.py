from __future__ import annotations
from datetime import timedelta
from typing import Iterable, List, Optional

import pandas as pd

from racepace.errors import InvalidInputError
from racepace.io.durations import parse_duration

# Candidate split-time headers (normalized), most specific first
SPLIT_TIME_COLUMNS = [
    "split_time",
    "lap_time",
    "moving_time",
    "time",
    "duration",
    "seconds",
]


def _norm(col: str) -> str:
    return str(col).strip().lower().replace(' ', '_').replace('-', '_')


def parse_split_times(values: Iterable[str]) -> List[timedelta]:
    '''
    "5:53", "0:05:38", "344" -> durations, in order. Blank entries are skipped.
    '''
    splits: List[timedelta] = []
    for raw in values:
        text = str(raw).strip()
        if not text:
            continue
        splits.append(parse_duration(text))
    return splits


def parse_splits_csv(filepath: str) -> List[timedelta]:
    '''
    Read recorded split times from a CSV export, one row per split in race order.
    '''
    try:
        df = pd.read_csv(filepath, dtype=str)
    except pd.errors.EmptyDataError:
        raise InvalidInputError(f"No split times found in {filepath}") from None
    except FileNotFoundError:
        raise InvalidInputError(f"Splits file not found: {filepath}") from None

    col_map = {_norm(c): c for c in df.columns}
    chosen: Optional[str] = None
    for cand in SPLIT_TIME_COLUMNS:
        if cand in col_map:
            chosen = col_map[cand]
            break

    if chosen is None:
        raise InvalidInputError(
            "Could not find a split time column.\n"
            f"Columns found (normalized): {list(col_map.keys())}\n"
            f"Expected one of: {SPLIT_TIME_COLUMNS}"
        )

    values = [v for v in df[chosen].tolist() if not pd.isna(v)]
    splits = parse_split_times(values)
    if not splits:
        raise InvalidInputError(f"No split times found in {filepath}")
    return splits
