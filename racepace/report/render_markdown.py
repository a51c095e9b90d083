from __future__ import annotations
from typing import Any, Dict, List, Optional

from racepace.io.durations import format_duration


def _clock(value: Optional[int], include_hours_always: bool = False) -> str:
    if value is None:
        return '_not set_'
    return format_duration(value, include_hours_always=include_hours_always)


def _splits_table(rows: List[Dict[str, Any]], distance_unit: str) -> str:
    if not rows:
        return '_None_'
    lines = [
        f'| Split | Distance ({distance_unit}) | Even | Negative | Positive |',
        '|---|---|---|---|---|',
    ]
    for row in rows:
        lines.append(
            f"| {row['split']} | {row['distance']} "
            f"| {_clock(row['even'])} ({_clock(row['even_elapsed'])}) "
            f"| {_clock(row['negative'])} ({_clock(row['negative_elapsed'])}) "
            f"| {_clock(row['positive'])} ({_clock(row['positive_elapsed'])}) |"
        )
    return '\n'.join(lines)


def render_markdown(payload: Dict[str, Any], include_hours_always: bool = False) -> str:
    title = payload.get('title', 'Race')
    split_unit = payload.get('split_unit', 'km')
    distance_unit = payload.get('distance_unit', 'm')

    duration = _clock(payload.get('duration_s'), include_hours_always)
    pace = payload.get('average_pace_s')
    pace_text = f'{_clock(pace)}/{split_unit}' if pace is not None else '_n/a_'
    speed = payload.get('speed')
    speed_text = f"{speed} {distance_unit}/s ({payload.get('speed_per_hour')} {payload.get('speed_unit')})" \
        if speed is not None else '_n/a_'

    md = f"""# Pacing Report — {title}

---

## Summary
- **Scale:** {payload.get('scale')}
- **Distance:** {payload.get('distance')} {distance_unit} ({payload.get('distance_split_units')} {split_unit})
- **Duration:** {duration}
- **Average pace:** {pace_text}
- **Speed:** {speed_text}
- **Splits:** {payload.get('num_splits')} x {payload.get('split_distance')} {distance_unit}
- **Degree:** {payload.get('degree_s')}s

---

## Splits
Pace per split, elapsed time in parentheses.

{_splits_table(payload.get('splits', []), distance_unit)}
"""
    return md
