from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable

EnvGetter = Callable[[str], str | None]

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _bool_env(name: str, default: bool, *, getenv: EnvGetter = os.getenv) -> bool:
    value = getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _str_env(*names: str, default: str = "", getenv: EnvGetter = os.getenv) -> str:
    for name in names:
        value = getenv(name)
        if value is not None:
            return value.strip()
    return default


def _int_env(
    name: str,
    default: int,
    minimum: int | None = None,
    maximum: int | None = None,
    *,
    getenv: EnvGetter = os.getenv,
) -> int:
    value = getenv(name)
    if value is None:
        parsed = default
    else:
        try:
            parsed = int(value.strip())
        except ValueError:
            parsed = default

    if minimum is not None and parsed < minimum:
        parsed = minimum
    if maximum is not None and parsed > maximum:
        parsed = maximum
    return parsed


@dataclass(frozen=True)
class Settings:
    log_level: str
    scale: str
    degree_seconds: int
    include_hours_always: bool

    @classmethod
    def from_env(cls, getenv: EnvGetter = os.getenv) -> "Settings":
        log_level = _str_env("RACEPACE_LOG_LEVEL", "LOG_LEVEL", default="WARNING", getenv=getenv).upper()
        if log_level not in LOG_LEVELS:
            log_level = "WARNING"

        scale = _str_env("RACEPACE_SCALE", default="metric", getenv=getenv).lower()
        if scale not in {"metric", "imperial"}:
            scale = "metric"

        return cls(
            log_level=log_level,
            scale=scale,
            degree_seconds=_int_env("RACEPACE_DEGREE_SECONDS", 5, minimum=0, maximum=600, getenv=getenv),
            include_hours_always=_bool_env("RACEPACE_INCLUDE_HOURS_ALWAYS", False, getenv=getenv),
        )
