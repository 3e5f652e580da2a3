from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_API_DELAY_ENV = "ENERGY_API_DELAY_MS"
_INIT_DELAY_ENV = "APP_INIT_DELAY_MS"
_TODAY_DATE_ENV = "ENERGY_TODAY_DATE_ID"
_DEFAULT_DATE_ENV = "ENERGY_DEFAULT_DATE_ID"
_CHART_WIDTH_ENV = "CHART_WIDTH"
_CHART_HEIGHT_ENV = "CHART_HEIGHT"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    api_delay_ms: int
    init_delay_ms: int
    today_date_id: str
    default_date_id: str
    chart_width: int
    chart_height: int
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_int_env(name: str, default: int, minimum: int = 0) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed >= minimum else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        api_delay_ms=_read_int_env(_API_DELAY_ENV, 800),
        init_delay_ms=_read_int_env(_INIT_DELAY_ENV, 0),
        today_date_id=_read_str_env(_TODAY_DATE_ENV, "22-01-2025"),
        default_date_id=_read_str_env(_DEFAULT_DATE_ENV, "21-01-2025"),
        chart_width=_read_int_env(_CHART_WIDTH_ENV, 343, minimum=1),
        chart_height=_read_int_env(_CHART_HEIGHT_ENV, 178, minimum=1),
        log_level=_read_log_level("INFO"),
    )
