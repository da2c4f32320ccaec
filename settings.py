from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_LOG_LEVEL_ENV = "LOG_LEVEL"
_EVENT_LOG_SUFFIX_ENV = "EVENT_LOG_SUFFIX"
_EVENT_LOG_DIR_ENV = "EVENT_LOG_DIR"
_ECHO_EVENTS_ENV = "ECHO_EVENTS"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str
    event_log_suffix: str
    event_log_dir: Optional[str]
    echo_events: bool


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_optional_env(name: str, default: Optional[str]) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or None


def _read_suffix(default: str) -> str:
    candidate = _read_str_env(_EVENT_LOG_SUFFIX_ENV, default)
    # A suffix containing a path separator would write outside the input's directory.
    if "/" in candidate or "\\" in candidate:
        return default
    return candidate


def _read_bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


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
        log_level=_read_log_level("INFO"),
        event_log_suffix=_read_suffix(".log"),
        event_log_dir=_read_optional_env(_EVENT_LOG_DIR_ENV, None),
        echo_events=_read_bool_env(_ECHO_EVENTS_ENV, False),
    )
