from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from services.messages import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES


_REGISTRY_NAME_ENV = "SENSOR_REGISTRY_NAME"
_LANGUAGE_ENV = "SENSOR_REGISTRY_LANGUAGE"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    registry_name: str
    language: str
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_language(default: str) -> str:
    candidate = _read_str_env(_LANGUAGE_ENV, default).lower()
    return candidate if candidate in SUPPORTED_LANGUAGES else default


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
        registry_name=_read_str_env(_REGISTRY_NAME_ENV, "sensor_readings"),
        language=_read_language(DEFAULT_LANGUAGE),
        log_level=_read_log_level("WARNING"),
    )
