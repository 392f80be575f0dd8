from __future__ import annotations

import os
from dataclasses import dataclass


def _get_str(name: str, default: str) -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _get_optional_str(name: str) -> str | None:
    v = os.getenv(name)
    if v is None:
        return None
    vv = v.strip()
    return vv or None


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_format: str
    config_path: str | None


def load_settings() -> Settings:
    return Settings(
        log_level=_get_str("LOG_LEVEL", "INFO"),
        log_format=_get_str("LOG_FORMAT", "text").lower(),
        config_path=_get_optional_str("LINEMAP_CONFIG_PATH"),
    )
