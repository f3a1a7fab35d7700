from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_CONFIG_PATH = "configs/external_frameworks.yaml"
LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def _get(env: Mapping[str, str], name: str) -> str | None:
    v = env.get(name)
    if v is None:
        return None
    s = str(v).strip()
    return s if s != "" else None


def _parse_bool(raw: str | None, default: bool = False) -> bool:
    if raw is None:
        return default
    s = str(raw).strip().lower()
    if s in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if s in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default


def _parse_log_level(raw: str | None) -> str:
    s = (raw or "").strip().upper()
    if s == "WARN":
        return "WARNING"
    return s if s in LOG_LEVELS else "INFO"


@dataclass(frozen=True)
class Settings:
    config_path: Path
    strict: bool = True
    log_level: str = "INFO"
    # None lets the log formatter fall back to its own env lookups.
    service_name: Optional[str] = None
    env: Optional[str] = None


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build settings from environment variables.

    - EXTERNAL_FRAMEWORKS_CONFIG: config file path (relative paths resolve against cwd)
    - EXTERNAL_FRAMEWORKS_STRICT: raise on partially invalid batches (default true)
    - LOG_LEVEL: one of LOG_LEVELS, anything else falls back to INFO
    - SERVICE_NAME, ENV: logging fields (unset defers to the log formatter)
    """
    e: Mapping[str, str] = os.environ if env is None else env
    p = Path(_get(e, "EXTERNAL_FRAMEWORKS_CONFIG") or DEFAULT_CONFIG_PATH)
    if not p.is_absolute():
        p = Path.cwd() / p
    return Settings(
        config_path=p,
        strict=_parse_bool(_get(e, "EXTERNAL_FRAMEWORKS_STRICT"), default=True),
        log_level=_parse_log_level(_get(e, "LOG_LEVEL")),
        service_name=_get(e, "SERVICE_NAME"),
        env=_get(e, "ENV"),
    )
