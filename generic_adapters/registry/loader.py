"""
File-backed source for external framework configurations.

Reads the `multiKueue.externalFrameworks` list from a YAML or JSON
configuration file and feeds it to a ConfigManager.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from generic_adapters.common.config import load_settings
from generic_adapters.common.logging import log_event

from .errors import BatchPartialFailure
from .manager import ConfigManager

logger = logging.getLogger(__name__)


def read_config_file(p: Path) -> dict[str, Any]:
    raw = p.read_text(encoding="utf-8")
    if not raw.strip():
        return {}
    if p.suffix.lower() == ".json":
        doc = json.loads(raw)
    else:
        doc = yaml.safe_load(raw)
    if doc is None:
        return {}
    if not isinstance(doc, dict):
        raise ValueError(f"config file must be a mapping: {p}")
    return doc


def extract_external_frameworks(doc: dict[str, Any]) -> list[Any]:
    """
    Pull the framework list out of a configuration document.

    Supported:
    - multiKueue: {externalFrameworks: [...]}   (cluster configuration file)
    - externalFrameworks: [...]                 (standalone list)
    """
    section = doc.get("multiKueue")
    if section is None:
        section = doc
    if not isinstance(section, dict):
        raise ValueError("multiKueue must be a mapping")
    rows = section.get("externalFrameworks")
    if rows is None:
        return []
    if not isinstance(rows, list):
        raise ValueError("externalFrameworks must be a list")
    return rows


def load_external_frameworks(path: Optional[Path | str] = None) -> list[Any]:
    p = Path(path) if path is not None else load_settings().config_path
    rows = extract_external_frameworks(read_config_file(p))
    logger.debug("read %d external framework entries from %s", len(rows), p)
    return rows


def load_registry(
    path: Optional[Path | str] = None,
    *,
    manager: Optional[ConfigManager] = None,
    strict: Optional[bool] = None,
) -> ConfigManager:
    """
    Build (or refresh) a ConfigManager from a configuration file.

    With `strict` (default from EXTERNAL_FRAMEWORKS_STRICT) a partially invalid
    batch raises BatchPartialFailure; otherwise it is logged and the valid
    entries are kept.
    """
    settings = load_settings()
    p = Path(path) if path is not None else settings.config_path
    strict_mode = settings.strict if strict is None else strict
    mgr = manager if manager is not None else ConfigManager()

    rows = load_external_frameworks(p)
    try:
        mgr.load(rows)
    except BatchPartialFailure as e:
        if strict_mode:
            raise
        log_event(
            logger,
            "external_framework.partial_load",
            severity="WARNING",
            message=str(e),
            config_path=str(p),
            rejected=e.count,
        )
    return mgr
