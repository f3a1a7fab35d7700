"""
External framework configuration manager.

Keeps the table canonical GVK string -> ExternalFrameworkConfig that backs the
generic adapters. Every `load` replaces the table; invalid entries are logged
and skipped so one bad entry never hides the rest of the batch.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from pydantic import ValidationError

from generic_adapters.common.logging import log_event
from generic_adapters.schema.gvk import GroupVersionKind, parse_gvk

from .errors import BatchPartialFailure, ExternalFrameworkConfigError
from .models import AdapterHandle, ExternalFrameworkConfig
from .validator import validate_config

logger = logging.getLogger(__name__)

_UNNAMED = "<unnamed>"


def _entry_name(entry: Any) -> str:
    if isinstance(entry, Mapping):
        raw = entry.get("name")
    else:
        raw = getattr(entry, "name", None)
    if raw is None or raw == "":
        return _UNNAMED
    return str(raw)


def _coerce(entry: Any) -> ExternalFrameworkConfig:
    if isinstance(entry, ExternalFrameworkConfig):
        return entry
    return ExternalFrameworkConfig.model_validate(entry, from_attributes=True)


class ConfigManager:
    """
    Registry of external framework configurations keyed by canonical GVK.

    Not internally locked. `load` drops the previous table first and publishes
    the new one with a single assignment once the batch is processed, so
    readers never observe a half-built table. Concurrent `load` calls must be
    serialized by the caller.
    """

    def __init__(self) -> None:
        self._configs: dict[str, ExternalFrameworkConfig] = {}

    def load(self, configs: Iterable[ExternalFrameworkConfig | Mapping[str, Any]]) -> None:
        """
        Replace the registry contents with `configs`.

        Entries are validated one by one, in order. Rejected entries are logged
        (one `external_framework.invalid` record each) and skipped. A later
        entry with the same GVK as an earlier one replaces it.

        Raises BatchPartialFailure with the number of rejected entries; the
        valid entries stay loaded.
        """
        self._configs = {}
        table: dict[str, ExternalFrameworkConfig] = {}
        failures = 0

        for entry in configs:
            try:
                cfg = _coerce(entry)
                gvk = validate_config(cfg)
            except (ExternalFrameworkConfigError, ValidationError) as e:
                failures += 1
                reason = getattr(e, "reason", "invalid_config")
                log_event(
                    logger,
                    "external_framework.invalid",
                    severity="ERROR",
                    message=f"Invalid external framework configuration: {_entry_name(entry)}: {e}",
                    config_name=_entry_name(entry),
                    reason=reason,
                )
                continue

            key = gvk.canonical()
            if key in table:
                logger.debug("external framework %s overrides earlier entry for %s", cfg.name, key)
            table[key] = cfg

        self._configs = table

        log_event(
            logger,
            "external_framework.loaded",
            severity="INFO",
            loaded=len(table),
            rejected=failures,
        )

        if failures:
            raise BatchPartialFailure(count=failures)

    def get_adapter(self, gvk: GroupVersionKind) -> Optional[AdapterHandle]:
        """Return a handle for `gvk` if configured, else None."""
        if gvk.canonical() not in self._configs:
            return None
        return AdapterHandle(gvk=gvk)

    def get_config(self, gvk: GroupVersionKind) -> Optional[ExternalFrameworkConfig]:
        return self._configs.get(gvk.canonical())

    def get_all_adapters(self) -> list[AdapterHandle]:
        """
        Return one handle per configured framework (order unspecified).

        Handles are rebuilt from the stored names; a name that no longer parses
        is logged and skipped.
        """
        configs = self._configs
        out: list[AdapterHandle] = []
        for cfg in configs.values():
            gvk = parse_gvk(cfg.name)
            if gvk is None:
                log_event(
                    logger,
                    "external_framework.reparse_failed",
                    severity="ERROR",
                    message=f"Failed to parse GVK string {cfg.name}",
                    config_name=cfg.name,
                )
                continue
            out.append(AdapterHandle(gvk=gvk))
        return out

    lookup = get_adapter
    list_all = get_all_adapters

    def __len__(self) -> int:
        return len(self._configs)

    def __contains__(self, gvk: object) -> bool:
        if not isinstance(gvk, GroupVersionKind):
            return False
        return gvk.canonical() in self._configs
