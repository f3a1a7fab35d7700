"""
Inspect an external frameworks configuration file.

Example:
  generic-adapters --config configs/external_frameworks.yaml --lookup Job.v1.batch
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, Sequence

import yaml

from generic_adapters.common.config import load_settings
from generic_adapters.common.logging import init_structured_logging
from generic_adapters.registry.errors import BatchPartialFailure
from generic_adapters.registry.loader import load_external_frameworks
from generic_adapters.registry.manager import ConfigManager
from generic_adapters.schema.gvk import GroupVersionKind, parse_gvk


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="generic-adapters")
    p.add_argument("--config", default=None, help="Config file (default: EXTERNAL_FRAMEWORKS_CONFIG)")
    p.add_argument(
        "--lookup",
        action="append",
        default=[],
        metavar="KIND.VERSION.GROUP",
        help="Report whether an adapter is configured for this kind (repeatable)",
    )
    p.add_argument("--lenient", action="store_true", help="Exit 0 even if some entries were rejected")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = load_settings()
    # Log lines go to stderr so stdout stays a single JSON document.
    init_structured_logging(
        service=settings.service_name,
        env=settings.env,
        level=settings.log_level,
        stream=sys.stderr,
    )

    path = args.config or settings.config_path
    try:
        rows = load_external_frameworks(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"error: cannot read {path}: {e}", file=sys.stderr)
        return 2

    lookups: list[tuple[str, GroupVersionKind]] = []
    for name in args.lookup:
        gvk = parse_gvk(name)
        if gvk is None:
            print(f"error: invalid GVK format '{name}'", file=sys.stderr)
            return 2
        lookups.append((name, gvk))

    mgr = ConfigManager()
    errors = 0
    try:
        mgr.load(rows)
    except BatchPartialFailure as e:
        errors = e.count

    out = {
        "adapters": sorted(h.key for h in mgr.get_all_adapters()),
        "lookups": {},
        "errors": errors,
    }
    for name, gvk in lookups:
        handle = mgr.get_adapter(gvk)
        out["lookups"][name] = handle.key if handle is not None else None

    print(json.dumps(out, indent=2))
    strict = settings.strict and not args.lenient
    if errors and strict:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
