from __future__ import annotations

import logging

import pytest

from generic_adapters.common.logging import JsonLogFormatter


@pytest.fixture
def restore_root_logging():
    """
    Test hygiene: `init_structured_logging` replaces the root handlers.

    Drop the JSON handlers it installed and put the root level back so later
    tests (and caplog) are unaffected.
    """
    root = logging.getLogger()
    level = root.level
    try:
        yield root
    finally:
        for h in list(root.handlers):
            if isinstance(h.formatter, JsonLogFormatter):
                root.removeHandler(h)
        root.setLevel(level)
