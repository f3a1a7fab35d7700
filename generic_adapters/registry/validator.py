from __future__ import annotations

from generic_adapters.schema.gvk import GroupVersionKind, parse_gvk

from .errors import EmptyNameError, MalformedIdentifierError
from .models import ExternalFrameworkConfig


def validate_config(cfg: ExternalFrameworkConfig) -> GroupVersionKind:
    """
    Validate an external framework configuration.

    Returns the parsed GVK so callers key the registry off the same parse.
    Raises EmptyNameError / MalformedIdentifierError.
    """
    if not cfg.name:
        raise EmptyNameError()

    gvk = parse_gvk(cfg.name)
    if gvk is None:
        raise MalformedIdentifierError(cfg.name)
    return gvk
