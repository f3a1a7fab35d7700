"""
External framework registry.

Validates `multiKueue.externalFrameworks` entries and maps each configured
kind (GVK) to a generic adapter handle.
"""

from .errors import BatchPartialFailure, EmptyNameError, ExternalFrameworkConfigError, MalformedIdentifierError
from .manager import ConfigManager
from .models import AdapterHandle, ExternalFrameworkConfig
from .validator import validate_config

__all__ = [
    "AdapterHandle",
    "BatchPartialFailure",
    "ConfigManager",
    "EmptyNameError",
    "ExternalFrameworkConfig",
    "ExternalFrameworkConfigError",
    "MalformedIdentifierError",
    "validate_config",
]
