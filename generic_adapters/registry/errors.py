from __future__ import annotations


class ExternalFrameworkConfigError(ValueError):
    """A single configuration entry was rejected."""

    reason = "invalid_config"


class EmptyNameError(ExternalFrameworkConfigError):
    reason = "empty_name"

    def __str__(self) -> str:
        return "name is required"


class MalformedIdentifierError(ExternalFrameworkConfigError):
    reason = "malformed_gvk"

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"invalid GVK format '{self.name}'"


class BatchPartialFailure(ValueError):
    """
    Raised by `ConfigManager.load` when one or more entries were rejected.

    Only the count is carried; per-entry details go to the logs. `args` holds
    the count so the error survives pickling (process pools, multiprocessing).
    """

    def __init__(self, count: int) -> None:
        super().__init__(count)
        self.count = count

    def __str__(self) -> str:
        return f"encountered {self.count} configuration errors (see logs for details)"
