from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from generic_adapters.schema.gvk import GroupVersionKind


class ExternalFrameworkConfig(BaseModel):
    """
    One `multiKueue.externalFrameworks[]` entry.

    `name` encodes the managed kind as "kind.version.group". Framework-specific
    fields are kept as extras; the registry only looks at `name`.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str = Field(default="", description='Kind reference, e.g. "MyJob.v1.batch.example.com".')


@dataclass(frozen=True)
class AdapterHandle:
    """Marker that a configuration is registered for `gvk`."""

    gvk: GroupVersionKind

    @property
    def key(self) -> str:
        return self.gvk.canonical()
