"""
Group/Version/Kind identifiers.

A GVK names a kind of resource. Its canonical string form,
"group/version, Kind=kind", is the key used by the adapter registry; every key
is produced from a parsed GroupVersionKind, never from a raw name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GroupVersion:
    group: str = ""
    version: str = ""

    def empty(self) -> bool:
        return not self.group and not self.version

    def __str__(self) -> str:
        if self.group:
            return f"{self.group}/{self.version}"
        return self.version


@dataclass(frozen=True)
class GroupKind:
    group: str = ""
    kind: str = ""

    def empty(self) -> bool:
        return not self.group and not self.kind

    def __str__(self) -> str:
        if self.group:
            return f"{self.kind}.{self.group}"
        return self.kind


@dataclass(frozen=True)
class GroupVersionKind:
    group: str = ""
    version: str = ""
    kind: str = ""

    def empty(self) -> bool:
        return not self.group and not self.version and not self.kind

    def group_version(self) -> GroupVersion:
        return GroupVersion(group=self.group, version=self.version)

    def group_kind(self) -> GroupKind:
        return GroupKind(group=self.group, kind=self.kind)

    @property
    def api_version(self) -> str:
        """`apiVersion` as it appears in a manifest ("v1", "batch/v1")."""
        return str(self.group_version())

    def canonical(self) -> str:
        return f"{self.group}/{self.version}, Kind={self.kind}"

    def __str__(self) -> str:
        return self.canonical()


def parse_group_kind(arg: str) -> GroupKind:
    """
    Parse "kind.group" ("Job.batch", "Pod"). Everything after the first dot is the group.
    """
    kind, _, group = arg.partition(".")
    return GroupKind(group=group, kind=kind)


def parse_kind_arg(arg: str) -> tuple[Optional[GroupVersionKind], GroupKind]:
    """
    Parse a kind argument of the form "kind.version.group".

    The GVK is only produced when `arg` contains at least two dots; the group
    keeps any remaining dots ("MyJob.v1.batch.example.com" -> group
    "batch.example.com"). "Pod.v1." yields the core group. The GroupKind
    interpretation of `arg` is always returned alongside.
    """
    gvk: Optional[GroupVersionKind] = None
    if arg.count(".") >= 2:
        kind, version, group = arg.split(".", 2)
        gvk = GroupVersionKind(group=group, version=version, kind=kind)
    return gvk, parse_group_kind(arg)


def parse_gvk(name: str) -> Optional[GroupVersionKind]:
    """Shared parser for configuration names; None means unparseable."""
    if not name:
        return None
    gvk, _ = parse_kind_arg(name)
    return gvk
