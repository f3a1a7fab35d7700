from .gvk import GroupKind, GroupVersion, GroupVersionKind, parse_group_kind, parse_gvk, parse_kind_arg

__all__ = [
    "GroupKind",
    "GroupVersion",
    "GroupVersionKind",
    "parse_group_kind",
    "parse_gvk",
    "parse_kind_arg",
]
