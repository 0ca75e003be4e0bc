"""Helpers for safely working with dynamic (untyped) structures.

Use these helpers at boundaries where we ingest TOML data.
They provide runtime validation and static type narrowing.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    """Return obj as StrDict if it matches, else None."""
    if is_str_dict(obj):
        return obj
    return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys) from a mapping."""
    return as_str_dict(table.get(key))


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    """Get a bool from a mapping. Returns None if missing or not a bool."""
    value = table.get(key)
    return value if isinstance(value, bool) else None


def get_str_map(table: Mapping[str, object], key: str) -> dict[str, str]:
    """Get a table of string values, dropping blank or non-string entries."""
    sub = get_table(table, key) or {}
    out: dict[str, str] = {}
    for k, v in sub.items():
        if isinstance(v, str) and v.strip():
            out[k] = v.strip()
    return out
