"""Helpers for reading untyped TOML tables.

Used at the config boundary to narrow ``object`` values to concrete types.
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
    if is_str_dict(obj):
        return obj
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value, stripped.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    value = table.get(key)
    if isinstance(value, bool):
        return value
    return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table from a mapping."""
    return as_str_dict(table.get(key))


def bool_items(table: Mapping[str, object]) -> dict[str, bool]:
    """Keep only the boolean entries of a table."""
    return {k: v for k, v in table.items() if isinstance(v, bool)}
