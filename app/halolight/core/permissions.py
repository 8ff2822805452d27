"""Permission tokens and the containment rule shared by the menu, guard and editor.

A permission is an opaque string such as ``users:view``. The single token
``*`` is a sentinel meaning "every permission"; it is not a glob, so
``users:*`` is just another opaque string.
"""
from __future__ import annotations

from typing import Iterable

WILDCARD = "*"

Permission = str
PermissionSet = frozenset


def permission_set(values: Iterable[str] | None) -> frozenset[str]:
    if not values:
        return frozenset()
    return frozenset(item.strip() for item in values if item and item.strip())


def normalize_permissions(values: Iterable[str] | None) -> frozenset[str]:
    """Collapse a set holding the wildcard to ``{"*"}``; other members are implied."""
    granted = permission_set(values)
    if WILDCARD in granted:
        return frozenset({WILDCARD})
    return granted


def satisfies(granted: frozenset[str] | set[str], required: str) -> bool:
    return required in granted or WILDCARD in granted


def satisfies_all(granted: frozenset[str] | set[str], required: Iterable[str]) -> bool:
    return all(satisfies(granted, item) for item in required)


def missing_permissions(granted: frozenset[str] | set[str], required: Iterable[str]) -> tuple[str, ...]:
    return tuple(item for item in required if not satisfies(granted, item))


__all__ = [
    "WILDCARD",
    "Permission",
    "PermissionSet",
    "missing_permissions",
    "normalize_permissions",
    "permission_set",
    "satisfies",
    "satisfies_all",
]
