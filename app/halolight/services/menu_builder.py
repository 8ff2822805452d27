"""Permission-filtered projection of the route registry for the sidebar.

Permission is inherited downward: when an entry is not granted its whole
subtree is pruned, even children that carry no requirement of their own.
"""
from __future__ import annotations

from dataclasses import dataclass

from app.halolight.constants.icons import MenuIcon
from app.halolight.core.permissions import satisfies_all
from app.halolight.services.route_registry import RouteEntry, RouteRegistry, normalize_path


@dataclass(frozen=True)
class MenuNode:
    path: str
    label: str
    icon: MenuIcon | None = None
    active: bool = False
    group_only: bool = False
    children: tuple["MenuNode", ...] = ()


@dataclass(frozen=True)
class Breadcrumb:
    label: str
    href: str | None = None


def is_active_path(href: str, current: str | None) -> bool:
    if not current:
        return False
    current = normalize_path(current)
    return current == href or current.startswith(href.rstrip("/") + "/")


def build_menu(
    registry: RouteRegistry,
    granted: frozenset[str] | set[str],
    active_path: str | None = None,
) -> tuple[MenuNode, ...]:
    return _build_level(registry, registry.roots(), granted, active_path)


def _build_level(
    registry: RouteRegistry,
    entries: tuple[RouteEntry, ...],
    granted: frozenset[str] | set[str],
    active_path: str | None,
) -> tuple[MenuNode, ...]:
    nodes: list[MenuNode] = []
    for entry in entries:
        if entry.hidden or not satisfies_all(granted, entry.required_permissions):
            continue
        children = _build_level(registry, registry.children_of(entry.path), granted, active_path)
        if entry.group_only and not children:
            continue
        active = is_active_path(entry.path, active_path) or any(child.active for child in children)
        nodes.append(
            MenuNode(
                path=entry.path,
                label=entry.label,
                icon=entry.icon,
                active=active,
                group_only=entry.group_only,
                children=children,
            )
        )
    return tuple(nodes)


def flatten_menu(nodes: tuple[MenuNode, ...]) -> list[str]:
    paths: list[str] = []
    for node in nodes:
        paths.append(node.path)
        paths.extend(flatten_menu(node.children))
    return paths


def build_breadcrumbs(registry: RouteRegistry, path: str) -> tuple[Breadcrumb, ...]:
    entry = registry.resolve(path)
    if entry is None:
        return ()
    chain = (*registry.ancestors(entry.path), entry)
    return tuple(Breadcrumb(label=item.label, href=None if item.group_only else item.path) for item in chain)


__all__ = ["Breadcrumb", "MenuNode", "build_breadcrumbs", "build_menu", "flatten_menu", "is_active_path"]
