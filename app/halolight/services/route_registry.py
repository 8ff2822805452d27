"""Static route table: paths, required permissions, display metadata and hierarchy.

The registry is validated in full when it is built. A dangling parent, a
duplicated path or a cycle aborts construction, so a published registry is
always a well-formed forest and never changes afterwards.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from pydantic import ValidationError

from app.halolight.constants.icons import MenuIcon
from app.halolight.core.config import settings
from app.halolight.core.error_catalog import (
    DuplicateRoute,
    InvalidRouteConfig,
    RouteCycle,
    RouteNotFound,
    UnresolvedPath,
)
from app.halolight.core.logging import log_json
from app.halolight.schemas.navigation import RouteConfig

logger = logging.getLogger("halolight.navigation")


@dataclass(frozen=True)
class RouteEntry:
    path: str
    label: str
    required_permissions: tuple[str, ...] = ()
    parent_path: str | None = None
    order: int = 0
    icon: MenuIcon | None = None
    group_only: bool = False
    hidden: bool = False

    @classmethod
    def from_config(cls, config: RouteConfig) -> "RouteEntry":
        return cls(
            path=config.path,
            label=config.label,
            required_permissions=tuple(config.required_permissions),
            parent_path=config.parent_path,
            order=config.order,
            icon=config.icon,
            group_only=config.group_only,
            hidden=config.hidden,
        )


def normalize_path(path: str) -> str:
    path = path.split("?", 1)[0].split("#", 1)[0].strip()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


class RouteRegistry:
    def __init__(self, entries: Mapping[str, RouteEntry], children: Mapping[str | None, tuple[RouteEntry, ...]]):
        self._entries = MappingProxyType(dict(entries))
        self._children = MappingProxyType(dict(children))

    @classmethod
    def build(cls, entries: Iterable[RouteEntry]) -> "RouteRegistry":
        by_path: dict[str, RouteEntry] = {}
        insertion: dict[str, int] = {}
        for index, entry in enumerate(entries):
            if entry.path in by_path:
                raise DuplicateRoute(entry.path)
            by_path[entry.path] = entry
            insertion[entry.path] = index

        for entry in by_path.values():
            if entry.parent_path is not None and entry.parent_path not in by_path:
                raise RouteNotFound(entry.path, entry.parent_path)

        _check_acyclic(by_path)

        grouped: dict[str | None, list[RouteEntry]] = {}
        for entry in by_path.values():
            grouped.setdefault(entry.parent_path, []).append(entry)
        children = {
            parent: tuple(sorted(items, key=lambda item: (item.order, insertion[item.path])))
            for parent, items in grouped.items()
        }

        log_json(logger, {"event": "route_registry_built", "routes": len(by_path), "roots": len(children.get(None, ()))})
        return cls(by_path, children)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __iter__(self):
        return iter(self._entries.values())

    def get(self, path: str) -> RouteEntry | None:
        return self._entries.get(path)

    def lookup(self, path: str) -> RouteEntry:
        entry = self._entries.get(path)
        if entry is None:
            raise UnresolvedPath(path)
        return entry

    def roots(self) -> tuple[RouteEntry, ...]:
        return self._children.get(None, ())

    def children_of(self, path: str | None) -> tuple[RouteEntry, ...]:
        if path is not None and path not in self._entries:
            raise UnresolvedPath(path)
        return self._children.get(path, ())

    def ancestors(self, path: str) -> tuple[RouteEntry, ...]:
        chain: list[RouteEntry] = []
        parent_path = self.lookup(path).parent_path
        while parent_path is not None:
            parent = self._entries[parent_path]
            chain.append(parent)
            parent_path = parent.parent_path
        return tuple(reversed(chain))

    def resolve(self, path: str) -> RouteEntry | None:
        """Exact match, otherwise the longest registered prefix on a segment boundary."""
        candidate = normalize_path(path)
        while True:
            entry = self._entries.get(candidate)
            if entry is not None:
                return entry
            if candidate == "/":
                return None
            candidate = candidate.rsplit("/", 1)[0] or "/"

    def title_for(self, path: str, default: str | None = None) -> str:
        entry = self.resolve(path)
        if entry is None:
            return default if default is not None else settings.APP_TITLE
        return entry.label


def _check_acyclic(by_path: Mapping[str, RouteEntry]) -> None:
    done: set[str] = set()
    for start in by_path:
        trail: list[str] = []
        on_trail: set[str] = set()
        current: str | None = start
        while current is not None and current not in done:
            if current in on_trail:
                raise RouteCycle(trail[trail.index(current):] + [current])
            trail.append(current)
            on_trail.add(current)
            current = by_path[current].parent_path
        done.update(trail)


def build_registry(configs: Iterable[RouteConfig | dict], source: str = "<inline>") -> RouteRegistry:
    entries = []
    for config in configs:
        if not isinstance(config, RouteConfig):
            try:
                config = RouteConfig.model_validate(config)
            except ValidationError as exc:
                raise InvalidRouteConfig(source, exc.errors(include_url=False, include_context=False)) from exc
        entries.append(RouteEntry.from_config(config))
    return RouteRegistry.build(entries)
