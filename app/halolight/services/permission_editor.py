"""Selection algebra behind the role editor's permission checkboxes.

Selecting ``*`` replaces the whole selection with ``{"*"}`` and clearing it
empties the selection. Checking a concrete permission while ``*`` is held
replaces the wildcard with just that permission rather than keeping both;
an operator who ticks one box after "all permissions" ends up with a single
grant. That behavior is kept as-is for compatibility with existing role
screens.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from app.halolight.constants.permissions import PERMISSION_REGISTRY
from app.halolight.core.logging import log_json
from app.halolight.core.permissions import WILDCARD, permission_set, satisfies

logger = logging.getLogger("halolight.permissions")

ChangeListener = Callable[[frozenset[str]], None]


@dataclass(frozen=True)
class PermissionOption:
    value: str
    label: str


def default_permission_options() -> list[PermissionOption]:
    return [PermissionOption(item.code, item.label) for item in PERMISSION_REGISTRY]


def toggle_selection(current: Iterable[str], target: str, checked: bool) -> frozenset[str]:
    selected = permission_set(current)
    if target == WILDCARD:
        return frozenset({WILDCARD}) if checked else frozenset()
    if checked:
        if WILDCARD in selected:
            return frozenset({target})
        return selected | {target}
    return selected - {target}


def selection_summary(selected: Iterable[str]) -> str:
    selected = permission_set(selected)
    if WILDCARD in selected:
        return "已选择 所有权限"
    return f"已选择 {len(selected)} 个权限"


class PermissionEditor:
    def __init__(
        self,
        catalog: Sequence[PermissionOption] | None = None,
        initial: Iterable[str] | None = None,
        on_change: ChangeListener | None = None,
    ) -> None:
        self.catalog: tuple[PermissionOption, ...] = tuple(catalog if catalog is not None else default_permission_options())
        self._selected = permission_set(initial)
        self._on_change = on_change

    @property
    def selected(self) -> frozenset[str]:
        return self._selected

    def reset(self, values: Iterable[str] | None) -> None:
        self._selected = permission_set(values)

    def toggle(self, target: str, checked: bool) -> frozenset[str]:
        previous = self._selected
        self._selected = toggle_selection(previous, target, checked)
        log_json(
            logger,
            {
                "event": "permission_toggle",
                "target": target,
                "checked": checked,
                "before": sorted(previous),
                "after": sorted(self._selected),
            },
        )
        if self._on_change is not None:
            self._on_change(self._selected)
        return self._selected

    def is_selected(self, target: str) -> bool:
        return satisfies(self._selected, target)

    def summary(self) -> str:
        return selection_summary(self._selected)

    def checkbox_states(self) -> list[tuple[PermissionOption, bool]]:
        return [(option, self.is_selected(option.value)) for option in self.catalog]
