"""Per-navigation authorization decision.

Each call is evaluated independently: an unauthenticated session is sent to
the login page with the requested path attached, an authenticated one is
checked against the permissions of the resolved route. Redirect and forbidden
outcomes are return values; only a path unknown to the registry raises, and
that is handled by the not-found collaborator.

Only the resolved entry's own requirements are checked. The menu prunes a
subtree when a parent is not granted, but the guard does not inherit
ancestor requirements: a session holding ``roles:view`` without
``settings:view`` is allowed ``/settings/teams/roles`` even though the
sidebar never shows it. Routes that need the parent's grant must list it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union
from urllib.parse import quote, urlsplit

from app.halolight.constants.routes import AUTH_ROUTES, PUBLIC_ROUTES
from app.halolight.core.config import settings
from app.halolight.core.error_catalog import UnresolvedPath
from app.halolight.core.logging import log_json
from app.halolight.core.permissions import missing_permissions
from app.halolight.core.session import Session
from app.halolight.services.route_registry import RouteRegistry, normalize_path

logger = logging.getLogger("halolight.navigation")

# Characters left untouched by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class Allow:
    path: str


@dataclass(frozen=True)
class RedirectToLogin:
    return_path: str
    login_path: str = "/login"

    @property
    def location(self) -> str:
        return f"{self.login_path}?redirect={quote(self.return_path, safe=_URI_COMPONENT_SAFE)}"


@dataclass(frozen=True)
class Forbidden:
    path: str
    missing: tuple[str, ...] = ()


Decision = Union[Allow, RedirectToLogin, Forbidden]


class AccessGuard:
    def __init__(self, registry: RouteRegistry, login_path: str | None = None):
        self.registry = registry
        self.login_path = login_path or settings.LOGIN_PATH

    def authorize(self, session: Session, path: str) -> Decision:
        if not session.is_authenticated:
            self._log(session, path, "redirect_to_login")
            return RedirectToLogin(return_path=path, login_path=self.login_path)

        entry = self.registry.resolve(path)
        if entry is None:
            self._log(session, path, "unresolved")
            raise UnresolvedPath(path)

        missing = missing_permissions(session.permissions, entry.required_permissions)
        if missing:
            self._log(session, path, "forbidden", route=entry.path, missing=list(missing))
            return Forbidden(path=path, missing=missing)

        self._log(session, path, "allow", route=entry.path)
        return Allow(path=path)

    @staticmethod
    def _log(session: Session, path: str, outcome: str, **extra) -> None:
        payload = {
            "event": "navigation_decision",
            "path": path,
            "user_id": session.user_id,
            "authenticated": session.is_authenticated,
            "outcome": outcome,
        }
        payload.update(extra)
        log_json(logger, payload)


def _matches_any(path: str, routes: tuple[str, ...]) -> bool:
    path = normalize_path(path)
    return any(path == route or path.startswith(route + "/") for route in routes)


def is_public_route(path: str) -> bool:
    return _matches_any(path, PUBLIC_ROUTES)


def is_auth_route(path: str) -> bool:
    return _matches_any(path, AUTH_ROUTES)


def resolve_post_login_redirect(redirect: str | list[str] | None, home_path: str | None = None) -> str:
    home = home_path or settings.HOME_PATH
    if isinstance(redirect, list):
        redirect = redirect[0] if redirect else None
    if not redirect:
        return home
    parts = urlsplit(redirect)
    # In-app paths only: no scheme, no host, no protocol-relative "//host".
    # Browsers read a backslash as "/", so "/\host" is protocol-relative too.
    if (
        parts.scheme
        or parts.netloc
        or not redirect.startswith("/")
        or redirect.startswith("//")
        or "\\" in redirect
    ):
        return home
    if is_auth_route(parts.path):
        return home
    return redirect


__all__ = [
    "AccessGuard",
    "Allow",
    "Decision",
    "Forbidden",
    "RedirectToLogin",
    "is_auth_route",
    "is_public_route",
    "resolve_post_login_redirect",
]
