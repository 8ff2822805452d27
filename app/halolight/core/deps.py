from fastapi import Depends, Request

from app.halolight.core.session import Session, UiPreferences, request_state_session
from app.halolight.services.access_guard import AccessGuard
from app.halolight.services.route_registry import RouteRegistry

_THEMES = {"light", "dark", "system"}


def get_registry(request: Request) -> RouteRegistry:
    return request.app.state.registry


def get_session(request: Request) -> Session:
    provider = getattr(request.app.state, "session_provider", None) or request_state_session
    session = provider(request)
    request.state.session = session
    return session


def get_access_guard(registry: RouteRegistry = Depends(get_registry)) -> AccessGuard:
    return AccessGuard(registry)


def get_ui_preferences(request: Request) -> UiPreferences:
    collapsed = request.headers.get("X-UI-Sidebar-Collapsed", "").strip().lower() in {"1", "true", "yes", "on"}
    theme = request.headers.get("X-UI-Theme", "system").strip().lower()
    if theme not in _THEMES:
        theme = "system"
    return UiPreferences(sidebar_collapsed=collapsed, theme=theme)


__all__ = ["get_access_guard", "get_registry", "get_session", "get_ui_preferences"]
