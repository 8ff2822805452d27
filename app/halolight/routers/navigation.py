from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from app.halolight.core.config import settings
from app.halolight.core.deps import get_access_guard, get_registry, get_session, get_ui_preferences
from app.halolight.core.error_catalog import AppError, ErrorCatalog
from app.halolight.core.session import Session, UiPreferences
from app.halolight.schemas.navigation import (
    BreadcrumbOut,
    BreadcrumbsResponse,
    DecisionResponse,
    EnterResponse,
    MenuNodeOut,
    MenuResponse,
    PostLoginRedirectResponse,
)
from app.halolight.services.access_guard import (
    AccessGuard,
    Decision,
    Forbidden,
    RedirectToLogin,
    is_auth_route,
    is_public_route,
    resolve_post_login_redirect,
)
from app.halolight.services.menu_builder import MenuNode, build_breadcrumbs, build_menu
from app.halolight.services.route_registry import RouteRegistry

router = APIRouter()


def _menu_out(node: MenuNode) -> MenuNodeOut:
    return MenuNodeOut(
        path=node.path,
        label=node.label,
        icon=node.icon,
        active=node.active,
        group_only=node.group_only,
        children=[_menu_out(child) for child in node.children],
    )


def _decision_out(decision: Decision) -> DecisionResponse:
    if isinstance(decision, RedirectToLogin):
        return DecisionResponse(decision="redirect_to_login", path=decision.return_path, location=decision.location)
    if isinstance(decision, Forbidden):
        return DecisionResponse(decision="forbidden", path=decision.path, missing=list(decision.missing))
    return DecisionResponse(decision="allow", path=decision.path)


@router.get("/menu", response_model=MenuResponse)
def get_menu(
    active: str | None = Query(default=None, description="Current location used to flag active entries."),
    registry: RouteRegistry = Depends(get_registry),
    session: Session = Depends(get_session),
    preferences: UiPreferences = Depends(get_ui_preferences),
):
    items = build_menu(registry, session.permissions, active) if session.is_authenticated else ()
    return MenuResponse(
        items=[_menu_out(node) for node in items],
        active=active,
        sidebar_collapsed=preferences.sidebar_collapsed,
        theme=preferences.theme,
    )


@router.get("/breadcrumbs", response_model=BreadcrumbsResponse)
def get_breadcrumbs(
    path: str = Query(..., min_length=1),
    registry: RouteRegistry = Depends(get_registry),
):
    crumbs = build_breadcrumbs(registry, path)
    return BreadcrumbsResponse(
        path=path,
        title=registry.title_for(path),
        breadcrumbs=[BreadcrumbOut(label=crumb.label, href=crumb.href) for crumb in crumbs],
    )


@router.get("/authorize", response_model=DecisionResponse)
def authorize(
    path: str = Query(..., min_length=1),
    session: Session = Depends(get_session),
    guard: AccessGuard = Depends(get_access_guard),
):
    return _decision_out(guard.authorize(session, path))


@router.get("/enter", response_model=EnterResponse)
def enter(
    path: str = Query(..., min_length=1),
    session: Session = Depends(get_session),
    guard: AccessGuard = Depends(get_access_guard),
):
    if is_public_route(path):
        if session.is_authenticated and is_auth_route(path):
            return RedirectResponse(settings.HOME_PATH, status_code=307)
        return EnterResponse(path=path, title=settings.APP_TITLE)

    decision = guard.authorize(session, path)
    if isinstance(decision, RedirectToLogin):
        return RedirectResponse(decision.location, status_code=307)
    if isinstance(decision, Forbidden):
        raise AppError(ErrorCatalog.PERMISSION_DENIED, {"path": decision.path, "missing": list(decision.missing)})
    return EnterResponse(path=decision.path, title=guard.registry.title_for(decision.path))


@router.get("/post-login", response_model=PostLoginRedirectResponse)
def post_login(redirect: str | None = Query(default=None)):
    return PostLoginRedirectResponse(location=resolve_post_login_redirect(redirect))
