from starlette.requests import Request

from app.halolight.core.session import Session


def header_session_provider(request: Request) -> Session:
    raw = request.headers.get("X-Test-Permissions")
    if raw is None:
        return Session.anonymous()
    permissions = [item for item in raw.split(",") if item]
    return Session.authenticated(permissions, user_id=request.headers.get("X-Test-User", "user-1"))


def as_user(*permissions: str) -> dict:
    return {"X-Test-Permissions": ",".join(permissions)}
