from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Literal

from starlette.requests import Request

from app.halolight.core.permissions import normalize_permissions

Theme = Literal["light", "dark", "system"]


@dataclass(frozen=True)
class Session:
    is_authenticated: bool = False
    permissions: frozenset[str] = field(default_factory=frozenset)
    user_id: str | None = None

    @classmethod
    def anonymous(cls) -> "Session":
        return cls()

    @classmethod
    def authenticated(cls, permissions: Iterable[str], user_id: str | None = None) -> "Session":
        return cls(is_authenticated=True, permissions=normalize_permissions(permissions), user_id=user_id)

    def with_permissions(self, permissions: Iterable[str]) -> "Session":
        return Session(
            is_authenticated=self.is_authenticated,
            permissions=normalize_permissions(permissions),
            user_id=self.user_id,
        )


@dataclass(frozen=True)
class UiPreferences:
    sidebar_collapsed: bool = False
    theme: Theme = "system"


SessionProvider = Callable[[Request], Session]


def request_state_session(request: Request) -> Session:
    session = getattr(request.state, "session", None)
    if isinstance(session, Session):
        return session
    return Session.anonymous()
