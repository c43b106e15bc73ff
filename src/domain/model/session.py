# domain/model/session.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SessionStatus(str, Enum):
    """Resolution state of the caller's session."""
    LOADING = 'loading'
    AUTHENTICATED = 'authenticated'
    UNAUTHENTICATED = 'unauthenticated'


@dataclass(frozen=True)
class SessionUser:
    """Partial identity carried by an authenticated session."""
    name: str | None = None
    email: str | None = None
    image: str | None = None

    @classmethod
    def from_dict(cls, data: dict | None) -> SessionUser:
        data = data or {}
        return cls(
            name=data.get('name') or None,
            email=data.get('email') or None,
            image=data.get('image') or None,
        )


@dataclass(frozen=True)
class Session:
    """Current session as seen by the views. Read-only for consumers."""
    status: SessionStatus
    user: SessionUser | None = None
    token: str | None = None

    # ── factories ─────────────────────────────────────────

    @staticmethod
    def loading() -> Session:
        return Session(status=SessionStatus.LOADING)

    @staticmethod
    def unauthenticated() -> Session:
        return Session(status=SessionStatus.UNAUTHENTICATED)

    @staticmethod
    def authenticated(user: SessionUser, token: str | None = None) -> Session:
        return Session(status=SessionStatus.AUTHENTICATED, user=user, token=token)

    # ── queries ───────────────────────────────────────────

    @property
    def is_loading(self) -> bool:
        return self.status == SessionStatus.LOADING

    @property
    def is_authenticated(self) -> bool:
        return self.status == SessionStatus.AUTHENTICATED

    @property
    def email(self) -> str | None:
        return self.user.email if self.user else None
