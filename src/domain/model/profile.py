# domain/model/profile.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from domain.model.session import SessionUser

AVATAR_BASE_URL = "https://ui-avatars.com/api/?name="
PLACEHOLDER_AVATAR = f"{AVATAR_BASE_URL}%20+"
PROFILE_ABOUT = "I am a Full Stack Developer and a UI/UX Designer."


@dataclass(frozen=True)
class UserRecord:
    """Client-side projection of a user, as returned by POST /api/user.

    This is the view-model held by Profile and NavBar. It is replaced
    wholesale on every successful fetch and never patched field by field.
    """
    first_name: str = ''
    last_name: str = ''
    email: str = ''
    avatar: str = ''
    created_at: str = ''

    @staticmethod
    def empty() -> UserRecord:
        return UserRecord()

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> UserRecord:
        """Build from the camelCase wire format. Missing fields become empty."""
        return cls(
            first_name=data.get('firstName') or '',
            last_name=data.get('lastName') or '',
            email=data.get('email') or '',
            avatar=data.get('avatar') or '',
            created_at=data.get('createdAt') or '',
        )

    @property
    def full_name(self) -> str:
        return ' '.join(part for part in (self.first_name, self.last_name) if part)


@dataclass(frozen=True)
class ProfileCard:
    """Merged display values for the profile header."""
    name: str
    email: str
    image: str
    created_at: str
    about: str = PROFILE_ABOUT


def resolve_avatar(session_user: SessionUser | None, record: UserRecord) -> str:
    """Session image, else the fetched avatar, else the placeholder."""
    if session_user and session_user.image:
        return session_user.image
    return record.avatar or PLACEHOLDER_AVATAR


def merge_profile(session_user: SessionUser | None, record: UserRecord) -> ProfileCard:
    """Merge session identity with the fetched record, session first.

    Each field falls back independently. createdAt only exists on the
    fetched record.
    """
    session_user = session_user or SessionUser()
    return ProfileCard(
        name=session_user.name or record.full_name,
        email=session_user.email or record.email,
        image=resolve_avatar(session_user, record),
        created_at=record.created_at,
    )
