import re
from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Domain model representing a registered blog user."""
    id: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime
    updated_at: datetime
    password_hash: str | None = None
    avatar: str = ''

    @property
    def full_name(self) -> str:
        return ' '.join(part for part in (self.first_name, self.last_name) if part)


def password_problem(password: str) -> str | None:
    """Return the first strength rule the password breaks, or None.

    Checked by the signup form before submitting and again by the server.
    """
    if len(password) < 8:
        return "Password must be at least 8 characters"
    if not re.search(r"[A-Z]", password):
        return "Password must contain at least one uppercase letter"
    if not re.search(r"[a-z]", password):
        return "Password must contain at least one lowercase letter"
    if not re.search(r"[0-9]", password):
        return "Password must contain at least one number"
    return None
