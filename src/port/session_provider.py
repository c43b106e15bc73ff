from typing import Protocol
from domain.model.session import Session


class SessionProvider(Protocol):
    """Source of the caller's session (the auth provider)."""
    async def resolve(self) -> Session:
        """Resolve the current session. Never returns a loading session."""
        ...
