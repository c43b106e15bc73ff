"""Hydration effect used by Profile and NavBar.

Fetches the user record the session token does not carry, once per
session change, and hands it to the owning view.
"""

import asyncio
import logging
from enum import Enum
from typing import Callable

from client.session import SessionStore
from client.user_cache import UserDataCache
from domain.model.errors import UserDataError
from domain.model.profile import UserRecord
from domain.model.session import Session

logger = logging.getLogger(__name__)


class HydrationState(str, Enum):
    IDLE = 'idle'
    FETCHING = 'fetching'
    SUCCEEDED = 'settled_success'
    FAILED = 'settled_failure'


class HydrationEffect:
    """Session-driven fetch with cancellation on teardown.

    Every session change cancels the previous fetch; an authenticated
    session with an email starts a new one. Failures are logged and leave
    the view-model untouched. After ``stop()`` nothing is written back.
    """

    def __init__(
        self,
        store: SessionStore,
        cache: UserDataCache,
        on_settled: Callable[[UserRecord], None],
        owner: str = "view",
    ):
        self._store = store
        self._cache = cache
        self._on_settled = on_settled
        self._owner = owner
        self._task: asyncio.Task | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self.state = HydrationState.IDLE

    @property
    def active(self) -> bool:
        return self._unsubscribe is not None

    def start(self) -> None:
        if self.active:
            return
        self._unsubscribe = self._store.subscribe(self._on_session)
        self._on_session(self._store.session)

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._cancel()

    async def settled(self) -> HydrationState:
        """Wait for the current fetch, if any, and return the state."""
        if self._task is not None:
            await asyncio.gather(self._task, return_exceptions=True)
        return self.state

    def _on_session(self, session: Session) -> None:
        self._cancel()
        if not self.active or not session.is_authenticated or not session.email:
            return
        self.state = HydrationState.FETCHING
        self._task = asyncio.get_running_loop().create_task(self._run(session.email))

    def _cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _run(self, email: str) -> None:
        try:
            record = await self._cache.get(email)
        except UserDataError as e:
            logger.error(
                "Error in getUserData",
                extra={"owner": self._owner, "email": email, "error": str(e)},
            )
            self.state = HydrationState.FAILED
            return
        except Exception as e:
            logger.error(
                "Unexpected error hydrating user data",
                extra={"owner": self._owner, "email": email, "error": str(e)},
                exc_info=True,
            )
            self.state = HydrationState.FAILED
            return

        if not self.active or self._task is not asyncio.current_task():
            return
        self.state = HydrationState.SUCCEEDED
        self._on_settled(record)
