"""Session handle shared by the views.

Views receive the store through their constructor instead of reaching for
a global; the store is the only state views share.
"""

import logging
from typing import Callable

from domain.model.session import Session
from port.session_provider import SessionProvider

logger = logging.getLogger(__name__)

SessionListener = Callable[[Session], None]


class SessionStore:
    """Holds the current session and notifies subscribers when it changes.

    Listeners run synchronously, in registration order, and only when the
    new session differs from the current one.
    """

    def __init__(self, session: Session | None = None):
        self._session = session or Session.loading()
        self._listeners: list[SessionListener] = []
        self._generation = 0

    @property
    def session(self) -> Session:
        return self._session

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set(self, session: Session) -> None:
        if session == self._session:
            return
        previous = self._session
        self._session = session
        logger.debug(
            "Session changed",
            extra={"from": previous.status.value, "to": session.status.value},
        )
        for listener in list(self._listeners):
            listener(session)

    async def refresh(self, provider: SessionProvider) -> Session:
        """Go back to loading, then publish whatever the provider resolves.

        Only the most recently started refresh publishes; an older one that
        finishes later leaves the store alone and returns the current
        session. A provider that raises resolves unauthenticated.
        """
        self._generation += 1
        generation = self._generation
        self.set(Session.loading())
        try:
            session = await provider.resolve()
        except Exception as e:
            logger.error(
                "Session resolution failed",
                extra={"error": str(e), "error_type": type(e).__name__},
                exc_info=True,
            )
            session = Session.unauthenticated()

        if generation != self._generation:
            logger.debug("Dropping stale session refresh", extra={"status": session.status.value})
            return self._session
        self.set(session)
        return session
