"""Shared, keyed cache in front of the User Data Client.

NavBar and Profile both want the current user's record on the same
navigation. The cache memoizes one request per email and lets every view
await it:

* concurrent callers share a single in-flight request;
* each waiting caller counts as a subscriber; when the last one is
  cancelled (its view unmounted) before the request finishes, the request
  itself is cancelled;
* failures are never cached;
* any session change invalidates everything.
"""

import asyncio
import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable

from adapter.external.user_data_client import UserDataClient
from client.session import SessionStore
from domain.model.profile import UserRecord

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    task: asyncio.Task
    waiters: int = 0


def _failed(task: asyncio.Task) -> bool:
    return task.done() and (task.cancelled() or task.exception() is not None)


class UserDataCache:
    def __init__(self, client: UserDataClient):
        self._client = client
        self._entries: dict[str, _Entry] = {}

    def __contains__(self, email: str) -> bool:
        return email in self._entries

    async def get(self, email: str) -> UserRecord:
        """Return the record for ``email``, fetching at most once per key.

        Raises whatever the client raises (UserDataError) to every waiter.
        """
        entry = self._entries.get(email)
        if entry is not None and _failed(entry.task):
            # done callback not run yet; never hand out a failure
            self._drop(email, entry)
            entry = None
        if entry is None:
            task = asyncio.get_running_loop().create_task(self._client.get_user_data(email))
            entry = _Entry(task=task)
            self._entries[email] = entry
            task.add_done_callback(partial(self._on_done, email, entry))
            logger.debug("User data fetch started", extra={"email": email})

        entry.waiters += 1
        try:
            return await asyncio.shield(entry.task)
        finally:
            entry.waiters -= 1
            if entry.waiters == 0 and not entry.task.done():
                logger.debug("Last subscriber left, cancelling fetch", extra={"email": email})
                entry.task.cancel()
                self._drop(email, entry)

    def invalidate(self) -> None:
        """Drop every entry and cancel requests still in flight."""
        for entry in self._entries.values():
            if not entry.task.done():
                entry.task.cancel()
        self._entries.clear()

    def bind(self, store: SessionStore) -> Callable[[], None]:
        """Invalidate on every session change. Returns the unsubscribe callable.

        Bind before any view subscribes so views re-fetch from a clean cache.
        """
        return store.subscribe(lambda _session: self.invalidate())

    def _on_done(self, email: str, entry: _Entry, task: asyncio.Task) -> None:
        if task.cancelled() or task.exception() is not None:
            self._drop(email, entry)

    def _drop(self, email: str, entry: _Entry) -> None:
        if self._entries.get(email) is entry:
            del self._entries[email]
