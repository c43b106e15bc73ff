"""In-memory SessionProvider for testing."""

import asyncio

from domain.model.session import Session


class FakeSessionProvider:
    """Resolves to a fixed session, optionally after an external release.

    Pass ``gate=asyncio.Event()`` to hold ``resolve()`` until the test sets
    the event, which keeps the store observable in its loading state. With
    ``error`` set, ``resolve()`` raises it instead of returning.
    """

    def __init__(
        self,
        session: Session | None = None,
        gate: asyncio.Event | None = None,
        error: Exception | None = None,
    ):
        self.session = session or Session.unauthenticated()
        self.gate = gate
        self.error = error
        self.calls = 0

    async def resolve(self) -> Session:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.session
