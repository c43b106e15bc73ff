"""In-memory User Data Client for testing."""

import asyncio

from domain.model.errors import UserDataError
from domain.model.profile import UserRecord


class FakeUserDataClient:
    """Serves records from a dict; unknown emails fail like a 404 would.

    With ``gate`` set, every call blocks until the test sets the event, so
    requests can be observed in flight and cancelled.
    """

    def __init__(
        self,
        records: dict[str, UserRecord] | None = None,
        gate: asyncio.Event | None = None,
    ):
        self.records = records or {}
        self.gate = gate
        self.calls: list[str] = []
        self.cancelled: list[str] = []

    async def get_user_data(self, email: str) -> UserRecord:
        self.calls.append(email)
        try:
            if self.gate is not None:
                await self.gate.wait()
        except asyncio.CancelledError:
            self.cancelled.append(email)
            raise
        if email not in self.records:
            raise UserDataError()
        return self.records[email]
