"""Session provider backed by ``GET /api/auth/session``."""

import logging

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from domain.model.session import Session, SessionUser

logger = logging.getLogger(__name__)

SESSION_ENDPOINT = "/api/auth/session"


class HttpSessionProvider:
    """Turns a bearer token into a Session.

    No token, a 401, or a server that stays unreachable all resolve to an
    unauthenticated session; the views then redirect to sign-in.
    """

    def __init__(self, http: httpx.AsyncClient, token: str | None = None):
        self._http = http
        self.token = token

    async def resolve(self) -> Session:
        if not self.token:
            return Session.unauthenticated()

        try:
            response = await _fetch_with_retry(self._http, self.token)
        except httpx.RequestError as e:
            logger.warning(
                "Session request failed",
                extra={"error_type": type(e).__name__},
            )
            return Session.unauthenticated()

        if response.status_code == 401:
            logger.debug("Session token rejected")
            return Session.unauthenticated()

        if not response.is_success:
            logger.warning(
                "Unexpected session response",
                extra={"status_code": response.status_code},
            )
            return Session.unauthenticated()

        try:
            data = response.json()
        except ValueError:
            logger.warning("Session response was not JSON")
            return Session.unauthenticated()

        user = data.get("user") if isinstance(data, dict) else None
        if not isinstance(user, dict):
            logger.warning("Unexpected session payload", extra={"type": type(data).__name__})
            return Session.unauthenticated()

        return Session.authenticated(SessionUser.from_dict(user), token=self.token)


# ── HTTP helpers ─────────────────────────────────────────────


@retry(
    retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True,
)
async def _fetch_with_retry(http: httpx.AsyncClient, token: str) -> httpx.Response:
    """Fetch the session with automatic retry on transient failures."""
    return await http.get(SESSION_ENDPOINT, headers={"Authorization": f"Bearer {token}"})
