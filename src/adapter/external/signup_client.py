"""Signup submission over HTTP."""

import logging
from dataclasses import dataclass

import httpx

logger = logging.getLogger(__name__)

SIGNUP_ENDPOINT = "/api/signup"
FALLBACK_ERROR_MESSAGE = "Something went wrong, please try again"


@dataclass(frozen=True)
class SignupResult:
    """Outcome of a signup POST: ``ok`` picks the notification style."""
    ok: bool
    message: str


class SignupClient:
    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def submit(self, payload: dict) -> SignupResult:
        """POST the form as JSON and read ``message`` whatever the status."""
        try:
            response = await self._http.post(SIGNUP_ENDPOINT, json=payload)
        except httpx.RequestError as e:
            logger.warning("Signup request failed", extra={"error_type": type(e).__name__})
            return SignupResult(ok=False, message=FALLBACK_ERROR_MESSAGE)

        try:
            body = response.json()
        except ValueError:
            body = {}

        message = body.get("message") if isinstance(body, dict) else None
        if not message:
            message = FALLBACK_ERROR_MESSAGE if not response.is_success else ""

        if not response.is_success:
            logger.info(
                "Signup rejected",
                extra={"status_code": response.status_code, "reason": message},
            )
        return SignupResult(ok=response.is_success, message=str(message))
