"""User Data Client.

Fetches a user's profile record from ``POST /api/user``. Every non-2xx
response collapses into one generic UserDataError; callers never see a
status code.
"""

import logging

import httpx

from domain.model.errors import UserDataError
from domain.model.profile import UserRecord

logger = logging.getLogger(__name__)

USER_ENDPOINT = "/api/user"


class UserDataClient:
    """Thin wrapper over one shared ``httpx.AsyncClient``.

    No retry and no request de-duplication here; sharing concurrent calls
    is the job of ``client.user_cache.UserDataCache``. Cancelling the
    awaiting task aborts the request.
    """

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def get_user_data(self, email: str) -> UserRecord:
        try:
            response = await self._http.post(USER_ENDPOINT, json={"email": email})
        except httpx.RequestError as e:
            logger.warning(
                "User data request failed",
                extra={"email": email, "error_type": type(e).__name__},
            )
            raise UserDataError() from e

        if not response.is_success:
            logger.warning(
                "Error fetching user data",
                extra={"email": email, "status_code": response.status_code},
            )
            raise UserDataError()

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("User data response was not JSON", extra={"email": email})
            raise UserDataError() from e

        if not isinstance(data, dict):
            logger.warning(
                "Unexpected user data payload",
                extra={"email": email, "type": type(data).__name__},
            )
            raise UserDataError()

        return UserRecord.from_json(data)
