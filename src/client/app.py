"""Client composition root.

Owns the HTTP client and the shared state, and builds views with their
collaborators injected.
"""

import logging
import os

import httpx

from adapter.console.ui import LoggingNavigator, LoggingNotifier
from adapter.external.session_provider import HttpSessionProvider
from adapter.external.signup_client import SignupClient
from adapter.external.user_data_client import UserDataClient
from client.session import SessionStore
from client.user_cache import UserDataCache
from client.views.navbar import NavBarView
from client.views.profile import ProfileView
from client.views.signup import SignUpView
from client.views.write_article import WriteArticleView
from domain.model.session import Session
from port.navigator import Navigator
from port.notifier import Notifier

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8000"
SIGNIN_ENDPOINT = "/api/auth/signin"
SIGNIN_FAILED_MESSAGE = "Invalid email or password"


class BlogClient:
    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        navigator: Navigator | None = None,
        notifier: Notifier | None = None,
    ):
        base_url = base_url or os.getenv("LRBLOG_API_URL", DEFAULT_API_URL)
        self.http = httpx.AsyncClient(base_url=base_url, transport=transport)
        self.navigator = navigator or LoggingNavigator()
        self.notifier = notifier or LoggingNotifier()

        self.session = SessionStore()
        self.session_provider = HttpSessionProvider(self.http, token)
        self.user_cache = UserDataCache(UserDataClient(self.http))
        # Bound first so the cache is clean before any view re-fetches
        self._unbind_cache = self.user_cache.bind(self.session)
        self.signup_client = SignupClient(self.http)

    async def __aenter__(self) -> "BlogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def refresh_session(self) -> Session:
        return await self.session.refresh(self.session_provider)

    async def sign_in(self, email: str, password: str) -> Session:
        """Exchange credentials for a token, then resolve the session.

        Any failure (rejected credentials, unreachable server, a body that
        is not the expected JSON) is shown as an error and leaves the
        session unauthenticated.
        """
        token, message = await self._request_token(email, password)
        if token is None:
            self.notifier.error(message)
            self.session_provider.token = None
            return await self.refresh_session()

        self.session_provider.token = token
        logger.info("Signed in", extra={"email": email})
        return await self.refresh_session()

    async def _request_token(self, email: str, password: str) -> tuple[str | None, str]:
        try:
            response = await self.http.post(SIGNIN_ENDPOINT, json={"email": email, "password": password})
        except httpx.RequestError as e:
            logger.warning("Sign-in request failed", extra={"error_type": type(e).__name__})
            return None, SIGNIN_FAILED_MESSAGE

        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            logger.warning("Unexpected sign-in response", extra={"status_code": response.status_code})
            return None, SIGNIN_FAILED_MESSAGE

        token = body.get("token")
        if response.is_success and isinstance(token, str) and token:
            return token, ""

        message = body.get("message")
        if not response.is_success:
            logger.info("Sign-in rejected", extra={"status_code": response.status_code, "reason": message})
        return None, str(message) if message else SIGNIN_FAILED_MESSAGE

    async def sign_out(self) -> Session:
        self.session_provider.token = None
        return await self.refresh_session()

    # ── view factories ────────────────────────────────────

    def navbar(self) -> NavBarView:
        return NavBarView(self.session, self.user_cache)

    def profile(self) -> ProfileView:
        return ProfileView(self.session, self.user_cache, self.navigator)

    def signup(self) -> SignUpView:
        return SignUpView(self.session, self.navigator, self.notifier, self.signup_client)

    def write_article(self) -> WriteArticleView:
        return WriteArticleView(self.session, self.navigator)

    async def aclose(self) -> None:
        self._unbind_cache()
        self.user_cache.invalidate()
        await self.http.aclose()
