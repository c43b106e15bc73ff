"""End-to-end: BlogClient against the API app over an in-process transport."""

import asyncio
import unittest
from unittest.mock import patch

import httpx

from adapter.fake.navigator import FakeNavigator
from adapter.fake.notifier import FakeNotifier
from adapter.fake.user_repository import FakeUserRepository
from api.dependencies import get_user_repo
from api.main import app
from client.app import BlogClient
from client.pages import ProfilePage, Redirect
from domain.model.profile import PLACEHOLDER_AVATAR
from domain.model.session import SessionStatus


VALID_FORM = {
    "firstName": "Ada",
    "lastName": "Lovelace",
    "email": "ada@example.com",
    "password": "Secret123",
    "confirmPassword": "Secret123",
}


class _RecordingTransport(httpx.ASGITransport):
    def __init__(self, app):
        super().__init__(app=app)
        self.paths: list[str] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.paths.append(request.url.path)
        return await super().handle_async_request(request)


@patch('services.auth_service.BCRYPT_ROUNDS', 4)
class TestBlogClient(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.repo = FakeUserRepository()
        app.dependency_overrides[get_user_repo] = lambda: self.repo
        self.transport = _RecordingTransport(app)
        self.navigator = FakeNavigator()
        self.notifier = FakeNotifier()
        self.client = BlogClient(
            base_url="http://test",
            transport=self.transport,
            navigator=self.navigator,
            notifier=self.notifier,
        )

    async def asyncTearDown(self):
        await self.client.aclose()
        app.dependency_overrides.clear()

    async def _sign_up(self):
        view = self.client.signup()
        self.assertTrue(await view.submit(VALID_FORM))

    async def test_no_token_resolves_unauthenticated_without_request(self):
        session = await self.client.refresh_session()

        self.assertEqual(session.status, SessionStatus.UNAUTHENTICATED)
        self.assertEqual(self.transport.paths, [])

    async def test_signup_then_sign_in(self):
        await self._sign_up()
        session = await self.client.sign_in("ada@example.com", "Secret123")

        self.assertEqual(self.notifier.messages, [('success', "Account created")])
        self.assertTrue(session.is_authenticated)
        self.assertEqual(session.user.name, "Ada Lovelace")
        self.assertEqual(session.email, "ada@example.com")

    async def test_duplicate_signup_shows_server_message(self):
        await self._sign_up()

        ok = await self.client.signup().submit(VALID_FORM)

        self.assertFalse(ok)
        self.assertEqual(self.notifier.messages[-1], ('error', "Email already registered"))

    async def test_wrong_password_stays_signed_out(self):
        await self._sign_up()

        session = await self.client.sign_in("ada@example.com", "Wrong1234")

        self.assertEqual(session.status, SessionStatus.UNAUTHENTICATED)
        self.assertEqual(self.notifier.messages[-1], ('error', "Invalid email or password"))

    async def test_navbar_and_profile_share_one_user_request(self):
        await self._sign_up()
        navbar = self.client.navbar()
        profile = self.client.profile()
        navbar.mount()
        profile.mount()
        self.addCleanup(navbar.unmount)
        self.addCleanup(profile.unmount)

        await self.client.sign_in("ada@example.com", "Secret123")
        await asyncio.gather(navbar.hydration.settled(), profile.hydration.settled())

        self.assertEqual(self.transport.paths.count("/api/user"), 1)
        page = profile.render()
        self.assertIsInstance(page, ProfilePage)
        self.assertEqual(page.card.name, "Ada Lovelace")
        self.assertEqual(page.card.image, PLACEHOLDER_AVATAR)
        self.assertTrue(page.card.created_at.endswith("Z"))
        self.assertEqual(navbar.render().avatar_alt, "profile Ada")

    async def test_sign_out_gates_profile(self):
        await self._sign_up()
        await self.client.sign_in("ada@example.com", "Secret123")
        profile = self.client.profile()
        profile.mount()
        self.addCleanup(profile.unmount)
        await profile.hydration.settled()

        await self.client.sign_out()

        self.assertEqual(profile.render(), Redirect("/signin"))
        self.assertEqual(self.navigator.last, "/signin")
        self.assertNotIn("ada@example.com", self.client.user_cache)


if __name__ == '__main__':
    unittest.main()
