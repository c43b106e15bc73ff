"""Tests for NavBarView, alone and next to ProfileView."""

import asyncio
import unittest

from adapter.fake.navigator import FakeNavigator
from adapter.fake.user_data_client import FakeUserDataClient
from client.session import SessionStore
from client.user_cache import UserDataCache
from client.views.navbar import NavBarView
from client.views.profile import ProfileView
from domain.model.profile import PLACEHOLDER_AVATAR, UserRecord
from domain.model.session import Session, SessionUser


RECORD = UserRecord("Ada", "Lovelace", "ada@example.com", "https://img/ada.png", "t")
SESSION = Session.authenticated(SessionUser(email="ada@example.com"))


class TestNavBarView(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.client = FakeUserDataClient({"ada@example.com": RECORD})
        self.store = SessionStore()
        self.cache = UserDataCache(self.client)
        self.cache.bind(self.store)

    def _mount(self) -> NavBarView:
        view = NavBarView(self.store, self.cache)
        view.mount()
        self.addCleanup(view.unmount)
        return view

    async def test_loading_shows_spinner(self):
        page = self._mount().render()

        self.assertTrue(page.spinner)
        self.assertIsNone(page.link)
        self.assertEqual(self.client.calls, [])

    async def test_unauthenticated_shows_signup_link(self):
        self.store.set(Session.unauthenticated())

        page = self._mount().render()

        self.assertFalse(page.spinner)
        self.assertEqual(page.link, "/signup")
        self.assertEqual(page.link_label, "Sign Up")

    async def test_authenticated_shows_fetched_avatar(self):
        self.store.set(SESSION)
        view = self._mount()
        await view.hydration.settled()

        page = view.render()

        self.assertEqual(page.avatar, "https://img/ada.png")
        self.assertEqual(page.avatar_alt, "profile Ada")
        self.assertEqual(page.link, "/profile")

    async def test_session_image_beats_fetched_avatar(self):
        self.store.set(Session.authenticated(SessionUser(email="ada@example.com", image="s")))
        view = self._mount()
        await view.hydration.settled()

        self.assertEqual(view.render().avatar, "s")

    async def test_placeholder_before_fetch_settles(self):
        self.store.set(SESSION)
        view = self._mount()

        self.assertEqual(view.render().avatar, PLACEHOLDER_AVATAR)

    async def test_navbar_and_profile_share_one_request(self):
        self.store.set(SESSION)
        navbar = self._mount()
        profile = ProfileView(self.store, self.cache, FakeNavigator())
        profile.mount()
        self.addCleanup(profile.unmount)

        await asyncio.gather(navbar.hydration.settled(), profile.hydration.settled())

        self.assertEqual(self.client.calls, ["ada@example.com"])
        self.assertEqual(navbar.user, RECORD)
        self.assertEqual(profile.user, RECORD)

    async def test_navbar_keeps_request_alive_when_profile_unmounts(self):
        gate = asyncio.Event()
        self.client.gate = gate
        self.store.set(SESSION)
        navbar = self._mount()
        profile = ProfileView(self.store, self.cache, FakeNavigator())
        profile.mount()
        await asyncio.sleep(0)
        await asyncio.sleep(0)

        profile.unmount()
        await asyncio.sleep(0)
        gate.set()
        await navbar.hydration.settled()

        self.assertEqual(self.client.cancelled, [])
        self.assertEqual(navbar.user, RECORD)
        self.assertEqual(profile.user, UserRecord.empty())


if __name__ == '__main__':
    unittest.main()
