"""Tests for SessionStore."""

import asyncio
import unittest

from adapter.fake.session_provider import FakeSessionProvider
from client.session import SessionStore
from domain.model.session import Session, SessionStatus, SessionUser


AUTHENTICATED = Session.authenticated(SessionUser(email="a@b.com"), token="tok")


class TestSessionStore(unittest.TestCase):

    def test_starts_loading(self):
        self.assertEqual(SessionStore().session.status, SessionStatus.LOADING)

    def test_set_notifies_in_registration_order(self):
        store = SessionStore()
        order = []
        store.subscribe(lambda s: order.append(("first", s.status)))
        store.subscribe(lambda s: order.append(("second", s.status)))

        store.set(AUTHENTICATED)

        self.assertEqual(order, [
            ("first", SessionStatus.AUTHENTICATED),
            ("second", SessionStatus.AUTHENTICATED),
        ])

    def test_equal_session_does_not_notify(self):
        store = SessionStore(AUTHENTICATED)
        seen = []
        store.subscribe(seen.append)

        store.set(Session.authenticated(SessionUser(email="a@b.com"), token="tok"))

        self.assertEqual(seen, [])

    def test_unsubscribe_stops_notifications(self):
        store = SessionStore()
        seen = []
        unsubscribe = store.subscribe(seen.append)

        unsubscribe()
        unsubscribe()
        store.set(AUTHENTICATED)

        self.assertEqual(seen, [])


class TestRefresh(unittest.IsolatedAsyncioTestCase):

    async def test_refresh_passes_through_loading(self):
        store = SessionStore(Session.unauthenticated())
        gate = asyncio.Event()
        provider = FakeSessionProvider(AUTHENTICATED, gate=gate)
        seen = []
        store.subscribe(lambda s: seen.append(s.status))

        task = asyncio.create_task(store.refresh(provider))
        await asyncio.sleep(0)
        self.assertTrue(store.session.is_loading)

        gate.set()
        session = await task

        self.assertEqual(session, AUTHENTICATED)
        self.assertEqual(seen, [SessionStatus.LOADING, SessionStatus.AUTHENTICATED])
        self.assertEqual(provider.calls, 1)

    async def test_failing_provider_resolves_unauthenticated(self):
        store = SessionStore()
        provider = FakeSessionProvider(error=ValueError("Expecting value"))

        with self.assertLogs('client.session', level='ERROR'):
            session = await store.refresh(provider)

        self.assertEqual(session.status, SessionStatus.UNAUTHENTICATED)
        self.assertEqual(store.session.status, SessionStatus.UNAUTHENTICATED)

    async def test_later_refresh_wins_over_slower_earlier_one(self):
        store = SessionStore(Session.unauthenticated())
        gate = asyncio.Event()
        sign_in = FakeSessionProvider(AUTHENTICATED, gate=gate)
        sign_out = FakeSessionProvider(Session.unauthenticated())
        seen = []
        store.subscribe(lambda s: seen.append(s.status))

        slow = asyncio.create_task(store.refresh(sign_in))
        await asyncio.sleep(0)
        await store.refresh(sign_out)
        gate.set()
        result = await slow

        self.assertEqual(store.session.status, SessionStatus.UNAUTHENTICATED)
        self.assertEqual(result.status, SessionStatus.UNAUTHENTICATED)
        self.assertNotIn(SessionStatus.AUTHENTICATED, seen)


if __name__ == '__main__':
    unittest.main()
