"""Tests for WriteArticleView."""

import unittest

from adapter.fake.navigator import FakeNavigator
from client.pages import LoadingScreen, Redirect, WriteArticlePage
from client.session import SessionStore
from client.views.write_article import WriteArticleView
from domain.model.session import Session, SessionUser


class TestWriteArticleView(unittest.TestCase):

    def setUp(self):
        self.store = SessionStore()
        self.navigator = FakeNavigator()
        self.view = WriteArticleView(self.store, self.navigator)

    def test_loading_renders_placeholder(self):
        self.assertIsInstance(self.view.render(), LoadingScreen)
        self.assertEqual(self.navigator.redirects, [])

    def test_unauthenticated_redirects_to_signin(self):
        self.store.set(Session.unauthenticated())

        self.assertEqual(self.view.render(), Redirect("/signin"))
        self.assertEqual(self.navigator.last, "/signin")

    def test_authenticated_renders_editor(self):
        self.store.set(Session.authenticated(SessionUser(email="a@b.com")))

        page = self.view.render()

        self.assertEqual(page, WriteArticlePage())
        self.assertEqual(page.heading, "New Article")


if __name__ == '__main__':
    unittest.main()
