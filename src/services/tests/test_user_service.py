"""Unit tests for user_service."""

import unittest

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import NotFoundError
from services.user_service import get_user_record


class TestGetUserRecord(unittest.TestCase):

    def setUp(self):
        self.repo = FakeUserRepository()
        self.user = self.repo.create('Ada', 'Lovelace', 'ada@example.com', 'hash')

    def test_returns_user_for_known_email(self):
        self.assertIs(get_user_record(self.repo, 'ada@example.com'), self.user)

    def test_unknown_email_raises_not_found(self):
        with self.assertRaises(NotFoundError) as ctx:
            get_user_record(self.repo, 'nobody@example.com')
        self.assertEqual(str(ctx.exception), 'User not found')


if __name__ == '__main__':
    unittest.main()
