"""Tests for the logging Navigator and Notifier."""

import unittest

from adapter.console.ui import LoggingNavigator, LoggingNotifier


class TestLoggingNavigator(unittest.TestCase):

    def test_redirect_moves_location_and_logs(self):
        navigator = LoggingNavigator()

        with self.assertLogs('adapter.console.ui', level='INFO') as logs:
            navigator.redirect("/signin")

        self.assertEqual(navigator.location, "/signin")
        self.assertEqual(len(logs.records), 1)
        self.assertEqual(logs.records[0].to, "/signin")

    def test_redirect_to_current_location_is_silent(self):
        navigator = LoggingNavigator()
        navigator.redirect("/profile")

        with self.assertNoLogs('adapter.console.ui', level='INFO'):
            navigator.redirect("/profile")


class TestLoggingNotifier(unittest.TestCase):

    def test_success_logs_info(self):
        with self.assertLogs('adapter.console.ui', level='INFO') as logs:
            LoggingNotifier().success("Account created")

        self.assertEqual(logs.records[0].levelname, 'INFO')
        self.assertEqual(logs.records[0].getMessage(), "Account created")
        self.assertEqual(logs.records[0].toast, 'success')

    def test_error_logs_warning(self):
        with self.assertLogs('adapter.console.ui', level='INFO') as logs:
            LoggingNotifier().error("Email taken")

        self.assertEqual(logs.records[0].levelname, 'WARNING')
        self.assertEqual(logs.records[0].toast, 'error')


if __name__ == '__main__':
    unittest.main()
