"""
Tests for error handler isolation.
"""

import unittest
from unittest.mock import Mock

from webber.core.models import WebberResponse
from webber.core.notifier import ErrorNotifier


class TestErrorNotifier(unittest.TestCase):
    """Test notifier invocation rules."""

    def setUp(self):
        self.response = WebberResponse.failure("ConnectionError: refused")

    def test_unset_handler_is_noop(self):
        """Test that an unset handler is a no-op."""
        ErrorNotifier().notify(self.response)

    def test_handler_receives_response(self):
        """Test handler receives response."""
        handler = Mock()
        ErrorNotifier(handler).notify(self.response)
        handler.assert_called_once_with(self.response)

    def test_raising_handler_is_contained(self):
        """Test raising handler is contained."""
        handler = Mock(side_effect=RuntimeError("handler bug"))
        notifier = ErrorNotifier(handler)
        with self.assertLogs("webber.notifier", level="ERROR") as logs:
            notifier.notify(self.response)
        handler.assert_called_once()
        self.assertTrue(any("ConnectionError: refused" in line for line in logs.output))

    def test_cause_is_logged_before_handler(self):
        """Test cause is logged before handler."""
        calls = []
        notifier = ErrorNotifier(lambda r: calls.append("handler"))
        with self.assertLogs("webber.notifier", level="WARNING") as logs:
            notifier.notify(self.response, ValueError("bad json"))
        self.assertEqual(calls, ["handler"])
        self.assertIn("bad json", logs.output[0])


if __name__ == "__main__":
    unittest.main()
