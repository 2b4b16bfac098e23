"""
Tests for request file validation.
"""

import os
import tempfile
import unittest

from webber.config_models import RequestFileConfig, load_and_validate_config
from webber.core.models import EncodingType, MethodType


class TestRequestFileConfig(unittest.TestCase):
    """Test pydantic validation of request files."""

    def test_defaults(self):
        """Test default values of a minimal request file."""
        config = RequestFileConfig(request={"url": "https://example.com"})
        self.assertEqual(config.client.app_name, "Webber")
        self.assertEqual(config.request.method, MethodType.POST)
        self.assertEqual(config.request.encoding, EncodingType.UTF8)
        self.assertEqual(config.request.headers, {})

    def test_method_is_normalized(self):
        """Test method is normalized."""
        config = RequestFileConfig(request={"url": "https://example.com", "method": "patch"})
        self.assertEqual(config.request.method, "PATCH")

    def test_rejects_unknown_method(self):
        """Test that unsupported verbs are rejected."""
        with self.assertRaises(ValueError):
            RequestFileConfig(request={"url": "https://example.com", "method": "DELETE"})

    def test_rejects_non_http_url(self):
        """Test that non HTTP URLs are rejected."""
        with self.assertRaises(ValueError):
            RequestFileConfig(request={"url": "ftp://example.com"})

    def test_body_and_json_are_exclusive(self):
        """Test body and json are exclusive."""
        with self.assertRaises(ValueError):
            RequestFileConfig(request={"url": "https://example.com", "body": "x", "json": {"a": 1}})

    def test_to_webber_config(self):
        """Test conversion into a client configuration."""
        config = RequestFileConfig(client={"app_name": "Cli", "timeout_s": 3}, request={"url": "https://e.com"})
        handler = object()
        webber_config = config.to_webber_config(error_handler=handler)
        self.assertEqual(webber_config.app_name, "Cli")
        self.assertEqual(webber_config.timeout_s, 3)
        self.assertIs(webber_config.error_handler, handler)


class TestLoadAndValidateConfig(unittest.TestCase):
    """Test loading request files from disk."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def _write(self, text):
        path = os.path.join(self.temp_dir, "request.yaml")
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_loads_valid_file(self):
        """Test loads valid file."""
        path = self._write(
            "request:\n"
            "  url: https://example.com/posts\n"
            "  json:\n"
            "    title: hello\n"
            "  headers:\n"
            "    X-Trace: abc\n"
        )
        config = load_and_validate_config(path)
        self.assertEqual(config.request.json_body, {"title": "hello"})
        self.assertEqual(config.request.headers, {"X-Trace": "abc"})

    def test_validation_errors_are_formatted(self):
        """Test validation errors are formatted."""
        path = self._write("request:\n  method: GET\n")
        with self.assertRaisesRegex(ValueError, "request.url"):
            load_and_validate_config(path)

    def test_missing_file(self):
        """Test loading a file that does not exist."""
        with self.assertRaises(FileNotFoundError):
            load_and_validate_config(os.path.join(self.temp_dir, "nope.yaml"))

    def test_invalid_yaml(self):
        """Test loading malformed YAML."""
        path = self._write("request: [unclosed\n")
        with self.assertRaisesRegex(ValueError, "Invalid YAML"):
            load_and_validate_config(path)


if __name__ == "__main__":
    unittest.main()
