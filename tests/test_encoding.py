"""
Tests for request body encoding selection.
"""

import unittest

from webber.core.models import EncodingType
from webber.http.encoding import UTF8_ENCODER, encode_body, resolve_encoding


class TestResolveEncoding(unittest.TestCase):
    """Test encoding selector resolution."""

    def test_utf8(self):
        """Test UTF-8 encoding."""
        self.assertEqual(encode_body(EncodingType.UTF8, "héllo"), "héllo".encode("utf-8"))

    def test_unicode_is_utf16_le_without_bom(self):
        """Test that Unicode is UTF-16 little endian without a BOM."""
        self.assertEqual(encode_body(EncodingType.UNICODE, "ab"), b"a\x00b\x00")

    def test_utf32_is_true_utf32(self):
        """Test that UTF32 does not fall back to UTF-8."""
        encoded = encode_body(EncodingType.UTF32, "a")
        self.assertEqual(encoded, b"a\x00\x00\x00")
        self.assertEqual(len(encode_body(EncodingType.UTF32, "héllo")), 20)

    def test_ascii_replaces_unencodable_characters(self):
        """Test that ASCII replaces unencodable characters."""
        self.assertEqual(encode_body(EncodingType.ASCII, "héllo"), b"h?llo")

    def test_utf7(self):
        """Test UTF-7 encoding."""
        self.assertEqual(encode_body(EncodingType.UTF7, "é"), "é".encode("utf-7"))

    def test_string_selectors(self):
        """Test resolution of string selectors."""
        self.assertEqual(resolve_encoding("utf-32").codec, "utf-32-le")
        self.assertEqual(resolve_encoding("Unicode").codec, "utf-16-le")
        self.assertEqual(resolve_encoding("ascii").codec, "ascii")

    def test_unknown_selector_falls_back_to_utf8(self):
        """Test that unknown selectors fall back to UTF-8."""
        self.assertIs(resolve_encoding("latin-1"), UTF8_ENCODER)
        self.assertIs(resolve_encoding(None), UTF8_ENCODER)
        self.assertIs(resolve_encoding(42), UTF8_ENCODER)


if __name__ == "__main__":
    unittest.main()
