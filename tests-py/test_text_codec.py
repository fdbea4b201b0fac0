"""Tests for the UTF-8 text layer."""

import unittest
from libbase64 import (
    Base64Codec,
    Base64ErrorKind,
    TextCodec,
    decode_text,
    encode,
    encode_text,
)


class TestTextFunctions(unittest.TestCase):
    """Test cases for encode_text and decode_text."""

    def test_encode_text(self) -> None:
        """Encode a simple string."""
        self.assertEqual(encode_text("Test"), "VGVzdA==")

    def test_encode_text_unicode(self) -> None:
        """Non-ASCII text is encoded as UTF-8."""
        self.assertEqual(encode_text("Je t'aime ma chérie"), "SmUgdCdhaW1lIG1hIGNow6lyaWU=")

    def test_decode_text(self) -> None:
        """Decode to a string."""
        self.assertEqual(
            decode_text("Sm95ZXV4IGFubml2ZXJzYWlyZSAh").unwrapped,
            "Joyeux anniversaire !",
        )

    def test_roundtrip_unicode(self) -> None:
        """Japanese text survives a round trip."""
        original = "猫を食べる"
        self.assertEqual(decode_text(encode_text(original)).unwrapped, original)

    def test_empty(self) -> None:
        """Empty string in, empty string out."""
        self.assertEqual(encode_text(""), "")
        self.assertEqual(decode_text("").unwrapped, "")

    def test_invalid_utf8(self) -> None:
        """Bytes that are not UTF-8 give an INVALID_UTF8 error."""
        result = decode_text(encode(b"ok\xff"))
        self.assertTrue(result.is_err)
        self.assertEqual(result.error.kind, Base64ErrorKind.INVALID_UTF8)
        self.assertEqual(result.error.position, 2)

    def test_truncated_utf8_sequence(self) -> None:
        """A multi-byte sequence cut short is not valid text."""
        data = "é".encode("utf-8")[:1]
        self.assertEqual(decode_text(encode(data)).error.kind, Base64ErrorKind.INVALID_UTF8)

    def test_byte_level_errors_pass_through(self) -> None:
        """Length and symbol errors are reported unchanged."""
        self.assertEqual(decode_text("TWF").error.kind, Base64ErrorKind.INVALID_LENGTH)
        self.assertEqual(decode_text("TWF$").error.kind, Base64ErrorKind.INVALID_SYMBOL)

    def test_encode_text_rejects_bytes(self) -> None:
        """Bytes belong to the byte-level codec."""
        with self.assertRaises(TypeError):
            encode_text(b"Test")  # type: ignore[arg-type]


class TestTextCodec(unittest.TestCase):
    """Test cases for TextCodec."""

    def setUp(self) -> None:
        """Set up test fixtures."""
        self.codec = TextCodec()

    def test_default_byte_codec(self) -> None:
        """A Base64Codec is created when none is given."""
        self.assertIsInstance(self.codec.byte_codec, Base64Codec)

    def test_custom_byte_codec(self) -> None:
        """An explicit byte codec is used as given."""
        byte_codec = Base64Codec()
        codec = TextCodec(byte_codec)
        self.assertIs(codec.byte_codec, byte_codec)
        self.assertEqual(codec.encode("Man"), "TWFu")

    def test_encode_decode_roundtrip(self) -> None:
        """Test that encode followed by decode returns original string."""
        original = "hello 世界"
        self.assertEqual(self.codec.decode(self.codec.encode(original)).unwrapped, original)

    def test_decode_error_unwrap_or(self) -> None:
        """unwrap_or supplies a fallback for bad input."""
        self.assertEqual(self.codec.decode("TWF$").unwrap_or("fallback"), "fallback")


if __name__ == "__main__":
    unittest.main()
