"""UTF-8 text layer on top of the byte-level base64 codec."""

from typing import Optional

from .base64_codec import Base64Codec
from .codec import Codec
from .errors import Base64Error, Base64ErrorKind
from .result import Err, Ok, Result


def _to_text(data: bytes) -> Result[str]:
    try:
        return Ok(data.decode("utf-8"))
    except UnicodeDecodeError as e:
        return Err(Base64Error(Base64ErrorKind.INVALID_UTF8, position=e.start))


class TextCodec(Codec):
    """Codec that base64-encodes the UTF-8 bytes of a string.

    Decoding adds one failure mode to the byte codec's: INVALID_UTF8 when the
    decoded bytes are not valid UTF-8. For that kind, ``position`` is the
    offset of the first bad byte in the decoded data.
    """

    def __init__(self, byte_codec: Optional[Base64Codec] = None) -> None:
        """Initialize the text codec.

        Args:
            byte_codec: Codec used for the byte-level transform. Defaults to
                        a new Base64Codec.
        """
        self.byte_codec = byte_codec if byte_codec is not None else Base64Codec()

    def encode(self, text: str) -> str:
        """Encode a string by base64-encoding its UTF-8 bytes.

        Args:
            text: The string to encode

        Returns:
            The encoded string
        """
        if not isinstance(text, str):
            raise TypeError(f"encode() expects str, not {type(text).__name__}")
        return self.byte_codec.encode(text.encode("utf-8"))

    def decode(self, text: str) -> Result[str]:
        """Decode base64 text and read the result as UTF-8.

        Args:
            text: The string to decode

        Returns:
            Ok with the decoded string, or Err with the reason decoding failed
        """
        return self.byte_codec.decode(text).and_then(_to_text)


_default = TextCodec()


def encode_text(text: str) -> str:
    """Encode the UTF-8 bytes of ``text`` to base64.

    >>> encode_text("Test")
    'VGVzdA=='
    """
    return _default.encode(text)


def decode_text(text: str) -> Result[str]:
    """Decode base64 ``text`` to a string.

    >>> decode_text("VGVzdA==").unwrapped
    'Test'
    """
    return _default.decode(text)
