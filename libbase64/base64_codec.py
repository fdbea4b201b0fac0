"""Standard base64 (RFC 4648 alphabet, '=' padded) encoding and decoding.

Three input bytes (24 bits) become four 6-bit sextets, each written as one
character of ``ALPHABET``. A trailing group of one or two bytes is zero-filled
to 24 bits, only the significant sextets are written, and '=' fills the group
out to four characters.

Functions:
    encode: Bytes to base64 text. Never fails.
    decode: Base64 text to bytes, returned as a Result.
    encoded_length: Length of the text ``encode`` produces for n bytes.
    decoded_length: Byte count a well-formed encoded string decodes to.
"""

from typing import Dict, Union

from .codec import Codec
from .errors import Base64Error, Base64ErrorKind
from .result import Err, Ok, Result

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD = "="

_LOOKUP: Dict[str, int] = {c: i for i, c in enumerate(ALPHABET)}

# Bit offsets of the four sextets in a 24-bit group, most significant first
_SHIFTS = (18, 12, 6, 0)

BytesLike = Union[bytes, bytearray, memoryview]


def _symbols(group: int, count: int) -> str:
    """Map the first ``count`` sextets of a 24-bit group to alphabet characters."""
    return "".join(ALPHABET[(group >> shift) & 0x3F] for shift in _SHIFTS[:count])


def encode(data: BytesLike) -> str:
    """Encode bytes to padded base64 text.

    Args:
        data: Any bytes-like object.

    Returns:
        The encoded text; its length is always a multiple of 4.

    Examples:
        >>> encode(b"Man")
        'TWFu'
        >>> encode(b"M")
        'TQ=='
    """
    data = bytes(memoryview(data))
    remainder = len(data) % 3
    full = len(data) - remainder

    out = []
    for i in range(0, full, 3):
        out.append(_symbols(data[i] << 16 | data[i + 1] << 8 | data[i + 2], 4))

    if remainder == 1:
        out.append(_symbols(data[full] << 16, 2))
        out.append(PAD * 2)
    elif remainder == 2:
        out.append(_symbols(data[full] << 16 | data[full + 1] << 8, 3))
        out.append(PAD)

    return "".join(out)


def decode(text: str) -> Result[bytes]:
    """Decode padded base64 text to bytes.

    The length is checked before any symbol, so ``"TWF"`` is a length error
    even though every character in it is valid.

    Args:
        text: Encoded text. No whitespace or line breaks are allowed.

    Returns:
        Ok with the decoded bytes, or Err carrying a Base64Error whose kind is
        INVALID_LENGTH when ``len(text)`` is not a multiple of 4 and
        INVALID_SYMBOL for a character outside the alphabet, including '='
        anywhere but the last two positions.

    Examples:
        >>> decode("VGVzdA==").unwrapped
        b'Test'
        >>> decode("TWF$").error.kind
        <Base64ErrorKind.INVALID_SYMBOL: 'invalid_symbol'>
    """
    if not isinstance(text, str):
        raise TypeError(f"decode() expects str, not {type(text).__name__}")

    if len(text) % 4 != 0:
        return Err(Base64Error(Base64ErrorKind.INVALID_LENGTH))

    padding = len(text) - len(text.rstrip(PAD))
    end = len(text) - padding
    if padding > 2:
        return Err(Base64Error(Base64ErrorKind.INVALID_SYMBOL, position=end))

    out = bytearray()
    for start in range(0, len(text), 4):
        group = 0
        for pos in range(start, start + 4):
            if pos < end:
                index = _LOOKUP.get(text[pos])
                if index is None:
                    return Err(Base64Error(Base64ErrorKind.INVALID_SYMBOL, position=pos))
            else:
                index = 0
            group = group << 6 | index
        out.append(group >> 16 & 0xFF)
        out.append(group >> 8 & 0xFF)
        out.append(group & 0xFF)

    if padding:
        del out[-padding:]

    return Ok(bytes(out))


def encoded_length(n: int) -> int:
    """Return the length of the base64 text for ``n`` input bytes."""
    if n < 0:
        raise ValueError(f"byte count must be non-negative, got {n}")
    return (n + 2) // 3 * 4


def decoded_length(text: str) -> int:
    """Return how many bytes a well-formed encoded string decodes to.

    Only the length and trailing padding are inspected; symbols are not
    validated.

    Raises:
        ValueError: If ``len(text)`` is not a multiple of 4.
    """
    if len(text) % 4 != 0:
        raise ValueError(f"encoded length must be a multiple of 4, got {len(text)}")
    padding = min(2, len(text) - len(text.rstrip(PAD)))
    return len(text) // 4 * 3 - padding


class Base64Codec(Codec):
    """Byte-level base64 codec.

    Thin object wrapper over :func:`encode` and :func:`decode` for callers
    that take a :class:`Codec`.
    """

    def encode(self, data: BytesLike) -> str:
        """Encode bytes to base64 text.

        Args:
            data: The bytes to encode

        Returns:
            The encoded string
        """
        return encode(data)

    def decode(self, text: str) -> Result[bytes]:
        """Decode base64 text to bytes.

        Args:
            text: The string to decode

        Returns:
            Ok with the decoded bytes, or Err with the reason decoding failed
        """
        return decode(text)
