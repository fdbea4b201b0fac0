"""libbase64 - Standard base64 encoding and decoding with value-based errors."""

__version__ = "0.1.0"

from .errors import Base64Error, Base64ErrorKind
from .result import Result, Ok, Err
from .codec import Codec
from .base64_codec import (
    ALPHABET,
    PAD,
    Base64Codec,
    encode,
    decode,
    encoded_length,
    decoded_length,
)
from .text_codec import TextCodec, encode_text, decode_text

__all__ = [
    "ALPHABET",
    "PAD",
    "encode",
    "decode",
    "encoded_length",
    "decoded_length",
    "encode_text",
    "decode_text",
    "Codec",
    "Base64Codec",
    "TextCodec",
    "Base64Error",
    "Base64ErrorKind",
    "Result",
    "Ok",
    "Err",
]
