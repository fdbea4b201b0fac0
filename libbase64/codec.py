"""Abstract base class for codecs."""

from abc import ABC, abstractmethod
from typing import Any

from .result import Result


class Codec(ABC):
    """Base codec interface.

    ``encode`` is total and returns the encoded text. ``decode`` never raises
    for malformed input; it returns a :class:`Result` holding either the
    decoded value or a :class:`~libbase64.errors.Base64Error`.
    """

    @abstractmethod
    def encode(self, data: Any) -> str:
        """Encode a value.

        Args:
            data: The value to encode

        Returns:
            The encoded string
        """
        pass

    @abstractmethod
    def decode(self, text: str) -> Result[Any]:
        """Decode a string.

        Args:
            text: The string to decode

        Returns:
            Ok with the decoded value, or Err with the reason decoding failed
        """
        pass
