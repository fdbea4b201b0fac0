"""Error kinds reported by the base64 codec."""

from enum import Enum
from typing import Optional


class Base64ErrorKind(Enum):
    """Reasons a decode can fail."""

    INVALID_LENGTH = "invalid_length"    # Length not a multiple of 4
    INVALID_SYMBOL = "invalid_symbol"    # Character outside the alphabet, or misplaced '='
    INVALID_UTF8 = "invalid_utf8"        # Decoded bytes are not UTF-8 (text layer only)

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    Base64ErrorKind.INVALID_LENGTH: "Invalid input data length",
    Base64ErrorKind.INVALID_SYMBOL: "Invalid base64 data",
    Base64ErrorKind.INVALID_UTF8: "Invalid UTF-8 text",
}


class Base64Error(ValueError):
    """A decode failure.

    Instances are returned inside :class:`~libbase64.result.Err` rather than
    raised; ``Result.unwrapped`` raises them when the caller prefers
    exceptions.

    Args:
        kind: What went wrong.
        position: Index of the offending character in the encoded text,
                  when the failure can be pinned to one.
    """

    def __init__(self, kind: Base64ErrorKind, position: Optional[int] = None) -> None:
        super().__init__(kind.message)
        self.kind = kind
        self.position = position

    def __str__(self) -> str:
        return f"Base64 error : {self.kind.message}"

    def __repr__(self) -> str:
        if self.position is None:
            return f"Base64Error({self.kind.name})"
        return f"Base64Error({self.kind.name}, position={self.position})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Base64Error):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)
