"""
Result type for codec decode operations.

Rust-like Result[T] with Ok/Err so that malformed input is reported as a
value instead of an exception:

    result = decode("TWF$")
    if result.is_err:
        print(result.error.kind)

    data = decode("TWFu").unwrapped      # b"Man"
    data = decode("TWF").unwrap_or(b"")  # b""
"""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .errors import Base64Error

T = TypeVar("T")
U = TypeVar("U")


class Result(Generic[T]):
    """Base class for Ok and Err."""

    def __bool__(self) -> bool:
        return self.is_ok

    @property
    @abstractmethod
    def is_ok(self) -> bool: ...

    @property
    @abstractmethod
    def is_err(self) -> bool: ...

    @property
    @abstractmethod
    def unwrapped(self) -> T: ...

    def and_then(self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        if self.is_ok:
            return func(self.unwrapped)
        return self  # type: ignore

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        if self.is_ok:
            return Ok(func(self.unwrapped))
        return self  # type: ignore

    def unwrap_or(self, default: T) -> T:
        return self.unwrapped if self.is_ok else default


@dataclass(frozen=True)
class Ok(Result[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    @property
    def unwrapped(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Result[T]):
    error: Base64Error

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    @property
    def unwrapped(self) -> T:
        raise self.error

    def __repr__(self) -> str:
        return f"Err({self.error!r})"
