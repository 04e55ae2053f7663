"""A value-or-error container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Unexpected(Generic[E]):
    """Marks a value as the error to store in an :class:`Expected`."""

    error: E


class Expected(Generic[T, E]):
    """Holds either a value or an error.

    Pass a plain value to store a value, or an :class:`Unexpected` to store
    an error. With no argument the container holds ``None`` as its value.
    """

    __slots__ = ("_ok", "_payload")

    def __init__(self, value: T | Unexpected[E] | None = None) -> None:
        if isinstance(value, Unexpected):
            self._ok = False
            self._payload: Any = value.error
        else:
            self._ok = True
            self._payload = value

    def has_value(self) -> bool:
        """True if a value is held rather than an error."""
        return self._ok

    def value(self) -> T:
        """Return the held value; raises ValueError if an error is held."""
        if not self._ok:
            raise ValueError(f"Expected holds an error: {self._payload!r}")
        return self._payload

    def error(self) -> E:
        """Return the held error; raises ValueError if a value is held."""
        if self._ok:
            raise ValueError(f"Expected holds a value: {self._payload!r}")
        return self._payload

    def value_or(self, default: T) -> T:
        """Return the held value, or ``default`` if an error is held."""
        return self._payload if self._ok else default

    def __bool__(self) -> bool:
        return self._ok

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Expected):
            return self._ok == other._ok and self._payload == other._payload
        if isinstance(other, Unexpected):
            return not self._ok and self._payload == other.error
        return self._ok and self._payload == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._ok:
            return f"Expected({self._payload!r})"
        return f"Expected(Unexpected({self._payload!r}))"