"""A mutable character string with explicit capacity management."""

from __future__ import annotations

from collections.abc import Iterator


def _text_of(value: str | DynamicString) -> str:
    if isinstance(value, DynamicString):
        return str(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"expected str or DynamicString, got {type(value).__name__}")


def _check_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError("expected a single character")
    return char


class DynamicString:
    """A growable string of characters.

    Capacity counts storage for the characters plus one terminating slot,
    so ``capacity() >= len(s) + 1`` always holds.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, text: str | DynamicString = "") -> None:
        chars = _text_of(text)
        self._chars: list[str] = list(chars)
        self._capacity = len(self._chars) + 1

    def _ensure_capacity(self, new_capacity: int) -> None:
        if new_capacity <= self._capacity:
            return
        self._capacity = new_capacity * 2

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"DynamicString({str(self)!r})"

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __reversed__(self) -> Iterator[str]:
        return reversed(self._chars)

    def __getitem__(self, index: int | slice) -> str:
        if isinstance(index, slice):
            return "".join(self._chars[index])
        return self._chars[index]

    def __setitem__(self, index: int, char: str) -> None:
        if isinstance(index, slice):
            raise TypeError("DynamicString does not support slice assignment")
        self._chars[index] = _check_char(char)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DynamicString):
            return self._chars == other._chars
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __iadd__(self, other: str | DynamicString) -> DynamicString:
        return self.append(other)

    def assign(self, text: str | DynamicString) -> None:
        """Replace the contents with ``text``."""
        if text is self:
            return
        chars = _text_of(text)
        self._ensure_capacity(len(chars) + 1)
        self._chars = list(chars)

    def at(self, index: int) -> str:
        """Return the character at ``index``, which must be in ``0 <= index < len``."""
        if not 0 <= index < len(self._chars):
            raise IndexError("String::at: index out of range")
        return self._chars[index]

    def front(self) -> str:
        """Return the first character."""
        if not self._chars:
            raise IndexError("front of an empty string")
        return self._chars[0]

    def back(self) -> str:
        """Return the last character."""
        if not self._chars:
            raise IndexError("back of an empty string")
        return self._chars[-1]

    def empty(self) -> bool:
        """Return True if the string has no characters."""
        return not self._chars

    def reserve(self, new_capacity: int = 0) -> None:
        """Grow capacity to at least ``new_capacity``; never shrinks."""
        self._ensure_capacity(new_capacity)

    def capacity(self) -> int:
        """Return the current capacity, including the terminating slot."""
        return self._capacity

    def shrink_to_fit(self) -> None:
        """Reduce capacity to exactly what the contents need."""
        if self._capacity > len(self._chars) + 1:
            self._capacity = len(self._chars) + 1

    def clear(self) -> None:
        """Remove all characters, keeping the capacity."""
        self._chars.clear()

    def insert(self, pos: int, text: str | DynamicString) -> None:
        """Insert ``text`` before position ``pos`` (``0 <= pos <= len``)."""
        if pos < 0 or pos > len(self._chars):
            raise IndexError("insert position out of range")
        chars = _text_of(text)
        needed = len(self._chars) + len(chars) + 1
        if needed > self._capacity:
            self.reserve(needed * 2)
        self._chars[pos:pos] = list(chars)

    def push_back(self, char: str) -> None:
        """Append a single character."""
        _check_char(char)
        if len(self._chars) + 2 > self._capacity:
            self.reserve(2 * self._capacity)
        self._chars.append(char)

    def pop_back(self) -> None:
        """Remove the last character."""
        if not self._chars:
            raise IndexError("blank string")
        self._chars.pop()

    def append(self, text: str | DynamicString) -> DynamicString:
        """Append ``text`` and return this string."""
        chars = _text_of(text)
        new_size = len(self._chars) + len(chars)
        if new_size + 1 > self._capacity:
            self.reserve((new_size + 1) * 2)
        self._chars.extend(chars)
        return self

    def swap(self, other: DynamicString) -> None:
        """Exchange contents and capacity with another string."""
        if not isinstance(other, DynamicString):
            raise TypeError("can only swap with another DynamicString")
        self._chars, other._chars = other._chars, self._chars
        self._capacity, other._capacity = other._capacity, self._capacity