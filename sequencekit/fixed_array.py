"""A fixed-size sequence whose length is set once at construction."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class FixedArray:
    """A mutable sequence of a fixed number of elements.

    Elements can be read and replaced, but the length never changes.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int, value: Any = None) -> None:
        if size < 0:
            raise ValueError("FixedArray size must not be negative")
        self._items: list[Any] = [value] * size

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __getitem__(self, index: int) -> Any:
        if isinstance(index, slice):
            return self._items[index]
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        if isinstance(index, slice):
            raise TypeError("FixedArray does not support slice assignment")
        self._items[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedArray):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"FixedArray({self._items!r})"

    def at(self, index: int) -> Any:
        """Return the element at ``index``, which must be in ``0 <= index < len``."""
        if not 0 <= index < len(self._items):
            raise IndexError("FixedArray.at")
        return self._items[index]

    def front(self) -> Any:
        """Return the first element."""
        if not self._items:
            raise IndexError("FixedArray.front: array is empty")
        return self._items[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise IndexError("FixedArray.back: array is empty")
        return self._items[-1]

    def empty(self) -> bool:
        """Return True if the array holds no elements."""
        return not self._items

    def max_size(self) -> int:
        """Return the largest number of elements the array can hold."""
        return len(self._items)

    def fill(self, value: Any) -> None:
        """Set every element to ``value``."""
        self._items = [value] * len(self._items)

    def swap(self, other: FixedArray) -> None:
        """Exchange contents with another array of the same size."""
        if not isinstance(other, FixedArray):
            raise TypeError("can only swap with another FixedArray")
        if len(other) != len(self):
            raise ValueError("cannot swap arrays of different sizes")
        self._items, other._items = other._items, self._items