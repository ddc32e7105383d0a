"""A growable sequence with explicit capacity management."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

_MAX_SIZE = 100_000_000_000
_OUT_OF_RANGE = "accessing vector out of range"


class Vector:
    """A dynamic array whose capacity grows geometrically as elements are added.

    ``len(v) <= v.capacity()`` always holds. Capacity only shrinks through
    :meth:`shrink_to_fit`.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, count: int = 0, value: Any = None) -> None:
        if count < 0:
            raise ValueError("Vector count must not be negative")
        self._check_limit(count)
        self._items: list[Any] = [value] * count
        self._capacity = count

    @staticmethod
    def _check_limit(capacity: int) -> None:
        if capacity > _MAX_SIZE:
            raise MemoryError("requested capacity exceeds max_size()")

    def _ensure_capacity(self, new_capacity: int) -> None:
        new_capacity = new_capacity or 1
        if self._capacity >= new_capacity:
            return
        self._check_limit(new_capacity)
        self._capacity = new_capacity

    def _grow_for_one(self) -> None:
        if len(self._items) == self._capacity:
            self._ensure_capacity(self._capacity * 2 if self._capacity else 1)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return self._items[index]
        try:
            return self._items[index]
        except IndexError:
            raise IndexError(_OUT_OF_RANGE) from None

    def __setitem__(self, index: int, value: Any) -> None:
        if isinstance(index, slice):
            raise TypeError("Vector does not support slice assignment")
        try:
            self._items[index] = value
        except IndexError:
            raise IndexError(_OUT_OF_RANGE) from None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def copy(self) -> Vector:
        """Return an independent copy whose capacity equals its length."""
        duplicate = Vector()
        duplicate._items = list(self._items)
        duplicate._capacity = len(self._items)
        return duplicate

    def assign(self, count: int, value: Any) -> None:
        """Replace the contents with ``count`` copies of ``value``."""
        if count < 0:
            raise ValueError("count must not be negative")
        self._ensure_capacity(count)
        self._items = [value] * count

    def at(self, index: int) -> Any:
        """Return the element at ``index``, which must be in ``0 <= index < len``."""
        if not 0 <= index < len(self._items):
            raise IndexError(_OUT_OF_RANGE)
        return self._items[index]

    def front(self) -> Any:
        """Return the first element."""
        if not self._items:
            raise IndexError(_OUT_OF_RANGE)
        return self._items[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise IndexError(_OUT_OF_RANGE)
        return self._items[-1]

    def empty(self) -> bool:
        """Return True if the vector holds no elements."""
        return not self._items

    def max_size(self) -> int:
        """Return the largest number of elements the vector may hold."""
        return _MAX_SIZE

    def reserve(self, new_capacity: int) -> None:
        """Grow capacity to at least ``new_capacity`` (and at least 1)."""
        self._ensure_capacity(new_capacity)

    def capacity(self) -> int:
        """Return the number of elements that fit without growing."""
        return self._capacity

    def shrink_to_fit(self) -> None:
        """Reduce capacity to the current length."""
        self._capacity = len(self._items)

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._items.clear()

    def insert(self, index: int, value: Any, count: int = 1) -> int:
        """Insert ``count`` copies of ``value`` before ``index``; return ``index``."""
        size = len(self._items)
        if not 0 <= index <= size:
            raise IndexError(_OUT_OF_RANGE)
        if count < 0:
            raise ValueError("count must not be negative")
        if count == 1:
            self._grow_for_one()
        else:
            new_size = size + count
            if new_size > self._capacity:
                self._ensure_capacity(max(new_size, self._capacity * 2))
        self._items[index:index] = [value] * count
        return index

    def erase(self, index: int) -> int:
        """Remove the element at ``index``; return the index of its successor."""
        if not 0 <= index < len(self._items):
            raise IndexError(_OUT_OF_RANGE)
        del self._items[index]
        return index

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the end."""
        self._grow_for_one()
        self._items.append(value)

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError(_OUT_OF_RANGE)
        return self._items.pop()

    def resize(self, count: int, value: Any = None) -> None:
        """Set the length to ``count``, padding with ``value`` or truncating."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count > self._capacity:
            self._ensure_capacity(max(count, self._capacity * 2))
        size = len(self._items)
        if count < size:
            del self._items[count:]
        else:
            self._items.extend([value] * (count - size))

    def swap(self, other: Vector) -> None:
        """Exchange contents and capacity with another vector."""
        if not isinstance(other, Vector):
            raise TypeError("can only swap with another Vector")
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity