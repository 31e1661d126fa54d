"""A growable array of floats with explicit capacity management."""

from __future__ import annotations

import operator
from collections.abc import Iterator


def _format_value(value: float) -> str:
    return f"{value:g}"


class DArray:
    """Dynamic array of floats that grows its capacity by doubling."""

    __slots__ = ("_items", "_capacity")

    def __init__(self, size: int = 0, value: float = 0.0) -> None:
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._items: list[float] = [float(value)] * size
        self._capacity = size

    def __len__(self) -> int:
        return len(self._items)

    def _checked_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"index {index} out of range for array of size {len(self._items)}"
            )
        return index

    def __getitem__(self, index: int) -> float:
        return self._items[self._checked_index(index)]

    def __setitem__(self, index: int, value: float) -> None:
        self._items[self._checked_index(index)] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DArray):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        values = "".join(f" {_format_value(v)}" for v in self._items)
        return f"size = {len(self._items)}:{values}"

    def __repr__(self) -> str:
        return f"DArray({self._items!r})"

    @property
    def capacity(self) -> int:
        """Number of elements the array can hold before it must grow."""
        return self._capacity

    def reserve(self, size: int) -> None:
        """Grow the capacity, doubling from 1, until it holds ``size`` elements."""
        size = operator.index(size)
        if self._capacity >= size:
            return
        capacity = self._capacity
        while capacity < size:
            capacity = 1 if capacity == 0 else 2 * capacity
        self._capacity = capacity

    def resize(self, size: int) -> None:
        """Change the size; new elements are zero, surplus ones are dropped."""
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        current = len(self._items)
        if size == current:
            return
        self.reserve(size)
        if size > current:
            self._items.extend([0.0] * (size - current))
        else:
            self._items = self._items[:size]

    def append(self, value: float) -> None:
        """Add an element at the end."""
        self.reserve(len(self._items) + 1)
        self._items.append(float(value))

    def insert(self, index: int, value: float) -> None:
        """Insert an element before ``index``; ``index == len(self)`` appends."""
        index = operator.index(index)
        if not 0 <= index <= len(self._items):
            raise IndexError(
                f"insert index {index} out of range for array of size {len(self._items)}"
            )
        self.reserve(len(self._items) + 1)
        self._items.insert(index, float(value))

    def delete(self, index: int) -> None:
        """Remove the element at ``index``."""
        self._items.pop(self._checked_index(index))

    def copy(self) -> DArray:
        """Return an independent copy whose capacity equals its size."""
        duplicate = DArray()
        duplicate._items = list(self._items)
        duplicate._capacity = len(self._items)
        return duplicate