"""Arrays with a fixed upper bound on their size."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any

MAX_ELEMENTS = 15


class ArrayCapacityError(ValueError):
    """Raised when an operation would exceed an array's fixed capacity."""


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class BoundedArray:
    """Array of floats that can never hold more than ``max_size`` elements."""

    __slots__ = ("_items",)

    max_size = MAX_ELEMENTS

    def __init__(self, size: int = 0, value: float = 0.0) -> None:
        size = self._checked_size(size)
        self._items: list[float] = [float(value)] * size

    @classmethod
    def _checked_size(cls, size: int) -> int:
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        if size > cls.max_size:
            raise ArrayCapacityError(
                "Cannot set array size which exceeds the max space!"
            )
        return size

    def _checked_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"index {index} out of range for array of size {len(self._items)}"
            )
        return index

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> float:
        return self._items[self._checked_index(index)]

    def __setitem__(self, index: int, value: float) -> None:
        self._items[self._checked_index(index)] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._items)

    def __str__(self) -> str:
        values = "".join(f" {_format_value(v)}" for v in self._items)
        return f"size= {len(self._items)}:{values}"

    def __repr__(self) -> str:
        return f"BoundedArray({self._items!r})"

    def append(self, value: float) -> None:
        """Add an element at the end."""
        if len(self._items) >= self.max_size:
            raise ArrayCapacityError("Cannot push any element into the array!")
        self._items.append(float(value))

    def insert(self, index: int, value: float) -> None:
        """Insert an element before ``index``; ``index == len(self)`` appends."""
        index = operator.index(index)
        if not 0 <= index <= len(self._items):
            raise IndexError(
                f"insert index {index} out of range for array of size {len(self._items)}"
            )
        if len(self._items) >= self.max_size:
            raise ArrayCapacityError(
                "The array space is full, cannot insert any element."
            )
        self._items.insert(index, float(value))

    def delete(self, index: int) -> None:
        """Remove the element at ``index``."""
        self._items.pop(self._checked_index(index))

    def resize(self, size: int) -> None:
        """Change the size; new elements are zero, surplus ones are dropped."""
        size = self._checked_size(size)
        current = len(self._items)
        if size > current:
            self._items.extend([0.0] * (size - current))
        else:
            self._items = self._items[:size]


class FixedArray:
    """Array whose size is set once by :meth:`allocate` and never grows."""

    __slots__ = ("_dtype", "_items")

    def __init__(self, dtype: Callable[[Any], Any] = float) -> None:
        self._dtype = dtype
        self._items: list[Any] = []

    @property
    def dtype(self) -> Callable[[Any], Any]:
        """The callable every element is converted with."""
        return self._dtype

    def allocate(self, size: int) -> None:
        """Replace the storage with ``size`` elements, each ``dtype()``."""
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._items = [self._dtype() for _ in range(size)]

    def release(self) -> None:
        """Drop the storage; the array becomes empty."""
        self._items = []

    def __len__(self) -> int:
        return len(self._items)

    def _checked_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"index {index} out of range for array of size {len(self._items)}"
            )
        return index

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._checked_index(index)] = self._dtype(value)

    def __getitem__(self, index: int) -> Any:
        return self._items[self._checked_index(index)]

    def lines(self) -> list[str]:
        """One printed line per element; floats use six decimal places."""
        return [
            f"{value:f} " if isinstance(value, float) else f"{value} "
            for value in self._items
        ]

    def __repr__(self) -> str:
        name = getattr(self._dtype, "__name__", repr(self._dtype))
        return f"FixedArray({name}, {self._items!r})"