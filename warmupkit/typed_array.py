"""A growable array whose elements are all converted to one element type."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class TypedArray:
    """Dynamic array of values of a single type, growing its capacity by doubling.

    Every stored value is passed through ``dtype`` first, so ``TypedArray(int)``
    truncates floats and ``TypedArray(str)`` holds text.  New elements created by
    :meth:`resize` or by the default fill value are ``dtype()``.
    """

    __slots__ = ("_dtype", "_items", "_capacity")

    def __init__(
        self,
        dtype: Callable[[Any], Any] = float,
        size: int = 0,
        value: Any = None,
    ) -> None:
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._dtype = dtype
        fill = self._zero() if value is None else dtype(value)
        self._items: list[Any] = [fill] * size
        self._capacity = size

    def _zero(self) -> Any:
        return self._dtype()

    @property
    def dtype(self) -> Callable[[Any], Any]:
        """The callable every element is converted with."""
        return self._dtype

    def __len__(self) -> int:
        return len(self._items)

    def _checked_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError(
                f"index {index} out of range for array of size {len(self._items)}"
            )
        return index

    def __getitem__(self, index: int) -> Any:
        return self._items[self._checked_index(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._checked_index(index)] = self._dtype(value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedArray):
            return NotImplemented
        return self._dtype is other._dtype and self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        values = "".join(f" {_format_value(v)}" for v in self._items)
        return f"size= {len(self._items)}:{values}"

    def __repr__(self) -> str:
        name = getattr(self._dtype, "__name__", repr(self._dtype))
        return f"TypedArray({name}, {self._items!r})"

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
        """Change the size; new elements are ``dtype()``, surplus ones are dropped."""
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        current = len(self._items)
        if size == current:
            return
        self.reserve(size)
        if size > current:
            self._items.extend(self._zero() for _ in range(size - current))
        else:
            del self._items[size:]

    def append(self, value: Any) -> None:
        """Add an element at the end."""
        converted = self._dtype(value)
        self.reserve(len(self._items) + 1)
        self._items.append(converted)

    def insert(self, index: int, value: Any) -> None:
        """Insert an element before ``index``; ``index == len(self)`` appends."""
        index = operator.index(index)
        if not 0 <= index <= len(self._items):
            raise IndexError(
                f"insert index {index} out of range for array of size {len(self._items)}"
            )
        converted = self._dtype(value)
        self.reserve(len(self._items) + 1)
        self._items.insert(index, converted)

    def delete(self, index: int) -> None:
        """Remove the element at ``index``."""
        del self._items[self._checked_index(index)]

    def copy(self) -> TypedArray:
        """Return an independent copy whose capacity equals its size."""
        duplicate = TypedArray(self._dtype)
        duplicate._items = list(self._items)
        duplicate._capacity = len(self._items)
        return duplicate