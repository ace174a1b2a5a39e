"""A growable array of object references."""

from __future__ import annotations

import functools
from typing import Any, Callable, Iterator, List

from eglibpy.qsort import qsort_with_data

CompareFunc = Callable[[Any, Any], int]
CompareDataFunc = Callable[[Any, Any, Any], int]
Func = Callable[[Any, Any], Any]


class PtrArray:
    """An ordered array of items; lookups by value compare with ``==``."""

    def __init__(self, reserved_size: int = 0) -> None:
        if reserved_size < 0:
            raise ValueError("reserved_size must not be negative")
        self._items: List[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __repr__(self) -> str:
        return f"PtrArray({self._items!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("PtrArray index out of range")

    def add(self, data: Any) -> None:
        """Append ``data`` at the end."""
        self._items.append(data)

    def remove(self, data: Any) -> bool:
        """Remove the first item equal to ``data``, keeping the order of the rest."""
        try:
            self._items.remove(data)
        except ValueError:
            return False
        return True

    def remove_index(self, index: int) -> Any:
        """Remove and return the item at ``index``, keeping the order of the rest."""
        self._check_index(index)
        return self._items.pop(index)

    def remove_fast(self, data: Any) -> bool:
        """Remove the first item equal to ``data``; the last item takes its place."""
        for position, item in enumerate(self._items):
            if item == data:
                self.remove_index_fast(position)
                return True
        return False

    def remove_index_fast(self, index: int) -> Any:
        """Remove and return the item at ``index``; the last item takes its place."""
        self._check_index(index)
        removed = self._items[index]
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
        return removed

    def sort(self, compare: CompareFunc) -> None:
        """Sort in place with the three-way comparison ``compare(a, b)``."""
        self._items.sort(key=functools.cmp_to_key(compare))

    def sort_with_data(self, compare: CompareDataFunc, user_data: Any = None) -> None:
        """Sort in place with ``compare(a, b, user_data)``."""
        qsort_with_data(self._items, compare, user_data)

    def set_size(self, length: int) -> None:
        """Truncate to ``length`` items, or pad with None up to it."""
        if length < 0:
            raise ValueError("length must not be negative")
        if length > len(self._items):
            self._items.extend([None] * (length - len(self._items)))
        else:
            del self._items[length:]

    def foreach(self, func: Func, user_data: Any = None) -> None:
        """Call ``func(item, user_data)`` for every item in order."""
        for item in self._items:
            func(item, user_data)