"""An ordered list with the operations of a singly linked list."""

from __future__ import annotations

import functools
from typing import Any, Callable, Iterable, Iterator, List, Optional

CompareFunc = Callable[[Any, Any], int]
Func = Callable[[Any, Any], Any]


class SList:
    """A sequence of items; membership tests compare items with ``==``."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: List[Any] = list(items) if items is not None else []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SList({self._items!r})"

    def append(self, data: Any) -> None:
        """Add ``data`` at the end."""
        self._items.append(data)

    def prepend(self, data: Any) -> None:
        """Add ``data`` at the front."""
        self._items.insert(0, data)

    def copy(self) -> "SList":
        """Return a shallow copy."""
        return SList(self._items)

    def concat(self, other: Iterable[Any]) -> None:
        """Add every item of ``other`` at the end."""
        self._items.extend(other)

    def foreach(self, func: Func, user_data: Any = None) -> None:
        """Call ``func(item, user_data)`` for every item in order."""
        for item in self._items:
            func(item, user_data)

    def last(self) -> Any:
        """Return the last item, or None when empty."""
        return self._items[-1] if self._items else None

    def find(self, data: Any) -> Any:
        """Return the first item equal to ``data``, or None."""
        return next((item for item in self._items if item == data), None)

    def find_custom(self, data: Any, func: Optional[CompareFunc]) -> Any:
        """Return the first item for which ``func(item, data)`` is 0, or None."""
        if func is None:
            return None
        return next((item for item in self._items if func(item, data) == 0), None)

    def remove(self, data: Any) -> bool:
        """Remove the first item equal to ``data``; report whether one was found."""
        try:
            self._items.remove(data)
        except ValueError:
            return False
        return True

    def remove_all(self, data: Any) -> int:
        """Remove every item equal to ``data``; return how many were removed."""
        kept = [item for item in self._items if item != data]
        removed = len(self._items) - len(kept)
        self._items = kept
        return removed

    def remove_at(self, index: int) -> Any:
        """Remove and return the item at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError("SList index out of range")
        return self._items.pop(index)

    def reverse(self) -> None:
        """Reverse the order of the items."""
        self._items.reverse()

    def insert_sorted(self, data: Any, func: Optional[CompareFunc]) -> None:
        """Insert ``data`` after every item that ``func`` does not rank above it."""
        if func is None:
            return
        position = next(
            (pos for pos, item in enumerate(self._items) if func(item, data) > 0),
            len(self._items),
        )
        self._items.insert(position, data)

    def insert_before(self, index: Optional[int], data: Any) -> None:
        """Insert ``data`` before position ``index``; past the end or None appends."""
        if index is None:
            self._items.append(data)
            return
        if index < 0:
            raise IndexError("SList index out of range")
        self._items.insert(index, data)

    def sort(self, func: CompareFunc) -> None:
        """Stable sort using the three-way comparison ``func``."""
        if len(self._items) > 1:
            self._items.sort(key=functools.cmp_to_key(func))

    def index(self, data: Any) -> int:
        """Return the position of the first item equal to ``data``."""
        try:
            return self._items.index(data)
        except ValueError:
            raise ValueError(f"{data!r} is not in SList") from None

    def nth(self, n: int) -> Any:
        """Return the item at position ``n``, or None past the end."""
        if n < 0:
            raise IndexError("SList index out of range")
        return self._items[n] if n < len(self._items) else None