"""A double-ended queue that is filled at either end and drained at the head."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Iterator


class Queue:
    """FIFO/LIFO queue: push at head or tail, pop from the head."""

    def __init__(self) -> None:
        self._items: Deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def push_head(self, data: Any) -> None:
        """Add ``data`` at the head."""
        self._items.appendleft(data)

    def push_tail(self, data: Any) -> None:
        """Add ``data`` at the tail."""
        self._items.append(data)

    def pop_head(self) -> Any:
        """Remove and return the item at the head."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        """Report whether the queue holds no items."""
        return not self._items

    def foreach(self, func: Callable[[Any, Any], Any], user_data: Any = None) -> None:
        """Call ``func(item, user_data)`` for every item from head to tail."""
        for item in self._items:
            func(item, user_data)