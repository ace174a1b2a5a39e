"""In-place quicksort driven by a three-way comparison callback."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

CompareDataFunc = Callable[[Any, Any, Any], int]

# Segments shorter than this are finished with insertion sort.
_INSERTION_THRESHOLD = 7


def qsort_with_data(
    items: MutableSequence[Any],
    compare: CompareDataFunc,
    user_data: Any = None,
) -> None:
    """Sort ``items`` in place.

    ``compare(a, b, user_data)`` returns a negative number, zero or a positive
    number when ``a`` sorts before, with or after ``b``. The sort is not stable.
    """
    count = len(items)
    if count <= 1:
        return

    def swap(a: int, b: int) -> None:
        items[a], items[b] = items[b], items[a]

    def cmp(a: int, b: int) -> int:
        return compare(items[a], items[b], user_data)

    pending = [(0, count)]
    while pending:
        lo, n = pending.pop()
        hi = lo + n - 1

        if n < _INSERTION_THRESHOLD:
            for i in range(lo + 1, hi + 1):
                k = i
                while k > lo and cmp(k - 1, k) > 0:
                    swap(k - 1, k)
                    k -= 1
            continue

        # Order lo, mid and hi, then use mid as the pivot.
        mid = lo + n // 2
        if cmp(mid, lo) < 0:
            swap(mid, lo)
        if cmp(hi, mid) < 0:
            swap(mid, hi)
            if cmp(mid, lo) < 0:
                swap(mid, lo)

        i = lo + 1
        k = hi - 1
        while True:
            while i < k and cmp(i, mid) <= 0:
                i += 1
            while k >= i and cmp(mid, k) < 0:
                k -= 1
            if k <= i:
                break
            swap(i, k)
            if mid == i:
                mid = k
            elif mid == k:
                mid = i
            i += 1
            k -= 1

        if k != mid:
            swap(mid, k)

        right = hi - k
        left = k - lo
        # Push the larger partition first so the smaller one is handled next.
        if right > left:
            if right > 1:
                pending.append((k + 1, right))
            if left > 1:
                pending.append((lo, left))
        else:
            if left > 1:
                pending.append((lo, left))
            if right > 1:
                pending.append((k + 1, right))