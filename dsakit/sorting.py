"""Classic comparison sorts. Each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence


def bubble_sort(values: Iterable) -> list:
    """Sort by repeatedly swapping adjacent out-of-order items."""
    items = list(values)
    for unsorted_end in range(len(items) - 1, 0, -1):
        for i in range(unsorted_end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def insertion_sort(values: Iterable) -> list:
    """Sort by inserting each item into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        value = items[i]
        hole = i
        while hole > 0 and items[hole - 1] > value:
            items[hole] = items[hole - 1]
            hole -= 1
        items[hole] = value
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(values: Iterable) -> list:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def partition(values: MutableSequence, start: int, end: int) -> int:
    """Partition ``values[start:end + 1]`` in place around its last item.

    Returns the final index of the pivot: items before it are less than or
    equal to it, items after it are greater.
    """
    pivot = values[end]
    store = start
    for i in range(start, end):
        if values[i] <= pivot:
            values[i], values[store] = values[store], values[i]
            store += 1
    values[store], values[end] = values[end], values[store]
    return store


def quick_sort(values: Iterable) -> list:
    """Quicksort using the last item of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            pivot_index = partition(items, start, end)
            pending.append((start, pivot_index - 1))
            pending.append((pivot_index + 1, end))
    return items


def selection_sort(values: Iterable) -> list:
    """Sort by moving the smallest remaining item to the front each pass."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items