"""Bubble, insertion and merge sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``items`` using bubble sort."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``items`` using insertion sort."""
    result: list[int] = []
    for value in items:
        slot = len(result)
        result.append(value)
        while slot > 0 and result[slot - 1] > value:
            result[slot] = result[slot - 1]
            slot -= 1
        result[slot] = value
    return result


def merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list, preferring ``left`` on ties."""
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``items`` using top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) + 1) // 2
    return merge(merge_sort(values[:middle]), merge_sort(values[middle:]))