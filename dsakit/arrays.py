"""Array exercises: linear search, positional edits, totals and mark formatting."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


def linear_search(items: Iterable[int], target: int) -> int | None:
    """Return the 1-based position of the first occurrence of ``target``, or None."""
    for position, item in enumerate(items, start=1):
        if item == target:
            return position
    return None


def insert_at(items: Iterable[int], position: int, value: int) -> list[int]:
    """Return a copy of ``items`` with ``value`` placed at the 0-based ``position``."""
    result = list(items)
    if not 0 <= position <= len(result):
        raise IndexError(f"insert position {position} out of range 0..{len(result)}")
    result.insert(position, value)
    return result


def delete_at(items: Iterable[int], position: int) -> list[int]:
    """Return a copy of ``items`` without the element at the 0-based ``position``."""
    result = list(items)
    if not 0 <= position < len(result):
        raise IndexError(f"delete position {position} out of range 0..{len(result) - 1}")
    del result[position]
    return result


def recursive_sum(items: Iterable[int]) -> int:
    """Sum ``items`` recursively, one element per call."""

    def total(remaining: Iterator[int]) -> int:
        try:
            head = next(remaining)
        except StopIteration:
            return 0
        return head + total(remaining)

    return total(iter(items))


def marks_total(marks: Sequence[int]) -> int:
    """Return the sum of the students' marks."""
    return sum(marks)


def format_marks(marks: float) -> str:
    """Render a single subject's marks the way the marks prompt reports them."""
    return f"Marks; {float(marks):f}"