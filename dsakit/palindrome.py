"""Palindrome check that ignores punctuation, spacing and case."""

from __future__ import annotations

from collections import deque


def is_palindrome(text: str) -> bool:
    """Return True if the ASCII letters and digits of ``text`` read the same both ways."""
    queue = deque(ch.lower() for ch in text if ch.isascii() and ch.isalnum())
    while len(queue) > 1:
        if queue.popleft() != queue.pop():
            return False
    return True