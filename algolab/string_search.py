"""Horspool's string matching."""

from __future__ import annotations


def shift_table(pattern: str) -> dict[str, int]:
    """Shifts for characters occurring in the pattern except its last position.

    Any character not in the table shifts by the pattern length.
    """
    m = len(pattern)
    return {ch: m - 1 - i for i, ch in enumerate(pattern[:-1])}


def horspool(text: str, pattern: str) -> int:
    """Return the index of the first occurrence of ``pattern`` in ``text``, or -1."""
    m, n = len(pattern), len(text)
    if m == 0:
        return 0
    table = shift_table(pattern)
    i = m - 1
    while i <= n - 1:
        k = 0
        while k < m and pattern[m - 1 - k] == text[i - k]:
            k += 1
        if k == m:
            return i - m + 1
        i += table.get(text[i], m)
    return -1