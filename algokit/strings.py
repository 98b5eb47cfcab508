"""String algorithms: bracket matching, palindromes and sliding windows."""

from __future__ import annotations

from collections import Counter
from typing import Optional

_CLOSER_TO_OPENER = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSER_TO_OPENER.values())


def is_valid_parentheses(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed by its own kind in order.

    Characters other than ``()[]{}`` are ignored.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _CLOSER_TO_OPENER:
            if not stack or stack[-1] != _CLOSER_TO_OPENER[ch]:
                return False
            stack.pop()
    return not stack


def _palindrome_length(s: str, left: int, right: int) -> int:
    """Length of the palindrome grown outward from the given centre."""
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return right - left - 1


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring of ``s``.

    Among palindromes of the greatest length the one found last is returned.
    """
    if not s:
        return ""
    start = end = 0
    for center in range(len(s)):
        length = max(
            _palindrome_length(s, center, center),
            _palindrome_length(s, center, center + 1),
        )
        if length > end - start:
            start = center - (length - 1) // 2
            end = center + length // 2
    return s[start : end + 1]


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    counts: Counter[str] = Counter()
    left = 0
    best = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        while counts[ch] > 1:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def character_replacement(s: str, k: int) -> int:
    """Return the longest run of one character reachable with at most ``k`` replacements."""
    counts: Counter[str] = Counter()
    left = 0
    max_freq = 0
    best = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        max_freq = max(max_freq, counts[ch])
        if (right - left + 1) - max_freq > k:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` containing every character of ``t``.

    Characters of ``t`` are counted with multiplicity. An empty string is
    returned when no such window exists or ``t`` is empty.
    """
    if not t or len(t) > len(s):
        return ""

    target = Counter(t)
    window: Counter[str] = Counter()
    missing = len(t)
    best: Optional[tuple[int, int]] = None
    left = 0

    for right, ch in enumerate(s):
        window[ch] += 1
        if target[ch] > 0 and window[ch] <= target[ch]:
            missing -= 1

        while missing == 0:
            length = right + 1 - left
            if best is None or length < best[1]:
                best = (left, length)
            dropped = s[left]
            if target[dropped] > 0 and window[dropped] <= target[dropped]:
                missing += 1
            window[dropped] -= 1
            left += 1

    if best is None:
        return ""
    start, length = best
    return s[start : start + length]


def is_subsequence(s: str, t: str) -> bool:
    """Return True if ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)