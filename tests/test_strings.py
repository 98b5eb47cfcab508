from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.strings import (
    character_replacement,
    is_subsequence,
    is_valid_parentheses,
    length_of_longest_substring,
    longest_palindrome,
    min_window,
)

small_text = st.text(alphabet="abcd", max_size=30)


@pytest.mark.parametrize("s", ["()", "()[]{}", "{[]}", "", "a(b)c", "([{}])"])
def test_valid_parentheses_accepts_balanced(s):
    assert is_valid_parentheses(s)


@pytest.mark.parametrize("s", ["(]", "([)]", "(", ")", "]", "{[}", "(()"])
def test_valid_parentheses_rejects_unbalanced(s):
    assert not is_valid_parentheses(s)


@given(st.text(alphabet="([{", max_size=10))
def test_valid_parentheses_nested_closing(openers):
    closers = "".join({"(": ")", "[": "]", "{": "}"}[c] for c in reversed(openers))
    assert is_valid_parentheses(openers + closers)
    if openers:
        assert not is_valid_parentheses(openers)


def test_longest_palindrome_prefers_later_tie():
    assert longest_palindrome("babad") == "aba"


@pytest.mark.parametrize("s", ["racecar", "a", "abba", "noon"])
def test_longest_palindrome_whole_string(s):
    assert longest_palindrome(s) == s


def test_longest_palindrome_empty():
    assert longest_palindrome("") == ""


@given(small_text)
def test_longest_palindrome_properties(s):
    result = longest_palindrome(s)
    assert result == result[::-1]
    assert result in s
    if s:
        assert len(result) >= 1
    for i in range(len(s)):
        for j in range(i + len(result) + 1, len(s) + 1):
            piece = s[i:j]
            assert piece != piece[::-1]


def test_longest_substring_distinct_input():
    assert length_of_longest_substring("abcdef") == len("abcdef")


def test_longest_substring_empty():
    assert length_of_longest_substring("") == 0


@given(small_text)
def test_longest_substring_bounds(s):
    result = length_of_longest_substring(s)
    assert result <= len(s)
    assert result <= len(set(s))
    if s:
        assert result >= 1
    if len(set(s)) == len(s):
        assert result == len(s)
    windows = [s[i : i + result] for i in range(len(s) - result + 1)]
    assert any(len(set(w)) == len(w) for w in windows)


def test_character_replacement_example():
    assert character_replacement("AABABBA", 1) == 4


def test_character_replacement_enough_replacements():
    assert character_replacement("ABAB", 2) == len("ABAB")


@given(small_text, st.integers(min_value=0, max_value=5))
def test_character_replacement_monotonic(s, k):
    result = character_replacement(s, k)
    assert result <= len(s)
    assert result <= character_replacement(s, k + 1)
    if s:
        assert result >= min(len(s), k + 1)
    if k >= len(s):
        assert result == len(s)


def test_min_window_example():
    assert min_window("ADOBECODEBANC", "ABC") == "BANC"


def test_min_window_whole_string():
    assert min_window("a", "a") == "a"


@pytest.mark.parametrize("s,t", [("a", "aa"), ("abc", ""), ("abc", "d"), ("", "a")])
def test_min_window_no_window(s, t):
    assert min_window(s, t) == ""


@given(small_text, small_text)
def test_is_subsequence_of_concatenation(a, b):
    assert is_subsequence(a, a + b)
    assert is_subsequence(b, a + b)
    assert is_subsequence(a[::2], a)


def test_is_subsequence_rejects():
    assert not is_subsequence("axc", "ahbgdc")
    assert not is_subsequence("ba", "ab")
    assert is_subsequence("abc", "ahbgdc")
    assert is_subsequence("", "")