# algokit

Small, dependency-free implementations of well-known algorithms on singly
linked lists, strings and integer sequences.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Linked lists

`algokit.linked_list` provides a `ListNode` dataclass (fields `val` and
`next`) and helpers for moving between Python lists and linked lists.
Nodes compare by identity. Iterating over a node yields that node and every
node after it, and stops if a node repeats, so iterating over a list with a
cycle ends.

```python
from algokit.linked_list import (
    ListNode, build_list, to_list, add_two_numbers, merge_two_lists,
    has_cycle, detect_cycle, reorder_list, reverse_list,
)

build_list([])                       # None
to_list(build_list([1, 2, 3]))       # [1, 2, 3]

# Digits are stored least significant first: 342 + 465 = 807
total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
to_list(total)                       # [7, 0, 8]

# Splices the existing nodes; on equal values nodes from the first list come first
merged = merge_two_lists(build_list([1, 2, 4]), build_list([1, 3, 4]))
to_list(merged)                      # [1, 1, 2, 3, 4, 4]

# Reverses the values in place; the same head node is returned
to_list(reverse_list(build_list([1, 2, 3])))    # [3, 2, 1]

head = build_list([1, 2, 3, 4, 5])
reorder_list(head)                   # in place: L0, Ln, L1, Ln-1, ...
to_list(head)                        # [1, 5, 2, 4, 3]

has_cycle(build_list([1, 2]))        # False
detect_cycle(build_list([1, 2]))     # None, or the node where a cycle begins
```

`to_list` raises `ValueError` if the list contains a cycle.

## Strings

`algokit.strings`:

```python
from algokit.strings import (
    is_valid_parentheses, longest_palindrome, length_of_longest_substring,
    character_replacement, min_window, is_subsequence,
)

is_valid_parentheses("()[]{}")           # True; characters other than brackets are ignored
longest_palindrome("cbbd")               # "bb"
length_of_longest_substring("abcabcbb")  # 3
character_replacement("AABABBA", 1)      # 4
min_window("ADOBECODEBANC", "ABC")       # "BANC"; "" when there is no window
is_subsequence("abc", "ahbgdc")          # True
```

`min_window` counts the characters of `t` with multiplicity and returns an
empty string when `t` is empty or longer than `s`.

## Numbers

`algokit.numbers`:

```python
from algokit.numbers import move_zeroes, cal_points, reverse_integer

nums = [0, 1, 0, 3, 12]
move_zeroes(nums)                         # in place: [1, 3, 12, 0, 0]

cal_points(["5", "2", "C", "D", "+"])     # 30

reverse_integer(-123)                     # -321
reverse_integer(1534236469)               # 0, the result overflows 32 bits
```

In `cal_points`, `"D"` doubles the last score, `"C"` removes it, `"+"` adds
the sum of the last two (and is ignored when fewer than two are recorded), and
any other entry is parsed as an integer score. `ValueError` is raised for
`"D"` or `"C"` with no score recorded and for entries that are not integers.

`reverse_integer` raises `ValueError` if its argument is outside the 32-bit
signed range.

## Scope

algokit is a library of functions only; it has no command-line tool.