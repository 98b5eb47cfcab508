"""Small algorithms over integers and integer sequences."""

from __future__ import annotations

from collections.abc import Iterable

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end of ``nums`` in place, keeping other values in order."""
    write = 0
    for index, value in enumerate(nums):
        if value != 0:
            nums[index], nums[write] = nums[write], value
            write += 1


def cal_points(operations: Iterable[str]) -> int:
    """Score a baseball game record and return the total.

    ``"D"`` doubles the last score, ``"C"`` removes it, ``"+"`` adds the sum of
    the last two (and is ignored with fewer than two), anything else is an integer
    score. ValueError is raised for ``"D"`` or ``"C"`` with no score recorded and
    for entries that are not integers.
    """
    record: list[int] = []
    for op in operations:
        if op == "D":
            if not record:
                raise ValueError("'D' needs a previous score")
            record.append(record[-1] * 2)
        elif op == "C":
            if not record:
                raise ValueError("'C' needs a previous score")
            record.pop()
        elif op == "+":
            if len(record) >= 2:
                record.append(record[-1] + record[-2])
        else:
            record.append(int(op))
    return sum(record)


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of a 32-bit signed integer, keeping its sign.

    Returns 0 when the reversed value does not fit in 32 bits. ValueError is
    raised if ``x`` itself is outside the 32-bit range.
    """
    if not _INT_MIN <= x <= _INT_MAX:
        raise ValueError("x must be a 32-bit signed integer")
    magnitude = int(str(abs(x))[::-1])
    result = -magnitude if x < 0 else magnitude
    return result if _INT_MIN <= result <= _INT_MAX else 0