"""
Verhoeff checksum engine — validation and check-digit generation.

Both operations run the same recurrence over the digits from right to left:

    c = d[c][ p[(pos + offset) % 8][digit] ]

where ``pos`` is the distance from the rightmost digit (position 0).

  - validate() uses offset 0: the check digit itself sits at position 0.
  - generate() uses offset 1: the check digit is not there yet, so every
    payload digit is one position further from the end than it will be.

The functions are pure and hold no state between calls, so they are safe to
call from any number of threads at once.
"""

from __future__ import annotations

from collections.abc import Sequence

from .exceptions import InvalidInput
from .tables import (
    INVERSE_TABLE,
    MULTIPLICATION_TABLE,
    PERMUTATION_CYCLE,
    PERMUTATION_TABLE,
)


def validate(digits: Sequence[int]) -> bool:
    """Check a number whose rightmost digit is its Verhoeff check digit.

    Args:
        digits: The full number, check digit included, as ints 0-9.

    Returns:
        True if the check digit is consistent with the rest of the number.

    Raises:
        InvalidInput: if ``digits`` is empty or holds a value outside 0-9.
    """
    _check_digits(digits)
    return _accumulate(digits, offset=0) == 0


def generate(digits: Sequence[int]) -> int:
    """Compute the check digit to append to ``digits``.

    Args:
        digits: The payload, without a check digit, as ints 0-9.

    Returns:
        The digit (0-9) that makes ``validate(digits + [result])`` true.

    Raises:
        InvalidInput: if ``digits`` is empty or holds a value outside 0-9.
    """
    _check_digits(digits)
    return INVERSE_TABLE[_accumulate(digits, offset=1)]


def append_check_digit(digits: Sequence[int]) -> tuple[int, ...]:
    """Return the payload followed by its check digit."""
    return (*digits, generate(digits))


# ─── Internal Helpers ────────────────────────────────────────────────


def _accumulate(digits: Sequence[int], offset: int) -> int:
    c = 0
    for pos, digit in enumerate(reversed(digits)):
        permuted = PERMUTATION_TABLE[(pos + offset) % PERMUTATION_CYCLE][digit]
        c = MULTIPLICATION_TABLE[c][permuted]
    return c


def _check_digits(digits: Sequence[int]) -> None:
    """Reject anything that is not a non-empty sequence of ints in 0-9.

    Runs before the accumulator is touched, so a failing call has no
    partial result.
    """
    if len(digits) == 0:
        raise InvalidInput("Digit sequence is empty.", {"length": 0})

    for position, value in enumerate(digits):
        # bool is an int subclass; True/False are never digits here
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 9:
            raise InvalidInput(
                f"Value {value!r} at position {position} is not a decimal digit (0-9).",
                {"position": position, "value": repr(value)},
            )
