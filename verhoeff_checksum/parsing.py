"""
Conversion between raw number strings and digit sequences.

The engine only ever sees tuples of ints. Everything textual (whitespace,
stray characters, masking for display) is handled here.

Only ASCII ``0``-``9`` count as digits. Arabic-Indic, Devanagari, fullwidth
and superscript digits (all accepted by ``str.isdigit()``) are parse errors.
"""

from __future__ import annotations

from collections.abc import Sequence

from .exceptions import ParseError

_DIGIT_VALUES: dict[str, int] = {ch: value for value, ch in enumerate("0123456789")}


def parse_digits(raw: str) -> tuple[int, ...]:
    """Turn a raw number string into a tuple of digit values.

    Whitespace anywhere in the string is ignored, so grouped input such as
    "2345 6789 0124" is accepted. An empty or blank string yields ``()``;
    rejecting that is the engine's job.

    Raises:
        ParseError: on the first character that is neither whitespace nor
            an ASCII digit. ``details`` holds the character and its index
            in ``raw``.
    """
    digits: list[int] = []
    for index, ch in enumerate(raw):
        if ch.isspace():
            continue
        value = _DIGIT_VALUES.get(ch)
        if value is None:
            raise ParseError(
                f"Character {ch!r} at index {index} is not a digit (0-9).",
                {"character": ch, "position": index},
            )
        digits.append(value)
    return tuple(digits)


def format_digits(digits: Sequence[int]) -> str:
    """Render digit values back into a plain number string."""
    return "".join(str(digit) for digit in digits)


def mask_digits(digits: Sequence[int], visible: int = 4) -> str:
    """Hide all but the last ``visible`` digits behind ``X``.

    Example:
        (8, 2, 3, 5, 1, 9, 7, 4, 0, 6, 2, 8) → "XXXXXXXX0628"
    """
    if visible < 0:
        raise ValueError(f"visible must be >= 0, got {visible}")
    shown = len(digits) - min(visible, len(digits))
    return "X" * shown + format_digits(digits[shown:])
