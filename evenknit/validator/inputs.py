"""
Raw input validation for stitch counts.

validate_inputs checks the two strings a user typed, in order:
  1. Both present
  2. Both whole numbers
  3. Both strictly positive
  4. Both at most MAX_STITCHES

The first failing rule wins.  Failures are returned, not raised, so the
caller can show the message and let the user try again.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

MSG_MISSING = "Please enter both values."
MSG_NOT_WHOLE = "Please enter whole numbers only."
MSG_NOT_POSITIVE = "Stitch counts must be positive integers."

# One step is built per group, so the counts bound the size of the result.
MAX_STITCHES = 100_000
MSG_TOO_LARGE = f"Stitch counts must be at most {MAX_STITCHES}."


@dataclass(frozen=True)
class ValidatedCounts:
    start: int
    target: int


@dataclass(frozen=True)
class InputValidation:
    """Outcome of validating a pair of raw stitch counts."""

    passed: bool
    counts: ValidatedCounts | None
    message: str | None


def parse_whole_number(raw: str) -> int | None:
    """
    Parse *raw* as a whole number, or return None.

    Plain integer literals are accepted, as are decimal and exponent forms
    whose value is integral (``"12.0"``, ``"1e2"``).  Only ASCII is
    accepted; infinities, NaN and digit-group underscores are rejected.
    """
    text = raw.strip()
    if not text or not text.isascii() or "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or not value.is_integer():
        return None
    return int(value)


def validate_inputs(raw_start: str, raw_target: str) -> InputValidation:
    """
    Validate the starting and target stitch counts as typed by the user.

    Returns ``InputValidation(passed=True, counts=..., message=None)`` on
    success, otherwise ``passed=False`` with the message for the first rule
    that failed.
    """
    raw_start = raw_start.strip()
    raw_target = raw_target.strip()

    if not raw_start or not raw_target:
        return InputValidation(passed=False, counts=None, message=MSG_MISSING)

    start = parse_whole_number(raw_start)
    target = parse_whole_number(raw_target)
    if start is None or target is None:
        return InputValidation(passed=False, counts=None, message=MSG_NOT_WHOLE)

    if start <= 0 or target <= 0:
        return InputValidation(passed=False, counts=None, message=MSG_NOT_POSITIVE)

    if start > MAX_STITCHES or target > MAX_STITCHES:
        return InputValidation(passed=False, counts=None, message=MSG_TOO_LARGE)

    return InputValidation(
        passed=True,
        counts=ValidatedCounts(start=start, target=target),
        message=None,
    )
