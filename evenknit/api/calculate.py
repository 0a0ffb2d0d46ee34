"""
Public calculation API.

calculate_from_input() validates two raw strings and runs the calculator.
It returns a CalculationReport for every input, so callers never need to
catch exceptions to show a message.
"""

from __future__ import annotations

from dataclasses import dataclass

from evenknit.calculator.calculator import calculate
from evenknit.schemas.result import CalculationResult, NoChangeResult, ShapingResult
from evenknit.validator.inputs import validate_inputs


@dataclass(frozen=True)
class CalculationReport:
    """Outcome of a calculation request.

    Attributes:
        passed: True for a no-change result or a verified shaping result.
        result: The CalculationResult, or None if the input was rejected.
        input_error: Validation message if the input was rejected, else None.
    """

    passed: bool
    result: CalculationResult | None
    input_error: str | None


def calculate_from_input(raw_start: str, raw_target: str) -> CalculationReport:
    """
    Validate and calculate from raw stitch-count strings.

    Parameters
    ----------
    raw_start:
        Stitches currently on the needle, as typed.
    raw_target:
        Stitches wanted after the row, as typed.

    Returns
    -------
    CalculationReport
        Always returned.  Inspect ``input_error`` first, then ``result``.
    """
    validation = validate_inputs(raw_start, raw_target)
    if not validation.passed or validation.counts is None:
        return CalculationReport(passed=False, result=None, input_error=validation.message)

    result = calculate(validation.counts.start, validation.counts.target)
    match result:
        case NoChangeResult():
            passed = True
        case ShapingResult():
            passed = result.verification.ok
        case _:
            passed = False

    return CalculationReport(passed=passed, result=result, input_error=None)
