"""
Increase/decrease calculator.

calculate() picks a shaping strategy from the start and target stitch counts,
spreads the work with distribute(), renders each segment as a Step and
attaches a verification of the resulting totals.

  start == target               NoChangeResult
  inc < start                   knit <segment>, add 1   (start stitches over inc groups)
  inc >= start                  knit 1, add <segment>   (inc adds over start stitches)
  2 * dec < start               knit <segment>, k2tog   (plain stitches over dec groups)
  2 * dec == start              k2tog                   (every pair decreased)
  2 * dec > start               ErrorResult

The dense branch starts at ``inc == start``.  At that boundary both routes
write every step as "knit 1, add 1".
"""

from __future__ import annotations

import logging

from evenknit.checker.verify import verify_decrease, verify_increase
from evenknit.schemas.result import (
    CalculationResult,
    ErrorResult,
    NoChangeResult,
    ShapingMode,
    ShapingResult,
    Step,
    StepAction,
    VerificationResult,
)
from evenknit.utilities.distribution import distribute
from evenknit.writer.templates import (
    NO_CHANGE_DETAIL,
    NO_CHANGE_SUMMARY,
    render_infeasible,
    render_step,
    render_summary,
)

logger = logging.getLogger(__name__)


def calculate(start: int, target: int) -> CalculationResult:
    """
    Compute evenly spaced increase or decrease steps from *start* to *target*.

    Args:
        start: Stitches on the needle before the row. Must be >= 1.
        target: Stitches wanted after the row. Must be >= 1.

    Returns:
        NoChangeResult, ShapingResult or ErrorResult.

    Raises:
        ValueError: If either count is not a positive integer.
    """
    for name, value in (("start", start), ("target", target)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        if value < 1:
            raise ValueError(f"{name} must be >= 1, got {value}")

    if start == target:
        logger.debug("no shaping needed for %d stitches", start)
        return NoChangeResult(
            start=start, target=target, summary=NO_CHANGE_SUMMARY, detail=NO_CHANGE_DETAIL
        )

    if target > start:
        return _calculate_increase(start, target)
    return _calculate_decrease(start, target)


def _calculate_increase(start: int, target: int) -> CalculationResult:
    inc = target - start

    if inc >= start:
        # More adds than stitches: every stitch carries one or more adds.
        mode = ShapingMode.DENSE_INCREASE
        steps = tuple(
            _make_step(StepAction.INCREASE, knit_count=1, action_count=segment)
            for segment in distribute(inc, start)
        )
    else:
        mode = ShapingMode.EVEN_INCREASE
        steps = tuple(
            _make_step(StepAction.INCREASE, knit_count=segment, action_count=1)
            for segment in distribute(start, inc)
        )

    knit_sum = sum(step.knit_count for step in steps)
    add_count = sum(step.action_count for step in steps)
    verification = verify_increase(knit_sum, add_count, start, target)
    return _shaping_result(start, target, mode, steps, verification)


def _calculate_decrease(start: int, target: int) -> CalculationResult:
    dec = start - target
    regular = start - 2 * dec

    if regular < 0:
        logger.debug("cannot decrease %d to %d: %d decreases need %d stitches",
                     start, target, dec, 2 * dec)
        return ErrorResult(
            start=start,
            target=target,
            message=render_infeasible(start, target),
            max_decreases=start // 2,
        )

    if regular == 0:
        mode = ShapingMode.ALL_K2TOG
        steps = tuple(
            _make_step(StepAction.DECREASE, knit_count=0, action_count=1) for _ in range(dec)
        )
    else:
        mode = ShapingMode.EVEN_DECREASE
        steps = tuple(
            _make_step(StepAction.DECREASE, knit_count=segment, action_count=1)
            for segment in distribute(regular, dec)
        )

    knit_sum = sum(step.knit_count for step in steps)
    decrease_count = sum(step.action_count for step in steps)
    verification = verify_decrease(knit_sum, decrease_count, start, target)
    return _shaping_result(start, target, mode, steps, verification)


def _make_step(action: StepAction, knit_count: int, action_count: int) -> Step:
    return Step(
        text=render_step(action, knit_count, action_count),
        knit_count=knit_count,
        action_count=action_count,
        action=action,
    )


def _shaping_result(
    start: int,
    target: int,
    mode: ShapingMode,
    steps: tuple[Step, ...],
    verification: VerificationResult,
) -> ShapingResult:
    if not verification.ok:
        logger.error(
            "verification failed for %d -> %d (%s): %s",
            start, target, mode.value, verification.text,
        )
    else:
        logger.debug("%s %d -> %d in %d steps", mode.value, start, target, len(steps))

    return ShapingResult(
        start=start,
        target=target,
        mode=mode,
        summary=render_summary(mode, start, target),
        steps=steps,
        verification=verification,
    )
