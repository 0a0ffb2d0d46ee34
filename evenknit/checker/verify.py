"""
Stitch-count verification for generated steps.

The calculator builds steps from a distribution; this module recomputes what
those steps actually consume and produce and checks the totals against the
requested start and target counts.

  - verify_increase / verify_decrease check aggregate knit and action totals.
  - tally_steps replays a step list one step at a time.
  - verify_steps derives the aggregates from a step list alone, so any
    ShapingResult can be re-checked without knowing how it was built.

A failed verification means the step generator is wrong.  It is reported as
``ok=False`` with a MISMATCH text, never raised and never corrected.
"""

from __future__ import annotations

from dataclasses import dataclass

from evenknit.schemas.result import Step, StepAction, VerificationResult

_OK = "✅"
_FAIL = "❌"


@dataclass(frozen=True)
class StitchTally:
    """
    Running totals from replaying steps.

    Attributes:
        consumed: Stitches taken off the left needle.
        produced: Stitches placed on the right needle.
        knit_sum: Plain stitches knitted.
        action_sum: Increase or k2tog actions performed.
    """

    consumed: int = 0
    produced: int = 0
    knit_sum: int = 0
    action_sum: int = 0


def verify_increase(knit_sum: int, add_count: int, start: int, target: int) -> VerificationResult:
    """Every existing stitch is knitted once and each add makes one new stitch."""
    total = knit_sum + add_count
    ok = knit_sum == start and total == target
    text = f"Verification: {knit_sum} knit + {add_count} added = {total}"
    if ok:
        return VerificationResult(ok=True, text=f"{text} {_OK}")
    return VerificationResult(ok=False, text=f"{text} {_FAIL} MISMATCH (expected {target})")


def verify_decrease(
    knit_sum: int, decrease_count: int, start: int, target: int
) -> VerificationResult:
    """Each k2tog consumes two stitches and produces one."""
    consumed = knit_sum + 2 * decrease_count
    produced = knit_sum + decrease_count
    ok = consumed == start and produced == target
    text = (
        f"Verification: {knit_sum} knit + {2 * decrease_count} consumed by k2tog = "
        f"{consumed} stitches used, producing {produced}"
    )
    if ok:
        return VerificationResult(ok=True, text=f"{text} {_OK}")
    return VerificationResult(
        ok=False,
        text=f"{text} {_FAIL} MISMATCH (expected {start} consumed, {target} produced)",
    )


def tally_steps(steps: tuple[Step, ...] | list[Step]) -> StitchTally:
    """
    Replay *steps* and return the stitch totals.

    Raises:
        ValueError: If the steps mix increase and decrease actions.
    """
    actions = {step.action for step in steps}
    if len(actions) > 1:
        raise ValueError("steps mix increase and decrease actions")

    tally = StitchTally()
    for step in steps:
        if step.action == StepAction.INCREASE:
            consumed = step.knit_count
        else:
            consumed = step.knit_count + 2 * step.action_count
        tally = StitchTally(
            consumed=tally.consumed + consumed,
            produced=tally.produced + step.knit_count + step.action_count,
            knit_sum=tally.knit_sum + step.knit_count,
            action_sum=tally.action_sum + step.action_count,
        )
    return tally


def verify_steps(
    steps: tuple[Step, ...] | list[Step], start: int, target: int
) -> VerificationResult:
    """
    Recompute the verification for *steps* without reference to how they were built.

    An empty step list cannot change the stitch count, so it only verifies
    when there was nothing to change; the text says so either way.
    """
    if not steps:
        ok = start == target
        mark = _OK if ok else f"{_FAIL} MISMATCH (expected {target})"
        return VerificationResult(ok=ok, text=f"Verification: no steps, {start} stitches {mark}")

    tally = tally_steps(steps)
    if steps[0].action == StepAction.INCREASE:
        return verify_increase(tally.knit_sum, tally.action_sum, start, target)
    return verify_decrease(tally.knit_sum, tally.action_sum, start, target)
