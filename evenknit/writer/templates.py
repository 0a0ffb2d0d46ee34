"""
Instruction prose templates.

render_step converts one knit-then-shape unit into instruction text.
render_summary and render_infeasible produce the one-line headings shown
above a step list.
"""

from __future__ import annotations

from evenknit.schemas.result import ShapingMode, StepAction

NO_CHANGE_SUMMARY = "No changes needed"
NO_CHANGE_DETAIL = "Current and target stitch counts are equal."


def render_step(action: StepAction, knit_count: int, action_count: int) -> str:
    """Render a single step as instruction prose."""
    match action:
        case StepAction.INCREASE:
            return f"knit {knit_count}, add {action_count}"
        case StepAction.DECREASE:
            decreases = ", ".join(["k2tog"] * action_count)
            if knit_count == 0:
                return decreases
            return f"knit {knit_count}, {decreases}"
        case _:
            return f"[{action}]"


def render_summary(mode: ShapingMode, start: int, target: int) -> str:
    """Render the heading for a shaping result."""
    delta = abs(target - start)
    span = f"({start} → {target})"

    match mode:
        case ShapingMode.EVEN_INCREASE:
            return f"Increase {delta} stitches evenly {span}"
        case ShapingMode.DENSE_INCREASE:
            return f"Increase {delta} stitches evenly {span} - dense increase"
        case ShapingMode.EVEN_DECREASE:
            return f"Decrease {delta} stitches evenly {span}"
        case ShapingMode.ALL_K2TOG:
            return f"Decrease {delta} stitches {span} - all k2tog"
        case _:
            return f"[{mode}]"


def render_infeasible(start: int, target: int) -> str:
    """Explain why *start* cannot be decreased to *target*."""
    decreases = start - target
    return (
        f"Cannot decrease from {start} to {target}: would need {decreases} decreases, "
        f"but that requires at least {2 * decreases} stitches. "
        f"Maximum decreases possible: {start // 2}."
    )
