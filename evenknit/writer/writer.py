"""
Plain-text rendering of calculation results.

export_steps is the copy/paste form: one numbered line per step.
render_result lays out a whole result (heading, steps, verification).
render_checklist shows a checklist with check marks and progress.
"""

from __future__ import annotations

from evenknit.checklist.state import ChecklistState
from evenknit.schemas.result import (
    CalculationResult,
    ErrorResult,
    NoChangeResult,
    ShapingResult,
    Step,
)


def export_steps(steps: tuple[Step, ...] | list[Step]) -> str:
    """Number *steps* from 1, one per line."""
    return "\n".join(f"{n}. {step.text}" for n, step in enumerate(steps, start=1))


def render_result(result: CalculationResult) -> str:
    """
    Render *result* as a plain-text block.

    Shaping results give the summary, the numbered steps and the
    verification line separated by blank lines.  No-change results give the
    summary and detail; errors give the message alone.
    """
    match result:
        case ShapingResult():
            return "\n\n".join(
                [result.summary, export_steps(result.steps), result.verification.text]
            )
        case NoChangeResult():
            return f"{result.summary}\n\n{result.detail}"
        case ErrorResult():
            return result.message
        case _:
            raise TypeError(f"unsupported result type: {type(result).__name__}")


def render_checklist(state: ChecklistState) -> str:
    """Render each step with a check box, followed by a progress line."""
    lines = [
        f"[{'x' if state.is_done(i) else ' '}] {i + 1}. {step.text}"
        for i, step in enumerate(state.steps)
    ]
    lines.append(f"{state.completed}/{state.total} steps done")
    return "\n".join(lines)
