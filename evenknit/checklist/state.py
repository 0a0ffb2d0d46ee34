"""
Checklist state for working through a step list.

ChecklistState is frozen: toggle_step, mark_done and reset return new
instances.  Step indexes are 0-based; display numbering is the writer's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from evenknit.schemas.result import CalculationResult, ShapingResult, Step


@dataclass(frozen=True)
class ChecklistState:
    """
    Steps to work and which of them are checked off.

    Attributes:
        steps: Steps in working order.
        done: Indexes of checked steps.
    """

    steps: tuple[Step, ...] = ()
    done: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for index in self.done:
            if not 0 <= index < len(self.steps):
                raise IndexError(f"done index {index} out of range for {len(self.steps)} steps")

    @property
    def total(self) -> int:
        return len(self.steps)

    @property
    def completed(self) -> int:
        return len(self.done)

    @property
    def progress(self) -> float:
        """Fraction of steps checked, 1.0 when there is nothing to check."""
        if not self.steps:
            return 1.0
        return self.completed / self.total

    @property
    def is_complete(self) -> bool:
        return self.completed == self.total

    @property
    def next_index(self) -> int | None:
        """Index of the first unchecked step, or None."""
        for index in range(self.total):
            if index not in self.done:
                return index
        return None

    def is_done(self, index: int) -> bool:
        return index in self.done


def new_checklist(result: CalculationResult) -> ChecklistState:
    """Start an unchecked checklist for *result*; non-shaping results have no steps."""
    if isinstance(result, ShapingResult):
        return ChecklistState(steps=result.steps)
    return ChecklistState()


def _check_index(state: ChecklistState, index: int) -> None:
    if not 0 <= index < state.total:
        raise IndexError(f"step index {index} out of range for {state.total} steps")


def toggle_step(state: ChecklistState, index: int) -> ChecklistState:
    _check_index(state, index)
    return ChecklistState(steps=state.steps, done=state.done ^ {index})


def mark_done(state: ChecklistState, index: int) -> ChecklistState:
    _check_index(state, index)
    return ChecklistState(steps=state.steps, done=state.done | {index})


def reset(state: ChecklistState) -> ChecklistState:
    return ChecklistState(steps=state.steps)
