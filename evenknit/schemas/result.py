"""
Result types for a stitch-count calculation.

Every calculation returns exactly one of:

  NoChangeResult   start and target are equal, nothing to do
  ShapingResult    an ordered list of Steps plus their verification
  ErrorResult      the requested decrease cannot be worked

All types are frozen dataclasses.  They are built fresh per calculation and
never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class StepAction(str, Enum):
    """Shaping operation attached to the end of a step."""

    INCREASE = "increase"  # add one stitch per action
    DECREASE = "decrease"  # k2tog: two stitches in, one out


class ResultKind(str, Enum):
    """Tag shared by every CalculationResult variant."""

    NONE = "none"
    INCREASE = "increase"
    DECREASE = "decrease"
    ERROR = "error"


class ShapingMode(str, Enum):
    """Which branch of the calculator produced a ShapingResult."""

    EVEN_INCREASE = "even_increase"
    DENSE_INCREASE = "dense_increase"
    EVEN_DECREASE = "even_decrease"
    ALL_K2TOG = "all_k2tog"

    @property
    def kind(self) -> ResultKind:
        if self in (ShapingMode.EVEN_INCREASE, ShapingMode.DENSE_INCREASE):
            return ResultKind.INCREASE
        return ResultKind.DECREASE


@dataclass(frozen=True)
class Step:
    """
    One instruction: knit ``knit_count`` plain stitches, then perform
    ``action_count`` shaping actions.

    ``text`` is the display form, e.g. ``"knit 2, add 1"`` or ``"k2tog"``.
    """

    text: str
    knit_count: int
    action_count: int
    action: StepAction

    def __post_init__(self) -> None:
        if self.knit_count < 0:
            raise ValueError(f"knit_count cannot be negative, got {self.knit_count}")
        if self.action_count < 1:
            raise ValueError(f"action_count must be >= 1, got {self.action_count}")


@dataclass(frozen=True)
class VerificationResult:
    """Recomputed stitch totals checked against start and target."""

    ok: bool
    text: str


@dataclass(frozen=True)
class NoChangeResult:
    start: int
    target: int
    summary: str
    detail: str

    kind: ClassVar[ResultKind] = ResultKind.NONE


@dataclass(frozen=True)
class ShapingResult:
    """
    Increase or decrease instructions.

    Attributes:
        start: Stitch count before the row.
        target: Stitch count after the row.
        mode: Calculator branch that built the steps.
        summary: One-line description of the change.
        steps: Steps in working order.
        verification: Totals recomputed from ``steps``.
    """

    start: int
    target: int
    mode: ShapingMode
    summary: str
    steps: tuple[Step, ...]
    verification: VerificationResult

    @property
    def kind(self) -> ResultKind:
        return self.mode.kind

    @property
    def delta(self) -> int:
        return abs(self.target - self.start)

    @property
    def pattern(self) -> str:
        """All steps on a single line, comma separated."""
        return ", ".join(step.text for step in self.steps)


@dataclass(frozen=True)
class ErrorResult:
    """A decrease that needs more stitches than are on the needle."""

    start: int
    target: int
    message: str
    max_decreases: int

    kind: ClassVar[ResultKind] = ResultKind.ERROR


CalculationResult = NoChangeResult | ShapingResult | ErrorResult
