"""evenknit: even distribution of knitting increases and decreases."""

from evenknit.calculator.calculator import calculate
from evenknit.utilities.distribution import distribute
from evenknit.validator.inputs import validate_inputs

__all__ = ["calculate", "distribute", "validate_inputs"]
