"""Property tests: distribution shape and self-consistent calculator output.

distribute() must reproduce the exact accumulated-error sequence, which is
checked against its closed form: the first i segments of distribute(t, g)
sum to ``i * (t // g) + (i * (t % g)) // g``.
"""

from hypothesis import given, settings, strategies as st

from evenknit.calculator.calculator import calculate
from evenknit.checker.verify import tally_steps, verify_steps
from evenknit.schemas.result import (
    ErrorResult,
    NoChangeResult,
    ShapingMode,
    ShapingResult,
    StepAction,
)
from evenknit.utilities.distribution import distribute
from evenknit.validator.inputs import ValidatedCounts, validate_inputs

counts = st.integers(min_value=1, max_value=400)


@given(total=st.integers(min_value=0, max_value=2000), groups=st.integers(min_value=1, max_value=300))
@settings(max_examples=200)
def test_distribute_partitions_total(total, groups):
    segments = distribute(total, groups)
    base = total // groups
    assert len(segments) == groups
    assert sum(segments) == total
    assert set(segments) <= {base, base + 1}
    assert segments.count(base + 1) == total % groups


@given(total=st.integers(min_value=0, max_value=2000), groups=st.integers(min_value=1, max_value=300))
@settings(max_examples=200)
def test_distribute_matches_accumulated_error_sequence(total, groups):
    segments = distribute(total, groups)
    base, remainder = divmod(total, groups)
    running = 0
    for i, segment in enumerate(segments, start=1):
        running += segment
        assert running == i * base + (i * remainder) // groups


@given(n=counts)
def test_equal_counts_need_no_change(n):
    assert isinstance(calculate(n, n), NoChangeResult)


@given(start=counts, target=counts)
@settings(max_examples=300)
def test_calculation_reconciles(start, target):
    result = calculate(start, target)

    if start == target:
        assert isinstance(result, NoChangeResult)
        return

    if 2 * (start - target) > start:
        assert isinstance(result, ErrorResult)
        assert result.max_decreases == start // 2
        return

    assert isinstance(result, ShapingResult)
    assert result.verification.ok
    # Re-checking from the steps alone gives the same verification.
    assert verify_steps(result.steps, start, target) == result.verification

    tally = tally_steps(result.steps)
    assert tally.consumed == start
    assert tally.produced == target


@given(start=counts, target=counts)
def test_mode_selection(start, target):
    result = calculate(start, target)
    if not isinstance(result, ShapingResult):
        return

    inc = target - start
    if inc > 0:
        expected = ShapingMode.DENSE_INCREASE if inc >= start else ShapingMode.EVEN_INCREASE
        assert all(step.action == StepAction.INCREASE for step in result.steps)
    elif start == 2 * (start - target):
        expected = ShapingMode.ALL_K2TOG
    else:
        expected = ShapingMode.EVEN_DECREASE
    assert result.mode == expected

    expected_steps = min(inc, start) if inc > 0 else start - target
    assert len(result.steps) == expected_steps


@given(start=counts, target=counts)
def test_valid_strings_pass_validation(start, target):
    result = validate_inputs(str(start), str(target))
    assert result.passed
    assert result.counts == ValidatedCounts(start=start, target=target)
