"""Tests for evenknit.checklist.state."""

from __future__ import annotations

import pytest

from evenknit.calculator.calculator import calculate
from evenknit.checklist.state import ChecklistState, mark_done, new_checklist, reset, toggle_step


@pytest.fixture
def checklist() -> ChecklistState:
    return new_checklist(calculate(8, 12))


class TestNewChecklist:
    def test_from_shaping_result(self, checklist):
        assert checklist.total == 4
        assert checklist.completed == 0
        assert checklist.progress == 0.0
        assert checklist.next_index == 0
        assert not checklist.is_complete

    @pytest.mark.parametrize("start, target", [(7, 7), (5, 1)])
    def test_from_non_shaping_result(self, start, target):
        state = new_checklist(calculate(start, target))
        assert state.total == 0
        assert state.progress == 1.0
        assert state.is_complete
        assert state.next_index is None


class TestTransitions:
    def test_toggle_checks_and_unchecks(self, checklist):
        checked = toggle_step(checklist, 2)
        assert checked.is_done(2)
        assert checked.completed == 1
        assert not toggle_step(checked, 2).is_done(2)

    def test_toggle_returns_new_state(self, checklist):
        toggle_step(checklist, 0)
        assert checklist.completed == 0

    def test_mark_done_is_idempotent(self, checklist):
        once = mark_done(checklist, 1)
        assert mark_done(once, 1) == once

    def test_next_index_skips_done(self, checklist):
        state = mark_done(mark_done(checklist, 0), 1)
        assert state.next_index == 2
        assert state.progress == 0.5

    def test_complete(self, checklist):
        state = checklist
        for index in range(checklist.total):
            state = mark_done(state, index)
        assert state.is_complete
        assert state.next_index is None
        assert state.progress == 1.0

    def test_reset(self, checklist):
        state = reset(mark_done(checklist, 3))
        assert state.completed == 0
        assert state.steps == checklist.steps

    @pytest.mark.parametrize("index", [-1, 4, 10])
    def test_out_of_range(self, checklist, index):
        with pytest.raises(IndexError, match="out of range"):
            toggle_step(checklist, index)
        with pytest.raises(IndexError):
            mark_done(checklist, index)


class TestChecklistState:
    def test_is_frozen(self, checklist):
        with pytest.raises(AttributeError):
            checklist.done = frozenset({0})  # type: ignore[misc]

    def test_rejects_done_index_outside_steps(self):
        with pytest.raises(IndexError, match="done index 0 out of range"):
            ChecklistState(steps=(), done=frozenset({0}))
