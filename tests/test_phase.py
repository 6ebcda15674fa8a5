"""Tests for the monthly phase cycle."""

import pytest
from snowball_engine import Execution, Planning, Review, ValidationError
from snowball_engine.phase import next_phase


class TestTransitions:
    def test_planning_to_execution_day_1(self):
        assert Planning().next() == Execution(current_day=1)

    def test_execution_to_review(self):
        assert Execution(current_day=17).next() == Review()

    def test_review_to_planning(self):
        assert next_phase(Review()) == Planning()

    def test_full_cycle(self):
        phase = Planning()
        for _ in range(3):
            phase = next_phase(phase)
        assert phase == Planning()

    def test_transition_returns_new_value(self):
        p = Execution(current_day=5)
        q = p.next_day()
        assert p.current_day == 5
        assert q.current_day == 6


class TestExecutionDay:
    @pytest.mark.parametrize("day", [0, 31])
    def test_day_out_of_range(self, day):
        with pytest.raises(ValidationError, match="Invalid execution day"):
            Execution(current_day=day)

    def test_last_day(self):
        assert Execution(current_day=30).is_last_day
        assert not Execution(current_day=29).is_last_day

    def test_day_only_on_execution(self):
        assert not hasattr(Planning(), "current_day")
        assert not hasattr(Review(), "current_day")

    def test_names(self):
        assert Planning().name == "Monthly Planning"
        assert Execution().name == "Execution"
        assert Review().name == "Monthly Review"
