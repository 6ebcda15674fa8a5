"""Tests for PlayerStats."""

from decimal import Decimal

import pytest
from snowball_engine import PlayerStats, ValidationError


class TestStats:
    def test_defaults(self):
        p = PlayerStats(age=25)
        assert (p.happiness, p.burnout) == (70, 20)
        assert not p.frugality_enabled

    def test_clamped_on_construction(self):
        p = PlayerStats(age=25, happiness=150, burnout=-5)
        assert (p.happiness, p.burnout) == (100, 0)

    def test_adjust_clamps(self):
        p = PlayerStats(age=25)
        p.adjust_happiness(-500)
        p.adjust_burnout(500)
        assert (p.happiness, p.burnout) == (0, 100)


class TestPeaceScore:
    @pytest.mark.parametrize("happiness,burnout,score", [
        (80, 20, 80),
        (71, 20, 75),
        (0, 100, 0),
        (100, 0, 100),
    ])
    def test_financial_peace_score(self, happiness, burnout, score):
        assert PlayerStats(25, happiness=happiness, burnout=burnout).financial_peace_score() == score

    @pytest.mark.parametrize("happiness,burnout,risk", [
        (39, 20, True),
        (40, 20, False),
        (70, 71, True),
        (70, 70, False),
    ])
    def test_revenge_spending_risk(self, happiness, burnout, risk):
        assert PlayerStats(25, happiness=happiness, burnout=burnout).is_revenge_spending_risk() is risk


class TestHumanCapital:
    def test_multiplier(self):
        p = PlayerStats(age=30)
        assert p.human_capital_income_multiplier() == Decimal("1.0")
        p.invest_human_capital(Decimal("50000"))
        assert p.human_capital_income_multiplier() == Decimal("1.05")

    def test_non_positive_rejected(self):
        with pytest.raises(ValidationError):
            PlayerStats(age=30).invest_human_capital(Decimal("0"))
