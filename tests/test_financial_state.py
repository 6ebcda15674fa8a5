"""Tests for FinancialState rollups and metrics."""

from decimal import Decimal

import pytest
from snowball_engine import (
    Account,
    Asset,
    AssetCategory,
    EmergencyFund,
    Expense,
    ExpenseCategory,
    FinancialState,
    Income,
    IncomeKind,
    Taxable,
    ValidationError,
)


def _finances() -> FinancialState:
    f = FinancialState(cash=Decimal("10000"))
    f.add_income(Income("job", "Salary", IncomeKind.EMPLOYMENT, Decimal("40000")))
    f.add_income(Income("side", "Side gig", IncomeKind.FREELANCE, Decimal("5000"), active=False))
    f.add_expense(Expense("rent", "Rent", ExpenseCategory.ESSENTIAL, Decimal("15000")))
    f.add_expense(Expense("gym", "Gym", ExpenseCategory.HEALTH, Decimal("1000")))
    f.add_expense(Expense("old", "Old sub", ExpenseCategory.LIFESTYLE, Decimal("500"), active=False))
    return f


class TestRollups:
    def setup_method(self):
        self.f = _finances()

    def test_inactive_items_excluded(self):
        assert self.f.monthly_gross_income() == Decimal("40000")
        assert self.f.monthly_expenses() == Decimal("16000")
        assert self.f.monthly_essential_expenses() == Decimal("15000")

    def test_net_worth_sums_cash_accounts_assets(self):
        savings = Account("s", "Savings", Taxable())
        savings.deposit(Decimal("2500"))
        self.f.add_account(savings)
        self.f.add_asset(Asset("car", "Car", AssetCategory.VEHICLE, Decimal("100000")))
        self.f.liabilities = Decimal("30000")
        assert self.f.total_assets() == Decimal("112500")
        assert self.f.net_worth() == Decimal("82500")

    def test_empty_state_is_zero(self):
        f = FinancialState()
        assert f.net_worth() == Decimal("0")
        assert f.monthly_gross_income() == Decimal("0")
        assert f.fire_progress() == Decimal("0")


class TestMetrics:
    def setup_method(self):
        self.f = _finances()

    def test_savings_rate(self):
        assert self.f.savings_rate(Decimal("32000")) == Decimal("50")

    @pytest.mark.parametrize("net", ["0", "-100"])
    def test_savings_rate_without_income(self, net):
        assert self.f.savings_rate(Decimal(net)) == Decimal("0")

    def test_fire_number(self):
        assert self.f.fire_number() == Decimal("4800000")

    def test_fire_progress(self):
        assert self.f.fire_progress() == Decimal("10000") / Decimal("4800000") * 100
        assert not self.f.is_fire()

    def test_is_fire_boundary(self):
        # 16000/month -> FIRE number 4,800,000
        self.f.cash = Decimal("4800000")
        assert self.f.is_fire()
        assert self.f.fire_progress() == Decimal("100")
        self.f.cash = Decimal("4799999.99")
        assert not self.f.is_fire()

    def test_is_fire_without_expenses(self):
        assert FinancialState().is_fire()

    def test_emergency_fund(self):
        assert not self.f.has_emergency_fund()
        fund = Account("ef", "Emergency", EmergencyFund())
        fund.deposit(Decimal("48000"))
        self.f.add_account(fund)
        assert self.f.emergency_fund_balance() == Decimal("48000")
        assert self.f.has_emergency_fund()

    def test_non_emergency_accounts_do_not_count(self):
        broker = Account("b", "Brokerage", Taxable())
        broker.deposit(Decimal("1000000"))
        self.f.add_account(broker)
        assert self.f.emergency_fund_balance() == Decimal("0")


class TestCollections:
    def setup_method(self):
        self.f = _finances()

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            self.f.add_income(Income("job", "Again", IncomeKind.EMPLOYMENT, Decimal("1")))
        with pytest.raises(ValidationError, match="Duplicate"):
            self.f.add_expense(Expense("rent", "Again", ExpenseCategory.ESSENTIAL, Decimal("1")))

    def test_find_unknown_account(self):
        with pytest.raises(ValidationError, match="Unknown account"):
            self.f.find_account("missing")

    def test_remove_by_prefix(self):
        self.f.add_expense(Expense("housing_a", "Flat", ExpenseCategory.ESSENTIAL, Decimal("9000")))
        self.f.remove_expense_prefix("housing_")
        assert [e.id for e in self.f.expenses] == ["rent", "gym", "old"]


class TestBudget:
    def setup_method(self):
        self.f = FinancialState()

    def test_allocations_in_canonical_order(self):
        self.f.set_budget(ExpenseCategory.OTHER, Decimal("100"))
        self.f.set_budget(ExpenseCategory.ESSENTIAL, Decimal("3500"))
        self.f.set_budget(ExpenseCategory.HEALTH, Decimal("500"))
        cats = [b.category for b in self.f.budget_allocations()]
        assert cats == [ExpenseCategory.ESSENTIAL, ExpenseCategory.HEALTH, ExpenseCategory.OTHER]
        assert self.f.total_budgeted() == Decimal("4100")

    def test_negative_allocation_rejected(self):
        with pytest.raises(ValidationError):
            self.f.set_budget(ExpenseCategory.LIFESTYLE, Decimal("-1"))

    def test_reset_monthly_budget(self):
        self.f.set_budget(ExpenseCategory.LIFESTYLE, Decimal("2000"))
        self.f.budget[ExpenseCategory.LIFESTYLE].spend(Decimal("2500"))
        self.f.reset_monthly_budget()
        assert self.f.budget[ExpenseCategory.LIFESTYLE].spent == Decimal("0")
