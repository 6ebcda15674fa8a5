"""Player's financial aggregate and derived metrics.

Every metric is recomputed from the collections on each call; nothing is
cached on the aggregate.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from snowball_engine.accounts import Account, Asset, EmergencyFund
from snowball_engine.errors import ValidationError
from snowball_engine.expenses import CATEGORY_ORDER, BudgetAllocation, Expense, ExpenseCategory
from snowball_engine.income import Income

FIRE_MULTIPLIER = 25          # 4% rule: 25x annual expenses
EMERGENCY_FUND_MONTHS = 3


@dataclass
class FinancialState:
    cash: Decimal = Decimal("0")
    accounts: list[Account] = field(default_factory=list)
    assets: list[Asset] = field(default_factory=list)
    income_sources: list[Income] = field(default_factory=list)
    expenses: list[Expense] = field(default_factory=list)
    budget: dict[ExpenseCategory, BudgetAllocation] = field(default_factory=dict)
    liabilities: Decimal = Decimal("0")

    # --- rollups ---

    def total_assets(self) -> Decimal:
        account_total = sum((a.balance for a in self.accounts), Decimal("0"))
        asset_total = sum((a.value for a in self.assets), Decimal("0"))
        return self.cash + account_total + asset_total

    def net_worth(self) -> Decimal:
        return self.total_assets() - self.liabilities

    def monthly_gross_income(self) -> Decimal:
        return sum(
            (i.gross_monthly for i in self.income_sources if i.active), Decimal("0")
        )

    def monthly_expenses(self) -> Decimal:
        return sum((e.monthly_amount for e in self.expenses if e.active), Decimal("0"))

    def monthly_essential_expenses(self) -> Decimal:
        return sum(
            (e.monthly_amount for e in self.expenses if e.active and e.category.is_essential),
            Decimal("0"),
        )

    # --- derived metrics ---

    def savings_rate(self, net_income: Decimal) -> Decimal:
        """Percentage of after-tax income left after expenses."""
        if net_income <= 0:
            return Decimal("0")
        saved = net_income - self.monthly_expenses()
        return saved / net_income * 100

    def fire_number(self) -> Decimal:
        return self.monthly_expenses() * 12 * FIRE_MULTIPLIER

    def fire_progress(self) -> Decimal:
        fire_number = self.fire_number()
        if fire_number == 0:
            return Decimal("0")
        return self.net_worth() / fire_number * 100

    def is_fire(self) -> bool:
        return self.net_worth() >= self.fire_number()

    def emergency_fund_balance(self) -> Decimal:
        return sum(
            (a.balance for a in self.accounts if isinstance(a.kind, EmergencyFund)),
            Decimal("0"),
        )

    def has_emergency_fund(self) -> bool:
        return self.emergency_fund_balance() >= self.monthly_expenses() * EMERGENCY_FUND_MONTHS

    # --- collections ---

    def find_account(self, account_id: str) -> Account:
        for account in self.accounts:
            if account.id == account_id:
                return account
        raise ValidationError(f"Unknown account: {account_id}")

    def add_account(self, account: Account) -> None:
        if any(a.id == account.id for a in self.accounts):
            raise ValidationError(f"Duplicate account id: {account.id}")
        self.accounts.append(account)

    def add_asset(self, asset: Asset) -> None:
        if any(a.id == asset.id for a in self.assets):
            raise ValidationError(f"Duplicate asset id: {asset.id}")
        self.assets.append(asset)

    def add_income(self, income: Income) -> None:
        if any(i.id == income.id for i in self.income_sources):
            raise ValidationError(f"Duplicate income id: {income.id}")
        self.income_sources.append(income)

    def add_expense(self, expense: Expense) -> None:
        if any(e.id == expense.id for e in self.expenses):
            raise ValidationError(f"Duplicate expense id: {expense.id}")
        self.expenses.append(expense)

    def remove_income_prefix(self, prefix: str) -> None:
        self.income_sources = [i for i in self.income_sources if not i.id.startswith(prefix)]

    def remove_expense_prefix(self, prefix: str) -> None:
        self.expenses = [e for e in self.expenses if not e.id.startswith(prefix)]

    # --- budget ---

    def set_budget(self, category: ExpenseCategory, allocated: Decimal) -> None:
        """Replace the allocation for category (spent restarts at zero)."""
        if allocated < 0:
            raise ValidationError("Budget allocation cannot be negative")
        self.budget[category] = BudgetAllocation(category, allocated)

    def reset_monthly_budget(self) -> None:
        for allocation in self.budget.values():
            allocation.reset_month()

    def budget_allocations(self) -> list[BudgetAllocation]:
        """Allocations in canonical category order."""
        return [self.budget[c] for c in CATEGORY_ORDER if c in self.budget]

    def total_budgeted(self) -> Decimal:
        return sum((b.allocated for b in self.budget.values()), Decimal("0"))
