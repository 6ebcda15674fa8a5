"""Recurring expenses and per-category budget allocations."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from snowball_engine.errors import ValidationError


class ExpenseCategory(Enum):
    """Closed category set. Declaration order is the canonical budget order."""

    ESSENTIAL = "Essential"
    LIFESTYLE = "Lifestyle"
    HEALTH = "Health"
    TRANSPORTATION = "Transportation"
    EDUCATION = "Education"
    OTHER = "Other"

    @property
    def is_essential(self) -> bool:
        return self is ExpenseCategory.ESSENTIAL

    @property
    def happiness_multiplier(self) -> float:
        """How strongly spending in this category lifts happiness."""
        return _HAPPINESS_MULTIPLIERS[self]


_HAPPINESS_MULTIPLIERS = {
    ExpenseCategory.ESSENTIAL: 0.1,
    ExpenseCategory.LIFESTYLE: 1.0,
    ExpenseCategory.HEALTH: 0.5,
    ExpenseCategory.TRANSPORTATION: 0.2,
    ExpenseCategory.EDUCATION: 0.3,
    ExpenseCategory.OTHER: 0.2,
}

CATEGORY_ORDER: tuple[ExpenseCategory, ...] = tuple(ExpenseCategory)


@dataclass
class Expense:
    id: str
    name: str
    category: ExpenseCategory
    monthly_amount: Decimal
    active: bool = True

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def adjust_amount(self, new_amount: Decimal) -> None:
        self.monthly_amount = new_amount

    def annual_cost(self) -> Decimal:
        if not self.active:
            return Decimal("0")
        return self.monthly_amount * 12


@dataclass
class BudgetAllocation:
    category: ExpenseCategory
    allocated: Decimal
    spent: Decimal = Decimal("0")

    def spend(self, amount: Decimal) -> None:
        if amount <= 0:
            raise ValidationError("Spend amount must be positive")
        self.spent += amount

    def remaining(self) -> Decimal:
        return self.allocated - self.spent

    def is_over_budget(self) -> bool:
        return self.spent > self.allocated

    def overspend(self) -> Decimal:
        if self.is_over_budget():
            return self.spent - self.allocated
        return Decimal("0")

    def reset_month(self) -> None:
        self.spent = Decimal("0")
