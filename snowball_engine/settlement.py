"""Monthly settlement: gross income and expenses -> net cash flow."""

from dataclasses import dataclass
from decimal import Decimal

from snowball_engine.financial_state import FinancialState
from snowball_engine.market import MarketProfile, TaxBreakdown


@dataclass(frozen=True)
class Settlement:
    """Result of one month's settlement."""

    gross_income: Decimal
    tax: TaxBreakdown | None  # None when there was no gross income
    total_expenses: Decimal

    @property
    def total_tax(self) -> Decimal:
        if self.tax is None:
            return Decimal("0")
        return self.tax.total

    @property
    def net_income(self) -> Decimal:
        if self.tax is None:
            return Decimal("0")
        return self.gross_income - self.tax.total

    @property
    def net_cash_flow(self) -> Decimal:
        return self.net_income - self.total_expenses


def compute_settlement(finances: FinancialState, market: MarketProfile) -> Settlement:
    """Compute a month's settlement without touching finances.

    The market is consulted only when there is gross income; its errors
    propagate unchanged.
    """
    gross = finances.monthly_gross_income()
    tax = market.calculate_income_tax(gross) if gross > 0 else None
    return Settlement(
        gross_income=gross,
        tax=tax,
        total_expenses=finances.monthly_expenses(),
    )
