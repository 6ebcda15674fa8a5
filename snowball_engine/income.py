"""Income sources."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class IncomeKind(Enum):
    EMPLOYMENT = "Employment"
    FREELANCE = "Freelance"
    PASSIVE = "Passive"       # dividends, rent received
    ONE_TIME = "OneTime"      # bonus, gift


@dataclass
class Income:
    id: str
    name: str
    kind: IncomeKind
    gross_monthly: Decimal
    active: bool = True

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def adjust_amount(self, new_amount: Decimal) -> None:
        """Set a new gross monthly amount (raise, pay cut)."""
        self.gross_monthly = new_amount

    def annual_gross(self) -> Decimal:
        if not self.active:
            return Decimal("0")
        return self.gross_monthly * 12
