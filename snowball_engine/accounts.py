"""Investment/savings accounts and physical assets."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum

from snowball_engine.errors import InsufficientFundsError, ValidationError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(moment: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


# Account kinds (closed set)


@dataclass(frozen=True)
class Retirement:
    """Tax-advantaged retirement account; id comes from the market's account types."""

    account_type_id: str


@dataclass(frozen=True)
class Taxable:
    pass


@dataclass(frozen=True)
class EmergencyFund:
    pass


@dataclass(frozen=True)
class SinkingFund:
    goal: str


AccountKind = Retirement | Taxable | EmergencyFund | SinkingFund


@dataclass
class Account:
    id: str
    name: str
    kind: AccountKind
    balance: Decimal = Decimal("0")
    opened_at: datetime = field(default_factory=_utcnow)
    total_contributions: Decimal = Decimal("0")
    total_withdrawals: Decimal = Decimal("0")

    def __post_init__(self):
        self.opened_at = _as_utc(self.opened_at)

    def deposit(self, amount: Decimal) -> None:
        if amount <= 0:
            raise ValidationError("Deposit amount must be positive")
        self.balance += amount
        self.total_contributions += amount

    def withdraw(self, amount: Decimal) -> None:
        if amount <= 0:
            raise ValidationError("Withdrawal amount must be positive")
        if amount > self.balance:
            raise InsufficientFundsError(
                f"Insufficient funds in {self.name}: requested {amount}, balance {self.balance}"
            )
        self.balance -= amount
        self.total_withdrawals += amount

    def holding_period(self, now: datetime | None = None) -> timedelta:
        """Time since the account was opened (zero if opened_at lies in the future)."""
        if now is None:
            now = _utcnow()
        return max(_as_utc(now) - self.opened_at, timedelta(0))

    def capital_gain(self) -> Decimal:
        """Balance growth not explained by contributions/withdrawals."""
        return self.balance - self.total_contributions + self.total_withdrawals

    def apply_return(self, return_rate: Decimal) -> None:
        """Apply a market return (may be negative). No floor is enforced."""
        self.balance *= 1 + return_rate


class AssetCategory(Enum):
    REAL_ESTATE = "RealEstate"
    VEHICLE = "Vehicle"
    OTHER = "Other"


@dataclass
class Asset:
    id: str
    name: str
    category: AssetCategory
    purchase_price: Decimal
    monthly_cost: Decimal = Decimal("0")
    value: Decimal | None = None
    acquired_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        if self.value is None:
            self.value = self.purchase_price
        self.acquired_at = _as_utc(self.acquired_at)

    def capital_gain(self) -> Decimal:
        return self.value - self.purchase_price

    def depreciate(self, rate: Decimal) -> None:
        """Apply a (negative) value change; value never drops below zero."""
        self.value *= 1 + rate
        if self.value < 0:
            self.value = Decimal("0")
