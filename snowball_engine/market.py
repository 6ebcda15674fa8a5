"""Market-rules contract: country-specific tax and retirement rules."""

from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from enum import Enum


class Currency(Enum):
    CZK = "CZK"
    USD = "USD"
    GBP = "GBP"
    EUR = "EUR"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def minor_units(self) -> int:
        return 2


_SYMBOLS = {
    Currency.CZK: "Kč",
    Currency.USD: "$",
    Currency.GBP: "£",
    Currency.EUR: "€",
}


@dataclass(frozen=True)
class TaxBreakdown:
    income_tax: Decimal
    social_insurance: Decimal
    health_insurance: Decimal

    @property
    def total(self) -> Decimal:
        return self.income_tax + self.social_insurance + self.health_insurance


@dataclass(frozen=True)
class AccountType:
    """Tax-advantaged account offered by a market."""

    id: str
    name: str
    annual_limit: Decimal | None = None
    employer_match: bool = False


class MarketProfile:
    """Base class for market rules; one subclass per supported country.

    Methods that a market cannot compute yet raise MarketNotImplementedError
    so callers can tell "zero tax" apart from "rules unavailable".
    """

    def currency(self) -> Currency:
        raise NotImplementedError

    def calculate_income_tax(self, gross_monthly: Decimal) -> TaxBreakdown:
        raise NotImplementedError

    def available_accounts(self) -> list[AccountType]:
        raise NotImplementedError

    def capital_gains_tax(self, holding_period: timedelta, gain: Decimal) -> Decimal:
        raise NotImplementedError

    def retirement_age(self) -> int:
        raise NotImplementedError

    def market_id(self) -> str:
        raise NotImplementedError

    def market_name(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
