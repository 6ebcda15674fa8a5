"""Market implementations and the market registry."""

from datetime import timedelta
from decimal import Decimal

from snowball_engine.errors import MarketNotImplementedError, UnsupportedMarketError
from snowball_engine.market import AccountType, Currency, MarketProfile, TaxBreakdown

# Czech Republic: simplified employee rates (placeholders, single 15% bracket)
CZ_SOCIAL_INSURANCE_RATE = Decimal("0.071")
CZ_HEALTH_INSURANCE_RATE = Decimal("0.045")
CZ_INCOME_TAX_RATE = Decimal("0.15")
CZ_CAPITAL_GAINS_RATE = Decimal("0.15")  # short holdings taxed as ordinary income
CZ_TIME_TEST = timedelta(days=3 * 365)    # Časový test: exempt at/after 3 years
CZ_RETIREMENT_AGE = 65


class CzechMarket(MarketProfile):
    """Czech Republic: flat simplified rates."""

    def currency(self) -> Currency:
        return Currency.CZK

    def calculate_income_tax(self, gross_monthly: Decimal) -> TaxBreakdown:
        return TaxBreakdown(
            income_tax=gross_monthly * CZ_INCOME_TAX_RATE,
            social_insurance=gross_monthly * CZ_SOCIAL_INSURANCE_RATE,
            health_insurance=gross_monthly * CZ_HEALTH_INSURANCE_RATE,
        )

    def available_accounts(self) -> list[AccountType]:
        return [
            AccountType(
                id="dip",
                name="DIP (Dlouhodobý investiční produkt)",
                annual_limit=Decimal("48000"),
                employer_match=True,
            ),
            AccountType(
                id="third_pillar",
                name="III. pilíř (Doplňkové penzijní spoření)",
                annual_limit=Decimal("24000"),
            ),
            AccountType(
                id="stavebni_sporeni",
                name="Stavební spoření",
                annual_limit=Decimal("20000"),
            ),
        ]

    def capital_gains_tax(self, holding_period: timedelta, gain: Decimal) -> Decimal:
        if holding_period >= CZ_TIME_TEST:
            return Decimal("0")
        return gain * CZ_CAPITAL_GAINS_RATE

    def retirement_age(self) -> int:
        return CZ_RETIREMENT_AGE

    def market_id(self) -> str:
        return "czech"

    def market_name(self) -> str:
        return "Czech Republic"


class _PendingMarket(MarketProfile):
    """Registered market whose tax rules are not implemented yet."""

    MARKET_ID = ""
    MARKET_NAME = ""
    CURRENCY: Currency
    RETIREMENT_AGE = 0

    def currency(self) -> Currency:
        return self.CURRENCY

    def calculate_income_tax(self, gross_monthly: Decimal) -> TaxBreakdown:
        raise MarketNotImplementedError(f"{self.MARKET_NAME} income tax is not implemented")

    def available_accounts(self) -> list[AccountType]:
        return []

    def capital_gains_tax(self, holding_period: timedelta, gain: Decimal) -> Decimal:
        raise MarketNotImplementedError(f"{self.MARKET_NAME} capital gains tax is not implemented")

    def retirement_age(self) -> int:
        return self.RETIREMENT_AGE

    def market_id(self) -> str:
        return self.MARKET_ID

    def market_name(self) -> str:
        return self.MARKET_NAME


class UsaMarket(_PendingMarket):
    MARKET_ID = "usa"
    MARKET_NAME = "United States"
    CURRENCY = Currency.USD
    RETIREMENT_AGE = 67  # Social Security full retirement age


class UkMarket(_PendingMarket):
    MARKET_ID = "uk"
    MARKET_NAME = "United Kingdom"
    CURRENCY = Currency.GBP
    RETIREMENT_AGE = 66  # state pension age


MARKETS: dict[str, type[MarketProfile]] = {
    "czech": CzechMarket,
    "usa": UsaMarket,
    "uk": UkMarket,
}


def resolve_market(market_id: str) -> MarketProfile:
    """Return the rules provider for market_id. No default fallback."""
    try:
        return MARKETS[market_id]()
    except KeyError:
        raise UnsupportedMarketError(
            f"Unsupported market: {market_id!r} (supported: {', '.join(MARKETS)})"
        ) from None
