"""Housing options and moving costs."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

MOVING_FEE = Decimal("1500")  # flat moving expenses on top of the deposit
DEPOSIT_MONTHS = 2


class HousingType(Enum):
    SHARED = "Shared Apartment"
    STUDIO = "Studio"
    ONE_BEDROOM = "1 Bedroom"
    TWO_BEDROOM = "2 Bedroom"
    THREE_BEDROOM = "3 Bedroom"
    HOUSE = "House"


class LocationQuality(Enum):
    POOR = "Outskirts"
    AVERAGE = "Suburbs"
    GOOD = "Good Area"
    PREMIUM = "City Center"

    @property
    def happiness_impact(self) -> int:
        """Monthly happiness modifier for living here."""
        return _HAPPINESS_IMPACT[self]


_HAPPINESS_IMPACT = {
    LocationQuality.POOR: -2,
    LocationQuality.AVERAGE: 0,
    LocationQuality.GOOD: 1,
    LocationQuality.PREMIUM: 2,
}


@dataclass
class Housing:
    id: str
    housing_type: HousingType
    location: LocationQuality
    address: str
    monthly_rent: Decimal
    monthly_utilities: Decimal

    def total_monthly_cost(self) -> Decimal:
        return self.monthly_rent + self.monthly_utilities

    def moving_cost(self) -> Decimal:
        """Security deposit (2x rent) + flat moving fee."""
        return self.monthly_rent * DEPOSIT_MONTHS + MOVING_FEE
