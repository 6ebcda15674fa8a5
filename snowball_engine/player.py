"""Player well-being and human capital."""

from dataclasses import dataclass
from decimal import Decimal

from snowball_engine.errors import ValidationError

STAT_MIN = 0
STAT_MAX = 100

DEFAULT_HAPPINESS = 70
DEFAULT_BURNOUT = 20

REVENGE_SPENDING_HAPPINESS = 40  # below this
REVENGE_SPENDING_BURNOUT = 70    # above this

# Linear model: every 100,000 invested raises income potential by 10%
HUMAN_CAPITAL_UNIT = Decimal("100000")
HUMAN_CAPITAL_STEP = Decimal("0.10")


def _clamp(value: int) -> int:
    return max(STAT_MIN, min(STAT_MAX, value))


@dataclass
class PlayerStats:
    age: int
    name: str | None = None
    happiness: int = DEFAULT_HAPPINESS
    burnout: int = DEFAULT_BURNOUT
    frugality_enabled: bool = False
    human_capital_invested: Decimal = Decimal("0")

    def __post_init__(self):
        self.happiness = _clamp(self.happiness)
        self.burnout = _clamp(self.burnout)

    def adjust_happiness(self, delta: int) -> None:
        self.happiness = _clamp(self.happiness + delta)

    def adjust_burnout(self, delta: int) -> None:
        self.burnout = _clamp(self.burnout + delta)

    def financial_peace_score(self) -> int:
        """Average of happiness and inverted burnout."""
        return (self.happiness + (STAT_MAX - self.burnout)) // 2

    def is_revenge_spending_risk(self) -> bool:
        return (
            self.happiness < REVENGE_SPENDING_HAPPINESS
            or self.burnout > REVENGE_SPENDING_BURNOUT
        )

    def age_one_year(self) -> None:
        self.age += 1

    def invest_human_capital(self, amount: Decimal) -> None:
        if amount <= 0:
            raise ValidationError("Human capital investment must be positive")
        self.human_capital_invested += amount

    def human_capital_income_multiplier(self) -> Decimal:
        units = self.human_capital_invested / HUMAN_CAPITAL_UNIT
        return Decimal("1.0") + units * HUMAN_CAPITAL_STEP
