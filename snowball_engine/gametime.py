"""Calendar arithmetic: months, days and year rollover."""

from dataclasses import dataclass

from snowball_engine.errors import ValidationError

DAYS_PER_MONTH = 30  # simplified month length

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


@dataclass(frozen=True)
class Month:
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or not 1 <= self.value <= 12:
            raise ValidationError(f"Invalid month: {self.value}")

    def next(self) -> tuple["Month", bool]:
        """Return (next month, year_changed)."""
        if self.value == 12:
            return Month(1), True
        return Month(self.value + 1), False

    @property
    def name(self) -> str:
        return _MONTH_NAMES[self.value - 1]


@dataclass
class GameTime:
    """Current in-game date (day 1-30 of a month)."""

    month: Month
    year: int
    day: int = 1

    def __post_init__(self):
        if not 1 <= self.day <= DAYS_PER_MONTH:
            raise ValidationError(f"Invalid day: {self.day}")

    @classmethod
    def start(cls, year: int, month: int = 1) -> "GameTime":
        return cls(Month(month), year)

    def advance_month(self) -> None:
        next_month, year_changed = self.month.next()
        self.month = next_month
        if year_changed:
            self.year += 1
        self.day = 1

    def advance_day(self) -> None:
        if self.day < DAYS_PER_MONTH:
            self.day += 1
        else:
            self.advance_month()

    def total_months(self, start_year: int) -> int:
        """Months elapsed since January of start_year, counting the current month."""
        return (self.year - start_year) * 12 + self.month.value

    def label(self) -> str:
        return f"{self.month.name} {self.year}"
