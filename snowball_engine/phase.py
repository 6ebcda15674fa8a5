"""Monthly phase cycle: Planning -> Execution(day) -> Review -> Planning."""

from dataclasses import dataclass

from snowball_engine.errors import ValidationError
from snowball_engine.gametime import DAYS_PER_MONTH


@dataclass(frozen=True)
class Planning:
    """Time is paused; budget, career and housing decisions are made."""

    name = "Monthly Planning"

    def next(self) -> "Execution":
        return Execution(current_day=1)


@dataclass(frozen=True)
class Execution:
    """Time flows through days 1-30."""

    current_day: int = 1
    name = "Execution"

    def __post_init__(self):
        if not 1 <= self.current_day <= DAYS_PER_MONTH:
            raise ValidationError(f"Invalid execution day: {self.current_day}")

    @property
    def is_last_day(self) -> bool:
        return self.current_day == DAYS_PER_MONTH

    def next(self) -> "Review":
        return Review()

    def next_day(self) -> "Execution":
        return Execution(current_day=self.current_day + 1)


@dataclass(frozen=True)
class Review:
    """Summary of the finished month; no further time advance."""

    name = "Monthly Review"

    def next(self) -> Planning:
        return Planning()


GamePhase = Planning | Execution | Review


def next_phase(phase: GamePhase) -> GamePhase:
    return phase.next()
