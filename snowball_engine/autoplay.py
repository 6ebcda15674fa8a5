"""Play whole months through the public game operations."""

from dataclasses import dataclass
from decimal import Decimal

from snowball_engine.errors import InvalidPhaseError
from snowball_engine.game_state import GameState
from snowball_engine.market import MarketProfile
from snowball_engine.phase import Execution, Planning
from snowball_engine.settlement import Settlement


@dataclass(frozen=True)
class MonthRecord:
    """Snapshot of one settled month, taken in the Review phase."""

    year: int
    month: int
    age: int
    settlement: Settlement
    cash: Decimal
    net_worth: Decimal
    savings_rate: Decimal
    fire_progress: Decimal
    peace_score: int


def play_month(state: GameState, market: MarketProfile) -> tuple[GameState, MonthRecord]:
    """Planning -> Execution days 1..30 -> Review -> next month's Planning."""
    if not isinstance(state.phase, Planning):
        raise InvalidPhaseError(
            f"A month can only be played from Planning (current: {state.phase.name})"
        )
    state = state.advance_phase()
    while isinstance(state.phase, Execution):
        state = state.advance_execution_day(market)

    finances = state.finances
    settlement = state.last_settlement
    record = MonthRecord(
        year=state.time.year,
        month=state.time.month.value,
        age=state.player.age,
        settlement=settlement,
        cash=finances.cash,
        net_worth=finances.net_worth(),
        savings_rate=finances.savings_rate(settlement.net_income),
        fire_progress=finances.fire_progress(),
        peace_score=state.player.financial_peace_score(),
    )
    return state.advance_phase(), record


def play_months(
    state: GameState, market: MarketProfile, months: int,
) -> tuple[GameState, list[MonthRecord]]:
    history: list[MonthRecord] = []
    for _ in range(months):
        state, record = play_month(state, market)
        history.append(record)
    return state, history
