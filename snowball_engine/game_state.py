"""Top-level game state and the operations that advance it.

Every operation returns a new GameState built from a deep copy of the
current one. A failing operation raises before returning, so the caller's
snapshot is never partially modified.
"""

import copy
import time
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from snowball_engine.accounts import Account
from snowball_engine.career import Career, Job
from snowball_engine.errors import (
    InsufficientFundsError,
    InvalidPhaseError,
    UnsupportedMarketError,
    ValidationError,
)
from snowball_engine.expenses import Expense, ExpenseCategory
from snowball_engine.financial_state import FinancialState
from snowball_engine.gametime import GameTime
from snowball_engine.housing import Housing
from snowball_engine.income import Income, IncomeKind
from snowball_engine.market import MarketProfile
from snowball_engine.markets import MARKETS
from snowball_engine.phase import Execution, GamePhase, Planning, Review
from snowball_engine.player import PlayerStats
from snowball_engine.settlement import Settlement, compute_settlement

MIN_PLAYER_AGE = 18
MAX_PLAYER_AGE = 100

HOUSING_EXPENSE_PREFIX = "housing_"
JOB_INCOME_PREFIX = "job_"

# First job: half a month's salary as starting cash, survival-level food budget
STARTING_CASH_SALARY_RATIO = Decimal("0.5")
MIN_ESSENTIAL_BUDGET = Decimal("3500")


def validate_age(age: int) -> None:
    if not MIN_PLAYER_AGE <= age <= MAX_PLAYER_AGE:
        raise ValidationError(
            f"Player age {age} is out of range ({MIN_PLAYER_AGE}-{MAX_PLAYER_AGE})"
        )


@dataclass
class GameState:
    save_id: str
    market_id: str
    time: GameTime
    start_year: int
    player: PlayerStats
    phase: GamePhase = field(default_factory=Planning)
    career: Career = field(default_factory=Career)
    housing: Housing | None = None
    months_at_housing: int = 0
    finances: FinancialState = field(default_factory=FinancialState)
    last_settlement: Settlement | None = None

    def _copy(self) -> "GameState":
        return copy.deepcopy(self)

    # --- queries ---

    def months_elapsed(self) -> int:
        return self.time.total_months(self.start_year)

    def years_elapsed(self) -> int:
        return self.time.year - self.start_year

    # --- time ---

    def advance_phase(self) -> "GameState":
        """Apply the phase transition; Review -> Planning closes the month."""
        new = self._copy()
        closing_month = isinstance(new.phase, Review)
        new.phase = new.phase.next()
        if closing_month:
            new._close_month()
        return new

    def _close_month(self) -> None:
        self.time.advance_month()
        self.finances.reset_monthly_budget()
        self.career.advance_month()
        if self.housing is not None:
            self.months_at_housing += 1
        if self.time.month.value == 1:
            self.player.age_one_year()

    def advance_execution_day(self, market: MarketProfile) -> "GameState":
        """Advance one day; on day 30 settle the month and move to Review."""
        if not isinstance(self.phase, Execution):
            raise InvalidPhaseError(
                f"Can only advance day during Execution phase (current: {self.phase.name})"
            )
        if market.market_id() != self.market_id:
            raise ValidationError(
                f"Market rules {market.market_id()!r} do not match game market {self.market_id!r}"
            )
        new = self._copy()
        if not new.phase.is_last_day:
            new.phase = new.phase.next_day()
            new.time.advance_day()
            return new

        settlement = compute_settlement(new.finances, market)
        new.finances.cash += settlement.net_cash_flow
        new.last_settlement = settlement
        new.phase = new.phase.next()
        return new

    # --- housing ---

    def change_housing(self, new_housing: Housing) -> "GameState":
        moving_cost = new_housing.moving_cost()
        if self.finances.cash < moving_cost:
            raise InsufficientFundsError(
                f"Cannot afford moving costs of {moving_cost:.0f} (cash: {self.finances.cash:.0f})"
            )
        new = self._copy()
        new.finances.cash -= moving_cost
        new.finances.remove_expense_prefix(HOUSING_EXPENSE_PREFIX)
        new.finances.expenses.append(
            Expense(
                id=f"{HOUSING_EXPENSE_PREFIX}{new_housing.id}",
                name=f"Housing: {new_housing.address}",
                category=ExpenseCategory.ESSENTIAL,
                monthly_amount=new_housing.total_monthly_cost(),
            )
        )
        new.housing = copy.deepcopy(new_housing)
        new.months_at_housing = 0
        return new

    # --- career ---

    def accept_job(self, job: Job) -> "GameState":
        """Take a job; its salary replaces any existing job income."""
        new = self._copy()
        job = copy.deepcopy(job)
        first_job = new.career.current_job is None and not new.career.job_history
        if first_job:
            new.finances.cash += job.monthly_salary * STARTING_CASH_SALARY_RATIO
            essential = new.finances.budget.get(ExpenseCategory.ESSENTIAL)
            if essential is None or essential.allocated < MIN_ESSENTIAL_BUDGET:
                new.finances.set_budget(ExpenseCategory.ESSENTIAL, MIN_ESSENTIAL_BUDGET)

        new.career.accept_job(job)
        new.finances.remove_income_prefix(JOB_INCOME_PREFIX)
        new.finances.income_sources.append(
            Income(
                id=f"{JOB_INCOME_PREFIX}{job.id}",
                name=job.title,
                kind=IncomeKind.EMPLOYMENT,
                gross_monthly=job.monthly_salary,
            )
        )
        return new

    def quit_job(self) -> "GameState":
        if not self.career.is_employed():
            raise ValidationError("No job to quit")
        new = self._copy()
        new.career.quit_job()
        new.finances.remove_income_prefix(JOB_INCOME_PREFIX)
        return new

    # --- budget and cash flow items ---

    def set_budget(self, category: ExpenseCategory, amount: Decimal) -> "GameState":
        new = self._copy()
        new.finances.set_budget(category, amount)
        return new

    def record_spending(self, category: ExpenseCategory, amount: Decimal) -> "GameState":
        if category not in self.finances.budget:
            raise ValidationError(f"No budget allocated for {category.value}")
        new = self._copy()
        new.finances.budget[category].spend(amount)
        return new

    def add_income(self, income: Income) -> "GameState":
        new = self._copy()
        new.finances.add_income(copy.deepcopy(income))
        return new

    def add_expense(self, expense: Expense) -> "GameState":
        new = self._copy()
        new.finances.add_expense(copy.deepcopy(expense))
        return new

    # --- accounts ---

    def open_account(self, account: Account) -> "GameState":
        new = self._copy()
        new.finances.add_account(copy.deepcopy(account))
        return new

    def transfer_to_account(self, account_id: str, amount: Decimal) -> "GameState":
        """Move cash into an account."""
        if amount <= 0:
            raise ValidationError("Transfer amount must be positive")
        if amount > self.finances.cash:
            raise InsufficientFundsError(
                f"Cannot transfer {amount}: only {self.finances.cash} in cash"
            )
        new = self._copy()
        new.finances.find_account(account_id).deposit(amount)
        new.finances.cash -= amount
        return new

    def withdraw_from_account(self, account_id: str, amount: Decimal) -> "GameState":
        """Move money from an account back to cash."""
        new = self._copy()
        new.finances.find_account(account_id).withdraw(amount)
        new.finances.cash += amount
        return new

    # --- player ---

    def invest_human_capital(self, amount: Decimal) -> "GameState":
        """Pay for education/skills out of cash."""
        if amount > self.finances.cash:
            raise InsufficientFundsError(
                f"Cannot invest {amount}: only {self.finances.cash} in cash"
            )
        new = self._copy()
        new.player.invest_human_capital(amount)
        new.finances.cash -= amount
        return new

    def adjust_wellbeing(self, happiness_delta: int = 0, burnout_delta: int = 0) -> "GameState":
        new = self._copy()
        new.player.adjust_happiness(happiness_delta)
        new.player.adjust_burnout(burnout_delta)
        return new

    def set_frugality(self, enabled: bool) -> "GameState":
        new = self._copy()
        new.player.frugality_enabled = enabled
        return new


def _default_save_id() -> str:
    return f"save_{int(time.time() * 1000)}"


def new_game(
    market_id: str,
    player_age: int,
    starting_job: Job | None = None,
    *,
    player_name: str | None = None,
    start_year: int | None = None,
    save_id: str | None = None,
) -> GameState:
    """Create the initial state for a new game (January, Planning phase)."""
    if market_id not in MARKETS:
        raise UnsupportedMarketError(
            f"Unsupported market: {market_id!r} (supported: {', '.join(MARKETS)})"
        )
    validate_age(player_age)
    if start_year is None:
        start_year = date.today().year

    state = GameState(
        save_id=save_id or _default_save_id(),
        market_id=market_id,
        time=GameTime.start(start_year),
        start_year=start_year,
        player=PlayerStats(age=player_age, name=player_name),
    )
    if starting_job is not None:
        state = state.accept_job(starting_job)
    return state
