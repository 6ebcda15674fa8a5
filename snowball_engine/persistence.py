"""Lossless JSON save/load for GameState.

The save format is described by pydantic record models that mirror the
domain types. Money is written as decimal strings so no precision is lost.
Variant types (account kinds, phases, career fields) carry a "type" tag and
are decoded through discriminated unions. Any malformed input raises
PersistenceError; nothing partial is returned.
"""

from decimal import Decimal
from pathlib import Path
from typing import Annotated, Literal, Union

import pydantic
from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator, model_validator

from snowball_engine.accounts import (
    Account,
    AccountKind,
    Asset,
    AssetCategory,
    EmergencyFund,
    Retirement,
    SinkingFund,
    Taxable,
)
from snowball_engine.career import Career, CareerField, Job, JobField, JobLevel, OtherField
from snowball_engine.errors import PersistenceError, ValidationError
from snowball_engine.expenses import BudgetAllocation, Expense, ExpenseCategory
from snowball_engine.financial_state import FinancialState
from snowball_engine.game_state import MIN_PLAYER_AGE, GameState
from snowball_engine.gametime import DAYS_PER_MONTH, GameTime, Month
from snowball_engine.housing import Housing, HousingType, LocationQuality
from snowball_engine.income import Income, IncomeKind
from snowball_engine.market import TaxBreakdown
from snowball_engine.markets import MARKETS
from snowball_engine.phase import Execution, GamePhase, Planning, Review
from snowball_engine.player import STAT_MAX, STAT_MIN, PlayerStats
from snowball_engine.settlement import Settlement

FORMAT_VERSION = 1

Money = Annotated[Decimal, Field(allow_inf_nan=False)]
NonNegativeMoney = Annotated[Decimal, Field(ge=0, allow_inf_nan=False)]
Count = Annotated[int, Field(ge=0)]
Stat = Annotated[int, Field(ge=STAT_MIN, le=STAT_MAX)]


class _Record(BaseModel):
    model_config = ConfigDict(extra="forbid")


# ============================================================================
# Variants
# ============================================================================


class RetirementRecord(_Record):
    type: Literal["Retirement"] = "Retirement"
    account_type_id: str

    def to_domain(self) -> AccountKind:
        return Retirement(self.account_type_id)


class TaxableRecord(_Record):
    type: Literal["Taxable"] = "Taxable"

    def to_domain(self) -> AccountKind:
        return Taxable()


class EmergencyFundRecord(_Record):
    type: Literal["EmergencyFund"] = "EmergencyFund"

    def to_domain(self) -> AccountKind:
        return EmergencyFund()


class SinkingFundRecord(_Record):
    type: Literal["SinkingFund"] = "SinkingFund"
    goal: str

    def to_domain(self) -> AccountKind:
        return SinkingFund(self.goal)


AccountKindRecord = Annotated[
    Union[RetirementRecord, TaxableRecord, EmergencyFundRecord, SinkingFundRecord],
    Field(discriminator="type"),
]


def _account_kind_record(kind: AccountKind) -> AccountKindRecord:
    if isinstance(kind, Retirement):
        return RetirementRecord(account_type_id=kind.account_type_id)
    if isinstance(kind, Taxable):
        return TaxableRecord()
    if isinstance(kind, EmergencyFund):
        return EmergencyFundRecord()
    if isinstance(kind, SinkingFund):
        return SinkingFundRecord(goal=kind.goal)
    raise PersistenceError(f"Cannot encode account kind {kind!r}")


class PlanningRecord(_Record):
    type: Literal["Planning"] = "Planning"

    def to_domain(self) -> GamePhase:
        return Planning()


class ExecutionRecord(_Record):
    type: Literal["Execution"] = "Execution"
    current_day: int = Field(ge=1, le=DAYS_PER_MONTH)

    def to_domain(self) -> GamePhase:
        return Execution(current_day=self.current_day)


class ReviewRecord(_Record):
    type: Literal["Review"] = "Review"

    def to_domain(self) -> GamePhase:
        return Review()


PhaseRecord = Annotated[
    Union[PlanningRecord, ExecutionRecord, ReviewRecord],
    Field(discriminator="type"),
]


def _phase_record(phase: GamePhase) -> PhaseRecord:
    if isinstance(phase, Planning):
        return PlanningRecord()
    if isinstance(phase, Execution):
        return ExecutionRecord(current_day=phase.current_day)
    if isinstance(phase, Review):
        return ReviewRecord()
    raise PersistenceError(f"Cannot encode phase {phase!r}")


class KnownFieldRecord(_Record):
    type: Literal["Known"] = "Known"
    name: CareerField

    def to_domain(self) -> JobField:
        return self.name


class OtherFieldRecord(_Record):
    type: Literal["Other"] = "Other"
    name: str

    def to_domain(self) -> JobField:
        return OtherField(self.name)


JobFieldRecord = Annotated[
    Union[KnownFieldRecord, OtherFieldRecord],
    Field(discriminator="type"),
]


def _job_field_record(job_field: JobField) -> JobFieldRecord:
    if isinstance(job_field, OtherField):
        return OtherFieldRecord(name=job_field.name)
    return KnownFieldRecord(name=job_field)


# ============================================================================
# Finances
# ============================================================================


class AccountRecord(_Record):
    id: str
    name: str
    kind: AccountKindRecord
    balance: Money  # may go negative after a loss
    opened_at: AwareDatetime
    total_contributions: NonNegativeMoney
    total_withdrawals: NonNegativeMoney

    @classmethod
    def from_domain(cls, a: Account) -> "AccountRecord":
        return cls(
            id=a.id,
            name=a.name,
            kind=_account_kind_record(a.kind),
            balance=a.balance,
            opened_at=a.opened_at,
            total_contributions=a.total_contributions,
            total_withdrawals=a.total_withdrawals,
        )

    def to_domain(self) -> Account:
        return Account(
            id=self.id,
            name=self.name,
            kind=self.kind.to_domain(),
            balance=self.balance,
            opened_at=self.opened_at,
            total_contributions=self.total_contributions,
            total_withdrawals=self.total_withdrawals,
        )


class AssetRecord(_Record):
    id: str
    name: str
    category: AssetCategory
    purchase_price: NonNegativeMoney
    monthly_cost: NonNegativeMoney
    value: NonNegativeMoney
    acquired_at: AwareDatetime

    @classmethod
    def from_domain(cls, a: Asset) -> "AssetRecord":
        return cls(
            id=a.id,
            name=a.name,
            category=a.category,
            purchase_price=a.purchase_price,
            monthly_cost=a.monthly_cost,
            value=a.value,
            acquired_at=a.acquired_at,
        )

    def to_domain(self) -> Asset:
        return Asset(
            id=self.id,
            name=self.name,
            category=self.category,
            purchase_price=self.purchase_price,
            monthly_cost=self.monthly_cost,
            value=self.value,
            acquired_at=self.acquired_at,
        )


class IncomeRecord(_Record):
    id: str
    name: str
    kind: IncomeKind
    gross_monthly: Money
    active: bool

    @classmethod
    def from_domain(cls, i: Income) -> "IncomeRecord":
        return cls(id=i.id, name=i.name, kind=i.kind, gross_monthly=i.gross_monthly, active=i.active)

    def to_domain(self) -> Income:
        return Income(self.id, self.name, self.kind, self.gross_monthly, self.active)


class ExpenseRecord(_Record):
    id: str
    name: str
    category: ExpenseCategory
    monthly_amount: Money
    active: bool

    @classmethod
    def from_domain(cls, e: Expense) -> "ExpenseRecord":
        return cls(
            id=e.id, name=e.name, category=e.category,
            monthly_amount=e.monthly_amount, active=e.active,
        )

    def to_domain(self) -> Expense:
        return Expense(self.id, self.name, self.category, self.monthly_amount, self.active)


class BudgetRecord(_Record):
    category: ExpenseCategory
    allocated: NonNegativeMoney
    spent: NonNegativeMoney


class FinancesRecord(_Record):
    cash: Money
    accounts: list[AccountRecord]
    assets: list[AssetRecord]
    income_sources: list[IncomeRecord]
    expenses: list[ExpenseRecord]
    budget: list[BudgetRecord]  # canonical category order
    liabilities: NonNegativeMoney

    @field_validator("accounts", "assets", "income_sources", "expenses")
    @classmethod
    def _unique_ids(cls, items, info):
        ids = [item.id for item in items]
        if len(ids) != len(set(ids)):
            raise ValueError(f"duplicate id in {info.field_name}")
        return items

    @field_validator("budget")
    @classmethod
    def _unique_categories(cls, items):
        categories = [item.category for item in items]
        if len(categories) != len(set(categories)):
            raise ValueError("duplicate budget category")
        return items

    @classmethod
    def from_domain(cls, f: FinancialState) -> "FinancesRecord":
        return cls(
            cash=f.cash,
            accounts=[AccountRecord.from_domain(a) for a in f.accounts],
            assets=[AssetRecord.from_domain(a) for a in f.assets],
            income_sources=[IncomeRecord.from_domain(i) for i in f.income_sources],
            expenses=[ExpenseRecord.from_domain(e) for e in f.expenses],
            budget=[
                BudgetRecord(category=b.category, allocated=b.allocated, spent=b.spent)
                for b in f.budget_allocations()
            ],
            liabilities=f.liabilities,
        )

    def to_domain(self) -> FinancialState:
        return FinancialState(
            cash=self.cash,
            accounts=[a.to_domain() for a in self.accounts],
            assets=[a.to_domain() for a in self.assets],
            income_sources=[i.to_domain() for i in self.income_sources],
            expenses=[e.to_domain() for e in self.expenses],
            budget={
                b.category: BudgetAllocation(b.category, b.allocated, b.spent)
                for b in self.budget
            },
            liabilities=self.liabilities,
        )


# ============================================================================
# Career, housing, player
# ============================================================================


class JobRecord(_Record):
    id: str
    title: str
    field: JobFieldRecord
    level: JobLevel
    monthly_salary: NonNegativeMoney
    company: str | None = None

    @classmethod
    def from_domain(cls, j: Job) -> "JobRecord":
        return cls(
            id=j.id,
            title=j.title,
            field=_job_field_record(j.field),
            level=j.level,
            monthly_salary=j.monthly_salary,
            company=j.company,
        )

    def to_domain(self) -> Job:
        return Job(
            id=self.id,
            title=self.title,
            field=self.field.to_domain(),
            level=self.level,
            monthly_salary=self.monthly_salary,
            company=self.company,
        )


class CareerRecord(_Record):
    current_job: JobRecord | None
    years_experience: Count
    months_in_current_job: Count
    job_history: list[JobRecord]

    @model_validator(mode="after")
    def _unemployed_has_no_tenure(self):
        if self.current_job is None and self.months_in_current_job:
            raise ValueError("months_in_current_job must be 0 without a current job")
        return self

    @classmethod
    def from_domain(cls, c: Career) -> "CareerRecord":
        return cls(
            current_job=None if c.current_job is None else JobRecord.from_domain(c.current_job),
            years_experience=c.years_experience,
            months_in_current_job=c.months_in_current_job,
            job_history=[JobRecord.from_domain(j) for j in c.job_history],
        )

    def to_domain(self) -> Career:
        return Career(
            current_job=None if self.current_job is None else self.current_job.to_domain(),
            years_experience=self.years_experience,
            months_in_current_job=self.months_in_current_job,
            job_history=[j.to_domain() for j in self.job_history],
        )


class HousingRecord(_Record):
    id: str
    housing_type: HousingType
    location: LocationQuality
    address: str
    monthly_rent: NonNegativeMoney
    monthly_utilities: NonNegativeMoney

    @classmethod
    def from_domain(cls, h: Housing) -> "HousingRecord":
        return cls(
            id=h.id,
            housing_type=h.housing_type,
            location=h.location,
            address=h.address,
            monthly_rent=h.monthly_rent,
            monthly_utilities=h.monthly_utilities,
        )

    def to_domain(self) -> Housing:
        return Housing(
            id=self.id,
            housing_type=self.housing_type,
            location=self.location,
            address=self.address,
            monthly_rent=self.monthly_rent,
            monthly_utilities=self.monthly_utilities,
        )


class PlayerRecord(_Record):
    age: int = Field(ge=MIN_PLAYER_AGE)  # ages past the start range are allowed
    name: str | None = None
    happiness: Stat
    burnout: Stat
    frugality_enabled: bool
    human_capital_invested: NonNegativeMoney

    @classmethod
    def from_domain(cls, p: PlayerStats) -> "PlayerRecord":
        return cls(
            age=p.age,
            name=p.name,
            happiness=p.happiness,
            burnout=p.burnout,
            frugality_enabled=p.frugality_enabled,
            human_capital_invested=p.human_capital_invested,
        )

    def to_domain(self) -> PlayerStats:
        return PlayerStats(
            age=self.age,
            name=self.name,
            happiness=self.happiness,
            burnout=self.burnout,
            frugality_enabled=self.frugality_enabled,
            human_capital_invested=self.human_capital_invested,
        )


# ============================================================================
# Settlement and game state
# ============================================================================


class TaxRecord(_Record):
    income_tax: Money
    social_insurance: Money
    health_insurance: Money


class SettlementRecord(_Record):
    gross_income: Money
    tax: TaxRecord | None
    total_expenses: Money

    @classmethod
    def from_domain(cls, s: Settlement) -> "SettlementRecord":
        tax = None
        if s.tax is not None:
            tax = TaxRecord(
                income_tax=s.tax.income_tax,
                social_insurance=s.tax.social_insurance,
                health_insurance=s.tax.health_insurance,
            )
        return cls(gross_income=s.gross_income, tax=tax, total_expenses=s.total_expenses)

    def to_domain(self) -> Settlement:
        tax = None
        if self.tax is not None:
            tax = TaxBreakdown(
                income_tax=self.tax.income_tax,
                social_insurance=self.tax.social_insurance,
                health_insurance=self.tax.health_insurance,
            )
        return Settlement(gross_income=self.gross_income, tax=tax, total_expenses=self.total_expenses)


class TimeRecord(_Record):
    year: int
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=DAYS_PER_MONTH)


class SaveRecord(_Record):
    """Top-level save file."""

    format_version: Literal[1]
    save_id: str
    market_id: str
    time: TimeRecord
    start_year: int
    phase: PhaseRecord
    player: PlayerRecord
    career: CareerRecord
    housing: HousingRecord | None
    months_at_housing: Count
    finances: FinancesRecord
    last_settlement: SettlementRecord | None

    @field_validator("market_id")
    @classmethod
    def _registered_market(cls, market_id: str) -> str:
        if market_id not in MARKETS:
            raise ValueError(f"unsupported market: {market_id!r}")
        return market_id

    @model_validator(mode="after")
    def _consistent(self):
        if self.time.year < self.start_year:
            raise ValueError("calendar year precedes start_year")
        if isinstance(self.phase, ExecutionRecord) and self.phase.current_day != self.time.day:
            raise ValueError(
                f"execution day {self.phase.current_day} does not match calendar day {self.time.day}"
            )
        if isinstance(self.phase, PlanningRecord) and self.time.day != 1:
            raise ValueError("planning phase must fall on day 1")
        if self.housing is None and self.months_at_housing:
            raise ValueError("months_at_housing must be 0 without housing")
        return self

    @classmethod
    def from_domain(cls, state: GameState) -> "SaveRecord":
        return cls(
            format_version=FORMAT_VERSION,
            save_id=state.save_id,
            market_id=state.market_id,
            time=TimeRecord(
                year=state.time.year,
                month=state.time.month.value,
                day=state.time.day,
            ),
            start_year=state.start_year,
            phase=_phase_record(state.phase),
            player=PlayerRecord.from_domain(state.player),
            career=CareerRecord.from_domain(state.career),
            housing=None if state.housing is None else HousingRecord.from_domain(state.housing),
            months_at_housing=state.months_at_housing,
            finances=FinancesRecord.from_domain(state.finances),
            last_settlement=(
                None if state.last_settlement is None
                else SettlementRecord.from_domain(state.last_settlement)
            ),
        )

    def to_domain(self) -> GameState:
        return GameState(
            save_id=self.save_id,
            market_id=self.market_id,
            time=GameTime(Month(self.time.month), self.time.year, self.time.day),
            start_year=self.start_year,
            phase=self.phase.to_domain(),
            player=self.player.to_domain(),
            career=self.career.to_domain(),
            housing=None if self.housing is None else self.housing.to_domain(),
            months_at_housing=self.months_at_housing,
            finances=self.finances.to_domain(),
            last_settlement=None if self.last_settlement is None else self.last_settlement.to_domain(),
        )


# ============================================================================
# Public API
# ============================================================================


def _encode(state: GameState) -> SaveRecord:
    try:
        return SaveRecord.from_domain(state)
    except pydantic.ValidationError as e:
        raise PersistenceError(f"Cannot encode game state: {e}") from e


def _restore(record: SaveRecord) -> GameState:
    try:
        return record.to_domain()
    except ValidationError as e:
        raise PersistenceError(f"Malformed save data: {e}") from e


def to_dict(state: GameState) -> dict:
    return _encode(state).model_dump(mode="json")


def from_dict(data: dict) -> GameState:
    try:
        record = SaveRecord.model_validate(data)
    except pydantic.ValidationError as e:
        raise PersistenceError(f"Malformed save data: {e}") from e
    return _restore(record)


def dumps(state: GameState) -> str:
    return _encode(state).model_dump_json(indent=2)


def loads(text: str | bytes) -> GameState:
    try:
        record = SaveRecord.model_validate_json(text)
    except pydantic.ValidationError as e:
        raise PersistenceError(f"Malformed save data: {e}") from e
    except RecursionError as e:
        raise PersistenceError("Save data is nested too deeply") from e
    return _restore(record)


def save_game(state: GameState, path: Path) -> Path:
    path = Path(path)
    text = dumps(state)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def load_game(path: Path) -> GameState:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PersistenceError(f"Cannot read save file {path}: {e}") from e
    return loads(text)
