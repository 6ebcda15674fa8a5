"""Snowball personal finance simulation engine."""

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
from snowball_engine.career import Career, CareerField, Job, JobLevel, OtherField
from snowball_engine.errors import (
    SnowballError,
    ValidationError,
    InsufficientFundsError,
    InvalidPhaseError,
    UnsupportedMarketError,
    MarketNotImplementedError,
    PersistenceError,
)
from snowball_engine.expenses import BudgetAllocation, Expense, ExpenseCategory
from snowball_engine.financial_state import FinancialState
from snowball_engine.game_state import GameState, new_game
from snowball_engine.gametime import GameTime, Month
from snowball_engine.housing import Housing, HousingType, LocationQuality, MOVING_FEE
from snowball_engine.income import Income, IncomeKind
from snowball_engine.market import AccountType, Currency, MarketProfile, TaxBreakdown
from snowball_engine.markets import CzechMarket, UkMarket, UsaMarket, MARKETS, resolve_market
from snowball_engine.offers import housing_offers, job_offers
from snowball_engine.persistence import dumps, loads, to_dict, from_dict, save_game, load_game
from snowball_engine.phase import Execution, GamePhase, Planning, Review
from snowball_engine.player import PlayerStats
from snowball_engine.settlement import Settlement, compute_settlement

__all__ = [
    "Account",
    "AccountKind",
    "Asset",
    "AssetCategory",
    "EmergencyFund",
    "Retirement",
    "SinkingFund",
    "Taxable",
    "Career",
    "CareerField",
    "Job",
    "JobLevel",
    "OtherField",
    "SnowballError",
    "ValidationError",
    "InsufficientFundsError",
    "InvalidPhaseError",
    "UnsupportedMarketError",
    "MarketNotImplementedError",
    "PersistenceError",
    "BudgetAllocation",
    "Expense",
    "ExpenseCategory",
    "FinancialState",
    "GameState",
    "new_game",
    "GameTime",
    "Month",
    "Housing",
    "HousingType",
    "LocationQuality",
    "MOVING_FEE",
    "Income",
    "IncomeKind",
    "AccountType",
    "Currency",
    "MarketProfile",
    "TaxBreakdown",
    "CzechMarket",
    "UkMarket",
    "UsaMarket",
    "MARKETS",
    "resolve_market",
    "housing_offers",
    "job_offers",
    "dumps",
    "loads",
    "to_dict",
    "from_dict",
    "save_game",
    "load_game",
    "Execution",
    "GamePhase",
    "Planning",
    "Review",
    "PlayerStats",
    "Settlement",
    "compute_settlement",
]
