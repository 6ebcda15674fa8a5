"""Tests for JSON save/load."""

import json
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from snowball_engine import (
    Account,
    Asset,
    AssetCategory,
    Career,
    CzechMarket,
    EmergencyFund,
    Execution,
    Expense,
    ExpenseCategory,
    Income,
    IncomeKind,
    PersistenceError,
    Retirement,
    SinkingFund,
    Taxable,
    dumps,
    from_dict,
    housing_offers,
    job_offers,
    load_game,
    loads,
    new_game,
    save_game,
    to_dict,
)
from snowball_engine.offers import find_offer

OPENED = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


def _rich_state():
    """A state touching every persisted variant."""
    market = CzechMarket()
    tech = find_offer(job_offers("czech", Career()), "cz_tech_entry")
    admin = find_offer(job_offers("czech", Career()), "cz_admin_entry")
    state = new_game("czech", 31, admin, player_name="Jana", start_year=2024, save_id="rich")
    state = state.accept_job(tech)
    state = state.change_housing(find_offer(housing_offers("czech"), "cz_shared_poor_1"))
    state = state.add_income(Income("div", "Dividends", IncomeKind.PASSIVE, Decimal("120.55")))
    state = state.add_expense(Expense("gym", "Gym", ExpenseCategory.HEALTH, Decimal("990.10"), active=False))
    state = state.set_budget(ExpenseCategory.LIFESTYLE, Decimal("2000"))
    state = state.record_spending(ExpenseCategory.LIFESTYLE, Decimal("450.25"))
    for i, kind in enumerate([Retirement("dip"), Taxable(), EmergencyFund(), SinkingFund("car")]):
        state = state.open_account(Account(f"a{i}", f"Account {i}", kind, opened_at=OPENED))
    state = state.transfer_to_account("a2", Decimal("1000.01"))
    state.finances.add_asset(
        Asset("car", "Car", AssetCategory.VEHICLE, Decimal("150000"), acquired_at=OPENED)
    )
    state = state.set_frugality(True)
    # settle one month, then stop mid-execution of the next
    state = state.advance_phase()
    for _ in range(30):
        state = state.advance_execution_day(market)
    state = state.advance_phase().advance_phase()
    for _ in range(11):
        state = state.advance_execution_day(market)
    return state


class TestRoundTrip:
    def test_round_trip_equality(self):
        state = _rich_state()
        assert state.phase == Execution(current_day=12)
        assert loads(dumps(state)) == state

    def test_new_game_round_trip(self):
        state = new_game("uk", 40, start_year=2030, save_id="fresh")
        assert loads(dumps(state)) == state

    def test_amounts_are_exact_strings(self):
        data = to_dict(_rich_state())
        assert data["format_version"] == 1
        assert isinstance(data["finances"]["cash"], str)
        restored = from_dict(data)
        assert restored.finances.find_account("a2").balance == Decimal("1000.01")

    def test_unknown_account_kind_not_encoded(self):
        state = new_game("czech", 30, start_year=2024, save_id="odd")
        state.finances.accounts.append(Account("x", "Crypto wallet", "Crypto"))
        with pytest.raises(PersistenceError, match="account kind"):
            dumps(state)

    def test_save_and_load_file(self, tmp_path):
        state = _rich_state()
        path = save_game(state, tmp_path / "saves" / "slot1.json")
        assert path.exists()
        assert load_game(path) == state


class TestMalformed:
    def setup_method(self):
        self.data = to_dict(_rich_state())

    def test_not_json(self):
        with pytest.raises(PersistenceError):
            loads("{not json")

    def test_not_an_object(self):
        with pytest.raises(PersistenceError):
            loads("[1, 2, 3]")

    def test_missing_key(self):
        del self.data["player"]
        with pytest.raises(PersistenceError):
            from_dict(self.data)

    def test_bad_decimal(self):
        self.data["finances"]["cash"] = "lots"
        with pytest.raises(PersistenceError):
            from_dict(self.data)

    @pytest.mark.parametrize("amount", ["NaN", "Infinity"])
    def test_non_finite_amount_rejected(self, amount):
        self.data["finances"]["cash"] = amount
        with pytest.raises(PersistenceError):
            from_dict(self.data)

    @pytest.mark.parametrize("section,key,value", [
        ("player", "age", -5),
        ("player", "happiness", 101),
        ("career", "years_experience", -1),
        ("career", "months_in_current_job", -3),
        (None, "months_at_housing", -1),
    ])
    def test_out_of_range_counters(self, section, key, value):
        target = self.data if section is None else self.data[section]
        target[key] = value
        with pytest.raises(PersistenceError):
            from_dict(self.data)

    def test_execution_day_must_match_calendar(self):
        self.data["time"]["day"] = 1
        with pytest.raises(PersistenceError, match="does not match"):
            from_dict(self.data)

    def test_planning_must_be_day_one(self):
        self.data["phase"] = {"type": "Planning"}
        with pytest.raises(PersistenceError):
            from_dict(self.data)

    def test_tenure_without_housing(self):
        fresh = to_dict(new_game("czech", 30, start_year=2024, save_id="x"))
        fresh["months_at_housing"] = 4
        with pytest.raises(PersistenceError):
            from_dict(fresh)

    def test_duplicate_account_ids(self):
        accounts = self.data["finances"]["accounts"]
        accounts.append(dict(accounts[0]))
        with pytest.raises(PersistenceError, match="duplicate"):
            from_dict(self.data)

    def test_naive_timestamp_rejected(self):
        self.data["finances"]["accounts"][0]["opened_at"] = "2024-01-15T09:30:00"
        with pytest.raises(PersistenceError):
            from_dict(self.data)

    def test_unregistered_market(self):
        self.data["market_id"] = "mars"
        with pytest.raises(PersistenceError):
            from_dict(self.data)

    def test_deeply_nested_json(self):
        with pytest.raises(PersistenceError):
            loads("[" * 100000 + "]" * 100000)

    def test_file_not_utf8(self, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(PersistenceError):
            load_game(path)

    def test_unknown_phase(self):
        self.data["phase"] = {"type": "Vacation"}
        with pytest.raises(PersistenceError):
            from_dict(self.data)

    def test_execution_day_out_of_range(self):
        self.data["phase"] = {"type": "Execution", "current_day": 31}
        with pytest.raises(PersistenceError):
            from_dict(self.data)

    def test_invalid_month(self):
        self.data["time"]["month"] = 13
        with pytest.raises(PersistenceError):
            from_dict(self.data)

    def test_unknown_account_kind(self):
        self.data["finances"]["accounts"][0]["kind"] = {"type": "Crypto"}
        with pytest.raises(PersistenceError):
            from_dict(self.data)

    def test_wrong_format_version(self):
        self.data["format_version"] = 99
        with pytest.raises(PersistenceError, match="version"):
            from_dict(self.data)

    def test_missing_file(self, tmp_path):
        with pytest.raises(PersistenceError):
            load_game(tmp_path / "nope.json")

    def test_truncated_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text(json.dumps(self.data)[:200], encoding="utf-8")
        with pytest.raises(PersistenceError):
            load_game(path)
