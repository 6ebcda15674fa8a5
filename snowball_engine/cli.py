"""CLI entry point: play a game headlessly and print the monthly ledger."""

import sys
from decimal import Decimal
from pathlib import Path

from snowball_engine.autoplay import MonthRecord, play_month
from snowball_engine.career import Career
from snowball_engine.config import parse_args
from snowball_engine.errors import InvalidPhaseError, SnowballError
from snowball_engine.game_state import GameState, new_game
from snowball_engine.market import MarketProfile
from snowball_engine.markets import resolve_market
from snowball_engine.offers import find_offer, housing_offers, job_offers
from snowball_engine.persistence import load_game, save_game
from snowball_engine.phase import Planning


def _money(value: Decimal) -> str:
    return f"{value:>12,.0f}"


def _start_state(r: dict) -> GameState:
    if r["load"]:
        state = load_game(Path(r["load"]))
        print(f"Loaded {state.save_id} ({state.time.label()})", file=sys.stderr)
        if not isinstance(state.phase, Planning):
            raise InvalidPhaseError(
                f"Saved game is in {state.phase.name}; autoplay resumes from Planning only"
            )
        return state

    market_id = r["market"]
    starting_job = None
    if r["job"]:
        starting_job = find_offer(job_offers(market_id, Career()), r["job"])
    state = new_game(
        market_id,
        r["age"],
        starting_job,
        player_name=r["name"] or None,
        start_year=r["start_year"] or None,
    )
    if r["housing"]:
        housing = find_offer(housing_offers(market_id), r["housing"])
        state = state.change_housing(housing)
        print(f"  Moved to {housing.address} (moving cost {housing.moving_cost():,.0f})", file=sys.stderr)
    return state


def _print_header(state: GameState, market: MarketProfile):
    player = state.player
    job = state.career.current_job
    symbol = market.currency().symbol
    print("=" * 96)
    print(f"Snowball: {market.market_name()} ({symbol}) / save {state.save_id}")
    who = player.name or "Player"
    print(f"  {who}, age {player.age} / start {state.time.label()}")
    print(f"  Job: {job.title + ' @ ' + (job.company or '-') if job else 'unemployed'}")
    if state.housing is not None:
        print(f"  Housing: {state.housing.address} ({state.housing.total_monthly_cost():,.0f}/month)")
    print(f"  Cash: {state.finances.cash:,.2f}")
    print("=" * 96)


def _print_ledger(history: list[MonthRecord]):
    print(
        f"{'Month':<9} {'Gross':>12} {'Tax':>12} {'Expenses':>12} "
        f"{'Cash flow':>12} {'Cash':>12} {'Net worth':>12} {'FIRE %':>7}"
    )
    print("-" * 96)
    for r in history:
        s = r.settlement
        print(
            f"{r.year}-{r.month:02d}  {_money(s.gross_income)} {_money(s.total_tax)} "
            f"{_money(s.total_expenses)} {_money(s.net_cash_flow)} {_money(r.cash)} "
            f"{_money(r.net_worth)} {r.fire_progress:>6.1f}%"
        )
    print("-" * 96)


def _print_summary(state: GameState):
    f = state.finances
    player = state.player
    print(f"Now: {state.time.label()} / age {player.age} / experience {state.career.years_experience}y")
    print(f"  Net worth: {f.net_worth():,.2f} / FIRE number: {f.fire_number():,.0f}"
          f" ({'reached' if f.is_fire() else 'not reached'})")
    print(f"  Emergency fund (3 months): {'ok' if f.has_emergency_fund() else 'missing'}")
    print(f"  Financial peace score: {player.financial_peace_score()}"
          f"{' / revenge spending risk' if player.is_revenge_spending_risk() else ''}")


def run(r: dict) -> GameState:
    state = _start_state(r)
    market = resolve_market(state.market_id)
    _print_header(state, market)

    months = r["months"]
    history: list[MonthRecord] = []
    for i in range(months):
        print(f"\r  Playing month {i + 1}/{months}...", end="", file=sys.stderr, flush=True)
        state, record = play_month(state, market)
        history.append(record)
    print(file=sys.stderr)

    if history:
        _print_ledger(history)
    _print_summary(state)

    if r["save"]:
        path = save_game(state, Path(r["save"]))
        print(f"  → {path}", file=sys.stderr)
    if r["chart"] and history:
        from snowball_engine.charts import plot_net_worth

        path = plot_net_worth(history, Path(r["chart"]), currency_symbol=market.currency().symbol)
        print(f"  → {path}", file=sys.stderr)
    return state


def main(argv: list[str] | None = None):
    r = parse_args("Snowball personal finance simulation (headless)", argv)
    try:
        run(r)
    except SnowballError as e:
        print(f"\nError: {e}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
