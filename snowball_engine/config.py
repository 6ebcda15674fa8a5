"""TOML config loader with CLI > config > default resolution."""

import argparse
import sys
import tomllib
from pathlib import Path

DEFAULT_CONFIG_PATH = Path("snowball.toml")

DEFAULTS = {
    "market": "czech",
    "age": 25,
    "name": "",
    "start_year": 0,   # 0 = current calendar year
    "job": "",         # starting job offer id ("" = unemployed)
    "housing": "",     # housing offer id to move into before month 1
    "months": 12,
    "save": "",
    "load": "",
    "chart": "",
}


def load_config(path: Path | None = None) -> dict:
    """Load TOML config file. Returns empty dict if file doesn't exist."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        print(f"Failed to read config file {path}: {e}", file=sys.stderr)
        raise SystemExit(1)
    # [game] table is accepted as an alias for top-level keys
    if isinstance(raw.get("game"), dict):
        game = raw.pop("game")
        for key, value in game.items():
            raw.setdefault(key, value)
    unknown = sorted(set(raw) - set(DEFAULTS))
    if unknown:
        print(f"Ignoring unknown config keys in {path}: {', '.join(unknown)}", file=sys.stderr)
        for key in unknown:
            raw.pop(key)
    return raw


def create_parser(description: str) -> argparse.ArgumentParser:
    """Create argparse parser with shared game flags."""
    d = DEFAULTS
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", type=Path, default=None, help="Config file path (default: snowball.toml)")
    parser.add_argument("--market", type=str, default=None, help=f"Market id (default: {d['market']})")
    parser.add_argument("--age", type=int, default=None, help=f"Player starting age (default: {d['age']})")
    parser.add_argument("--name", type=str, default=None, help="Player name")
    parser.add_argument("--start-year", type=int, default=None, help="First in-game year (default: current year)")
    parser.add_argument("--job", type=str, default=None, help="Starting job offer id, e.g. cz_tech_entry")
    parser.add_argument("--housing", type=str, default=None, help="Housing offer id to move into, e.g. cz_studio_avg_1")
    parser.add_argument("--months", type=int, default=None, help=f"Months to play (default: {d['months']})")
    parser.add_argument("--save", type=str, default=None, help="Write the final game state to this JSON file")
    parser.add_argument("--load", type=str, default=None, help="Continue from a saved JSON game instead of starting a new one")
    parser.add_argument("--chart", type=str, default=None, help="Write a net worth chart (PNG) to this path")
    return parser


def resolve(args: argparse.Namespace, config: dict) -> dict:
    """Resolve values with priority: CLI flag > config file > hardcoded default."""
    resolved = {}
    for key, default in DEFAULTS.items():
        cli_val = getattr(args, key, None)
        resolved[key] = cli_val if cli_val is not None else config.get(key, default)
    return resolved


def parse_args(description: str, argv: list[str] | None = None) -> dict:
    """Parse CLI args, load config, resolve values."""
    parser = create_parser(description)
    args = parser.parse_args(argv)
    config = load_config(args.config)
    return resolve(args, config)
