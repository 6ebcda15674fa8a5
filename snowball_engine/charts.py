"""Chart generation for autoplay histories."""

from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

from snowball_engine.autoplay import MonthRecord

NET_WORTH_COLOR = "#1f77b4"   # blue
CASH_COLOR = "#ff7f0e"        # orange
CASH_FLOW_POSITIVE = "#2ca02c"
CASH_FLOW_NEGATIVE = "#d62728"


def _month_labels(history: list[MonthRecord]) -> list[str]:
    return [f"{r.year}-{r.month:02d}" for r in history]


def plot_net_worth(
    history: list[MonthRecord], output_path: Path, currency_symbol: str = "",
    title: str = "Net worth by month",
) -> Path:
    """Line chart of net worth and cash, with monthly cash flow bars below.

    Args:
        history: records returned by autoplay.play_months().
        output_path: PNG file to write (parent directories are created).
        currency_symbol: appended to the Y axis labels.

    Returns:
        Path to the generated PNG file.
    """
    if not history:
        raise ValueError("Cannot plot an empty history")
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    labels = _month_labels(history)
    xs = list(range(len(history)))
    net_worth = [float(r.net_worth) for r in history]
    cash = [float(r.cash) for r in history]
    flows = [float(r.settlement.net_cash_flow) for r in history]

    fig, (ax, ax_flow) = plt.subplots(
        2, 1, figsize=(12, 8), sharex=True, gridspec_kw={"height_ratios": [3, 1]},
    )

    ax.plot(xs, net_worth, label="Net worth", color=NET_WORTH_COLOR, linewidth=2)
    ax.plot(xs, cash, label="Cash", color=CASH_COLOR, linewidth=1.5, linestyle="--")
    ax.set_ylabel(f"Amount ({currency_symbol})" if currency_symbol else "Amount")
    ax.set_title(title)
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)
    ax.yaxis.set_major_formatter(ticker.FuncFormatter(lambda x, _: f"{x:,.0f}"))

    colors = [CASH_FLOW_POSITIVE if f >= 0 else CASH_FLOW_NEGATIVE for f in flows]
    ax_flow.bar(xs, flows, color=colors)
    ax_flow.axhline(0, color="black", linewidth=0.8)
    ax_flow.set_ylabel("Net cash flow")
    ax_flow.grid(True, axis="y", alpha=0.3)
    ax_flow.yaxis.set_major_formatter(ticker.FuncFormatter(lambda x, _: f"{x:,.0f}"))

    # Label at most ~12 ticks so long runs stay readable
    step = max(1, len(xs) // 12)
    ax_flow.set_xticks(xs[::step])
    ax_flow.set_xticklabels(labels[::step], rotation=45, ha="right")

    fig.tight_layout()
    fig.savefig(output_path, dpi=120)
    plt.close(fig)
    return output_path
