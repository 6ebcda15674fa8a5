"""Tests for chart generation."""

import pytest
from snowball_engine import Career, CzechMarket, job_offers, new_game
from snowball_engine.autoplay import play_months
from snowball_engine.charts import plot_net_worth


class TestPlotNetWorth:
    def test_writes_png(self, tmp_path):
        job = job_offers("czech", Career())[0]
        state = new_game("czech", 25, job, start_year=2024, save_id="chart")
        _, history = play_months(state, CzechMarket(), 14)
        path = plot_net_worth(history, tmp_path / "out" / "net_worth.png", currency_symbol="Kč")
        assert path.exists()
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_empty_history(self, tmp_path):
        with pytest.raises(ValueError):
            plot_net_worth([], tmp_path / "empty.png")
