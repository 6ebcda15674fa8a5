"""Tests for housing and job offer catalogs."""

from decimal import Decimal

import pytest
from snowball_engine import (
    Career,
    JobLevel,
    UnsupportedMarketError,
    ValidationError,
    housing_offers,
    job_offers,
)
from snowball_engine.offers import find_offer


def _career(years: int) -> Career:
    return Career(years_experience=years)


class TestHousingOffers:
    def test_czech_catalog(self):
        offers = housing_offers("czech")
        assert len(offers) == 10
        studio = find_offer(offers, "cz_studio_avg_1")
        assert studio.total_monthly_cost() == Decimal("12500")
        assert studio.moving_cost() == Decimal("21500")

    def test_unique_ids(self):
        ids = [h.id for h in housing_offers("czech")]
        assert len(ids) == len(set(ids))

    @pytest.mark.parametrize("market", ["usa", "uk"])
    def test_markets_without_catalog(self, market):
        assert housing_offers(market) == []

    def test_unknown_market(self):
        with pytest.raises(UnsupportedMarketError):
            housing_offers("mars")

    def test_fresh_objects_each_call(self):
        first = housing_offers("czech")
        first[0].monthly_rent = Decimal("1")
        assert housing_offers("czech")[0].monthly_rent == Decimal("4000")


class TestJobOffers:
    def _levels(self, years):
        return {j.level for j in job_offers("czech", _career(years))}

    def test_new_player_sees_entry_only(self):
        offers = job_offers("czech", Career())
        assert {j.level for j in offers} == {JobLevel.ENTRY}
        assert len(offers) == 3

    def test_one_year_unlocks_junior_stretch(self):
        assert self._levels(1) == {JobLevel.ENTRY, JobLevel.JUNIOR}

    def test_five_years_hides_entry(self):
        assert self._levels(5) == {JobLevel.JUNIOR, JobLevel.MID}

    def test_eight_years_stretch_to_senior(self):
        # Lead would be a stretch level but is not unlocked until year 9
        assert self._levels(8) == {JobLevel.JUNIOR, JobLevel.MID, JobLevel.SENIOR}

    def test_veteran_sees_lead(self):
        assert self._levels(12) == {JobLevel.JUNIOR, JobLevel.MID, JobLevel.SENIOR, JobLevel.LEAD}

    def test_repeatable(self):
        assert job_offers("czech", _career(5)) == job_offers("czech", _career(5))

    def test_usa_has_no_jobs_yet(self):
        assert job_offers("usa", Career()) == []

    def test_unknown_market(self):
        with pytest.raises(UnsupportedMarketError):
            job_offers("atlantis", Career())


class TestFindOffer:
    def test_unknown_id(self):
        with pytest.raises(ValidationError, match="Unknown offer"):
            find_offer(job_offers("czech", Career()), "cz_cfo_lead")
