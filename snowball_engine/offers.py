"""Housing and job offer catalogs.

Both generators are pure: every call builds fresh objects, so callers may
mutate what they get back without affecting later calls.
"""

from decimal import Decimal

from snowball_engine.career import Career, CareerField, Job, JobLevel, OtherField
from snowball_engine.housing import Housing, HousingType, LocationQuality
from snowball_engine.markets import MARKETS
from snowball_engine.errors import UnsupportedMarketError, ValidationError

# Experience (years) at which each level's jobs start appearing on the market
JOB_LEVEL_UNLOCK_YEARS: tuple[tuple[JobLevel, int], ...] = (
    (JobLevel.ENTRY, 0),
    (JobLevel.JUNIOR, 1),
    (JobLevel.MID, 3),
    (JobLevel.SENIOR, 6),
    (JobLevel.LEAD, 9),
)
HIDE_ENTRY_AFTER_YEARS = 2


def _check_market(market_id: str) -> None:
    if market_id not in MARKETS:
        raise UnsupportedMarketError(f"Unsupported market: {market_id!r}")


# (id, type, location, address, rent, utilities)
_CZECH_HOUSING = (
    ("cz_shared_poor_1", HousingType.SHARED, LocationQuality.POOR, "Shared room, Černý Most", "4000", "1000"),
    ("cz_studio_poor_1", HousingType.STUDIO, LocationQuality.POOR, "Small studio, Hostivař", "7000", "2000"),
    ("cz_shared_avg_1", HousingType.SHARED, LocationQuality.AVERAGE, "Shared apartment, Háje", "6000", "1200"),
    ("cz_studio_avg_1", HousingType.STUDIO, LocationQuality.AVERAGE, "Studio, Chodov", "10000", "2500"),
    ("cz_1bed_avg_1", HousingType.ONE_BEDROOM, LocationQuality.AVERAGE, "1+kk, Nové Butovice", "13000", "3000"),
    ("cz_1bed_good_1", HousingType.ONE_BEDROOM, LocationQuality.GOOD, "1+1, Karlín", "18000", "3500"),
    ("cz_2bed_good_1", HousingType.TWO_BEDROOM, LocationQuality.GOOD, "2+kk, Smíchov", "22000", "4000"),
    ("cz_2bed_prem_1", HousingType.TWO_BEDROOM, LocationQuality.PREMIUM, "2+1, Vinohrady", "28000", "4500"),
    ("cz_3bed_prem_1", HousingType.THREE_BEDROOM, LocationQuality.PREMIUM, "3+1, Nové Město", "35000", "5000"),
    ("cz_house_prem_1", HousingType.HOUSE, LocationQuality.PREMIUM, "House, Dejvice", "50000", "7000"),
)

# (id, title, field, level, salary, company)
_CZECH_JOBS = (
    ("cz_retail_entry", "Sales Associate", CareerField.RETAIL, JobLevel.ENTRY, "25000", "Local Store"),
    ("cz_admin_entry", "Administrative Assistant", OtherField("Administration"), JobLevel.ENTRY, "28000", "Office Corp"),
    ("cz_tech_entry", "Junior IT Support", CareerField.TECHNOLOGY, JobLevel.ENTRY, "32000", "Tech Solutions s.r.o."),
    ("cz_dev_junior", "Junior Software Developer", CareerField.TECHNOLOGY, JobLevel.JUNIOR, "45000", "CodeCraft Prague"),
    ("cz_accountant_junior", "Junior Accountant", CareerField.FINANCE, JobLevel.JUNIOR, "38000", "Finance Group"),
    ("cz_teacher_junior", "Elementary School Teacher", CareerField.EDUCATION, JobLevel.JUNIOR, "35000", "Praha Elementary"),
    ("cz_dev_mid", "Software Developer", CareerField.TECHNOLOGY, JobLevel.MID, "65000", "TechCorp Prague"),
    ("cz_accountant_mid", "Accountant", CareerField.FINANCE, JobLevel.MID, "52000", "KPMG Czech"),
    ("cz_manager_mid", "Team Manager", CareerField.MANUFACTURING, JobLevel.MID, "58000", "Škoda Auto"),
    ("cz_nurse_mid", "Registered Nurse", CareerField.HEALTHCARE, JobLevel.MID, "48000", "Motol Hospital"),
    ("cz_dev_senior", "Senior Software Engineer", CareerField.TECHNOLOGY, JobLevel.SENIOR, "90000", "Avast Software"),
    ("cz_accountant_senior", "Senior Financial Analyst", CareerField.FINANCE, JobLevel.SENIOR, "75000", "Česká spořitelna"),
    ("cz_doctor_senior", "Specialist Physician", CareerField.HEALTHCARE, JobLevel.SENIOR, "85000", "General Hospital Prague"),
    ("cz_arch_lead", "Lead Software Architect", CareerField.TECHNOLOGY, JobLevel.LEAD, "120000", "O2 Czech Republic"),
    ("cz_cfo_lead", "Finance Director", CareerField.FINANCE, JobLevel.LEAD, "110000", "Česká pojišťovna"),
    ("cz_director_lead", "Operations Director", CareerField.MANUFACTURING, JobLevel.LEAD, "100000", "ČEZ Group"),
)

_HOUSING_CATALOGS = {"czech": _CZECH_HOUSING}
_JOB_CATALOGS = {"czech": _CZECH_JOBS}


def housing_offers(market_id: str) -> list[Housing]:
    """All housing options for a market, cheapest areas first."""
    _check_market(market_id)
    return [
        Housing(
            id=hid,
            housing_type=htype,
            location=location,
            address=address,
            monthly_rent=Decimal(rent),
            monthly_utilities=Decimal(utilities),
        )
        for hid, htype, location, address, rent, utilities in _HOUSING_CATALOGS.get(market_id, ())
    ]


def job_offers(market_id: str, career: Career) -> list[Job]:
    """Jobs open to the player: their level and one stretch level above."""
    _check_market(market_id)
    experience = career.years_experience
    max_level = career.max_qualified_level()
    unlocked = {level for level, years in JOB_LEVEL_UNLOCK_YEARS if experience >= years}
    min_level = JobLevel.JUNIOR if experience >= HIDE_ENTRY_AFTER_YEARS else JobLevel.ENTRY

    return [
        Job(
            id=jid,
            title=title,
            field=job_field,
            level=level,
            monthly_salary=Decimal(salary),
            company=company,
        )
        for jid, title, job_field, level, salary, company in _JOB_CATALOGS.get(market_id, ())
        if level in unlocked and min_level <= level <= max_level + 1
    ]


def find_offer(offers: list, offer_id: str):
    for offer in offers:
        if offer.id == offer_id:
            return offer
    raise ValidationError(f"Unknown offer: {offer_id!r}")
