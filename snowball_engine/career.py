"""Jobs, seniority levels and career progression."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum, IntEnum


class JobLevel(IntEnum):
    """Seniority, ordered Entry < Junior < Mid < Senior < Lead."""

    ENTRY = 0
    JUNIOR = 1
    MID = 2
    SENIOR = 3
    LEAD = 4

    @property
    def min_experience(self) -> int:
        """Minimum years of experience required for this level."""
        return _MIN_EXPERIENCE[self]

    @property
    def label(self) -> str:
        return _LEVEL_LABELS[self]


_MIN_EXPERIENCE = {
    JobLevel.ENTRY: 0,
    JobLevel.JUNIOR: 2,
    JobLevel.MID: 4,
    JobLevel.SENIOR: 7,
    JobLevel.LEAD: 10,
}

_LEVEL_LABELS = {
    JobLevel.ENTRY: "Entry Level",
    JobLevel.JUNIOR: "Junior",
    JobLevel.MID: "Mid-Level",
    JobLevel.SENIOR: "Senior",
    JobLevel.LEAD: "Lead",
}


class CareerField(Enum):
    TECHNOLOGY = "Technology"
    FINANCE = "Finance"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    RETAIL = "Retail"
    MANUFACTURING = "Manufacturing"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class OtherField:
    """Free-text career field outside the known set."""

    name: str

    @property
    def label(self) -> str:
        return self.name


JobField = CareerField | OtherField


@dataclass
class Job:
    id: str
    title: str
    field: JobField
    level: JobLevel
    monthly_salary: Decimal
    company: str | None = None

    @property
    def required_experience(self) -> int:
        return self.level.min_experience

    def qualifies(self, years_experience: int) -> bool:
        return years_experience >= self.required_experience


@dataclass
class Career:
    current_job: Job | None = None
    years_experience: int = 0
    months_in_current_job: int = 0
    # Previous jobs, oldest first. Append-only.
    job_history: list[Job] = field(default_factory=list)

    def accept_job(self, job: Job) -> None:
        if self.current_job is not None:
            self.job_history.append(self.current_job)
        self.current_job = job
        self.months_in_current_job = 0

    def quit_job(self) -> None:
        if self.current_job is not None:
            self.job_history.append(self.current_job)
        self.current_job = None
        self.months_in_current_job = 0

    def advance_month(self) -> None:
        """End-of-month tick: one year of experience per 12 months in a job."""
        if self.current_job is None:
            return
        self.months_in_current_job += 1
        if self.months_in_current_job % 12 == 0:
            self.years_experience += 1

    def is_employed(self) -> bool:
        return self.current_job is not None

    def monthly_salary(self) -> Decimal:
        if self.current_job is None:
            return Decimal("0")
        return self.current_job.monthly_salary

    def max_qualified_level(self) -> JobLevel:
        for level in reversed(JobLevel):
            if self.years_experience >= level.min_experience:
                return level
        return JobLevel.ENTRY
