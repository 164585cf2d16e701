"""Pydantic models for the Franchise Fit Scoring Engine.

Input schemas for franchise records and buyer profiles, and output
schemas for score breakdowns and ranked results. Field names are
snake_case in Python; the camelCase names used by the catalog and
questionnaire JSON are accepted as aliases.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


# =============================================================================
# Enums
# =============================================================================


class ScoringModel(str, Enum):
    """Which dimension set the engine evaluates."""
    CLASSIC = "classic"  # financial, category, style, risk
    FULL = "full"  # adds experience and growth
    AUTO = "auto"  # full when the profile carries any extended field

    @classmethod
    def from_string(cls, value: Optional[str]) -> "ScoringModel":
        """Parse scoring model from string, defaulting to AUTO."""
        if not value:
            return cls.AUTO
        mapping = {
            "classic": cls.CLASSIC,
            "four": cls.CLASSIC,
            "full": cls.FULL,
            "six": cls.FULL,
            "auto": cls.AUTO,
        }
        return mapping.get(value.strip().lower(), cls.AUTO)


class Dimension(str, Enum):
    """A scoring axis."""
    FINANCIAL = "financial"
    CATEGORY = "category"
    STYLE = "style"
    RISK = "risk"
    EXPERIENCE = "experience"
    GROWTH = "growth"

    @property
    def label(self) -> str:
        return self.value.capitalize()


CLASSIC_DIMENSIONS = (
    Dimension.FINANCIAL,
    Dimension.CATEGORY,
    Dimension.STYLE,
    Dimension.RISK,
)
FULL_DIMENSIONS = CLASSIC_DIMENSIONS + (Dimension.EXPERIENCE, Dimension.GROWTH)


class MatchTier(str, Enum):
    """Presentation tier for a composite score."""
    EXCELLENT = "excellent"
    STRONG = "strong"
    FAIR = "fair"
    WEAK = "weak"


# =============================================================================
# Franchise catalog models
# =============================================================================


class FranchiseRecord(BaseModel):
    """A franchise opportunity from the catalog. Read-only once loaded."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    slug: str = Field(..., min_length=1)
    name: str
    category: str
    description: str = ""
    investment_min: float = Field(..., ge=0)
    investment_max: float = Field(..., ge=0)
    franchise_fee: float = Field(0, ge=0)
    royalty_pct: float = Field(0, ge=0)
    ad_fund_pct: float = Field(0, ge=0)
    avg_revenue: Optional[float] = Field(None, ge=0)
    unit_count: int = Field(0, ge=0)
    units_opened: int = Field(0, ge=0)
    units_closed: int = Field(0, ge=0)
    year_founded: int
    headquarters: str = ""
    website: Optional[str] = None
    tags: tuple[str, ...] = ()

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, value: Any) -> Any:
        """Lowercase and strip tags, dropping blanks."""
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        return tuple(str(t).strip().lower() for t in value if str(t).strip())

    @model_validator(mode="after")
    def check_investment_range(self) -> "FranchiseRecord":
        if self.investment_min > self.investment_max:
            raise ValueError(
                f"investment_min ({self.investment_min}) exceeds "
                f"investment_max ({self.investment_max})"
            )
        return self

    @property
    def investment_mid(self) -> float:
        return (self.investment_min + self.investment_max) / 2

    @property
    def net_growth_rate(self) -> float:
        """Trailing-year net unit growth as a percentage of the system."""
        if self.unit_count <= 0:
            return 0.0
        return (self.units_opened - self.units_closed) / self.unit_count * 100

    @property
    def closure_rate(self) -> float:
        """Trailing-year closures as a fraction of operating units."""
        return self.units_closed / (self.unit_count or 1)

    def has_any_tag(self, tags: Any) -> bool:
        """Check whether any of the given tags is on this franchise."""
        return any(t in self.tags for t in tags)


# =============================================================================
# Buyer profile
# =============================================================================


# Fields the four-dimension questionnaire collected. Anything else set on
# a profile means the six-dimension questionnaire produced it.
CLASSIC_PROFILE_FIELDS = frozenset({
    "budget",
    "interests",
    "style",
    "risk_tolerance",
    "timeline",
})


class UserProfile(BaseModel):
    """A prospective buyer's questionnaire answers.

    Every field is optional. Blank answers are treated as unanswered.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # Financial readiness
    budget: Optional[str] = None
    net_worth: Optional[str] = None
    liquid_capital: Optional[str] = None
    credit_score: Optional[str] = None
    financing_preference: Optional[str] = None

    # Preferences & interests
    interests: tuple[str, ...] = ()
    franchise_model: tuple[str, ...] = ()
    unit_preference: Optional[str] = None
    day_to_day: Optional[str] = None
    work_location: Optional[str] = None

    # Experience & background
    age_group: Optional[str] = None
    education: Optional[str] = None
    current_work: Optional[str] = None
    management_years: Optional[str] = None
    prior_ownership: Optional[bool] = None
    marketing_level: Optional[str] = None
    operations_level: Optional[str] = None
    finance_level: Optional[str] = None
    employee_interest: Optional[str] = None
    ideal_employee_count: Optional[str] = None

    # Ownership style
    style: Optional[str] = None
    leadership_style: Optional[str] = None
    hours_year1: Optional[str] = None
    hours_year2: Optional[str] = None

    # Risk profile
    risk_tolerance: Optional[str] = None
    exit_strategy: Optional[str] = None
    litigation_tolerance: Optional[bool] = None
    closed_units_tolerance: Optional[bool] = None
    passive_investor: Optional[bool] = None
    timeline_to_open: Optional[str] = None
    timeline: Optional[str] = None
    location: Optional[str] = None

    # Mindset & values
    commitment_level: Optional[str] = None
    considering_duration: Optional[str] = None
    values_importance: Optional[str] = None
    core_values: tuple[str, ...] = ()
    why_franchise: Optional[str] = None
    biggest_concerns: Optional[str] = None
    goals: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        """The questionnaire uses "" for unanswered questions."""
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("interests", "franchise_model", "core_values", mode="before")
    @classmethod
    def normalize_list(cls, value: Any) -> Any:
        """Accept None, a comma-separated string, or a sequence."""
        if value is None:
            return ()
        if isinstance(value, str):
            value = value.split(",")
        return tuple(str(v).strip() for v in value if str(v).strip())

    def answered_fields(self) -> set[str]:
        """Names of fields that carry an answer."""
        return {
            name for name, value in self
            if value is not None and value != ()
        }

    @property
    def is_extended(self) -> bool:
        """True when the profile goes beyond the four-dimension questionnaire."""
        return bool(self.answered_fields() - CLASSIC_PROFILE_FIELDS)


# =============================================================================
# Scoring output models
# =============================================================================


class ScoreBreakdown(BaseModel):
    """Per-dimension scores backing a composite score.

    ``experience`` and ``growth`` are only populated by the full model.
    """
    model_config = ConfigDict(frozen=True)

    financial: int = Field(..., ge=0, le=100)
    category: int = Field(..., ge=0, le=100)
    style: int = Field(..., ge=0, le=100)
    risk: int = Field(..., ge=0, le=100)
    experience: Optional[int] = Field(None, ge=0, le=100)
    growth: Optional[int] = Field(None, ge=0, le=100)

    @model_validator(mode="after")
    def check_full_dimensions(self) -> "ScoreBreakdown":
        if (self.experience is None) != (self.growth is None):
            raise ValueError("experience and growth must both be set or both be omitted")
        return self

    @property
    def scoring_model(self) -> ScoringModel:
        if self.experience is None and self.growth is None:
            return ScoringModel.CLASSIC
        return ScoringModel.FULL

    def items(self) -> list[tuple[Dimension, int]]:
        """(dimension, score) pairs for the populated dimensions."""
        dims = FULL_DIMENSIONS if self.scoring_model == ScoringModel.FULL else CLASSIC_DIMENSIONS
        return [(d, getattr(self, d.value)) for d in dims]


class ScoredFranchise(FranchiseRecord):
    """A catalog record annotated with its composite score and breakdown."""
    score: int = Field(..., ge=1, le=100)
    score_breakdown: ScoreBreakdown


class FitExplanation(BaseModel):
    """Human-readable summary of why a franchise scored as it did."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    slug: str
    name: str
    score: int
    tier: MatchTier
    rank: int
    is_best_match: bool = False
    strengths: list[str] = Field(default_factory=list)
    concerns: list[str] = Field(default_factory=list)
