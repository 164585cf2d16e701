"""Dimension scorers for the Franchise Fit Scoring Engine.

Each scorer takes a buyer profile and a franchise record and returns an
integer 0-100. Scorers are pure: no I/O, no shared state, and every
lookup table has a single default path for unknown or missing keys.

The four classic dimensions (financial, category, style, risk) score the
short questionnaire on their own. With ``extended=True`` they also fold
in the secondary signals the long questionnaire collects. A secondary
signal only participates when the profile answers the question behind
it; weights are normalized over the signals that participate, so an
unanswered question never drags a score toward an arbitrary value.
"""

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional

from .ranges import (
    BucketRange,
    blend,
    clamp,
    parse_budget,
    parse_liquid_capital,
    parse_net_worth,
    round_half_up,
    safe_ratio,
    to_score,
)
from .schema import FranchiseRecord, UserProfile


NEUTRAL_SCORE = 50

# Alignment buckets for tag-presence checks
LOW = 0.2
NEUTRAL = 0.5
HIGH = 1.0


def _key(value: Optional[str]) -> str:
    """Normalize a bucket label or category for table lookups."""
    return (value or "").strip().lower()


def _lookup(table: Mapping[str, float], value: Optional[str], default: float) -> float:
    return table.get(_key(value), default)


# =============================================================================
# Franchise tag vocabularies
# =============================================================================

HANDS_ON_TAGS = frozenset({"owner-operator", "owner-operated", "hands-on", "operator"})
ABSENTEE_TAGS = frozenset({"semi-absentee", "absentee", "manager-run", "passive", "executive-model"})
SCALABLE_TAGS = frozenset({"scalable", "multi-unit", "area-developer", "area-development", "multi-territory"})
HOME_TAGS = frozenset({"home-based", "home-office", "mobile", "low-overhead", "no-storefront"})
STOREFRONT_TAGS = frozenset({"brick-and-mortar", "storefront", "retail-location"})
OFFICE_TAGS = frozenset({"office-based", "b2b", "executive-model", "home-office"})
FIELD_TAGS = frozenset({"mobile", "in-home", "on-site", "service-based"})
STAFFED_TAGS = STOREFRONT_TAGS | frozenset({"staff-intensive", "large-staff", "hourly-staff"})
LEAN_TAGS = frozenset({"low-overhead", "home-based", "solo", "small-staff", "no-employees"})
LITIGATION_TAGS = frozenset({"litigation", "active-litigation", "pending-litigation"})


# =============================================================================
# Financial
# =============================================================================

# (gap ratio ceiling, fit) for budgets that miss the investment range.
# Never zero: other dimensions can still redeem a stretch.
GAP_STEPS = (
    (0.10, 0.60),
    (0.25, 0.40),
    (0.50, 0.20),
    (1.00, 0.08),
)
GAP_FLOOR = 0.02

CREDIT_FACTORS: Mapping[str, float] = {
    "750+": 1.0,
    "700-750": 0.85,
    "650-700": 0.6,
    "below-650": 0.3,
    "unsure": 0.7,
}
DEFAULT_CREDIT_FACTOR = 0.7

FINANCIAL_WEIGHTS = {
    "budget": 0.45,
    "net_worth": 0.20,
    "liquid_capital": 0.20,
    "credit": 0.15,
}

SBA_BONUS = 0.05
SBA_MIN_CREDIT = 0.6
CASH_BONUS = 0.08
CASH_MIN_BUDGET_FIT = 0.8

# Ideal cushions: net worth ~3x the investment, liquid capital ~2x the fee
NET_WORTH_MULTIPLE = 3
LIQUID_FEE_MULTIPLE = 2


def budget_fit(budget: BucketRange, franchise: FranchiseRecord) -> float:
    """Score budget vs. investment range overlap as a 0-1 fraction.

    Overlapping ranges reward coverage of the franchise's range (its whole
    cost is affordable) and, less heavily, utilization of the budget.
    Disjoint ranges fall through a step function on the gap size
    relative to the budget midpoint.
    """
    overlap_min = max(budget.min, franchise.investment_min)
    overlap_max = min(budget.max, franchise.investment_max)

    if overlap_min <= overlap_max:
        overlap = overlap_max - overlap_min
        franchise_width = franchise.investment_max - franchise.investment_min
        if franchise_width == 0:
            # A fixed-price franchise inside the budget is fully covered
            coverage = 1.0
        else:
            coverage = overlap / franchise_width
        utilization = safe_ratio(overlap, budget.width)
        return min(1.0, coverage * 0.7 + utilization * 0.3)

    if franchise.investment_min > budget.max:
        gap = franchise.investment_min - budget.max
    else:
        gap = budget.min - franchise.investment_max

    gap_ratio = safe_ratio(gap, budget.mid)
    for ceiling, fit in GAP_STEPS:
        if gap_ratio <= ceiling:
            return fit
    return GAP_FLOOR


def credit_factor(credit_score: Optional[str]) -> float:
    return _lookup(CREDIT_FACTORS, credit_score, DEFAULT_CREDIT_FACTOR)


def score_financial(
    profile: UserProfile,
    franchise: FranchiseRecord,
    extended: bool = False,
) -> int:
    """Score financial readiness for a franchise."""
    fit = budget_fit(parse_budget(profile.budget), franchise)
    if not extended:
        return to_score(fit)

    signals = [(fit, FINANCIAL_WEIGHTS["budget"])]

    if profile.net_worth:
        net_worth = parse_net_worth(profile.net_worth)
        adequacy = safe_ratio(net_worth.mid, franchise.investment_mid) / NET_WORTH_MULTIPLE
        signals.append((clamp(adequacy), FINANCIAL_WEIGHTS["net_worth"]))

    if profile.liquid_capital:
        liquid = parse_liquid_capital(profile.liquid_capital)
        adequacy = safe_ratio(liquid.mid, franchise.franchise_fee) / LIQUID_FEE_MULTIPLE
        signals.append((clamp(adequacy), FINANCIAL_WEIGHTS["liquid_capital"]))

    credit = credit_factor(profile.credit_score)
    if profile.credit_score:
        signals.append((credit, FINANCIAL_WEIGHTS["credit"]))

    bonus = 0.0
    financing = _key(profile.financing_preference)
    if financing == "sba" and credit >= SBA_MIN_CREDIT:
        bonus = SBA_BONUS
    elif financing == "cash" and fit >= CASH_MIN_BUDGET_FIT:
        bonus = CASH_BONUS

    return to_score(blend(signals) + bonus)


# =============================================================================
# Category
# =============================================================================

RELATED_CATEGORIES: Mapping[str, tuple[str, ...]] = {
    "Health & Fitness": ("Personal Care", "Senior Care"),
    "Food & Beverage": ("Retail",),
    "Home Services": ("Cleaning & Maintenance",),
    "B2B Services": ("Real Estate",),
    "Education": ("Pet Services",),
    "Senior Care": ("Health & Fitness", "Home Services"),
    "Automotive": ("Home Services",),
    "Pet Services": ("Education",),
    "Real Estate": ("B2B Services", "Home Services"),
    "Retail": ("Food & Beverage",),
    "Cleaning & Maintenance": ("Home Services",),
    "Personal Care": ("Health & Fitness",),
}

_RELATED_LOOKUP = {
    _key(category): frozenset(_key(r) for r in related)
    for category, related in RELATED_CATEGORIES.items()
}

EXACT_CATEGORY_SCORE = 100
RELATED_CATEGORY_SCORE = 65
UNRELATED_CATEGORY_SCORE = 10

FRANCHISE_MODEL_TAGS: Mapping[str, frozenset[str]] = {
    "brick-and-mortar": STOREFRONT_TAGS,
    "services": frozenset({"service-based", "services", "in-home", "b2b", "home-based"}),
    "mobile": frozenset({"mobile", "mobile-service", "van-based", "no-storefront"}),
}

MODEL_MATCH_SCORE = 100
MODEL_MISS_SCORE = 30
INDUSTRY_BLEND = 0.75
MODEL_BLEND = 0.25


def related_categories(category: str) -> frozenset[str]:
    """Normalized categories adjacent to the given one."""
    return _RELATED_LOOKUP.get(_key(category), frozenset())


def industry_score(interests: Iterable[str], category: str) -> int:
    wanted = [_key(i) for i in interests]
    if not wanted:
        return NEUTRAL_SCORE

    franchise_category = _key(category)
    if franchise_category in wanted:
        return EXACT_CATEGORY_SCORE

    franchise_related = related_categories(category)
    for interest in wanted:
        if franchise_category in _RELATED_LOOKUP.get(interest, ()):
            return RELATED_CATEGORY_SCORE
        if interest in franchise_related:
            return RELATED_CATEGORY_SCORE

    return UNRELATED_CATEGORY_SCORE


def model_score(models: Iterable[str], franchise: FranchiseRecord) -> int:
    wanted: set[str] = set()
    for model in models:
        wanted |= FRANCHISE_MODEL_TAGS.get(_key(model), {_key(model)})
    return MODEL_MATCH_SCORE if franchise.has_any_tag(wanted) else MODEL_MISS_SCORE


def score_category(
    profile: UserProfile,
    franchise: FranchiseRecord,
    extended: bool = False,
) -> int:
    """Score industry interest fit for a franchise."""
    industry = industry_score(profile.interests, franchise.category)
    if not extended or not profile.franchise_model:
        return industry

    model = model_score(profile.franchise_model, franchise)
    return round_half_up(industry * INDUSTRY_BLEND + model * MODEL_BLEND)


# =============================================================================
# Style
# =============================================================================

STYLE_TAG_MAP: Mapping[str, frozenset[str]] = {
    "semi-absentee": ABSENTEE_TAGS,
    "owner-operator": HANDS_ON_TAGS,
    "multi-unit": SCALABLE_TAGS,
    "home-based": HOME_TAGS,
}

# Partial affinities when no expected tag is present: (buyer style,
# franchise tags, score). Asymmetric; the first matching rule wins.
STYLE_AFFINITIES: tuple[tuple[str, frozenset[str], int], ...] = (
    ("semi-absentee", frozenset({"multi-unit", "scalable", "area-developer"}), 55),
    ("multi-unit", frozenset({"semi-absentee", "manager-run", "scalable"}), 55),
    ("home-based", frozenset({"owner-operator", "owner-operated"}), 40),
    ("home-based", STOREFRONT_TAGS, 5),
    ("semi-absentee", frozenset({"owner-operator", "hands-on", "owner-operated"}), 15),
    ("owner-operator", frozenset({"semi-absentee", "absentee", "passive"}), 15),
)

STYLE_MATCH_SCORE = 100
STYLE_DEFAULT_SCORE = 30

STYLE_WEIGHTS = {
    "style": 0.35,
    "day_to_day": 0.20,
    "location": 0.20,
    "hours": 0.15,
    "employee": 0.10,
}

HANDS_ON_HOURS: Mapping[str, float] = {"50+": HIGH, "40-50": NEUTRAL, "under-40": LOW}
DELEGATED_HOURS: Mapping[str, float] = {"under-40": HIGH, "40-50": NEUTRAL, "50+": NEUTRAL}


def ownership_style_score(style: Optional[str], franchise: FranchiseRecord) -> int:
    style = _key(style)
    expected = STYLE_TAG_MAP.get(style)
    if not expected:
        return NEUTRAL_SCORE

    if franchise.has_any_tag(expected):
        return STYLE_MATCH_SCORE

    for buyer_style, tags, score in STYLE_AFFINITIES:
        if buyer_style == style and franchise.has_any_tag(tags):
            return score

    return STYLE_DEFAULT_SCORE


def day_to_day_alignment(choice: str, franchise: FranchiseRecord) -> float:
    hands_on = franchise.has_any_tag(HANDS_ON_TAGS)
    absentee = franchise.has_any_tag(ABSENTEE_TAGS)

    if choice == "myself":
        return HIGH if hands_on else LOW if absentee else NEUTRAL
    if choice == "gm-operator":
        return HIGH if absentee else LOW if hands_on else NEUTRAL
    if choice == "spouse-family":
        return HIGH if hands_on else NEUTRAL
    return NEUTRAL


def work_location_alignment(choice: str, franchise: FranchiseRecord) -> float:
    storefront = franchise.has_any_tag(STOREFRONT_TAGS)

    if choice == "open":
        return HIGH
    if choice == "home":
        return HIGH if franchise.has_any_tag(HOME_TAGS) else LOW if storefront else NEUTRAL
    if choice == "office":
        return HIGH if franchise.has_any_tag(OFFICE_TAGS) else NEUTRAL
    if choice == "field":
        return HIGH if franchise.has_any_tag(FIELD_TAGS) else LOW if storefront else NEUTRAL
    return NEUTRAL


def hours_alignment(hours: str, franchise: FranchiseRecord) -> float:
    table = HANDS_ON_HOURS if franchise.has_any_tag(HANDS_ON_TAGS) else DELEGATED_HOURS
    return table.get(hours, NEUTRAL)


def employee_alignment(
    interest: Optional[str],
    ideal_count: Optional[str],
    franchise: FranchiseRecord,
) -> float:
    """Average the employee-interest and ideal-headcount answers given."""
    staffed = franchise.has_any_tag(STAFFED_TAGS)
    lean = franchise.has_any_tag(LEAN_TAGS)
    values = []

    interest = _key(interest)
    if interest == "no":
        values.append(LOW if staffed else HIGH if lean else NEUTRAL)
    elif interest == "yes":
        values.append(HIGH if staffed else NEUTRAL)
    elif interest:
        values.append(NEUTRAL)

    ideal_count = _key(ideal_count)
    if ideal_count == "1-5":
        values.append(HIGH if lean else LOW if staffed else NEUTRAL)
    elif ideal_count in ("11-20", "20+"):
        values.append(HIGH if staffed else LOW if lean else NEUTRAL)
    elif ideal_count:
        values.append(NEUTRAL)

    return sum(values) / len(values) if values else NEUTRAL


def score_style(
    profile: UserProfile,
    franchise: FranchiseRecord,
    extended: bool = False,
) -> int:
    """Score ownership style and operating fit for a franchise."""
    core = ownership_style_score(profile.style, franchise)
    if not extended:
        return core

    signals = [(core / 100, STYLE_WEIGHTS["style"])]
    if profile.day_to_day:
        signals.append((day_to_day_alignment(_key(profile.day_to_day), franchise),
                        STYLE_WEIGHTS["day_to_day"]))
    if profile.work_location:
        signals.append((work_location_alignment(_key(profile.work_location), franchise),
                        STYLE_WEIGHTS["location"]))
    if profile.hours_year1:
        signals.append((hours_alignment(_key(profile.hours_year1), franchise),
                        STYLE_WEIGHTS["hours"]))
    if profile.employee_interest or profile.ideal_employee_count:
        signals.append((
            employee_alignment(profile.employee_interest, profile.ideal_employee_count, franchise),
            STYLE_WEIGHTS["employee"],
        ))

    return to_score(blend(signals))


# =============================================================================
# Risk
# =============================================================================

INVESTMENT_RISK_CEILING = 500_000
PROVEN_UNIT_COUNT = 800
REVENUE_CEILING = 1_500_000
MATURE_AGE_YEARS = 30

# Fixed term in the aggressive blend. No input signal sits behind it;
# it lifts every aggressive score by 24 points.
AGGRESSIVE_BASELINE = 0.8 * 0.3

RISK_WEIGHTS = {
    "core": 0.40,
    "exit": 0.15,
    "tolerance": 0.15,
    "passive": 0.15,
    "timeline": 0.15,
}

# Exit strategy -> (track record weight, revenue upside weight)
EXIT_MIX: Mapping[str, tuple[float, float]] = {
    "growth-exit": (0.3, 0.7),
    "long-term": (0.7, 0.3),
    "build-sell": (0.5, 0.5),
}

CLOSURE_LIMIT = 5

# How much track record matters for each time-to-open answer
TIMELINE_PROOF_WEIGHT: Mapping[str, float] = {
    "within-3": 1.0,
    "3-6": 0.6,
    "6-12": 0.3,
    "12+": 0.1,
}
DEFAULT_PROOF_WEIGHT = 0.3


@dataclass(frozen=True)
class RiskSignals:
    """Normalized 0-1 risk signals derived from a franchise alone."""
    investment_risk: float
    proven: float
    revenue: float
    maturity: float


def risk_signals(franchise: FranchiseRecord, current_year: Optional[int] = None) -> RiskSignals:
    if current_year is None:
        current_year = datetime.date.today().year
    age = current_year - franchise.year_founded
    return RiskSignals(
        investment_risk=clamp(franchise.investment_mid / INVESTMENT_RISK_CEILING),
        proven=clamp(franchise.unit_count / PROVEN_UNIT_COUNT),
        revenue=clamp((franchise.avg_revenue or 0) / REVENUE_CEILING),
        maturity=clamp(age / MATURE_AGE_YEARS),
    )


def tolerance_fit(tolerance: Optional[str], signals: RiskSignals) -> Optional[float]:
    """Blend the risk signals for a tolerance bucket; None when unknown."""
    tolerance = _key(tolerance)

    if tolerance == "conservative":
        low_investment = 1 - signals.investment_risk
        return low_investment * 0.35 + signals.proven * 0.4 + signals.maturity * 0.25

    if tolerance == "moderate":
        if signals.investment_risk < 0.6:
            investment_ok = 1 - signals.investment_risk * 0.5
        else:
            investment_ok = 0.4
        track_record = signals.proven * 0.7 + signals.maturity * 0.3
        return investment_ok * 0.3 + track_record * 0.35 + signals.revenue * 0.35

    if tolerance == "aggressive":
        upside = 1 - signals.proven * 0.3
        return signals.revenue * 0.5 + upside * 0.2 + AGGRESSIVE_BASELINE

    return None


def exit_alignment(exit_strategy: str, signals: RiskSignals) -> float:
    mix = EXIT_MIX.get(exit_strategy)
    if mix is None:
        return NEUTRAL
    proven_weight, upside_weight = mix
    return signals.proven * proven_weight + signals.revenue * upside_weight


def closure_tolerance(profile: UserProfile, franchise: FranchiseRecord) -> float:
    fit = 1.0
    if profile.closed_units_tolerance is False and franchise.units_closed > CLOSURE_LIMIT:
        fit = max(0.1, 0.6 - franchise.closure_rate * 4)
    if profile.litigation_tolerance is False and franchise.has_any_tag(LITIGATION_TAGS):
        fit *= 0.5
    return fit


def passive_alignment(passive: bool, franchise: FranchiseRecord) -> float:
    hands_on = franchise.has_any_tag(HANDS_ON_TAGS)
    if passive:
        if franchise.has_any_tag(ABSENTEE_TAGS):
            return HIGH
        return LOW if hands_on else NEUTRAL
    return HIGH if hands_on else 0.7


def timeline_alignment(timeline: str, signals: RiskSignals) -> float:
    weight = TIMELINE_PROOF_WEIGHT.get(timeline, DEFAULT_PROOF_WEIGHT)
    return 1 - weight * (1 - signals.proven)


def score_risk(
    profile: UserProfile,
    franchise: FranchiseRecord,
    extended: bool = False,
    current_year: Optional[int] = None,
) -> int:
    """Score risk tolerance alignment for a franchise."""
    signals = risk_signals(franchise, current_year)
    core = tolerance_fit(profile.risk_tolerance, signals)
    if not extended:
        return NEUTRAL_SCORE if core is None else to_score(core)

    parts = [(NEUTRAL if core is None else core, RISK_WEIGHTS["core"])]
    if profile.exit_strategy:
        parts.append((exit_alignment(_key(profile.exit_strategy), signals), RISK_WEIGHTS["exit"]))
    if profile.closed_units_tolerance is not None or profile.litigation_tolerance is not None:
        parts.append((closure_tolerance(profile, franchise), RISK_WEIGHTS["tolerance"]))
    if profile.passive_investor is not None:
        parts.append((passive_alignment(profile.passive_investor, franchise), RISK_WEIGHTS["passive"]))
    if profile.timeline_to_open:
        parts.append((timeline_alignment(_key(profile.timeline_to_open), signals),
                      RISK_WEIGHTS["timeline"]))

    return to_score(blend(parts))


# =============================================================================
# Experience
# =============================================================================


class Complexity(str, Enum):
    """How demanding a franchise system is to operate."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


HIGH_INVESTMENT_MID = 350_000
LOW_INVESTMENT_MID = 150_000
LARGE_SYSTEM_UNITS = 500
SMALL_SYSTEM_UNITS = 100

MANAGEMENT_YEARS: Mapping[str, float] = {
    "none": 0,
    "1-2": 1.5,
    "2-5": 3.5,
    "5-10": 7.5,
    "10+": 12,
}

# Years of management that fully satisfy each complexity level
MANAGEMENT_TARGET_YEARS = {
    Complexity.HIGH: 10,
    Complexity.MEDIUM: 6,
    Complexity.LOW: 3,
}

NO_OWNERSHIP_FIT = {
    Complexity.HIGH: 0.3,
    Complexity.MEDIUM: 0.6,
    Complexity.LOW: 0.6,
}

SKILL_LEVELS: Mapping[str, float] = {
    "none": 0.0,
    "beginner": 0.33,
    "intermediate": 0.67,
    "advanced": 1.0,
}

# Exponent applied to the average skill level; >1 is stricter
SKILL_CURVE = {
    Complexity.HIGH: 1.5,
    Complexity.MEDIUM: 1.0,
    Complexity.LOW: 0.5,
}

EDUCATION_SCORES: Mapping[str, float] = {
    "no-degree": 0.3,
    "high-school": 0.5,
    "associates": 0.65,
    "bachelors": 0.85,
    "post-grad": 1.0,
}

PROFESSIONAL_CATEGORIES = frozenset({"b2b services", "real estate", "education"})

EXPERIENCE_WEIGHTS = {
    "management": 0.30,
    "ownership": 0.25,
    "skills": 0.30,
    "education": 0.15,
    "education_professional": 0.25,
}


def franchise_complexity(franchise: FranchiseRecord) -> Complexity:
    mid = franchise.investment_mid
    if mid >= HIGH_INVESTMENT_MID or franchise.unit_count >= LARGE_SYSTEM_UNITS:
        return Complexity.HIGH
    if mid < LOW_INVESTMENT_MID and franchise.unit_count < SMALL_SYSTEM_UNITS:
        return Complexity.LOW
    return Complexity.MEDIUM


def score_experience(profile: UserProfile, franchise: FranchiseRecord) -> int:
    """Score the buyer's background against the franchise's complexity."""
    skills = [
        level for level in (profile.marketing_level, profile.operations_level, profile.finance_level)
        if level
    ]
    if not (profile.management_years or profile.prior_ownership is not None
            or skills or profile.education):
        return NEUTRAL_SCORE

    complexity = franchise_complexity(franchise)
    parts = []

    if profile.management_years:
        years = MANAGEMENT_YEARS.get(_key(profile.management_years))
        if years is None:
            fit = NEUTRAL
        else:
            fit = clamp(years / MANAGEMENT_TARGET_YEARS[complexity])
        parts.append((fit, EXPERIENCE_WEIGHTS["management"]))

    if profile.prior_ownership is not None:
        fit = 1.0 if profile.prior_ownership else NO_OWNERSHIP_FIT[complexity]
        parts.append((fit, EXPERIENCE_WEIGHTS["ownership"]))

    if skills:
        average = sum(_lookup(SKILL_LEVELS, s, NEUTRAL) for s in skills) / len(skills)
        parts.append((average ** SKILL_CURVE[complexity], EXPERIENCE_WEIGHTS["skills"]))

    if profile.education:
        if _key(franchise.category) in PROFESSIONAL_CATEGORIES:
            weight = EXPERIENCE_WEIGHTS["education_professional"]
        else:
            weight = EXPERIENCE_WEIGHTS["education"]
        parts.append((_lookup(EDUCATION_SCORES, profile.education, NEUTRAL), weight))

    return to_score(blend(parts))


# =============================================================================
# Growth
# =============================================================================

# unit preference -> (fit with scalable franchise, fit otherwise)
UNIT_PREFERENCE_FIT: Mapping[str, tuple[float, float]] = {
    "multiple": (1.0, 0.3),
    "single": (0.6, 0.9),
    "both": (0.9, 0.7),
}

HOURS_ORDER: Mapping[str, int] = {"under-40": 0, "40-50": 1, "50+": 2}

GROWTH_LEADERSHIP = frozenset({"transformational", "democratic", "laissez-faire"})
CONTROL_LEADERSHIP = frozenset({"autocratic", "transactional"})

COMMITMENT_LEVELS: Mapping[str, float] = {
    "ready": 1.0,
    "active": 0.85,
    "interested": 0.55,
    "dream": 0.25,
}

CONSIDERING_DURATION: Mapping[str, float] = {
    "just-started": 0.4,
    "under-6": 0.55,
    "6-12": 0.7,
    "1-2": 0.85,
    "2+": 1.0,
}

GROWTH_WEIGHTS = {
    "unit_preference": 0.30,
    "hours_trend": 0.15,
    "leadership": 0.15,
    "commitment": 0.25,
    "duration": 0.15,
}


def hours_trend_fit(year1: str, year2: str, scalable: bool) -> float:
    """Falling hours on a scalable system means the buyer plans to delegate."""
    if year1 not in HOURS_ORDER or year2 not in HOURS_ORDER:
        return NEUTRAL
    delta = HOURS_ORDER[year2] - HOURS_ORDER[year1]
    if delta < 0:
        return 1.0 if scalable else 0.6
    if delta > 0:
        return 0.4 if scalable else NEUTRAL
    return NEUTRAL


def leadership_fit(leadership: str, scalable: bool) -> float:
    if leadership in GROWTH_LEADERSHIP:
        return 1.0 if scalable else NEUTRAL
    if leadership in CONTROL_LEADERSHIP:
        return NEUTRAL if scalable else 0.8
    return 0.6


def score_growth(profile: UserProfile, franchise: FranchiseRecord) -> int:
    """Score growth ambition and commitment against the franchise."""
    has_hours_trend = bool(profile.hours_year1 and profile.hours_year2)
    if not (profile.unit_preference or profile.leadership_style or profile.commitment_level
            or profile.considering_duration or has_hours_trend):
        return NEUTRAL_SCORE

    scalable = franchise.has_any_tag(SCALABLE_TAGS)
    parts = []

    if profile.unit_preference:
        fit = UNIT_PREFERENCE_FIT.get(_key(profile.unit_preference))
        value = NEUTRAL if fit is None else fit[0] if scalable else fit[1]
        parts.append((value, GROWTH_WEIGHTS["unit_preference"]))

    if has_hours_trend:
        parts.append((
            hours_trend_fit(_key(profile.hours_year1), _key(profile.hours_year2), scalable),
            GROWTH_WEIGHTS["hours_trend"],
        ))

    if profile.leadership_style:
        parts.append((leadership_fit(_key(profile.leadership_style), scalable),
                      GROWTH_WEIGHTS["leadership"]))

    if profile.commitment_level:
        parts.append((_lookup(COMMITMENT_LEVELS, profile.commitment_level, NEUTRAL),
                      GROWTH_WEIGHTS["commitment"]))

    if profile.considering_duration:
        parts.append((_lookup(CONSIDERING_DURATION, profile.considering_duration, NEUTRAL),
                      GROWTH_WEIGHTS["duration"]))

    return to_score(blend(parts))
