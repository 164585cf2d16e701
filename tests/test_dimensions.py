"""Tests for the six dimension scorers.

Expected values are worked by hand from the scoring tables so a change
to any constant shows up as a failing case.
"""

import pytest

from conftest import CURRENT_YEAR, make_franchise
from franchise_fit.dimensions import (
    Complexity,
    RiskSignals,
    budget_fit,
    closure_tolerance,
    credit_factor,
    employee_alignment,
    exit_alignment,
    franchise_complexity,
    hours_trend_fit,
    industry_score,
    leadership_fit,
    passive_alignment,
    risk_signals,
    score_category,
    score_experience,
    score_financial,
    score_growth,
    score_risk,
    score_style,
    timeline_alignment,
)
from franchise_fit.ranges import parse_budget
from franchise_fit.schema import UserProfile


class TestFinancialScorer:
    """Tests for interval-overlap financial scoring."""

    def test_budget_equal_to_investment_range(self):
        profile = UserProfile(budget="100-200")
        franchise = make_franchise(investment_min=100_000, investment_max=200_000)
        assert score_financial(profile, franchise) == 100

    def test_investment_inside_budget(self):
        profile = UserProfile(budget="100-200")
        franchise = make_franchise(investment_min=120_000, investment_max=180_000)
        # full coverage, 60% utilization
        assert score_financial(profile, franchise) == 88

    def test_far_out_of_budget(self):
        profile = UserProfile(budget="50-100")
        franchise = make_franchise(investment_min=500_000, investment_max=600_000)
        assert score_financial(profile, franchise) == 2

    @pytest.mark.parametrize("investment_min,expected", [
        (210_000, 60),
        (230_000, 40),
        (260_000, 20),
        (320_000, 8),
        (400_000, 2),
    ])
    def test_gap_step_function(self, investment_min, expected):
        profile = UserProfile(budget="100-200")
        franchise = make_franchise(investment_min=investment_min, investment_max=investment_min + 100_000)
        assert score_financial(profile, franchise) == expected

    def test_gap_below_budget(self):
        profile = UserProfile(budget="350-500")
        franchise = make_franchise(investment_min=60_000, investment_max=95_000)
        # gap 255K over a 425K midpoint
        assert score_financial(profile, franchise) == 8

    def test_fixed_price_franchise_inside_budget(self):
        franchise = make_franchise(investment_min=150_000, investment_max=150_000)
        assert budget_fit(parse_budget("100-200"), franchise) == pytest.approx(0.7)

    def test_missing_budget_uses_wide_default(self):
        franchise = make_franchise(investment_min=100_000, investment_max=200_000)
        score = score_financial(UserProfile(), franchise)
        # whole range covered, 5% of a 0-2M budget used
        assert score in (71, 72)

    def test_extended_with_only_budget_matches_classic(self):
        profile = UserProfile(budget="100-200")
        franchise = make_franchise(investment_min=120_000, investment_max=180_000)
        assert score_financial(profile, franchise, extended=True) == 88

    def test_extended_strong_capital_with_sba(self):
        profile = UserProfile(
            budget="100-200",
            net_worth="500-1m",
            liquid_capital="100-250",
            credit_score="750+",
            financing_preference="sba",
        )
        assert score_financial(profile, make_franchise(), extended=True) == 100

    def test_extended_thin_capital(self):
        profile = UserProfile(
            budget="100-200",
            net_worth="under-250",
            liquid_capital="under-50",
            credit_score="below-650",
        )
        assert score_financial(profile, make_franchise(), extended=True) == 61

    def test_sba_bonus_needs_credit(self):
        profile = UserProfile(
            budget="100-200",
            net_worth="under-250",
            liquid_capital="under-50",
            credit_score="below-650",
            financing_preference="sba",
        )
        assert score_financial(profile, make_franchise(), extended=True) == 61

    def test_cash_bonus_with_strong_budget_fit(self):
        profile = UserProfile(
            budget="100-200",
            net_worth="under-250",
            liquid_capital="under-50",
            credit_score="below-650",
            financing_preference="cash",
        )
        assert score_financial(profile, make_franchise(), extended=True) == 69

    def test_zero_fee_does_not_divide_by_zero(self):
        profile = UserProfile(budget="100-200", liquid_capital="50-100")
        franchise = make_franchise(franchise_fee=0)
        assert score_financial(profile, franchise, extended=True) == 100

    @pytest.mark.parametrize("label,expected", [
        ("750+", 1.0),
        ("700-750", 0.85),
        ("650-700", 0.6),
        ("below-650", 0.3),
        ("unsure", 0.7),
        (None, 0.7),
        ("800", 0.7),
    ])
    def test_credit_factor(self, label, expected):
        assert credit_factor(label) == expected


class TestCategoryScorer:
    """Tests for industry and franchise-model matching."""

    def test_exact_match(self):
        profile = UserProfile(interests=["Home Services"])
        assert score_category(profile, make_franchise(category="Home Services")) == 100

    def test_exact_match_ignores_case_and_whitespace(self):
        profile = UserProfile(interests=["  home services "])
        assert score_category(profile, make_franchise(category="Home Services")) == 100

    def test_exact_match_wins_over_other_interests(self):
        profile = UserProfile(interests=["Retail", "Automotive", "Home Services"])
        assert score_category(profile, make_franchise(category="Home Services")) == 100

    def test_related_via_interest(self):
        profile = UserProfile(interests=["Cleaning & Maintenance"])
        assert score_category(profile, make_franchise(category="Home Services")) == 65

    def test_related_via_franchise_category(self):
        # Home Services does not list Automotive, but Automotive lists Home Services
        profile = UserProfile(interests=["Home Services"])
        assert score_category(profile, make_franchise(category="Automotive")) == 65

    def test_unrelated(self):
        profile = UserProfile(interests=["Retail"])
        assert score_category(profile, make_franchise(category="Senior Care")) == 10

    def test_no_interests_is_neutral(self):
        assert score_category(UserProfile(), make_franchise(category="Retail")) == 50
        assert industry_score([], "Anything") == 50

    def test_unknown_category(self):
        profile = UserProfile(interests=["Space Tourism"])
        assert score_category(profile, make_franchise(category="Retail")) == 10

    def test_model_match_lifts_unrelated_industry(self):
        profile = UserProfile(interests=["Retail"], franchise_model=["services"])
        franchise = make_franchise(category="Home Services", tags=["service-based"])
        assert score_category(profile, franchise, extended=True) == 33

    def test_model_miss_on_exact_industry(self):
        profile = UserProfile(interests=["Home Services"], franchise_model=["brick-and-mortar"])
        franchise = make_franchise(category="Home Services", tags=["mobile"])
        assert score_category(profile, franchise, extended=True) == 83

    def test_classic_ignores_franchise_model(self):
        profile = UserProfile(interests=["Retail"], franchise_model=["services"])
        franchise = make_franchise(category="Home Services", tags=["service-based"])
        assert score_category(profile, franchise) == 10


class TestStyleScorer:
    """Tests for ownership style matching."""

    def test_home_based_vs_storefront_is_hard_mismatch(self):
        profile = UserProfile(style="home-based")
        franchise = make_franchise(tags=["storefront", "brick-and-mortar"])
        assert score_style(profile, franchise) <= 10
        assert score_style(profile, franchise) == 5

    @pytest.mark.parametrize("style,tags,expected", [
        ("semi-absentee", ["manager-run"], 100),
        ("owner-operator", ["Hands-On"], 100),
        ("multi-unit", ["area-developer"], 100),
        ("home-based", ["mobile"], 100),
        ("semi-absentee", ["scalable"], 55),
        ("multi-unit", ["manager-run"], 55),
        ("home-based", ["owner-operated"], 40),
        ("home-based", ["owner-operated", "storefront"], 40),
        ("semi-absentee", ["hands-on"], 15),
        ("owner-operator", ["passive"], 15),
        ("owner-operator", ["b2b"], 30),
        ("owner-operator", [], 30),
    ])
    def test_style_table(self, style, tags, expected):
        profile = UserProfile(style=style)
        assert score_style(profile, make_franchise(tags=tags)) == expected

    @pytest.mark.parametrize("style", [None, "", "digital-nomad"])
    def test_unknown_style_is_neutral(self, style):
        profile = UserProfile(style=style)
        assert score_style(profile, make_franchise(tags=["storefront"])) == 50

    def test_extended_alignment_signals(self):
        profile = UserProfile(
            style="semi-absentee",
            day_to_day="gm-operator",
            work_location="home",
            hours_year1="under-40",
        )
        franchise = make_franchise(tags=["manager-run"])
        # style 1.0, day-to-day high, location neutral, hours high
        assert score_style(profile, franchise, extended=True) == 89

    def test_extended_hands_on_hours(self):
        profile = UserProfile(style="owner-operator", hours_year1="under-40")
        franchise = make_franchise(tags=["owner-operator"])
        # (1.0 * 0.35 + 0.2 * 0.15) / 0.5
        assert score_style(profile, franchise, extended=True) == 76

    def test_extended_keeps_hard_mismatch_without_other_answers(self):
        profile = UserProfile(style="home-based")
        franchise = make_franchise(tags=["storefront"])
        assert score_style(profile, franchise, extended=True) == 5

    def test_employee_alignment(self):
        staffed = make_franchise(tags=["hourly-staff"])
        lean = make_franchise(tags=["solo"])
        assert employee_alignment("no", None, staffed) == 0.2
        assert employee_alignment("no", "1-5", lean) == 1.0
        assert employee_alignment("yes", "20+", staffed) == 1.0
        assert employee_alignment(None, None, staffed) == 0.5
        assert employee_alignment("indifferent", "6-10", lean) == 0.5


class TestRiskScorer:
    """Tests for risk tolerance alignment."""

    @pytest.fixture
    def young_franchise(self):
        return make_franchise(
            investment_min=80_000,
            investment_max=120_000,
            unit_count=10,
            year_founded=2022,
            avg_revenue=600_000,
        )

    @pytest.fixture
    def mature_franchise(self):
        return make_franchise(
            investment_min=900_000,
            investment_max=1_800_000,
            unit_count=1200,
            year_founded=1978,
            avg_revenue=1_900_000,
        )

    def test_young_franchise_by_tolerance(self, young_franchise):
        scores = {
            tolerance: score_risk(UserProfile(risk_tolerance=tolerance), young_franchise,
                                  current_year=CURRENT_YEAR)
            for tolerance in ("conservative", "moderate", "aggressive")
        }
        assert scores == {"conservative": 30, "moderate": 42, "aggressive": 64}
        assert scores["conservative"] < scores["moderate"] < scores["aggressive"]

    def test_mature_franchise_by_tolerance(self, mature_franchise):
        scores = {
            tolerance: score_risk(UserProfile(risk_tolerance=tolerance), mature_franchise,
                                  current_year=CURRENT_YEAR)
            for tolerance in ("conservative", "moderate", "aggressive")
        }
        assert scores == {"conservative": 65, "moderate": 82, "aggressive": 88}

    @pytest.mark.parametrize("tolerance", [None, "", "yolo"])
    def test_unknown_tolerance_is_neutral(self, tolerance, young_franchise):
        profile = UserProfile(risk_tolerance=tolerance)
        assert score_risk(profile, young_franchise, current_year=CURRENT_YEAR) == 50

    def test_missing_revenue_counts_as_zero(self):
        franchise = make_franchise(avg_revenue=None, unit_count=0)
        profile = UserProfile(risk_tolerance="aggressive")
        assert score_risk(profile, franchise, current_year=CURRENT_YEAR) == 44

    def test_risk_signals(self, young_franchise):
        signals = risk_signals(young_franchise, CURRENT_YEAR)
        assert signals.investment_risk == pytest.approx(0.2)
        assert signals.proven == pytest.approx(0.0125)
        assert signals.revenue == pytest.approx(0.4)
        assert signals.maturity == pytest.approx(2 / 30)

    def test_future_founding_year_clamps(self):
        signals = risk_signals(make_franchise(year_founded=2030), CURRENT_YEAR)
        assert signals.maturity == 0.0

    def test_extended_with_only_tolerance_matches_classic(self, young_franchise):
        profile = UserProfile(risk_tolerance="moderate")
        assert score_risk(profile, young_franchise, extended=True, current_year=CURRENT_YEAR) == 42

    def test_closure_penalty_for_intolerant_buyer(self):
        profile = UserProfile(closed_units_tolerance=False)
        heavy = make_franchise(unit_count=100, units_closed=20)
        light = make_franchise(unit_count=600, units_closed=6)
        few = make_franchise(unit_count=100, units_closed=5)
        assert closure_tolerance(profile, heavy) == pytest.approx(0.1)
        assert closure_tolerance(profile, light) == pytest.approx(0.56)
        assert closure_tolerance(profile, few) == 1.0

    def test_tolerant_buyer_is_not_penalized(self):
        profile = UserProfile(closed_units_tolerance=True)
        assert closure_tolerance(profile, make_franchise(unit_count=100, units_closed=20)) == 1.0

    def test_litigation_intolerance(self):
        profile = UserProfile(litigation_tolerance=False)
        assert closure_tolerance(profile, make_franchise(tags=["litigation"])) == 0.5
        assert closure_tolerance(profile, make_franchise(tags=[])) == 1.0

    def test_passive_alignment(self):
        assert passive_alignment(True, make_franchise(tags=["manager-run"])) == 1.0
        assert passive_alignment(True, make_franchise(tags=["hands-on"])) == 0.2
        assert passive_alignment(True, make_franchise(tags=[])) == 0.5
        assert passive_alignment(False, make_franchise(tags=["hands-on"])) == 1.0
        assert passive_alignment(False, make_franchise(tags=[])) == 0.7

    def test_exit_and_timeline_alignment(self):
        signals = RiskSignals(investment_risk=0.5, proven=0.5, revenue=1.0, maturity=1.0)
        assert exit_alignment("growth-exit", signals) == pytest.approx(0.85)
        assert exit_alignment("long-term", signals) == pytest.approx(0.65)
        assert exit_alignment("no-strategy", signals) == 0.5
        assert timeline_alignment("within-3", signals) == pytest.approx(0.5)
        assert timeline_alignment("12+", signals) == pytest.approx(0.95)

    def test_extended_blend(self, young_franchise):
        profile = UserProfile(
            risk_tolerance="aggressive",
            passive_investor=True,
            timeline_to_open="within-3",
        )
        # core 0.63925 @0.40, passive neutral 0.5 @0.15, timeline 0.0125 @0.15
        assert score_risk(profile, young_franchise, extended=True, current_year=CURRENT_YEAR) == 48


class TestExperienceScorer:
    """Tests for background vs. franchise complexity."""

    def test_neutral_without_answers(self):
        assert score_experience(UserProfile(), make_franchise()) == 50

    def test_neutral_ignores_unrelated_answers(self):
        profile = UserProfile(age_group="40-50", budget="100-200")
        assert score_experience(profile, make_franchise()) == 50

    @pytest.mark.parametrize("overrides,expected", [
        ({"investment_min": 300_000, "investment_max": 500_000}, Complexity.HIGH),
        ({"unit_count": 600}, Complexity.HIGH),
        ({"investment_min": 50_000, "investment_max": 150_000, "unit_count": 50}, Complexity.LOW),
        ({"unit_count": 50}, Complexity.MEDIUM),
    ])
    def test_complexity(self, overrides, expected):
        assert franchise_complexity(make_franchise(**overrides)) == expected

    def test_management_scaled_by_complexity(self):
        high = make_franchise(unit_count=600)
        low = make_franchise(investment_min=50_000, investment_max=150_000, unit_count=50)
        assert score_experience(UserProfile(management_years="10+"), high) == 100
        assert score_experience(UserProfile(management_years="2-5"), high) == 35
        assert score_experience(UserProfile(management_years="2-5"), low) == 100

    def test_prior_ownership(self):
        high = make_franchise(unit_count=600)
        low = make_franchise(investment_min=50_000, investment_max=150_000, unit_count=50)
        assert score_experience(UserProfile(prior_ownership=True), high) == 100
        assert score_experience(UserProfile(prior_ownership=False), high) == 30
        assert score_experience(UserProfile(prior_ownership=False), low) == 60

    def test_skills_curve(self):
        profile = UserProfile(
            marketing_level="intermediate",
            operations_level="intermediate",
            finance_level="intermediate",
        )
        high = make_franchise(unit_count=600)
        medium = make_franchise(unit_count=50)
        low = make_franchise(investment_min=50_000, investment_max=150_000, unit_count=50)
        assert score_experience(profile, high) == 55
        assert score_experience(profile, medium) == 67
        assert score_experience(profile, low) == 82

    def test_education_weighs_more_for_professional_categories(self):
        profile = UserProfile(management_years="none", education="post-grad")
        small = {"investment_min": 50_000, "investment_max": 150_000, "unit_count": 50}
        assert score_experience(profile, make_franchise(category="B2B Services", **small)) == 45
        assert score_experience(profile, make_franchise(category="Retail", **small)) == 33

    def test_unknown_education_is_neutral(self):
        assert score_experience(UserProfile(education="phd-in-vibes"), make_franchise()) == 50


class TestGrowthScorer:
    """Tests for growth ambition and commitment."""

    def test_neutral_without_answers(self):
        assert score_growth(UserProfile(), make_franchise()) == 50

    def test_single_hours_answer_is_not_enough(self):
        assert score_growth(UserProfile(hours_year1="50+"), make_franchise()) == 50

    def test_unit_preference(self):
        profile = UserProfile(unit_preference="multiple")
        assert score_growth(profile, make_franchise(tags=["scalable"])) == 100
        assert score_growth(profile, make_franchise(tags=[])) == 30

    def test_hours_trend(self):
        assert hours_trend_fit("50+", "under-40", scalable=True) == 1.0
        assert hours_trend_fit("50+", "under-40", scalable=False) == 0.6
        assert hours_trend_fit("40-50", "40-50", scalable=True) == 0.5
        assert hours_trend_fit("under-40", "50+", scalable=True) == 0.4
        assert hours_trend_fit("lots", "50+", scalable=True) == 0.5

    def test_leadership_fit(self):
        assert leadership_fit("transformational", scalable=True) == 1.0
        assert leadership_fit("transformational", scalable=False) == 0.5
        assert leadership_fit("autocratic", scalable=False) == 0.8
        assert leadership_fit("autocratic", scalable=True) == 0.5
        assert leadership_fit("servant", scalable=True) == 0.6

    def test_commitment_and_duration(self):
        franchise = make_franchise()
        assert score_growth(UserProfile(commitment_level="ready"), franchise) == 100
        assert score_growth(UserProfile(commitment_level="dream"), franchise) == 25
        assert score_growth(UserProfile(considering_duration="2+"), franchise) == 100

    def test_blend(self):
        profile = UserProfile(unit_preference="single", commitment_level="interested")
        # (0.9 * 0.30 + 0.55 * 0.25) / 0.55
        assert score_growth(profile, make_franchise(tags=[])) == 74
