"""Scorer - aggregation and ranking for the Franchise Fit Scoring Engine.

Runs every dimension scorer for a (profile, franchise) pair, combines the
breakdown into a 1-100 composite with fixed weights, and ranks a catalog.
"""

import datetime
import logging
from typing import Iterable, Optional, Union

from .config import ClassicWeightsConfig, FullWeightsConfig, get_config
from .dimensions import (
    score_category,
    score_experience,
    score_financial,
    score_growth,
    score_risk,
    score_style,
)
from .ranges import clamp, round_half_up
from .schema import (
    FranchiseRecord,
    ScoreBreakdown,
    ScoredFranchise,
    ScoringModel,
    UserProfile,
)

logger = logging.getLogger(__name__)

MIN_COMPOSITE = 1
MAX_COMPOSITE = 100


def resolve_model(profile: UserProfile, model: ScoringModel = ScoringModel.AUTO) -> ScoringModel:
    """Pick the concrete scoring model for a profile."""
    if model != ScoringModel.AUTO:
        return model
    return ScoringModel.FULL if profile.is_extended else ScoringModel.CLASSIC


def compute_breakdown(
    profile: UserProfile,
    franchise: FranchiseRecord,
    model: ScoringModel = ScoringModel.AUTO,
    current_year: Optional[int] = None,
) -> ScoreBreakdown:
    """Score every dimension of the selected model for one franchise."""
    model = resolve_model(profile, model)
    extended = model == ScoringModel.FULL

    breakdown = {
        "financial": score_financial(profile, franchise, extended),
        "category": score_category(profile, franchise, extended),
        "style": score_style(profile, franchise, extended),
        "risk": score_risk(profile, franchise, extended, current_year),
    }
    if extended:
        breakdown["experience"] = score_experience(profile, franchise)
        breakdown["growth"] = score_growth(profile, franchise)

    return ScoreBreakdown(**breakdown)


class FranchiseScorer:
    """Scores and ranks franchises against a buyer profile.

    Scoring principles:
    - Every dimension is an independent pure function of (profile, franchise)
    - Missing answers degrade to neutral scores, never to errors
    - The composite is computed from the rounded breakdown, so a result's
      score can always be re-derived from the breakdown it carries
    - The composite never drops below 1, so every franchise stays ranked
    """

    def __init__(
        self,
        full_weights: Optional[FullWeightsConfig] = None,
        classic_weights: Optional[ClassicWeightsConfig] = None,
        model: Union[ScoringModel, str] = ScoringModel.AUTO,
        current_year: Optional[int] = None,
    ):
        """Initialize scorer with optional custom weights.

        Args:
            full_weights: Six-dimension weights (default from config)
            classic_weights: Four-dimension weights (default from config)
            model: Scoring model to apply, or AUTO to pick per profile
            current_year: Year used for franchise age; defaults to today
        """
        cfg = get_config()
        self.full_weights = full_weights or cfg.full_weights
        self.classic_weights = classic_weights or cfg.classic_weights
        if isinstance(model, str) and not isinstance(model, ScoringModel):
            model = ScoringModel.from_string(model)
        self.model = model
        self.current_year = current_year or datetime.date.today().year

    def score_one(self, profile: UserProfile, franchise: FranchiseRecord) -> ScoreBreakdown:
        """Compute the per-dimension breakdown for one franchise."""
        return compute_breakdown(profile, franchise, self.model, self.current_year)

    def composite_score(self, breakdown: ScoreBreakdown) -> int:
        """Weighted composite of a breakdown, clamped to [1, 100]."""
        if breakdown.scoring_model == ScoringModel.FULL:
            weights = self.full_weights.model_dump()
        else:
            weights = self.classic_weights.model_dump()

        total = sum(score * weights[dim.value] for dim, score in breakdown.items())
        return round_half_up(clamp(total, MIN_COMPOSITE, MAX_COMPOSITE))

    def score_franchise(self, profile: UserProfile, franchise: FranchiseRecord) -> ScoredFranchise:
        """Score one franchise and attach the result to its record."""
        breakdown = self.score_one(profile, franchise)
        score = self.composite_score(breakdown)
        logger.debug(
            "Scored %s: %d (%s)",
            franchise.slug,
            score,
            ", ".join(f"{dim.value}={value}" for dim, value in breakdown.items()),
        )
        return ScoredFranchise(
            **franchise.model_dump(),
            score=score,
            score_breakdown=breakdown,
        )

    def score_all(
        self,
        profile: UserProfile,
        catalog: Iterable[FranchiseRecord],
    ) -> list[ScoredFranchise]:
        """Score every franchise and return them sorted by score, highest first.

        Ties keep catalog order.

        Args:
            profile: Buyer questionnaire answers
            catalog: Franchise records (not modified)

        Returns:
            The full catalog as scored records
        """
        model = resolve_model(profile, self.model)
        logger.info("Scoring catalog with the %s model", model.value)

        scored = [self.score_franchise(profile, franchise) for franchise in catalog]
        scored.sort(key=lambda s: s.score, reverse=True)
        return scored


def score_one(profile: UserProfile, franchise: FranchiseRecord) -> ScoreBreakdown:
    """Breakdown for one franchise with the default scorer."""
    return FranchiseScorer().score_one(profile, franchise)


def score_all(profile: UserProfile, catalog: Iterable[FranchiseRecord]) -> list[ScoredFranchise]:
    """Rank a catalog with the default scorer."""
    return FranchiseScorer().score_all(profile, catalog)


def composite_score(breakdown: ScoreBreakdown) -> int:
    """Composite for a breakdown with the configured weights."""
    return FranchiseScorer().composite_score(breakdown)
