"""Explainer - human-readable summaries for ranked results.

Turns a score breakdown into a match tier plus the strengths and concerns
that drove it.
"""

from .config import get_config
from .schema import Dimension, FitExplanation, MatchTier, ScoredFranchise


DIMENSION_STRENGTHS = {
    Dimension.FINANCIAL: "Investment fits comfortably within your budget",
    Dimension.CATEGORY: "Matches an industry you are interested in",
    Dimension.STYLE: "Suits the way you want to own and operate",
    Dimension.RISK: "Risk profile lines up with your tolerance",
    Dimension.EXPERIENCE: "Your background matches what this system demands",
    Dimension.GROWTH: "Supports your growth plans and commitment level",
}

DIMENSION_CONCERNS = {
    Dimension.FINANCIAL: "Investment range is a stretch for your budget",
    Dimension.CATEGORY: "Outside the industries you selected",
    Dimension.STYLE: "Operating model differs from your preferred ownership style",
    Dimension.RISK: "Risk profile is out of step with your tolerance",
    Dimension.EXPERIENCE: "System complexity may outpace your current experience",
    Dimension.GROWTH: "Limited alignment with your growth ambitions",
}


class FitExplainer:
    """Generates explanations for scored franchises.

    Configuration:
    - Tier and strength/concern thresholds can be customized via fit-config.yaml
    """

    def __init__(self):
        """Initialize explainer with configuration."""
        cfg = get_config().explainer
        self.excellent_score = cfg.excellent_score
        self.strong_score = cfg.strong_score
        self.fair_score = cfg.fair_score
        self.strength_threshold = cfg.strength_threshold
        self.concern_threshold = cfg.concern_threshold

    def tier(self, score: int) -> MatchTier:
        """Map a composite score to its presentation tier."""
        if score >= self.excellent_score:
            return MatchTier.EXCELLENT
        if score >= self.strong_score:
            return MatchTier.STRONG
        if score >= self.fair_score:
            return MatchTier.FAIR
        return MatchTier.WEAK

    def explain(self, scored: ScoredFranchise, rank: int) -> FitExplanation:
        """Explain one scored franchise.

        Args:
            scored: A franchise from the ranked list
            rank: 1-based position in the ranked list

        Returns:
            Tier, strengths (strongest first) and concerns (weakest first)
        """
        dims = scored.score_breakdown.items()
        strong = sorted(
            (item for item in dims if item[1] >= self.strength_threshold),
            key=lambda item: item[1],
            reverse=True,
        )
        weak = sorted(
            (item for item in dims if item[1] <= self.concern_threshold),
            key=lambda item: item[1],
        )

        return FitExplanation(
            slug=scored.slug,
            name=scored.name,
            score=scored.score,
            tier=self.tier(scored.score),
            rank=rank,
            is_best_match=rank == 1,
            strengths=[f"{d.label}: {DIMENSION_STRENGTHS[d]}" for d, _ in strong],
            concerns=[f"{d.label}: {DIMENSION_CONCERNS[d]}" for d, _ in weak],
        )

    def explain_all(self, ranked: list[ScoredFranchise]) -> list[FitExplanation]:
        """Explain a ranked list, preserving order."""
        return [self.explain(scored, rank) for rank, scored in enumerate(ranked, 1)]
