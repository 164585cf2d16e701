"""Franchise Fit Scoring Engine.

Ranks a franchise catalog against a buyer profile with an explainable
0-100 fit score.
"""

from .catalog import (
    CatalogLoadError,
    FranchiseFitError,
    ProfileLoadError,
    filter_catalog,
    find_franchise,
    load_catalog,
    load_profile,
    parse_catalog,
    parse_profile,
)
from .explainer import FitExplainer
from .schema import (
    Dimension,
    FitExplanation,
    FranchiseRecord,
    MatchTier,
    ScoreBreakdown,
    ScoredFranchise,
    ScoringModel,
    UserProfile,
)
from .scorer import FranchiseScorer, composite_score, compute_breakdown, score_all, score_one

__version__ = "1.0.0"

__all__ = [
    "CatalogLoadError",
    "Dimension",
    "FitExplainer",
    "FitExplanation",
    "FranchiseFitError",
    "FranchiseRecord",
    "FranchiseScorer",
    "MatchTier",
    "ProfileLoadError",
    "ScoreBreakdown",
    "ScoredFranchise",
    "ScoringModel",
    "UserProfile",
    "composite_score",
    "compute_breakdown",
    "filter_catalog",
    "find_franchise",
    "load_catalog",
    "load_profile",
    "parse_catalog",
    "parse_profile",
    "score_all",
    "score_one",
]
