from .features import FeatureSet, extract_features
from .feedback import Feedback, FeedbackBuilder, generate_feedback
from .pipeline import DEFAULT_ANALYSIS, AnalysisResult, analyze
from .presentation import DisplayItem, build_display_items, categorize_suggestion
from .scoring import (
    ScoreSet,
    aggregate_scores,
    ats_score,
    formatting_score,
    impact_score,
    readability_score,
    score_features,
)

__all__ = [
    "FeatureSet",
    "extract_features",
    "ScoreSet",
    "readability_score",
    "ats_score",
    "impact_score",
    "formatting_score",
    "aggregate_scores",
    "score_features",
    "Feedback",
    "FeedbackBuilder",
    "generate_feedback",
    "AnalysisResult",
    "DEFAULT_ANALYSIS",
    "analyze",
    "DisplayItem",
    "build_display_items",
    "categorize_suggestion",
]
