from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from .features import FeatureSet, extract_features
from .feedback import generate_feedback
from .scoring import ScoreSet, score_features

logger = logging.getLogger(__name__)

SHORT_CONTENT_ISSUE = "Resume content is too short or empty"
SHORT_CONTENT_SUGGESTION = "Add at least 200 words to your resume"


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    features: FeatureSet
    scores: ScoreSet
    issues: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()


DEFAULT_ANALYSIS = AnalysisResult(
    features=FeatureSet(),
    scores=ScoreSet(readability=0, ats=25, impact=0, formatting=25, overall=12),
    issues=(SHORT_CONTENT_ISSUE,),
    suggestions=(SHORT_CONTENT_SUGGESTION,),
)


def analyze(text: str) -> AnalysisResult:
    features = extract_features(text or "")
    if features is None:
        logger.debug("resume_analysis_short_circuit chars=%s", len(text or ""))
        return DEFAULT_ANALYSIS

    scores = score_features(features)
    feedback = generate_feedback(features, scores)
    return AnalysisResult(
        features=features,
        scores=scores,
        issues=feedback.issues,
        suggestions=feedback.suggestions,
    )
