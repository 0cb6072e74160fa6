from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from resume_checker.core.config.scoring import get_scoring_number

from .features import FeatureSet
from .vocabulary import ACTION_VERBS, ATS_KEYWORDS


class ScoreSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    readability: int = Field(ge=0, le=100)
    ats: int = Field(ge=0, le=100)
    impact: int = Field(ge=0, le=100)
    formatting: int = Field(ge=0, le=100)
    overall: int = Field(ge=0, le=100)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp_score(value: float) -> int:
    return round_half_up(max(0.0, min(100.0, value)))


def readability_score(features: FeatureSet) -> int:
    """Flesch reading-ease variant using average word length in place of syllables."""
    if features.sentence_count == 0:
        return 0
    avg_sentence_length = features.word_count / features.sentence_count
    syllable_proxy = features.average_word_length / get_scoring_number("readability.syllable_normalizer", 5)
    score = (
        get_scoring_number("readability.base", 206.835)
        - get_scoring_number("readability.sentence_length_weight", 1.015) * avg_sentence_length
        - get_scoring_number("readability.word_length_weight", 84.6) * syllable_proxy
    )
    return _clamp_score(score)


def ats_score(features: FeatureSet, total_keywords: int = len(ATS_KEYWORDS)) -> int:
    score = get_scoring_number("ats.base", 50)
    if features.has_contact_info:
        score += get_scoring_number("ats.contact_bonus", 10)
    if features.has_summary:
        score += get_scoring_number("ats.summary_bonus", 10)
    if total_keywords > 0:
        score += (features.keyword_matches / total_keywords) * get_scoring_number("ats.keyword_weight", 20)
    score += min(
        get_scoring_number("ats.word_count_cap", 10),
        features.word_count / get_scoring_number("ats.word_count_divisor", 50),
    )
    return _clamp_score(score)


def impact_score(features: FeatureSet, total_action_verbs: int = len(ACTION_VERBS)) -> int:
    score = get_scoring_number("impact.base", 40)
    if total_action_verbs > 0:
        score += (features.action_verb_count / total_action_verbs) * get_scoring_number("impact.action_verb_weight", 30)
    if features.has_metrics:
        score += get_scoring_number("impact.metrics_bonus", 20)
    score += min(
        get_scoring_number("impact.sentence_cap", 10),
        features.sentence_count / get_scoring_number("impact.sentence_divisor", 5),
    )
    return _clamp_score(score)


def formatting_score(features: FeatureSet) -> int:
    score = get_scoring_number("formatting.base", 50)
    if features.has_line_breaks:
        score += get_scoring_number("formatting.line_break_bonus", 15)
    score += min(
        get_scoring_number("formatting.section_cap", 20),
        len(features.section_headers) * get_scoring_number("formatting.points_per_section", 5),
    )
    return _clamp_score(score)


def aggregate_scores(readability: int, ats: int, impact: int, formatting: int) -> ScoreSet:
    overall = round_half_up((readability + ats + impact + formatting) / 4)
    return ScoreSet(
        readability=readability,
        ats=ats,
        impact=impact,
        formatting=formatting,
        overall=max(0, min(100, overall)),
    )


def score_features(features: FeatureSet) -> ScoreSet:
    return aggregate_scores(
        readability_score(features),
        ats_score(features, len(ATS_KEYWORDS)),
        impact_score(features, len(ACTION_VERBS)),
        formatting_score(features),
    )
