from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from resume_checker.core.config.scoring import get_scoring_number

from .vocabulary import (
    ACTION_VERBS,
    ATS_KEYWORDS,
    EMAIL_PATTERN,
    METRICS_PATTERN,
    PHONE_PATTERN,
    SECTION_NAMES,
    SENTENCE_SPLIT_PATTERN,
    SUMMARY_PHRASES,
)


class FeatureSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    word_count: int = Field(default=0, ge=0)
    has_contact_info: bool = False
    has_summary: bool = False
    has_metrics: bool = False
    action_verb_count: int = Field(default=0, ge=0)
    sentence_count: int = Field(default=0, ge=0)
    keyword_matches: int = Field(default=0, ge=0)
    average_word_length: float = Field(default=0.0, ge=0.0)
    has_line_breaks: bool = False
    section_headers: tuple[str, ...] = ()


def split_words(text: str) -> list[str]:
    return text.split()


def count_vocabulary_matches(lowered: str, vocabulary: Iterable[str]) -> int:
    """Count distinct vocabulary entries contained in already-lowercased text."""
    return sum(1 for entry in vocabulary if entry in lowered)


def count_sentences(text: str) -> int:
    fragments = [part for part in SENTENCE_SPLIT_PATTERN.split(text) if part.strip()]
    return max(1, len(fragments))


def has_contact_info(text: str) -> bool:
    return bool(EMAIL_PATTERN.search(text)) and bool(PHONE_PATTERN.search(text))


def has_metrics(text: str) -> bool:
    return METRICS_PATTERN.search(text) is not None


def find_section_headers(lowered: str) -> tuple[str, ...]:
    return tuple(name for name in SECTION_NAMES if name in lowered)


def _average_word_length(words: list[str], sample_size: int) -> float:
    sample = words[:sample_size]
    if not sample:
        return 0.0
    return sum(len(word) for word in sample) / len(sample)


def extract_features(text: str) -> FeatureSet | None:
    """Derive the FeatureSet for ``text``.

    Returns ``None`` when the text is blank or shorter than the minimum word
    count; callers substitute the fixed default analysis in that case.
    """
    if not text or not text.strip():
        return None

    lowered = text.lower()
    words = split_words(lowered)
    min_words = int(get_scoring_number("analysis.min_word_count", 50))
    if len(words) < min_words:
        return None

    sample_size = int(get_scoring_number("analysis.readability_sample_words", 500))
    return FeatureSet(
        word_count=len(words),
        has_contact_info=has_contact_info(text),
        has_summary=any(phrase in lowered for phrase in SUMMARY_PHRASES),
        has_metrics=has_metrics(text),
        action_verb_count=count_vocabulary_matches(lowered, ACTION_VERBS),
        sentence_count=count_sentences(text),
        keyword_matches=count_vocabulary_matches(lowered, ATS_KEYWORDS),
        average_word_length=_average_word_length(words, sample_size),
        has_line_breaks="\n" in text,
        section_headers=find_section_headers(lowered),
    )
