"""Fixed wordlists and patterns used by feature extraction and scoring.

Every vocabulary is an immutable tuple so the order of iteration (and hence
of any derived output) never changes between calls.
"""

from __future__ import annotations

import re

ACTION_VERBS: tuple[str, ...] = (
    "managed",
    "led",
    "developed",
    "created",
    "implemented",
    "designed",
    "built",
    "improved",
    "increased",
    "decreased",
    "reduced",
    "achieved",
    "accomplished",
    "organized",
    "coordinated",
    "directed",
    "established",
    "enhanced",
    "expanded",
    "facilitated",
    "generated",
    "handled",
    "initiated",
    "launched",
    "optimized",
    "oversaw",
    "produced",
    "promoted",
    "provided",
    "reorganized",
    "resolved",
    "resulted",
    "spearheaded",
    "streamlined",
    "structured",
    "supervised",
    "transformed",
    "upgraded",
)

SUMMARY_PHRASES: tuple[str, ...] = (
    "summary",
    "objective",
    "professional profile",
    "about",
)

ATS_KEYWORDS: tuple[str, ...] = (
    "experience",
    "skills",
    "education",
    "certification",
    "programming",
    "technical",
    "communication",
    "leadership",
    "project",
    "achievement",
)

SECTION_NAMES: tuple[str, ...] = (
    "experience",
    "education",
    "skills",
    "certifications",
    "projects",
    "achievements",
)

OUTCOME_WORDS: tuple[str, ...] = (
    "increase",
    "decrease",
    "growth",
    "improvement",
    "revenue",
    "profit",
    "cost",
    "savings",
    "save",
)

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_PATTERN = re.compile(r"(?<!\d)\d{3}[-. ]?\d{3}[-. ]?\d{4}(?!\d)")
METRICS_PATTERN = re.compile(
    r"\d+%|\$\d+|\d+[KMB]?\s*(?:" + "|".join(OUTCOME_WORDS) + r")",
    re.IGNORECASE,
)
SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+")
