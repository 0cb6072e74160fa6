from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from .pipeline import AnalysisResult

DisplayCategory = Literal["success", "excellent", "pro-tip", "warning", "info", "error"]

MAX_DISPLAY_SUGGESTIONS = 10
ISSUE_PREFIX = "❌ "


class DisplayItem(BaseModel):
    text: str
    category: DisplayCategory


def categorize_suggestion(suggestion: str) -> DisplayCategory:
    if "✓" in suggestion:
        return "success"
    if "🏆" in suggestion or "Your resume is excellent" in suggestion:
        return "excellent"
    if "⚡ Pro Tip" in suggestion:
        return "pro-tip"
    if "💡" in suggestion:
        return "info"
    return "warning"


def build_display_items(
    result: AnalysisResult,
    max_suggestions: int = MAX_DISPLAY_SUGGESTIONS,
) -> list[DisplayItem]:
    """Suggestions (capped) first, then every issue marked as an error."""
    items = [
        DisplayItem(text=suggestion, category=categorize_suggestion(suggestion))
        for suggestion in result.suggestions[:max_suggestions]
    ]
    items.extend(DisplayItem(text=f"{ISSUE_PREFIX}{issue}", category="error") for issue in result.issues)
    return items
