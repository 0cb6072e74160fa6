from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from resume_checker.analysis import DisplayItem, FeatureSet, ScoreSet


class AnalyzeTextRequest(BaseModel):
    resume_text: str = ""


class ResumeFileMeta(BaseModel):
    filename: str = Field(default="", max_length=255)
    extension: str = Field(default="", max_length=20)
    size_bytes: int = Field(default=0, ge=0)
    warnings: list[str] = Field(default_factory=list)


class AnalysisResponse(BaseModel):
    features: FeatureSet
    scores: ScoreSet
    issues: list[str]
    suggestions: list[str]
    display_items: list[DisplayItem] = Field(default_factory=list)
    analysis_ms: float = Field(default=0.0, ge=0.0)
    generated_at: datetime
    file: ResumeFileMeta | None = None
