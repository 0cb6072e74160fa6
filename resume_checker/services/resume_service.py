from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from resume_checker.analysis import AnalysisResult, analyze, build_display_items
from resume_checker.core.config import settings
from resume_checker.parsing import ResumeParseError, parse_document
from resume_checker.schemas.resume import AnalysisResponse, ResumeFileMeta
from resume_checker.services.file_security import (
    ALLOWED_RESUME_EXTENSIONS,
    extension_from_filename,
    safe_str,
    validate_upload_signature,
)

logger = logging.getLogger(__name__)


class ResumeIntakeError(ValueError):
    status_code = 422


class ResumeTooLargeError(ResumeIntakeError):
    status_code = 413


class UnsupportedResumeTypeError(ResumeIntakeError):
    status_code = 415


class ResumeReadError(ResumeIntakeError):
    status_code = 422


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _format_limit(max_bytes: int) -> str:
    megabytes = max_bytes / (1024 * 1024)
    if megabytes >= 1:
        return f"{megabytes:g}MB"
    return f"{max_bytes} bytes"


def _build_response(
    result: AnalysisResult,
    started: float,
    file_meta: ResumeFileMeta | None = None,
) -> AnalysisResponse:
    elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
    logger.info(
        "resume_analysis_completed words=%s overall=%s issues=%s elapsed_ms=%s",
        result.features.word_count,
        result.scores.overall,
        len(result.issues),
        elapsed_ms,
    )
    return AnalysisResponse(
        features=result.features,
        scores=result.scores,
        issues=list(result.issues),
        suggestions=list(result.suggestions),
        display_items=build_display_items(result),
        analysis_ms=elapsed_ms,
        generated_at=_utc_now(),
        file=file_meta,
    )


def analyze_resume_text(text: str, max_bytes: int | None = None) -> AnalysisResponse:
    limit = settings.max_upload_bytes if max_bytes is None else max_bytes
    if len(text.encode("utf-8", errors="ignore")) > limit:
        raise ResumeTooLargeError(f"Resume text too large (max {_format_limit(limit)}).")
    started = time.perf_counter()
    return _build_response(analyze(text), started)


def read_resume_upload(filename: str, content: bytes, max_bytes: int | None = None) -> tuple[str, ResumeFileMeta]:
    """Validate an uploaded resume and return its decoded text.

    Raises a :class:`ResumeIntakeError` subclass when the upload is too large,
    of an unsupported type, or cannot be read as text.
    """
    limit = settings.max_upload_bytes if max_bytes is None else max_bytes
    clean_name = safe_str(filename, 255) or "resume.txt"
    if len(content) > limit:
        raise ResumeTooLargeError(f"File too large (max {_format_limit(limit)}).")

    ext = extension_from_filename(clean_name)
    if ext == "doc":
        raise UnsupportedResumeTypeError("Legacy .doc is not supported. Convert to .docx.")
    if not ext:
        raise UnsupportedResumeTypeError("File has no extension. Upload a .txt, .md, .pdf or .docx resume.")
    if ext not in ALLOWED_RESUME_EXTENSIONS:
        raise UnsupportedResumeTypeError(
            f"Unsupported file type '.{ext}'. Upload a .txt, .md, .pdf or .docx resume."
        )

    try:
        validate_upload_signature(filename=clean_name, content=content)
        parsed = parse_document(clean_name, content)
    except ResumeParseError as exc:
        logger.warning("resume_read_failed file=%s: %s", clean_name, exc)
        raise ResumeReadError(str(exc)) from exc
    except ValueError as exc:
        logger.warning("resume_signature_rejected file=%s: %s", clean_name, exc)
        raise ResumeReadError(str(exc)) from exc

    meta = ResumeFileMeta(
        filename=clean_name,
        extension=ext,
        size_bytes=len(content),
        warnings=list(parsed.parsing_warnings),
    )
    return parsed.text, meta


def analyze_resume_upload(filename: str, content: bytes, max_bytes: int | None = None) -> AnalysisResponse:
    started = time.perf_counter()
    text, meta = read_resume_upload(filename, content, max_bytes=max_bytes)
    return _build_response(analyze(text), started, file_meta=meta)
