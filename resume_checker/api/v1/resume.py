from fastapi import APIRouter, File, HTTPException, Request, UploadFile

from resume_checker.core.config import settings
from resume_checker.core.rate_limit import rate_limit
from resume_checker.schemas.resume import AnalysisResponse, AnalyzeTextRequest
from resume_checker.services.resume_service import (
    ResumeIntakeError,
    analyze_resume_text,
    analyze_resume_upload,
)

router = APIRouter()


def _raise_intake_http_error(exc: ResumeIntakeError) -> None:
    raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.post("/resume/analyze", response_model=AnalysisResponse)
@rate_limit()
async def resume_analyze(request: Request, payload: AnalyzeTextRequest):
    _ = request
    try:
        return analyze_resume_text(payload.resume_text)
    except ResumeIntakeError as exc:
        _raise_intake_http_error(exc)


@router.post("/resume/analyze-file", response_model=AnalysisResponse)
@rate_limit()
async def resume_analyze_file(request: Request, file: UploadFile = File(...)):
    _ = request
    # One byte past the cap is enough to detect an oversized upload.
    content = await file.read(settings.max_upload_bytes + 1)
    try:
        return analyze_resume_upload(file.filename or "", content)
    except ResumeIntakeError as exc:
        _raise_intake_http_error(exc)
