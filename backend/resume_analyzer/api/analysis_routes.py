from fastapi import APIRouter, UploadFile, File
import logging

from resume_analyzer.models.analysis_models import (
    AnalysisRequest,
    ErrorResponse,
    Scorecard,
    UploadCandidate,
)
from resume_analyzer.services.analysis_service import analyze_resume_text
from resume_analyzer.services.exceptions import AnalysisError, UpstreamError
from resume_analyzer.services.intake_service import extract_text, validate_upload

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {
    status: {"model": ErrorResponse}
    for status in (400, 402, 413, 415, 429, 500, 502, 503)
}


async def _analyze(resume_text: str | None) -> Scorecard:
    """Run the analysis, turning unexpected failures into UpstreamError."""
    try:
        return await analyze_resume_text(resume_text)
    except AnalysisError:
        raise
    except Exception as e:
        logger.exception("Unexpected error in resume analysis")
        raise UpstreamError(detail=str(e)) from e


@router.post("/analyze-resume", response_model=Scorecard, responses=_ERROR_RESPONSES)
async def analyze_resume(req: AnalysisRequest):
    """Score raw resume text. Body: {"resumeText": "..."}."""
    return await _analyze(req.resume_text)


@router.post("/resumes/analyze", response_model=Scorecard, responses=_ERROR_RESPONSES)
async def analyze_uploaded_resume(file: UploadFile = File(...)):
    """Upload a resume (PDF/DOC/DOCX/TXT, max 5 MB), read it as text and score it."""
    file_bytes = await file.read()
    candidate = UploadCandidate.from_bytes(
        content=file_bytes,
        content_type=file.content_type or "",
        file_name=file.filename or "resume",
    )

    validate_upload(candidate)
    return await _analyze(extract_text(candidate))
