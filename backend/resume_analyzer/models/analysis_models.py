from pydantic import BaseModel, Field
from typing import Optional, Union


# ── Upload ──────────────────────────────────────────────────────────────────


class UploadCandidate(BaseModel):
    """A file selected for analysis, before validation."""

    content: bytes
    content_type: str  # declared MIME type
    size: int  # declared size in bytes
    file_name: str

    @classmethod
    def from_bytes(cls, content: bytes, content_type: str, file_name: str) -> "UploadCandidate":
        return cls(
            content=content,
            content_type=content_type,
            size=len(content),
            file_name=file_name,
        )


# ── Request Models ──────────────────────────────────────────────────────────


class AnalysisRequest(BaseModel):
    """Body of POST /api/analyze-resume."""

    resume_text: Optional[str] = Field(default=None, alias="resumeText")

    model_config = {"populate_by_name": True}


# ── Response Models ─────────────────────────────────────────────────────────


class Scorecard(BaseModel):
    """
    Normalized resume analysis. Scores are expected in 0-100 but passed through
    unclamped, fractional values included. Sequences are tuples so a scorecard
    cannot be edited in place.
    """

    overall_score: Union[int, float] = Field(alias="overallScore")
    ats_score: Union[int, float] = Field(alias="atsScore")
    skills_score: Union[int, float] = Field(alias="skillsScore")
    experience_score: Union[int, float] = Field(alias="experienceScore")
    strengths: tuple[str, ...]  # 3-5 expected
    improvements: tuple[str, ...]  # 3-5 expected
    keywords: tuple[str, ...]  # 8-12 expected
    suggestions: tuple[str, ...]  # 3-5 expected

    model_config = {"populate_by_name": True, "frozen": True}


class ErrorResponse(BaseModel):
    """Error body returned by the analysis endpoints."""

    error: str


class AnalysisOutcome(BaseModel):
    """Result of one pipeline run: a scorecard or a user-facing error message."""

    run_id: int
    scorecard: Optional[Scorecard] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.scorecard is not None
