"""
Analysis error taxonomy.

Every error a caller can see derives from AnalysisError and carries a stable
`kind`, the HTTP status used by the API layer, and a user-facing message.
Malformed model output is deliberately absent: the normalizer absorbs it.
"""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for failures that stop an analysis run."""

    kind = "analysis_error"
    status_code = 500
    default_message = "Failed to analyze resume. Please try again."

    def __init__(self, message: str | None = None, *, detail: str | None = None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


# ── Intake ───────────────────────────────────────────────────────────────────


class InvalidFileType(AnalysisError):
    """Declared MIME type is not PDF, DOC, DOCX or plain text."""

    kind = "invalid_file_type"
    status_code = 415
    default_message = "Please upload a PDF, DOC, DOCX, or TXT file"


class FileTooLarge(AnalysisError):
    """Declared size exceeds the upload limit."""

    kind = "file_too_large"
    status_code = 413
    default_message = "Please upload a file smaller than 5MB"


class MissingInput(AnalysisError):
    kind = "missing_input"
    status_code = 400
    default_message = "Resume text is required"


# ── Service / Upstream ───────────────────────────────────────────────────────


class ServiceMisconfigured(AnalysisError):
    """The analysis backend has no service credential."""

    kind = "service_misconfigured"
    status_code = 500
    default_message = "AI service not configured"


class Unauthorized(AnalysisError):
    """The upstream rejected the configured credential."""

    kind = "unauthorized"
    status_code = 502
    default_message = "AI service rejected the configured credential"


class ServiceUnavailable(AnalysisError):
    kind = "service_unavailable"
    status_code = 503
    default_message = "AI service is unavailable. Please try again later."


class RateLimited(AnalysisError):
    kind = "rate_limited"
    status_code = 429
    default_message = "Rate limit exceeded. Please try again in a moment."


class QuotaExhausted(AnalysisError):
    kind = "quota_exhausted"
    status_code = 402
    default_message = "AI service credits exhausted. Please add credits to continue."


class UpstreamError(AnalysisError):
    """Any other non-success response from the model call."""

    kind = "upstream_error"
    status_code = 500


# Status code → error class, shared by the LLM service and the HTTP client
STATUS_ERRORS: dict[int, type[AnalysisError]] = {
    401: Unauthorized,
    402: QuotaExhausted,
    403: Unauthorized,
    429: RateLimited,
    503: ServiceUnavailable,
}


def error_for_status(status_code: int | None) -> type[AnalysisError]:
    """Return the error class for an upstream status, UpstreamError if unknown."""
    if status_code is None:
        return UpstreamError
    return STATUS_ERRORS.get(status_code, UpstreamError)
