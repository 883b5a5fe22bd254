"""
Analysis Client - send extracted resume text to the analysis endpoint.

One POST per call, no retries and no client-side timeout. Non-success
responses are mapped back onto the analysis error taxonomy; success bodies go
through the normalizer so callers always get a complete Scorecard.
"""

from __future__ import annotations

import logging

import httpx

from resume_analyzer.config import settings
from resume_analyzer.models.analysis_models import Scorecard
from resume_analyzer.services.exceptions import (
    AnalysisError,
    MissingInput,
    ServiceMisconfigured,
    ServiceUnavailable,
    error_for_status,
)
from resume_analyzer.services.normalizer import normalize_analysis

logger = logging.getLogger(__name__)


class AnalysisClient:
    """HTTP client for POST /api/analyze-resume."""

    def __init__(
        self,
        endpoint_url: str | None = None,
        *,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.endpoint_url = endpoint_url or settings.analysis_endpoint_url
        self._headers = headers or {}
        self._transport = transport

    async def analyze(self, resume_text: str) -> Scorecard:
        """Request an analysis of `resume_text`. Raises AnalysisError on failure."""
        logger.info(f"Requesting analysis from {self.endpoint_url} ({len(resume_text)} chars)")

        async with httpx.AsyncClient(
            headers=self._headers,
            transport=self._transport,
            timeout=None,
        ) as client:
            try:
                resp = await client.post(self.endpoint_url, json={"resumeText": resume_text})
            except httpx.TransportError as e:
                logger.error(f"Analysis endpoint unreachable: {e}")
                raise ServiceUnavailable(detail=str(e)) from e

        if resp.is_success:
            scorecard, _ = normalize_analysis(resp.text)
            return scorecard

        error = _error_from_response(resp)
        logger.error(f"Analysis endpoint returned {resp.status_code}: kind={error.kind}")
        raise error


def _error_from_response(resp: httpx.Response) -> AnalysisError:
    """Build the AnalysisError matching an error response from the endpoint."""
    message = None
    try:
        body = resp.json()
        if isinstance(body, dict) and isinstance(body.get("error"), str):
            message = body["error"]
    except ValueError:
        pass

    if resp.status_code == 400:
        return MissingInput(message)
    if resp.status_code == 500 and message and "not configured" in message.lower():
        return ServiceMisconfigured(message)
    return error_for_status(resp.status_code)(message, detail=f"status={resp.status_code}")
