"""
Tests for AnalysisClient.

These tests verify:
1. One POST with {"resumeText": ...} is sent per analysis
2. Success bodies are normalized (fenced JSON, fallback on garbage)
3. Error statuses and transport failures map onto the error taxonomy
"""

import json

import httpx
import pytest

from resume_analyzer.client.analysis_client import AnalysisClient
from resume_analyzer.services.exceptions import (
    MissingInput,
    QuotaExhausted,
    RateLimited,
    ServiceMisconfigured,
    ServiceUnavailable,
    Unauthorized,
    UpstreamError,
)
from resume_analyzer.services.normalizer import FALLBACK_SCORECARD

ENDPOINT = "https://analysis.example.com/api/analyze-resume"

ANALYSIS = {
    "overallScore": 85,
    "atsScore": 80,
    "skillsScore": 82,
    "experienceScore": 88,
    "strengths": ["s1", "s2", "s3"],
    "improvements": ["i1", "i2", "i3"],
    "keywords": ["k1", "k2", "k3", "k4", "k5", "k6", "k7", "k8"],
    "suggestions": ["g1", "g2", "g3"],
}


def _client(handler, requests=None):
    def record(request):
        if requests is not None:
            requests.append(request)
        return handler(request)

    return AnalysisClient(ENDPOINT, transport=httpx.MockTransport(record))


class TestAnalysisClient:
    """Tests for AnalysisClient.analyze."""

    @pytest.mark.asyncio
    async def test_posts_resume_text_once(self):
        requests = []
        client = _client(lambda r: httpx.Response(200, json=ANALYSIS), requests)

        scorecard = await client.analyze("Jane Doe")

        assert scorecard.model_dump(mode="json", by_alias=True) == ANALYSIS
        assert len(requests) == 1
        assert requests[0].method == "POST"
        assert str(requests[0].url) == ENDPOINT
        assert json.loads(requests[0].content) == {"resumeText": "Jane Doe"}

    @pytest.mark.asyncio
    async def test_fenced_body_is_decoded(self):
        body = "```json\n" + json.dumps(dict(ANALYSIS, overallScore=91)) + "\n```"
        client = _client(lambda r: httpx.Response(200, text=body))

        scorecard = await client.analyze("Jane Doe")

        assert scorecard.overall_score == 91

    @pytest.mark.asyncio
    async def test_garbage_body_gives_fallback(self):
        client = _client(lambda r: httpx.Response(200, text="<html>oops</html>"))

        assert await client.analyze("Jane Doe") == FALLBACK_SCORECARD

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status, body, expected",
        [
            (400, {"error": "Resume text is required"}, MissingInput),
            (401, {"error": "Unauthorized"}, Unauthorized),
            (402, {"error": "AI service credits exhausted. Please add credits to continue."}, QuotaExhausted),
            (429, {"error": "Rate limit exceeded. Please try again in a moment."}, RateLimited),
            (500, {"error": "AI service not configured"}, ServiceMisconfigured),
            (500, {"error": "Failed to analyze resume. Please try again."}, UpstreamError),
            (503, {"error": "down"}, ServiceUnavailable),
            (418, {"error": "teapot"}, UpstreamError),
        ],
    )
    async def test_error_statuses(self, status, body, expected):
        client = _client(lambda r: httpx.Response(status, json=body))

        with pytest.raises(expected) as exc_info:
            await client.analyze("Jane Doe")

        assert exc_info.value.message == body["error"]

    @pytest.mark.asyncio
    async def test_non_json_error_body_uses_default_message(self):
        client = _client(lambda r: httpx.Response(429, text="Too Many Requests"))

        with pytest.raises(RateLimited) as exc_info:
            await client.analyze("Jane Doe")

        assert exc_info.value.message == RateLimited.default_message

    @pytest.mark.asyncio
    async def test_transport_failure_is_service_unavailable(self):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        client = _client(refuse)

        with pytest.raises(ServiceUnavailable):
            await client.analyze("Jane Doe")
