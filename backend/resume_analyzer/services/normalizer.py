"""
Normalizer - coerce free-form model output into a Scorecard.

The model is asked for JSON but may wrap it in a ```json fence, surround it
with prose, or return something unparseable. Parsing never fails from the
caller's point of view: anything that does not decode to a complete scorecard
is replaced by FALLBACK_SCORECARD.
"""

from __future__ import annotations

import json
import logging
import re

from pydantic import ValidationError

from resume_analyzer.models.analysis_models import Scorecard

logger = logging.getLogger(__name__)

_JSON_FENCE_RE = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL)
_BRACE_SPAN_RE = re.compile(r"\{.*\}", re.DOTALL)

FALLBACK_SCORECARD = Scorecard(
    overall_score=70,
    ats_score=65,
    skills_score=70,
    experience_score=75,
    strengths=[
        "Resume contains relevant professional experience",
        "Clear structure and formatting",
        "Good use of action verbs",
    ],
    improvements=[
        "Add more quantifiable achievements",
        "Include more industry-specific keywords",
        "Optimize formatting for ATS systems",
    ],
    keywords=[
        "Professional", "Experience", "Skills", "Education", "Management",
        "Leadership", "Communication", "Problem-solving",
    ],
    suggestions=[
        "Add metrics and numbers to quantify your achievements",
        "Include a professional summary at the top",
        "Tailor your resume to specific job descriptions",
        "Use standard section headings for better ATS compatibility",
    ],
)


def extract_json_candidate(raw: str) -> str:
    """Pick the substring most likely to hold the JSON object: fence, then braces, then all."""
    fenced = _JSON_FENCE_RE.search(raw)
    if fenced:
        return fenced.group(1)

    braces = _BRACE_SPAN_RE.search(raw)
    if braces:
        return braces.group(0)

    return raw


def normalize_analysis(raw: str) -> tuple[Scorecard, bool]:
    """
    Decode model output into a Scorecard.

    Returns (scorecard, True) when the output decoded cleanly, otherwise
    (FALLBACK_SCORECARD, False). Scores are passed through unclamped.
    """
    candidate = extract_json_candidate(raw or "")

    try:
        data = json.loads(candidate)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return Scorecard.model_validate(data), True
    except (ValueError, ValidationError) as e:
        # json.JSONDecodeError is a ValueError
        logger.warning(
            f"Malformed model output, using fallback scorecard: {e}. "
            f"Raw preview: {(raw or '')[:200]!r}"
        )
        return FALLBACK_SCORECARD, False
