"""
Analysis Service - turn resume text into a Scorecard via one LLM call.

Pipeline steps:
  1. Reject empty text (MissingInput)
  2. Build the scoring prompt
  3. Call the model once (errors are classified by llm_service)
  4. Normalize the reply, falling back to a fixed scorecard if it is unparseable
"""

from __future__ import annotations

import logging

from resume_analyzer.models.analysis_models import Scorecard
from resume_analyzer.prompts.resume_analysis import SYSTEM_PROMPT, USER_PROMPT_TEMPLATE
from resume_analyzer.services import llm_service
from resume_analyzer.services.exceptions import MissingInput
from resume_analyzer.services.normalizer import normalize_analysis

logger = logging.getLogger(__name__)


def build_messages(resume_text: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": USER_PROMPT_TEMPLATE.format(resume_text=resume_text)},
    ]


async def analyze_resume_text(resume_text: str | None) -> Scorecard:
    """Score a resume. Raises AnalysisError subclasses on input or upstream failure."""
    if not resume_text or not resume_text.strip():
        raise MissingInput()

    logger.info(f"Analyzing resume ({len(resume_text)} chars)")

    raw = await llm_service.complete(
        messages=build_messages(resume_text),
        prompt_name="resume_analysis",
    )

    scorecard, clean = normalize_analysis(raw)
    if clean:
        logger.info(f"Analysis complete: overallScore={scorecard.overall_score}")
    else:
        logger.warning("Analysis complete with fallback scorecard")
    return scorecard
