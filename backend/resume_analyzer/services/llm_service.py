"""
LLM Service - single-shot chat completion via LiteLLM.

Responsibilities:
  • Call the configured model with the server-side service credential
  • Make exactly one attempt (no retries, transport timeout inherited)
  • Translate provider failures into the analysis error taxonomy
"""

from __future__ import annotations

import logging
from typing import Any

import litellm
from litellm import acompletion

from resume_analyzer.config import PROMPT_CONFIG, settings
from resume_analyzer.services.exceptions import (
    AnalysisError,
    QuotaExhausted,
    ServiceMisconfigured,
    ServiceUnavailable,
    UpstreamError,
    error_for_status,
)

logger = logging.getLogger(__name__)

# Silence verbose LiteLLM logs
litellm.suppress_debug_info = True
litellm.set_verbose = False

# Provider messages that signal billing trouble even when the status is not 402
_QUOTA_MARKERS = ("insufficient_quota", "credits", "payment required", "billing")


# ── Core Completion ──────────────────────────────────────────────────────────


async def complete(
    *,
    messages: list[dict[str, str]],
    prompt_name: str | None = None,
    temperature: float | None = None,
) -> str:
    """
    Send one chat completion request and return the assistant's text.

    Args:
        messages:    OpenAI-format message list
        prompt_name: Optional key into PROMPT_CONFIG for the default temperature
        temperature: Override temperature (takes precedence over prompt_name)

    Raises:
        ServiceMisconfigured: no service credential is configured
        AnalysisError: any provider failure, already classified
    """
    if not settings.llm_api_key:
        logger.error("LLM_API_KEY is not configured")
        raise ServiceMisconfigured()

    config = PROMPT_CONFIG.get(prompt_name, {}) if prompt_name else {}
    temp = temperature if temperature is not None else config.get("temperature", 0.7)

    kwargs: dict[str, Any] = {
        "model": settings.llm_model,
        "messages": messages,
        "temperature": temp,
        "api_key": settings.llm_api_key,
        "num_retries": 0,
        "max_retries": 0,
    }
    if settings.llm_api_base:
        kwargs["api_base"] = settings.llm_api_base

    logger.info(f"LLM call: model={settings.llm_model} temp={temp}")

    try:
        response = await acompletion(**kwargs)
    except Exception as e:
        error = classify_error(e)
        logger.error(f"LLM error ({settings.llm_model}): kind={error.kind} {e}")
        raise error from e

    content = response.choices[0].message.content or ""
    logger.info(f"LLM response: {len(content)} chars")
    return content


# ── Error Mapping ────────────────────────────────────────────────────────────


def classify_error(exc: Exception) -> AnalysisError:
    """Map a provider exception onto the analysis error taxonomy."""
    if isinstance(exc, AnalysisError):
        return exc

    # Connection failures and timeouts carry a synthetic status; check them first
    if isinstance(exc, (litellm.APIConnectionError, litellm.Timeout)):
        return ServiceUnavailable(detail=str(exc)[:200])

    status_code = getattr(exc, "status_code", None)
    error_cls = error_for_status(status_code)

    if error_cls is UpstreamError:
        raw_error = str(exc).lower()
        if any(marker in raw_error for marker in _QUOTA_MARKERS):
            error_cls = QuotaExhausted

    return error_cls(detail=f"status={status_code}")
