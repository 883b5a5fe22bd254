"""
Analysis Pipeline - validate, extract, analyze, deliver.

Each run takes a new run id. Only the newest run may publish its result, so a
slow analysis that finishes after a newer one started is dropped.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional, Protocol

from resume_analyzer.models.analysis_models import AnalysisOutcome, Scorecard, UploadCandidate
from resume_analyzer.services.analysis_service import analyze_resume_text
from resume_analyzer.services.exceptions import AnalysisError, UpstreamError
from resume_analyzer.services.intake_service import extract_text, validate_upload

logger = logging.getLogger(__name__)

Analyzer = Callable[[str], Awaitable[Scorecard]]

SUCCESS_MESSAGE = "Your resume has been analyzed successfully"


class Notifier(Protocol):
    def notify(self, kind: str, message: str) -> None: ...


class LoggingNotifier:
    """Notifier that writes to the log; used when no UI is attached."""

    def notify(self, kind: str, message: str) -> None:
        level = logging.ERROR if kind == "error" else logging.INFO
        logger.log(level, f"[{kind}] {message}")


class AnalysisPipeline:
    """
    Runs one resume through intake and analysis and hands the Scorecard on.

    Args:
        analyzer:    async callable text → Scorecard. Defaults to the in-process
                     analysis service; pass AnalysisClient(...).analyze to go
                     through the HTTP endpoint.
        notifier:    receives ("success" | "error", message)
        on_complete: called with the Scorecard of the current run
    """

    def __init__(
        self,
        analyzer: Optional[Analyzer] = None,
        notifier: Optional[Notifier] = None,
        on_complete: Optional[Callable[[Scorecard], None]] = None,
    ):
        self._analyzer = analyzer or analyze_resume_text
        self._notifier = notifier or LoggingNotifier()
        self._on_complete = on_complete
        self._run_id = 0
        self.scorecard: Scorecard | None = None

    @property
    def run_id(self) -> int:
        return self._run_id

    def is_current(self, run_id: int) -> bool:
        return run_id == self._run_id

    def reset(self) -> None:
        """Discard the current scorecard and any run still in flight."""
        self._run_id += 1
        self.scorecard = None

    async def run(self, candidate: UploadCandidate) -> AnalysisOutcome | None:
        """
        Analyze one upload.

        Returns the outcome of this run, or None if a newer run (or reset)
        superseded it before it finished.
        """
        self.reset()
        run_id = self._run_id

        try:
            validate_upload(candidate)
            text = extract_text(candidate)
            scorecard = await self._analyzer(text)
        except AnalysisError as e:
            return self._fail(run_id, e)
        except Exception as e:
            logger.exception(f"Run {run_id}: unexpected analysis failure")
            return self._fail(run_id, UpstreamError(detail=str(e)))

        if not self.is_current(run_id):
            logger.info(f"Run {run_id}: discarding stale result (current run is {self._run_id})")
            return None

        self.scorecard = scorecard
        self._notifier.notify("success", SUCCESS_MESSAGE)
        if self._on_complete:
            self._on_complete(scorecard)
        return AnalysisOutcome(run_id=run_id, scorecard=scorecard)

    def _fail(self, run_id: int, error: AnalysisError) -> AnalysisOutcome | None:
        if not self.is_current(run_id):
            logger.info(f"Run {run_id}: discarding stale failure ({error.kind})")
            return None

        self._notifier.notify("error", error.message)
        return AnalysisOutcome(run_id=run_id, error=error.message, error_kind=error.kind)
