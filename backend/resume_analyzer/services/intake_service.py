"""
Intake Service - validate an uploaded resume and read it as text.

Responsibilities:
  • Accept only PDF, DOC, DOCX and plain text (by declared content type)
  • Reject files larger than 5 MiB (zero-length files pass)
  • Decode the raw bytes as UTF-8 text, with no format-aware parsing
"""

from __future__ import annotations

import logging

from resume_analyzer.config import ACCEPTED_CONTENT_TYPES, MAX_UPLOAD_BYTES
from resume_analyzer.models.analysis_models import UploadCandidate
from resume_analyzer.services.exceptions import FileTooLarge, InvalidFileType

logger = logging.getLogger(__name__)


def validate_upload(candidate: UploadCandidate) -> None:
    """Raise InvalidFileType or FileTooLarge; return None if the file is accepted."""
    if candidate.content_type not in ACCEPTED_CONTENT_TYPES:
        logger.info(f"Rejected '{candidate.file_name}': content type {candidate.content_type!r}")
        raise InvalidFileType(detail=f"content type {candidate.content_type!r}")

    if candidate.size > MAX_UPLOAD_BYTES:
        logger.info(f"Rejected '{candidate.file_name}': {candidate.size} bytes")
        raise FileTooLarge(detail=f"{candidate.size} bytes")


def extract_text(candidate: UploadCandidate) -> str:
    """
    Read the file as text.

    PDF and DOC/DOCX files are not parsed; their bytes are decoded like any
    other file, so the result may be garbled for binary formats.
    """
    text = candidate.content.decode("utf-8-sig", errors="replace")
    logger.debug(
        f"Extracted {len(text)} chars from '{candidate.file_name}' "
        f"({ACCEPTED_CONTENT_TYPES.get(candidate.content_type, candidate.content_type)})"
    )
    return text
