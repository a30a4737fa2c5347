"""
Import result models returned to callers of the ingestion pipeline.
"""

from typing import Optional

from pydantic import Field

from resume_ingest.utils.constants import ResumeFormat

from .base import EmbeddedModel
from .resume import ParsedResumeData


class ConfidenceReport(EmbeddedModel):
    """Overall and per-section extraction confidence, each 0-100."""

    overall: int = Field(default=0, ge=0, le=100)
    sections: dict[str, int] = Field(default_factory=dict)


class ImportResult(EmbeddedModel):
    """
    Uniform outcome of importing one document.

    ``success`` is False only when no usable text could be extracted; low
    confidence and parse misses are reported through ``warnings``.
    """

    success: bool
    data: ParsedResumeData = Field(default_factory=ParsedResumeData)
    confidence: ConfidenceReport = Field(default_factory=ConfidenceReport)
    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    raw_text: str = ""
    resume_format: Optional[ResumeFormat] = None
