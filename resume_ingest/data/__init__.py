"""
Data layer for resume-ingest.

Submodules:
- models: Pydantic models for parsed resumes and import results
"""

from .models import ImportResult, ParsedResumeData

__all__ = [
    "ImportResult",
    "ParsedResumeData",
]
