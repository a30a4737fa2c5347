"""
Pydantic data models for resume-ingest.

This module provides the structures handed to callers of the ingestion
pipeline: the parsed resume record and the import result envelope.
"""

# Base models
from .base import EmbeddedModel

# Resume models
from .resume import (
    AwardEntry,
    Basics,
    CertificateEntry,
    EducationEntry,
    InterestEntry,
    LanguageEntry,
    Location,
    ParsedResumeData,
    Profile,
    ProjectEntry,
    PublicationEntry,
    ReferenceEntry,
    SkillEntry,
    WorkEntry,
)

# Import result models
from .import_result import ConfidenceReport, ImportResult

__all__ = [
    # Base
    "EmbeddedModel",
    # Resume
    "AwardEntry",
    "Basics",
    "CertificateEntry",
    "EducationEntry",
    "InterestEntry",
    "LanguageEntry",
    "Location",
    "ParsedResumeData",
    "Profile",
    "ProjectEntry",
    "PublicationEntry",
    "ReferenceEntry",
    "SkillEntry",
    "WorkEntry",
    # Import result
    "ConfidenceReport",
    "ImportResult",
]
