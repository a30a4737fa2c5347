"""
Application-wide constants for resume-ingest.

This module contains the constant values and heuristic lookup tables used
throughout the ingestion pipeline. Extend the tables here to teach the
parsers new vocabulary without touching their control flow.
"""

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "resume-ingest"
APP_DISPLAY_NAME: Final[str] = "Resume Document Ingestion"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# File Types
# =============================================================================


class FileKind(str, Enum):
    """Document kinds accepted by the ingestion pipeline."""

    PDF = "pdf"
    DOCX = "docx"


SUPPORTED_RESUME_FORMATS: Final[tuple[str, ...]] = (
    ".pdf",
    ".docx",
)

MIME_TYPES: Final[Mapping[str, FileKind]] = MappingProxyType({
    "application/pdf": FileKind.PDF,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": FileKind.DOCX,
})

PDF_SIGNATURE: Final[bytes] = b"%PDF"
DOCX_SIGNATURE: Final[bytes] = b"PK\x03\x04"


# =============================================================================
# Layout Constants
# =============================================================================

# Fraction of the larger run height within which two baselines share a line
LINE_TOLERANCE_FACTOR: Final[float] = 0.5
# Height assumed for runs that report none
DEFAULT_RUN_HEIGHT: Final[float] = 10.0
# Glyph width assumed for empty or zero-width runs
DEFAULT_GLYPH_WIDTH: Final[float] = 5.0
# Gap (in average glyph widths) that marks a probable column break
COLUMN_GAP_FACTOR: Final[float] = 3.0
COLUMN_SEPARATOR: Final[str] = "    "
MIN_COLUMN_GAP_SPACES: Final[int] = 4
PAGE_SEPARATOR: Final[str] = "\n\n"

SCANNED_PDF_WARNING: Final[str] = (
    "This PDF appears to be image-based or scanned. Text extraction may be "
    "incomplete. For better results, please use a text-based PDF or convert "
    "to DOCX format."
)


# =============================================================================
# Normalization Tables
# =============================================================================

CANONICAL_BULLET: Final[str] = "•"

DASH_CHARS: Final[frozenset[str]] = frozenset(
    "‐‑‒–—―−﹘﹣－"
)
SINGLE_QUOTE_CHARS: Final[frozenset[str]] = frozenset("‘’‚‛＇")
DOUBLE_QUOTE_CHARS: Final[frozenset[str]] = frozenset("“”„‟＂")
# U+F0B7 is the Symbol-font bullet Word documents leak into text layers
BULLET_CHARS: Final[frozenset[str]] = frozenset(
    "•‣⁃∙▪▫●○◦■□"
    "⦁⦾⦿·∘➢►▸✓✔"
)
SPACE_CHARS: Final[frozenset[str]] = frozenset(
    "            "
    "  　"
)
# Removed outright rather than turned into spaces
INVISIBLE_CHARS: Final[frozenset[str]] = frozenset("­​‌‍⁠﻿")
# Line and paragraph separators other than \n
LINE_BREAK_CHARS: Final[frozenset[str]] = frozenset("\r\x0b\x0c\x85\u2028\u2029")

LIGATURES: Final[Mapping[str, str]] = MappingProxyType({
    "ﬀ": "ff",
    "ﬁ": "fi",
    "ﬂ": "fl",
    "ﬃ": "ffi",
    "ﬄ": "ffl",
    "ﬅ": "st",
    "ﬆ": "st",
})

# Heading words that PDF text layers and OCR commonly split in two
OCR_HEADING_TOKENS: Final[tuple[str, ...]] = (
    "experience",
    "education",
    "employment",
    "skills",
    "summary",
    "projects",
    "certifications",
    "certification",
    "languages",
    "publications",
    "references",
    "achievements",
    "bachelor",
    "master",
)


# =============================================================================
# Section Headings
# =============================================================================


class SectionKind(str, Enum):
    """Resume section kinds recognized by the section detector."""

    SUMMARY = "summary"
    WORK = "work"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    CERTIFICATES = "certificates"
    LANGUAGES = "languages"
    INTERESTS = "interests"
    PUBLICATIONS = "publications"
    AWARDS = "awards"
    REFERENCES = "references"


SECTION_HEADINGS: Final[Mapping[SectionKind, tuple[str, ...]]] = MappingProxyType({
    SectionKind.SUMMARY: (
        "summary", "professional summary", "career summary", "profile",
        "about me", "about", "objective", "career objective", "overview",
        "executive summary", "personal statement", "introduction", "bio",
        "professional profile", "career profile", "personal profile",
    ),
    SectionKind.WORK: (
        "experience", "work experience", "professional experience", "employment",
        "work history", "employment history", "career history", "positions held",
        "relevant experience", "professional background", "career experience",
        "job history", "professional history", "work background", "positions",
    ),
    SectionKind.EDUCATION: (
        "education", "educational background", "academic background",
        "qualifications", "academic qualifications", "degrees", "academics",
        "educational qualifications", "academic history", "schooling",
        "academic credentials", "training", "formal education",
    ),
    SectionKind.SKILLS: (
        "skills", "technical skills", "core competencies", "competencies",
        "expertise", "abilities", "proficiencies", "technologies",
        "professional skills", "key skills", "areas of expertise",
        "technical expertise", "core skills", "skill set", "skillset",
        "technical proficiencies", "tools", "tools & technologies",
    ),
    SectionKind.PROJECTS: (
        "projects", "personal projects", "key projects", "notable projects",
        "portfolio", "work samples", "selected projects", "project experience",
        "project work", "relevant projects", "major projects",
    ),
    SectionKind.CERTIFICATES: (
        "certifications", "certificates", "credentials", "professional certifications",
        "licenses", "accreditations", "professional credentials",
        "licenses & certifications", "certifications & licenses",
        "professional licenses", "training & certifications",
    ),
    SectionKind.LANGUAGES: (
        "languages", "language skills", "language proficiency",
        "linguistic skills", "language abilities", "spoken languages",
    ),
    SectionKind.INTERESTS: (
        "interests", "hobbies", "activities", "personal interests",
        "hobbies & interests", "extracurricular activities", "leisure activities",
    ),
    SectionKind.PUBLICATIONS: (
        "publications", "papers", "research", "published works",
        "research publications", "academic publications", "scholarly works",
    ),
    SectionKind.AWARDS: (
        "awards", "honors", "achievements", "recognition", "accomplishments",
        "awards & honors", "honors & awards", "distinctions",
        "accolades", "achievements & awards",
    ),
    SectionKind.REFERENCES: (
        "references", "professional references", "referees",
        "references available upon request", "reference contacts",
    ),
})

# Single words used to map hinted (styled) headings that are not exact synonyms
SECTION_KEYWORDS: Final[Mapping[SectionKind, tuple[str, ...]]] = MappingProxyType({
    SectionKind.WORK: ("experience", "employment", "work", "career"),
    SectionKind.EDUCATION: ("education", "academic", "degree"),
    SectionKind.SKILLS: ("skills", "competencies", "technologies", "expertise"),
    SectionKind.PROJECTS: ("projects", "portfolio"),
    SectionKind.CERTIFICATES: ("certifications", "certificates", "licenses"),
    SectionKind.LANGUAGES: ("languages",),
    SectionKind.SUMMARY: ("summary", "profile", "objective"),
    SectionKind.PUBLICATIONS: ("publications",),
    SectionKind.AWARDS: ("awards", "honors"),
    SectionKind.INTERESTS: ("interests", "hobbies"),
    SectionKind.REFERENCES: ("references",),
})

# Sections whose absence lowers the overall confidence
EXPECTED_SECTIONS: Final[tuple[str, ...]] = ("basics", "work", "education", "skills")

SECTION_WEIGHTS: Final[Mapping[str, float]] = MappingProxyType({
    "basics": 3.0,
    "work": 3.0,
    "education": 2.0,
    "skills": 2.0,
    "projects": 1.0,
    "certificates": 1.0,
    "languages": 1.0,
})

MAX_HEADING_LENGTH: Final[int] = 50
CLASSIFIER_HEADER_LINES: Final[int] = 15


# =============================================================================
# Resume Formats
# =============================================================================


class ResumeFormat(str, Enum):
    """Resume layout styles recognized by the format classifier."""

    CHRONOLOGICAL = "chronological"
    FUNCTIONAL = "functional"
    COMBINATION = "combination"
    ACADEMIC = "academic"
    CREATIVE = "creative"
    UNKNOWN = "unknown"


MAX_FORMAT_CONFIDENCE: Final[int] = 95


# =============================================================================
# NLP Constants
# =============================================================================

# Common skill categories for extraction
SKILL_CATEGORIES: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType({
    "programming_languages": (
        "python", "java", "javascript", "typescript", "c++", "c#", "go", "rust",
        "ruby", "php", "swift", "kotlin", "scala", "r", "matlab", "sql",
    ),
    "frameworks": (
        "react", "angular", "vue", "django", "flask", "fastapi", "spring",
        "node.js", "express", ".net", "rails", "laravel", "tensorflow",
        "pytorch", "keras", "scikit-learn",
    ),
    "databases": (
        "postgresql", "mysql", "mongodb", "redis", "elasticsearch", "cassandra",
        "oracle", "sql server", "sqlite", "dynamodb", "firebase",
    ),
    "cloud_platforms": (
        "aws", "azure", "gcp", "google cloud", "heroku", "digitalocean",
        "kubernetes", "docker", "terraform", "ansible",
    ),
    "soft_skills": (
        "leadership", "communication", "teamwork", "problem-solving",
        "analytical", "creative", "adaptable", "organized", "detail-oriented",
    ),
})

PROFICIENCY_LEVELS: Final[tuple[str, ...]] = (
    "expert", "advanced", "proficient", "intermediate", "familiar", "beginner", "basic",
)

JOB_TITLE_KEYWORDS: Final[tuple[str, ...]] = (
    "engineer", "developer", "manager", "director", "analyst",
    "specialist", "consultant", "architect", "designer", "lead",
    "senior", "junior", "associate", "principal", "staff",
    "intern", "trainee", "coordinator", "administrator",
    "executive", "officer", "president", "vice president", "vp",
    "head", "chief", "cto", "ceo", "cfo", "coo", "cio",
    "scientist", "researcher", "professor", "instructor",
    "technician", "operator", "assistant", "support",
)

FLUENCY_LEVELS: Final[tuple[str, ...]] = (
    "native", "bilingual", "mother tongue", "fluent", "full professional",
    "professional working", "limited working", "professional", "conversational",
    "advanced", "proficient", "intermediate", "elementary", "beginner", "basic",
)
