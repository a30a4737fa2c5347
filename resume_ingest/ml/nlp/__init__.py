"""
NLP pipeline for resume-ingest.

Provides document text extraction, text preprocessing, layout
classification, section detection and entry parsing for turning uploaded
resumes into structured records.

Main Components:
- ResumeParser: Main orchestrator for importing resumes
- ExtractorFactory: Document text extraction (PDF, DOCX)
- TextPreprocessor: Text normalization and multi-column reordering
- SectionDetector: Section heading detection
- classify_resume_format: Resume layout classification
- ConfidenceScorer: Completeness scoring of parsed data
"""

from .resume_parser import (
    ImportContext,
    ImportStage,
    ResumeParser,
    get_resume_parser,
)

from .preprocessor import (
    TextPreprocessor,
    normalize_text,
    preprocess_resume_text,
    reorder_multi_column_text,
)

from .section_detector import (
    DetectedSection,
    SectionDetector,
    detect_sections,
    header_region,
)

from .format_classifier import (
    FormatClassification,
    FormatTraits,
    classify_resume_format,
)

from .confidence import (
    ConfidenceScorer,
    calculate_confidence,
)

from .extractors import (
    BaseExtractor,
    DOCXExtractor,
    ExtractionError,
    ExtractionResult,
    ExtractorFactory,
    PDFExtractor,
    detect_file_kind,
    get_extractor,
)

from .parsers import (
    AwardsParser,
    CertificationsParser,
    ContactParser,
    EducationParser,
    ExperienceParser,
    InterestsParser,
    LanguagesParser,
    ProjectsParser,
    PublicationsParser,
    ReferencesParser,
    SkillsParser,
    SummaryParser,
)

__all__ = [
    # Main parser
    "ImportContext",
    "ImportStage",
    "ResumeParser",
    "get_resume_parser",
    # Preprocessor
    "TextPreprocessor",
    "normalize_text",
    "preprocess_resume_text",
    "reorder_multi_column_text",
    # Sections
    "DetectedSection",
    "SectionDetector",
    "detect_sections",
    "header_region",
    # Classification
    "FormatClassification",
    "FormatTraits",
    "classify_resume_format",
    # Confidence
    "ConfidenceScorer",
    "calculate_confidence",
    # Extractors
    "BaseExtractor",
    "DOCXExtractor",
    "ExtractionError",
    "ExtractionResult",
    "ExtractorFactory",
    "PDFExtractor",
    "detect_file_kind",
    "get_extractor",
    # Parsers
    "AwardsParser",
    "CertificationsParser",
    "ContactParser",
    "EducationParser",
    "ExperienceParser",
    "InterestsParser",
    "LanguagesParser",
    "ProjectsParser",
    "PublicationsParser",
    "ReferencesParser",
    "SkillsParser",
    "SummaryParser",
]
