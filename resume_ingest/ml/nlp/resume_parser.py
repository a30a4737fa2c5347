"""
Main resume import orchestrator.

Coordinates text extraction, preprocessing, layout classification, section
detection, entry parsing and confidence scoring to turn an uploaded PDF or
DOCX file into an ImportResult.

Pipeline (one ImportContext per document):

    received -> extracting -> preprocessing -> [reordering, PDF only]
             -> classifying -> detecting_sections -> parsing_entries
             -> scoring -> done

Only extraction can fail the import: an ExtractionError or empty extracted
text moves the context to ``failed``. Every later stage degrades to
partial data plus warnings.
"""

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Optional

from resume_ingest.data.models import Basics, ImportResult, ParsedResumeData
from resume_ingest.utils.config import IngestSettings, get_settings
from resume_ingest.utils.constants import FileKind, ResumeFormat, SectionKind
from resume_ingest.utils.logger import get_logger

from .confidence import ConfidenceScorer
from .extractors import DOCXExtractor, ExtractionError, PDFExtractor, detect_file_kind
from .extractors.base import BaseExtractor
from .format_classifier import FormatClassification, classify_resume_format
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
from .preprocessor import TextPreprocessor
from .section_detector import DetectedSection, SectionDetector, header_region

logger = get_logger(__name__)


NAME_MISSING_WARNING = "Could not detect name. Please enter manually."
LOW_CONFIDENCE_WARNING = "Low confidence in parsed data. Please review carefully."
NON_STANDARD_LAYOUT_WARNING = (
    "This resume uses a non-standard layout. Some sections may not be detected correctly."
)
CREATIVE_WARNING_CONFIDENCE = 40

# Section kinds whose empty parse deserves a warning, and how to name them
SECTION_LABELS = {
    SectionKind.WORK: "work experience",
    SectionKind.EDUCATION: "education",
    SectionKind.SKILLS: "skills",
    SectionKind.PROJECTS: "project",
    SectionKind.CERTIFICATES: "certificate",
    SectionKind.LANGUAGES: "language",
    SectionKind.INTERESTS: "interest",
    SectionKind.PUBLICATIONS: "publication",
    SectionKind.AWARDS: "award",
}


class ImportStage(str, Enum):
    """Stages of a single document import."""

    RECEIVED = "received"
    EXTRACTING = "extracting"
    PREPROCESSING = "preprocessing"
    REORDERING = "reordering"
    CLASSIFYING = "classifying"
    DETECTING_SECTIONS = "detecting_sections"
    PARSING_ENTRIES = "parsing_entries"
    SCORING = "scoring"
    DONE = "done"
    FAILED = "failed"


@dataclass
class ImportContext:
    """Mutable state of one import as it moves through the stages."""

    kind: FileKind
    filename: str = "document"
    stage: ImportStage = ImportStage.RECEIVED
    history: list[ImportStage] = field(default_factory=lambda: [ImportStage.RECEIVED])

    raw_text: str = ""
    text: str = ""
    heading_hints: list[str] = field(default_factory=list)
    classification: Optional[FormatClassification] = None
    sections: list[DetectedSection] = field(default_factory=list)
    data: ParsedResumeData = field(default_factory=ParsedResumeData)
    result: Optional[ImportResult] = None

    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def advance(self, stage: ImportStage) -> None:
        logger.debug(f"{self.filename}: {self.stage.value} -> {stage.value}")
        self.stage = stage
        self.history.append(stage)

    def fail(self, *errors: Optional[str]) -> ImportResult:
        self.errors.extend(error for error in errors if error)
        self.advance(ImportStage.FAILED)
        self.result = ImportResult(
            success=False,
            warnings=list(self.warnings),
            errors=list(self.errors),
            raw_text=self.raw_text,
        )
        return self.result

    def add_warning(self, warning: str) -> None:
        if warning not in self.warnings:
            self.warnings.append(warning)


class ResumeParser:
    """
    Main resume parser that orchestrates the import pipeline.

    All collaborators are injectable; the defaults read their thresholds
    from ``IngestSettings``.
    """

    def __init__(
        self,
        settings: Optional[IngestSettings] = None,
        pdf_extractor: Optional[BaseExtractor] = None,
        docx_extractor: Optional[BaseExtractor] = None,
        preprocessor: Optional[TextPreprocessor] = None,
        section_detector: Optional[SectionDetector] = None,
        scorer: Optional[ConfidenceScorer] = None,
    ):
        """Initialize the resume parser with all component parsers."""
        self.settings = settings or get_settings().ingest

        self.extractors: dict[FileKind, BaseExtractor] = {
            FileKind.PDF: pdf_extractor or PDFExtractor(
                min_chars_per_page=self.settings.min_chars_per_page,
                max_garbage_ratio=self.settings.max_garbage_ratio,
            ),
            FileKind.DOCX: docx_extractor or DOCXExtractor(),
        }
        self.preprocessor = preprocessor or TextPreprocessor()
        self.section_detector = section_detector or SectionDetector()
        self.scorer = scorer or ConfidenceScorer()

        self.contact_parser = ContactParser()
        self.summary_parser = SummaryParser(max_chars=self.settings.summary_max_chars)
        skills_parser = SkillsParser()
        self._section_parsers: dict[SectionKind, Callable[[str], list]] = {
            SectionKind.WORK: ExperienceParser().parse,
            SectionKind.EDUCATION: EducationParser().parse,
            SectionKind.SKILLS: skills_parser.parse,
            SectionKind.PROJECTS: ProjectsParser(skills_parser).parse,
            SectionKind.CERTIFICATES: CertificationsParser().parse,
            SectionKind.LANGUAGES: LanguagesParser().parse,
            SectionKind.INTERESTS: InterestsParser().parse,
            SectionKind.PUBLICATIONS: PublicationsParser().parse,
            SectionKind.AWARDS: AwardsParser().parse,
            SectionKind.REFERENCES: ReferencesParser().parse,
        }

    # ── entry points ──

    async def parse(
        self,
        content: bytes,
        kind: FileKind | str | None = None,
        filename: str = "document",
    ) -> ImportResult:
        """
        Import one document.

        Args:
            content: Raw file bytes
            kind: Declared document kind; detected from ``filename`` when omitted
            filename: Original filename (used for kind detection and logging)

        Returns:
            ImportResult; ``success`` is False only when no text was obtained
        """
        context = await self.process(content, kind, filename)
        return context.result

    async def process(
        self,
        content: bytes,
        kind: FileKind | str | None = None,
        filename: str = "document",
    ) -> ImportContext:
        """Run the pipeline and return the full context, including the stage history."""
        resolved = self._resolve_kind(kind, filename)
        context = ImportContext(kind=resolved or FileKind.PDF, filename=filename)

        if resolved is None:
            context.fail(
                f"Unsupported file type: {filename}",
                "Upload a PDF or DOCX file.",
            )
            return context

        if len(content) > self.settings.max_file_size_bytes:
            context.fail(
                f"File too large: {len(content)} bytes (max: {self.settings.max_file_size_bytes})",
                f"Upload a file smaller than {self.settings.max_file_size_mb} MB.",
            )
            return context

        context.advance(ImportStage.EXTRACTING)
        extractor = self.extractors[resolved]
        try:
            extraction = await extractor.extract_async(content, filename)
        except ExtractionError as e:
            logger.warning(f"Extraction failed for {filename}: {e.message}")
            context.fail(e.message, e.suggestion)
            return context

        for warning in extraction.warnings:
            context.add_warning(warning)

        if extraction.is_empty:
            context.fail(
                f"Could not extract text content from {resolved.value.upper()} file. "
                "The file may be image-based, encrypted, or empty."
            )
            return context

        logger.debug(
            f"{filename}: extracted {extraction.word_count} words, "
            f"{extraction.char_count} chars from {extraction.page_count} page(s)"
        )
        context.raw_text = extraction.text
        context.heading_hints = list(extraction.heading_hints)
        self._analyze(context)
        return context

    def parse_bytes(
        self,
        content: bytes,
        kind: FileKind | str | None = None,
        filename: str = "document",
    ) -> ImportResult:
        """Synchronous wrapper around ``parse``."""
        return asyncio.run(self.parse(content, kind, filename))

    def parse_file(self, file_path: str | Path) -> ImportResult:
        """
        Import a document from disk.

        Missing files and oversized files produce failed results rather than
        exceptions.
        """
        path = Path(file_path)
        if not path.is_file():
            return ImportResult(success=False, errors=[f"File not found: {file_path}"])

        file_size = path.stat().st_size
        if file_size > self.settings.max_file_size_bytes:
            return ImportResult(
                success=False,
                errors=[f"File too large: {file_size} bytes (max: {self.settings.max_file_size_bytes})"],
            )

        return self.parse_bytes(path.read_bytes(), filename=path.name)

    def parse_text(
        self,
        text: str,
        kind: FileKind | str = FileKind.PDF,
        heading_hints: Iterable[str] = (),
    ) -> ImportResult:
        """
        Run everything after extraction on already extracted text.

        Empty text fails exactly like an empty extraction.
        """
        resolved = self._resolve_kind(kind, "document") or FileKind.PDF
        context = ImportContext(kind=resolved, filename="text")
        context.advance(ImportStage.EXTRACTING)

        if not text or not text.strip():
            return context.fail(
                f"Could not extract text content from {resolved.value.upper()} file. "
                "The file may be image-based, encrypted, or empty."
            )

        context.raw_text = text
        context.heading_hints = list(heading_hints)
        return self._analyze(context)

    # ── stages ──

    def _analyze(self, context: ImportContext) -> ImportResult:
        """Everything after extraction; never fails."""
        is_pdf = context.kind == FileKind.PDF

        context.advance(ImportStage.PREPROCESSING)
        text = self.preprocessor.normalize(context.raw_text, preserve_column_gaps=is_pdf)

        if is_pdf:
            context.advance(ImportStage.REORDERING)
            text = self.preprocessor.reorder_columns(
                text, threshold=self.settings.column_reorder_threshold
            )
            text = self.preprocessor.normalize(text)
        context.text = text

        context.advance(ImportStage.CLASSIFYING)
        sections = self.section_detector.detect(text, context.heading_hints)
        context.classification = classify_resume_format(text, sections=sections)
        if (
            context.classification.format == ResumeFormat.CREATIVE
            and context.classification.confidence < CREATIVE_WARNING_CONFIDENCE
        ):
            context.add_warning(NON_STANDARD_LAYOUT_WARNING)

        context.advance(ImportStage.DETECTING_SECTIONS)
        context.sections = sections

        context.advance(ImportStage.PARSING_ENTRIES)
        self._parse_entries(context)

        context.advance(ImportStage.SCORING)
        confidence = self.scorer.score(context.data)
        self._confidence_warnings(context, confidence.overall, confidence.sections)

        context.advance(ImportStage.DONE)
        context.result = ImportResult(
            success=True,
            data=context.data,
            confidence=confidence,
            warnings=list(context.warnings),
            errors=list(context.errors),
            raw_text=context.raw_text,
            resume_format=context.classification.format,
        )
        logger.info(
            f"Imported {context.filename}: {len(context.sections)} sections, "
            f"format={context.classification.format.value}, confidence={confidence.overall}"
        )
        return context.result

    def _parse_entries(self, context: ImportContext) -> None:
        data = context.data
        header = header_region(context.text, context.sections, max_lines=self.settings.header_max_lines)

        # DOCX text is linear, so contact details anywhere in the document are trustworthy
        contact_text = context.text if context.kind == FileKind.DOCX else None
        basics = self.contact_parser.parse(header, contact_text=contact_text)

        summaries = []
        produced: dict[SectionKind, int] = {}
        for section in context.sections:
            if section.name == SectionKind.SUMMARY:
                summary = self.summary_parser.parse(section.content)
                if summary:
                    summaries.append(summary)
                continue

            parser = self._section_parsers.get(section.name)
            if parser is None:
                continue
            entries = parser(section.content)
            getattr(data, section.name.value).extend(entries)
            produced[section.name] = produced.get(section.name, 0) + len(entries)

        if summaries:
            basics.summary = self.summary_parser.parse(" ".join(summaries))

        data.basics = basics if self._has_content(basics) else None

        if data.basics is None or not data.basics.name:
            context.add_warning(NAME_MISSING_WARNING)

        for kind, count in produced.items():
            label = SECTION_LABELS.get(kind)
            if count == 0 and label is not None:
                context.add_warning(f"Could not parse {label} entries.")

    @staticmethod
    def _has_content(basics: Basics) -> bool:
        return bool(basics.model_dump(exclude_none=True, exclude_defaults=True))

    def _confidence_warnings(self, context: ImportContext, overall: int, sections: dict[str, int]) -> None:
        threshold = (
            self.settings.pdf_low_confidence_threshold
            if context.kind == FileKind.PDF
            else self.settings.docx_low_confidence_threshold
        )
        if overall < threshold:
            context.add_warning(LOW_CONFIDENCE_WARNING)

        for name, score in sections.items():
            if score < self.settings.section_low_confidence_threshold:
                context.add_warning(
                    f"Low confidence in {name} section ({score}%). Please review the imported {name}."
                )

    @staticmethod
    def _resolve_kind(kind: FileKind | str | None, filename: str) -> Optional[FileKind]:
        if isinstance(kind, FileKind):
            return kind
        if isinstance(kind, str):
            try:
                return FileKind(kind.lower().lstrip("."))
            except ValueError:
                return None
        return detect_file_kind(filename)


# Global parser instance
_resume_parser: Optional[ResumeParser] = None


def get_resume_parser() -> ResumeParser:
    """Get or create the global resume parser instance."""
    global _resume_parser
    if _resume_parser is None:
        _resume_parser = ResumeParser()
    return _resume_parser
