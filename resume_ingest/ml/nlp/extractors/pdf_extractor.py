"""
PDF document text extractor.

PDF text layers carry no line or paragraph structure, only positioned
text runs. Runs are read page by page through a page-run reader and the
reading order is rebuilt geometrically (see ``layout``):
1. pdfplumber - Primary reader, word boxes with page coordinates
2. pypdf - Fallback reader, text-matrix positions from the content stream
"""

import io
import math
from functools import partial
from typing import Optional, Protocol

import pdfplumber
from pypdf import PdfReader

from resume_ingest.utils.constants import (
    DEFAULT_RUN_HEIGHT,
    PDF_SIGNATURE,
    SCANNED_PDF_WARNING,
)
from resume_ingest.utils.logger import get_logger

from .base import BaseExtractor, ExtractionError, ExtractionResult
from .layout import PositionedTextRun, is_likely_scanned, reconstruct_document_text

logger = get_logger(__name__)

PDF_REPAIR_SUGGESTION = (
    "Try opening the PDF in a viewer and saving it as a new PDF, "
    "or convert it to DOCX format."
)


class PageRunReader(Protocol):
    """Reads the positioned text runs of every page of a PDF."""

    name: str

    def read_pages(self, content: bytes) -> list[list[PositionedTextRun]]:
        ...


class PdfPlumberRunReader:
    """Page-run reader backed by pdfplumber word extraction."""

    name = "pdfplumber"

    def __init__(self, x_tolerance: float = 3.0, y_tolerance: float = 3.0):
        self.x_tolerance = x_tolerance
        self.y_tolerance = y_tolerance

    def read_pages(self, content: bytes) -> list[list[PositionedTextRun]]:
        pages = []
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            for page in pdf.pages:
                words = page.extract_words(
                    keep_blank_chars=True,
                    x_tolerance=self.x_tolerance,
                    y_tolerance=self.y_tolerance,
                )
                pages.append([self._word_to_run(word, page.height) for word in words])
        return pages

    @staticmethod
    def _word_to_run(word: dict, page_height: float) -> PositionedTextRun:
        # pdfplumber measures from the page top; runs use PDF's upward y axis
        return PositionedTextRun(
            text=word["text"],
            x=float(word["x0"]),
            y=float(page_height - word["bottom"]),
            width=float(word["x1"] - word["x0"]),
            height=float(word["bottom"] - word["top"]),
        )


class PyPdfRunReader:
    """
    Page-run reader backed by pypdf's text visitor.

    pypdf reports the text and current matrices for each chunk but not its
    width, so width is estimated at half an em per character.
    """

    name = "pypdf"

    def read_pages(self, content: bytes) -> list[list[PositionedTextRun]]:
        reader = PdfReader(io.BytesIO(content))
        pages = []
        for page in reader.pages:
            runs: list[PositionedTextRun] = []
            page.extract_text(visitor_text=partial(self._collect_run, runs))
            pages.append(runs)
        return pages

    @staticmethod
    def _collect_run(runs, text, cm, tm, font_dict, font_size) -> None:
        chunk = text.replace("\n", " ")
        if not chunk.strip():
            return

        x = tm[4] * cm[0] + tm[5] * cm[2] + cm[4]
        y = tm[4] * cm[1] + tm[5] * cm[3] + cm[5]
        scale = math.hypot(tm[2], tm[3]) * math.hypot(cm[2], cm[3])
        height = (font_size or 0) * scale or DEFAULT_RUN_HEIGHT

        runs.append(
            PositionedTextRun(
                text=chunk,
                x=x,
                y=y,
                width=len(chunk) * height * 0.5,
                height=height,
            )
        )


class PDFExtractor(BaseExtractor):
    """Extractor for PDF documents."""

    # Below this many characters the fallback reader gets a chance
    MIN_PRIMARY_CHARS = 50

    def __init__(
        self,
        reader: Optional[PageRunReader] = None,
        fallback_reader: Optional[PageRunReader] = None,
        min_chars_per_page: int = 100,
        max_garbage_ratio: float = 0.3,
    ):
        self.reader = reader or PdfPlumberRunReader()
        self.fallback_reader = fallback_reader
        if reader is None and fallback_reader is None:
            self.fallback_reader = PyPdfRunReader()
        self.min_chars_per_page = min_chars_per_page
        self.max_garbage_ratio = max_garbage_ratio

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".pdf",)

    def extract_from_bytes(
        self, content: bytes, filename: str = "document.pdf"
    ) -> ExtractionResult:
        """Extract reading-ordered text from PDF bytes."""
        if PDF_SIGNATURE not in content[:1024]:
            raise ExtractionError(
                "Invalid PDF file: missing %PDF header.",
                suggestion=PDF_REPAIR_SUGGESTION,
            )

        text, page_count, reader_name = self._read_text(content, filename)

        warnings = []
        if is_likely_scanned(
            text,
            page_count,
            min_chars_per_page=self.min_chars_per_page,
            max_garbage_ratio=self.max_garbage_ratio,
        ):
            logger.warning(f"{filename}: text layer looks image-based ({len(text)} chars, {page_count} pages)")
            warnings.append(SCANNED_PDF_WARNING)

        logger.debug(f"Extracted {len(text)} chars from {page_count} pages of {filename} via {reader_name}")

        return ExtractionResult(
            text=text,
            page_count=page_count,
            metadata={"extractor": reader_name, "page_count": page_count},
            warnings=warnings,
        )

    def _read_text(self, content: bytes, filename: str) -> tuple[str, int, str]:
        """Read pages with the primary reader, falling back when it fails or finds little."""
        try:
            pages = self.reader.read_pages(content)
        except Exception as e:
            if self.fallback_reader is None:
                raise ExtractionError(f"Failed to parse PDF: {e}", suggestion=PDF_REPAIR_SUGGESTION) from e
            logger.debug(f"{self.reader.name} could not read {filename}: {e}")
            return self._read_with_fallback(content)

        text = reconstruct_document_text(pages)
        if len(text.strip()) >= self.MIN_PRIMARY_CHARS or self.fallback_reader is None:
            return text, len(pages), self.reader.name

        logger.debug(f"{self.reader.name} yielded limited text for {filename}, trying {self.fallback_reader.name}")
        try:
            fallback_text, fallback_pages, fallback_name = self._read_with_fallback(content)
        except ExtractionError as e:
            logger.warning(f"Fallback PDF reader failed for {filename}: {e.message}")
            return text, len(pages), self.reader.name

        if len(fallback_text.strip()) > len(text.strip()):
            return fallback_text, fallback_pages, fallback_name
        return text, len(pages), self.reader.name

    def _read_with_fallback(self, content: bytes) -> tuple[str, int, str]:
        try:
            pages = self.fallback_reader.read_pages(content)
        except Exception as e:
            raise ExtractionError(f"Failed to parse PDF: {e}", suggestion=PDF_REPAIR_SUGGESTION) from e
        return reconstruct_document_text(pages), len(pages), self.fallback_reader.name
