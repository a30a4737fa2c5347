"""
Document text extractors.

Supports extraction of reading-ordered text from PDF text layers and of
text plus heading-preserving HTML from DOCX files.
"""

from .base import BaseExtractor, ExtractionError, ExtractionResult
from .layout import (
    PositionedTextRun,
    ReconstructedLine,
    group_runs_into_lines,
    is_likely_scanned,
    join_line_runs,
    reconstruct_document_text,
    reconstruct_page_text,
)
from .pdf_extractor import PDFExtractor, PdfPlumberRunReader, PyPdfRunReader
from .docx_extractor import DOCXExtractor, PythonDocxConverter
from .extractor_factory import ExtractorFactory, detect_file_kind, get_extractor

__all__ = [
    "BaseExtractor",
    "ExtractionError",
    "ExtractionResult",
    "PositionedTextRun",
    "ReconstructedLine",
    "group_runs_into_lines",
    "is_likely_scanned",
    "join_line_runs",
    "reconstruct_document_text",
    "reconstruct_page_text",
    "PDFExtractor",
    "PdfPlumberRunReader",
    "PyPdfRunReader",
    "DOCXExtractor",
    "PythonDocxConverter",
    "ExtractorFactory",
    "detect_file_kind",
    "get_extractor",
]
