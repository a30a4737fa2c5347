"""
Factory for creating appropriate document extractors.
"""

from pathlib import Path
from typing import Optional

from resume_ingest.utils.constants import MIME_TYPES, FileKind
from resume_ingest.utils.logger import get_logger

from .base import BaseExtractor
from .docx_extractor import DOCXExtractor
from .pdf_extractor import PDFExtractor

logger = get_logger(__name__)


def detect_file_kind(
    filename: Optional[str] = None, mime_type: Optional[str] = None
) -> Optional[FileKind]:
    """
    Work out the document kind from a MIME type or filename extension.

    The MIME type wins when both are given and it is recognized.

    Returns:
        The detected kind, or None for unsupported input
    """
    if mime_type:
        kind = MIME_TYPES.get(mime_type.split(";")[0].strip().lower())
        if kind is not None:
            return kind

    if filename:
        extension = Path(filename).suffix.lower().lstrip(".")
        for kind in FileKind:
            if kind.value == extension:
                return kind

    return None


class ExtractorFactory:
    """
    Factory class for creating document extractors.

    Selects the extractor by document kind or by file extension.
    """

    _extractors: dict[FileKind, BaseExtractor] = {}
    _initialized: bool = False

    @classmethod
    def _initialize(cls) -> None:
        """Initialize available extractors."""
        if cls._initialized:
            return

        cls._extractors = {
            FileKind.PDF: PDFExtractor(),
            FileKind.DOCX: DOCXExtractor(),
        }
        cls._initialized = True

    @classmethod
    def for_kind(cls, kind: FileKind) -> BaseExtractor:
        """Get the extractor registered for a document kind."""
        cls._initialize()
        return cls._extractors[kind]

    @classmethod
    def get_extractor(cls, file_path: str | Path) -> Optional[BaseExtractor]:
        """
        Get the appropriate extractor for a file.

        Args:
            file_path: Path to the file or filename

        Returns:
            Appropriate extractor or None if no extractor supports the format
        """
        kind = detect_file_kind(str(file_path))
        if kind is None:
            logger.warning(f"No extractor found for extension: {Path(file_path).suffix.lower()}")
            return None
        return cls.for_kind(kind)

    @classmethod
    def get_supported_extensions(cls) -> list[str]:
        """Get list of all supported file extensions."""
        cls._initialize()

        extensions = []
        for extractor in cls._extractors.values():
            extensions.extend(extractor.supported_extensions)
        return extensions

    @classmethod
    def is_supported(cls, file_path: str | Path) -> bool:
        """Check if a file format is supported."""
        cls._initialize()
        return any(extractor.can_extract(file_path) for extractor in cls._extractors.values())


# Convenience function
def get_extractor(file_path: str | Path) -> Optional[BaseExtractor]:
    """Get the appropriate extractor for a file."""
    return ExtractorFactory.get_extractor(file_path)
