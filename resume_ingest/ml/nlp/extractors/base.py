"""
Base extractor class for document text extraction.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


class ExtractionError(Exception):
    """
    Raised when a document cannot be decoded at all.

    Carries a human-readable remediation hint shown alongside the message.
    """

    def __init__(self, message: str, suggestion: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion


@dataclass
class ExtractionResult:
    """Result of text extraction from a document."""

    text: str
    page_count: int = 1
    html: Optional[str] = None
    heading_hints: list[str] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    @property
    def word_count(self) -> int:
        """Count words in extracted text."""
        return len(self.text.split())

    @property
    def char_count(self) -> int:
        """Count characters in extracted text."""
        return len(self.text)

    @property
    def is_empty(self) -> bool:
        """Check if extraction resulted in empty text."""
        return len(self.text.strip()) == 0


class BaseExtractor(ABC):
    """
    Abstract base class for document text extractors.

    Extractors are the only pipeline components allowed to raise: any
    failure to decode the document surfaces as ``ExtractionError``.
    """

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., '.pdf', '.docx')."""
        pass

    def can_extract(self, file_path: str | Path) -> bool:
        """Check if this extractor can handle the given file."""
        path = Path(file_path)
        return path.suffix.lower() in self.supported_extensions

    def extract(self, file_path: str | Path) -> ExtractionResult:
        """
        Extract text content from a document on disk.

        Args:
            file_path: Path to the document file

        Returns:
            ExtractionResult containing the extracted text and metadata
        """
        path = self._validate_file(file_path)
        return self.extract_from_bytes(path.read_bytes(), path.name)

    @abstractmethod
    def extract_from_bytes(
        self, content: bytes, filename: str = "document"
    ) -> ExtractionResult:
        """
        Extract text content from document bytes.

        Args:
            content: Raw bytes of the document
            filename: Original filename (used in log messages)

        Returns:
            ExtractionResult containing the extracted text and metadata

        Raises:
            ExtractionError: If the document cannot be decoded
        """
        pass

    async def extract_async(
        self, content: bytes, filename: str = "document"
    ) -> ExtractionResult:
        """Run ``extract_from_bytes`` in a worker thread."""
        return await asyncio.to_thread(self.extract_from_bytes, content, filename)

    def _validate_file(self, file_path: str | Path) -> Path:
        """Validate that the file exists and is a regular file."""
        path = Path(file_path)

        try:
            path = path.resolve(strict=False)
        except (OSError, ValueError) as e:
            raise ValueError(f"Invalid file path: {file_path}") from e

        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        if not path.is_file():
            raise ValueError(f"Path is not a file: {file_path}")

        return path
