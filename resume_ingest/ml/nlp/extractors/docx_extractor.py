"""
DOCX document text extractor.

Uses python-docx for two read-only views of the same document:
1. Raw text - one line per paragraph, table cells in document order
2. HTML - headings and bold runs preserved, used for heading hints
"""

import asyncio
import html
import io
import re
from typing import Callable, Optional, Protocol, TypeVar

from docx import Document
from docx.table import Table
from docx.text.paragraph import Paragraph

from resume_ingest.utils.constants import DOCX_SIGNATURE
from resume_ingest.utils.logger import get_logger

from .base import BaseExtractor, ExtractionError, ExtractionResult

logger = get_logger(__name__)

T = TypeVar("T")

DOCX_REPAIR_SUGGESTION = (
    "Try re-saving the document as .docx from your word processor, "
    "or export it to PDF."
)


class DocxConverter(Protocol):
    """Converts DOCX bytes into raw text and into HTML."""

    def extract_raw_text(self, content: bytes) -> str:
        ...

    def convert_to_html(self, content: bytes) -> tuple[str, list[str]]:
        ...


class PythonDocxConverter:
    """
    DOCX converter backed by python-docx.

    ``convert_to_html`` returns the HTML plus a list of conversion
    messages, one per paragraph style it had no mapping for.
    """

    HEADING_TAGS = {
        "Title": "h1",
        "Heading 1": "h1",
        "Heading 2": "h2",
        "Heading 3": "h3",
    }

    # Styles rendered as plain paragraphs without a warning
    PLAIN_STYLES = frozenset({
        "Normal", "Body Text", "No Spacing", "Subtitle", "Default",
        "List Paragraph", "List Bullet", "List Bullet 2", "List Number",
        "List Number 2", "List Continue", "Table Paragraph", "Quote",
    })

    def extract_raw_text(self, content: bytes) -> str:
        document = Document(io.BytesIO(content))
        lines = []
        for block in document.iter_inner_content():
            if isinstance(block, Paragraph):
                lines.append(block.text)
            else:
                lines.extend(self._table_cell_texts(block))
        return "\n".join(lines)

    def convert_to_html(self, content: bytes) -> tuple[str, list[str]]:
        document = Document(io.BytesIO(content))
        parts = []
        messages: list[str] = []
        for block in document.iter_inner_content():
            if isinstance(block, Paragraph):
                rendered = self._paragraph_html(block, messages)
                if rendered:
                    parts.append(rendered)
            else:
                parts.append(self._table_html(block, messages))
        return "".join(parts), messages

    def _paragraph_html(self, paragraph: Paragraph, messages: list[str]) -> str:
        inner = "".join(self._run_html(run) for run in paragraph.runs)
        if not inner.strip():
            return ""

        style_name = paragraph.style.name if paragraph.style is not None else "Normal"
        tag = self.HEADING_TAGS.get(style_name)
        if tag is None:
            tag = "p"
            if style_name not in self.PLAIN_STYLES:
                message = f"Unrecognised paragraph style: '{style_name}'"
                if message not in messages:
                    messages.append(message)
        return f"<{tag}>{inner}</{tag}>"

    @staticmethod
    def _run_html(run) -> str:
        text = html.escape(run.text)
        if not text:
            return ""
        if run.italic:
            text = f"<em>{text}</em>"
        if run.bold:
            text = f"<strong>{text}</strong>"
        return text

    def _table_html(self, table: Table, messages: list[str]) -> str:
        rows = []
        for row in table.rows:
            cells = []
            for cell in self._unique_cells(row.cells):
                inner = "".join(self._paragraph_html(p, messages) for p in cell.paragraphs)
                cells.append(f"<td>{inner}</td>")
            rows.append(f"<tr>{''.join(cells)}</tr>")
        return f"<table>{''.join(rows)}</table>"

    def _table_cell_texts(self, table: Table) -> list[str]:
        texts = []
        for row in table.rows:
            for cell in self._unique_cells(row.cells):
                texts.extend(p.text for p in cell.paragraphs)
        return texts

    @staticmethod
    def _unique_cells(cells):
        # Merged cells are reported once per grid column they span
        seen = set()
        for cell in cells:
            if id(cell._tc) in seen:
                continue
            seen.add(id(cell._tc))
            yield cell


class DOCXExtractor(BaseExtractor):
    """Extractor for Microsoft Word documents (.docx)."""

    HEADING_PATTERN = re.compile(r"<h[1-3][^>]*>(.*?)</h[1-3]>", re.IGNORECASE | re.DOTALL)
    # Bold text only counts when it is the whole paragraph
    BOLD_PARAGRAPH_PATTERN = re.compile(
        r"<p>(?:<strong>(.*?)</strong>)</p>", re.IGNORECASE | re.DOTALL
    )
    TAG_PATTERN = re.compile(r"<[^>]+>")
    MAX_HINT_LENGTH = 50

    def __init__(self, converter: Optional[DocxConverter] = None):
        self.converter = converter or PythonDocxConverter()

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".docx",)

    def extract_from_bytes(
        self, content: bytes, filename: str = "document.docx"
    ) -> ExtractionResult:
        """Extract text and HTML from DOCX bytes, one after the other."""
        self._validate_signature(content)
        text = self._convert(self.converter.extract_raw_text, content)
        html_text, messages = self._convert(self.converter.convert_to_html, content)
        return self._build_result(text, html_text, messages, filename)

    async def extract_async(
        self, content: bytes, filename: str = "document.docx"
    ) -> ExtractionResult:
        """Extract text and HTML from DOCX bytes concurrently."""
        self._validate_signature(content)
        text, (html_text, messages) = await asyncio.gather(
            asyncio.to_thread(self._convert, self.converter.extract_raw_text, content),
            asyncio.to_thread(self._convert, self.converter.convert_to_html, content),
        )
        return self._build_result(text, html_text, messages, filename)

    def heading_hints(self, html_text: str) -> list[str]:
        """Collect heading-styled and fully bold short paragraphs from the HTML."""
        hints = []
        for match in self.HEADING_PATTERN.finditer(html_text):
            hint = self._strip_tags(match.group(1))
            if hint:
                hints.append(hint)

        for match in self.BOLD_PARAGRAPH_PATTERN.finditer(html_text):
            hint = self._strip_tags(match.group(1))
            if hint and len(hint) < self.MAX_HINT_LENGTH and hint[0].isupper():
                hints.append(hint)

        return hints

    def _strip_tags(self, fragment: str) -> str:
        return html.unescape(self.TAG_PATTERN.sub("", fragment)).strip()

    def _validate_signature(self, content: bytes) -> None:
        if not content.startswith(DOCX_SIGNATURE):
            raise ExtractionError(
                "Invalid DOCX file: the file is not a Word document package.",
                suggestion=DOCX_REPAIR_SUGGESTION,
            )

    @staticmethod
    def _convert(func: Callable[[bytes], T], content: bytes) -> T:
        try:
            return func(content)
        except Exception as e:
            raise ExtractionError(
                f"Failed to parse DOCX: {e}", suggestion=DOCX_REPAIR_SUGGESTION
            ) from e

    def _build_result(
        self, text: str, html_text: str, messages: list[str], filename: str
    ) -> ExtractionResult:
        for message in messages:
            logger.debug(f"{filename}: {message}")

        logger.debug(f"Extracted {len(text)} chars from {filename} via python-docx")

        return ExtractionResult(
            text=text,
            page_count=1,
            html=html_text,
            heading_hints=self.heading_hints(html_text),
            metadata={"extractor": "python-docx"},
            warnings=list(messages),
        )
