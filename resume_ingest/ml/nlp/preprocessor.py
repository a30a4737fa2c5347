"""
Text preprocessing utilities for resume parsing.

Normalizes extracted text (Unicode, punctuation variants, OCR artifacts,
hyphenation, page furniture, whitespace) and reorders two-column PDF
layouts into sequential reading streams.

Every function here is pure and total: no input makes it raise.
"""

import re
import unicodedata
from typing import Iterable, Mapping, Optional

from resume_ingest.utils.constants import (
    BULLET_CHARS,
    CANONICAL_BULLET,
    COLUMN_SEPARATOR,
    DASH_CHARS,
    DOUBLE_QUOTE_CHARS,
    INVISIBLE_CHARS,
    LIGATURES,
    LINE_BREAK_CHARS,
    MIN_COLUMN_GAP_SPACES,
    OCR_HEADING_TOKENS,
    SINGLE_QUOTE_CHARS,
    SPACE_CHARS,
)
from resume_ingest.utils.logger import get_logger

logger = get_logger(__name__)


class TextPreprocessor:
    """
    Preprocessor for resume text.

    The character tables and OCR heading tokens are injected so they can be
    extended without touching the normalization steps.
    """

    CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
    # Letters on both sides of a line-ending hyphen; digits are left alone so date ranges survive
    HYPHENATION_PATTERN = re.compile(r"(?<=[^\W\d_])-[ \t]*\n[ \t]*(?=[^\W\d_])")
    PAGE_FURNITURE_PATTERN = re.compile(r"^page\s+\d+\s*(?:of|/)\s*\d+$", re.IGNORECASE)
    DECORATIVE_LINE_PATTERN = re.compile(r"^[-_=~*#.+|/\\•:<> ]+$")
    MULTI_SPACE_PATTERN = re.compile(r" {2,}")
    BLANK_LINES_PATTERN = re.compile(r"\n{3,}")

    def __init__(
        self,
        ligatures: Mapping[str, str] = LIGATURES,
        dash_chars: Iterable[str] = DASH_CHARS,
        single_quote_chars: Iterable[str] = SINGLE_QUOTE_CHARS,
        double_quote_chars: Iterable[str] = DOUBLE_QUOTE_CHARS,
        bullet_chars: Iterable[str] = BULLET_CHARS,
        space_chars: Iterable[str] = SPACE_CHARS,
        invisible_chars: Iterable[str] = INVISIBLE_CHARS,
        line_break_chars: Iterable[str] = LINE_BREAK_CHARS,
        ocr_heading_tokens: Iterable[str] = OCR_HEADING_TOKENS,
    ):
        """Build the character translation tables and OCR split patterns."""
        # Applied before NFKC so marks split from their base letter compose in one pass
        strip_table: dict[int, Optional[str]] = {ord(c): "\n" for c in line_break_chars}
        strip_table.update({ord(c): None for c in invisible_chars})
        self._strip_translation = strip_table

        table: dict[int, Optional[str]] = {ord("…"): "..."}
        table.update({ord(c): "-" for c in dash_chars})
        table.update({ord(c): "'" for c in single_quote_chars})
        table.update({ord(c): '"' for c in double_quote_chars})
        table.update({ord(c): CANONICAL_BULLET for c in bullet_chars})
        table.update({ord(c): " " for c in space_chars})
        table.update({ord(c): expansion for c, expansion in ligatures.items()})
        self._translation = table

        self._ocr_patterns = [
            pattern
            for pattern in (self._build_split_pattern(token) for token in ocr_heading_tokens)
            if pattern is not None
        ]

    @staticmethod
    def _build_split_pattern(token: str) -> Optional[re.Pattern]:
        """Match ``token`` broken by whitespace at any inner point (both halves 2+ chars)."""
        token = token.strip().lower()
        splits = [
            re.escape(token[:i]) + r"[ \t]+" + re.escape(token[i:])
            for i in range(2, len(token) - 1)
        ]
        if not splits:
            return None
        return re.compile(r"\b(?:" + "|".join(splits) + r")\b", re.IGNORECASE)

    def normalize(self, text: str, preserve_column_gaps: bool = False) -> str:
        """
        Normalize raw extracted text.

        Args:
            text: Raw extracted text
            preserve_column_gaps: Keep interior runs of 4+ spaces (as exactly
                four spaces) for the multi-column reorderer

        Returns:
            Normalized text; normalizing it again returns it unchanged
        """
        if not text:
            return ""

        text = text.replace("\r\n", "\n").translate(self._strip_translation)
        text = self.CONTROL_CHARS_PATTERN.sub("", text)
        text = unicodedata.normalize("NFKC", text)
        text = text.translate(self._translation)
        text = self.HYPHENATION_PATTERN.sub("", text)

        for pattern in self._ocr_patterns:
            text = pattern.sub(self._join_split_token, text)

        lines = [self._clean_line(line, preserve_column_gaps) for line in text.split("\n")]
        text = self.BLANK_LINES_PATTERN.sub("\n\n", "\n".join(lines))

        return text.strip()

    @staticmethod
    def _join_split_token(match: re.Match) -> str:
        return re.sub(r"[ \t]+", "", match.group(0))

    def _clean_line(self, line: str, preserve_column_gaps: bool) -> str:
        line = line.replace("\t", " ").strip()

        # Page furniture and separators become blank lines so no words get glued together
        if self.PAGE_FURNITURE_PATTERN.match(line) or self._is_decorative(line):
            return ""

        return self.MULTI_SPACE_PATTERN.sub(
            lambda m: COLUMN_SEPARATOR
            if preserve_column_gaps and len(m.group(0)) >= MIN_COLUMN_GAP_SPACES
            else " ",
            line,
        )

    def _is_decorative(self, line: str) -> bool:
        if not self.DECORATIVE_LINE_PATTERN.match(line):
            return False
        return len(line.replace(" ", "")) >= 3

    def reorder_columns(
        self,
        text: str,
        threshold: float = 0.5,
        min_gap: int = MIN_COLUMN_GAP_SPACES,
    ) -> str:
        """
        Turn side-by-side columns into sequential text.

        When more than ``threshold`` of the non-blank lines contain a gap of
        ``min_gap``+ spaces, each such line is split at its first wide gap;
        all left parts are emitted in order, then a blank line, then all
        right parts in order. Lines without a gap stay in the left stream.
        Otherwise the text is returned unchanged.
        """
        if not text:
            return text

        gap_pattern = re.compile(r"^(.*?\S)[ \t]{%d,}(\S.*)$" % min_gap)
        lines = text.split("\n")
        content_lines = [line.strip() for line in lines if line.strip()]
        if not content_lines:
            return text

        qualifying = sum(1 for line in content_lines if gap_pattern.match(line))
        if qualifying / len(content_lines) <= threshold:
            return text

        logger.debug(f"Reordering two-column layout ({qualifying}/{len(content_lines)} lines split)")

        left: list[str] = []
        right: list[str] = []
        for line in lines:
            match = gap_pattern.match(line.strip())
            if match:
                left.append(match.group(1).strip())
                right.append(match.group(2).strip())
            else:
                left.append(line)

        return "\n".join(left).rstrip() + "\n\n" + "\n".join(right)

    def preprocess(
        self,
        text: str,
        multi_column: bool = False,
        column_threshold: float = 0.5,
    ) -> str:
        """
        Run the full preprocessing pass.

        With ``multi_column`` (PDF input) wide gaps survive the first
        normalization, columns are reordered, and a final normalization
        collapses whatever spacing remains.
        """
        if multi_column:
            text = self.normalize(text, preserve_column_gaps=True)
            text = self.reorder_columns(text, threshold=column_threshold)
        return self.normalize(text)


_default_preprocessor = TextPreprocessor()


def normalize_text(text: str, preserve_column_gaps: bool = False) -> str:
    """Normalize text with the default tables."""
    return _default_preprocessor.normalize(text, preserve_column_gaps=preserve_column_gaps)


def reorder_multi_column_text(
    text: str, threshold: float = 0.5, min_gap: int = MIN_COLUMN_GAP_SPACES
) -> str:
    """Reorder two-column text with the default preprocessor."""
    return _default_preprocessor.reorder_columns(text, threshold=threshold, min_gap=min_gap)


def preprocess_resume_text(
    text: str, multi_column: bool = False, column_threshold: float = 0.5
) -> str:
    """Full preprocessing pass with the default tables."""
    return _default_preprocessor.preprocess(
        text, multi_column=multi_column, column_threshold=column_threshold
    )
