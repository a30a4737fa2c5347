"""
Section boundary detection for normalized resume text.

A line is a heading when, after trimming a trailing colon and decorative
dashes, it equals one of the synonyms of a section kind (case-insensitive).
Short ALL CAPS lines and styled headings reported by the DOCX extractor
may also match by keyword.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from resume_ingest.utils.constants import (
    MAX_HEADING_LENGTH,
    SECTION_HEADINGS,
    SECTION_KEYWORDS,
    SectionKind,
)
from resume_ingest.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DetectedSection:
    """A section located in the normalized text (line indices, inclusive)."""

    name: SectionKind
    title: str
    start_index: int  # heading line
    end_index: int  # last line before the next heading
    content: str


class SectionDetector:
    """Locates resume sections line by line using heading synonym tables."""

    HEADING_CLEANUP_PATTERN = re.compile(r"\s*:?\s*[-_]*\s*$")
    BULLET_PREFIX_PATTERN = re.compile(r"^(?:[•*\-–>]|\d+[.)])\s")

    def __init__(
        self,
        headings: Mapping[SectionKind, Iterable[str]] = SECTION_HEADINGS,
        keywords: Mapping[SectionKind, Iterable[str]] = SECTION_KEYWORDS,
        max_heading_length: int = MAX_HEADING_LENGTH,
    ):
        self._lookup: dict[str, SectionKind] = {}
        for kind, synonyms in headings.items():
            for synonym in synonyms:
                self._lookup.setdefault(self._normalize_heading(synonym), kind)

        self._keyword_patterns = [
            (kind, re.compile(r"\b(?:" + "|".join(re.escape(w) for w in words) + r")\b", re.IGNORECASE))
            for kind, words in keywords.items()
        ]
        self.max_heading_length = max_heading_length

    @staticmethod
    def _normalize_heading(text: str) -> str:
        text = text.lower().replace(" and ", " & ")
        return re.sub(r"\s+", " ", text).strip()

    def identify_heading(self, line: str, hinted: bool = False) -> Optional[SectionKind]:
        """
        Identify the section kind a line introduces, if it is a heading.

        Args:
            line: One line of normalized text
            hinted: The line was styled as a heading in the source document

        Returns:
            The section kind, or None when the line is not a heading
        """
        stripped = line.strip()
        if not stripped or len(stripped) > self.max_heading_length:
            return None
        if self.BULLET_PREFIX_PATTERN.match(stripped):
            return None

        cleaned = self._normalize_heading(self.HEADING_CLEANUP_PATTERN.sub("", stripped))
        kind = self._lookup.get(cleaned)
        if kind is not None:
            return kind

        # Styled or ALL CAPS short lines may match by keyword ("WORK EXPERIENCE & PROJECTS")
        is_caps_heading = stripped.isupper() and len(stripped.split()) <= 4
        if hinted or is_caps_heading:
            for kind, pattern in self._keyword_patterns:
                if pattern.search(cleaned):
                    return kind

        return None

    def find_headings(
        self, lines: list[str], hints: Iterable[str] = ()
    ) -> list[tuple[int, SectionKind, str]]:
        """Return ``(line index, kind, heading text)`` for every heading line."""
        hinted = {self._normalize_heading(h) for h in hints}
        headings = []
        for index, line in enumerate(lines):
            is_hinted = self._normalize_heading(line) in hinted if hinted else False
            kind = self.identify_heading(line, hinted=is_hinted)
            if kind is not None:
                headings.append((index, kind, line.strip()))
        return headings

    def detect(self, text: str, hints: Iterable[str] = ()) -> list[DetectedSection]:
        """
        Detect sections in normalized text.

        Args:
            text: Normalized resume text
            hints: Heading texts reported by the source document's styling

        Returns:
            Sections ordered by start index; content excludes the heading line
        """
        if not text:
            return []

        lines = text.split("\n")
        headings = self.find_headings(lines, hints)

        sections = []
        for position, (index, kind, title) in enumerate(headings):
            next_index = headings[position + 1][0] if position + 1 < len(headings) else len(lines)
            content = "\n".join(lines[index + 1:next_index]).strip()
            sections.append(
                DetectedSection(
                    name=kind,
                    title=title,
                    start_index=index,
                    end_index=next_index - 1,
                    content=content,
                )
            )

        logger.debug(f"Detected {len(sections)} sections: {[s.name.value for s in sections]}")
        return sections


def header_region(text: str, sections: list[DetectedSection], max_lines: Optional[int] = None) -> str:
    """Text before the first detected section, optionally capped to ``max_lines`` lines."""
    lines = text.split("\n")
    end = sections[0].start_index if sections else len(lines)
    if max_lines is not None:
        end = min(end, max_lines)
    return "\n".join(lines[:end]).strip()


_default_detector = SectionDetector()


def detect_sections(text: str, hints: Iterable[str] = ()) -> list[DetectedSection]:
    """Detect sections with the default heading tables."""
    return _default_detector.detect(text, hints)
