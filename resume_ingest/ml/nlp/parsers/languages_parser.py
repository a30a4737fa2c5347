"""
Spoken-language parser for resumes.

Recognises "English (Native)", "Spanish - Fluent", "French: B2" and
bare comma-separated language lists.
"""

import re
from typing import Iterable, Optional

from resume_ingest.data.models import LanguageEntry
from resume_ingest.utils.constants import FLUENCY_LEVELS
from resume_ingest.utils.logger import get_logger

from .common import content_lines, is_bullet, strip_bullet

logger = get_logger(__name__)


class LanguagesParser:
    """Parser for extracting spoken languages and their fluency."""

    PARENTHESIZED_PATTERN = re.compile(r"^(.+?)\s*\((.+)\)$")
    DELIMITED_PATTERN = re.compile(r"^(.+?)\s*(?:\s-\s|:)\s*(.+)$")
    CEFR_PATTERN = r"\b[ABC][12]\b"
    MAX_LANGUAGE_WORDS = 3

    def __init__(self, fluency_levels: Iterable[str] = FLUENCY_LEVELS):
        levels = sorted(fluency_levels, key=len, reverse=True)
        self._fluency_pattern = re.compile(
            r"\b(?:" + "|".join(re.escape(level) for level in levels) + r")\b|" + self.CEFR_PATTERN,
            re.IGNORECASE,
        )

    def parse(self, section_text: str) -> list[LanguageEntry]:
        """Parse languages from a section of resume text."""
        languages = []
        for line in content_lines(section_text or ""):
            body = strip_bullet(line) if is_bullet(line) else line
            for chunk in self._split_outside_parentheses(body):
                entry = self._parse_item(chunk)
                if entry is not None:
                    languages.append(entry)

        logger.debug(f"Parsed {len(languages)} languages")
        return languages

    @staticmethod
    def _split_outside_parentheses(text: str) -> list[str]:
        chunks = []
        depth = 0
        current = []
        for char in text:
            if char == "(":
                depth += 1
            elif char == ")":
                depth = max(0, depth - 1)
            if depth == 0 and char in ",;|•":
                chunks.append("".join(current))
                current = []
            else:
                current.append(char)
        chunks.append("".join(current))
        return [chunk.strip() for chunk in chunks if chunk.strip()]

    def _parse_item(self, chunk: str) -> Optional[LanguageEntry]:
        language: Optional[str] = None
        fluency: Optional[str] = None

        match = self.PARENTHESIZED_PATTERN.match(chunk) or self.DELIMITED_PATTERN.match(chunk)
        if match:
            language, fluency = match.group(1), match.group(2)
        else:
            level = self._fluency_pattern.search(chunk)
            if level:
                fluency = level.group(0)
                language = chunk[:level.start()] + chunk[level.end():]
            else:
                language = chunk

        language = re.sub(r"[():\-,]", " ", language or "")
        language = re.sub(r"\s+", " ", language).strip()
        if not self._looks_like_language(language):
            return None

        entry = LanguageEntry(language=language)
        if fluency and fluency.strip(" .()"):
            entry.fluency = fluency.strip(" .()")
        return entry

    def _looks_like_language(self, text: str) -> bool:
        if not text or not text[0].isalpha():
            return False
        if len(text.split()) > self.MAX_LANGUAGE_WORDS or len(text) > 30:
            return False
        return not self._fluency_pattern.fullmatch(text)
