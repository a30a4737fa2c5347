"""
Education parser for resumes.

Extracts degrees, fields of study, institutions, dates, scores and
coursework.
"""

import re
from typing import Optional

from resume_ingest.data.models import EducationEntry
from resume_ingest.utils.logger import get_logger

from ..dates import extract_date_span, strip_dates
from .common import content_lines, is_bullet, split_items, strip_bullet

logger = get_logger(__name__)


class EducationParser:
    """Parser for extracting education from resume text."""

    DEGREE_WORD_PATTERN = re.compile(
        r"\b(?:bachelor(?:'?s)?|master(?:'?s)?|doctor(?:ate)?|associate(?:'?s)?)"
        r"(?:\s+of\s+(?:science|arts|engineering|technology|fine\s+arts|business\s+administration|philosophy|laws))?"
        r"(?:\s+degree)?\b"
        r"|\bhigh\s+school\s+diploma\b|\bdiploma\b",
        re.IGNORECASE,
    )

    # Abbreviations are case-sensitive so "ms" and "ba" inside words don't match
    DEGREE_ABBREVIATION_PATTERN = re.compile(
        r"(?<![A-Za-z])(?:Ph\.?D|M\.?B\.?A|B\.?Tech|M\.?Tech|B\.?Eng|M\.?Eng|B\.?Sc|M\.?Sc"
        r"|B\.?S|B\.?A|B\.?E|M\.?S|M\.?A|A\.?S|A\.?A)\.?(?![A-Za-z])"
    )

    # Common fields of study
    FIELDS_OF_STUDY = (
        "computer science", "software engineering", "information technology",
        "data science", "artificial intelligence", "machine learning",
        "electrical engineering", "mechanical engineering", "civil engineering",
        "chemical engineering", "biomedical engineering", "aerospace engineering",
        "business administration", "finance", "accounting", "economics",
        "marketing", "management", "human resources",
        "mathematics", "statistics", "physics", "chemistry", "biology",
        "psychology", "sociology", "political science", "communications",
        "information systems", "cybersecurity",
    )

    # University/College indicators
    INSTITUTION_INDICATORS = (
        "university", "college", "institute", "school", "academy",
        "polytechnic", "conservatory",
    )

    # GPA pattern
    GPA_PATTERN = re.compile(
        r"(?:gpa|grade\s*point\s*average|cgpa)[:\s]*(\d+(?:\.\d+)?)\s*(?:/\s*(\d+(?:\.\d+)?))?",
        re.IGNORECASE,
    )

    COURSEWORK_PATTERN = re.compile(
        r"^(?:relevant\s+)?(?:coursework|courses)\s*:\s*(.+)$", re.IGNORECASE
    )

    SEGMENT_SEPARATOR = re.compile(r"\s+[|•]\s+|\s+-\s+|,\s+")
    AREA_CUTOFF = re.compile(r"\s+[|•]\s+|\s+-\s+|,|\(")

    def parse(self, text: str) -> list[EducationEntry]:
        """
        Parse education entries.

        Args:
            text: Content of the education section

        Returns:
            Entries in document order; empty when nothing recognisable is found
        """
        lines = content_lines(text)
        if not lines:
            return []

        entries = []
        for block in self._split_into_entries(lines):
            entry = self._parse_entry(block)
            if entry is not None:
                entries.append(entry)

        logger.debug(f"Parsed {len(entries)} education entries")
        return entries

    def _find_degree(self, line: str) -> Optional[re.Match]:
        return self.DEGREE_WORD_PATTERN.search(line) or self.DEGREE_ABBREVIATION_PATTERN.search(line)

    def _has_institution(self, line: str) -> bool:
        lowered = line.lower()
        return any(indicator in lowered for indicator in self.INSTITUTION_INDICATORS)

    def _split_into_entries(self, lines: list[str]) -> list[list[str]]:
        """A second degree or a second institution starts a new entry."""
        blocks: list[list[str]] = []
        current: list[str] = []
        has_degree = has_institution = False

        for line in lines:
            if is_bullet(line) or self.COURSEWORK_PATTERN.match(line):
                current.append(line)
                continue

            line_degree = self._find_degree(line) is not None
            line_institution = self._has_institution(line)
            if current and ((line_degree and has_degree) or (line_institution and has_institution)):
                blocks.append(current)
                current = []
                has_degree = has_institution = False

            current.append(line)
            has_degree = has_degree or line_degree
            has_institution = has_institution or line_institution

        if current:
            blocks.append(current)
        return blocks

    def _parse_entry(self, lines: list[str]) -> Optional[EducationEntry]:
        entry = EducationEntry()
        header = []

        for line in lines:
            coursework = self.COURSEWORK_PATTERN.match(strip_bullet(line) if is_bullet(line) else line)
            if coursework:
                entry.courses.extend(split_items(coursework.group(1)))
            elif not is_bullet(line):
                header.append(line)

        block = "\n".join(lines)

        for line in header:
            if entry.study_type is None:
                self._extract_degree(entry, line)
            if entry.institution is None:
                entry.institution = self._extract_institution(line)

        if entry.institution is None and entry.study_type is not None:
            entry.institution = self._fallback_institution(header)

        if entry.area is None and entry.study_type is not None:
            entry.area = self._find_field_of_study(block)

        if entry.study_type is None and entry.institution is None:
            return None

        span = extract_date_span("\n".join(header))
        if span:
            if span.end is None and not span.is_current:
                # A single date on an education entry is the graduation date
                entry.end_date = span.start
            else:
                entry.start_date = span.start
                entry.end_date = span.end

        gpa = self.GPA_PATTERN.search(block)
        if gpa:
            entry.score = f"{gpa.group(1)}/{gpa.group(2)}" if gpa.group(2) else gpa.group(1)

        return entry

    def _extract_degree(self, entry: EducationEntry, line: str) -> None:
        match = self._find_degree(line)
        if not match:
            return

        entry.study_type = match.group(0).strip(" ,")

        # "Bachelor of Science in Computer Science, Stanford" -> area up to the next separator
        remainder = strip_dates(line[match.end():]).strip()
        remainder = self.GPA_PATTERN.sub("", remainder).strip(" ,")
        if not remainder:
            return

        has_in = re.match(r"^(?:in|of)\s+", remainder, re.IGNORECASE)
        if has_in:
            remainder = remainder[has_in.end():]
        area = self.AREA_CUTOFF.split(remainder, maxsplit=1)[0].strip(" .")
        if not area or self._has_institution(area):
            return
        if has_in or (area[0].isupper() and len(area.split()) <= 6):
            entry.area = area

    def _extract_institution(self, line: str) -> Optional[str]:
        for segment in self.SEGMENT_SEPARATOR.split(strip_dates(line)):
            if self._has_institution(segment):
                cleaned = re.sub(r"\s*\b(?:expected|present|current)\b.*$", "", segment, flags=re.IGNORECASE)
                cleaned = cleaned.strip(" ,.-|")
                if len(cleaned) > 3:
                    return cleaned
        return None

    def _fallback_institution(self, header: list[str]) -> Optional[str]:
        """A short capitalized header line without a degree, e.g. "MIT"."""
        for line in header:
            if self._find_degree(line) or self.GPA_PATTERN.search(line):
                continue
            cleaned = strip_dates(line)
            if cleaned and cleaned[0].isupper() and len(cleaned) <= 80:
                return self.SEGMENT_SEPARATOR.split(cleaned)[0].strip(" ,")
        return None

    def _find_field_of_study(self, text: str) -> Optional[str]:
        lowered = text.lower()
        for field_name in self.FIELDS_OF_STUDY:
            index = lowered.find(field_name)
            if index != -1:
                return text[index:index + len(field_name)]
        return None
