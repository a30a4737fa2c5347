"""
Work experience parser for resumes.

Splits a work section into job entries and extracts position, company,
location, dates, highlights and a short summary from each.
"""

import re
from typing import Optional

from resume_ingest.data.models import WorkEntry
from resume_ingest.utils.constants import JOB_TITLE_KEYWORDS
from resume_ingest.utils.logger import get_logger

from ..dates import extract_date_span, find_date_range, has_date_range, strip_dates
from .common import cap_length, content_lines, is_bullet, strip_bullet
from .contact_parser import ContactParser

logger = get_logger(__name__)


class ExperienceParser:
    """Parser for extracting work experience from resume text."""

    COMPANY_INDICATORS = (
        "inc", "llc", "ltd", "corp", "corporation", "company",
        "co.", "technologies", "solutions", "systems", "group",
        "consulting", "services", "partners", "associates", "labs",
        "university", "agency", "bank", "gmbh",
    )

    # "Engineer at Acme", "Acme | Engineer", "Acme - Engineer"
    AT_SEPARATOR = re.compile(r"\s+(?:at|@)\s+", re.IGNORECASE)
    PART_SEPARATOR = re.compile(r"\s+[|•]\s+|\s+-\s+")

    REMOTE_PATTERN = re.compile(r"^(?:remote|hybrid|on-?site)$", re.IGNORECASE)

    MAX_HEADER_LINES = 3
    MAX_HEADER_LENGTH = 100
    SUMMARY_MAX_CHARS = 500

    def parse(self, text: str) -> list[WorkEntry]:
        """
        Parse work experience entries.

        Args:
            text: Content of the work experience section

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

        logger.debug(f"Parsed {len(entries)} work entries")
        return entries

    # ── entry splitting ──

    def _split_into_entries(self, lines: list[str]) -> list[list[str]]:
        blocks: list[list[str]] = []
        current: list[str] = []
        complete = False  # current block already has dates or highlights

        for index, line in enumerate(lines):
            if current and complete and self._starts_entry(line, index, lines):
                blocks.append(current)
                current = []
                complete = False

            current.append(line)
            if is_bullet(line) or has_date_range(line):
                complete = True

        if current:
            blocks.append(current)
        return blocks

    def _starts_entry(self, line: str, index: int, lines: list[str]) -> bool:
        """Check if a line looks like a new job header."""
        if is_bullet(line):
            return False
        if has_date_range(line):
            return True
        if not line[0].isupper() or len(line) > self.MAX_HEADER_LENGTH:
            return False
        if self.AT_SEPARATOR.search(line):
            return True

        # Short header line followed closely by its dates
        following = lines[index + 1:index + 3]
        return any(has_date_range(next_line) and not is_bullet(next_line) for next_line in following)

    # ── entry fields ──

    def _is_header_line(self, line: str) -> bool:
        if has_date_range(line):
            return True
        return len(line) <= self.MAX_HEADER_LENGTH and not line.endswith(".")

    def _parse_entry(self, lines: list[str]) -> Optional[WorkEntry]:
        header: list[str] = []
        prose: list[str] = []
        highlights: list[str] = []

        for line in lines:
            if is_bullet(line):
                bullet = strip_bullet(line)
                if bullet:
                    highlights.append(bullet)
            elif highlights and line[0].islower():
                # Wrapped bullet text
                highlights[-1] = f"{highlights[-1]} {line}"
            elif not highlights and not prose and len(header) < self.MAX_HEADER_LINES and self._is_header_line(line):
                header.append(line)
            else:
                prose.append(line)

        if not header and prose and (highlights or find_date_range("\n".join(lines))):
            # No line looked like a header; the first non-bullet line is the best guess
            header.append(prose.pop(0))
            header.extend(line for line in prose if has_date_range(line))
            prose = [line for line in prose if not has_date_range(line)]

        if not header:
            return None

        entry = WorkEntry(highlights=highlights)

        header_text = "\n".join(header)
        span = extract_date_span(header_text) or find_date_range("\n".join(lines))
        if span:
            entry.start_date = span.start
            entry.end_date = span.end

        self._assign_roles(entry, [strip_dates(line) for line in header])

        if not entry.position and not entry.company:
            return None

        if prose:
            entry.summary = cap_length(" ".join(prose), self.SUMMARY_MAX_CHARS)

        return entry

    def _assign_roles(self, entry: WorkEntry, header_lines: list[str]) -> None:
        """Fill position, company and location from date-stripped header lines."""
        for line_number, line in enumerate(header_lines):
            if not line:
                continue

            at_parts = self.AT_SEPARATOR.split(line, maxsplit=1)
            if len(at_parts) == 2 and not entry.position and not entry.company:
                entry.position = at_parts[0].strip(" ,")
                rest = [p.strip(" ,") for p in self.PART_SEPARATOR.split(at_parts[1]) if p.strip(" ,")]
                if rest:
                    entry.company = rest[0]
                    for part in rest[1:]:
                        self._maybe_location(entry, part)
                continue

            parts = [p.strip(" ,") for p in self.PART_SEPARATOR.split(line) if p.strip(" ,")]
            for part in parts:
                if self._maybe_location(entry, part):
                    continue
                self._place_part(entry, part, first_line=line_number == 0)

    def _maybe_location(self, entry: WorkEntry, part: str) -> bool:
        if entry.location:
            return False
        if self.REMOTE_PATTERN.match(part):
            entry.location = part
            return True
        if self._looks_like_company(part) or self._has_title_keyword(part):
            return False
        if ContactParser.LOCATION_PATTERN.fullmatch(part):
            entry.location = part
            return True
        return False

    def _place_part(self, entry: WorkEntry, part: str, first_line: bool) -> None:
        is_title = self._has_title_keyword(part)
        is_company = self._looks_like_company(part)

        if is_title and not is_company and not entry.position:
            entry.position = part
        elif is_company and not entry.company:
            entry.company = part
        elif not entry.position and first_line and not entry.company:
            entry.position = part
        elif not entry.company:
            entry.company = part
        elif not entry.position:
            entry.position = part

        # "Acme Corp" on top and "Engineer" below: the first guess was wrong
        if entry.position and entry.company:
            if self._has_title_keyword(entry.company) and not self._has_title_keyword(entry.position):
                entry.position, entry.company = entry.company, entry.position

    def _looks_like_company(self, text: str) -> bool:
        """Check if text looks like a company name."""
        words = set(re.findall(r"[a-z.]+", text.lower()))
        return any(indicator in words for indicator in self.COMPANY_INDICATORS)

    @staticmethod
    def _has_title_keyword(text: str) -> bool:
        lowered = text.lower()
        words = set(re.findall(r"[a-z]+", lowered))
        return any(
            keyword in lowered if " " in keyword else keyword in words
            for keyword in JOB_TITLE_KEYWORDS
        )
