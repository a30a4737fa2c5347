"""
References parser for resumes.
"""

import re
from typing import Optional

from resume_ingest.data.models import ReferenceEntry
from resume_ingest.utils.constants import JOB_TITLE_KEYWORDS

from .common import is_bullet, strip_bullet


class ReferencesParser:
    """
    Referees listed as a name line followed by detail lines.

    Blank lines separate referees when present. "References available upon
    request" and similar placeholders produce no entries.
    """

    ON_REQUEST_PATTERN = re.compile(r"\b(?:up)?on\s+request\b", re.IGNORECASE)
    NAME_LINE_PATTERN = re.compile(
        r"^((?:(?:Dr|Mr|Ms|Mrs|Prof)\.?\s+)?[A-Z][a-z'\-]+(?:\s+[A-Z][a-z'\-]+\.?){1,3})"
        r"(?:\s*(?:,|\s-\s|\|)\s*(.+))?$"
    )
    NON_NAME_WORDS = frozenset(JOB_TITLE_KEYWORDS) | {
        "inc", "llc", "ltd", "corp", "university", "college", "company", "email", "phone",
    }

    def parse(self, section_text: str) -> list[ReferenceEntry]:
        if not section_text or self.ON_REQUEST_PATTERN.search(section_text):
            return []

        references: list[ReferenceEntry] = []
        for block in re.split(r"\n\s*\n", section_text):
            references.extend(self._parse_block(block))
        return references

    def _name_line(self, line: str) -> Optional[re.Match]:
        match = self.NAME_LINE_PATTERN.match(line)
        if not match:
            return None
        words = {word.lower().strip(".") for word in match.group(1).split()}
        return None if words & self.NON_NAME_WORDS else match

    def _parse_block(self, block: str) -> list[ReferenceEntry]:
        references: list[ReferenceEntry] = []
        details: list[list[str]] = []

        for raw_line in block.split("\n"):
            line = raw_line.strip()
            if not line:
                continue
            body = strip_bullet(line) if is_bullet(line) else line

            match = self._name_line(body)
            starts_new = match is not None and (not references or details[-1])
            if starts_new:
                references.append(ReferenceEntry(name=match.group(1).strip()))
                details.append([match.group(2).strip()] if match.group(2) else [])
            elif references:
                details[-1].append(body)

        for reference, lines in zip(references, details):
            if lines:
                reference.reference = "; ".join(lines)
        return references
