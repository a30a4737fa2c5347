"""
Awards/honors parser for resumes.
"""

import re
from typing import Optional

from resume_ingest.data.models import AwardEntry

from ..dates import extract_date_span, strip_dates
from .common import cap_length, content_lines, is_bullet, strip_bullet


class AwardsParser:
    """One award per line: "Title - Awarder, 2020" or "Title from Awarder (2020)"."""

    PART_SEPARATOR = re.compile(r"\s+[|•]\s+|\s+-\s+|,\s+")
    AWARDER_PATTERN = re.compile(r"\s+(?:by|from)\s+(.+)$", re.IGNORECASE)

    def parse(self, section_text: str) -> list[AwardEntry]:
        awards: list[AwardEntry] = []

        for line in content_lines(section_text or ""):
            body = strip_bullet(line) if is_bullet(line) else line
            if awards and not is_bullet(line) and body[0].islower():
                previous = awards[-1]
                previous.summary = cap_length(f"{previous.summary or ''} {body}".strip(), 500)
                continue

            award = self._parse_line(body)
            if award is not None:
                awards.append(award)

        return awards

    def _parse_line(self, line: str) -> Optional[AwardEntry]:
        award = AwardEntry()

        span = extract_date_span(line)
        if span:
            award.date = span.start

        parts = [p.strip(" .,") for p in self.PART_SEPARATOR.split(strip_dates(line)) if p.strip(" .,")]
        if not parts:
            return None

        title = parts[0]
        awarder = self.AWARDER_PATTERN.search(title)
        if awarder:
            award.awarder = awarder.group(1)
            title = title[:awarder.start()]
        elif len(parts) > 1:
            award.awarder = parts[1]

        award.title = title.strip()
        if len(parts) > 2:
            award.summary = ", ".join(parts[2:])
        return award
