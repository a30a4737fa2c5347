"""
Interests/hobbies parser for resumes.
"""

import re

from resume_ingest.data.models import InterestEntry

from .common import content_lines, dedupe, is_bullet, split_items, strip_bullet


class InterestsParser:
    """One interest per list item; "Music: guitar, piano" keeps the details as keywords."""

    DETAIL_PATTERN = re.compile(r"^([^:]{2,40}):\s*(.+)$")

    def parse(self, section_text: str) -> list[InterestEntry]:
        interests: list[InterestEntry] = []
        seen = set()

        for line in content_lines(section_text or ""):
            body = strip_bullet(line) if is_bullet(line) else line
            detail = self.DETAIL_PATTERN.match(body)
            if detail:
                candidates = [
                    InterestEntry(name=detail.group(1).strip(), keywords=dedupe(split_items(detail.group(2))))
                ]
            else:
                candidates = [InterestEntry(name=item) for item in split_items(body)]

            for interest in candidates:
                if interest.name.lower() not in seen:
                    seen.add(interest.name.lower())
                    interests.append(interest)

        return interests
