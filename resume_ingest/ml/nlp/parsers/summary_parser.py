"""
Summary/objective/profile parser for resumes.
"""

import re
from typing import Optional

from .common import cap_length, is_bullet, strip_bullet


class SummaryParser:
    """Collapses a summary section into a single paragraph."""

    def __init__(self, max_chars: int = 1000):
        self.max_chars = max_chars

    def parse(self, section_text: str) -> Optional[str]:
        """Parse a professional summary section."""
        if not section_text or not section_text.strip():
            return None

        lines = [
            strip_bullet(line) if is_bullet(line) else line.strip()
            for line in section_text.split("\n")
        ]

        # Collapse multiple whitespace / newlines to single space
        cleaned = re.sub(r"\s+", " ", " ".join(lines)).strip()
        if not cleaned:
            return None

        # Cap length to prevent bloat
        return cap_length(cleaned, self.max_chars)
