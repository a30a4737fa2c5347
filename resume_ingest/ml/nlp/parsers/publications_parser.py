"""
Publications parser for resumes.

Handles one publication per line or bullet, in loose citation styles:

    "Scaling Vector Search" - VLDB Journal, 2021
    Deep Learning for Resumes | ACL | 2020 | https://aclanthology.org/x
"""

import re
from typing import Optional

from resume_ingest.data.models import PublicationEntry
from resume_ingest.utils.logger import get_logger

from ..dates import extract_date_span, strip_dates
from .common import URL_PATTERN, cap_length, content_lines, is_bullet, normalize_url, strip_bullet

logger = get_logger(__name__)


class PublicationsParser:
    """Parser for extracting publications from resume text."""

    QUOTED_TITLE_PATTERN = re.compile(r'"([^"]{3,})"')
    PART_SEPARATOR = re.compile(r"\s+[|•]\s+|\s+-\s+")
    SENTENCE_SEPARATOR = re.compile(r"(?<=[a-z0-9)])\.\s+(?=[A-Z])")

    def parse(self, section_text: str) -> list[PublicationEntry]:
        publications: list[PublicationEntry] = []

        for line in content_lines(section_text or ""):
            body = strip_bullet(line) if is_bullet(line) else line
            if publications and not is_bullet(line) and body[0].islower():
                previous = publications[-1]
                previous.summary = cap_length(f"{previous.summary or ''} {body}".strip(), 500)
                continue

            publication = self._parse_line(body)
            if publication is not None:
                publications.append(publication)

        logger.debug(f"Parsed {len(publications)} publications")
        return publications

    def _parse_line(self, line: str) -> Optional[PublicationEntry]:
        publication = PublicationEntry()

        url = URL_PATTERN.search(line)
        if url:
            publication.url = normalize_url(url.group(0))
            line = line[:url.start()] + line[url.end():]

        span = extract_date_span(line)
        if span:
            publication.release_date = span.start

        quoted = self.QUOTED_TITLE_PATTERN.search(line)
        if quoted:
            publication.name = quoted.group(1).strip(" .,")
            rest = strip_dates(line[quoted.end():]).strip(" .,-|")
            if rest:
                publication.publisher = self.PART_SEPARATOR.split(rest)[0].strip(" .,")
            return publication

        cleaned = strip_dates(line).strip(" .,")
        parts = [p.strip(" .,") for p in self.PART_SEPARATOR.split(cleaned) if p.strip(" .,")]
        if len(parts) < 2:
            parts = [p.strip(" .,") for p in self.SENTENCE_SEPARATOR.split(cleaned) if p.strip(" .,")]
        if not parts:
            return None

        publication.name = parts[0]
        if len(parts) > 1:
            publication.publisher = parts[1]
        return publication
