"""
Contact information parser for resumes.

Extracts name, headline, email, phone, website, location and social
profiles from the header region of a resume.
"""

import re
from typing import Optional

from resume_ingest.data.models import Basics, Location, Profile
from resume_ingest.utils.constants import JOB_TITLE_KEYWORDS
from resume_ingest.utils.logger import get_logger

from .common import URL_PATTERN, content_lines, normalize_url

logger = get_logger(__name__)


class ContactParser:
    """Parser for extracting contact information from resume text."""

    # Email pattern
    EMAIL_PATTERN = re.compile(
        r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"
    )

    # US-style numbers, then international "+CC ..." numbers
    PHONE_PATTERN = re.compile(
        r"(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}\b"
        r"|\+\d{1,3}[-.\s]?\d{1,4}[-.\s]?\d{1,4}[-.\s]?\d{1,9}"
    )
    MIN_PHONE_DIGITS = 7

    # LinkedIn URL pattern
    LINKEDIN_PATTERN = re.compile(
        r"(?:https?://)?(?:www\.)?linkedin\.com/in/[\w\-]+/?",
        re.IGNORECASE,
    )

    # GitHub URL pattern
    GITHUB_PATTERN = re.compile(
        r"(?:https?://)?(?:www\.)?github\.com/[\w\-]+/?",
        re.IGNORECASE,
    )

    # "City, ST", "City, Country", optionally followed by a ZIP code; only the prefix ignores case
    LOCATION_PATTERN = re.compile(
        r"(?:(?i:location)\s*:\s*)?"
        r"(?P<city>[A-Z][\w.'\-]*(?:\s[A-Z][\w.'\-]*){0,2})\s*,\s*"
        r"(?P<region>[A-Z]{2}|[A-Z][a-z]+(?:\s[A-Z][a-z]+)?)"
        r"(?:\s+(?P<postal>\d{5}(?:-\d{4})?))?",
    )

    SEGMENT_SEPARATOR = re.compile(r"\s*[|•·]\s*|\s{2,}")

    NAME_PARTICLES = {"de", "da", "del", "der", "di", "du", "la", "le", "van", "von", "bin", "al"}

    # Words that never appear in a personal name line
    NAME_STOPWORDS = {
        "resume", "cv", "curriculum", "vitae", "page", "phone", "email",
        "address", "linkedin", "github", "objective", "summary", "experience",
        "education", "skills", "references", "contact", "profile",
    }

    NAME_SEARCH_LINES = 5
    LABEL_SEARCH_LINES = 10

    def parse(self, header_text: str, contact_text: Optional[str] = None) -> Basics:
        """
        Parse contact information.

        Args:
            header_text: Text before the first detected section
            contact_text: Where to look for email, phone and links; defaults
                to the header

        Returns:
            Basics with whatever fields could be recovered
        """
        search_text = contact_text if contact_text is not None else header_text
        lines = content_lines(header_text)

        basics = Basics()
        basics.email = self._extract_email(search_text)
        basics.phone = self._extract_phone(search_text)
        basics.profiles = self._extract_profiles(search_text)
        basics.url = self._extract_website(search_text)

        name_index = None
        name_match = self._extract_name(lines)
        if name_match:
            name_index, basics.name = name_match

        basics.label = self._extract_label(lines, name_index)
        basics.location = self._extract_location(lines)

        return basics

    # ── contact details ──

    def _extract_email(self, text: str) -> Optional[str]:
        match = self.EMAIL_PATTERN.search(text)
        return match.group(0) if match else None

    def _extract_phone(self, text: str) -> Optional[str]:
        for match in self.PHONE_PATTERN.finditer(text):
            phone = match.group(0).strip()
            if len(re.sub(r"\D", "", phone)) >= self.MIN_PHONE_DIGITS:
                return phone
        return None

    def _extract_profiles(self, text: str) -> list[Profile]:
        profiles = []

        linkedin = self.LINKEDIN_PATTERN.search(text)
        if linkedin:
            url = linkedin.group(0)
            profiles.append(
                Profile(
                    network="LinkedIn",
                    username=re.sub(r".*linkedin\.com/in/", "", url, flags=re.IGNORECASE).rstrip("/"),
                    url=normalize_url(url),
                )
            )

        github = self.GITHUB_PATTERN.search(text)
        if github:
            url = github.group(0)
            profiles.append(
                Profile(
                    network="GitHub",
                    username=re.sub(r".*github\.com/", "", url, flags=re.IGNORECASE).rstrip("/"),
                    url=normalize_url(url),
                )
            )

        return profiles

    def _extract_website(self, text: str) -> Optional[str]:
        """First URL that is not a LinkedIn or GitHub profile."""
        for match in URL_PATTERN.finditer(text):
            url = match.group(0)
            if "linkedin.com" in url.lower() or "github.com" in url.lower():
                continue
            return normalize_url(url)
        return None

    def _is_contact_line(self, line: str) -> bool:
        return bool(
            self.EMAIL_PATTERN.search(line)
            or self.PHONE_PATTERN.search(line)
            or URL_PATTERN.search(line)
            or self.LINKEDIN_PATTERN.search(line)
            or self.GITHUB_PATTERN.search(line)
        )

    # ── name and headline ──

    def _extract_name(self, lines: list[str]) -> Optional[tuple[int, str]]:
        for index, line in enumerate(lines[:self.NAME_SEARCH_LINES]):
            if self._is_contact_line(line):
                continue
            if self._looks_like_name(line):
                name = line.title() if line.isupper() else line
                return index, name
        return None

    def _looks_like_name(self, line: str) -> bool:
        """Title-case or ALL CAPS line of 2-4 name-like words."""
        if len(line) > 60 or any(ch.isdigit() for ch in line):
            return False
        if any(sep in line for sep in (",", "|", ":", "@", "•")):
            return False

        words = line.split()
        if not 2 <= len(words) <= 4:
            return False

        lowered = {w.lower().strip(".") for w in words}
        if lowered & self.NAME_STOPWORDS or lowered & set(JOB_TITLE_KEYWORDS):
            return False

        capitalized = 0
        for word in words:
            core = word.strip(".")
            if core.lower() in self.NAME_PARTICLES:
                continue
            if not core or not core.replace("-", "").replace("'", "").isalpha():
                return False
            if not core[0].isupper():
                return False
            capitalized += 1

        return capitalized >= 2

    def _extract_label(self, lines: list[str], name_index: Optional[int]) -> Optional[str]:
        """Headline: the next non-contact line after the name, or a job-title-like line."""
        start = name_index + 1 if name_index is not None else 0
        for index in range(start, min(len(lines), start + self.LABEL_SEARCH_LINES)):
            segments = [
                s for s in self.SEGMENT_SEPARATOR.split(lines[index])
                if s and not self._is_contact_line(s) and not self._match_location(s)
            ]
            if not segments:
                continue

            candidate = segments[0].strip()
            if len(candidate) > 80:
                continue

            if self._has_title_keyword(candidate):
                return candidate
            follows_name = name_index is not None and index == name_index + 1
            if follows_name and len(candidate.split()) <= 6 and not any(ch.isdigit() for ch in candidate):
                return candidate

        return None

    @staticmethod
    def _has_title_keyword(text: str) -> bool:
        words = set(re.findall(r"[a-z]+", text.lower()))
        return any(
            keyword in words if " " not in keyword else keyword in text.lower()
            for keyword in JOB_TITLE_KEYWORDS
        )

    # ── location ──

    def _match_location(self, segment: str) -> Optional[re.Match]:
        # "Software Engineer, Google" is a headline, not a place
        if self._has_title_keyword(segment):
            return None
        return self.LOCATION_PATTERN.fullmatch(segment.strip())

    def _extract_location(self, lines: list[str]) -> Optional[Location]:
        for line in lines:
            for segment in self.SEGMENT_SEPARATOR.split(line):
                if not segment or self._is_contact_line(segment):
                    continue
                match = self._match_location(segment)
                if not match:
                    continue

                region = match.group("region")
                location = Location(city=match.group("city"), postal_code=match.group("postal"))
                if len(region) == 2 and region.isupper():
                    location.region = region
                else:
                    location.country = region
                return location
        return None
