"""
Certifications parser for resumes.

Extracts certification names, issuers, dates and credential URLs from a
certifications section of a resume. One line is one certificate; lines
that only carry extra details attach to the certificate above them.
"""

import re
from typing import Iterable, Optional

from resume_ingest.data.models import CertificateEntry
from resume_ingest.utils.logger import get_logger

from ..dates import extract_date_span, strip_dates
from .common import URL_PATTERN, content_lines, is_bullet, normalize_url, strip_bullet

logger = get_logger(__name__)


class CertificationsParser:
    """Parser for extracting certifications from resume text."""

    KNOWN_PROVIDERS = (
        "AWS", "Amazon Web Services", "Google Cloud", "Google", "Microsoft", "Azure",
        "Cisco", "CompTIA", "PMI", "Salesforce", "Oracle",
        "Red Hat", "HashiCorp", "CNCF", "Linux Foundation", "ISC2", "ISACA",
        "EC-Council", "Scrum Alliance", "Coursera", "Udacity",
        "LinkedIn Learning", "edX", "Pluralsight", "SANS",
    )

    # "... - Associate" is part of the certificate name, not its issuer
    LEVEL_SUFFIXES = frozenset({
        "associate", "professional", "specialty", "foundational", "practitioner",
        "expert", "fundamentals", "advanced", "intermediate", "beginner",
    })

    PART_SEPARATOR = re.compile(r"\s+[|•]\s+|\s+-\s+|,\s+")
    ISSUER_PREFIX = re.compile(r"^(?:issued\s+by|by|from)\s+", re.IGNORECASE)
    DATE_MARKERS = re.compile(
        r"\b(?:issued|obtained|earned|awarded|completed|expires?|expiry|valid\s+until)\b\s*:?",
        re.IGNORECASE,
    )
    DETAIL_LINE_PATTERN = re.compile(
        r"^(?:issued|credential|expires?|valid|verify|id\b)", re.IGNORECASE
    )

    def __init__(self, known_providers: Iterable[str] = KNOWN_PROVIDERS):
        self._provider_patterns = [
            (provider, re.compile(rf"(?<!\w){re.escape(provider)}(?!\w)", re.IGNORECASE))
            for provider in known_providers
        ]

    def parse(self, section_text: str) -> list[CertificateEntry]:
        """Parse certifications from a section of resume text."""
        certificates: list[CertificateEntry] = []

        for line in content_lines(section_text or ""):
            body = strip_bullet(line) if is_bullet(line) else line
            if not body:
                continue

            if certificates and not is_bullet(line) and self._is_detail_line(body):
                self._apply_details(certificates[-1], body)
                continue

            certificate = self._parse_line(body)
            if certificate is not None:
                certificates.append(certificate)

        logger.debug(f"Parsed {len(certificates)} certificates")
        return certificates

    def _is_detail_line(self, line: str) -> bool:
        return (
            line[0].islower()
            or self.DETAIL_LINE_PATTERN.match(line) is not None
            or URL_PATTERN.fullmatch(line) is not None
        )

    def _apply_details(self, certificate: CertificateEntry, line: str) -> None:
        url = URL_PATTERN.search(line)
        if url and certificate.url is None:
            certificate.url = normalize_url(url.group(0))
        span = extract_date_span(line)
        if span and certificate.date is None:
            certificate.date = span.start
        issuer = re.search(r"\bissued\s+by\s+(.+?)(?:\s+(?:on|in)\b|$)", line, re.IGNORECASE)
        if issuer and certificate.issuer is None:
            certificate.issuer = strip_dates(issuer.group(1)).strip(" ,.")

    def _parse_line(self, line: str) -> Optional[CertificateEntry]:
        certificate = CertificateEntry()

        url = URL_PATTERN.search(line)
        if url:
            certificate.url = normalize_url(url.group(0))
            line = line[:url.start()] + line[url.end():]

        span = extract_date_span(line)
        if span:
            certificate.date = span.start

        line = strip_dates(self.DATE_MARKERS.sub("", line))
        parts = [p.strip(" ,.") for p in self.PART_SEPARATOR.split(line) if p.strip(" ,.")]
        if not parts:
            return None

        name = parts[0]
        for part in parts[1:]:
            if part.lower() in self.LEVEL_SUFFIXES:
                name = f"{name} - {part}"
            elif certificate.issuer is None:
                certificate.issuer = self.ISSUER_PREFIX.sub("", part)

        # "Certified Kubernetes Administrator by CNCF"
        by_issuer = re.search(r"\s+(?:by|from)\s+(.+)$", name)
        if by_issuer and certificate.issuer is None:
            certificate.issuer = by_issuer.group(1)
            name = name[:by_issuer.start()]

        certificate.name = name.strip()
        if certificate.issuer is None:
            certificate.issuer = self._detect_issuer(certificate.name)

        return certificate

    def _detect_issuer(self, text: str) -> Optional[str]:
        """Scan text for known provider names."""
        for provider, pattern in self._provider_patterns:
            if pattern.search(text):
                return provider
        return None
