"""
Date and date-range recognition shared by the classifier and entry parsers.

Resume dates are partial: "Jan 2020", "01/2020" or "2020". They are kept
as ``YYYY-MM`` or ``YYYY`` strings.
"""

import re
from dataclasses import dataclass
from typing import Optional

MONTHS = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|jun(?:e)?|"
    r"jul(?:y)?|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|"
    r"dec(?:ember)?)"
)

MONTH_MAP = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

_DATE = (
    rf"(?:\b{MONTHS}\.?,?\s*(?:19|20)\d{{2}}\b"
    r"|\b\d{1,2}/(?:19|20)\d{2}\b"
    r"|\b(?:19|20)\d{2}\b)"
)
_PRESENT = r"(?:present|current|now|ongoing|today)"

DATE_PATTERN = re.compile(_DATE, re.IGNORECASE)
DATE_RANGE_PATTERN = re.compile(
    rf"(?P<start>{_DATE})\s*(?:-|–|—|\bto\b|\buntil\b)\s*(?P<end>{_DATE}|\b{_PRESENT}\b)",
    re.IGNORECASE,
)
PRESENT_PATTERN = re.compile(rf"\b{_PRESENT}\b", re.IGNORECASE)

_MONTH_YEAR = re.compile(rf"\b({MONTHS})\.?,?\s*((?:19|20)\d{{2}})", re.IGNORECASE)
_NUMERIC = re.compile(r"\b(\d{1,2})/((?:19|20)\d{2})\b")
_YEAR = re.compile(r"\b((?:19|20)\d{2})\b")


@dataclass(frozen=True)
class DateRange:
    """A start/end pair; ``end`` is None for ongoing or unknown ends."""

    start: Optional[str]
    end: Optional[str]
    is_current: bool
    text: str


def format_date(value: str) -> Optional[str]:
    """Format "Jan 2020" / "01/2020" / "2020" as ``YYYY-MM`` or ``YYYY``."""
    match = _MONTH_YEAR.search(value)
    if match:
        month = MONTH_MAP[match.group(1)[:3].lower()]
        return f"{match.group(2)}-{month:02d}"

    match = _NUMERIC.search(value)
    if match and 1 <= int(match.group(1)) <= 12:
        return f"{match.group(2)}-{int(match.group(1)):02d}"

    match = _YEAR.search(value)
    if match:
        return match.group(1)

    return None


def count_date_ranges(text: str) -> int:
    """Number of date-range-like substrings in the text."""
    return sum(1 for _ in DATE_RANGE_PATTERN.finditer(text))


def has_date_range(text: str) -> bool:
    return DATE_RANGE_PATTERN.search(text) is not None


def find_date_range(text: str) -> Optional[DateRange]:
    """First explicit "start - end" range in the text."""
    match = DATE_RANGE_PATTERN.search(text)
    if not match:
        return None

    end_text = match.group("end")
    is_current = PRESENT_PATTERN.fullmatch(end_text) is not None
    return DateRange(
        start=format_date(match.group("start")),
        end=None if is_current else format_date(end_text),
        is_current=is_current,
        text=match.group(0),
    )


def extract_date_span(text: str) -> Optional[DateRange]:
    """
    Best-effort dates for one entry.

    An explicit range wins; otherwise the first two standalone dates form a
    range, and a single date is returned as ``start`` (callers decide what a
    lone date means), marked current when "Present" also appears.
    """
    date_range = find_date_range(text)
    if date_range:
        return date_range

    matches = list(DATE_PATTERN.finditer(text))
    if not matches:
        return None

    if len(matches) >= 2:
        return DateRange(
            start=format_date(matches[0].group(0)),
            end=format_date(matches[1].group(0)),
            is_current=False,
            text=text[matches[0].start():matches[1].end()],
        )

    return DateRange(
        start=format_date(matches[0].group(0)),
        end=None,
        is_current=PRESENT_PATTERN.search(text) is not None,
        text=matches[0].group(0),
    )


def strip_dates(text: str) -> str:
    """Remove date ranges and standalone dates, then trim leftover separators."""
    text = DATE_RANGE_PATTERN.sub("", text)
    text = DATE_PATTERN.sub("", text)
    text = re.sub(r"\(\s*\)", "", text)
    text = re.sub(r"\s{2,}", " ", text)
    return text.strip(" ,;|-–—()\t")
