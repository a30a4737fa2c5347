"""
Line helpers shared by the entry parsers.
"""

import re
from typing import Iterable

# Bullet glyphs (canonical "•" after preprocessing), dashes, asterisks and "1." / "1)" markers
BULLET_PATTERN = re.compile(r"^\s*(?:[•*\-–—>▪◦‣]|\d{1,2}[.)])\s+")
URL_PATTERN = re.compile(
    r"(?:https?://[^\s,;|()<>]+|(?<![@\w.])(?![\w.\-]*@)(?:www\.)?[\w\-]+\.(?:com|io|dev|me|org|net|co|app|ai|tech)(?:/[^\s,;|()<>]*)?)",
    re.IGNORECASE,
)
ITEM_SEPARATOR_PATTERN = re.compile(r"\s*[,;|•]\s*")


def is_bullet(line: str) -> bool:
    return BULLET_PATTERN.match(line) is not None


def strip_bullet(line: str) -> str:
    return BULLET_PATTERN.sub("", line, count=1).strip()


def content_lines(text: str) -> list[str]:
    """Non-empty lines, trimmed."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def split_items(text: str) -> list[str]:
    """Split a delimited list on commas, semicolons, pipes and bullets."""
    return [item.strip(" .") for item in ITEM_SEPARATOR_PATTERN.split(text) if item.strip(" .")]


def dedupe(items: Iterable[str]) -> list[str]:
    """Drop case-insensitive duplicates, keeping first occurrences in order."""
    seen = set()
    result = []
    for item in items:
        key = item.lower()
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def normalize_url(url: str) -> str:
    url = url.rstrip("/.,")
    if not url.lower().startswith("http"):
        url = "https://" + url
    return url


def cap_length(text: str, limit: int) -> str:
    """Trim text to ``limit`` characters on a word boundary."""
    if len(text) <= limit:
        return text
    cut = text[:limit].rsplit(" ", 1)[0]
    return cut.rstrip(" ,;")
