"""
Skills parser for resumes.

Understands "Category: a, b, c" lines, "Category:" header lines followed
by items, and flat bullet or comma lists (one unnamed group).
"""

import re
from typing import Iterable, Mapping, Optional

from resume_ingest.data.models import SkillEntry
from resume_ingest.utils.constants import PROFICIENCY_LEVELS, SKILL_CATEGORIES
from resume_ingest.utils.logger import get_logger

from .common import content_lines, dedupe, is_bullet, split_items, strip_bullet

logger = get_logger(__name__)


class SkillsParser:
    """Parser for extracting skill groups from a skills section."""

    CATEGORY_LINE_PATTERN = re.compile(r"^([A-Za-z][\w &/+.\-]{0,40}?)\s*:\s*(.*)$")

    # Items longer than this are prose; only known skill names are kept from them
    MAX_ITEM_WORDS = 5

    def __init__(
        self,
        known_skills: Mapping[str, Iterable[str]] = SKILL_CATEGORIES,
        proficiency_levels: Iterable[str] = PROFICIENCY_LEVELS,
    ):
        names = sorted(
            {skill for skills in known_skills.values() for skill in skills if len(skill) > 1},
            key=len,
            reverse=True,
        )
        self._known_skill_pattern = re.compile(
            r"(?<![\w+#.])(?:" + "|".join(re.escape(name) for name in names) + r")(?![\w+#])",
            re.IGNORECASE,
        )
        self._proficiency_levels = frozenset(level.lower() for level in proficiency_levels)

    def parse(self, text: str) -> list[SkillEntry]:
        """
        Parse skill groups.

        Args:
            text: Content of the skills section

        Returns:
            Named groups in document order, followed by one unnamed group
            holding any uncategorised items
        """
        groups: list[SkillEntry] = []
        uncategorised: list[str] = []
        open_group: Optional[SkillEntry] = None

        for line in content_lines(text):
            body = strip_bullet(line) if is_bullet(line) else line
            if not body:
                continue

            match = self.CATEGORY_LINE_PATTERN.match(body)
            if match:
                name = match.group(1).strip()
                group = SkillEntry(name=name, level=self._level_for(name))
                groups.append(group)
                items = self._items(match.group(2))
                if items:
                    group.keywords = items
                    open_group = None
                else:
                    # Header line; the items follow on the next lines
                    open_group = group
                continue

            items = self._items(body)
            if open_group is not None:
                open_group.keywords.extend(items)
            else:
                uncategorised.extend(items)

        result = []
        for group in groups:
            group.keywords = dedupe(group.keywords)
            if group.keywords:
                result.append(group)

        if uncategorised:
            result.append(SkillEntry(keywords=dedupe(uncategorised)))

        logger.debug(f"Parsed {len(result)} skill groups")
        return result

    def known_skills(self, text: str) -> list[str]:
        """Known skill names mentioned anywhere in the text, deduplicated."""
        return dedupe(match.group(0) for match in self._known_skill_pattern.finditer(text))

    def _level_for(self, category: str) -> Optional[str]:
        """Categories such as "Advanced" or "Expert" double as proficiency levels."""
        return category if category.lower() in self._proficiency_levels else None

    def _items(self, text: str) -> list[str]:
        items = []
        for item in split_items(text):
            if len(item.split()) > self.MAX_ITEM_WORDS:
                items.extend(match.group(0) for match in self._known_skill_pattern.finditer(item))
            else:
                items.append(item)
        return items
