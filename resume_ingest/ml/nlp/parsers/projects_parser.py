"""
Projects parser for resumes.

Extracts project names, descriptions, highlights, technologies, dates and
URLs from a projects section of a resume.
"""

import re
from typing import Optional

from resume_ingest.data.models import ProjectEntry
from resume_ingest.utils.logger import get_logger

from ..dates import extract_date_span, strip_dates
from .common import URL_PATTERN, cap_length, dedupe, is_bullet, normalize_url, split_items, strip_bullet
from .skills_parser import SkillsParser

logger = get_logger(__name__)


class ProjectsParser:
    """Parser for extracting projects from resume text."""

    # "Tech stack:", "Technologies:", "Built with:", etc.
    TECH_LABEL_PATTERN = re.compile(
        r"^(?:tech(?:nologies|nology|\s*stack)?|stack|tools?(?:\s*used)?|built\s*with"
        r"|technologies\s*used)\s*:\s*(.+)$",
        re.IGNORECASE,
    )

    # Numbered project headers ("1. Project Name")
    NUMBERED_HEADER = re.compile(r"^\d{1,2}[.)]\s+")

    PART_SEPARATOR = re.compile(r"\s+[|•]\s+|\s+-\s+")
    NAME_COLON_PATTERN = re.compile(r"^([^:]{2,40}):\s+(.+)$")

    DESCRIPTION_MAX_CHARS = 500

    def __init__(self, skills_parser: Optional[SkillsParser] = None):
        """
        Initialize the projects parser.

        Args:
            skills_parser: Optional SkillsParser instance to reuse for
                           technology extraction. A new one is created if not provided.
        """
        self._skills_parser = skills_parser or SkillsParser()

    def parse(self, section_text: str) -> list[ProjectEntry]:
        """Parse projects from a section of resume text."""
        if not section_text or not section_text.strip():
            return []

        projects = []
        for block in self._split_into_blocks(section_text):
            project = self._parse_project_block(block)
            if project is not None:
                projects.append(project)

        logger.debug(f"Parsed {len(projects)} projects")
        return projects

    def _is_title_line(self, line: str) -> bool:
        if self.NUMBERED_HEADER.match(line):
            return True
        if is_bullet(line) or self.TECH_LABEL_PATTERN.match(line):
            return False
        if URL_PATTERN.fullmatch(line):
            return False
        return line[0].isupper() and len(line) <= 80 and not line.endswith(".")

    def _split_into_blocks(self, text: str) -> list[list[str]]:
        """Split on blank lines, and on title-like lines once a project has a body."""
        blocks: list[list[str]] = []
        current: list[str] = []

        for raw_line in text.split("\n"):
            line = raw_line.strip()
            if not line:
                if current:
                    blocks.append(current)
                    current = []
                continue

            if len(current) > 1 and self._is_title_line(line):
                blocks.append(current)
                current = []
            elif len(current) == 1 and self.NUMBERED_HEADER.match(line):
                blocks.append(current)
                current = []

            current.append(line)

        if current:
            blocks.append(current)
        return blocks

    def _parse_project_block(self, lines: list[str]) -> Optional[ProjectEntry]:
        """Extract a single project from its lines."""
        project = ProjectEntry()
        description: list[str] = []
        explicit_keywords: list[str] = []

        title = self.NUMBERED_HEADER.sub("", strip_bullet(lines[0]) if is_bullet(lines[0]) else lines[0])
        self._parse_title(project, title, description, explicit_keywords)
        if not project.name:
            return None

        for line in lines[1:]:
            tech = self.TECH_LABEL_PATTERN.match(strip_bullet(line) if is_bullet(line) else line)
            if tech:
                explicit_keywords.extend(split_items(tech.group(1)))
            elif is_bullet(line):
                highlight = strip_bullet(line)
                if highlight:
                    project.highlights.append(highlight)
            elif URL_PATTERN.fullmatch(line):
                project.url = project.url or normalize_url(line)
            else:
                description.append(line)

        block = "\n".join(lines)

        if project.url is None:
            url = URL_PATTERN.search(block)
            if url:
                project.url = normalize_url(url.group(0))

        span = extract_date_span(block)
        if span:
            project.start_date = span.start
            project.end_date = span.end

        if description:
            project.description = cap_length(" ".join(description), self.DESCRIPTION_MAX_CHARS)

        keywords = explicit_keywords or self._skills_parser.known_skills(block)
        project.keywords = dedupe(keywords)
        return project

    def _parse_title(
        self,
        project: ProjectEntry,
        title: str,
        description: list[str],
        keywords: list[str],
    ) -> None:
        """Name line: "Name | Tech, Stack | url", "Name - short description", "Name: description"."""
        url = URL_PATTERN.search(title)
        if url:
            project.url = normalize_url(url.group(0))
            title = (title[:url.start()] + title[url.end():]).strip()
        title = strip_dates(title)

        parts = [p.strip(" ,") for p in self.PART_SEPARATOR.split(title) if p.strip(" ,")]
        if not parts:
            return

        name = parts[0]
        colon = self.NAME_COLON_PATTERN.match(name)
        if colon and len(parts) == 1:
            name = colon.group(1).strip()
            description.append(colon.group(2).strip())

        project.name = name
        for part in parts[1:]:
            if "," in part or self._skills_parser.known_skills(part) == [part]:
                keywords.extend(split_items(part))
            else:
                description.append(part)
