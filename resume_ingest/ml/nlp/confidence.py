"""
Confidence scoring for parsed resume data.

Each section gets a 0-100 completeness score built from which expected
fields its entries carry. The overall score is the weighted mean over the
sections that were parsed plus the expected sections that came back empty
(which count as zero).
"""

from typing import Callable, Iterable, Mapping, Optional, Sequence

from resume_ingest.data.models import (
    Basics,
    CertificateEntry,
    ConfidenceReport,
    EducationEntry,
    LanguageEntry,
    ParsedResumeData,
    ProjectEntry,
    SkillEntry,
    WorkEntry,
)
from resume_ingest.utils.constants import EXPECTED_SECTIONS, SECTION_WEIGHTS
from resume_ingest.utils.logger import get_logger

logger = get_logger(__name__)


def _weighted(checks: Iterable[tuple[bool, int]]) -> int:
    return sum(weight for present, weight in checks if present)


def score_basics(basics: Basics) -> int:
    return min(100, _weighted([
        (bool(basics.name), 30),
        (bool(basics.email), 25),
        (bool(basics.phone), 15),
        (bool(basics.label), 15),
        (bool(basics.summary), 15),
    ]))


def score_work_entry(entry: WorkEntry) -> int:
    return _weighted([
        (bool(entry.position), 25),
        (bool(entry.company), 25),
        (bool(entry.start_date), 20),
        (bool(entry.highlights), 30),
    ])


def score_education_entry(entry: EducationEntry) -> int:
    return _weighted([
        (bool(entry.institution), 30),
        (bool(entry.study_type), 25),
        (bool(entry.area), 25),
        (bool(entry.start_date or entry.end_date), 20),
    ])


def score_project_entry(entry: ProjectEntry) -> int:
    return _weighted([
        (bool(entry.name), 40),
        (bool(entry.description), 20),
        (bool(entry.highlights), 25),
        (bool(entry.url or entry.keywords), 15),
    ])


def score_certificate_entry(entry: CertificateEntry) -> int:
    return _weighted([
        (bool(entry.name), 50),
        (bool(entry.issuer), 30),
        (bool(entry.date), 20),
    ])


def score_language_entry(entry: LanguageEntry) -> int:
    return _weighted([
        (bool(entry.language), 60),
        (bool(entry.fluency), 40),
    ])


def score_skills(skills: Sequence[SkillEntry]) -> int:
    """Skills are free-form; more groups means a more complete section."""
    return min(100, 50 + len(skills) * 5)


def _mean_score(entries: Sequence, scorer: Callable[[object], int]) -> int:
    return min(100, round(sum(scorer(entry) for entry in entries) / len(entries)))


class ConfidenceScorer:
    """Scores parsed resume data section by section."""

    def __init__(
        self,
        weights: Mapping[str, float] = SECTION_WEIGHTS,
        expected_sections: Iterable[str] = EXPECTED_SECTIONS,
    ):
        self.weights = dict(weights)
        self.expected_sections = tuple(expected_sections)

    def section_scores(self, data: ParsedResumeData) -> dict[str, int]:
        """Scores for the sections that have content."""
        sections: dict[str, int] = {}

        if data.basics is not None:
            sections["basics"] = score_basics(data.basics)
        if data.work:
            sections["work"] = _mean_score(data.work, score_work_entry)
        if data.education:
            sections["education"] = _mean_score(data.education, score_education_entry)
        if data.skills:
            sections["skills"] = score_skills(data.skills)
        if data.projects:
            sections["projects"] = _mean_score(data.projects, score_project_entry)
        if data.certificates:
            sections["certificates"] = _mean_score(data.certificates, score_certificate_entry)
        if data.languages:
            sections["languages"] = _mean_score(data.languages, score_language_entry)

        return sections

    def score(self, data: Optional[ParsedResumeData]) -> ConfidenceReport:
        """
        Score parsed data.

        Args:
            data: Parsed resume data (None scores as empty)

        Returns:
            ConfidenceReport with the overall score and the per-section scores
        """
        if data is None:
            return ConfidenceReport()

        sections = self.section_scores(data)

        counted = dict(sections)
        for name in self.expected_sections:
            counted.setdefault(name, 0)

        total_weight = sum(self.weights.get(name, 1.0) for name in counted)
        if not sections or total_weight <= 0:
            return ConfidenceReport(overall=0, sections=sections)

        weighted_sum = sum(score * self.weights.get(name, 1.0) for name, score in counted.items())
        overall = max(0, min(100, round(weighted_sum / total_weight)))

        logger.debug(f"Confidence: overall={overall} sections={sections}")
        return ConfidenceReport(overall=overall, sections=sections)


_default_scorer = ConfidenceScorer()


def calculate_confidence(data: Optional[ParsedResumeData]) -> ConfidenceReport:
    """Score parsed data with the default weights."""
    return _default_scorer.score(data)
