"""
Resume layout classification.

Computes a handful of structural traits once per document and maps them
to a layout style. Rules are tried in priority order, first match wins:

1. near-empty text              -> unknown, confidence 0
2. at most one detected section -> creative
3. academic sections + 2 ranges -> academic, unless the chronological
                                   score is strictly stronger
4. skills before work           -> combination when 2+ date ranges and
                                   bulleted entries exist, else functional
5. 2+ sections and a date range -> chronological
6. anything else                -> unknown (low confidence)

Confidence is the sum of the weights of the signals that fired for the
chosen style, capped below 100.
"""

import math
from dataclasses import dataclass, field
from typing import Optional

from resume_ingest.utils.constants import (
    CLASSIFIER_HEADER_LINES,
    MAX_FORMAT_CONFIDENCE,
    ResumeFormat,
    SectionKind,
)
from resume_ingest.utils.logger import get_logger

from .dates import DATE_RANGE_PATTERN, count_date_ranges
from .parsers.common import content_lines, is_bullet
from .parsers.contact_parser import ContactParser
from .section_detector import DetectedSection, SectionDetector

logger = get_logger(__name__)

MIN_CLASSIFIABLE_CHARS = 50
BULLET_DENSITY_THRESHOLD = 0.15
NEAR_TOP_FRACTION = 0.3

_ACADEMIC_KINDS = frozenset({SectionKind.PUBLICATIONS, SectionKind.AWARDS})


@dataclass(frozen=True)
class FormatTraits:
    """Structural signals computed from normalized text."""

    section_count: int = 0
    section_kinds: tuple[SectionKind, ...] = ()
    date_range_count: int = 0
    work_date_range_count: int = 0
    skills_before_work: bool = False
    education_before_work: bool = False
    has_academic_sections: bool = False
    has_contact_header: bool = False
    has_summary: bool = False
    dates_near_top: bool = False
    bullet_density: float = 0.0
    avg_line_length: float = 0.0


@dataclass(frozen=True)
class FormatClassification:
    format: ResumeFormat
    confidence: int
    traits: FormatTraits = field(default_factory=FormatTraits)


def _first_index(sections: list[DetectedSection], kind: SectionKind) -> Optional[int]:
    for section in sections:
        if section.name == kind:
            return section.start_index
    return None


def _precedes(sections: list[DetectedSection], first: SectionKind, second: SectionKind) -> bool:
    first_index = _first_index(sections, first)
    second_index = _first_index(sections, second)
    return first_index is not None and second_index is not None and first_index < second_index


def compute_traits(
    text: str,
    sections: Optional[list[DetectedSection]] = None,
    detector: Optional[SectionDetector] = None,
) -> FormatTraits:
    """Compute layout traits; ``sections`` may be passed in to avoid a second detection run."""
    if sections is None:
        sections = (detector or SectionDetector()).detect(text)

    lines = text.split("\n")
    non_blank = content_lines(text)

    header_end = sections[0].start_index if sections else len(lines)
    header = "\n".join(lines[:min(header_end, CLASSIFIER_HEADER_LINES)])

    work_ranges = sum(
        count_date_ranges(section.content) for section in sections if section.name == SectionKind.WORK
    )

    dates_near_top = False
    if non_blank:
        top = non_blank[:max(1, math.ceil(len(non_blank) * NEAR_TOP_FRACTION))]
        dates_near_top = any(DATE_RANGE_PATTERN.search(line) for line in top)

    kinds = tuple(section.name for section in sections)
    return FormatTraits(
        section_count=len(sections),
        section_kinds=kinds,
        date_range_count=count_date_ranges(text),
        work_date_range_count=work_ranges,
        skills_before_work=_precedes(sections, SectionKind.SKILLS, SectionKind.WORK),
        education_before_work=_precedes(sections, SectionKind.EDUCATION, SectionKind.WORK),
        has_academic_sections=any(kind in _ACADEMIC_KINDS for kind in kinds),
        has_contact_header=bool(
            ContactParser.EMAIL_PATTERN.search(header) or ContactParser.PHONE_PATTERN.search(header)
        ),
        has_summary=SectionKind.SUMMARY in kinds,
        dates_near_top=dates_near_top,
        bullet_density=(sum(1 for line in non_blank if is_bullet(line)) / len(non_blank)) if non_blank else 0.0,
        avg_line_length=(sum(len(line) for line in non_blank) / len(non_blank)) if non_blank else 0.0,
    )


# ── per-style scores ──

def _score(signals: list[tuple[bool, int]]) -> int:
    return min(MAX_FORMAT_CONFIDENCE, sum(weight for fired, weight in signals if fired))


def _chronological_score(t: FormatTraits) -> int:
    return _score([
        (t.section_count >= 3, 25),
        (t.dates_near_top, 15),
        (t.date_range_count >= 2, 20),
        (t.date_range_count == 1, 10),
        (t.bullet_density >= BULLET_DENSITY_THRESHOLD, 15),
        (SectionKind.WORK in t.section_kinds and not t.skills_before_work, 15),
        (t.has_contact_header, 10),
    ])


def _functional_score(t: FormatTraits) -> int:
    return _score([
        (t.skills_before_work, 30),
        (t.has_summary, 15),
        (t.date_range_count <= 2, 15),
        (t.section_count >= 3, 15),
        (t.has_contact_header, 10),
    ])


def _combination_score(t: FormatTraits) -> int:
    return _score([
        (t.skills_before_work, 35),
        (t.date_range_count >= 2, 20),
        (t.bullet_density >= BULLET_DENSITY_THRESHOLD, 15),
        (t.section_count >= 3, 15),
        (t.has_contact_header, 10),
    ])


def _academic_score(t: FormatTraits) -> int:
    return _score([
        (t.has_academic_sections, 35),
        (t.education_before_work, 20),
        (t.date_range_count >= 2, 15),
        (t.section_count >= 4, 15),
        (t.has_contact_header, 10),
    ])


def _creative_score(t: FormatTraits) -> int:
    return _score([
        (t.section_count <= 1, 30),
        (t.avg_line_length < 40, 20),
        (not t.has_contact_header, 15),
        (t.bullet_density < BULLET_DENSITY_THRESHOLD, 10),
    ])


def classify_traits(traits: FormatTraits) -> FormatClassification:
    """Apply the priority rules to precomputed traits."""
    if traits.section_count <= 1:
        return FormatClassification(ResumeFormat.CREATIVE, _creative_score(traits), traits)

    if traits.has_academic_sections and traits.date_range_count >= 2:
        academic = _academic_score(traits)
        chronological = _chronological_score(traits)
        if academic >= chronological:
            return FormatClassification(ResumeFormat.ACADEMIC, academic, traits)
        return FormatClassification(ResumeFormat.CHRONOLOGICAL, chronological, traits)

    if traits.skills_before_work:
        strong_chronology = (
            traits.date_range_count >= 2 and traits.bullet_density >= BULLET_DENSITY_THRESHOLD
        )
        if strong_chronology:
            return FormatClassification(ResumeFormat.COMBINATION, _combination_score(traits), traits)
        return FormatClassification(ResumeFormat.FUNCTIONAL, _functional_score(traits), traits)

    if traits.date_range_count >= 1:
        return FormatClassification(ResumeFormat.CHRONOLOGICAL, _chronological_score(traits), traits)

    return FormatClassification(ResumeFormat.UNKNOWN, min(traits.section_count * 10, 30), traits)


def classify_resume_format(
    text: str,
    sections: Optional[list[DetectedSection]] = None,
    detector: Optional[SectionDetector] = None,
) -> FormatClassification:
    """
    Classify the layout style of normalized resume text.

    Args:
        text: Normalized resume text
        sections: Already detected sections, if available
        detector: Section detector to use when ``sections`` is not given

    Returns:
        FormatClassification with confidence in 0-95
    """
    if not text or len(text.strip()) < MIN_CLASSIFIABLE_CHARS:
        return FormatClassification(ResumeFormat.UNKNOWN, 0, FormatTraits())

    traits = compute_traits(text, sections=sections, detector=detector)
    classification = classify_traits(traits)
    logger.debug(
        f"Classified resume as {classification.format.value} "
        f"({classification.confidence}%, {traits.section_count} sections, "
        f"{traits.date_range_count} date ranges)"
    )
    return classification
