"""
Tests for resume_ingest.ml.nlp.format_classifier — layout traits and the priority rules.
"""

from dataclasses import replace

import pytest

from resume_ingest.ml.nlp.format_classifier import (
    FormatTraits,
    classify_resume_format,
    classify_traits,
    compute_traits,
)
from resume_ingest.utils.constants import MAX_FORMAT_CONFIDENCE, ResumeFormat, SectionKind


# ── compute_traits ───────────────────────────────────────────────────────────


class TestComputeTraits:
    def test_clean_resume_traits(self, clean_resume_text):
        traits = compute_traits(clean_resume_text)
        assert traits.section_count == 3
        assert traits.section_kinds == (SectionKind.WORK, SectionKind.EDUCATION, SectionKind.SKILLS)
        assert traits.date_range_count == 2
        assert traits.work_date_range_count == 1
        assert traits.skills_before_work is False
        assert traits.has_contact_header is True
        assert traits.bullet_density == pytest.approx(2 / 13)

    def test_skills_before_work(self, functional_resume_text):
        traits = compute_traits(functional_resume_text)
        assert traits.skills_before_work is True
        assert traits.has_summary is False

    def test_academic_sections(self, academic_resume_text):
        traits = compute_traits(academic_resume_text)
        assert traits.has_academic_sections is True
        assert traits.education_before_work is True
        assert traits.dates_near_top is True

    def test_contact_header_ignores_body(self):
        text = "Jane Doe\n\nExperience\nContact me at jane@example.com"
        assert compute_traits(text).has_contact_header is False


# ── classify_resume_format ───────────────────────────────────────────────────


class TestClassifyResumeFormat:
    def test_empty_is_unknown(self):
        result = classify_resume_format("")
        assert result.format == ResumeFormat.UNKNOWN
        assert result.confidence == 0

    def test_near_empty_is_unknown(self):
        assert classify_resume_format("Jane Doe").format == ResumeFormat.UNKNOWN

    def test_clean_resume_is_chronological(self, clean_resume_text):
        result = classify_resume_format(clean_resume_text)
        assert result.format == ResumeFormat.CHRONOLOGICAL
        assert result.confidence > 40

    def test_full_resume_is_chronological(self, full_resume_text):
        assert classify_resume_format(full_resume_text).format == ResumeFormat.CHRONOLOGICAL

    def test_skills_first_is_functional_or_combination(self, functional_resume_text):
        result = classify_resume_format(functional_resume_text)
        assert result.traits.skills_before_work is True
        assert result.format in (ResumeFormat.FUNCTIONAL, ResumeFormat.COMBINATION)

    def test_academic(self, academic_resume_text):
        assert classify_resume_format(academic_resume_text).format == ResumeFormat.ACADEMIC

    def test_no_sections_is_creative(self):
        text = (
            "I design immersive installations for museums and galleries.\n"
            "My work blends sound, light and code into playful spaces."
        )
        assert classify_resume_format(text).format == ResumeFormat.CREATIVE

    def test_precomputed_sections_are_used(self, clean_resume_text):
        result = classify_resume_format(clean_resume_text, sections=[])
        assert result.format == ResumeFormat.CREATIVE


# ── classify_traits priority matrix ──────────────────────────────────────────


BASE = FormatTraits(
    section_count=4,
    section_kinds=(SectionKind.SUMMARY, SectionKind.WORK, SectionKind.EDUCATION, SectionKind.SKILLS),
    date_range_count=3,
    has_contact_header=True,
    bullet_density=0.3,
    avg_line_length=45.0,
)


class TestClassifyTraits:
    def test_single_section_is_creative_even_with_dates(self):
        traits = replace(BASE, section_count=1, section_kinds=(SectionKind.WORK,))
        assert classify_traits(traits).format == ResumeFormat.CREATIVE

    def test_academic_wins_ties(self):
        traits = FormatTraits(
            section_count=2,
            section_kinds=(SectionKind.WORK, SectionKind.PUBLICATIONS),
            date_range_count=3,
            has_academic_sections=True,
            bullet_density=0.3,
        )
        result = classify_traits(traits)
        assert result.format == ResumeFormat.ACADEMIC
        assert result.confidence == 50

    def test_education_first_is_academic(self):
        traits = replace(
            BASE,
            section_kinds=BASE.section_kinds + (SectionKind.PUBLICATIONS,),
            section_count=5,
            has_academic_sections=True,
            education_before_work=True,
        )
        assert classify_traits(traits).format == ResumeFormat.ACADEMIC

    def test_stronger_chronology_beats_academic(self):
        traits = replace(
            BASE,
            section_count=3,
            has_academic_sections=True,
            dates_near_top=True,
        )
        result = classify_traits(traits)
        assert result.format == ResumeFormat.CHRONOLOGICAL

    def test_academic_needs_two_ranges(self):
        traits = replace(BASE, has_academic_sections=True, date_range_count=1)
        assert classify_traits(traits).format == ResumeFormat.CHRONOLOGICAL

    def test_skills_first_with_bulleted_history_is_combination(self):
        traits = replace(BASE, skills_before_work=True)
        assert classify_traits(traits).format == ResumeFormat.COMBINATION

    def test_skills_first_with_sparse_history_is_functional(self):
        traits = replace(BASE, skills_before_work=True, bullet_density=0.05)
        assert classify_traits(traits).format == ResumeFormat.FUNCTIONAL

    def test_dated_sections_are_chronological(self):
        assert classify_traits(BASE).format == ResumeFormat.CHRONOLOGICAL

    def test_undated_sections_are_unknown(self):
        traits = replace(BASE, date_range_count=0, section_count=2)
        result = classify_traits(traits)
        assert result.format == ResumeFormat.UNKNOWN
        assert result.confidence == 20

    def test_confidence_capped(self):
        traits = replace(BASE, dates_near_top=True)
        assert classify_traits(traits).confidence <= MAX_FORMAT_CONFIDENCE

    @pytest.mark.parametrize(
        "overrides",
        [
            {},
            {"skills_before_work": True},
            {"has_academic_sections": True},
            {"section_count": 0},
            {"date_range_count": 0},
        ],
    )
    def test_confidence_in_range(self, overrides):
        confidence = classify_traits(replace(BASE, **overrides)).confidence
        assert 0 <= confidence <= MAX_FORMAT_CONFIDENCE
