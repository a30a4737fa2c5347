"""
Tests for resume_ingest.ml.nlp.confidence — section and overall scoring.
"""

import pytest

from resume_ingest.data.models import (
    Basics,
    CertificateEntry,
    EducationEntry,
    LanguageEntry,
    ParsedResumeData,
    ProjectEntry,
    SkillEntry,
    WorkEntry,
)
from resume_ingest.ml.nlp.confidence import (
    ConfidenceScorer,
    calculate_confidence,
    score_basics,
    score_skills,
)


def full_work_entry(**overrides) -> WorkEntry:
    fields = dict(position="Engineer", company="Acme Corp", start_date="2020-01", highlights=["Built APIs"])
    fields.update(overrides)
    return WorkEntry(**fields)


@pytest.fixture
def complete_data():
    return ParsedResumeData(
        basics=Basics(
            name="Jane Doe",
            email="jane@example.com",
            phone="555-123-4567",
            label="Engineer",
            summary="Backend engineer.",
        ),
        work=[full_work_entry(), full_work_entry(company="Beta Labs")],
        education=[
            EducationEntry(
                institution="Stanford University",
                study_type="Bachelor of Science",
                area="Computer Science",
                end_date="2016",
            )
        ],
        skills=[SkillEntry(name="Languages", keywords=["Python"]), SkillEntry(name="Cloud", keywords=["AWS"])],
    )


class TestSectionScores:
    def test_basics_weights(self):
        assert score_basics(Basics(name="Jane Doe")) == 30
        assert score_basics(Basics(name="Jane Doe", email="j@x.io", phone="5551234567")) == 70

    def test_skills_grow_with_groups(self):
        assert score_skills([SkillEntry(keywords=["Python"])]) == 55
        assert score_skills([SkillEntry(keywords=["x"])] * 20) == 100

    def test_work_is_mean_of_entries(self):
        data = ParsedResumeData(work=[full_work_entry(), WorkEntry(position="Engineer", company="Acme")])
        assert ConfidenceScorer().section_scores(data)["work"] == 75

    def test_only_present_sections_reported(self):
        data = ParsedResumeData(
            certificates=[CertificateEntry(name="PMP", issuer="PMI")],
            languages=[LanguageEntry(language="French")],
        )
        assert ConfidenceScorer().section_scores(data) == {"certificates": 80, "languages": 60}


class TestOverallScore:
    def test_none_scores_zero(self):
        report = ConfidenceScorer().score(None)
        assert report.overall == 0
        assert report.sections == {}

    def test_empty_data_scores_zero(self):
        assert ConfidenceScorer().score(ParsedResumeData()).overall == 0

    def test_complete_resume(self, complete_data):
        report = ConfidenceScorer().score(complete_data)
        assert report.sections == {"basics": 100, "work": 100, "education": 100, "skills": 60}
        assert report.overall == 92

    def test_missing_expected_sections_count_as_zero(self):
        data = ParsedResumeData(basics=Basics(name="Jane Doe", email="j@x.io", phone="5551234567"))
        report = ConfidenceScorer().score(data)
        assert report.sections == {"basics": 70}
        assert report.overall == 21

    def test_optional_sections_add_weight(self):
        data = ParsedResumeData(
            basics=Basics(name="Jane Doe", email="j@x.io", phone="5551234567", label="Engineer", summary="Hi"),
            projects=[ProjectEntry(name="Budget App")],
        )
        assert ConfidenceScorer().score(data).overall == 31

    def test_no_expected_sections(self):
        scorer = ConfidenceScorer(expected_sections=())
        data = ParsedResumeData(basics=Basics(name="Jane Doe", email="j@x.io", phone="5551234567"))
        assert scorer.score(data).overall == 70

    def test_bounds(self, complete_data):
        report = calculate_confidence(complete_data)
        assert 0 <= report.overall <= 100
        assert all(0 <= score <= 100 for score in report.sections.values())
