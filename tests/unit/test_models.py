"""
Tests for Pydantic data models in resume_ingest.data.models.
"""

import pytest
from pydantic import ValidationError

from resume_ingest.data.models import (
    Basics,
    ConfidenceReport,
    EducationEntry,
    ImportResult,
    Location,
    ParsedResumeData,
    Profile,
    WorkEntry,
)
from resume_ingest.utils.constants import ResumeFormat


# ── serialization ────────────────────────────────────────────────────────────


class TestSerialization:
    def test_camel_case_aliases(self):
        entry = WorkEntry(company="Acme", start_date="2020-01")
        assert entry.to_dict() == {"company": "Acme", "startDate": "2020-01", "highlights": []}

    def test_populate_by_field_name_or_alias(self):
        assert EducationEntry(study_type="BSc").study_type == "BSc"
        assert EducationEntry(studyType="BSc").study_type == "BSc"

    def test_none_fields_omitted(self):
        basics = Basics(name="Jane Doe", location=Location(city="Boston"))
        assert basics.to_dict() == {
            "name": "Jane Doe",
            "location": {"city": "Boston"},
            "profiles": [],
        }

    def test_nested_profiles(self):
        basics = Basics(profiles=[Profile(network="GitHub", username="janedoe")])
        assert basics.to_dict()["profiles"] == [{"network": "GitHub", "username": "janedoe"}]

    def test_profile_requires_network(self):
        with pytest.raises(ValidationError):
            Profile()


# ── ParsedResumeData ─────────────────────────────────────────────────────────


class TestParsedResumeData:
    def test_every_array_present(self):
        dumped = ParsedResumeData().to_dict()
        assert "basics" not in dumped
        for key in (
            "work", "education", "skills", "projects", "certificates",
            "languages", "interests", "publications", "awards", "references",
        ):
            assert dumped[key] == []

    def test_lists_not_shared_between_instances(self):
        first, second = ParsedResumeData(), ParsedResumeData()
        first.work.append(WorkEntry(company="Acme"))
        assert second.work == []


# ── ImportResult ─────────────────────────────────────────────────────────────


class TestImportResult:
    def test_defaults(self):
        result = ImportResult(success=False, errors=["Unsupported file type"])
        assert result.data == ParsedResumeData()
        assert result.confidence.overall == 0
        assert result.raw_text == ""
        assert result.resume_format is None

    def test_format_stored_as_value(self):
        result = ImportResult(success=True, resume_format=ResumeFormat.ACADEMIC)
        assert result.resume_format == "academic"
        assert result.to_dict()["resumeFormat"] == "academic"

    def test_raw_text_alias(self):
        assert ImportResult(success=True, raw_text="x").to_dict()["rawText"] == "x"

    @pytest.mark.parametrize("overall", [-1, 101])
    def test_confidence_bounds(self, overall):
        with pytest.raises(ValidationError):
            ConfidenceReport(overall=overall)
