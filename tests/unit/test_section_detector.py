"""
Tests for resume_ingest.ml.nlp.section_detector — heading identification and section boundaries.
"""

import pytest

from resume_ingest.ml.nlp.section_detector import SectionDetector, detect_sections, header_region
from resume_ingest.utils.constants import SectionKind


@pytest.fixture
def detector():
    return SectionDetector()


class TestIdentifyHeading:
    @pytest.mark.parametrize(
        "line,kind",
        [
            ("Experience", SectionKind.WORK),
            ("WORK EXPERIENCE", SectionKind.WORK),
            ("Employment History:", SectionKind.WORK),
            ("Education", SectionKind.EDUCATION),
            ("Academic Background", SectionKind.EDUCATION),
            ("Technical Skills", SectionKind.SKILLS),
            ("Projects", SectionKind.PROJECTS),
            ("Licenses and Certifications", SectionKind.CERTIFICATES),
            ("Languages", SectionKind.LANGUAGES),
            ("Professional Summary", SectionKind.SUMMARY),
            ("Publications", SectionKind.PUBLICATIONS),
            ("Honors & Awards", SectionKind.AWARDS),
            ("Hobbies", SectionKind.INTERESTS),
            ("References", SectionKind.REFERENCES),
        ],
    )
    def test_synonyms(self, detector, line, kind):
        assert detector.identify_heading(line) == kind

    def test_sentence_is_not_heading(self, detector):
        assert detector.identify_heading("Experience building distributed systems at scale") is None

    def test_bullet_is_not_heading(self, detector):
        assert detector.identify_heading("• Skills") is None

    def test_overlong_line_is_not_heading(self, detector):
        assert detector.identify_heading("Experience " * 10) is None

    def test_caps_line_matches_by_keyword(self, detector):
        assert detector.identify_heading("CAREER EXPERIENCE") == SectionKind.WORK

    def test_mixed_case_keyword_line_needs_hint(self, detector):
        assert detector.identify_heading("Relevant Industry Experience") is None
        assert detector.identify_heading("Relevant Industry Experience", hinted=True) == SectionKind.WORK


class TestDetect:
    def test_sections_in_order_with_content(self, detector, clean_resume_text):
        sections = detector.detect(clean_resume_text)
        assert [s.name for s in sections] == [SectionKind.WORK, SectionKind.EDUCATION, SectionKind.SKILLS]
        assert sections[0].title == "Experience"
        assert sections[0].content.startswith("Software Engineer")
        assert "Experience" not in sections[0].content.split("\n")
        assert sections[-1].content == "Python, SQL, Docker, AWS"

    def test_sections_are_contiguous(self, detector, full_resume_text):
        sections = detector.detect(full_resume_text)
        for current, following in zip(sections, sections[1:]):
            assert current.end_index == following.start_index - 1
        assert sections[-1].end_index == len(full_resume_text.split("\n")) - 1

    def test_hints_enable_keyword_match(self, detector):
        text = "Jane Doe\nRelevant Industry Experience\nEngineer at Acme"
        assert detector.detect(text) == []
        sections = detector.detect(text, hints=["Relevant Industry Experience"])
        assert len(sections) == 1
        assert sections[0].name == SectionKind.WORK

    def test_no_headings(self, detector):
        assert detector.detect("Just a paragraph of text with no headings.") == []

    def test_empty(self):
        assert detect_sections("") == []


class TestHeaderRegion:
    def test_text_before_first_section(self, clean_resume_text):
        sections = detect_sections(clean_resume_text)
        assert header_region(clean_resume_text, sections) == (
            "Jane Doe\njane.doe@example.com | (555) 123-4567"
        )

    def test_whole_text_without_sections(self):
        assert header_region("Jane Doe\nEngineer", []) == "Jane Doe\nEngineer"

    def test_capped_to_max_lines(self):
        text = "\n".join(f"line {i}" for i in range(30))
        assert header_region(text, [], max_lines=3) == "line 0\nline 1\nline 2"
