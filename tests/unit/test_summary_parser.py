"""
Tests for resume_ingest.ml.nlp.parsers.summary_parser — SummaryParser.
"""

import pytest

from resume_ingest.ml.nlp.parsers.summary_parser import SummaryParser


@pytest.fixture
def parser():
    return SummaryParser()


class TestSummaryParser:
    def test_empty_input_returns_none(self, parser):
        assert parser.parse("") is None

    def test_whitespace_only_returns_none(self, parser):
        assert parser.parse("   \n   ") is None

    def test_lines_joined_into_paragraph(self, parser):
        text = "Backend engineer with 8 years\nof experience building   distributed systems."
        assert parser.parse(text) == "Backend engineer with 8 years of experience building distributed systems."

    def test_bullets_stripped(self, parser):
        assert parser.parse("• Builds APIs\n• Mentors engineers") == "Builds APIs Mentors engineers"

    def test_capped_on_word_boundary(self):
        parser = SummaryParser(max_chars=25)
        result = parser.parse("Experienced engineer building reliable systems")
        assert result == "Experienced engineer"
