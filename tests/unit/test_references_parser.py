"""
Tests for resume_ingest.ml.nlp.parsers.references_parser — ReferencesParser.
"""

import pytest

from resume_ingest.ml.nlp.parsers.references_parser import ReferencesParser


@pytest.fixture
def parser():
    return ReferencesParser()


class TestReferencesParser:
    @pytest.mark.parametrize(
        "text",
        ["Available upon request", "References available on request.", ""],
    )
    def test_placeholders_yield_nothing(self, parser, text):
        assert parser.parse(text) == []

    def test_blank_line_separated_referees(self, parser):
        text = (
            "Dr. Alan Grant, Professor of Paleontology\n"
            "alan.grant@example.edu\n"
            "\n"
            "Ellie Sattler - Lead Botanist, InGen"
        )
        first, second = parser.parse(text)
        assert first.name == "Dr. Alan Grant"
        assert first.reference == "Professor of Paleontology; alan.grant@example.edu"
        assert second.name == "Ellie Sattler"
        assert second.reference == "Lead Botanist, InGen"

    def test_title_lines_are_details(self, parser):
        (reference,) = parser.parse("Jane Roe\nSenior Manager\nAcme Corp")
        assert reference.name == "Jane Roe"
        assert reference.reference == "Senior Manager; Acme Corp"

    def test_consecutive_referees_without_blank_line(self, parser):
        text = "Jane Roe\njane@example.com\nJohn Poe\njohn@example.com"
        references = parser.parse(text)
        assert [r.name for r in references] == ["Jane Roe", "John Poe"]
        assert references[1].reference == "john@example.com"
