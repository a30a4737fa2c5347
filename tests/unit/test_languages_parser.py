"""
Tests for resume_ingest.ml.nlp.parsers.languages_parser — LanguagesParser.
"""

import pytest

from resume_ingest.ml.nlp.parsers.languages_parser import LanguagesParser


@pytest.fixture
def parser():
    return LanguagesParser()


class TestLanguagesParser:
    def test_empty_input(self, parser):
        assert parser.parse("") == []

    def test_mixed_notations_on_one_line(self, parser):
        entries = parser.parse("English (Native), Spanish - Fluent, French: B2")
        assert [(e.language, e.fluency) for e in entries] == [
            ("English", "Native"),
            ("Spanish", "Fluent"),
            ("French", "B2"),
        ]

    def test_trailing_fluency_word(self, parser):
        (entry,) = parser.parse("German Intermediate")
        assert entry.language == "German"
        assert entry.fluency == "Intermediate"

    def test_bare_list(self, parser):
        entries = parser.parse("• Mandarin\n• Hindi")
        assert [e.language for e in entries] == ["Mandarin", "Hindi"]
        assert all(e.fluency is None for e in entries)

    def test_commas_inside_parentheses_kept(self, parser):
        (entry,) = parser.parse("Portuguese (reading, writing)")
        assert entry.language == "Portuguese"
        assert entry.fluency == "reading, writing"

    def test_fluency_alone_is_not_a_language(self, parser):
        assert parser.parse("Fluent") == []

    def test_sentences_ignored(self, parser):
        assert parser.parse("I enjoy learning new languages every summer") == []
