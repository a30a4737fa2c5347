"""
Tests for resume_ingest.ml.nlp.parsers.awards_parser — AwardsParser.
"""

import pytest

from resume_ingest.ml.nlp.parsers.awards_parser import AwardsParser


@pytest.fixture
def parser():
    return AwardsParser()


class TestAwardsParser:
    def test_title_awarder_date(self, parser):
        (award,) = parser.parse("Best Paper Award - American Physical Society, 2014")
        assert award.title == "Best Paper Award"
        assert award.awarder == "American Physical Society"
        assert award.date == "2014"

    def test_from_awarder(self, parser):
        (award,) = parser.parse("Dean's List from Stanford University (2015)")
        assert award.title == "Dean's List"
        assert award.awarder == "Stanford University"
        assert award.date == "2015"

    def test_extra_parts_become_summary(self, parser):
        (award,) = parser.parse("Hackathon Winner, MLH, 1st of 200 teams")
        assert award.awarder == "MLH"
        assert award.summary == "1st of 200 teams"

    def test_continuation_line(self, parser):
        (award,) = parser.parse("Employee of the Year\nfor leading the platform rewrite")
        assert award.summary == "for leading the platform rewrite"

    def test_empty(self, parser):
        assert parser.parse("") == []
