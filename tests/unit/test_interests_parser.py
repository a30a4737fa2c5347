"""
Tests for resume_ingest.ml.nlp.parsers.interests_parser — InterestsParser.
"""

from resume_ingest.ml.nlp.parsers.interests_parser import InterestsParser


class TestInterestsParser:
    def test_comma_list(self):
        interests = InterestsParser().parse("Hiking, Chess, Photography")
        assert [i.name for i in interests] == ["Hiking", "Chess", "Photography"]

    def test_detail_keywords(self):
        (interest,) = InterestsParser().parse("• Music: guitar, piano")
        assert interest.name == "Music"
        assert interest.keywords == ["guitar", "piano"]

    def test_duplicates_dropped(self):
        interests = InterestsParser().parse("Chess\nchess\nRunning")
        assert [i.name for i in interests] == ["Chess", "Running"]

    def test_empty(self):
        assert InterestsParser().parse("") == []
