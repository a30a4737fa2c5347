"""
Tests for resume_ingest.ml.nlp.parsers.experience_parser — ExperienceParser.
"""

import pytest

from resume_ingest.ml.nlp.parsers.experience_parser import ExperienceParser


@pytest.fixture
def parser():
    return ExperienceParser()


TWO_JOBS = """Senior Software Engineer
Acme Corp | San Francisco, CA
Jan 2020 - Present
• Led migration of 40 services to Kubernetes
• Reduced p99 latency by 35%

Software Engineer
Beta Labs
Jun 2017 - Dec 2019
• Built billing pipeline in Python"""


class TestExperienceParser:
    def test_empty_input(self, parser):
        assert parser.parse("") == []
        assert parser.parse("  \n ") == []

    def test_splits_entries(self, parser):
        entries = parser.parse(TWO_JOBS)
        assert len(entries) == 2
        assert [e.company for e in entries] == ["Acme Corp", "Beta Labs"]

    def test_position_company_location(self, parser):
        first = parser.parse(TWO_JOBS)[0]
        assert first.position == "Senior Software Engineer"
        assert first.company == "Acme Corp"
        assert first.location == "San Francisco, CA"

    def test_dates(self, parser):
        first, second = parser.parse(TWO_JOBS)
        assert first.start_date == "2020-01"
        assert first.end_date is None
        assert (second.start_date, second.end_date) == ("2017-06", "2019-12")

    def test_highlights_without_bullets(self, parser):
        first, second = parser.parse(TWO_JOBS)
        assert first.highlights == [
            "Led migration of 40 services to Kubernetes",
            "Reduced p99 latency by 35%",
        ]
        assert second.highlights == ["Built billing pipeline in Python"]

    def test_title_at_company(self, parser):
        text = "Product Designer at Orbit Studio\n2019 - 2023\nLed the redesign of the onboarding flow."
        (entry,) = parser.parse(text)
        assert entry.position == "Product Designer"
        assert entry.company == "Orbit Studio"
        assert (entry.start_date, entry.end_date) == ("2019", "2023")
        assert entry.summary == "Led the redesign of the onboarding flow."

    def test_company_above_title_is_swapped(self, parser):
        (entry,) = parser.parse("Globex\nData Analyst\n2018 - 2020")
        assert entry.position == "Data Analyst"
        assert entry.company == "Globex"

    def test_remote_location(self, parser):
        (entry,) = parser.parse("Backend Developer | Initech | Remote\n2021 - Present")
        assert entry.position == "Backend Developer"
        assert entry.company == "Initech"
        assert entry.location == "Remote"

    def test_wrapped_bullet_rejoined(self, parser):
        text = "Engineer at Acme\n2020 - 2021\n• Built the payments\nplatform for merchants"
        (entry,) = parser.parse(text)
        assert entry.highlights == ["Built the payments platform for merchants"]

    def test_long_header_line_kept(self, parser):
        text = (
            "Principal Software Engineer, Distributed Systems at Acme Corporation\n"
            "Jan 2020 - Present\n"
            "• Designed the consensus layer\n"
            "• Mentored six engineers"
        )
        (entry,) = parser.parse(text)
        assert entry.position == "Principal Software Engineer, Distributed Systems"
        assert entry.company == "Acme Corporation"
        assert (entry.start_date, entry.end_date) == ("2020-01", None)
        assert len(entry.highlights) == 2

    def test_overlong_first_line_used_as_header(self, parser):
        header = "Senior Staff Engineer " + "and Technical Lead " * 5 + "at Initech"
        (entry,) = parser.parse(f"{header}\n2018 - 2020\n• Built the data platform")
        assert entry.company == "Initech"
        assert (entry.start_date, entry.end_date) == ("2018", "2020")
        assert entry.highlights == ["Built the data platform"]

    def test_bullets_only_yield_nothing(self, parser):
        assert parser.parse("• Built things\n• Shipped other things") == []

    def test_summary_capped(self, parser):
        prose = "Worked on many things. " * 40
        (entry,) = parser.parse(f"Engineer at Acme\n2020 - 2021\n{prose}")
        assert len(entry.summary) <= ExperienceParser.SUMMARY_MAX_CHARS
