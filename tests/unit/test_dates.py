"""
Tests for resume_ingest.ml.nlp.dates — partial-date and date-range recognition.
"""

import pytest

from resume_ingest.ml.nlp.dates import (
    count_date_ranges,
    extract_date_span,
    find_date_range,
    format_date,
    has_date_range,
    strip_dates,
)


class TestFormatDate:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Jan 2020", "2020-01"),
            ("September 2018", "2018-09"),
            ("Sept. 2018", "2018-09"),
            ("03/2021", "2021-03"),
            ("2019", "2019"),
            ("13/2021", "2021"),
            ("no date", None),
        ],
    )
    def test_formats(self, raw, expected):
        assert format_date(raw) == expected


class TestFindDateRange:
    def test_month_range(self):
        date_range = find_date_range("Acme | Jan 2020 - Mar 2022")
        assert date_range.start == "2020-01"
        assert date_range.end == "2022-03"
        assert date_range.is_current is False

    def test_present_end(self):
        date_range = find_date_range("Jun 2019 – Present")
        assert date_range.start == "2019-06"
        assert date_range.end is None
        assert date_range.is_current is True

    def test_to_separator(self):
        date_range = find_date_range("2015 to 2019")
        assert (date_range.start, date_range.end) == ("2015", "2019")

    def test_no_range(self):
        assert find_date_range("Graduated 2019") is None


class TestExtractDateSpan:
    def test_single_date_is_start(self):
        span = extract_date_span("Issued March 2022")
        assert span.start == "2022-03"
        assert span.end is None
        assert span.is_current is False

    def test_two_loose_dates_form_range(self):
        span = extract_date_span("Started 2018, left 2020")
        assert (span.start, span.end) == ("2018", "2020")

    def test_explicit_range_wins(self):
        span = extract_date_span("2012 - 2016, published 2015")
        assert (span.start, span.end) == ("2012", "2016")

    def test_none_without_dates(self):
        assert extract_date_span("Python, Go") is None


class TestRangeHelpers:
    def test_count(self):
        text = "Jan 2020 - Present\nJun 2017 - Dec 2019\n2012 - 2016\nGraduated 2011"
        assert count_date_ranges(text) == 3

    def test_phone_numbers_are_not_ranges(self):
        assert has_date_range("(555) 123-4567") is False

    def test_strip_dates(self):
        assert strip_dates("Acme Corp | Jan 2020 - Present") == "Acme Corp"
        assert strip_dates("Best Paper (2014)") == "Best Paper"
