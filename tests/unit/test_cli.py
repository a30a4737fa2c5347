"""
Tests for resume_ingest.cli — typer commands run through CliRunner.
"""

import json

import pytest
from typer.testing import CliRunner

from resume_ingest.cli import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def docx_path(tmp_path, docx_factory):
    path = tmp_path / "resume.docx"
    path.write_bytes(docx_factory([
        ("p", "Jane Doe"),
        ("p", "jane.doe@example.com"),
        ("heading", "Experience"),
        ("p", "Software Engineer at Acme Corp"),
        ("p", "2020 - 2023"),
        ("heading", "Skills"),
        ("p", "Python, SQL"),
    ]))
    return path


class TestCli:
    def test_version(self, runner):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_info(self, runner):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "Max File Size" in result.output

    def test_parse(self, runner, docx_path):
        result = runner.invoke(app, ["parse", str(docx_path)])
        assert result.exit_code == 0
        assert "Acme Corp" in result.output
        assert "Jane Doe" in result.output

    def test_parse_json(self, runner, docx_path):
        result = runner.invoke(app, ["parse", "--json", str(docx_path)])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["success"] is True
        assert payload["data"]["work"][0]["startDate"] == "2020"

    def test_parse_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["parse", str(tmp_path / "nope.pdf")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_parse_unsupported_format(self, runner, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_text("Jane Doe")
        result = runner.invoke(app, ["parse", str(path)])
        assert result.exit_code == 1
        assert "Unsupported file format" in result.output

    def test_parse_failed_import(self, runner, tmp_path):
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"not really a pdf")
        result = runner.invoke(app, ["parse", str(path)])
        assert result.exit_code == 1
        assert "Could not import broken.pdf" in result.output

    def test_classify(self, runner, docx_path):
        result = runner.invoke(app, ["classify", str(docx_path)])
        assert result.exit_code == 0
        assert "chronological" in result.output
        assert "detecting_sections" in result.output
