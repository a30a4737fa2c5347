"""
Shared test fixtures for the resume-ingest test suite.

Sets environment variables before any package imports so settings load in
testing mode, then provides sample resume texts, a positioned-run factory,
a fake PDF page reader and an in-memory DOCX builder.
"""

import os

# === Set environment BEFORE any resume_ingest imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")

import io
from typing import Optional

import pytest
from docx import Document
from docx.enum.style import WD_STYLE_TYPE

from resume_ingest.ml.nlp.extractors import PDFExtractor, PositionedTextRun
from resume_ingest.ml.nlp.resume_parser import ResumeParser


# ---------------------------------------------------------------------------
# Sample resume texts (already normalized)
# ---------------------------------------------------------------------------


CLEAN_RESUME = """Jane Doe
jane.doe@example.com | (555) 123-4567

Experience
Software Engineer
Acme Corp
Jan 2020 - Present
• Built the payments API
• Mentored two junior engineers

Education
Bachelor of Science in Computer Science
State University | 2015 - 2019

Skills
Python, SQL, Docker, AWS"""


FULL_RESUME = """Jane Doe
Senior Software Engineer
jane.doe@example.com | (555) 123-4567 | San Francisco, CA
linkedin.com/in/janedoe | github.com/janedoe

Summary
Backend engineer with 8 years of experience building distributed systems.

Experience
Senior Software Engineer
Acme Corp | San Francisco, CA
Jan 2020 - Present
• Led migration of 40 services to Kubernetes
• Reduced p99 latency by 35%

Software Engineer
Beta Labs
Jun 2017 - Dec 2019
• Built billing pipeline in Python

Education
Bachelor of Science in Computer Science
Stanford University | 2012 - 2016
GPA: 3.8/4.0

Skills
Languages: Python, Go, TypeScript
Cloud: AWS, Kubernetes, Terraform"""


FUNCTIONAL_RESUME = """John Smith
Product Designer
john.smith@example.com | +44 20 7946 0958

Skills
User Research, Prototyping, Figma, Design Systems

Experience
Product Designer at Orbit Studio
2019 - 2023
Led the redesign of the onboarding flow.

Education
BA Graphic Design, Central Saint Martins, 2015"""


ACADEMIC_RESUME = """Dr. Maria Garcia
maria.garcia@university.edu

Education
PhD in Physics, Massachusetts Institute of Technology, 2010 - 2015

Publications
"Quantum Transport in Graphene" - Physical Review Letters, 2014
"Spin Waves at Low Temperature" - Nature Physics, 2016

Awards
Best Paper Award - American Physical Society, 2014

Experience
Research Scientist
National Physics Laboratory
2015 - Present
• Led the cryogenics group"""


@pytest.fixture
def clean_resume_text():
    return CLEAN_RESUME


@pytest.fixture
def full_resume_text():
    return FULL_RESUME


@pytest.fixture
def functional_resume_text():
    return FUNCTIONAL_RESUME


@pytest.fixture
def academic_resume_text():
    return ACADEMIC_RESUME


# ---------------------------------------------------------------------------
# PDF helpers
# ---------------------------------------------------------------------------


PDF_BYTES = b"%PDF-1.7\n% fake document body\n"


def make_run(
    text: Optional[str],
    x: float = 50.0,
    y: float = 700.0,
    width: Optional[float] = None,
    height: float = 10.0,
) -> PositionedTextRun:
    """Build a run; width defaults to 5 units per character."""
    if width is None:
        width = len(text or "") * 5.0
    return PositionedTextRun(text=text, x=x, y=y, width=width, height=height)


def text_to_page(text: str, top: float = 800.0, leading: float = 12.0) -> list[PositionedTextRun]:
    """One left-aligned run per line, top to bottom."""
    return [make_run(line, y=top - index * leading) for index, line in enumerate(text.split("\n"))]


class FakePageReader:
    """Page-run reader returning canned pages instead of decoding bytes."""

    def __init__(self, pages: list[list[PositionedTextRun]], error: Optional[Exception] = None, name: str = "fake"):
        self.pages = pages
        self.error = error
        self.name = name
        self.calls = 0

    def read_pages(self, content: bytes) -> list[list[PositionedTextRun]]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.pages


@pytest.fixture
def run_factory():
    """Factory fixture for PositionedTextRun records."""
    return make_run


@pytest.fixture
def pdf_bytes():
    return PDF_BYTES


@pytest.fixture
def make_pdf_parser():
    """Factory building a ResumeParser whose PDF extractor reads the given texts as pages."""

    def _factory(*page_texts: str) -> ResumeParser:
        reader = FakePageReader([text_to_page(text) for text in page_texts])
        return ResumeParser(pdf_extractor=PDFExtractor(reader=reader))

    return _factory


# ---------------------------------------------------------------------------
# DOCX helpers
# ---------------------------------------------------------------------------


def build_docx(blocks: list[tuple[str, str]]) -> bytes:
    """
    Build a .docx in memory.

    Each block is ``(kind, text)`` where kind is "heading", "bold", "p" or
    a paragraph style name prefixed with "style:".
    """
    document = Document()
    for kind, text in blocks:
        if kind == "heading":
            document.add_heading(text, level=1)
        elif kind == "bold":
            document.add_paragraph().add_run(text).bold = True
        elif kind.startswith("style:"):
            style_name = kind.split(":", 1)[1]
            if style_name not in [style.name for style in document.styles]:
                document.styles.add_style(style_name, WD_STYLE_TYPE.PARAGRAPH)
            document.add_paragraph(text, style=style_name)
        else:
            document.add_paragraph(text)

    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def docx_factory():
    """Factory fixture for in-memory DOCX documents."""
    return build_docx


@pytest.fixture
def page_factory():
    """Factory turning a multi-line string into one page of runs."""
    return text_to_page


@pytest.fixture
def fake_reader_factory():
    """Factory fixture for FakePageReader."""
    return FakePageReader
