"""
Parsed resume data models.

The structures produced by ingestion: a partial resume whose entries carry
only the fields that could be recovered from the document text. Dates are
kept as ``YYYY-MM`` or ``YYYY`` strings because resumes rarely give a day.
"""

from typing import Optional

from pydantic import Field

from .base import EmbeddedModel


class Location(EmbeddedModel):
    """A lightweight "City, Region/Country" location."""

    city: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None


class Profile(EmbeddedModel):
    """A social profile such as LinkedIn or GitHub."""

    network: str
    username: Optional[str] = None
    url: Optional[str] = None


class Basics(EmbeddedModel):
    """Header information: name, headline and contact details."""

    name: Optional[str] = None
    label: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    url: Optional[str] = None
    summary: Optional[str] = None
    location: Optional[Location] = None
    profiles: list[Profile] = Field(default_factory=list)


class WorkEntry(EmbeddedModel):
    """One job."""

    company: Optional[str] = None
    position: Optional[str] = None
    location: Optional[str] = None
    url: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None  # None with a start date means current
    summary: Optional[str] = None
    highlights: list[str] = Field(default_factory=list)


class EducationEntry(EmbeddedModel):
    """One degree or programme of study."""

    institution: Optional[str] = None
    area: Optional[str] = None
    study_type: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    score: Optional[str] = None
    courses: list[str] = Field(default_factory=list)


class SkillEntry(EmbeddedModel):
    """A skill group; ``name`` is the category when the resume gives one."""

    name: Optional[str] = None
    level: Optional[str] = None
    keywords: list[str] = Field(default_factory=list)


class ProjectEntry(EmbeddedModel):
    """A personal or professional project."""

    name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    highlights: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)


class CertificateEntry(EmbeddedModel):
    """A certification or license."""

    name: Optional[str] = None
    issuer: Optional[str] = None
    date: Optional[str] = None
    url: Optional[str] = None


class LanguageEntry(EmbeddedModel):
    """A spoken language with an optional fluency level."""

    language: Optional[str] = None
    fluency: Optional[str] = None


class InterestEntry(EmbeddedModel):
    """An interest or hobby, optionally with detail keywords."""

    name: Optional[str] = None
    keywords: list[str] = Field(default_factory=list)


class PublicationEntry(EmbeddedModel):
    """A paper, article or book."""

    name: Optional[str] = None
    publisher: Optional[str] = None
    release_date: Optional[str] = None
    url: Optional[str] = None
    summary: Optional[str] = None


class AwardEntry(EmbeddedModel):
    """An award or honor."""

    title: Optional[str] = None
    date: Optional[str] = None
    awarder: Optional[str] = None
    summary: Optional[str] = None


class ReferenceEntry(EmbeddedModel):
    """A referee and their contact or testimonial text."""

    name: Optional[str] = None
    reference: Optional[str] = None


class ParsedResumeData(EmbeddedModel):
    """
    Partial resume produced by ingestion.

    Every array is present (possibly empty); ``basics`` is omitted when the
    header yielded nothing.
    """

    basics: Optional[Basics] = None
    work: list[WorkEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: list[SkillEntry] = Field(default_factory=list)
    projects: list[ProjectEntry] = Field(default_factory=list)
    certificates: list[CertificateEntry] = Field(default_factory=list)
    languages: list[LanguageEntry] = Field(default_factory=list)
    interests: list[InterestEntry] = Field(default_factory=list)
    publications: list[PublicationEntry] = Field(default_factory=list)
    awards: list[AwardEntry] = Field(default_factory=list)
    references: list[ReferenceEntry] = Field(default_factory=list)
