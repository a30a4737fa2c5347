"""
Resume section parsers for extracting structured information.

Each parser turns the text of one section (or the header region, for
contact details) into entries of the parsed resume record. Parsers are
total: malformed or empty input yields an empty result, never an error.
"""

from .awards_parser import AwardsParser
from .certifications_parser import CertificationsParser
from .contact_parser import ContactParser
from .education_parser import EducationParser
from .experience_parser import ExperienceParser
from .interests_parser import InterestsParser
from .languages_parser import LanguagesParser
from .projects_parser import ProjectsParser
from .publications_parser import PublicationsParser
from .references_parser import ReferencesParser
from .skills_parser import SkillsParser
from .summary_parser import SummaryParser

__all__ = [
    "AwardsParser",
    "CertificationsParser",
    "ContactParser",
    "EducationParser",
    "ExperienceParser",
    "InterestsParser",
    "LanguagesParser",
    "ProjectsParser",
    "PublicationsParser",
    "ReferencesParser",
    "SkillsParser",
    "SummaryParser",
]
