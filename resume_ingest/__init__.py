"""
resume-ingest: heuristic resume ingestion from PDF and DOCX documents.
"""

from resume_ingest.utils.constants import APP_NAME, VERSION

__app_name__ = APP_NAME
__version__ = VERSION
