"""
Language processing modules for resume-ingest.

Submodules:
- nlp: document extraction, text preprocessing, section detection,
  entry parsing and confidence scoring
"""
