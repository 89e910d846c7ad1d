"""
IEEE Paper Formatter
====================

Turns an uploaded .docx paper into a two-column IEEE formatted document.

Main components:
- Paragraph extraction from .docx
- Rule-based paragraph classification (title, authors, abstract, sections, ...)
- Label review and validation
- Structure reconstruction (front matter, sections, references)
- IEEE DOCX rendering with section and reference numbering
"""

__version__ = "1.0.0"
__author__ = "IEEE Formatter Team"
