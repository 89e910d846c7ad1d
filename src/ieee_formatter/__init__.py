"""
Core modules for the IEEE paper formatter.
"""

from .errors import (
    FormatterError, DocumentParseError, InvalidInputError, ValidationError,
    InvalidLabelError, PayloadTooLargeError, RenderError,
)
from .labels import Label, RawParagraph, LabeledParagraph, StyleHints, validate_label, validate_paragraphs
from .classifier import RULES, ClassificationRule, classify, classify_paragraph, explain
from .structure import Section, DocumentModel, build_structure, flatten_structure
from .numbering import number_heading, number_reference, number_headings, number_references
from .stylesheet import StyleSheet, FontSpec, IEEE_STYLE
from .io import extract_paragraphs, load_document_bytes, save_json, load_json, ensure_dir
from .export import DocxExporter, render_document, EXPORT_FILENAME
from .assembler import PaperAssembler, ClassifyResult, ExportResult

__all__ = [
    # Errors
    "FormatterError", "DocumentParseError", "InvalidInputError", "ValidationError",
    "InvalidLabelError", "PayloadTooLargeError", "RenderError",
    # Labels
    "Label", "RawParagraph", "LabeledParagraph", "StyleHints",
    "validate_label", "validate_paragraphs",
    # Classification
    "RULES", "ClassificationRule", "classify", "classify_paragraph", "explain",
    # Structure
    "Section", "DocumentModel", "build_structure", "flatten_structure",
    # Numbering
    "number_heading", "number_reference", "number_headings", "number_references",
    # Style
    "StyleSheet", "FontSpec", "IEEE_STYLE",
    # IO
    "extract_paragraphs", "load_document_bytes", "save_json", "load_json", "ensure_dir",
    # Export
    "DocxExporter", "render_document", "EXPORT_FILENAME",
    # Assembly
    "PaperAssembler", "ClassifyResult", "ExportResult",
]
