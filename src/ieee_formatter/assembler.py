"""
Pipeline orchestration for IEEE formatting.

Provides the three operations every front end (HTTP API, review UI, CLI)
exposes:
- classify: document bytes -> labeled paragraphs plus the IEEE style summary
- update_labels: reviewed paragraphs -> validated, canonical paragraphs
- export: labeled paragraphs -> rendered IEEE DOCX

Every call is independent; the assembler holds configuration only.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .classifier import classify
from .errors import InvalidInputError
from .export import EXPORT_FILENAME, DocxExporter
from .io import DOCX_MIME, check_payload_size, extract_paragraphs
from .labels import LabeledParagraph, RawParagraph, require_paragraph_list, validate_paragraphs
from .numbering import number_headings, number_references
from .structure import DocumentModel, build_structure
from .stylesheet import IEEE_STYLE, StyleSheet

logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_BYTES = 50 * 1024 * 1024


# ============================================================================
# Results
# ============================================================================

@dataclass
class ClassifyResult:
    """Outcome of classifying an uploaded document."""
    paragraphs: List[LabeledParagraph] = field(default_factory=list)
    raw_paragraphs: List[RawParagraph] = field(default_factory=list)
    stylesheet: StyleSheet = IEEE_STYLE
    processing_time_seconds: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "paragraphs": [p.to_dict() for p in self.paragraphs],
            "ieeeSpecs": self.stylesheet.to_dict(),
        }


@dataclass
class ExportResult:
    """Rendered document ready to be sent to the client."""
    content: bytes
    model: DocumentModel
    filename: str = EXPORT_FILENAME
    mimetype: str = DOCX_MIME


# ============================================================================
# Assembler
# ============================================================================

class PaperAssembler:
    """
    Runs extraction, classification, structure building and rendering.

    Args:
        max_upload_bytes: Size limit applied to uploaded documents
        stylesheet: Layout used for rendering and reported to clients
    """

    def __init__(
        self,
        max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
        stylesheet: StyleSheet = IEEE_STYLE
    ):
        self.max_upload_bytes = max_upload_bytes
        self.stylesheet = stylesheet
        self._exporter = None

    @property
    def exporter(self) -> DocxExporter:
        if self._exporter is None:
            self._exporter = DocxExporter(self.stylesheet)
        return self._exporter

    def classify(self, data: bytes) -> ClassifyResult:
        """
        Extract and label the paragraphs of an uploaded document.

        Raises:
            PayloadTooLargeError: If data exceeds the upload limit
            DocumentParseError: If data is not a readable document
        """
        start_time = time.time()
        check_payload_size(len(data), self.max_upload_bytes)

        raw = extract_paragraphs(data)
        labeled = classify(raw)

        elapsed = time.time() - start_time
        logger.info(f"Classified {len(labeled)} paragraphs in {elapsed:.2f}s")
        return ClassifyResult(
            paragraphs=labeled,
            raw_paragraphs=raw,
            stylesheet=self.stylesheet,
            processing_time_seconds=elapsed,
        )

    def update_labels(self, payload: Any) -> List[LabeledParagraph]:
        """
        Validate reviewed labels.

        Raises:
            InvalidInputError: If the payload has no paragraph list
            ValidationError: On the first bad entry or label
        """
        paragraphs = validate_paragraphs(require_paragraph_list(payload))
        logger.info(f"Updated labels for {len(paragraphs)} paragraphs")
        return paragraphs

    def build(self, payload: Any) -> DocumentModel:
        """Build the document model from a `{"paragraphs": [...]}` payload."""
        entries = require_paragraph_list(payload)
        return build_structure(self._coerce(entries))

    def preview(self, payload: Any) -> Dict[str, Any]:
        """Document model as a dict, with headings and references numbered as rendered."""
        model = self.build(payload)
        result = model.to_dict()
        headings = number_headings([s.heading for s in model.sections])
        for section, heading in zip(result["sections"], headings):
            section["heading"] = heading
        result["references"] = number_references(model.references)
        return result

    def export(self, payload: Any) -> ExportResult:
        """
        Render labeled paragraphs as an IEEE DOCX.

        Raises:
            InvalidInputError: If the payload has no paragraph list
            RenderError: If rendering fails
        """
        return self.export_model(self.build(payload))

    def export_model(self, model: DocumentModel) -> ExportResult:
        content = self.exporter.render(model)
        return ExportResult(content=content, model=model)

    def _coerce(self, entries: List[Any]) -> List[LabeledParagraph]:
        paragraphs = []
        for entry in entries:
            if isinstance(entry, LabeledParagraph):
                paragraphs.append(entry)
            elif isinstance(entry, dict):
                paragraphs.append(LabeledParagraph.from_dict(entry))
            else:
                raise InvalidInputError("Invalid paragraphs data")
        return paragraphs
