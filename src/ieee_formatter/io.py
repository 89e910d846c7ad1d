"""
I/O utilities for the IEEE formatting pipeline.

Handles:
- Reading uploaded .docx bytes into raw paragraphs (python-docx)
- Upload size checks
- JSON serialization of paragraph lists
- Directory management
"""

import json
import logging
from io import BytesIO
from pathlib import Path
from typing import Any, List, Optional, Union

from .errors import DocumentParseError, PayloadTooLargeError
from .labels import RawParagraph, StyleHints

logger = logging.getLogger(__name__)

DOCX_SUFFIX = ".docx"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


# ============================================================================
# DOCX Paragraph Extraction
# ============================================================================

def extract_paragraphs(data: bytes) -> List[RawParagraph]:
    """
    Read a .docx document into raw paragraphs.

    Line breaks inside a paragraph split it into separate paragraphs, every
    line is trimmed, and blank lines are dropped before indices are assigned.

    Args:
        data: Raw .docx bytes

    Returns:
        RawParagraph list in reading order, indexed from 0

    Raises:
        DocumentParseError: If the bytes are not a readable .docx document
    """
    if not data:
        raise DocumentParseError("Uploaded document is empty")

    from docx import Document as DocxDocument

    try:
        doc = DocxDocument(BytesIO(data))
    except Exception as e:
        logger.error(f"Could not open document: {e}")
        raise DocumentParseError("Failed to parse document", e)

    paragraphs = []
    for para in doc.paragraphs:
        hints = _style_hints(para)
        for line in para.text.split("\n"):
            text = line.strip()
            if not text:
                continue
            paragraphs.append(RawParagraph(index=len(paragraphs), text=text, style_hints=hints))

    logger.info(f"Extracted {len(paragraphs)} paragraphs")
    return paragraphs


def _style_hints(para: Any) -> StyleHints:
    """Summarize run formatting; a flag is set only when every text run has it."""
    runs = [run for run in para.runs if run.text.strip()]
    if not runs:
        return StyleHints()

    sizes = [run.font.size.pt for run in runs if run.font.size is not None]
    return StyleHints(
        bold=all(run.bold for run in runs),
        italic=all(run.italic for run in runs),
        size_pt=max(sizes) if sizes else None,
    )


def load_document_bytes(path: Union[str, Path]) -> bytes:
    """
    Read a .docx file from disk.

    Raises:
        FileNotFoundError: If the file doesn't exist
        DocumentParseError: If the file is not a .docx
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")
    if path.suffix.lower() != DOCX_SUFFIX:
        raise DocumentParseError(f"Please select a .docx file (got {path.name})")
    return path.read_bytes()


# ============================================================================
# Upload Limits
# ============================================================================

def check_payload_size(size: Optional[int], limit_bytes: int):
    """
    Reject a payload whose declared or measured size exceeds the limit.

    Raises:
        PayloadTooLargeError: If size is above limit_bytes
    """
    if size is not None and size > limit_bytes:
        logger.warning(f"Rejected upload of {size} bytes (limit {limit_bytes})")
        raise PayloadTooLargeError(limit_bytes)


# ============================================================================
# JSON and Directories
# ============================================================================

def save_json(data: Any, output_path: Union[str, Path], indent: int = 2) -> Path:
    """Save data as UTF-8 JSON, creating parent directories."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)

    logger.debug(f"Saved JSON to: {output_path}")
    return output_path


def load_json(input_path: Union[str, Path]) -> Any:
    """Load JSON from file."""
    with open(input_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def ensure_dir(path: Union[str, Path]) -> Path:
    """Ensure directory exists, create if necessary."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path
