"""
Label registry for paragraph classification.

Provides:
- The closed set of paragraph labels
- Paragraph data classes exchanged between the classifier, the review step
  and the structure builder
- Validation of labels and paragraph lists submitted from outside the
  classifier
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from .errors import InvalidInputError, InvalidLabelError, ValidationError

logger = logging.getLogger(__name__)


# ============================================================================
# Labels
# ============================================================================

class Label(Enum):
    """Semantic role of a paragraph."""
    TITLE = "TITLE"
    AUTHOR = "AUTHOR"
    AFFILIATION = "AFFILIATION"
    ABSTRACT = "ABSTRACT"
    KEYWORDS = "KEYWORDS"
    INTRODUCTION = "INTRODUCTION"
    BACKGROUND = "BACKGROUND"
    METHOD = "METHOD"
    RESULTS = "RESULTS"
    CONCLUSION = "CONCLUSION"
    REFERENCES = "REFERENCES"
    TABLE_CAPTION = "TABLE_CAPTION"
    FIGURE_CAPTION = "FIGURE_CAPTION"
    BODY = "BODY"
    HEADING = "HEADING"

    @classmethod
    def options(cls) -> List[str]:
        """Label values in canonical order, for dropdowns."""
        return [label.value for label in cls]

    @classmethod
    def lenient(cls, value: Any) -> "Label":
        """Parse a label, falling back to BODY for anything unrecognised."""
        if isinstance(value, Label):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return cls.BODY

    @property
    def color(self) -> str:
        return LABEL_COLORS[self]

    @property
    def starts_section(self) -> bool:
        return self in SECTION_LABELS

    @property
    def is_caption(self) -> bool:
        return self in (Label.TABLE_CAPTION, Label.FIGURE_CAPTION)


SECTION_LABELS = frozenset({
    Label.HEADING,
    Label.INTRODUCTION,
    Label.BACKGROUND,
    Label.METHOD,
    Label.RESULTS,
    Label.CONCLUSION,
})

# Chip colours used by the review UI
LABEL_COLORS = {
    Label.TITLE: "#1976d2",
    Label.AUTHOR: "#9c27b0",
    Label.AFFILIATION: "#673ab7",
    Label.ABSTRACT: "#00796b",
    Label.KEYWORDS: "#0097a7",
    Label.INTRODUCTION: "#388e3c",
    Label.BACKGROUND: "#689f38",
    Label.METHOD: "#f57c00",
    Label.RESULTS: "#e64a19",
    Label.CONCLUSION: "#c62828",
    Label.REFERENCES: "#455a64",
    Label.TABLE_CAPTION: "#5e35b1",
    Label.FIGURE_CAPTION: "#3949ab",
    Label.BODY: "#757575",
    Label.HEADING: "#1565c0",
}


def validate_label(value: Any) -> Label:
    """
    Canonicalize a label received from outside the classifier.

    Args:
        value: Label string in any character case

    Returns:
        The matching Label

    Raises:
        InvalidLabelError: If the value is not a member of the label set
    """
    if isinstance(value, Label):
        return value
    if not isinstance(value, str):
        raise InvalidLabelError(repr(value))
    try:
        return Label(value.strip().upper())
    except ValueError:
        raise InvalidLabelError(value)


# ============================================================================
# Paragraph Data Classes
# ============================================================================

@dataclass(frozen=True)
class StyleHints:
    """Run-level formatting summarised for a whole paragraph."""
    bold: bool = False
    italic: bool = False
    size_pt: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"bold": self.bold, "italic": self.italic, "size_pt": self.size_pt}


@dataclass(frozen=True)
class RawParagraph:
    """A paragraph as extracted from the source document."""
    index: int
    text: str
    style_hints: Optional[StyleHints] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {"index": self.index, "text": self.text}
        if self.style_hints is not None:
            result["style_hints"] = self.style_hints.to_dict()
        return result


@dataclass(frozen=True)
class LabeledParagraph:
    """A paragraph with its assigned label."""
    text: str
    label: Label
    index: Optional[int] = None

    def with_label(self, label: Any) -> "LabeledParagraph":
        return LabeledParagraph(text=self.text, label=validate_label(label), index=self.index)

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "label": self.label.value, "index": self.index}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "LabeledParagraph":
        """Lenient constructor used on export; unknown labels become BODY."""
        return LabeledParagraph(
            text=str(d.get("text") or ""),
            label=Label.lenient(d.get("label")),
            index=d.get("index"),
        )


# ============================================================================
# Paragraph List Validation
# ============================================================================

def require_paragraph_list(payload: Any) -> List[Any]:
    """
    Pull the paragraph list out of a request payload.

    Raises:
        InvalidInputError: If `paragraphs` is absent or not a list
    """
    if not isinstance(payload, dict):
        raise InvalidInputError("Invalid paragraphs data")
    paragraphs = payload.get("paragraphs")
    if paragraphs is None or not isinstance(paragraphs, list):
        raise InvalidInputError("Invalid paragraphs data")
    return paragraphs


def validate_paragraphs(entries: Any) -> List[LabeledParagraph]:
    """
    Validate a reviewed paragraph list and canonicalize its labels.

    Args:
        entries: Sequence of dicts with `text`, `label` and optional `index`

    Returns:
        LabeledParagraph list in the submitted order

    Raises:
        InvalidInputError: If entries is not a list
        ValidationError: On the first entry missing text or label, or
            carrying a label outside the label set
    """
    if not isinstance(entries, list):
        raise InvalidInputError("Invalid paragraphs data")

    validated = []
    for position, entry in enumerate(entries):
        if not isinstance(entry, dict) or not entry.get("text") or not entry.get("label"):
            raise ValidationError(
                f"Each paragraph must have text and label (entry {position})",
                index=position,
            )
        label = validate_label_at(entry["label"], position)
        validated.append(LabeledParagraph(
            text=entry["text"],
            label=label,
            index=entry.get("index"),
        ))

    logger.debug(f"Validated {len(validated)} paragraph labels")
    return validated


def validate_label_at(value: Any, position: int) -> Label:
    try:
        return validate_label(value)
    except InvalidLabelError as e:
        raise InvalidLabelError(e.label, index=position)
