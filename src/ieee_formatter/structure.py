"""
Structure builder.

Folds an ordered stream of labeled paragraphs into a DocumentModel:
front-matter fields are merged with a per-field join policy, section-starting
labels open sections, body text flows into the open section, and captions
attach to the last sealed section.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from .labels import Label, LabeledParagraph

logger = logging.getLogger(__name__)

CAPTIONS_HEADING = "Figures and Tables"
IMPLICIT_HEADING = "Introduction"

ABSTRACT_PREFIX_RE = re.compile(r"^\s*abstract[:\-–—\s]*", re.IGNORECASE)
KEYWORDS_PREFIX_RE = re.compile(r"^\s*keywords?[:\-–—\s]*", re.IGNORECASE)


# ============================================================================
# Data Classes
# ============================================================================

@dataclass
class Section:
    """A heading plus the paragraphs that follow it."""
    heading: str
    content: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"heading": self.heading, "content": list(self.content)}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Section":
        return Section(
            heading=str(d.get("heading", "")),
            content=[str(x) for x in (d.get("content") or [])],
        )


@dataclass
class DocumentModel:
    """Reconstructed paper, ready for rendering."""
    title: str = ""
    authors: str = ""
    affiliation: str = ""
    abstract: str = ""
    keywords: str = ""
    sections: List[Section] = field(default_factory=list)
    references: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (
            self.title or self.authors or self.affiliation or self.abstract
            or self.keywords or self.sections or self.references
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "authors": self.authors,
            "affiliation": self.affiliation,
            "abstract": self.abstract,
            "keywords": self.keywords,
            "sections": [s.to_dict() for s in self.sections],
            "references": list(self.references),
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "DocumentModel":
        return DocumentModel(
            title=str(d.get("title", "")),
            authors=str(d.get("authors", "")),
            affiliation=str(d.get("affiliation", "")),
            abstract=str(d.get("abstract", "")),
            keywords=str(d.get("keywords", "")),
            sections=[Section.from_dict(s) for s in (d.get("sections") or [])],
            references=[str(r) for r in (d.get("references") or [])],
        )


# ============================================================================
# Field Merge Policies
# ============================================================================

@dataclass(frozen=True)
class MergePolicy:
    """How paragraphs of one label accumulate into a model field."""
    attribute: str
    separator: str
    clean: Callable[[str], str] = lambda text: text


MERGE_POLICIES = {
    Label.TITLE: MergePolicy("title", " "),
    Label.AUTHOR: MergePolicy("authors", " | "),
    Label.AFFILIATION: MergePolicy("affiliation", " | "),
    Label.ABSTRACT: MergePolicy(
        "abstract", " ", lambda text: ABSTRACT_PREFIX_RE.sub("", text, count=1)
    ),
    Label.KEYWORDS: MergePolicy(
        "keywords", "; ", lambda text: KEYWORDS_PREFIX_RE.sub("", text, count=1)
    ),
}


# ============================================================================
# Builder
# ============================================================================

class StructureBuilder:
    """
    Single left-to-right fold over labeled paragraphs.

    The only mutable state is the section under construction; everything else
    is written straight into the model or into per-field part lists.
    """

    def __init__(self):
        self.model = DocumentModel()
        self.current_section: Optional[Section] = None
        self._parts: Dict[Label, List[str]] = {label: [] for label in MERGE_POLICIES}

    def feed(self, paragraph: LabeledParagraph):
        text = paragraph.text.strip()
        label = Label.lenient(paragraph.label)

        if label in MERGE_POLICIES:
            part = MERGE_POLICIES[label].clean(text)
            if part:
                self._parts[label].append(part)
        elif label is Label.REFERENCES:
            self.model.references.append(text)
        elif label.is_caption:
            self._add_caption(text)
        elif label.starts_section:
            self._seal()
            self.current_section = Section(heading=text)
        else:
            self._add_body(text)

    def finish(self) -> DocumentModel:
        self._seal()
        for label, policy in MERGE_POLICIES.items():
            setattr(self.model, policy.attribute, policy.separator.join(self._parts[label]))
        return self.model

    def _seal(self):
        if self.current_section is not None:
            self.model.sections.append(self.current_section)
            self.current_section = None

    def _add_caption(self, text: str):
        # Captions go to the last sealed section, never to the open one
        if not self.model.sections:
            self.model.sections.append(Section(heading=CAPTIONS_HEADING, content=[text]))
        else:
            self.model.sections[-1].content.append(text)

    def _add_body(self, text: str):
        if self.current_section is not None:
            self.current_section.content.append(text)
        elif not self.model.sections:
            self.model.sections.append(Section(heading=IMPLICIT_HEADING, content=[text]))
        else:
            self.model.sections[0].content.append(text)


def build_structure(paragraphs: Iterable[LabeledParagraph]) -> DocumentModel:
    """
    Build the document model from labeled paragraphs.

    Args:
        paragraphs: Labeled paragraphs in reading order

    Returns:
        DocumentModel (all fields empty for an empty input)
    """
    builder = StructureBuilder()
    count = 0
    for paragraph in paragraphs:
        builder.feed(paragraph)
        count += 1
    model = builder.finish()

    logger.info(
        f"Built structure from {count} paragraphs: "
        f"{len(model.sections)} sections, {len(model.references)} references"
    )
    return model


def flatten_structure(model: DocumentModel) -> List[LabeledParagraph]:
    """
    Re-derive a labeled paragraph stream from a model.

    Rebuilding the result reproduces the model as long as no accumulating
    field was merged from several paragraphs.
    """
    paragraphs = []

    def emit(text: str, label: Label):
        paragraphs.append(LabeledParagraph(text=text, label=label, index=len(paragraphs)))

    if model.title:
        emit(model.title, Label.TITLE)
    if model.authors:
        emit(model.authors, Label.AUTHOR)
    if model.affiliation:
        emit(model.affiliation, Label.AFFILIATION)
    # Re-add the marker so the builder's one-shot prefix strip removes only it
    if model.abstract:
        emit(f"Abstract: {model.abstract}", Label.ABSTRACT)
    if model.keywords:
        emit(f"Keywords: {model.keywords}", Label.KEYWORDS)
    for section in model.sections:
        emit(section.heading, Label.HEADING)
        for text in section.content:
            emit(text, Label.BODY)
    for reference in model.references:
        emit(reference, Label.REFERENCES)

    return paragraphs
