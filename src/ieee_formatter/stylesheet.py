"""
IEEE layout and typography constants.

Lengths are in inches and font sizes in points. The style sheet is built once
at import time and never mutated.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

IEEE_FONT = "Times New Roman"


@dataclass(frozen=True)
class FontSpec:
    """Font for one paragraph role."""
    name: str = IEEE_FONT
    size: float = 10
    bold: bool = False
    italic: bool = False

    def to_dict(self) -> Dict[str, Any]:
        result = {"name": self.name, "size": self.size}
        if self.bold:
            result["bold"] = True
        if self.italic:
            result["italic"] = True
        return result


@dataclass(frozen=True)
class PageSpec:
    width: float = 8.5
    height: float = 11.0


@dataclass(frozen=True)
class MarginSpec:
    top: float = 0.75
    bottom: float = 1.0
    left: float = 0.625
    right: float = 0.625


@dataclass(frozen=True)
class ColumnSpec:
    count: int = 2
    spacing: float = 0.17


@dataclass(frozen=True)
class FontSet:
    title: FontSpec = FontSpec(size=24, bold=True)
    authors: FontSpec = FontSpec(size=11)
    affiliation: FontSpec = FontSpec(size=10, italic=True)
    abstract: FontSpec = FontSpec(size=10)
    body: FontSpec = FontSpec(size=10)
    headings: FontSpec = FontSpec(size=10, bold=True)
    subheadings: FontSpec = FontSpec(size=10, italic=True)
    references: FontSpec = FontSpec(size=9)


@dataclass(frozen=True)
class SpacingSpec:
    single_spaced: bool = True
    paragraph_indent: float = 0.17
    first_paragraph_indent: float = 0.0
    reference_hanging_indent: float = 0.2
    # Space after, in points
    title_after: float = 10
    authors_after: float = 5
    affiliation_after: float = 10
    abstract_after: float = 6
    keywords_after: float = 12
    heading_before: float = 12
    heading_after: float = 6
    body_after: float = 6
    reference_after: float = 3


@dataclass(frozen=True)
class StyleSheet:
    """Complete IEEE conference layout."""
    page: PageSpec = field(default_factory=PageSpec)
    margins: MarginSpec = field(default_factory=MarginSpec)
    columns: ColumnSpec = field(default_factory=ColumnSpec)
    fonts: FontSet = field(default_factory=FontSet)
    spacing: SpacingSpec = field(default_factory=SpacingSpec)
    abstract_lead: str = "Abstract— "
    keywords_lead: str = "Keywords— "
    references_heading: str = "REFERENCES"

    def to_dict(self) -> Dict[str, Any]:
        """Camel-cased summary sent to clients alongside classified paragraphs."""
        fonts = self.fonts
        return {
            "pageSize": {"width": self.page.width, "height": self.page.height},
            "margins": {
                "top": self.margins.top,
                "bottom": self.margins.bottom,
                "left": self.margins.left,
                "right": self.margins.right,
            },
            "columns": {"count": self.columns.count, "spacing": self.columns.spacing},
            "fonts": {
                "title": fonts.title.to_dict(),
                "authors": fonts.authors.to_dict(),
                "affiliation": fonts.affiliation.to_dict(),
                "abstract": fonts.abstract.to_dict(),
                "body": fonts.body.to_dict(),
                "headings": fonts.headings.to_dict(),
                "subheadings": fonts.subheadings.to_dict(),
                "references": fonts.references.to_dict(),
            },
            "spacing": {
                "singleSpaced": self.spacing.single_spaced,
                "paragraphIndent": self.spacing.paragraph_indent,
                "firstParagraphIndent": self.spacing.first_paragraph_indent,
            },
        }


IEEE_STYLE = StyleSheet()
