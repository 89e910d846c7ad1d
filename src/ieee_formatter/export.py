"""
Export module for IEEE formatted documents.

Provides:
- DOCX rendering of a DocumentModel (using python-docx)
- Two-column IEEE page setup
- Heading and reference numbering at render time
"""

import logging
from io import BytesIO
from pathlib import Path
from typing import Any, Optional, Union

from .errors import RenderError
from .numbering import number_heading, number_reference
from .structure import DocumentModel
from .stylesheet import IEEE_STYLE, FontSpec, StyleSheet

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "IEEE_Formatted_Document.docx"

TWIPS_PER_INCH = 1440


# ============================================================================
# DOCX Exporter
# ============================================================================

class DocxExporter:
    """Render a DocumentModel as an IEEE two-column DOCX using python-docx."""

    def __init__(self, stylesheet: StyleSheet = IEEE_STYLE):
        self.stylesheet = stylesheet

    def render(self, model: DocumentModel) -> bytes:
        """
        Render the model to DOCX bytes.

        Args:
            model: Structured document

        Returns:
            DOCX file content

        Raises:
            RenderError: If python-docx fails to build or save the document
        """
        try:
            doc = self._build(model)
            stream = BytesIO()
            doc.save(stream)
        except Exception as e:
            logger.error(f"DOCX rendering failed: {e}")
            raise RenderError(f"Failed to render document: {e}")

        data = stream.getvalue()
        logger.info(f"Rendered IEEE document ({len(data)} bytes, {len(model.sections)} sections)")
        return data

    def export(self, model: DocumentModel, output_path: Union[str, Path]) -> Path:
        """Render the model and write it to output_path."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(self.render(model))
        logger.info(f"Exported DOCX to: {output_path}")
        return output_path

    def _build(self, model: DocumentModel) -> Any:
        from docx import Document as DocxDocument
        from docx.enum.section import WD_SECTION
        from docx.enum.text import WD_ALIGN_PARAGRAPH
        from docx.shared import Inches, Pt

        style = self.stylesheet
        fonts = style.fonts
        spacing = style.spacing

        doc = DocxDocument()
        self._setup_page(doc.sections[0])

        normal = doc.styles['Normal']
        normal.font.name = fonts.body.name
        normal.font.size = Pt(fonts.body.size)

        # Title block spans the full page width
        has_front_matter = False
        if model.title:
            self._add_text(doc, model.title, fonts.title, WD_ALIGN_PARAGRAPH.CENTER, spacing.title_after)
            has_front_matter = True
        if model.authors:
            self._add_text(doc, model.authors, fonts.authors, WD_ALIGN_PARAGRAPH.CENTER, spacing.authors_after)
            has_front_matter = True
        if model.affiliation:
            self._add_text(
                doc, model.affiliation, fonts.affiliation,
                WD_ALIGN_PARAGRAPH.CENTER, spacing.affiliation_after
            )
            has_front_matter = True

        if has_front_matter:
            body_section = doc.add_section(WD_SECTION.CONTINUOUS)
        else:
            body_section = doc.sections[0]
        self._set_columns(body_section)

        if model.abstract:
            self._add_lead_paragraph(doc, style.abstract_lead, model.abstract, fonts.abstract, spacing.abstract_after)
        if model.keywords:
            self._add_lead_paragraph(doc, style.keywords_lead, model.keywords, fonts.abstract, spacing.keywords_after)

        for position, section in enumerate(model.sections):
            self._add_heading(doc, number_heading(section.heading, position))
            for i, text in enumerate(section.content):
                p = self._add_text(doc, text, fonts.body, WD_ALIGN_PARAGRAPH.JUSTIFY, spacing.body_after)
                indent = spacing.first_paragraph_indent if i == 0 else spacing.paragraph_indent
                p.paragraph_format.first_line_indent = Inches(indent)

        if model.references:
            self._add_heading(doc, style.references_heading)
            hanging = Inches(spacing.reference_hanging_indent)
            for position, reference in enumerate(model.references):
                p = self._add_text(
                    doc, number_reference(reference, position), fonts.references,
                    WD_ALIGN_PARAGRAPH.LEFT, spacing.reference_after
                )
                p.paragraph_format.left_indent = hanging
                p.paragraph_format.first_line_indent = -hanging

        return doc

    def _setup_page(self, section: Any):
        from docx.shared import Inches

        page = self.stylesheet.page
        margins = self.stylesheet.margins
        section.page_width = Inches(page.width)
        section.page_height = Inches(page.height)
        section.top_margin = Inches(margins.top)
        section.bottom_margin = Inches(margins.bottom)
        section.left_margin = Inches(margins.left)
        section.right_margin = Inches(margins.right)

    def _set_columns(self, section: Any):
        """python-docx has no column API, so write w:cols directly."""
        from docx.oxml import OxmlElement
        from docx.oxml.ns import qn

        columns = self.stylesheet.columns
        sectPr = section._sectPr
        cols = sectPr.find(qn('w:cols'))
        if cols is None:
            cols = OxmlElement('w:cols')
            sectPr.append(cols)
        cols.set(qn('w:num'), str(columns.count))
        cols.set(qn('w:space'), str(int(round(columns.spacing * TWIPS_PER_INCH))))

    def _add_text(
        self,
        doc: Any,
        text: str,
        font: FontSpec,
        alignment: Any,
        space_after: Optional[float] = None
    ) -> Any:
        p = doc.add_paragraph()
        p.alignment = alignment
        self._add_run(p, text, font)
        if space_after is not None:
            from docx.shared import Pt
            p.paragraph_format.space_after = Pt(space_after)
        return p

    def _add_lead_paragraph(self, doc: Any, lead: str, text: str, font: FontSpec, space_after: float):
        """Abstract/keywords paragraph: bold lead-in followed by italic text."""
        from docx.enum.text import WD_ALIGN_PARAGRAPH
        from docx.shared import Pt

        p = doc.add_paragraph()
        p.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY
        self._add_run(p, lead, FontSpec(name=font.name, size=font.size, bold=True))
        self._add_run(p, text, FontSpec(name=font.name, size=font.size, italic=True))
        p.paragraph_format.space_after = Pt(space_after)

    def _add_heading(self, doc: Any, text: str):
        from docx.enum.text import WD_ALIGN_PARAGRAPH
        from docx.shared import Pt

        spacing = self.stylesheet.spacing
        p = self._add_text(doc, text, self.stylesheet.fonts.headings, WD_ALIGN_PARAGRAPH.LEFT, spacing.heading_after)
        p.paragraph_format.space_before = Pt(spacing.heading_before)
        p.paragraph_format.keep_with_next = True

    def _add_run(self, paragraph: Any, text: str, font: FontSpec) -> Any:
        from docx.shared import Pt

        run = paragraph.add_run(text)
        run.font.name = font.name
        run.font.size = Pt(font.size)
        run.bold = font.bold
        run.italic = font.italic
        return run


def render_document(model: DocumentModel, stylesheet: StyleSheet = IEEE_STYLE) -> bytes:
    """Render a DocumentModel to IEEE formatted DOCX bytes."""
    return DocxExporter(stylesheet).render(model)
