#!/usr/bin/env python
"""
Streamlit Web UI for the IEEE paper formatter.

Run with:
    streamlit run src/app.py

Features:
- Upload a .docx paper and classify its paragraphs
- Review and correct paragraph labels, delete stray paragraphs
- Preview the reconstructed structure
- Download the IEEE formatted document
"""

import sys
from pathlib import Path

# Add src directory to path for imports when running as script
_src_dir = Path(__file__).parent
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

import streamlit as st
import html
import json
import logging
from typing import List

from config import get_config
from ieee_formatter.assembler import ExportResult, PaperAssembler
from ieee_formatter.errors import FormatterError
from ieee_formatter.labels import Label

logger = logging.getLogger(__name__)

STEPS = ["Upload Document", "Review & Edit Labels", "Export IEEE Format"]

# Page config must be first Streamlit command
st.set_page_config(
    page_title="IEEE Document Formatter",
    page_icon="📄",
    layout="wide",
    initial_sidebar_state="collapsed"
)


def load_css():
    """Load custom CSS styles."""
    st.markdown("""
    <style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #1976d2;
        text-align: center;
        margin-bottom: 1rem;
    }
    .sub-header {
        font-size: 1.2rem;
        color: #888;
        text-align: center;
        margin-bottom: 2rem;
    }
    .label-chip {
        display: inline-block;
        border-radius: 12px;
        padding: 0.1rem 0.6rem;
        color: white;
        font-size: 0.75rem;
        font-weight: bold;
        margin-right: 0.5rem;
    }
    .paragraph-text {
        color: inherit;
        margin: 0.25rem 0 0.75rem 0;
    }
    </style>
    """, unsafe_allow_html=True)


def init_session_state():
    """Initialize session state variables."""
    if "step" not in st.session_state:
        st.session_state.step = 0
    if "paragraphs" not in st.session_state:
        st.session_state.paragraphs = []
    if "source_name" not in st.session_state:
        st.session_state.source_name = None


@st.cache_resource
def get_assembler() -> PaperAssembler:
    config = get_config()
    return PaperAssembler(max_upload_bytes=config.upload.max_upload_bytes)


def reset():
    st.session_state.step = 0
    st.session_state.paragraphs = []
    st.session_state.source_name = None
    st.session_state.pop("export", None)
    st.session_state.pop("export_key", None)


def render_steps():
    cols = st.columns(len(STEPS))
    for i, (col, name) in enumerate(zip(cols, STEPS)):
        with col:
            marker = "🔵" if i == st.session_state.step else ("✅" if i < st.session_state.step else "⚪")
            st.markdown(f"{marker} **{i + 1}. {name}**")


def render_upload():
    """Step 1: upload and classify."""
    uploaded_file = st.file_uploader(
        "Upload a paper",
        type=["docx"],
        help="Upload a Word document (.docx) to classify"
    )

    if not uploaded_file:
        return

    col1, col2 = st.columns([2, 1])
    with col1:
        st.info(f"📁 **{uploaded_file.name}** ({uploaded_file.size / 1024:.1f} KB)")
    with col2:
        classify_btn = st.button("🚀 Upload & Classify", use_container_width=True, type="primary")

    if classify_btn:
        with st.spinner("Classifying paragraphs..."):
            try:
                result = get_assembler().classify(uploaded_file.getvalue())
            except FormatterError as e:
                logger.warning(f"Classification failed for {uploaded_file.name}: {e.message}")
                st.error(f"Failed to upload document: {e.message}")
                return

        st.session_state.paragraphs = [p.to_dict() for p in result.paragraphs]
        st.session_state.source_name = uploaded_file.name
        st.session_state.step = 1
        st.rerun()


def render_paragraph_row(position: int, para: dict):
    options = Label.options()
    key = para.get("index")
    if key is None:
        key = f"p{position}"

    col_text, col_label, col_delete = st.columns([7, 2, 1])

    with col_text:
        label = Label.lenient(para["label"])
        st.markdown(
            f'<span class="label-chip" style="background-color: {label.color}">{label.value}</span>'
            f'<small>#{position + 1}</small>'
            f'<p class="paragraph-text">{html.escape(para["text"])}</p>',
            unsafe_allow_html=True
        )

    with col_label:
        current = para["label"] if para["label"] in options else Label.BODY.value
        para["label"] = st.selectbox(
            "Label",
            options,
            index=options.index(current),
            key=f"label_{key}",
            label_visibility="collapsed"
        )

    with col_delete:
        if st.button("🗑️", key=f"delete_{key}", help="Delete paragraph"):
            del st.session_state.paragraphs[position]
            st.rerun()


def preview_markdown(structure: dict) -> List[str]:
    """
    Markdown blocks for the structure preview.

    All document text is HTML-escaped; the blocks are rendered with
    unsafe_allow_html so the preview can use <small> and <b>.
    """
    blocks = []
    title = html.escape(structure["title"])
    blocks.append(f"### {title}" if title else "### <i>No title</i>")
    if structure["authors"]:
        blocks.append(f"<small>Authors: {html.escape(structure['authors'])}</small>")
    if structure["affiliation"]:
        blocks.append(f"<small>Affiliation: {html.escape(structure['affiliation'])}</small>")
    if structure["abstract"]:
        blocks.append(f"<b>Abstract—</b> <i>{html.escape(structure['abstract'])}</i>")
    if structure["keywords"]:
        blocks.append(f"<b>Keywords—</b> <i>{html.escape(structure['keywords'])}</i>")

    for section in structure["sections"]:
        blocks.append(f"<b>{html.escape(section['heading'])}</b>")
        blocks.append(f"<small>{len(section['content'])} paragraph(s)</small>")

    if structure["references"]:
        blocks.append("<b>REFERENCES</b>")
        for reference in structure["references"]:
            blocks.append(f"<small>{html.escape(reference)}</small>")

    return blocks


def render_preview(assembler: PaperAssembler, payload: dict):
    """Structured preview, numbered the way the export will be."""
    for block in preview_markdown(assembler.preview(payload)):
        st.markdown(block, unsafe_allow_html=True)


def payload_key(paragraphs: List[dict]) -> str:
    return json.dumps(
        [(p.get("text"), p.get("label")) for p in paragraphs], ensure_ascii=False
    )


def cached_export(assembler: PaperAssembler, paragraphs: List[dict], cache) -> ExportResult:
    """
    Render the export once per distinct paragraph list.

    Args:
        assembler: Pipeline facade
        paragraphs: Reviewed paragraph dicts
        cache: Mapping that keeps the last export (st.session_state in the UI)

    Raises:
        FormatterError: If validation or rendering fails
    """
    key = payload_key(paragraphs)
    if cache.get("export_key") != key:
        validated = assembler.update_labels({"paragraphs": paragraphs})
        cache["export"] = assembler.export({"paragraphs": [p.to_dict() for p in validated]})
        cache["export_key"] = key
    return cache["export"]


def render_review():
    """Step 2: review labels, then export."""
    assembler = get_assembler()
    paragraphs = st.session_state.paragraphs

    st.subheader(f"📝 Review Labels ({len(paragraphs)} paragraphs)")
    if st.session_state.source_name:
        st.caption(f"Source: {st.session_state.source_name}")

    for position, para in enumerate(list(paragraphs)):
        render_paragraph_row(position, para)

    payload = {"paragraphs": paragraphs}

    with st.expander("👁️ Preview Structure", expanded=False):
        render_preview(assembler, payload)

    st.markdown("---")
    col_back, col_export = st.columns([1, 1])

    with col_back:
        if st.button("⬅️ Start Over", use_container_width=True):
            reset()
            st.rerun()

    with col_export:
        try:
            export = cached_export(assembler, paragraphs, st.session_state)
        except FormatterError as e:
            logger.warning(f"Export failed: {e.message}")
            st.error(f"Failed to export document: {e.message}")
            return

        if st.download_button(
            "📥 Export IEEE Format",
            export.content,
            file_name=export.filename,
            mime=export.mimetype,
            use_container_width=True,
            type="primary"
        ):
            st.session_state.step = 2
            st.rerun()


def render_done():
    """Step 3: confirmation."""
    st.success("✅ Document exported successfully!")

    col1, col2 = st.columns([1, 1])
    with col1:
        if st.button("⬅️ Back to Review", use_container_width=True):
            st.session_state.step = 1
            st.rerun()
    with col2:
        if st.button("📄 Format Another Paper", use_container_width=True):
            reset()
            st.rerun()

    with st.expander("📄 Labeled paragraphs (JSON)", expanded=False):
        st.download_button(
            "Download labels",
            json.dumps({"paragraphs": st.session_state.paragraphs}, indent=2),
            file_name="labels.json",
            mime="application/json"
        )
        st.json(st.session_state.paragraphs)


def main():
    """Main application."""
    load_css()
    init_session_state()

    # Header
    st.markdown('<h1 class="main-header">📄 IEEE Document Formatter</h1>', unsafe_allow_html=True)
    st.markdown(
        '<p class="sub-header">Convert your academic papers to IEEE format with automatic classification</p>',
        unsafe_allow_html=True
    )

    render_steps()
    st.markdown("---")

    if st.session_state.step == 0:
        render_upload()
    elif st.session_state.step == 1:
        render_review()
    else:
        render_done()


if __name__ == "__main__":
    main()
