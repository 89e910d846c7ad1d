"""
Shared fixtures: small .docx papers built with python-docx.
"""

import sys
from io import BytesIO
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


SAMPLE_PARAGRAPHS = [
    "Deep Learning for X",
    "Jane Doe, jane.doe@example.edu",
    "Abstract: this paper studies deep models.",
    "Keywords: deep learning, vision",
    "I. Introduction",
    "We present a new approach to the problem of X in this paper.",
    "Related Work",
    "Prior work has studied many variants of this problem in detail.",
    "Figure 1: System overview",
    "Conclusion",
    "We showed that the approach works well across all of our settings.",
    "References",
]


def make_docx(paragraphs, blank_lines=False) -> bytes:
    """Build a .docx in memory with one paragraph per string."""
    from docx import Document
    from docx.shared import Pt

    doc = Document()
    for i, text in enumerate(paragraphs):
        p = doc.add_paragraph()
        run = p.add_run(text)
        if i == 0:
            run.bold = True
            run.font.size = Pt(24)
        if blank_lines:
            doc.add_paragraph("   ")

    stream = BytesIO()
    doc.save(stream)
    return stream.getvalue()


@pytest.fixture
def sample_docx_bytes():
    return make_docx(SAMPLE_PARAGRAPHS)


@pytest.fixture
def sample_labeled():
    """Labeled paragraph dicts as a client would submit them."""
    return [
        {"text": "Deep Learning for X", "label": "TITLE", "index": 0},
        {"text": "Jane Doe", "label": "AUTHOR", "index": 1},
        {"text": "Dept. of CS, Example University", "label": "AFFILIATION", "index": 2},
        {"text": "Abstract: this paper studies deep models.", "label": "ABSTRACT", "index": 3},
        {"text": "Keywords: deep learning, vision", "label": "KEYWORDS", "index": 4},
        {"text": "Introduction", "label": "INTRODUCTION", "index": 5},
        {"text": "We present a new approach.", "label": "BODY", "index": 6},
        {"text": "It is fast.", "label": "BODY", "index": 7},
        {"text": "Method", "label": "METHOD", "index": 8},
        {"text": "We train a network.", "label": "BODY", "index": 9},
        {"text": "Smith, J. Deep nets. 2020.", "label": "REFERENCES", "index": 10},
        {"text": "[7] Jones, K. Vision. 2019.", "label": "REFERENCES", "index": 11},
    ]
