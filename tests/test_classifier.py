"""
Tests for the rule-based paragraph classifier.
"""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def raw(text, index=1, **hints):
    from ieee_formatter.labels import RawParagraph, StyleHints

    return RawParagraph(index=index, text=text, style_hints=StyleHints(**hints) if hints else None)


class TestRules:
    """Test each rule on its own."""

    def test_rule_order(self):
        """Test rules are exposed in evaluation order."""
        from ieee_formatter.classifier import RULES

        assert [rule.name for rule in RULES] == [
            "first_paragraph", "abstract", "keywords", "references",
            "introduction", "method", "results", "conclusion",
            "author_contact", "table_caption", "figure_caption", "short_line",
        ]

    @pytest.mark.parametrize("text,label", [
        ("This paper has an ABSTRACT somewhere in it.", "ABSTRACT"),
        ("Index terms and keywords: vision, learning.", "KEYWORDS"),
        ("Keyword: graphs", "KEYWORDS"),
        ("References", "REFERENCES"),
        ("Bibliography", "REFERENCES"),
        ("1. Introduction", "INTRODUCTION"),
        ("Proposed Methodology", "METHOD"),
        ("Our method improves accuracy by a wide margin.", "METHOD"),
        ("Experimental Results", "RESULTS"),
        ("Evaluation", "RESULTS"),
        ("Conclusion", "CONCLUSION"),
        ("Directions for future work are discussed briefly here.", "CONCLUSION"),
        ("Jane Doe, jane@example.org", "AUTHOR"),
        ("Example University, cs.example.edu", "AUTHOR"),
        ("Table I: Accuracy on the test set", "TABLE_CAPTION"),
        ("TABLE 2 Summary of datasets", "TABLE_CAPTION"),
        ("Figure 3: Model architecture", "FIGURE_CAPTION"),
        ("Fig 4 Training curves", "FIGURE_CAPTION"),
        ("Related Work", "HEADING"),
        ("Department of Computer Science", "HEADING"),
        ("This sentence is a normal body paragraph that ends with a period.", "BODY"),
    ])
    def test_single_rule(self, text, label):
        """Test the label each rule produces."""
        from ieee_formatter.classifier import classify_paragraph

        assert classify_paragraph(raw(text)).value == label

    def test_rules_are_independent(self):
        """Test every rule can be evaluated directly as data."""
        from ieee_formatter.classifier import RULES

        by_name = {rule.name: rule for rule in RULES}

        assert by_name["first_paragraph"].matches(raw("anything", index=0))
        assert not by_name["first_paragraph"].matches(raw("anything", index=3))
        assert by_name["references"].matches(raw("REFERENCES"))
        assert not by_name["references"].matches(raw("See the references"))
        assert by_name["table_caption"].matches(raw("table iv results"))
        assert not by_name["table_caption"].matches(raw("tablet computers"))
        assert by_name["figure_caption"].matches(raw("fig2 overview"))
        assert not by_name["figure_caption"].matches(raw("Fig. 2 overview"))


class TestPrecedence:
    """Test that earlier rules win."""

    def test_title_beats_content(self):
        """Test index 0 is TITLE whatever its text."""
        from ieee_formatter.classifier import classify_paragraph

        for text in ["Abstract", "References", "a@b.edu", "Body text that ends."]:
            assert classify_paragraph(raw(text, index=0)).value == "TITLE"

    @pytest.mark.parametrize("text,label", [
        ("Abstract", "ABSTRACT"),
        ("Abstract—We study methods and results.", "ABSTRACT"),
        ("Keywords: evaluation, method", "KEYWORDS"),
        ("References and methods", "REFERENCES"),
        ("An introduction to our methodology.", "INTRODUCTION"),
        ("Method evaluation results.", "METHOD"),
        ("Results and conclusion.", "RESULTS"),
        ("Contact for results: a@b.com", "RESULTS"),
        ("Table 1 contact a@b.com", "AUTHOR"),
    ])
    def test_first_match_wins(self, text, label):
        """Test overlapping texts take the earliest matching rule."""
        from ieee_formatter.classifier import classify_paragraph

        assert classify_paragraph(raw(text)).value == label

    def test_heading_word_limit(self):
        """Test the short-line rule stops at ten words."""
        from ieee_formatter.classifier import classify_paragraph

        ten = "one two three four five six seven eight nine ten"
        assert classify_paragraph(raw(ten)).value == "HEADING"
        assert classify_paragraph(raw(ten + " eleven")).value == "BODY"
        assert classify_paragraph(raw("Short line.")).value == "BODY"

    def test_heading_word_count_ignores_extra_spaces(self):
        """Test repeated spaces do not count as extra words."""
        from ieee_formatter.classifier import classify_paragraph

        ten = "one two  three four five six seven eight nine   ten"
        assert classify_paragraph(raw(ten)).value == "HEADING"
        assert classify_paragraph(raw(ten + "\televen")).value == "BODY"

    def test_style_hints_do_not_change_label(self):
        """Test style hints are carried but do not affect rules."""
        from ieee_formatter.classifier import classify_paragraph

        plain = raw("A long sentence that is clearly body text of the paper.")
        bold = raw("A long sentence that is clearly body text of the paper.", bold=True, size_pt=18)

        assert classify_paragraph(plain) == classify_paragraph(bold)


class TestClassify:
    """Test classification of paragraph sequences."""

    def test_empty(self):
        """Test empty input gives empty output."""
        from ieee_formatter.classifier import classify

        assert classify([]) == []

    def test_length_and_labels(self):
        """Test output length and label membership."""
        from ieee_formatter.classifier import classify
        from ieee_formatter.labels import Label, RawParagraph

        texts = ["Title", "Abstract: x", "Body one.", "Heading", "References", "Ref."]
        paragraphs = [RawParagraph(index=i, text=t) for i, t in enumerate(texts)]

        labeled = classify(paragraphs)

        assert len(labeled) == len(paragraphs)
        assert all(isinstance(p.label, Label) for p in labeled)
        assert [p.index for p in labeled] == list(range(len(texts)))
        assert [p.text for p in labeled] == texts

    def test_paper_scenario(self):
        """Test the labels of a short paper."""
        from ieee_formatter.classifier import classify
        from ieee_formatter.labels import RawParagraph

        texts = [
            "Deep Learning for X",
            "Abstract: this paper studies...",
            "I. Introduction",
            "We present...",
            "References",
            "Smith, J. (2020).",
        ]
        labeled = classify([RawParagraph(index=i, text=t) for i, t in enumerate(texts)])

        assert [p.label.value for p in labeled] == [
            "TITLE", "ABSTRACT", "INTRODUCTION", "BODY", "REFERENCES", "BODY",
        ]

    def test_explain(self):
        """Test explain names the deciding rule."""
        from ieee_formatter.classifier import explain, FALLBACK_RULE

        assert explain(raw("x", index=0)) == "first_paragraph"
        assert explain(raw("Related Work")) == "short_line"
        assert explain(raw("Plain body sentence that ends with a period.")) == FALLBACK_RULE
