"""
Rule-based paragraph classifier.

Each paragraph is matched against an ordered list of rules and receives the
label of the first rule that fires. The title rule uses the paragraph's
position; every other rule looks only at the paragraph's own text.

Rules are plain data (RULES) so callers can enumerate and test them one by
one, and so the review UI can tell the user which rule produced a label.
"""

import logging
import re
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Iterable, List

from .labels import Label, LabeledParagraph, RawParagraph

logger = logging.getLogger(__name__)

HEADING_MAX_WORDS = 10

KEYWORDS_RE = re.compile(r"keywords?:", re.IGNORECASE)
REFERENCES_RE = re.compile(r"^(references|bibliography)", re.IGNORECASE)
METHOD_RE = re.compile(r"method|methodology", re.IGNORECASE)
RESULTS_RE = re.compile(r"results|evaluation", re.IGNORECASE)
CONCLUSION_RE = re.compile(r"conclusion|future work", re.IGNORECASE)
TABLE_CAPTION_RE = re.compile(r"^table\s+[ivx\d]", re.IGNORECASE)
FIGURE_CAPTION_RE = re.compile(r"^fig(ure)?\s*\d", re.IGNORECASE)


@dataclass(frozen=True)
class ClassificationRule:
    """One (predicate, label) pair of the classifier."""
    name: str
    label: Label
    predicate: Callable[[RawParagraph], bool]

    def matches(self, paragraph: RawParagraph) -> bool:
        return self.predicate(paragraph)


def _contains(needle: str) -> Callable[[RawParagraph], bool]:
    return lambda p: needle in p.text.lower()


def _searches(pattern: "re.Pattern") -> Callable[[RawParagraph], bool]:
    return lambda p: pattern.search(p.text) is not None


def _looks_like_heading(paragraph: RawParagraph) -> bool:
    text = paragraph.text
    # Runs of whitespace separate words once; a double space adds no word
    return len(text.split()) <= HEADING_MAX_WORDS and not text.endswith(".")


RULES: List[ClassificationRule] = [
    ClassificationRule("first_paragraph", Label.TITLE, lambda p: p.index == 0),
    ClassificationRule("abstract", Label.ABSTRACT, _contains("abstract")),
    ClassificationRule("keywords", Label.KEYWORDS, _searches(KEYWORDS_RE)),
    ClassificationRule("references", Label.REFERENCES, _searches(REFERENCES_RE)),
    ClassificationRule("introduction", Label.INTRODUCTION, _contains("introduction")),
    ClassificationRule("method", Label.METHOD, _searches(METHOD_RE)),
    ClassificationRule("results", Label.RESULTS, _searches(RESULTS_RE)),
    ClassificationRule("conclusion", Label.CONCLUSION, _searches(CONCLUSION_RE)),
    ClassificationRule(
        "author_contact", Label.AUTHOR,
        lambda p: "@" in p.text or ".edu" in p.text.lower(),
    ),
    ClassificationRule("table_caption", Label.TABLE_CAPTION, _searches(TABLE_CAPTION_RE)),
    ClassificationRule("figure_caption", Label.FIGURE_CAPTION, _searches(FIGURE_CAPTION_RE)),
    ClassificationRule("short_line", Label.HEADING, _looks_like_heading),
]

FALLBACK_RULE = "default"


def explain(paragraph: RawParagraph) -> str:
    """Name of the rule that decides this paragraph's label."""
    for rule in RULES:
        if rule.matches(paragraph):
            return rule.name
    return FALLBACK_RULE


def classify_paragraph(paragraph: RawParagraph) -> Label:
    """Label a single paragraph; BODY when no rule matches."""
    for rule in RULES:
        if rule.matches(paragraph):
            return rule.label
    return Label.BODY


def classify(paragraphs: Iterable[RawParagraph]) -> List[LabeledParagraph]:
    """
    Assign a label to every paragraph.

    Args:
        paragraphs: Raw paragraphs in document order

    Returns:
        One LabeledParagraph per input paragraph, same order
    """
    labeled = [
        LabeledParagraph(text=p.text, label=classify_paragraph(p), index=p.index)
        for p in paragraphs
    ]

    if logger.isEnabledFor(logging.DEBUG):
        counts = Counter(p.label.value for p in labeled)
        logger.debug(f"Label distribution: {dict(counts)}")

    return labeled
