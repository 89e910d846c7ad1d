"""
Heading and reference numbering applied at render time.
"""

import re
from typing import List

ROMAN_NUMERALS = ["I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X"]

NUMBERED_HEADING_RE = re.compile(r"^[IVX]+\.|^\d+\.")
NUMBERED_REFERENCE_RE = re.compile(r"^\[\d+\]")


def section_numeral(position: int) -> str:
    """Roman numeral for the first ten sections, Arabic after that."""
    if 0 <= position < len(ROMAN_NUMERALS):
        return ROMAN_NUMERALS[position]
    return str(position + 1)


def number_heading(heading: str, position: int) -> str:
    """
    Number a section heading by its position.

    Headings that already start with "IV." or "3." style prefixes are
    returned as-is (trimmed).
    """
    heading = heading.strip()
    if NUMBERED_HEADING_RE.match(heading):
        return heading
    return f"{section_numeral(position)}. {heading.upper()}"


def number_reference(reference: str, position: int) -> str:
    reference = reference.strip()
    if NUMBERED_REFERENCE_RE.match(reference):
        return reference
    return f"[{position + 1}] {reference}"


def number_headings(headings: List[str]) -> List[str]:
    return [number_heading(h, i) for i, h in enumerate(headings)]


def number_references(references: List[str]) -> List[str]:
    return [number_reference(r, i) for i, r in enumerate(references)]
