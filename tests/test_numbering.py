"""
Tests for heading and reference numbering.
"""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


class TestHeadings:
    """Test section heading numbering."""

    def test_roman_then_arabic(self):
        """Test the first ten headings get roman numerals."""
        from ieee_formatter.numbering import number_headings

        numbered = number_headings([f"Part {i}" for i in range(12)])

        assert numbered[0] == "I. PART 0"
        assert numbered[3] == "IV. PART 3"
        assert numbered[9] == "X. PART 9"
        assert numbered[10] == "11. PART 10"
        assert numbered[11] == "12. PART 11"

    @pytest.mark.parametrize("heading", ["I. Introduction", "IV. Results", "3. Results"])
    def test_already_numbered_passthrough(self, heading):
        """Test numbered headings are left unchanged."""
        from ieee_formatter.numbering import number_heading

        assert number_heading(heading, 5) == heading

    def test_trimmed_and_uppercased(self):
        """Test unnumbered headings are trimmed and upper-cased."""
        from ieee_formatter.numbering import number_heading

        assert number_heading("  Related Work ", 1) == "II. RELATED WORK"

    def test_lowercase_numeral_not_recognised(self):
        """Test numeral detection is case-sensitive."""
        from ieee_formatter.numbering import number_heading

        assert number_heading("iv. results", 0) == "I. IV. RESULTS"

    def test_section_numeral(self):
        """Test the numeral sequence."""
        from ieee_formatter.numbering import section_numeral

        assert [section_numeral(i) for i in range(11)] == [
            "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X", "11",
        ]


class TestReferences:
    """Test reference numbering."""

    def test_sequential(self):
        """Test references are numbered from one."""
        from ieee_formatter.numbering import number_references

        assert number_references(["A.", "B.", "C."]) == ["[1] A.", "[2] B.", "[3] C."]

    def test_existing_number_kept(self):
        """Test a bracketed number is left as written."""
        from ieee_formatter.numbering import number_references

        assert number_references(["Smith.", "[7] Jones."]) == ["[1] Smith.", "[7] Jones."]

    def test_empty(self):
        """Test empty lists stay empty."""
        from ieee_formatter.numbering import number_headings, number_references

        assert number_headings([]) == []
        assert number_references([]) == []
