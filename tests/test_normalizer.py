"""
Tests for the Normalizer and VariableExtractor.

Raw text → canonical expression → sorted variable list.
"""

import pytest
from truthtable.normalizer import (
    VARIABLE_ALPHABET,
    extract_variables,
    normalize_expression,
)


class TestNormalizeExpression:
    """Test alias substitution and cleanup."""

    def test_alias_equivalence(self):
        """Word, ASCII and canonical AND all normalize the same way."""
        assert normalize_expression("p and q") == "p∧q"
        assert normalize_expression("p&q") == "p∧q"
        assert normalize_expression("p∧q") == "p∧q"

    @pytest.mark.parametrize("raw,expected", [
        ("p or q", "p∨q"),
        ("p | q", "p∨q"),
        ("not p", "¬p"),
        ("!p", "¬p"),
        ("p xor q", "p⊕q"),
        ("p ^ q", "p⊕q"),
        ("p -> q", "p→q"),
        ("p <-> q", "p↔q"),
        ("p <=> q", "p↔q"),
    ])
    def test_operator_aliases(self, raw, expected):
        assert normalize_expression(raw) == expected

    def test_case_insensitive(self):
        """Upper-case letters and keywords are accepted."""
        assert normalize_expression("P AND NOT Q") == "p∧¬q"

    def test_bracket_variants(self):
        """[ ] and { } become ( )."""
        assert normalize_expression("[p | q] -> {r}") == "(p∨q)→(r)"

    def test_whitespace_stripped(self):
        """Spaces, tabs and newlines are removed."""
        assert normalize_expression("  p \t∧\n q ") == "p∧q"

    def test_or_next_to_x(self):
        """'x or y' must not be read as 'xor' followed by y."""
        assert normalize_expression("x or y") == "x∨y"

    def test_compact_words(self):
        """Word aliases also work without spaces."""
        assert normalize_expression("pandq") == "p∧q"
        assert normalize_expression("notp") == "¬p"

    def test_compact_xor_is_an_operator(self):
        """Unspaced "xor" is always the operator, never the variable x."""
        assert normalize_expression("xorq") == "⊕q"
        assert normalize_expression("pxorq") == "p⊕q"
        assert normalize_expression("x or q") == "x∨q"

    def test_no_validation(self):
        """Malformed text passes through untouched."""
        assert normalize_expression("(p∧") == "(p∧"

    @pytest.mark.parametrize("raw", [
        "p and q",
        "(p -> q) <-> (not q -> not p)",
        "p xor q xor r",
        "[p | {q & r}]",
    ])
    def test_idempotent(self, raw):
        """Re-normalizing canonical text is a no-op."""
        once = normalize_expression(raw)
        assert normalize_expression(once) == once


class TestExtractVariables:
    """Test variable discovery."""

    def test_sorted_distinct(self):
        assert extract_variables("q∧p∨q") == ["p", "q"]

    def test_letters_outside_alphabet_ignored(self):
        """Only p..y count as variables."""
        assert extract_variables("a∧z") == []
        assert extract_variables("y∧a∧p") == ["p", "y"]

    def test_all_ten(self):
        expr = "∧".join(reversed(VARIABLE_ALPHABET))
        assert extract_variables(expr) == list(VARIABLE_ALPHABET)

    def test_empty(self):
        assert extract_variables("") == []
