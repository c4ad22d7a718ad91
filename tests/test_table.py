"""
Tests for the TableAssembler (full pipeline).

These tests verify:
    - Row values for known expressions
    - Column layout and counts
    - Error propagation
    - UNEVALUABLE cells for failing subexpressions
"""

import pytest
import truthtable.table as table_module
from truthtable.errors import (
    EmptyExpressionError,
    MissingOperandsError,
    NoVariablesFoundError,
    TooManyVariablesError,
    UnbalancedParenthesesError,
    UnevaluableSubexpressionWarning,
)
from truthtable.model import UNEVALUABLE, TruthTable
from truthtable.table import build_truth_table


def results(table: TruthTable):
    return [row.result for row in table.rows]


class TestKnownTables:
    """Test final column values."""

    def test_and(self):
        table = build_truth_table("p∧q")
        assert table.variables == ["p", "q"]
        assert [row.combination for row in table.rows] == [
            (True, True), (True, False), (False, True), (False, False),
        ]
        assert results(table) == [True, False, False, False]

    def test_implies(self):
        table = build_truth_table("p→q")
        assert results(table) == [True, False, True, True]

    def test_not(self):
        table = build_truth_table("¬p")
        assert table.variables == ["p"]
        assert results(table) == [False, True]

    def test_aliases_accepted(self):
        """Free-form input is normalized; the source text is kept."""
        table = build_truth_table("P and q")
        assert table.expression == "p∧q"
        assert table.source == "P and q"
        assert results(table) == [True, False, False, False]

    def test_chained_implication_left_grouped(self):
        table = build_truth_table("p -> q -> r")
        # Last row is F,F,F: (F→F)→F is False
        assert results(table)[-1] is False


class TestColumns:
    """Test headers and matrix shape."""

    def test_subexpression_column(self):
        table = build_truth_table("(p∧q)∨r")
        assert table.subexpressions == ["p∧q"]
        assert table.columns == ["p", "q", "r", "p∧q", "(p∧q)∨r"]
        assert table.column("p∧q") == [True, True, False, False, False, False, False, False]
        assert table.column("(p∧q)∨r") == [True, True, True, False, True, False, True, False]

    def test_full_expression_not_duplicated(self):
        table = build_truth_table("p∧q")
        assert table.subexpressions == []
        assert table.column_count == 3

    def test_redundant_parentheses_give_no_extra_column(self):
        """"¬(p)" and "¬p" are the same column; only the full expression shows."""
        table = build_truth_table("¬(p)")
        assert table.subexpressions == []
        assert table.columns == ["p", "¬(p)"]
        assert results(table) == [False, True]

    def test_matrix_shape(self):
        table = build_truth_table("(p ∧ q) ∨ (¬r → s)")
        assert table.row_count == 16
        assert len(table.matrix) == 16
        assert all(len(row) == table.column_count for row in table.matrix)
        assert table.column_count == 4 + len(table.subexpressions) + 1

    def test_ten_variables(self):
        table = build_truth_table("p∧q∧r∧s∧t∧u∧v∧w∧x∧y")
        assert table.row_count == 1024
        assert results(table)[0] is True
        assert not any(results(table)[1:])
        assert len(table.subexpressions) == 8

    def test_unknown_column(self):
        table = build_truth_table("p")
        with pytest.raises(KeyError):
            table.column("q")

    def test_assignment(self):
        table = build_truth_table("p∨q")
        assert table.assignment(1) == {"p": True, "q": False}


class TestErrors:
    """Errors in the full expression abort the table."""

    def test_empty(self):
        with pytest.raises(EmptyExpressionError):
            build_truth_table("   ")

    def test_no_variables(self):
        with pytest.raises(NoVariablesFoundError):
            build_truth_table("a & b")

    def test_too_many_variables(self, monkeypatch):
        monkeypatch.setattr(table_module, "MAX_VARIABLES", 2)
        with pytest.raises(TooManyVariablesError) as exc_info:
            build_truth_table("p∧q∧r")
        assert exc_info.value.count == 3
        assert exc_info.value.limit == 2

    def test_unbalanced_open(self):
        with pytest.raises(UnbalancedParenthesesError):
            build_truth_table("(p∧q")

    def test_unbalanced_close(self):
        with pytest.raises(UnbalancedParenthesesError):
            build_truth_table("p∧q)")

    def test_missing_operands(self):
        with pytest.raises(MissingOperandsError):
            build_truth_table("p∧")


class TestUnevaluableSubexpressions:
    """A failing subexpression marks its cells without aborting the table."""

    def test_cells_marked(self, monkeypatch):
        monkeypatch.setattr(
            table_module,
            "generate_subexpressions",
            lambda expression, variables: ["p∧", "(p", "¬p", expression],
        )
        with pytest.warns(UnevaluableSubexpressionWarning):
            table = build_truth_table("p∨q")

        assert table.subexpressions == ["p∧", "(p", "¬p"]
        assert table.column("p∧") == [UNEVALUABLE] * 4
        assert table.column("(p") == [UNEVALUABLE] * 4
        assert table.column("¬p") == [False, False, True, True]
        assert results(table) == [True, True, True, False]
        assert len(table.warnings) == 2
        assert "p∧" in table.warnings[0]

    def test_sentinel_is_not_a_bool(self):
        assert UNEVALUABLE is not False
        assert UNEVALUABLE != False  # noqa: E712
        assert not UNEVALUABLE


class TestLongExpressions:
    """Very long inputs build without hitting the recursion limit."""

    def test_long_conjunction_chain(self):
        table = build_truth_table("∧".join(["p"] * 1200))
        assert table.row_count == 2
        assert results(table) == [True, False]
        assert table.subexpressions[0] == "p∧p"
        assert len(table.subexpressions) == 1198

    def test_many_stacked_negations(self):
        table = build_truth_table("¬" * 1200 + "p")
        assert results(table) == [True, False]
        assert table.subexpressions[0] == "¬p"
        assert table.column("¬¬p") == [True, False]
