"""
Tests for ExpressionSession (calculator-style input).
"""

import pytest
from truthtable.errors import EmptyExpressionError
from truthtable.session import ExpressionSession


class TestExpressionSession:
    """Mutations return new sessions and never touch the old one."""

    def test_starts_empty(self):
        assert ExpressionSession().is_empty

    def test_append(self):
        session = ExpressionSession().append("p").append("∧").append("q")
        assert session.text == "p∧q"

    def test_append_leaves_original(self):
        original = ExpressionSession("p")
        original.append("∨")
        assert original.text == "p"

    def test_backspace(self):
        assert ExpressionSession("p∧q").backspace().text == "p∧"

    def test_backspace_when_empty(self):
        session = ExpressionSession()
        assert session.backspace() == session

    def test_clear(self):
        assert ExpressionSession("p∧q").clear().is_empty

    def test_immutable(self):
        with pytest.raises(AttributeError):
            ExpressionSession().text = "p"

    def test_build(self):
        table = ExpressionSession("(p∨q)").build()
        assert table.expression == "(p∨q)"
        assert table.row_count == 4

    def test_build_blank(self):
        with pytest.raises(EmptyExpressionError):
            ExpressionSession("  ").build()
