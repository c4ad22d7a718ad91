"""
Expression session: the expression under construction.

Calculator-style input builds an expression one character at a time.
The in-progress text is an explicit immutable value owned by the
caller; every mutation returns a new session.
"""

from dataclasses import dataclass, replace

from truthtable.errors import EmptyExpressionError
from truthtable.model import TruthTable
from truthtable.table import build_truth_table


@dataclass(frozen=True)
class ExpressionSession:
    """
    Properties:
        text: Characters entered so far
    """

    text: str = ""

    @property
    def is_empty(self) -> bool:
        return len(self.text) == 0

    def append(self, char: str) -> "ExpressionSession":
        """Add a variable, operator or parenthesis at the end."""
        return replace(self, text=self.text + char)

    def backspace(self) -> "ExpressionSession":
        """Remove the last character; no-op when already empty."""
        if self.is_empty:
            return self
        return replace(self, text=self.text[:-1])

    def clear(self) -> "ExpressionSession":
        return replace(self, text="")

    def build(self) -> TruthTable:
        """
        Generate the truth table for the current text.

        Raises:
            EmptyExpressionError: If nothing but whitespace has been entered
            TruthTableError: Any other engine error
        """
        expression = self.text.strip()
        if not expression:
            raise EmptyExpressionError(self.text)
        return build_truth_table(expression)


__all__ = ["ExpressionSession"]
