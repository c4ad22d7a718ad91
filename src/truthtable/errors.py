"""
Error taxonomy for the truth table engine.

Every failure is deterministic: the input is static text, so nothing
here is ever retried. All exceptions abort table generation, with one
exception: a subexpression column that cannot be evaluated is reported
through UnevaluableSubexpressionWarning and an UNEVALUABLE cell instead.
"""

from typing import Optional


class TruthTableError(Exception):
    """
    Base class for every engine error.

    Properties:
        message: Human-readable description, suitable for showing to a user
        expression: The expression being processed (may be None)
    """

    def __init__(self, message: str, expression: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.expression = expression


class EmptyExpressionError(TruthTableError):
    """Raised when the input is blank."""

    def __init__(self, expression: Optional[str] = None):
        super().__init__("Expression is empty; build a logical expression first", expression)


class NoVariablesFoundError(TruthTableError):
    """Raised when none of the recognized variables appear in the expression."""

    def __init__(self, expression: Optional[str] = None):
        super().__init__("No valid variables found in expression (use p through y)", expression)


class TooManyVariablesError(TruthTableError):
    """Raised when the expression uses more distinct variables than allowed."""

    def __init__(self, count: int, limit: int, expression: Optional[str] = None):
        super().__init__(f"Expression uses {count} variables, maximum is {limit}", expression)
        self.count = count
        self.limit = limit


class ParseError(TruthTableError):
    """Raised when infix text cannot be converted to postfix."""
    pass


class UnbalancedParenthesesError(ParseError):
    """Raised on a closing parenthesis without an opening one, or vice versa."""

    def __init__(self, expression: Optional[str] = None):
        super().__init__("Unbalanced parentheses", expression)


class EvaluationError(TruthTableError):
    """Raised when a postfix token stream cannot be evaluated."""
    pass


class MissingOperandError(EvaluationError):
    """Raised when NOT finds nothing on the operand stack."""

    def __init__(self, expression: Optional[str] = None):
        super().__init__("NOT operator has no operand", expression)


class MissingOperandsError(EvaluationError):
    """Raised when a binary operator finds fewer than two operands."""

    def __init__(self, operator: str, expression: Optional[str] = None):
        super().__init__(f"Operator {operator} needs two operands", expression)
        self.operator = operator


class InvalidExpressionError(EvaluationError):
    """Raised when evaluation ends with other than exactly one value."""
    pass


class UnevaluableSubexpressionWarning(UserWarning):
    """Issued once per subexpression column that could not be evaluated."""
    pass


__all__ = [
    "TruthTableError",
    "EmptyExpressionError",
    "NoVariablesFoundError",
    "TooManyVariablesError",
    "ParseError",
    "UnbalancedParenthesesError",
    "EvaluationError",
    "MissingOperandError",
    "MissingOperandsError",
    "InvalidExpressionError",
    "UnevaluableSubexpressionWarning",
]
