"""
PostfixEvaluator: postfix tokens + assignment → bool.

A variable pushes its assigned value, NOT pops one operand, a binary
operator pops the right operand first and then the left. Exactly one
value must remain at the end.
"""

from typing import List, Mapping, Optional, Sequence

from truthtable.errors import (
    InvalidExpressionError,
    MissingOperandError,
    MissingOperandsError,
)
from truthtable.normalizer import VARIABLE_ALPHABET
from truthtable.operators import OPERATORS, Operator, apply_operator
from truthtable.parser import infix_to_postfix


def evaluate_postfix(
    tokens: Sequence[str],
    assignment: Mapping[str, bool],
    expression: Optional[str] = None,
) -> bool:
    """
    Evaluate a postfix token stream against one assignment.

    Args:
        tokens: Output of infix_to_postfix
        assignment: Value for every variable that appears in tokens
        expression: Source expression, attached to errors for context

    Returns:
        The single boolean result

    Raises:
        MissingOperandError: NOT with an empty stack
        MissingOperandsError: Binary operator with fewer than two values
        InvalidExpressionError: Unassigned variable, or a final stack
            holding other than exactly one value
    """
    stack: List[bool] = []

    for token in tokens:
        if token in VARIABLE_ALPHABET:
            if token not in assignment:
                raise InvalidExpressionError(f"Variable {token} has no assigned value", expression)
            stack.append(bool(assignment[token]))
        elif token == Operator.NOT.value:
            if not stack:
                raise MissingOperandError(expression)
            stack.append(not stack.pop())
        elif token in OPERATORS:
            if len(stack) < 2:
                raise MissingOperandsError(token, expression)
            right = stack.pop()
            left = stack.pop()
            stack.append(apply_operator(token, left, right))

    if len(stack) != 1:
        raise InvalidExpressionError("Invalid expression", expression)

    return stack[0]


def evaluate_expression(expression: str, assignment: Mapping[str, bool]) -> bool:
    """Parse a canonical expression and evaluate it in one step."""
    return evaluate_postfix(infix_to_postfix(expression), assignment, expression)


__all__ = ["evaluate_postfix", "evaluate_expression"]
