"""
ExpressionParser: canonical infix text → postfix token stream.

Classic Shunting-Yard with an operator stack. Precedence comes from
truthtable.operators.OPERATORS; declared associativity is NOT consulted,
so every binary operator groups left-to-right:

    p→q→r   parses as   (p→q)→r   →   ["p", "q", "→", "r", "→"]

Characters outside the canonical alphabet are skipped. Any resulting
malformation shows up at evaluation time.
"""

from typing import List

from truthtable.errors import UnbalancedParenthesesError
from truthtable.normalizer import VARIABLE_ALPHABET
from truthtable.operators import (
    CLOSE_PAREN,
    OPEN_PAREN,
    OPERATORS,
    Operator,
)


def infix_to_postfix(expression: str) -> List[str]:
    """
    Convert a canonical infix expression to postfix (RPN).

    Args:
        expression: Canonical expression (output of normalize_expression)

    Returns:
        List of tokens, each a variable letter or an operator symbol

    Raises:
        UnbalancedParenthesesError: On an unmatched "(" or ")"
    """
    output: List[str] = []
    stack: List[str] = []

    for char in expression:
        if char in VARIABLE_ALPHABET:
            output.append(char)
        elif char == Operator.NOT.value:
            # Highest precedence: nothing above it ever needs popping first.
            stack.append(char)
        elif char in OPERATORS:
            current = OPERATORS[char].precedence
            while (
                stack
                and stack[-1] != OPEN_PAREN
                and OPERATORS[stack[-1]].precedence >= current
            ):
                output.append(stack.pop())
            stack.append(char)
        elif char == OPEN_PAREN:
            stack.append(char)
        elif char == CLOSE_PAREN:
            while stack and stack[-1] != OPEN_PAREN:
                output.append(stack.pop())
            if not stack:
                raise UnbalancedParenthesesError(expression)
            stack.pop()

    while stack:
        top = stack.pop()
        if top == OPEN_PAREN:
            raise UnbalancedParenthesesError(expression)
        output.append(top)

    return output


__all__ = ["infix_to_postfix"]
