"""
Operator Table for Propositional Expressions

Every operator the engine understands is declared here once,
as an immutable OperatorSpec keyed by its canonical symbol.

Canonical symbols:
    ¬  NOT
    ∧  AND
    ∨  OR
    ⊕  XOR
    →  IMPLIES
    ↔  IFF

ARCHITECTURAL RULE:
    This table is fixed for the process lifetime.
    Parser, evaluator and decomposer all read precedence from here;
    none of them keeps a private copy.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Operator(Enum):
    """
    The six canonical operator symbols.

    The value is the single character that appears in a
    canonical expression string.
    """

    NOT = "¬"
    AND = "∧"
    OR = "∨"
    XOR = "⊕"
    IMPLIES = "→"
    IFF = "↔"


class Associativity(Enum):
    """
    Declared associativity of an operator.

    IMPORTANT:
        This is metadata only. The Shunting-Yard parser pops on
        "stack-top precedence >= current precedence" for every
        operator, so all binary operators group left-to-right,
        including IMPLIES.
    """

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class OperatorSpec:
    """
    Describes one operator.

    Properties:
        symbol: Canonical character (e.g. "∧")
        name: Readable name (e.g. "AND")
        precedence: Higher binds tighter
        associativity: Declared associativity (see Associativity)
        arity: 1 for NOT, 2 for every binary operator
    """

    symbol: str
    name: str
    precedence: int
    associativity: Associativity
    arity: int

    @property
    def is_unary(self) -> bool:
        return self.arity == 1

    @property
    def is_binary(self) -> bool:
        return self.arity == 2


OPERATORS: Dict[str, OperatorSpec] = {
    Operator.AND.value: OperatorSpec(Operator.AND.value, "AND", 3, Associativity.LEFT, 2),
    Operator.OR.value: OperatorSpec(Operator.OR.value, "OR", 2, Associativity.LEFT, 2),
    Operator.XOR.value: OperatorSpec(Operator.XOR.value, "XOR", 2, Associativity.LEFT, 2),
    Operator.IMPLIES.value: OperatorSpec(Operator.IMPLIES.value, "IMPLIES", 1, Associativity.RIGHT, 2),
    Operator.IFF.value: OperatorSpec(Operator.IFF.value, "IFF", 1, Associativity.LEFT, 2),
    Operator.NOT.value: OperatorSpec(Operator.NOT.value, "NOT", 4, Associativity.RIGHT, 1),
}

BINARY_SYMBOLS = frozenset(sym for sym, spec in OPERATORS.items() if spec.is_binary)

OPEN_PAREN = "("
CLOSE_PAREN = ")"


def is_operator(symbol: str) -> bool:
    """True for any of the six canonical operator symbols."""
    return symbol in OPERATORS


def precedence(symbol: str) -> int:
    """Precedence of an operator symbol, 0 for anything else."""
    spec = OPERATORS.get(symbol)
    return spec.precedence if spec else 0


def apply_operator(symbol: str, left: bool, right: bool) -> bool:
    """
    Apply a binary operator to two boolean operands.

    Operand order matters for IMPLIES: `left → right`.

    Raises:
        ValueError: If symbol is not a binary operator
    """
    if symbol == Operator.AND.value:
        return left and right
    if symbol == Operator.OR.value:
        return left or right
    if symbol == Operator.XOR.value:
        return left != right
    if symbol == Operator.IMPLIES.value:
        return (not left) or right
    if symbol == Operator.IFF.value:
        return left == right
    raise ValueError(f"Unknown binary operator: {symbol!r}")


__all__ = [
    "Operator",
    "Associativity",
    "OperatorSpec",
    "OPERATORS",
    "BINARY_SYMBOLS",
    "OPEN_PAREN",
    "CLOSE_PAREN",
    "is_operator",
    "precedence",
    "apply_operator",
]
