"""
Normalizer and VariableExtractor.

Raw Input → Canonical Expression.

Converts:
    [ {        → (
    ] }        → )
    and, &     → ∧
    or, |      → ∨
    not, !     → ¬
    xor, ^     → ⊕
    ->         → →
    <->, <=>   → ↔

Whitespace is removed and letters are lower-cased.
No validation happens here; malformed input surfaces later as a
parse or evaluation error.
"""

import re
from typing import List, Tuple

from truthtable.operators import Operator


VARIABLE_ALPHABET: Tuple[str, ...] = ("p", "q", "r", "s", "t", "u", "v", "w", "x", "y")

PARENTHESIS_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("[", "("),
    ("{", "("),
    ("]", ")"),
    ("}", ")"),
)

# Order matters: "xor" must be rewritten before "or" swallows its tail.
WORD_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("and", Operator.AND.value),
    ("xor", Operator.XOR.value),
    ("or", Operator.OR.value),
    ("not", Operator.NOT.value),
)

# Order matters: "<->" must be rewritten before "->" matches inside it.
SYMBOL_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("<->", Operator.IFF.value),
    ("<=>", Operator.IFF.value),
    ("->", Operator.IMPLIES.value),
    ("&", Operator.AND.value),
    ("|", Operator.OR.value),
    ("!", Operator.NOT.value),
    ("^", Operator.XOR.value),
)

_LETTER_RE = re.compile(r"[a-z]")


def normalize_expression(expression: str) -> str:
    """
    Rewrite free-form text into a canonical expression.

    Args:
        expression: Text as typed (any case, any spacing, any alias)

    Returns:
        Canonical expression string

    Example:
        normalize_expression("P and [q -> not r]")  →  "p∧(q→¬r)"
    """
    normalized = expression
    for alias, canonical in PARENTHESIS_ALIASES:
        normalized = normalized.replace(alias, canonical)

    normalized = normalized.lower()

    # Whole words first, while spacing still separates "x or y" from "xor".
    for alias, canonical in WORD_ALIASES:
        normalized = re.sub(rf"(?<![a-z]){alias}(?![a-z])", canonical, normalized)

    normalized = re.sub(r"\s+", "", normalized)

    for alias, canonical in WORD_ALIASES:
        normalized = re.sub(alias, canonical, normalized, flags=re.IGNORECASE)

    for alias, canonical in SYMBOL_ALIASES:
        normalized = normalized.replace(alias, canonical)

    return normalized


def extract_variables(expression: str) -> List[str]:
    """
    Return the sorted, distinct variables used in a canonical expression.

    Letters outside VARIABLE_ALPHABET are ignored. An empty result is
    not an error here; the table assembler decides what to do with it.
    """
    found = {m.group(0) for m in _LETTER_RE.finditer(expression)}
    return sorted(v for v in found if v in VARIABLE_ALPHABET)


__all__ = [
    "VARIABLE_ALPHABET",
    "PARENTHESIS_ALIASES",
    "WORD_ALIASES",
    "SYMBOL_ALIASES",
    "normalize_expression",
    "extract_variables",
]
