"""
SubexpressionDecomposer.

Splits a canonical expression into intermediate formulas that make
useful truth-table columns:

    (p∧q)∨¬r   →   ["¬r", "p∧q", "(p∧q)∨¬r"]

This is a heuristic, not a parse-tree enumeration. It aims for useful,
non-redundant columns; it does not promise every semantically distinct
subformula. Columns it produces that do not evaluate cleanly are marked
UNEVALUABLE by the table assembler.
"""

from typing import List, Optional, Sequence, Set, Tuple

from truthtable.operators import (
    BINARY_SYMBOLS,
    CLOSE_PAREN,
    OPEN_PAREN,
    Operator,
    precedence,
)


_WALK = "walk"
_RECORD = "record"


def trim_outer_parens(expression: str) -> str:
    """
    Remove parentheses that wrap the whole string, repeatedly.

    "((p∧q))" → "p∧q", but "(p)∧(q)" is left alone because its first
    "(" closes before the final character.
    """
    e = expression
    while len(e) > 1 and e[0] == OPEN_PAREN and e[-1] == CLOSE_PAREN:
        depth = 0
        for char in e[:-1]:
            if char == OPEN_PAREN:
                depth += 1
            elif char == CLOSE_PAREN:
                depth -= 1
            if depth == 0:
                return e
        e = e[1:-1]
    return e


def find_top_level_split(expression: str) -> Optional[Tuple[int, str]]:
    """
    Locate the lowest-precedence binary operator outside all parentheses.

    Returns:
        (index, operator) of the first such occurrence, or None
    """
    depth = 0
    best: Optional[Tuple[int, str]] = None
    best_precedence = None
    for index, char in enumerate(expression):
        if char == OPEN_PAREN:
            depth += 1
        elif char == CLOSE_PAREN:
            depth -= 1
        elif depth == 0 and char in BINARY_SYMBOLS:
            p = precedence(char)
            if best_precedence is None or p < best_precedence:
                best = (index, char)
                best_precedence = p
    return best


def generate_subexpressions(expression: str, variables: Sequence[str]) -> List[str]:
    """
    Decompose a canonical expression into ordered column fragments.

    Args:
        expression: Canonical expression
        variables: Variables in use (bare variables never become fragments)

    Returns:
        Distinct fragments sorted by length, then by first position in
        `expression`; the full expression is always last. Empty when the
        whole expression is a single variable.
    """
    fragments: List[str] = []
    seen: Set[str] = set()
    root_fragment: Optional[str] = None

    # Explicit work stack: ("walk", text, is_root) expands a fragment,
    # ("record", text, is_root) records it after both operands were walked.
    work: List[Tuple[str, str, bool]] = [(_WALK, expression, True)]
    while work:
        kind, fragment, is_root = work.pop()

        if kind == _RECORD:
            f = trim_outer_parens(fragment)
            if is_root:
                root_fragment = f
            if f and f not in seen:
                seen.add(f)
                fragments.append(f)
            continue

        e = trim_outer_parens(fragment)
        if not e:
            continue

        split = find_top_level_split(e)
        if split is not None:
            index, op = split
            left, right = e[:index], e[index + 1:]
            work.append((_RECORD, left + op + right, is_root))
            work.append((_WALK, right, False))
            work.append((_WALK, left, False))
            continue

        if e[0] == Operator.NOT.value:
            operand = e[1:]
            inner = trim_outer_parens(operand)
            # Keep one pair of parens so "¬(p∧q)" does not become "¬p∧q".
            if find_top_level_split(inner) is not None:
                inner = OPEN_PAREN + inner + CLOSE_PAREN
            work.append((_RECORD, Operator.NOT.value + inner, is_root))
            work.append((_WALK, operand, False))

        # Single variable or unrecognized residue: nothing to record.

    fragments.sort(key=lambda f: (len(f), expression.find(f)))

    if trim_outer_parens(expression) in variables:
        return []

    # The whole expression gets one column, under its own label.
    for whole in (root_fragment, expression):
        if whole in fragments:
            fragments.remove(whole)
    fragments.append(expression)
    return fragments


__all__ = ["trim_outer_parens", "find_top_level_split", "generate_subexpressions"]
