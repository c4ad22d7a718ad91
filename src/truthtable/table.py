"""
TableAssembler — the full pipeline.

    raw text
      → normalize_expression
      → extract_variables        (policy: 1..MAX_VARIABLES)
      → generate_subexpressions
      → generate_combinations
      → infix_to_postfix + evaluate_postfix, per row and column
      → TruthTable

Errors in the full expression abort the table. Errors in a subexpression
column only mark its cells UNEVALUABLE.
"""

import warnings
from typing import Dict, List, Optional

from truthtable.combinations import generate_combinations
from truthtable.decomposer import generate_subexpressions
from truthtable.errors import (
    EmptyExpressionError,
    NoVariablesFoundError,
    TooManyVariablesError,
    TruthTableError,
    UnevaluableSubexpressionWarning,
)
from truthtable.evaluator import evaluate_postfix
from truthtable.model import UNEVALUABLE, Cell, TruthRow, TruthTable
from truthtable.normalizer import extract_variables, normalize_expression
from truthtable.parser import infix_to_postfix


MAX_VARIABLES = 10


def build_truth_table(expression: str) -> TruthTable:
    """
    Build the complete truth table for a free-form expression.

    Args:
        expression: Text in any accepted syntax, e.g. "(p and q) -> r"

    Returns:
        TruthTable with variable, subexpression and result columns

    Raises:
        EmptyExpressionError: Blank input
        NoVariablesFoundError: No variable among p..y
        TooManyVariablesError: More than MAX_VARIABLES variables
        UnbalancedParenthesesError: Mismatched parentheses
        MissingOperandError, MissingOperandsError, InvalidExpressionError:
            The full expression cannot be evaluated
    """
    if not expression or not expression.strip():
        raise EmptyExpressionError(expression)

    canonical = normalize_expression(expression)

    variables = extract_variables(canonical)
    if not variables:
        raise NoVariablesFoundError(canonical)
    if len(variables) > MAX_VARIABLES:
        raise TooManyVariablesError(len(variables), MAX_VARIABLES, canonical)

    postfix = infix_to_postfix(canonical)

    subexpressions = generate_subexpressions(canonical, variables)
    if subexpressions and subexpressions[-1] == canonical:
        subexpressions = subexpressions[:-1]

    failed: Dict[str, str] = {}
    sub_postfix: Dict[str, Optional[List[str]]] = {}
    for sub in subexpressions:
        try:
            sub_postfix[sub] = infix_to_postfix(sub)
        except TruthTableError as e:
            sub_postfix[sub] = None
            failed[sub] = e.message

    table = TruthTable(
        expression=canonical,
        source=expression,
        variables=variables,
        subexpressions=subexpressions,
    )

    for combination in generate_combinations(len(variables)):
        assignment = dict(zip(variables, combination))
        result = evaluate_postfix(postfix, assignment, canonical)

        cells: List[Cell] = []
        for sub in subexpressions:
            tokens = sub_postfix[sub]
            if tokens is None:
                cells.append(UNEVALUABLE)
                continue
            try:
                cells.append(evaluate_postfix(tokens, assignment, sub))
            except TruthTableError as e:
                failed.setdefault(sub, e.message)
                cells.append(UNEVALUABLE)

        table.rows.append(TruthRow(combination=combination, subexpression_values=tuple(cells), result=result))

    for sub in subexpressions:
        if sub in failed:
            msg = f"Subexpression {sub} could not be evaluated: {failed[sub]}"
            table.warnings.append(msg)
            warnings.warn(msg, UnevaluableSubexpressionWarning)

    return table


__all__ = ["MAX_VARIABLES", "build_truth_table"]
