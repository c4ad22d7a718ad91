"""
Truth Table Engine

Evaluates propositional-logic expressions over up to ten variables
(p through y) and produces a complete truth table, with intermediate
subexpression columns showing how the final value is reached.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Widgets, buttons or keyboard handling
    - Grid rendering
    - Event wiring

Callers hand in a finished expression string and receive a
TruthTable. Presentation happens in external layers.
"""

from truthtable.combinations import generate_combinations
from truthtable.decomposer import generate_subexpressions
from truthtable.errors import (
    EmptyExpressionError,
    EvaluationError,
    InvalidExpressionError,
    MissingOperandError,
    MissingOperandsError,
    NoVariablesFoundError,
    ParseError,
    TooManyVariablesError,
    TruthTableError,
    UnbalancedParenthesesError,
    UnevaluableSubexpressionWarning,
)
from truthtable.evaluator import evaluate_expression, evaluate_postfix
from truthtable.model import UNEVALUABLE, TruthRow, TruthTable
from truthtable.normalizer import extract_variables, normalize_expression
from truthtable.parser import infix_to_postfix
from truthtable.session import ExpressionSession
from truthtable.table import MAX_VARIABLES, build_truth_table

__version__ = "0.1.0"

__all__ = [
    "build_truth_table",
    "normalize_expression",
    "extract_variables",
    "generate_combinations",
    "infix_to_postfix",
    "evaluate_postfix",
    "evaluate_expression",
    "generate_subexpressions",
    "TruthTable",
    "TruthRow",
    "UNEVALUABLE",
    "ExpressionSession",
    "MAX_VARIABLES",
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
