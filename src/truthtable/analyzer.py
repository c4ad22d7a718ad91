"""
Table Analyzer — summary and diagnostics for a TruthTable.

This module provides lightweight analysis of TruthTable objects:
    - Row, column and variable counts
    - Tautology / contradiction / contingency classification
    - Satisfying assignments
    - Unevaluable subexpression columns
    - Warning flags for surprising grouping

IMPORTANT: This is read-only. It does NOT modify the table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from truthtable.model import UNEVALUABLE, TruthTable
from truthtable.operators import CLOSE_PAREN, OPEN_PAREN, Operator


class Classification(Enum):
    """What the final column says about the expression."""
    TAUTOLOGY = "tautology"          # True in every row
    CONTRADICTION = "contradiction"  # False in every row
    CONTINGENCY = "contingency"      # Both values occur


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def _has_chained_implication(expression: str) -> bool:
    """
    True when one parenthesis level holds two or more precedence-1
    operators and at least one of them is an implication.
    """
    levels: List[List[str]] = [[]]
    for char in expression:
        if char == OPEN_PAREN:
            levels.append([])
        elif char == CLOSE_PAREN:
            group = levels.pop() if len(levels) > 1 else []
            if len(group) >= 2 and Operator.IMPLIES.value in group:
                return True
        elif char in (Operator.IMPLIES.value, Operator.IFF.value):
            levels[-1].append(char)
    return any(len(g) >= 2 and Operator.IMPLIES.value in g for g in levels)


@dataclass
class TableReport:
    """Analysis report for a truth table."""

    expression: str
    variable_count: int = 0
    row_count: int = 0
    subexpression_count: int = 0

    true_rows: int = 0
    false_rows: int = 0
    classification: Classification = Classification.CONTINGENCY
    satisfying_assignments: List[Dict[str, bool]] = field(default_factory=list)

    unevaluable_columns: List[str] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    @property
    def is_satisfiable(self) -> bool:
        return self.true_rows > 0

    def summary_line(self) -> str:
        return " • ".join([
            _plural(self.variable_count, "variable", "variables"),
            _plural(self.row_count, "combination", "combinations"),
            _plural(self.subexpression_count, "subexpression", "subexpressions"),
        ])


def analyze_table(table: TruthTable) -> TableReport:
    """
    Summarize a TruthTable.

    Returns a TableReport with counts, classification and warnings.
    """
    report = TableReport(expression=table.expression)

    # Basic counts
    report.variable_count = len(table.variables)
    report.row_count = table.row_count
    report.subexpression_count = len(table.subexpressions)

    # =========================================================================
    # 1. RESULT COLUMN
    # =========================================================================

    for index, row in enumerate(table.rows):
        if row.result:
            report.true_rows += 1
            report.satisfying_assignments.append(table.assignment(index))
        else:
            report.false_rows += 1

    if report.row_count and report.false_rows == 0:
        report.classification = Classification.TAUTOLOGY
    elif report.true_rows == 0:
        report.classification = Classification.CONTRADICTION
    else:
        report.classification = Classification.CONTINGENCY

    # =========================================================================
    # 2. SUBEXPRESSION COLUMNS
    # =========================================================================

    for position, sub in enumerate(table.subexpressions):
        if any(row.subexpression_values[position] is UNEVALUABLE for row in table.rows):
            report.unevaluable_columns.append(sub)

    # =========================================================================
    # 3. WARNING FLAGS
    # =========================================================================

    for msg in table.warnings:
        report.add_warning(msg)

    if report.unevaluable_columns:
        report.add_warning(
            f"Unevaluable subexpression columns: {', '.join(report.unevaluable_columns)}"
        )

    if _has_chained_implication(table.expression):
        report.add_warning(
            "Chained implication groups left-to-right: p→q→r is read as (p→q)→r"
        )

    return report


__all__ = ["Classification", "TableReport", "analyze_table"]
