"""
Command line interface.

    truthtable "(p and q) -> r"
    truthtable "p <-> q" --format yaml
    truthtable "p | q & r" --postfix
    truthtable --examples

Exit status is 0 on success, 1 when the expression is rejected.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from truthtable.analyzer import analyze_table
from truthtable.errors import TruthTableError
from truthtable.examples import EXAMPLE_EXPRESSIONS
from truthtable.model import UNEVALUABLE, Cell, TruthTable
from truthtable.normalizer import normalize_expression
from truthtable.parser import infix_to_postfix
from truthtable.serialization import table_to_json, table_to_yaml
from truthtable.table import build_truth_table


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_cell(cell: Cell) -> str:
    if cell is UNEVALUABLE:
        return "?"
    return "V" if cell else "F"


def format_table_text(table: TruthTable) -> str:
    """Plain listing: header line, one line per row, summary line."""
    lines = [" | ".join(table.columns)]
    for row in table.rows:
        lines.append(" | ".join(format_cell(c) for c in row.cells))

    report = analyze_table(table)
    lines.append("")
    lines.append(f"{report.summary_line()} • {report.classification.value}")
    for warning in report.warnings:
        lines.append(f"warning: {warning}")
    return "\n".join(lines)


def render(table: TruthTable, fmt: str) -> str:
    if fmt == "json":
        return table_to_json(table)
    if fmt == "yaml":
        return table_to_yaml(table)
    return format_table_text(table)


# =============================================================================
# ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="truthtable",
        description="Generate a truth table for a propositional expression (variables p..y)",
    )
    parser.add_argument("expression", nargs="?", help="Expression, e.g. \"(p and q) -> r\"")
    parser.add_argument(
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--postfix",
        action="store_true",
        help="Print the canonical expression and its postfix tokens instead of the table",
    )
    parser.add_argument(
        "--examples",
        action="store_true",
        help="Generate tables for the built-in example expressions",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.examples:
        expressions = list(EXAMPLE_EXPRESSIONS)
    elif args.expression is not None:
        expressions = [args.expression]
    else:
        parser.print_usage(sys.stderr)
        print("Error: an expression or --examples is required", file=sys.stderr)
        return 1

    try:
        for expression in expressions:
            if args.postfix:
                canonical = normalize_expression(expression)
                print(canonical)
                print(" ".join(infix_to_postfix(canonical)))
            else:
                print(render(build_truth_table(expression), args.format))
    except TruthTableError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
