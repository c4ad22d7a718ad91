"""
Example expressions, one per operator family, used as placeholders
and for demos.
"""
from typing import Dict

from truthtable.model import TruthTable
from truthtable.table import build_truth_table


EXAMPLE_EXPRESSIONS = (
    "(p ∧ q) ∨ (¬r → s)",
    "p ∧ (q ∨ r)",
    "(p → q) ↔ (¬q → ¬p)",
    "p ⊕ q ⊕ r",
    "¬(p ∧ q) ∨ (p ∨ q)",
)


def build_example_tables() -> Dict[str, TruthTable]:
    return {expression: build_truth_table(expression) for expression in EXAMPLE_EXPRESSIONS}
