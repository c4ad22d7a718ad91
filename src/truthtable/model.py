"""
Truth Table Model Objects

Pure data classes handed from the engine to the presentation layer:
    - TruthRow (one combination and every column value)
    - TruthTable (headers + rows)
    - UNEVALUABLE (cell sentinel)

ARCHITECTURAL RULE:
    These objects know nothing about rendering.
    They are fully serializable (see truthtable.serialization).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple, Union


class Unevaluable(Enum):
    """
    Sentinel for a subexpression cell that could not be evaluated.

    Falsy, but never equal to False: callers must check
    `cell is UNEVALUABLE` before treating a cell as a boolean.
    """

    UNEVALUABLE = "?"

    def __bool__(self) -> bool:
        return False


UNEVALUABLE = Unevaluable.UNEVALUABLE

Cell = Union[bool, Unevaluable]


@dataclass(frozen=True)
class TruthRow:
    """
    One row of a truth table.

    Properties:
        combination: Variable values, in table variable order
        subexpression_values: One cell per subexpression column
        result: Value of the full expression
    """

    combination: Tuple[bool, ...]
    subexpression_values: Tuple[Cell, ...] = ()
    result: bool = False

    @property
    def cells(self) -> List[Cell]:
        """Every cell in column order: variables, subexpressions, result."""
        return [*self.combination, *self.subexpression_values, self.result]


@dataclass
class TruthTable:
    """
    Complete truth table for one expression.

    Properties:
        expression:
            Canonical expression (final column header)

        source:
            Text as originally supplied, before normalization

        variables:
            Sorted variable letters; first is the most significant
            bit of every combination

        subexpressions:
            Intermediate column headers, NOT including the full expression

        rows:
            2^n rows, all-true first, all-false last

        warnings:
            Non-fatal issues, e.g. unevaluable subexpression columns

    INVARIANTS:
        - len(rows) == 2 ** len(variables)
        - every row has len(variables) + len(subexpressions) + 1 cells
    """

    expression: str
    source: str = ""
    variables: List[str] = field(default_factory=list)
    subexpressions: List[str] = field(default_factory=list)
    rows: List[TruthRow] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def columns(self) -> List[str]:
        return [*self.variables, *self.subexpressions, self.expression]

    @property
    def matrix(self) -> List[List[Cell]]:
        return [row.cells for row in self.rows]

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.variables) + len(self.subexpressions) + 1

    def column(self, label: str) -> List[Cell]:
        """
        Retrieve every cell of one column by its header.

        Raises:
            KeyError: If no column has that header
        """
        try:
            index = self.columns.index(label)
        except ValueError:
            raise KeyError(f"No column labelled {label!r}")
        return [row.cells[index] for row in self.rows]

    def assignment(self, row_index: int) -> Dict[str, bool]:
        """Variable → value mapping for one row."""
        return dict(zip(self.variables, self.rows[row_index].combination))


__all__ = ["Unevaluable", "UNEVALUABLE", "Cell", "TruthRow", "TruthTable"]
