"""
Serialization helpers for truth tables.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
UNEVALUABLE cells are written as null.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

import yaml

from truthtable.model import UNEVALUABLE, Cell, TruthRow, TruthTable


def cell_to_value(cell: Cell) -> bool | None:
    if cell is UNEVALUABLE:
        return None
    return bool(cell)


def cell_from_value(value: Any) -> Cell:
    if value is None:
        return UNEVALUABLE
    return bool(value)


def row_to_dict(row: TruthRow) -> Dict[str, Any]:
    return {
        "combination": list(row.combination),
        "subexpression_values": [cell_to_value(c) for c in row.subexpression_values],
        "result": row.result,
    }


def row_from_dict(d: Dict[str, Any]) -> TruthRow:
    return TruthRow(
        combination=tuple(bool(v) for v in d.get("combination", [])),
        subexpression_values=tuple(cell_from_value(v) for v in d.get("subexpression_values", [])),
        result=bool(d.get("result", False)),
    )


def table_to_dict(t: TruthTable) -> Dict[str, Any]:
    return {
        "expression": t.expression,
        "source": t.source,
        "variables": list(t.variables),
        "subexpressions": list(t.subexpressions),
        "rows": [row_to_dict(r) for r in t.rows],
        "warnings": list(t.warnings),
    }


def table_from_dict(d: Dict[str, Any]) -> TruthTable:
    return TruthTable(
        expression=d["expression"],
        source=d.get("source", ""),
        variables=list(d.get("variables", [])),
        subexpressions=list(d.get("subexpressions", [])),
        rows=[row_from_dict(r) for r in d.get("rows", [])],
        warnings=list(d.get("warnings", [])),
    )


def matrix_to_lists(t: TruthTable) -> List[List[bool | None]]:
    """Row-major cell values with UNEVALUABLE as None."""
    return [[cell_to_value(c) for c in row] for row in t.matrix]


def table_to_json(t: TruthTable) -> str:
    return json.dumps(table_to_dict(t), sort_keys=True, ensure_ascii=False)


def table_from_json(s: str) -> TruthTable:
    d = json.loads(s)
    return table_from_dict(d)


def table_to_yaml(t: TruthTable) -> str:
    return yaml.safe_dump(table_to_dict(t), allow_unicode=True)


def table_from_yaml(s: str) -> TruthTable:
    d = yaml.safe_load(s)
    return table_from_dict(d)
