"""
Serialization helpers for truth tables.

Provides lossless JSON/YAML round-trip via intermediate dict representation:

    {"operator": "->",
     "rows": [{"a": true, "rhs": true, "output": true}, ...]}
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from booltools.operations import BoolOperator
from booltools.truth_table import TruthTable, TruthTableRow


def row_to_dict(row: TruthTableRow) -> Dict[str, Any]:
    return {"a": row.a, "rhs": row.rhs, "output": row.output}


def row_from_dict(d: Any) -> TruthTableRow:
    if not isinstance(d, dict):
        raise TypeError(f"Unsupported row payload: {type(d)}")
    values = [d.get(key) for key in ("a", "rhs", "output")]
    if not all(isinstance(v, bool) for v in values):
        raise TypeError(f"Row fields must be booleans: {d}")
    return TruthTableRow(a=values[0], rhs=values[1], output=values[2])


def truth_table_to_dict(table: TruthTable) -> Dict[str, Any]:
    return {
        "operator": table.operator.value,
        "rows": [row_to_dict(row) for row in table.rows],
    }


def truth_table_from_dict(d: Dict[str, Any]) -> TruthTable:
    op = BoolOperator(d["operator"])
    rows = tuple(row_from_dict(r) for r in d.get("rows", []))
    return TruthTable(operator=op, rows=rows)


def truth_table_to_json(table: TruthTable) -> str:
    return json.dumps(truth_table_to_dict(table), sort_keys=True)


def truth_table_from_json(s: str) -> TruthTable:
    d = json.loads(s)
    return truth_table_from_dict(d)


def truth_table_to_yaml(table: TruthTable) -> str:
    return yaml.safe_dump(truth_table_to_dict(table))


def truth_table_from_yaml(s: str) -> TruthTable:
    d = yaml.safe_load(s)
    return truth_table_from_dict(d)
