"""
Truth Tables for the Secondary Operators

Tables are COMPUTED from the operations themselves, never hand-written.
They exist for documentation, serialization and law checking.

Row order is fixed:
    (True, True), (True, False), (False, True), (False, False)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from booltools.operations import BoolOperator, apply_operator

INPUTS: Tuple[Tuple[bool, bool], ...] = (
    (True, True),
    (True, False),
    (False, True),
    (False, False),
)


@dataclass(frozen=True)
class TruthTableRow:
    """One input combination and its output."""

    a: bool
    rhs: bool
    output: bool


@dataclass(frozen=True)
class TruthTable:
    """
    The complete truth table of a single operator.

    Properties:
        operator: BoolOperator the table describes
        rows: One TruthTableRow per input combination, in INPUTS order
    """

    operator: BoolOperator
    rows: Tuple[TruthTableRow, ...]

    def lookup(self, a: bool, rhs: bool) -> bool:
        for row in self.rows:
            if row.a is a and row.rhs is rhs:
                return row.output
        raise KeyError(f"No row for ({a!r}, {rhs!r}) in {self.operator.name} table")

    def outputs(self) -> Tuple[bool, ...]:
        return tuple(row.output for row in self.rows)


def build_truth_table(op: BoolOperator) -> TruthTable:
    rows = tuple(
        TruthTableRow(a=a, rhs=rhs, output=apply_operator(op, a, rhs))
        for a, rhs in INPUTS
    )
    return TruthTable(operator=op, rows=rows)


def build_all_truth_tables() -> Dict[BoolOperator, TruthTable]:
    return {op: build_truth_table(op) for op in BoolOperator}
