"""
Law Checker: exhaustive verification of the algebraic laws.

Each law is a named predicate over a pair of booleans. Since the domain
is {True, False}, evaluating a predicate on all four pairs is a proof.

Checked by default:
    - equivalence is negated xor
    - xor is self-inverse
    - True is a left identity of implication
    - True absorbs implication on the right
    - equivalence is reflexive
    - xor and equivalence are commutative
    - implication is NOT commutative

IMPORTANT: This module only reports. Failures are collected in
LawReport.failures, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Sequence

from booltools.operations import equivalence, implication, xor
from booltools.truth_table import INPUTS


@dataclass(frozen=True)
class Law:
    """
    A named property that must hold for every input pair.

    Properties:
        name: Human-readable law name, used in failure messages
        holds: Predicate over (a, b); laws of one variable ignore b
    """

    name: str
    holds: Callable[[bool, bool], bool]


def _implication_is_asymmetric(a: bool, b: bool) -> bool:
    # Only the mixed pairs witness the asymmetry
    if a == b:
        return True
    return implication(a, b) != implication(b, a)


DEFAULT_LAWS: List[Law] = [
    Law("equivalence is negated xor", lambda a, b: equivalence(a, b) == (not xor(a, b))),
    Law("xor is self-inverse", lambda a, b: xor(a, a) is False),
    Law("implication left identity", lambda a, b: implication(True, a) == a),
    Law("implication right absorption", lambda a, b: implication(a, True) is True),
    Law("equivalence is reflexive", lambda a, b: equivalence(a, a) is True),
    Law("xor is commutative", lambda a, b: xor(a, b) == xor(b, a)),
    Law("equivalence is commutative", lambda a, b: equivalence(a, b) == equivalence(b, a)),
    Law("implication is asymmetric", _implication_is_asymmetric),
]


@dataclass
class LawReport:
    """Outcome of a law-checking run."""

    checked: int = 0
    passed: int = 0
    failures: List[str] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return self.checked == self.passed

    def add_failure(self, msg: str) -> None:
        """Add a failure to the report."""
        if msg not in self.failures:
            self.failures.append(msg)


def check_laws(laws: Sequence[Law] = DEFAULT_LAWS) -> LawReport:
    """
    Evaluate every law on all four input pairs.

    A law passes only if it holds for every pair. Each violating pair
    adds one failure message naming the law and the inputs.
    """
    report = LawReport()
    for law in laws:
        report.checked += 1
        violations = [(a, b) for a, b in INPUTS if not law.holds(a, b)]
        if violations:
            for a, b in violations:
                report.add_failure(f"{law.name}: fails for a={a}, b={b}")
        else:
            report.passed += 1
    return report
