"""
Secondary Boolean Operations

Free-function form of the three secondary operations:

    | a     | rhs   | implication | xor   | equivalence |
    |-------|-------|-------------|-------|-------------|
    | True  | True  | True        | False | True        |
    | True  | False | False       | True  | False       |
    | False | True  | True        | True  | False       |
    | False | False | True        | False | True        |

ARCHITECTURAL RULE:
    Operands must be real ``bool`` values.
    ``1``, ``0``, ``None`` or any other truthy/falsy object is rejected,
    since the operations are defined over the two-valued type only.
"""

from enum import Enum


class BoolOperator(Enum):
    """
    The secondary operators provided by this package.

    Values are the conventional symbols, used as stable keys in
    serialized truth tables.
    """

    IMPLICATION = "->"
    XOR = "^"
    EQUIVALENCE = "<->"


def _require_bool(name: str, value: object) -> None:
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be a bool, got {type(value).__name__}")


def implication(a: bool, rhs: bool) -> bool:
    """False only when ``a`` is True and ``rhs`` is False."""
    _require_bool("a", a)
    _require_bool("rhs", rhs)
    return (not a) or rhs


def xor(a: bool, rhs: bool) -> bool:
    """True exactly when the operands differ."""
    _require_bool("a", a)
    _require_bool("rhs", rhs)
    return (a or rhs) and (not a or not rhs)


def equivalence(a: bool, rhs: bool) -> bool:
    """True exactly when the operands are equal (negated xor)."""
    return not xor(a, rhs)


_DISPATCH = {
    BoolOperator.IMPLICATION: implication,
    BoolOperator.XOR: xor,
    BoolOperator.EQUIVALENCE: equivalence,
}


def apply_operator(op: BoolOperator, a: bool, rhs: bool) -> bool:
    """Apply ``op`` to the operands."""
    if not isinstance(op, BoolOperator):
        raise TypeError(f"Unsupported operator type: {type(op)}")
    return _DISPATCH[op](a, rhs)
