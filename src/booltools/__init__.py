"""
Boolean Tools Package

Secondary boolean operations for the built-in ``bool`` type:
    - implication
    - exclusive-or (xor)
    - equivalence

ARCHITECTURAL GUARANTEE:
------------------------
The operations are pure, total functions over {True, False}.
They hold no state, perform no I/O and are safe to call from any thread.

The method-style capability (BoolTools) is SEALED:
only this package may provide implementations of it.
"""

from .operations import BoolOperator, apply_operator, equivalence, implication, xor
from .tools import Bool, BoolTools, tools

__version__ = "0.1.0"

__all__ = [
    "Bool",
    "BoolOperator",
    "BoolTools",
    "apply_operator",
    "equivalence",
    "implication",
    "tools",
    "xor",
]
