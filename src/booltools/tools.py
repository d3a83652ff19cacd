"""
Sealed Method-Style Capability

Exposes the secondary operations as methods:

    tools(True).implication(False)   # -> False
    tools(False).xor(True)           # -> True

SEALING:
    BoolTools requires the private marker _Sealed as a base.
    _Sealed refuses subclasses defined outside this module, and
    BoolTools refuses virtual registration. External code therefore
    cannot make another type satisfy BoolTools. The attempt fails with
    TypeError when the offending class statement executes.

    This lets the package add operations to BoolTools later without
    breaking outside implementers, because there are none.
"""

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import Union, final

from .operations import equivalence, implication, xor


class _Sealed:
    """Private marker. Only classes defined in this module may carry it."""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"{cls.__module__}.{cls.__qualname__}: BoolTools is sealed "
                "and cannot be implemented outside booltools"
            )


class _SealedMeta(ABCMeta):
    def register(cls, subclass):
        raise TypeError(f"Cannot register {subclass!r}: {cls.__name__} is sealed")


class BoolTools(metaclass=_SealedMeta):
    """
    Secondary boolean operations for the ``bool`` type.

    Every method takes the right operand and returns a plain ``bool``.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if not issubclass(cls, _Sealed):
            raise TypeError(
                f"{cls.__module__}.{cls.__qualname__}: BoolTools is sealed "
                "and cannot be implemented outside booltools"
            )

    @abstractmethod
    def implication(self, rhs) -> bool:
        """
        Truth table:

            | self  | rhs   | output |
            |-------|-------|--------|
            | True  | True  | True   |
            | True  | False | False  |
            | False | True  | True   |
            | False | False | True   |
        """

    @abstractmethod
    def xor(self, rhs) -> bool:
        """
        Truth table:

            | self  | rhs   | output |
            |-------|-------|--------|
            | True  | True  | False  |
            | True  | False | True   |
            | False | True  | True   |
            | False | False | False  |
        """

    @abstractmethod
    def equivalence(self, rhs) -> bool:
        """
        Truth table:

            | self  | rhs   | output |
            |-------|-------|--------|
            | True  | True  | True   |
            | True  | False | False  |
            | False | True  | False  |
            | False | False | True   |
        """


@final
@dataclass(frozen=True)
class Bool(_Sealed, BoolTools):
    """
    The ``bool`` implementation of BoolTools.

    Properties:
        value: The wrapped boolean

    IMPORTANT:
        Methods delegate to the free functions in booltools.operations,
        so method and function forms can never disagree.
    """

    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise TypeError(f"Bool wraps bool values only, got {type(self.value).__name__}")

    def __bool__(self) -> bool:
        return self.value

    def implication(self, rhs: Union[bool, "Bool"]) -> bool:
        return implication(self.value, _unwrap(rhs))

    def xor(self, rhs: Union[bool, "Bool"]) -> bool:
        return xor(self.value, _unwrap(rhs))

    def equivalence(self, rhs: Union[bool, "Bool"]) -> bool:
        return equivalence(self.value, _unwrap(rhs))


def _unwrap(rhs: Union[bool, Bool]) -> bool:
    if isinstance(rhs, Bool):
        return rhs.value
    return rhs


def tools(value: bool) -> Bool:
    """Wrap ``value`` for method-style calls."""
    return Bool(value)
