"""
Tests for the secondary boolean operations.

These tests verify:
    - Exact truth tables for all four input combinations
    - The algebraic laws relating the operations
    - Rejection of non-bool operands
"""

import pytest
from booltools.operations import (
    BoolOperator,
    apply_operator,
    equivalence,
    implication,
    xor,
)

BOOLS = [True, False]


class TestTruthTables:
    """Each operation must match its table exactly."""

    @pytest.mark.parametrize("a,rhs,expected", [
        (True, True, True),
        (True, False, False),
        (False, True, True),
        (False, False, True),
    ])
    def test_implication(self, a, rhs, expected):
        assert implication(a, rhs) is expected

    @pytest.mark.parametrize("a,rhs,expected", [
        (True, True, False),
        (True, False, True),
        (False, True, True),
        (False, False, False),
    ])
    def test_xor(self, a, rhs, expected):
        assert xor(a, rhs) is expected

    @pytest.mark.parametrize("a,rhs,expected", [
        (True, True, True),
        (True, False, False),
        (False, True, False),
        (False, False, True),
    ])
    def test_equivalence(self, a, rhs, expected):
        assert equivalence(a, rhs) is expected


class TestScenarios:
    """Concrete cases."""

    def test_true_does_not_imply_false(self):
        assert implication(True, False) is False

    def test_xor_of_equal_trues(self):
        assert xor(True, True) is False

    def test_false_equivalent_to_false(self):
        assert equivalence(False, False) is True

    def test_xor_of_differing(self):
        assert xor(False, True) is True


class TestLaws:
    """Algebraic laws over the whole domain."""

    @pytest.mark.parametrize("a", BOOLS)
    @pytest.mark.parametrize("b", BOOLS)
    def test_equivalence_is_negated_xor(self, a, b):
        assert equivalence(a, b) == (not xor(a, b))

    @pytest.mark.parametrize("a", BOOLS)
    def test_xor_self_inverse(self, a):
        assert xor(a, a) is False

    @pytest.mark.parametrize("a", BOOLS)
    def test_implication_identity(self, a):
        assert implication(True, a) is a
        assert implication(a, True) is True

    @pytest.mark.parametrize("a", BOOLS)
    def test_equivalence_reflexive(self, a):
        assert equivalence(a, a) is True

    @pytest.mark.parametrize("a", BOOLS)
    @pytest.mark.parametrize("b", BOOLS)
    def test_commutativity(self, a, b):
        assert xor(a, b) == xor(b, a)
        assert equivalence(a, b) == equivalence(b, a)

    def test_implication_not_commutative(self):
        """Swapping operands changes the result for mixed inputs."""
        assert implication(True, False) is False
        assert implication(False, True) is True


class TestOperandTypes:
    """Only real bools are accepted."""

    @pytest.mark.parametrize("func", [implication, xor, equivalence])
    def test_int_left_operand_rejected(self, func):
        with pytest.raises(TypeError):
            func(1, True)

    @pytest.mark.parametrize("func", [implication, xor, equivalence])
    def test_none_right_operand_rejected(self, func):
        with pytest.raises(TypeError):
            func(True, None)

    def test_error_names_operand(self):
        with pytest.raises(TypeError, match="rhs must be a bool, got str"):
            xor(False, "yes")


class TestApplyOperator:
    """Dispatch through BoolOperator."""

    @pytest.mark.parametrize("op,func", [
        (BoolOperator.IMPLICATION, implication),
        (BoolOperator.XOR, xor),
        (BoolOperator.EQUIVALENCE, equivalence),
    ])
    def test_matches_free_function(self, op, func):
        for a in BOOLS:
            for b in BOOLS:
                assert apply_operator(op, a, b) is func(a, b)

    def test_operator_symbols(self):
        assert BoolOperator("->") is BoolOperator.IMPLICATION
        assert BoolOperator("^") is BoolOperator.XOR
        assert BoolOperator("<->") is BoolOperator.EQUIVALENCE

    def test_unknown_operator_rejected(self):
        with pytest.raises(TypeError):
            apply_operator("^", True, False)
