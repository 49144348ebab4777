"""
Tests for expressions.

Core claims:
    - Every variant reports its glyph, inputs and type
    - tycheck enforces the connectives' type rules and nothing else
    - map re-points inputs while keeping the variant
    - make_expression builds the right variant and rejects bad arity
"""

import pytest

from wireproof.core.expression import (
    Type, And, Or, Implies, Equal, Variable, Function, make_expression,
)


TYPES = {0: Type.TRUTH_VALUE, 1: Type.TRUTH_VALUE, 2: Type.REAL_NUMBER, 3: Type.REAL_NUMBER}


def child_type(ix):
    return TYPES[ix]


class TestText:
    def test_connective_glyphs(self):
        assert And((0, 1)).text() == "∧"
        assert Or((0, 1)).text() == "∨"
        assert Implies(0, 1).text() == "⇒"
        assert Equal(0, 1).text() == "="

    def test_leaves_show_their_name(self):
        assert Variable("a").text() == "a"
        assert Function("f", Type.REAL_NUMBER, (2,)).text() == "f"

    def test_str_includes_inputs(self):
        assert str(And((0, 1))) == "∧(0, 1)"
        assert str(Variable("a")) == "a"


class TestInputs:
    def test_inputs(self):
        assert And((0, 1, 2)).inputs == (0, 1, 2)
        assert Implies(3, 4).inputs == (3, 4)
        assert Equal(5, 6).inputs == (5, 6)
        assert Variable("a").inputs == ()
        assert Function("f", Type.TRUTH_VALUE, (7,)).inputs == (7,)


class TestTypes:
    def test_connectives_are_truth_values(self):
        for expression in (And(()), Or(()), Implies(0, 1), Equal(2, 3)):
            assert expression.ty() == Type.TRUTH_VALUE

    def test_leaves_use_declared_type(self):
        assert Variable("x", Type.REAL_NUMBER).ty() == Type.REAL_NUMBER
        assert Variable("p").ty() == Type.TRUTH_VALUE
        assert Function("f", Type.REAL_NUMBER, (0,)).ty() == Type.REAL_NUMBER

    def test_and_or_need_truth_values(self):
        assert And((0, 1)).tycheck(child_type)
        assert not And((0, 2)).tycheck(child_type)
        assert Or((1,)).tycheck(child_type)
        assert not Or((3,)).tycheck(child_type)

    def test_empty_and_typechecks(self):
        assert And(()).tycheck(child_type)

    def test_implies_needs_truth_values(self):
        assert Implies(0, 1).tycheck(child_type)
        assert not Implies(0, 2).tycheck(child_type)

    def test_equal_needs_matching_types(self):
        assert Equal(0, 1).tycheck(child_type)
        assert Equal(2, 3).tycheck(child_type)
        assert not Equal(0, 2).tycheck(child_type)

    def test_leaves_always_pass(self):
        assert Variable("a").tycheck(child_type)
        assert Function("f", Type.TRUTH_VALUE, (2, 3)).tycheck(child_type)


class TestMap:
    def test_map_preserves_variant(self):
        f = lambda ix: ix * 10
        assert And((1, 2)).map(f) == And((10, 20))
        assert Or((1,)).map(f) == Or((10,))
        assert Implies(1, 2).map(f) == Implies(10, 20)
        assert Equal(1, 2).map(f) == Equal(10, 20)
        assert Function("f", Type.REAL_NUMBER, (3,)).map(f) == Function("f", Type.REAL_NUMBER, (30,))

    def test_map_on_variable_is_identity(self):
        v = Variable("a")
        assert v.map(lambda ix: ix + 1) is v


class TestOperator:
    def test_variables_keyed_by_name_and_type(self):
        assert Variable("a").operator() == Variable("a").operator()
        assert Variable("a").operator() != Variable("b").operator()
        assert Variable("a").operator() != Variable("a", Type.REAL_NUMBER).operator()

    def test_variable_and_function_of_same_name_differ(self):
        assert Variable("f").operator() != Function("f", Type.TRUTH_VALUE, (0,)).operator()

    def test_connective_ignores_children(self):
        assert And((0, 1)).operator() == And((2,)).operator()

    def test_var(self):
        assert Variable("x", Type.REAL_NUMBER).var == ("x", Type.REAL_NUMBER)


class TestMakeExpression:
    def test_connectives(self):
        assert make_expression("∧", [0, 1]) == And((0, 1))
        assert make_expression("∨", [0]) == Or((0,))
        assert make_expression("⇒", [0, 1]) == Implies(0, 1)
        assert make_expression("=", [0, 1]) == Equal(0, 1)

    def test_other_names(self):
        assert make_expression("a") == Variable("a")
        assert make_expression("f", [0], Type.REAL_NUMBER) == Function("f", Type.REAL_NUMBER, (0,))

    @pytest.mark.parametrize("op", ["⇒", "="])
    @pytest.mark.parametrize("arity", [0, 1, 3])
    def test_binary_arity(self, op, arity):
        with pytest.raises(ValueError, match="Wrong number of inputs"):
            make_expression(op, range(arity))
