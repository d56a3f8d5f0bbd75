import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox.expressions import infix_to_postfix, precedence


def test_precedence_order():
    assert precedence("^") == precedence("$") == 3
    assert precedence("*") == precedence("/") == precedence("%") == 2
    assert precedence("+") == precedence("-") == 1
    assert precedence("(") == 0


def test_unknown_operator():
    with pytest.raises(ValueError):
        precedence("&")


def test_multiplication_binds_tighter():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_parentheses_override_precedence():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


def test_equal_precedence_is_left_associative():
    assert infix_to_postfix("a^b^c") == "ab^c^"


def test_whitespace_ignored():
    assert infix_to_postfix(" ( a + b ) * c ") == infix_to_postfix("(a+b)*c")


def test_single_operand():
    assert infix_to_postfix("x") == "x"


@pytest.mark.parametrize("expression", ["(a+b", "a+b)", "a)+b", "a+1", "a&b"])
def test_malformed_expressions(expression):
    with pytest.raises(ValueError):
        infix_to_postfix(expression)


operators = st.sampled_from("+-*/%^")
letters = st.sampled_from("abcdefxyz")


@given(letters, st.lists(st.tuples(operators, letters), max_size=10))
def test_operands_keep_order_and_operators_are_kept(first, rest):
    expression = first + "".join(op + letter for op, letter in rest)
    result = infix_to_postfix(expression)
    assert [c for c in result if c.isalpha()] == [c for c in expression if c.isalpha()]
    assert sorted(result) == sorted(expression)


@given(letters, st.lists(st.tuples(operators, letters), max_size=10))
def test_wrapping_in_parentheses_changes_nothing(first, rest):
    expression = first + "".join(op + letter for op, letter in rest)
    assert infix_to_postfix("(" + expression + ")") == infix_to_postfix(expression)