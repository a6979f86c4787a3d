"""Tests for operator precedence levels."""

from blockgen.order import Order, needs_parens, wrap


def test_levels_ascend_loosest_first():
    assert Order.NONE < Order.LOGICAL_OR < Order.LOGICAL_AND < Order.LOGICAL_NOT
    assert Order.RELATIONAL < Order.ADDITIVE < Order.MULTIPLICATIVE
    assert Order.UNARY_SIGN < Order.EXPONENTIATION < Order.MEMBER
    assert Order.FUNCTION_CALL < Order.ATOMIC


def test_tighter():
    assert Order.ADDITIVE.tighter() is Order.MULTIPLICATIVE
    assert Order.RELATIONAL.tighter() is Order.BITWISE_OR
    assert Order.ATOMIC.tighter() is Order.ATOMIC


def test_needs_parens_only_when_looser():
    assert needs_parens(Order.ADDITIVE, Order.MULTIPLICATIVE)
    assert not needs_parens(Order.MULTIPLICATIVE, Order.ADDITIVE)
    assert not needs_parens(Order.ADDITIVE, Order.ADDITIVE)


def test_wrap():
    assert wrap("a + b", Order.ADDITIVE, Order.MULTIPLICATIVE) == "(a + b)"
    assert wrap("a * b", Order.MULTIPLICATIVE, Order.ADDITIVE) == "a * b"
    assert wrap("x", Order.ATOMIC, Order.ATOMIC) == "x"
