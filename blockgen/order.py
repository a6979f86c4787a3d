"""Python operator precedence.

Every rendered expression carries the Order of its outermost operator. A
parent asks for a child at a minimum Order; the child is parenthesized when it
binds more loosely than that.
"""

from __future__ import annotations

from enum import IntEnum


class Order(IntEnum):
    """Binding strength, loosest first (higher = binds tighter).

    Follows the Python grammar: `x if c else y` is CONDITIONAL, `not x` is
    LOGICAL_NOT, comparisons (including `in`, `is`) are RELATIONAL, unary
    `-x` is UNARY_SIGN, `x[i]` and `x.a` are MEMBER, `f(x)` is FUNCTION_CALL.
    """

    NONE = 0
    LAMBDA = 1
    CONDITIONAL = 2
    LOGICAL_OR = 3
    LOGICAL_AND = 4
    LOGICAL_NOT = 5
    RELATIONAL = 6
    BITWISE_OR = 7
    BITWISE_XOR = 8
    BITWISE_AND = 9
    BITWISE_SHIFT = 10
    ADDITIVE = 11
    MULTIPLICATIVE = 12
    UNARY_SIGN = 13
    EXPONENTIATION = 14
    MEMBER = 15
    FUNCTION_CALL = 16
    ATOMIC = 17

    def tighter(self) -> Order:
        """The next tighter level; ATOMIC stays ATOMIC."""
        if self is Order.ATOMIC:
            return self
        return Order(self + 1)


def needs_parens(child: Order, minimum: Order) -> bool:
    return child < minimum


def wrap(code: str, child: Order, minimum: Order) -> str:
    """Parenthesize code rendered at `child` when used at `minimum`."""
    if needs_parens(child, minimum):
        return "(" + code + ")"
    return code
