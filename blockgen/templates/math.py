"""Number and arithmetic blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..blocks import Block
from ..order import Order
from ..util import is_int_literal

if TYPE_CHECKING:
    from ..generator import Generator

# mode -> (operator, result order, left operand order, right operand order)
ARITHMETIC: dict[str, tuple[str, Order, Order, Order]] = {
    "ADD": (" + ", Order.ADDITIVE, Order.ADDITIVE, Order.ADDITIVE.tighter()),
    "MINUS": (" - ", Order.ADDITIVE, Order.ADDITIVE, Order.ADDITIVE.tighter()),
    "MULTIPLY": (
        " * ",
        Order.MULTIPLICATIVE,
        Order.MULTIPLICATIVE,
        Order.MULTIPLICATIVE.tighter(),
    ),
    "DIVIDE": (
        " / ",
        Order.MULTIPLICATIVE,
        Order.MULTIPLICATIVE,
        Order.MULTIPLICATIVE.tighter(),
    ),
    # right-associative, and binds tighter than a unary minus on its left
    "POWER": (
        " ** ",
        Order.EXPONENTIATION,
        Order.EXPONENTIATION.tighter(),
        Order.UNARY_SIGN,
    ),
}


def number_literal(raw: str) -> str:
    """Python literal for a numeric field; anything unparseable becomes 0."""
    raw = raw.strip()
    if is_int_literal(raw):
        digits = raw.lstrip("-").lstrip("0")
        if digits == "":
            return "0"
        return "-" + digits if raw.startswith("-") else digits
    try:
        value = float(raw)
    except ValueError:
        return "0"
    if value != value or abs(value) == float("inf"):
        return "0"
    return repr(value)


def number(gen: Generator, block: Block) -> tuple[str, Order]:
    code = number_literal(block.field_value("NUM", "0"))
    if code.startswith("-"):
        return (code, Order.UNARY_SIGN)
    if is_int_literal(code):
        # 5.upper() does not parse; an attribute needs (5).upper()
        return (code, Order.EXPONENTIATION)
    return (code, Order.ATOMIC)


def arithmetic(gen: Generator, block: Block) -> tuple[str, Order]:
    op, order, left_order, right_order = ARITHMETIC.get(
        block.field_value("OP"), ARITHMETIC["ADD"]
    )
    left = gen.value_to_code(block, "A", left_order, "0")
    right = gen.value_to_code(block, "B", right_order, "0")
    return (left + op + right, order)
