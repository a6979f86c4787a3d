"""Text blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..blocks import Block
from ..order import Order
from ..util import is_int_literal, string_literal
from .variables import lexical_name

if TYPE_CHECKING:
    from ..generator import Generator

EMPTY_TEXT = '""'

CHANGE_CASE: dict[str, str] = {
    "UPCASE": ".upper()",
    "DOWNCASE": ".lower()",
}

# mode -> (operator, minimum order of each operand); operands one level
# tighter than RELATIONAL so a nested comparison never chains.
COMPARE: dict[str, tuple[str, Order]] = {
    "LT": (" < ", Order.RELATIONAL.tighter()),
    "GT": (" > ", Order.RELATIONAL.tighter()),
    "EQUAL": (" == ", Order.RELATIONAL.tighter()),
    "NEQ": (" != ", Order.RELATIONAL.tighter()),
}


def literal(gen: Generator, block: Block) -> tuple[str, Order]:
    return (string_literal(block.field_value("TEXT")), Order.ATOMIC)


def join(gen: Generator, block: Block) -> tuple[str, Order]:
    """Concatenate operands as strings.

    Zero, one and two operands get dedicated forms; more fall back to a
    comprehension over the operand list.
    """
    count = block.item_count()
    if count == 0:
        return (EMPTY_TEXT, Order.ATOMIC)
    if count == 1:
        first = gen.value_to_code(block, "ADD0", Order.NONE, EMPTY_TEXT)
        return ("str(" + first + ")", Order.FUNCTION_CALL)
    if count == 2:
        first = gen.value_to_code(block, "ADD0", Order.NONE, EMPTY_TEXT)
        second = gen.value_to_code(block, "ADD1", Order.NONE, EMPTY_TEXT)
        return ("str(" + first + ") + str(" + second + ")", Order.ADDITIVE)
    operands = [
        gen.value_to_code(block, "ADD" + str(n), Order.NONE, EMPTY_TEXT)
        for n in range(count)
    ]
    temp = gen.names.distinct("temp_value")
    code = (
        EMPTY_TEXT
        + ".join([str("
        + temp
        + ") for "
        + temp
        + " in ["
        + ", ".join(operands)
        + "]])"
    )
    return (code, Order.FUNCTION_CALL)


def append(gen: Generator, block: Block) -> str:
    """Read-modify-write on the named variable."""
    name = lexical_name(gen, block)
    value = gen.value_to_code(block, "TEXT", Order.NONE, EMPTY_TEXT)
    return name + " = str(" + name + ") + str(" + value + ")"


def length(gen: Generator, block: Block) -> tuple[str, Order]:
    value = gen.value_to_code(block, "VALUE", Order.NONE, EMPTY_TEXT)
    return ("len(" + value + ")", Order.FUNCTION_CALL)


def is_empty(gen: Generator, block: Block) -> tuple[str, Order]:
    value = gen.value_to_code(block, "VALUE", Order.NONE, EMPTY_TEXT)
    return ("not len(" + value + ")", Order.LOGICAL_NOT)


def end_string(gen: Generator, block: Block) -> tuple[str, Order]:
    """Leading or trailing substring of NUM characters."""
    value = gen.value_to_code(block, "TEXT", Order.MEMBER, EMPTY_TEXT)
    if block.field_value("END", "FIRST") == "FIRST":
        count = gen.value_to_code(block, "NUM", Order.NONE, "1")
        return (value + "[:" + count + "]", Order.MEMBER)
    count = gen.value_to_code(block, "NUM", Order.UNARY_SIGN, "1")
    if count in ("0", "-0"):
        return (value + "[:0]", Order.MEMBER)
    return (value + "[-" + count + ":]", Order.MEMBER)


def index_of(gen: Generator, block: Block) -> tuple[str, Order]:
    """1-based position of FIND in VALUE, 0 when absent."""
    method = ".find(" if block.field_value("END", "FIRST") == "FIRST" else ".rfind("
    needle = gen.value_to_code(block, "FIND", Order.NONE, EMPTY_TEXT)
    value = gen.value_to_code(block, "VALUE", Order.MEMBER, EMPTY_TEXT)
    return (value + method + needle + ") + 1", Order.ADDITIVE)


def starts_at(gen: Generator, block: Block) -> tuple[str, Order]:
    value = gen.value_to_code(block, "TEXT", Order.MEMBER, EMPTY_TEXT)
    piece = gen.value_to_code(block, "PIECE", Order.NONE, EMPTY_TEXT)
    return (value + ".find(" + piece + ") + 1", Order.ADDITIVE)


def char_at(gen: Generator, block: Block) -> tuple[str, Order]:
    at = gen.zero_based(block, "AT")
    value = gen.value_to_code(block, "VALUE", Order.MEMBER, EMPTY_TEXT)
    return (value + "[" + at + "]", Order.MEMBER)


def _non_negative_literal(code: str) -> bool:
    return is_int_literal(code) and not code.startswith("-")


def segment(gen: Generator, block: Block) -> tuple[str, Order]:
    """LENGTH characters of TEXT starting at 1-based START."""
    value = gen.value_to_code(block, "TEXT", Order.MEMBER, EMPTY_TEXT)
    start = gen.zero_based(block, "START")
    size = gen.value_to_code(block, "LENGTH", Order.NONE, "1")
    # t[s:s + n] only agrees with t[s:][:n] when neither bound is negative
    if _non_negative_literal(start) and _non_negative_literal(size):
        try:
            end = int(start) + int(size)
        except ValueError:
            pass
        else:
            return (value + "[" + start + ":" + str(end) + "]", Order.MEMBER)
    return (value + "[" + start + ":][:" + size + "]", Order.MEMBER)


def change_case(gen: Generator, block: Block) -> tuple[str, Order]:
    method = CHANGE_CASE.get(block.field_value("OP"), CHANGE_CASE["UPCASE"])
    value = gen.value_to_code(block, "TEXT", Order.MEMBER, EMPTY_TEXT)
    return (value + method, Order.FUNCTION_CALL)


def trim(gen: Generator, block: Block) -> tuple[str, Order]:
    value = gen.value_to_code(block, "TEXT", Order.MEMBER, EMPTY_TEXT)
    return (value + ".strip()", Order.FUNCTION_CALL)


def contains(gen: Generator, block: Block) -> tuple[str, Order]:
    value = gen.value_to_code(block, "TEXT", Order.RELATIONAL.tighter(), EMPTY_TEXT)
    piece = gen.value_to_code(block, "PIECE", Order.RELATIONAL.tighter(), EMPTY_TEXT)
    return (piece + " in " + value, Order.RELATIONAL)


def split_at_spaces(gen: Generator, block: Block) -> tuple[str, Order]:
    value = gen.value_to_code(block, "TEXT", Order.MEMBER, EMPTY_TEXT)
    return (value + ".split()", Order.FUNCTION_CALL)


def replace_all(gen: Generator, block: Block) -> tuple[str, Order]:
    value = gen.value_to_code(block, "TEXT", Order.MEMBER, EMPTY_TEXT)
    old = gen.value_to_code(block, "SEGMENT", Order.NONE, EMPTY_TEXT)
    new = gen.value_to_code(block, "REPLACEMENT", Order.NONE, EMPTY_TEXT)
    return (value + ".replace(" + old + ", " + new + ")", Order.FUNCTION_CALL)


def compare(gen: Generator, block: Block) -> tuple[str, Order]:
    op, operand_order = COMPARE.get(block.field_value("OP"), COMPARE["EQUAL"])
    left = gen.value_to_code(block, "TEXT1", operand_order, EMPTY_TEXT)
    right = gen.value_to_code(block, "TEXT2", operand_order, EMPTY_TEXT)
    return (left + op + right, Order.RELATIONAL)


def print_(gen: Generator, block: Block) -> str:
    value = gen.value_to_code(block, "TEXT", Order.NONE, EMPTY_TEXT)
    return "print(" + value + ")"


def _prompt_helper(name: str) -> str:
    # raw_input exists only on Python 2
    return "\n".join(
        [
            "def " + name + "(msg):",
            "    try:",
            "        return raw_input(msg)",
            "    except NameError:",
            "        return input(msg)",
        ]
    )


def prompt(gen: Generator, block: Block) -> tuple[str, Order]:
    func = gen.helper("text_prompt", _prompt_helper)
    code = func + "(" + string_literal(block.field_value("TEXT")) + ")"
    if block.field_value("TYPE") == "NUMBER":
        code = "float(" + code + ")"
    return (code, Order.FUNCTION_CALL)
