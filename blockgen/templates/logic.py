"""Boolean and conditional blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..blocks import Block
from ..order import Order
from ..util import parse_count

if TYPE_CHECKING:
    from ..generator import Generator

OPERATION: dict[str, tuple[str, Order]] = {
    "AND": (" and ", Order.LOGICAL_AND),
    "OR": (" or ", Order.LOGICAL_OR),
}


def boolean(gen: Generator, block: Block) -> tuple[str, Order]:
    code = "True" if block.field_value("BOOL") == "TRUE" else "False"
    return (code, Order.ATOMIC)


def negate(gen: Generator, block: Block) -> tuple[str, Order]:
    value = gen.value_to_code(block, "BOOL", Order.LOGICAL_NOT, "True")
    return ("not " + value, Order.LOGICAL_NOT)


def operation(gen: Generator, block: Block) -> tuple[str, Order]:
    op, order = OPERATION.get(block.field_value("OP"), OPERATION["AND"])
    left = gen.value_to_code(block, "A", order, "False")
    right = gen.value_to_code(block, "B", order, "False")
    return (left + op + right, order)


def if_(gen: Generator, block: Block) -> str:
    """if / elif / else; branch count comes from the elseif/else mutation."""
    elseif_count = parse_count(block.mutation.get("elseif", "0"))
    lines: list[str] = []
    for n in range(elseif_count + 1):
        cond = gen.value_to_code(block, "IF" + str(n), Order.NONE, "False")
        keyword = "if " if n == 0 else "elif "
        lines.append(keyword + cond + ":")
        lines.append(gen.indent(gen.statement_to_code(block, "DO" + str(n))))
    if block.mutation.get("else", "0") == "1" or "ELSE" in block.statements:
        lines.append("else:")
        lines.append(gen.indent(gen.statement_to_code(block, "ELSE")))
    return "\n".join(lines)
