"""List blocks.

External indices are 1-based; every index-taking block goes through
Generator.zero_based.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..blocks import Block
from ..order import Order

if TYPE_CHECKING:
    from ..generator import Generator

EMPTY_LIST = "[]"


def create_empty(gen: Generator, block: Block) -> tuple[str, Order]:
    return (EMPTY_LIST, Order.ATOMIC)


def create_with(gen: Generator, block: Block) -> tuple[str, Order]:
    elements = [
        gen.value_to_code(block, "ADD" + str(n), Order.NONE, "None")
        for n in range(block.item_count())
    ]
    return ("[" + ", ".join(elements) + "]", Order.ATOMIC)


def repeat(gen: Generator, block: Block) -> tuple[str, Order]:
    item = gen.value_to_code(block, "ITEM", Order.NONE, "None")
    count = gen.value_to_code(block, "NUM", Order.MULTIPLICATIVE.tighter(), "0")
    return ("[" + item + "] * " + count, Order.MULTIPLICATIVE)


def length(gen: Generator, block: Block) -> tuple[str, Order]:
    target = gen.value_to_code(block, "LIST", Order.NONE, EMPTY_LIST)
    return ("len(" + target + ")", Order.FUNCTION_CALL)


def is_empty(gen: Generator, block: Block) -> tuple[str, Order]:
    target = gen.value_to_code(block, "LIST", Order.NONE, EMPTY_LIST)
    return ("not len(" + target + ")", Order.LOGICAL_NOT)


def _first_index_helper(name: str) -> str:
    return "\n".join(
        [
            "def " + name + "(my_list, elem):",
            "    try:",
            "        return my_list.index(elem) + 1",
            "    except ValueError:",
            "        return 0",
        ]
    )


def _last_index_helper(name: str) -> str:
    return "\n".join(
        [
            "def " + name + "(my_list, elem):",
            "    try:",
            "        return len(my_list) - my_list[::-1].index(elem)",
            "    except ValueError:",
            "        return 0",
        ]
    )


def index_of(gen: Generator, block: Block) -> tuple[str, Order]:
    """1-based position of ITEM in LIST, 0 when absent."""
    target = gen.value_to_code(block, "LIST", Order.NONE, EMPTY_LIST)
    item = gen.value_to_code(block, "ITEM", Order.NONE, '""')
    if block.field_value("END", "FIRST") == "LAST":
        func = gen.helper("last_index", _last_index_helper)
    else:
        func = gen.helper("first_index", _first_index_helper)
    return (func + "(" + target + ", " + item + ")", Order.FUNCTION_CALL)


def _index_slot(block: Block) -> str:
    if "AT" in block.values:
        return "AT"
    return "NUM"


def get_index(gen: Generator, block: Block) -> tuple[str, Order]:
    target = gen.value_to_code(block, "LIST", Order.MEMBER, EMPTY_LIST)
    at = gen.zero_based(block, _index_slot(block))
    return (target + "[" + at + "]", Order.MEMBER)


def set_index(gen: Generator, block: Block) -> str:
    target = gen.value_to_code(block, "LIST", Order.MEMBER, EMPTY_LIST)
    at = gen.zero_based(block, "AT")
    value = gen.value_to_code(block, "TO", Order.NONE, "None")
    return target + "[" + at + "] = " + value


def add_items(gen: Generator, block: Block) -> str:
    target = gen.value_to_code(block, "LIST", Order.MEMBER, EMPTY_LIST)
    count = max(block.item_count(), 1)
    items = [
        gen.value_to_code(block, "ITEM" + str(i), Order.NONE, "None")
        for i in range(count)
    ]
    if count == 1:
        return target + ".append(" + items[0] + ")"
    return target + ".extend([" + ", ".join(items) + "])"


def insert_item(gen: Generator, block: Block) -> str:
    target = gen.value_to_code(block, "LIST", Order.MEMBER, EMPTY_LIST)
    at = gen.zero_based(block, "INDEX")
    item = gen.value_to_code(block, "ITEM", Order.NONE, "None")
    return target + ".insert(" + at + ", " + item + ")"


def replace_item(gen: Generator, block: Block) -> str:
    target = gen.value_to_code(block, "LIST", Order.MEMBER, EMPTY_LIST)
    at = gen.zero_based(block, "NUM")
    item = gen.value_to_code(block, "ITEM", Order.NONE, "None")
    return target + "[" + at + "] = " + item


def remove_item(gen: Generator, block: Block) -> str:
    target = gen.value_to_code(block, "LIST", Order.MEMBER, EMPTY_LIST)
    at = gen.zero_based(block, "INDEX")
    return target + ".pop(" + at + ")"


def append_list(gen: Generator, block: Block) -> str:
    first = gen.value_to_code(block, "LIST0", Order.MEMBER, EMPTY_LIST)
    second = gen.value_to_code(block, "LIST1", Order.NONE, EMPTY_LIST)
    return first + ".extend(" + second + ")"


def copy(gen: Generator, block: Block) -> tuple[str, Order]:
    target = gen.value_to_code(block, "LIST", Order.NONE, EMPTY_LIST)
    return ("list(" + target + ")", Order.FUNCTION_CALL)


def is_in(gen: Generator, block: Block) -> tuple[str, Order]:
    item = gen.value_to_code(block, "ITEM", Order.RELATIONAL.tighter(), "None")
    target = gen.value_to_code(block, "LIST", Order.RELATIONAL.tighter(), EMPTY_LIST)
    return (item + " in " + target, Order.RELATIONAL)


def pick_random_item(gen: Generator, block: Block) -> tuple[str, Order]:
    gen.require_import("random")
    target = gen.value_to_code(block, "LIST", Order.NONE, EMPTY_LIST)
    return ("random.choice(" + target + ")", Order.FUNCTION_CALL)


def is_list(gen: Generator, block: Block) -> tuple[str, Order]:
    item = gen.value_to_code(block, "ITEM", Order.NONE, "None")
    return ("type(" + item + ") is list", Order.RELATIONAL)
