"""Per-block-type templates: the generator's instruction set.

Dispatch is a closed match on the type tag. Expression templates return
(code, Order); statement templates return code lines. A type with no case
aborts the pass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..blocks import Block
from ..errors import UnsupportedBlockError
from ..order import Order
from . import lists, logic, math, procedures, text, variables

if TYPE_CHECKING:
    from ..generator import Generator

STATEMENT_TYPES = frozenset(
    {
        "lists_setIndex",
        "lists_add_items",
        "lists_insert_item",
        "lists_replace_item",
        "lists_remove_item",
        "lists_append_list",
        "text_append",
        "text_print",
        "variables_set",
        "global_declaration",
        "lexical_variable_set",
        "local_declaration_statement",
        "controls_if",
        "procedures_defnoreturn",
        "procedures_defreturn",
        "procedures_callnoreturn",
    }
)


def expression(gen: Generator, block: Block) -> tuple[str, Order]:
    match block.type:
        # lists
        case "lists_create_empty":
            return lists.create_empty(gen, block)
        case "lists_create_with":
            return lists.create_with(gen, block)
        case "lists_repeat":
            return lists.repeat(gen, block)
        case "lists_length":
            return lists.length(gen, block)
        case "lists_is_empty":
            return lists.is_empty(gen, block)
        case "lists_indexOf" | "lists_position_in":
            return lists.index_of(gen, block)
        case "lists_getIndex" | "lists_select_item":
            return lists.get_index(gen, block)
        case "lists_copy":
            return lists.copy(gen, block)
        case "lists_is_in":
            return lists.is_in(gen, block)
        case "lists_pick_random_item":
            return lists.pick_random_item(gen, block)
        case "lists_is_list":
            return lists.is_list(gen, block)
        # text
        case "text":
            return text.literal(gen, block)
        case "text_join":
            return text.join(gen, block)
        case "text_length":
            return text.length(gen, block)
        case "text_isEmpty":
            return text.is_empty(gen, block)
        case "text_endString":
            return text.end_string(gen, block)
        case "text_indexOf":
            return text.index_of(gen, block)
        case "text_starts_at":
            return text.starts_at(gen, block)
        case "text_charAt":
            return text.char_at(gen, block)
        case "text_segment":
            return text.segment(gen, block)
        case "text_changeCase":
            return text.change_case(gen, block)
        case "text_trim":
            return text.trim(gen, block)
        case "text_contains":
            return text.contains(gen, block)
        case "text_split_at_spaces":
            return text.split_at_spaces(gen, block)
        case "text_replace_all":
            return text.replace_all(gen, block)
        case "text_compare":
            return text.compare(gen, block)
        case "text_prompt":
            return text.prompt(gen, block)
        # variables
        case "variables_get":
            return variables.get(gen, block)
        case "lexical_variable_get":
            return variables.lexical_get(gen, block)
        case "local_declaration_expression":
            return variables.local_expression(gen, block)
        # math and logic
        case "math_number":
            return math.number(gen, block)
        case "math_arithmetic":
            return math.arithmetic(gen, block)
        case "logic_boolean":
            return logic.boolean(gen, block)
        case "logic_negate":
            return logic.negate(gen, block)
        case "logic_operation":
            return logic.operation(gen, block)
        # procedures
        case "procedures_callreturn":
            return procedures.call(gen, block)
        case _:
            if block.type in STATEMENT_TYPES:
                raise UnsupportedBlockError(
                    "statement block used as a value", block.type, block.id
                )
            raise UnsupportedBlockError("unsupported block type", block.type, block.id)


def statement(gen: Generator, block: Block) -> str:
    match block.type:
        # lists
        case "lists_setIndex":
            return lists.set_index(gen, block)
        case "lists_add_items":
            return lists.add_items(gen, block)
        case "lists_insert_item":
            return lists.insert_item(gen, block)
        case "lists_replace_item":
            return lists.replace_item(gen, block)
        case "lists_remove_item":
            return lists.remove_item(gen, block)
        case "lists_append_list":
            return lists.append_list(gen, block)
        # text
        case "text_append":
            return text.append(gen, block)
        case "text_print":
            return text.print_(gen, block)
        # variables
        case "variables_set":
            return variables.set_(gen, block)
        case "global_declaration":
            return variables.global_declaration(gen, block)
        case "lexical_variable_set":
            return variables.lexical_set(gen, block)
        case "local_declaration_statement":
            return variables.local_statement(gen, block)
        # control
        case "controls_if":
            return logic.if_(gen, block)
        case "procedures_defnoreturn" | "procedures_defreturn":
            return procedures.define(gen, block)
        case "procedures_callnoreturn":
            code, _ = procedures.call(gen, block)
            return code
        case _:
            # A value block standing alone is emitted as an expression line.
            code, _ = expression(gen, block)
            return code
