"""Procedure definitions and calls.

Parameters live in their own frame, so a parameter that reuses a global's name
gets a distinct identifier. Every body declares the pass's global variables
with a `global` statement so assignments reach module scope.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ..blocks import Block
from ..order import Order
from ..util import parse_count
from .variables import return_tail, unprefix

if TYPE_CHECKING:
    from ..generator import Generator

_ARG_SLOT = re.compile(r"^ARG([0-9]+)$")


def define(gen: Generator, block: Block) -> str:
    name = gen.resolve_global(block, "NAME", block.field_value("NAME"), "procedure")
    globals_ = gen.names.global_identifiers("variable")
    params_in = [unprefix(p)[1] for p in block.numbered_fields("VAR")]
    with gen.names.frame():
        params = [gen.names.bind(p) for p in params_in]
        body: list[str] = []
        if globals_:
            body.append("global " + ", ".join(globals_))
        stack = gen.statement_to_code(block, "STACK")
        if stack != "":
            body.append(stack)
        if block.type == "procedures_defreturn":
            body.append(return_tail(gen, block, "RETURN"))
    header = "def " + name + "(" + ", ".join(params) + "):"
    return header + "\n" + gen.indent("\n".join(body))


def _arg_count(block: Block) -> int:
    count = max(block.item_count(), parse_count(block.mutation.get("args", "")))
    for slot in block.values:
        m = _ARG_SLOT.match(slot)
        if m is not None:
            count = max(count, parse_count(m.group(1)) + 1)
    return count


def call(gen: Generator, block: Block) -> tuple[str, Order]:
    name = gen.resolve(block, "PROCNAME", block.field_value("PROCNAME"), "procedure")
    args = [
        gen.value_to_code(block, "ARG" + str(i), Order.NONE, "None")
        for i in range(_arg_count(block))
    ]
    return (name + "(" + ", ".join(args) + ")", Order.FUNCTION_CALL)
