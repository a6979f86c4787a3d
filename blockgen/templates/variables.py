"""Variable blocks: workspace variables, globals and lexical locals.

Lexical references may carry a scope prefix ("global x", "local x",
"param x"). A global prefix resolves in the outermost frame even when a local
shadows the name; the others resolve to the nearest binding.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..blocks import Block
from ..order import Order

if TYPE_CHECKING:
    from ..generator import Generator

SCOPE_PREFIXES = ("global", "local", "param")


def unprefix(name: str) -> tuple[str, str]:
    """Split "global x" into ("global", "x"); unprefixed names give ("", name)."""
    head, sep, rest = name.partition(" ")
    if sep != "" and head in SCOPE_PREFIXES and rest != "":
        return (head, rest)
    return ("", name)


def lexical_name(gen: Generator, block: Block) -> str:
    """Identifier for the block's VAR field, honoring a scope prefix."""
    prefix, name = unprefix(block.field_value("VAR"))
    if prefix == "global":
        return gen.resolve_global(block, "VAR", name)
    return gen.resolve(block, "VAR", name)


def get(gen: Generator, block: Block) -> tuple[str, Order]:
    return (gen.resolve(block, "VAR", block.field_value("VAR")), Order.ATOMIC)


def set_(gen: Generator, block: Block) -> str:
    value = gen.value_to_code(block, "VALUE", Order.NONE, "0")
    name = gen.resolve(block, "VAR", block.field_value("VAR"))
    return name + " = " + value


def global_declaration(gen: Generator, block: Block) -> str:
    name = gen.resolve_global(block, "NAME", block.field_value("NAME"))
    value = gen.value_to_code(block, "VALUE", Order.NONE, "0")
    return name + " = " + value


def lexical_get(gen: Generator, block: Block) -> tuple[str, Order]:
    return (lexical_name(gen, block), Order.ATOMIC)


def lexical_set(gen: Generator, block: Block) -> str:
    name = lexical_name(gen, block)
    value = gen.value_to_code(block, "VALUE", Order.NONE, "0")
    return name + " = " + value


def _initializers(gen: Generator, block: Block) -> tuple[list[str], list[str]]:
    """Declared names and their initializer code, rendered in the enclosing scope."""
    names = [unprefix(n)[1] for n in block.numbered_fields("VAR")]
    values = [
        gen.value_to_code(block, "DECL" + str(i), Order.NONE, "0")
        for i in range(len(names))
    ]
    return (names, values)


def local_statement(gen: Generator, block: Block) -> str:
    """Assignment lines for each declaration, then the STACK chain."""
    names, values = _initializers(gen, block)
    with gen.names.frame():
        lines = [
            gen.names.bind(name) + " = " + value
            for name, value in zip(names, values)
        ]
        body = gen.statement_to_code(block, "STACK")
    if body != "":
        lines.append(body)
    return "\n".join(lines)


def local_expression(gen: Generator, block: Block) -> tuple[str, Order]:
    """Declarations scoped to a lambda applied to their initial values."""
    names, values = _initializers(gen, block)
    with gen.names.frame():
        params = [gen.names.bind(name) for name in names]
        tail = gen.value_to_code(block, "RETURN", Order.NONE, "None")
    head = "lambda " + ", ".join(params) + ": " if params else "lambda: "
    return ("(" + head + tail + ")(" + ", ".join(values) + ")", Order.FUNCTION_CALL)


def return_tail(gen: Generator, block: Block, slot: str) -> str:
    """Statements returning the value in slot.

    An expression-form declaration in tail position unfolds into assignment
    lines followed by the return of its own tail, so exactly one return is
    emitted however deeply such declarations nest.
    """
    child = block.values.get(slot)
    if child is None:
        return "return None"
    if child.type != "local_declaration_expression":
        return "return " + gen.value_to_code(block, slot, Order.NONE, "None")
    names, values = _initializers(gen, child)
    with gen.names.frame():
        lines = [
            gen.names.bind(name) + " = " + value
            for name, value in zip(names, values)
        ]
        lines.append(return_tail(gen, child, "RETURN"))
    return "\n".join(lines)
