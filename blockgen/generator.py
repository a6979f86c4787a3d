"""Generation pass: block tree -> Python source.

A Generator is the context of exactly one pass. It owns the scope stack and the
helper library, renders value slots with precedence-aware parenthesization and
statement slots as newline-joined chains, and assembles the final program:

    imports
    helper definitions (first-registration order)
    program body

Nothing survives a pass: `generate()` builds a fresh Generator every call.
"""

from __future__ import annotations

from typing import Callable, Iterable

from . import templates
from .blocks import Block
from .errors import UnresolvedNameError
from .helpers import HelperCache
from .names import NameResolver
from .order import Order, wrap
from .util import indent_lines, is_int_literal

DEFAULT_INDENT = "    "


class Generator:
    """Pass context threaded through every template."""

    def __init__(self, indent: str = DEFAULT_INDENT) -> None:
        self.indent_str: str = indent
        self.names: NameResolver = NameResolver()
        self.helpers: HelperCache = HelperCache()

    # ============================================================
    # DECLARATIONS
    # ============================================================

    def declare_globals(self, blocks: Iterable[Block]) -> None:
        """Bind every global, workspace variable and procedure up front.

        Globals are visible from every block regardless of where their
        declaration sits among the top-level blocks.
        """
        for block in blocks:
            self._declare(block)

    def _declare(self, block: Block) -> None:
        for current in block.chain():
            match current.type:
                case "global_declaration":
                    self.names.bind_global(current.field_value("NAME"))
                case "variables_get" | "variables_set":
                    self.names.bind_global(current.field_value("VAR"))
                case "procedures_defnoreturn" | "procedures_defreturn":
                    self.names.bind_global(current.field_value("NAME"), "procedure")
            for child in current.values.values():
                self._declare(child)
            for child in current.statements.values():
                self._declare(child)

    # ============================================================
    # RENDERING
    # ============================================================

    def expression(self, block: Block) -> tuple[str, Order]:
        return templates.expression(self, block)

    def statement(self, block: Block) -> str:
        return templates.statement(self, block)

    def block_to_code(self, block: Block) -> str:
        """Render block and its next-linked siblings as statements."""
        parts = [self.statement(b) for b in block.chain()]
        return "\n".join(p for p in parts if p != "").rstrip()

    def value_to_code(
        self, block: Block, slot: str, order: Order, default: str
    ) -> str:
        """Code for the value in slot, parenthesized if looser than order."""
        child = block.values.get(slot)
        if child is None:
            return default
        code, child_order = self.expression(child)
        return wrap(code, child_order, order)

    def statement_to_code(self, block: Block, slot: str) -> str:
        """Code for the chain in slot; empty chain gives ""."""
        head = block.statements.get(slot)
        if head is None:
            return ""
        return self.block_to_code(head)

    def indent(self, code: str) -> str:
        """Indent a body; an empty body becomes `pass`."""
        if code.strip() == "":
            code = "pass"
        return indent_lines(code, self.indent_str)

    def zero_based(self, block: Block, slot: str, default: str = "1") -> str:
        """Convert a 1-based index in slot to a 0-based index expression.

        Integer literals are decremented now; anything else gets `- 1`
        appended, so the index expression is still evaluated once.
        """
        code = self.value_to_code(block, slot, Order.ADDITIVE, default)
        if is_int_literal(code):
            try:
                return str(int(code) - 1)
            except ValueError:
                # past the interpreter's int conversion limit
                pass
        return code + " - 1"

    @staticmethod
    def zero_based_order(code: str) -> Order:
        """Order of an index produced by zero_based."""
        if not is_int_literal(code):
            return Order.ADDITIVE
        if code.startswith("-"):
            return Order.UNARY_SIGN
        return Order.ATOMIC

    # ============================================================
    # NAMES AND HELPERS
    # ============================================================

    def resolve(
        self, block: Block, slot: str, name: str, kind: str = "variable"
    ) -> str:
        """Identifier for name, failing with the referencing block and slot."""
        try:
            return self.names.resolve(name, kind)
        except UnresolvedNameError as e:
            raise UnresolvedNameError(e.name, e.kind, block.type, block.id, slot) from e

    def resolve_global(
        self, block: Block, slot: str, name: str, kind: str = "variable"
    ) -> str:
        try:
            return self.names.resolve_global(name, kind)
        except UnresolvedNameError as e:
            raise UnresolvedNameError(e.name, e.kind, block.type, block.id, slot) from e

    def helper(self, key: str, builder: Callable[[str], str]) -> str:
        return self.helpers.ensure(key, builder, self.names)

    def require_import(self, module: str) -> None:
        self.helpers.require_import(module)

    # ============================================================
    # ASSEMBLY
    # ============================================================

    def finish(self, code: str) -> str:
        """Prepend imports and helper definitions to the program body."""
        sections: list[str] = []
        imports = self.helpers.imports()
        if imports:
            sections.append("\n".join("import " + m for m in imports))
        sections.extend(self.helpers.definitions())
        if code != "":
            sections.append(code)
        if not sections:
            return ""
        return "\n\n\n".join(sections) + "\n"


def _join_top_level(parts: list[str]) -> str:
    """Join top-level chunks, with two blank lines around definitions."""
    out = ""
    prev_def = False
    for part in parts:
        is_def = part.startswith("def ")
        if out != "":
            out += "\n\n\n" if (is_def or prev_def) else "\n"
        out += part
        prev_def = is_def
    return out


def generate(blocks: Iterable[Block], indent: str = DEFAULT_INDENT) -> str:
    """Generate a Python program from top-level blocks."""
    top = list(blocks)
    gen = Generator(indent)
    gen.declare_globals(top)
    parts = [gen.block_to_code(b) for b in top]
    return gen.finish(_join_top_level([p for p in parts if p != ""]))
