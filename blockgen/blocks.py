"""Block tree - the generator's input.

A block is one node of a visual program. It is identified by an opaque id and
dispatched on its type tag. Children hang off named slots:

| Slot kind | Holds                              | XML element   |
|-----------|------------------------------------|---------------|
| field     | inline literal text                | <field>/<title> |
| value     | zero or one expression block       | <value>       |
| statement | head of a chain of statement blocks | <statement>  |
| next      | following block in the same chain  | <next>        |

Mutations carry per-instance shape, e.g. the operand count of a join block.
The generator only reads blocks; it never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .util import parse_count


@dataclass
class Block:
    """One node of the block tree.

    Invariants:
    - type is non-empty
    - a value slot holds at most one child
    - next links never form a cycle
    """

    type: str
    id: str = ""
    fields: dict[str, str] = field(default_factory=dict)
    values: dict[str, Block] = field(default_factory=dict)
    statements: dict[str, Block] = field(default_factory=dict)
    next: Block | None = None
    mutation: dict[str, str] = field(default_factory=dict)

    def field_value(self, name: str, default: str = "") -> str:
        return self.fields.get(name, default)

    def item_count(self) -> int:
        """Operand count from the `items` mutation; 0 when absent or malformed."""
        return parse_count(self.mutation.get("items", ""))

    def numbered_fields(self, prefix: str) -> list[str]:
        """Values of fields prefix0, prefix1, ... up to the first missing one."""
        result: list[str] = []
        i = 0
        while (prefix + str(i)) in self.fields and self.fields[prefix + str(i)] != "":
            result.append(self.fields[prefix + str(i)])
            i += 1
        return result

    def chain(self) -> Iterator[Block]:
        """This block followed by its next-linked siblings."""
        current: Block | None = self
        while current is not None:
            yield current
            current = current.next

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-compatible dict."""
        d: dict[str, object] = {"type": self.type}
        if self.id != "":
            d["id"] = self.id
        if self.mutation:
            d["mutation"] = dict(self.mutation)
        if self.fields:
            d["fields"] = dict(self.fields)
        if self.values:
            d["values"] = {k: v.to_dict() for k, v in self.values.items()}
        if self.statements:
            d["statements"] = {k: v.to_dict() for k, v in self.statements.items()}
        if self.next is not None:
            d["next"] = self.next.to_dict()
        return d


def chain_of(*blocks: Block) -> Block | None:
    """Link blocks through `next` and return the head."""
    head: Block | None = None
    for block in reversed(blocks):
        block.next = head
        head = block
    return head
