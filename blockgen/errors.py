"""Generation errors.

Structural defects in a block tree abort the whole pass. Missing inputs and
malformed numeric literals are not errors; templates recover from them with
default literals and the dynamic index path.
"""

from __future__ import annotations


class GenerationError(Exception):
    """A pass failed; carries the offending block and slot when known."""

    def __init__(
        self,
        msg: str,
        block_type: str = "",
        block_id: str = "",
        slot: str = "",
    ):
        self.msg: str = msg
        self.block_type: str = block_type
        self.block_id: str = block_id
        self.slot: str = slot
        super().__init__(self._format())

    def _format(self) -> str:
        where: list[str] = []
        if self.block_type != "":
            where.append("block '" + self.block_type + "'")
        if self.block_id != "":
            where.append("id '" + self.block_id + "'")
        if self.slot != "":
            where.append("slot '" + self.slot + "'")
        if not where:
            return self.msg
        return self.msg + " (" + ", ".join(where) + ")"


class UnsupportedBlockError(GenerationError):
    """Block type has no template, or is used where it cannot produce code."""


class UnresolvedNameError(GenerationError):
    """A name reference has no visible binding."""

    def __init__(
        self,
        name: str,
        kind: str,
        block_type: str = "",
        block_id: str = "",
        slot: str = "",
    ):
        self.name: str = name
        self.kind: str = kind
        super().__init__(
            "unresolved " + kind + " '" + name + "'", block_type, block_id, slot
        )
