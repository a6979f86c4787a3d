"""Name resolution: logical block names to Python identifiers.

Names live in a stack of lexical frames. The outermost frame holds globals,
procedures and helpers for the whole pass; scoping blocks push a frame while
their body renders and pop it afterwards. An identifier owned by any open frame
is never handed out twice, so shadowing a name in a nested frame yields a fresh
identifier (x, x2, x3, ...) and leaves the outer binding intact.
"""

from __future__ import annotations

import keyword
import re
from contextlib import contextmanager
from typing import Iterator

from .errors import UnresolvedNameError

# Python builtins that generated names must not shadow
PYTHON_BUILTINS = frozenset(
    {
        "abs",
        "all",
        "any",
        "ascii",
        "bin",
        "bool",
        "breakpoint",
        "bytearray",
        "bytes",
        "callable",
        "chr",
        "classmethod",
        "compile",
        "complex",
        "delattr",
        "dict",
        "dir",
        "divmod",
        "enumerate",
        "eval",
        "exec",
        "filter",
        "float",
        "format",
        "frozenset",
        "getattr",
        "globals",
        "hasattr",
        "hash",
        "help",
        "hex",
        "id",
        "input",
        "int",
        "isinstance",
        "issubclass",
        "iter",
        "len",
        "list",
        "locals",
        "map",
        "max",
        "memoryview",
        "min",
        "next",
        "object",
        "oct",
        "open",
        "ord",
        "pow",
        "print",
        "property",
        "range",
        "repr",
        "reversed",
        "round",
        "set",
        "setattr",
        "slice",
        "sorted",
        "staticmethod",
        "str",
        "sum",
        "super",
        "tuple",
        "type",
        "vars",
        "zip",
        "Exception",
        "NameError",
        "ValueError",
    }
)

# Names the generated code itself refers to
GENERATED_NAMES = frozenset({"random", "raw_input", "self"})

RESERVED_WORDS = frozenset(keyword.kwlist) | PYTHON_BUILTINS | GENERATED_NAMES

_NON_WORD = re.compile(r"[^0-9A-Za-z_]")


def sanitize(name: str) -> str:
    """Turn a logical name into a legal (not necessarily free) identifier."""
    if not name.isidentifier():
        name = _NON_WORD.sub("_", name)
    if name == "":
        return "unnamed"
    if name[0].isdigit():
        return "_" + name
    return name


class _Frame:
    """One lexical level: (logical name, kind) -> identifier."""

    def __init__(self) -> None:
        self.bindings: dict[tuple[str, str], str] = {}
        self.owned: set[str] = set()


class NameResolver:
    """Scope stack for one generation pass."""

    def __init__(self, reserved: frozenset[str] = RESERVED_WORDS) -> None:
        self.reserved: frozenset[str] = reserved
        self.frames: list[_Frame] = [_Frame()]
        # every identifier handed out this pass, open frame or not
        self.allocated: set[str] = set()

    @property
    def depth(self) -> int:
        return len(self.frames)

    def _taken(self, ident: str, ever: bool) -> bool:
        if ident in self.reserved:
            return True
        if ever and ident in self.allocated:
            return True
        for frame in self.frames:
            if ident in frame.owned:
                return True
        return False

    def _fresh(self, base: str, ever: bool = False) -> str:
        base = sanitize(base)
        ident = base
        n = 2
        while self._taken(ident, ever):
            ident = base + str(n)
            n += 1
        return ident

    def _bind_in(self, frame: _Frame, name: str, kind: str) -> str:
        key = (name, kind)
        existing = frame.bindings.get(key)
        if existing is not None:
            return existing
        # module-level names must not collide with any earlier local either
        ident = self._fresh(name, ever=frame is self.frames[0])
        frame.bindings[key] = ident
        frame.owned.add(ident)
        self.allocated.add(ident)
        return ident

    def bind(self, name: str, kind: str = "variable") -> str:
        """Bind name in the innermost frame; idempotent within that frame."""
        return self._bind_in(self.frames[-1], name, kind)

    def bind_global(self, name: str, kind: str = "variable") -> str:
        """Bind name in the outermost frame, visible for the rest of the pass."""
        return self._bind_in(self.frames[0], name, kind)

    def lookup(self, name: str, kind: str = "variable") -> str | None:
        """Nearest visible identifier for name, or None."""
        key = (name, kind)
        for frame in reversed(self.frames):
            ident = frame.bindings.get(key)
            if ident is not None:
                return ident
        return None

    def resolve(self, name: str, kind: str = "variable") -> str:
        ident = self.lookup(name, kind)
        if ident is None:
            raise UnresolvedNameError(name, kind)
        return ident

    def resolve_global(self, name: str, kind: str = "variable") -> str:
        """Outermost binding for name, skipping any shadowing frames."""
        ident = self.frames[0].bindings.get((name, kind))
        if ident is None:
            raise UnresolvedNameError(name, kind)
        return ident

    def distinct(self, base: str) -> str:
        """Identifier clear of every open binding, bound to no name.

        Only for names whose Python scope ends inside the generated
        expression, such as comprehension variables.
        """
        return self._fresh(base)

    def global_identifiers(self, kind: str = "variable") -> list[str]:
        """Identifiers bound in the outermost frame, in binding order."""
        return [
            ident
            for (_, k), ident in self.frames[0].bindings.items()
            if k == kind
        ]

    @contextmanager
    def frame(self) -> Iterator[None]:
        """Open a nested frame for the duration of the with-block."""
        self.frames.append(_Frame())
        try:
            yield
        finally:
            self.frames.pop()
