"""Pass-scoped helper library.

Templates that need a support routine register it here under a logical key.
The first registration allocates the routine's identifier in the outermost
frame and builds its source; later registrations reuse the identifier. The
generator emits every definition once, in first-registration order, ahead of
the program body. Module imports are tracked the same way.
"""

from __future__ import annotations

from typing import Callable

from .names import NameResolver


class HelperCache:
    """Helper definitions and imports for one generation pass."""

    def __init__(self) -> None:
        self._definitions: dict[str, tuple[str, str]] = {}
        self._imports: dict[str, None] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def ensure(
        self, key: str, builder: Callable[[str], str], names: NameResolver
    ) -> str:
        """Identifier of helper `key`, building it on first use."""
        cached = self._definitions.get(key)
        if cached is not None:
            return cached[0]
        ident = names.bind_global(key, "helper")
        self._definitions[key] = (ident, builder(ident))
        return ident

    def require_import(self, module: str) -> None:
        self._imports[module] = None

    def imports(self) -> list[str]:
        return list(self._imports)

    def definitions(self) -> list[str]:
        """Helper sources in first-registration order."""
        return [source for _, source in self._definitions.values()]
