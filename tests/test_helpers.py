"""Tests for the per-pass helper library."""

from blockgen.helpers import HelperCache
from blockgen.names import NameResolver


def _builder(calls: list[str]):
    def build(ident: str) -> str:
        calls.append(ident)
        return "def " + ident + "():\n    return 1"

    return build


def test_ensure_builds_once():
    names = NameResolver()
    cache = HelperCache()
    calls: list[str] = []
    first = cache.ensure("one", _builder(calls), names)
    second = cache.ensure("one", _builder(calls), names)
    assert first == second == "one"
    assert calls == ["one"]
    assert len(cache) == 1
    assert "one" in cache


def test_definitions_in_registration_order():
    names = NameResolver()
    cache = HelperCache()
    calls: list[str] = []
    cache.ensure("zeta", _builder(calls), names)
    cache.ensure("alpha", _builder(calls), names)
    assert cache.definitions() == [
        "def zeta():\n    return 1",
        "def alpha():\n    return 1",
    ]


def test_helper_identifier_avoids_bound_names():
    names = NameResolver()
    names.bind_global("first_index")
    cache = HelperCache()
    ident = cache.ensure("first_index", _builder([]), names)
    assert ident == "first_index2"
    assert names.resolve("first_index", "helper") == "first_index2"


def test_imports_recorded_once():
    cache = HelperCache()
    cache.require_import("random")
    cache.require_import("math")
    cache.require_import("random")
    assert cache.imports() == ["random", "math"]
