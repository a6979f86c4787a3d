"""Tests for identifier allocation and lexical frames."""

import pytest

from blockgen.errors import UnresolvedNameError
from blockgen.names import NameResolver, sanitize


@pytest.mark.parametrize(
    "name,expected",
    [
        ("x", "x"),
        ("my var", "my_var"),
        ("total-€", "total__"),
        ("2x", "_2x"),
        ("", "unnamed"),
        ("número", "número"),
    ],
)
def test_sanitize(name: str, expected: str):
    assert sanitize(name) == expected


def test_bind_is_idempotent():
    names = NameResolver()
    assert names.bind("x") == "x"
    assert names.bind("x") == "x"
    assert names.depth == 1


def test_reserved_words_get_suffix():
    names = NameResolver()
    assert names.bind("print") == "print2"
    assert names.bind("class") == "class2"
    assert names.bind("random") == "random2"
    assert names.bind("len") == "len2"


def test_suffixes_count_up():
    names = NameResolver()
    assert names.bind("x") == "x"
    assert names.bind("x", "procedure") == "x2"
    assert names.bind("x", "helper") == "x3"


def test_nested_frame_shadows_and_restores():
    names = NameResolver()
    outer = names.bind("x")
    with names.frame():
        inner = names.bind("x")
        assert inner != outer
        assert names.resolve("x") == inner
        assert names.resolve_global("x") == outer
    assert names.resolve("x") == outer
    assert names.depth == 1


def test_frame_popped_on_error():
    names = NameResolver()
    with pytest.raises(ValueError):
        with names.frame():
            names.bind("y")
            raise ValueError("boom")
    assert names.depth == 1
    assert names.lookup("y") is None


def test_sibling_frames_may_reuse_identifier():
    names = NameResolver()
    with names.frame():
        first = names.bind("i")
    with names.frame():
        second = names.bind("i")
    assert first == second == "i"


def test_global_avoids_identifiers_of_closed_frames():
    names = NameResolver()
    with names.frame():
        assert names.bind("tmp") == "tmp"
    assert names.bind_global("tmp", "helper") == "tmp2"


def test_resolve_unbound_raises():
    names = NameResolver()
    with pytest.raises(UnresolvedNameError) as exc:
        names.resolve("missing")
    assert exc.value.name == "missing"
    assert exc.value.kind == "variable"
    assert str(exc.value) == "unresolved variable 'missing'"


def test_resolve_global_ignores_locals():
    names = NameResolver()
    with names.frame():
        names.bind("x")
        with pytest.raises(UnresolvedNameError):
            names.resolve_global("x")


def test_distinct_binds_nothing():
    names = NameResolver()
    names.bind("temp_value")
    assert names.distinct("temp_value") == "temp_value2"
    assert names.distinct("temp_value") == "temp_value2"
    assert names.lookup("temp_value2") is None


def test_global_identifiers_by_kind_in_order():
    names = NameResolver()
    names.bind_global("b")
    names.bind_global("f", "procedure")
    names.bind_global("a")
    assert names.global_identifiers() == ["b", "a"]
    assert names.global_identifiers("procedure") == ["f"]
