"""Load block trees from workspace XML.

Accepts either a whole workspace (`<xml>` holding top-level `<block>`s) or a
single `<block>`. Inside a block:

    <mutation .../>              per-instance shape attributes
    <field name="N">text</field> inline literal (`<title>` in older files)
    <value name="N"><block/></value>
    <statement name="N"><block/></statement>
    <next><block/></next>

A `<shadow>` stands in for a missing `<block>` in any slot. Unknown elements
are ignored; namespaces are stripped.
"""

from __future__ import annotations

from xml.etree import ElementTree as ET

from .blocks import Block


class ParseError(Exception):
    """Malformed XML or block structure, with location info when known."""

    def __init__(self, msg: str, line: int = 0, col: int = 0):
        self.msg: str = msg
        self.line: int = line
        self.col: int = col
        super().__init__(msg)


def _tag(elem: ET.Element) -> str:
    tag = elem.tag
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def _child_block(elem: ET.Element) -> ET.Element | None:
    """The block plugged into a slot element, falling back to its shadow."""
    shadow: ET.Element | None = None
    for child in elem:
        tag = _tag(child)
        if tag == "block":
            return child
        if tag == "shadow" and shadow is None:
            shadow = child
    return shadow


def _slot_name(elem: ET.Element, block_type: str) -> str:
    name = elem.get("name")
    if name is None or name == "":
        raise ParseError(
            "<" + _tag(elem) + "> without name in block '" + block_type + "'"
        )
    return name


def _mutation(elem: ET.Element) -> dict[str, str]:
    mutation = dict(elem.attrib)
    # procedure calls list their parameters as <arg name="..."/> children
    args = [c for c in elem if _tag(c) == "arg"]
    if args and "args" not in mutation:
        mutation["args"] = str(len(args))
    return mutation


def _build(elem: ET.Element) -> Block:
    block_type = elem.get("type", "")
    if block_type == "":
        raise ParseError("block without type")
    block = Block(type=block_type, id=elem.get("id", ""))
    for child in elem:
        match _tag(child):
            case "mutation":
                block.mutation = _mutation(child)
            case "field" | "title":
                block.fields[_slot_name(child, block_type)] = child.text or ""
            case "value":
                name = _slot_name(child, block_type)
                inner = _child_block(child)
                if inner is not None:
                    block.values[name] = _build(inner)
            case "statement":
                name = _slot_name(child, block_type)
                inner = _child_block(child)
                if inner is not None:
                    block.statements[name] = _build(inner)
            case "next":
                inner = _child_block(child)
                if inner is not None:
                    block.next = _build(inner)
            case _:
                pass
    return block


def parse_xml(source: str) -> list[Block]:
    """Top-level blocks of a workspace XML document, in document order."""
    try:
        root = ET.fromstring(source)
    except ET.ParseError as e:
        line, col = e.position
        raise ParseError("malformed XML: " + str(e), line, col) from e
    match _tag(root):
        case "xml":
            return [_build(child) for child in root if _tag(child) == "block"]
        case "block" | "shadow":
            return [_build(root)]
        case other:
            raise ParseError("expected <xml> or <block> root, got <" + other + ">")
