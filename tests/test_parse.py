"""Tests for loading block trees from workspace XML."""

import pytest

from blockgen.parse import ParseError, parse_xml

WORKSPACE = """\
<xml xmlns="http://www.w3.org/1999/xhtml">
  <variables><variable>x</variable></variables>
  <block type="variables_set" id="a1" x="10" y="20">
    <field name="VAR">x</field>
    <value name="VALUE">
      <block type="lists_create_with" id="a2">
        <mutation items="2"></mutation>
        <value name="ADD0">
          <block type="text" id="a3"><title name="TEXT">hi</title></block>
        </value>
        <value name="ADD1">
          <shadow type="math_number" id="a4"><field name="NUM">7</field></shadow>
        </value>
      </block>
    </value>
    <next>
      <block type="text_print" id="a5"/>
    </next>
  </block>
  <block type="controls_if" id="b1">
    <statement name="DO0">
      <block type="text_print" id="b2">
        <value name="TEXT"><block type="text"><field name="TEXT"></field></block></value>
      </block>
    </statement>
  </block>
</xml>
"""


def test_workspace_top_level_blocks():
    blocks = parse_xml(WORKSPACE)
    assert [b.type for b in blocks] == ["variables_set", "controls_if"]
    assert [b.id for b in blocks] == ["a1", "b1"]


def test_fields_values_and_next():
    head = parse_xml(WORKSPACE)[0]
    assert head.field_value("VAR") == "x"
    create = head.values["VALUE"]
    assert create.type == "lists_create_with"
    assert create.item_count() == 2
    assert create.values["ADD0"].field_value("TEXT") == "hi"
    assert head.next is not None
    assert head.next.type == "text_print"
    assert head.next.next is None


def test_shadow_fills_empty_slot():
    create = parse_xml(WORKSPACE)[0].values["VALUE"]
    shadow = create.values["ADD1"]
    assert shadow.type == "math_number"
    assert shadow.field_value("NUM") == "7"


def test_statement_slot_and_empty_field():
    cond = parse_xml(WORKSPACE)[1]
    body = cond.statements["DO0"]
    assert body.type == "text_print"
    assert body.values["TEXT"].field_value("TEXT", "missing") == ""


def test_single_block_root():
    blocks = parse_xml('<block type="lists_create_empty" id="z"/>')
    assert len(blocks) == 1
    assert blocks[0].type == "lists_create_empty"
    assert blocks[0].id == "z"


def test_empty_workspace():
    assert parse_xml("<xml></xml>") == []


def test_call_arg_count_from_mutation():
    source = """\
<block type="procedures_callnoreturn">
  <mutation name="go"><arg name="a"/><arg name="b"/></mutation>
  <field name="PROCNAME">go</field>
</block>
"""
    block = parse_xml(source)[0]
    assert block.mutation == {"name": "go", "args": "2"}


def test_malformed_xml():
    with pytest.raises(ParseError) as exc:
        parse_xml('<xml>\n<block type="text">\n</xml>')
    assert exc.value.msg.startswith("malformed XML")
    assert exc.value.line >= 1


def test_wrong_root():
    with pytest.raises(ParseError, match="expected <xml> or <block> root"):
        parse_xml("<workspace/>")


def test_block_without_type():
    with pytest.raises(ParseError, match="block without type"):
        parse_xml("<xml><block/></xml>")


def test_slot_without_name():
    with pytest.raises(ParseError, match="without name"):
        parse_xml('<block type="text_print"><value><block type="text"/></value></block>')


def test_to_dict():
    head = parse_xml(WORKSPACE)[0]
    d = head.to_dict()
    assert d["type"] == "variables_set"
    assert d["id"] == "a1"
    assert d["fields"] == {"VAR": "x"}
    assert d["next"] == {"type": "text_print", "id": "a5"}
    create = d["values"]["VALUE"]
    assert create["mutation"] == {"items": "2"}
