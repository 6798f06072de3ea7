# tests/unit/graphml/test_unit_keys.py — v1
"""Tests for graphml/keys.py — <key> schema generation."""

from __future__ import annotations

import pytest

from conftest import (
    AGE_VAR,
    CLOSE_VAR,
    EGO_AGE_VAR,
    EGO_NAME_VAR,
    EXTERNAL_ATTR,
    NAME_VAR,
    POSITION_VAR,
    WEIGHT_VAR,
    parse_fragment,
)
from ncexport.core.errors import CodebookError
from ncexport.core.models import (
    Codebook,
    EntityDefinition,
    Node,
    VariableDefinition,
)
from ncexport.graphml.keys import generate_key_elements
from ncexport.graphml.xml_utils import sha1


def _keys(fragment: str) -> dict[str, dict[str, str]]:
    root = parse_fragment(fragment)
    return {key.get("id"): dict(key.attrib) for key in root.findall("key")}


class TestNodeKeys:
    def test_reserved_keys_first(self, codebook, session_one):
        root = parse_fragment(generate_key_elements(session_one.nodes, "node", [], codebook))
        ids = [key.get("id") for key in root.findall("key")]
        assert ids[:3] == ["label", "networkCanvasType", "networkCanvasUUID"]
        assert all(key.get("for") == "all" for key in root.findall("key")[:3])

    def test_reserved_keys_emitted_without_entities(self, codebook):
        keys = _keys(generate_key_elements([], "node", [], codebook))
        assert set(keys) == {"label", "networkCanvasType", "networkCanvasUUID"}

    def test_reserved_key_excluded(self, codebook):
        keys = _keys(generate_key_elements([], "node", ["label"], codebook))
        assert "label" not in keys

    def test_text_variable(self, codebook, session_one):
        keys = _keys(generate_key_elements(session_one.nodes, "node", [], codebook))
        assert keys[NAME_VAR] == {
            "id": NAME_VAR,
            "attr.name": "Name",
            "attr.type": "string",
            "for": "node",
        }

    def test_number_type_inferred(self, codebook, session_one):
        keys = _keys(generate_key_elements(session_one.nodes, "node", [], codebook))
        assert keys[AGE_VAR]["attr.type"] == "int"

    def test_number_widened_across_entities(self, codebook, session_one):
        nodes = [
            *session_one.nodes,
            Node(primary_key="n3", type="person", attributes={AGE_VAR: 12.5}),
        ]
        keys = _keys(generate_key_elements(nodes, "node", [], codebook))
        assert keys[AGE_VAR]["attr.type"] == "double"

    def test_categorical_one_key_per_option(self, codebook, session_one):
        keys = _keys(generate_key_elements(session_one.nodes, "node", [], codebook))
        for option in ("A", "B", "C"):
            key = keys[f"{CLOSE_VAR}_{sha1(option)}"]
            assert key["attr.name"] == f"closeness_{option}"
            assert key["attr.type"] == "boolean"
        assert CLOSE_VAR not in keys

    def test_layout_keys(self, codebook, session_one):
        keys = _keys(generate_key_elements(session_one.nodes, "node", [], codebook))
        assert keys[f"{POSITION_VAR}_X"]["attr.name"] == "position_X"
        assert keys[f"{POSITION_VAR}_Y"]["attr.type"] == "double"

    def test_external_attribute_hashed(self, codebook, session_one):
        keys = _keys(generate_key_elements(session_one.nodes, "node", [], codebook))
        key = keys[sha1(EXTERNAL_ATTR)]
        assert key["attr.name"] == EXTERNAL_ATTR
        assert key["attr.type"] == "string"

    def test_no_duplicates(self, codebook, sessions):
        nodes = [node for session in sessions for node in session.nodes]
        root = parse_fragment(generate_key_elements(nodes, "node", [], codebook))
        ids = [key.get("id") for key in root.findall("key")]
        assert len(ids) == len(set(ids))
        assert len(ids) == 11

    def test_exclude_by_name(self, codebook, session_one):
        keys = _keys(generate_key_elements(session_one.nodes, "node", ["age"], codebook))
        assert AGE_VAR not in keys

    def test_boolean_variable(self):
        codebook = Codebook(
            node={
                "person": EntityDefinition(
                    variables={"flag": VariableDefinition(name="flag", type="boolean")}
                )
            }
        )
        node = Node(primary_key="n1", type="person", attributes={"flag": True})
        assert _keys(generate_key_elements([node], "node", [], codebook))["flag"]["attr.type"] == "boolean"

    def test_categorical_without_options_fails(self):
        codebook = Codebook(
            node={
                "person": EntityDefinition(
                    variables={"cat": VariableDefinition(name="cat", type="categorical")}
                )
            }
        )
        node = Node(primary_key="n1", type="person", attributes={"cat": ["x"]})
        with pytest.raises(CodebookError):
            generate_key_elements([node], "node", [], codebook)


class TestEdgeKeys:
    def test_reserved_and_scalar(self, codebook, session_one):
        keys = _keys(generate_key_elements(session_one.edges, "edge", [], codebook))
        assert keys["networkCanvasTargetUUID"]["for"] == "edge"
        assert keys["networkCanvasSourceUUID"]["for"] == "edge"
        assert keys[WEIGHT_VAR]["attr.type"] == "float"
        assert keys[WEIGHT_VAR]["attr.name"] == "weight"
        assert "label" not in keys


class TestEgoKeys:
    def test_ego_keys_target_graph(self, codebook, session_one):
        keys = _keys(generate_key_elements([session_one.ego], "ego", [], codebook))
        assert keys[EGO_NAME_VAR]["for"] == "graph"
        assert keys[EGO_NAME_VAR]["attr.name"] == "egoName"
        assert keys[EGO_AGE_VAR]["attr.type"] == "int"

    def test_ego_has_no_reserved_keys(self, codebook, session_one):
        keys = _keys(generate_key_elements([session_one.ego], "ego", [], codebook))
        assert set(keys) == {EGO_NAME_VAR, EGO_AGE_VAR}

    def test_union_across_egos(self, codebook, sessions):
        keys = _keys(generate_key_elements([s.ego for s in sessions], "ego", [], codebook))
        assert keys[sha1("Hobby")]["attr.name"] == "Hobby"
        assert len(keys) == 3
