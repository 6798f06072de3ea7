# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides a small codebook, two interview sessions and export options.
No external dependencies; all I/O goes to tmp_path.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from ncexport.core.models import (
    Codebook,
    Edge,
    Ego,
    EgoDefinition,
    EntityDefinition,
    ExportOptions,
    Node,
    Session,
    SessionVariables,
    VariableDefinition,
    VariableOption,
)

# Raw attribute keys, as Network Canvas would store them
NAME_VAR = "3b2c6a1e-name"
CLOSE_VAR = "7d1f0c22-close"
POSITION_VAR = "a9e4b7d0-position"
AGE_VAR = "c5f83e19-age"
WEIGHT_VAR = "e61d2a07-weight"
EGO_NAME_VAR = "0f4b9c3a-ego-name"
EGO_AGE_VAR = "58a2e1d6-ego-age"
EXTERNAL_ATTR = "External Note!"


# === HELPERS ===


def parse_fragment(fragment: str) -> ET.Element:
    """Parse a bare sequence of XML elements under a synthetic root."""
    return ET.fromstring(f"<root>{fragment}</root>")


def make_session(
    index: int,
    ego_attributes: dict | None = None,
    node_attributes: list[dict] | None = None,
) -> Session:
    """Session ``index`` with one ego, two person nodes and one friend edge."""
    a, b = f"n-{index}a", f"n-{index}b"
    node_attributes = node_attributes or [
        {
            NAME_VAR: f"Bob{index}",
            CLOSE_VAR: ["A", "C"],
            POSITION_VAR: {"x": 0.25, "y": 0.75},
            AGE_VAR: 40,
        },
        {
            NAME_VAR: f"Carol{index}",
            CLOSE_VAR: ["B"],
            POSITION_VAR: {"x": 0.5, "y": 0.5},
            AGE_VAR: 41,
            EXTERNAL_ATTR: "hello",
        },
    ]
    return Session(
        ego=Ego(
            primary_key=f"ego-{index}",
            attributes=ego_attributes
            if ego_attributes is not None
            else {EGO_NAME_VAR: f"Respondent{index}", EGO_AGE_VAR: 30 + index},
        ),
        nodes=[
            Node(primary_key=a, type="person", attributes=node_attributes[0]),
            Node(primary_key=b, type="person", attributes=node_attributes[1]),
        ],
        edges=[
            Edge(
                primary_key=f"e-{index}",
                type="friend",
                source_key=a,
                target_key=b,
                attributes={WEIGHT_VAR: 0.5},
            )
        ],
        session_variables=SessionVariables(
            case_id=f"case-{index}",
            session_uuid=f"session-{index}",
            protocol_name="Friendship Study",
            remote_protocol_id="proto-1",
            export_time="2024-03-01T12:00:00Z",
            start_time="2024-02-28T09:00:00Z",
        ),
    )


# === FIXTURES: Codebook ===


@pytest.fixture
def codebook() -> Codebook:
    """Codebook with person/place nodes, friend edges and ego variables."""
    return Codebook(
        node={
            "person": EntityDefinition(
                name="Person",
                variables={
                    NAME_VAR: VariableDefinition(name="Name", type="text"),
                    CLOSE_VAR: VariableDefinition(
                        name="closeness",
                        type="categorical",
                        options=[
                            VariableOption(value="A", label="Very close"),
                            VariableOption(value="B", label="Close"),
                            VariableOption(value="C", label="Not close"),
                        ],
                    ),
                    POSITION_VAR: VariableDefinition(name="position", type="layout"),
                    AGE_VAR: VariableDefinition(name="age", type="number"),
                },
            ),
            "place": EntityDefinition(
                name="Place",
                variables={"p-label": VariableDefinition(name="label", type="text")},
            ),
        },
        edge={
            "friend": EntityDefinition(
                name="Friend",
                variables={WEIGHT_VAR: VariableDefinition(name="weight", type="scalar")},
            ),
        },
        ego=EgoDefinition(
            variables={
                EGO_NAME_VAR: VariableDefinition(name="egoName", type="text"),
                EGO_AGE_VAR: VariableDefinition(name="egoAge", type="number"),
            }
        ),
    )


# === FIXTURES: Sessions ===


@pytest.fixture
def session_one() -> Session:
    return make_session(1)


@pytest.fixture
def session_two() -> Session:
    return make_session(2, ego_attributes={EGO_NAME_VAR: "Respondent2", "Hobby": "chess"})


@pytest.fixture
def sessions(session_one: Session, session_two: Session) -> list[Session]:
    return [session_one, session_two]


# === FIXTURES: Options ===


@pytest.fixture
def screen_options() -> ExportOptions:
    """Screen projection on an 800x600 canvas."""
    return ExportOptions(
        use_screen_layout_coordinates=True,
        screen_layout_width=800,
        screen_layout_height=600,
    )


@pytest.fixture
def normalized_options() -> ExportOptions:
    return ExportOptions(use_screen_layout_coordinates=False)


# === FIXTURES: Temp dirs ===


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Temporary output directory."""
    out = tmp_path / "output"
    out.mkdir()
    return out
