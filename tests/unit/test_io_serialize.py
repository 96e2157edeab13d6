"""Tests for dict / JSON serialization of parsed documents."""

from __future__ import annotations

import json

from pyinp.core.document import Document
from pyinp.io.document_reader import read_inp
from pyinp.io.serialize import (
    document_from_dict,
    document_from_json,
    document_to_dict,
    document_to_json,
)

NETWORK = (
    "[TITLE]\n"
    "Example\n"
    "[RESERVOIRS]\n"
    "R1 512\n"
    "[VALVES]\n"
    "V1 J1 J2 12 PRV 120 0.2 ;reducer\n"
    "[PUMPS]\n"
    "PU1 R1 J1 HEAD C1\n"
    "[TANKS]\n"
    "T1 850 120 100 150 50.5 0\n"
    "[OPTIONS]\n"
    "UNITS GPM\n"
    "[PIPES]\n"
    "P1 J1 J2\n"
)


class TestDocumentToDict:
    def test_stable_keys(self) -> None:
        data = document_to_dict(Document())
        assert list(data) == [
            "title",
            "junctions",
            "reservoirs",
            "tanks",
            "pipes",
            "pumps",
            "valves",
            "emitters",
            "sources",
            "quality",
            "unknown_sections",
            "errors",
        ]

    def test_values(self) -> None:
        data = document_to_dict(read_inp(NETWORK))
        assert data["title"] == "Example"
        assert data["reservoirs"] == [
            {"id": "R1", "head": 512.0, "pattern": None, "comment": None}
        ]
        assert data["valves"][0]["valve_type"] == "PRV"
        assert data["valves"][0]["comment"] == "reducer"
        assert data["pumps"][0]["head"] == "C1"
        assert data["tanks"][0]["overflow"] is False
        assert data["unknown_sections"] == [{"text": "UNITS GPM"}]
        assert data["errors"] == [
            {
                "message": "Not enough properties to create PIPE section",
                "line": "P1 J1 J2",
                "line_number": 14,
            }
        ]


class TestDocumentToJson:
    def test_parses_as_json(self) -> None:
        text = document_to_json(read_inp(NETWORK))
        assert json.loads(text)["reservoirs"][0]["id"] == "R1"

    def test_indent(self) -> None:
        text = document_to_json(Document(title="x"), indent=2)
        assert '\n  "title": "x"' in text

    def test_compact(self) -> None:
        assert "\n" not in document_to_json(Document(title="x"))


class TestRoundTrip:
    def test_dict(self) -> None:
        doc = read_inp(NETWORK)
        assert document_from_dict(document_to_dict(doc)) == doc

    def test_json(self) -> None:
        doc = read_inp(NETWORK)
        assert document_from_json(document_to_json(doc)) == doc

    def test_non_finite_values_become_errors(self) -> None:
        doc = read_inp("[RESERVOIRS]\nR1 inf\nR2 nan\nR3 100\n")
        assert [r.id for r in doc.reservoirs] == ["R3"]
        assert [e.line_number for e in doc.errors] == [2, 3]
        text = document_to_json(doc)
        assert json.loads(text)["reservoirs"] == [
            {"id": "R3", "head": 100.0, "pattern": None, "comment": None}
        ]
        assert document_from_json(text) == doc
