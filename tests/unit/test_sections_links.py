"""Tests for link sections: pipes, pumps and valves."""

from __future__ import annotations

import pytest

from pyinp.core.exceptions import SectionError
from pyinp.sections import Pipe, Pump, Valve, ValveType


class TestPipe:
    def test_all_fields(self) -> None:
        pipe = Pipe.from_properties(["P1", "J1", "J2", "1200", "12", "120", "0.2", "OPEN"])
        assert pipe == Pipe(
            id="P1",
            node1="J1",
            node2="J2",
            length=1200.0,
            diameter=12.0,
            roughness=120.0,
            minor_loss=0.2,
            status="OPEN",
            comment=None,
        )

    def test_defaults(self) -> None:
        pipe = Pipe.from_properties(["P3", "J1", "J10", "1000", "12", "120"], "Description")
        assert pipe.minor_loss == 0.0
        assert pipe.status == "OPEN"
        assert pipe.comment == "Description"

    def test_minor_loss_without_status(self) -> None:
        pipe = Pipe.from_properties(["P2", "J3", "J2", "600", "6", "110", "0.5"])
        assert pipe.minor_loss == 0.5
        assert pipe.status == "OPEN"

    def test_status_kept_verbatim(self) -> None:
        pipe = Pipe.from_properties(["P2", "J3", "J2", "600", "6", "110", "0", "CV"])
        assert pipe.status == "CV"

    def test_not_enough_properties(self) -> None:
        with pytest.raises(SectionError) as exc_info:
            Pipe.from_properties(["P1", "J1", "J2", "1200", "12"])
        assert exc_info.value.message == "Not enough properties to create PIPE section"

    def test_invalid_length(self) -> None:
        with pytest.raises(SectionError, match="invalid float literal"):
            Pipe.from_properties(["P1", "J1", "J2", "long", "12", "120"])


class TestPump:
    def test_power_and_pattern(self) -> None:
        pump = Pump.from_properties(
            ["PUMP1", "NODE1", "NODE2", "POWER", "10.0", "PATTERN", "PATTERN1"]
        )
        assert pump.id == "PUMP1"
        assert pump.start_node == "NODE1"
        assert pump.end_node == "NODE2"
        assert pump.power == 10.0
        assert pump.head is None
        assert pump.speed is None
        assert pump.pattern == "PATTERN1"

    def test_head_curve(self) -> None:
        pump = Pump.from_properties(["PU1", "R1", "J1", "HEAD", "Curve1"], "main pump")
        assert pump.head == "Curve1"
        assert pump.power is None
        assert pump.comment == "main pump"

    def test_single_precision(self) -> None:
        pump = Pump.from_properties(["PU1", "R1", "J1", "POWER", "0.1", "SPEED", "1.5"])
        assert pump.power == pytest.approx(0.1)
        assert pump.power != 0.1
        assert pump.speed == 1.5

    def test_power_or_head_required(self) -> None:
        with pytest.raises(SectionError):
            Pump.from_properties(
                ["PUMP1", "NODE1", "NODE2", "SPEED", "10.0", "PATTERN", "PATTERN1"]
            )

    def test_no_parameters(self) -> None:
        with pytest.raises(SectionError):
            Pump.from_properties(["PUMP1", "NODE1", "NODE2"])

    def test_id_start_and_end_node_required(self) -> None:
        with pytest.raises(SectionError):
            Pump.from_properties(["PUMP1", "NODE1", "POWER", "10.0", "PATTERN", "PATTERN1"])

    def test_not_enough_properties(self) -> None:
        with pytest.raises(SectionError, match="create PUMP section"):
            Pump.from_properties(["PUMP1", "NODE1"])

    def test_unknown_keyword(self) -> None:
        with pytest.raises(SectionError, match="keyword"):
            Pump.from_properties(["PU1", "R1", "J1", "POWER", "10", "EFFIC", "E1"])

    def test_keyword_case_sensitive(self) -> None:
        with pytest.raises(SectionError):
            Pump.from_properties(["PU1", "R1", "J1", "power", "10"])

    def test_missing_keyword_value(self) -> None:
        with pytest.raises(SectionError, match="Missing value"):
            Pump.from_properties(["PU1", "R1", "J1", "HEAD", "C1", "SPEED"])

    def test_invalid_power(self) -> None:
        with pytest.raises(SectionError, match="invalid float literal"):
            Pump.from_properties(["PU1", "R1", "J1", "POWER", "lots"])

    def test_power_beyond_single_precision(self) -> None:
        with pytest.raises(SectionError, match="out of single precision range for power"):
            Pump.from_properties(["PU1", "R1", "J1", "POWER", "1e40"])

    def test_non_finite_speed(self) -> None:
        with pytest.raises(SectionError, match="invalid float literal for speed"):
            Pump.from_properties(["PU1", "R1", "J1", "HEAD", "C1", "SPEED", "nan"])



class TestValve:
    def test_all_fields(self) -> None:
        valve = Valve.from_properties(["V1", "J1", "J2", "12", "PRV", "120", "0.2"])
        assert valve == Valve(
            id="V1",
            start_node="J1",
            end_node="J2",
            diameter=12.0,
            valve_type=ValveType.PRV,
            setting=120.0,
            minor_loss_coefficient=0.2,
            comment=None,
        )

    @pytest.mark.parametrize("token", ["PRV", "PSV", "PBV", "FCV", "TCV", "GPV"])
    def test_valve_types(self, token: str) -> None:
        valve = Valve.from_properties(["V1", "J1", "J2", "12", token, "1", "0"])
        assert valve.valve_type is ValveType(token)
        assert valve.valve_type.value == token

    def test_invalid_valve_type(self) -> None:
        with pytest.raises(SectionError, match="Invalid valve type"):
            Valve.from_properties(["V1", "J1", "J2", "12", "XXV", "120", "0.2"])

    def test_lowercase_valve_type_rejected(self) -> None:
        with pytest.raises(SectionError):
            Valve.from_properties(["V1", "J1", "J2", "12", "prv", "120", "0.2"])

    def test_all_properties_required(self) -> None:
        with pytest.raises(SectionError, match="create VALVE section"):
            Valve.from_properties(["V1", "J1", "J2", "12", "PRV", "0.2"])
