"""Pytest configuration and fixtures for pyinp tests."""

from __future__ import annotations

from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "property: Hypothesis property-based tests")


@pytest.fixture
def fixtures_path() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def small_network_path(fixtures_path: Path) -> Path:
    """Return path to the small network INP file."""
    return fixtures_path / "net_small.inp"


@pytest.fixture
def sample_inp_text() -> str:
    """
    INP text covering title, three decoded sections and an unknown section.

    Line numbers (1-based):
        2  [TITLE]             8  [RESERVOIRS]       21 P3 (6 properties)
        3  Hello World         11 R1 512 ;...        23 [TEST]
        4  Line two            12 R2 120 Pat1 ;...   26 N1 ... (unknown)
        5  ;comment            19 P1 (8 properties)  27 N44 ... (unknown)
    """
    return (
        "\n"
        "[TITLE]\n"
        "Hello World\n"
        "Line two\n"
        ";comment\n"
        "\n"
        "\n"
        "[RESERVOIRS]\n"
        ";ID    Head      Pattern\n"
        ";-----------------------\n"
        "R1     512               ;Head stays constant\n"
        "R2     120       Pat1    ;Head varies with time\n"
        "\n"
        "[SOURCES]\n"
        ";Node  Type    Strength  Pattern\n"
        "N1     CONCEN  1.2       Pat1    ;Concentration varies with time\n"
        "N44    MASS    12                ;Constant mass injection\n"
        "[PIPES]\n"
        "P1    J1     J2     1200      12      120       0.2     OPEN\n"
        "P2    J3     J2      600       6      110       0       CV\n"
        "P3    J1     J10    1000      12      120\n"
        "\n"
        "[TEST]\n"
        ";Node  Type    Strength  Pattern\n"
        ";--------------------------------\n"
        "N1     CONCEN  1.2       Pat1    ;Concentration varies with time\n"
        "N44    MASS    12                \n"
    )
