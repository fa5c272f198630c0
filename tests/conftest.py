"""Pytest fixtures for show jumping standings tests."""

import pytest

from showjumping.config.loader import snapshot_from_rows
from showjumping.models import CompetitionSnapshot


def sheet_row(
    license: str,
    rider_name: str,
    score: object,
    time: object = "",
    mount: str = "",
    run_order: object = "",
    club: str = "",
    placement: object = "",
) -> dict:
    """Build a raw result sheet row with the column names used in the sheets."""
    return {
        "O.S.": run_order,
        "Licencia": license,
        "Atleta": rider_name,
        "Caballo": mount,
        "Club": club,
        "Faltas": score,
        "Tiempo": time,
        "Cl": placement,
    }


@pytest.fixture
def competition_rows() -> dict[tuple[str, str], list[dict]]:
    """Raw sheets of a three-day competition with categories 110 and 120."""
    return {
        ("VIERNES", "110"): [
            sheet_row("L1", "Ana Ruiz", 0, "62.10", "Tornado", 1, "CH Norte", 1),
            sheet_row("L2", "Bea Gil", 4, "60.00", "Luna", 2, "CH Norte", 2),
            sheet_row("L3", "Carla Paz", "EL", "", "Rayo", 3, "CH Sur"),
            sheet_row("L4", "Dani Sol", 8, "70.5", "Brisa", 4, "CH Sur", 4),
            sheet_row("L5", "Eva Mar", 4, "65", "Nube", 5, "CH Este", 3),
        ],
        ("SABADO", "110"): [
            sheet_row("L1", "Ana Ruiz", 4, "59.0", "Tornado", 1),
            sheet_row("L2", "Bea Gil", 0, "61.0", "Luna", 2),
            sheet_row("L3", "Carla Paz", 0, "58", "Rayo", 3),
            sheet_row("L4", "Dani Sol", "RET", "", "Brisa", 4),
            sheet_row("L5", "Eva Mar", 4, "63", "Nube", 5),
        ],
        ("DOMINGO", "110"): [
            sheet_row("L1", "Ana Ruiz", 0, "57.2", "Tornado", 1),
            sheet_row("L2", "Bea Gil", 0, "58.4", "Luna", 2),
            sheet_row("L3", "Carla Paz", 4, "60", "Rayo", 3),
            sheet_row("L4", "Dani Sol", "E", "", "Brisa", 4),
        ],
        ("DESEMPATE", "110"): [
            sheet_row("L1", "Ana Ruiz", 0, "40.5", "Tornado", 1),
            sheet_row("L2", "Bea Gil", 4, "38.0", "Luna", 2),
        ],
        ("VIERNES", "120"): [
            sheet_row("M1", "Fran Lago", 0, "66", "Sol", 1),
            sheet_row("M2", "Gael Rios", 4, "64", "Viento", 2),
            sheet_row("M3", "Hugo Vera", 0, "69", "Trueno", 3),
        ],
        ("SABADO", "120"): [
            sheet_row("M1", "Fran Lago", 0, "55", "Sol", 1),
            sheet_row("M2", "Gael Rios", "NC", "", "Viento", 2),
        ],
    }


@pytest.fixture
def membership_rows() -> list[dict]:
    """Raw rows of the teams sheet."""
    return [
        {"Equipo": "Equipo Norte", "Jefe_Equipo": "Capi Uno", "Licencia": "L1"},
        {"Equipo": "Equipo Norte", "Jefe_Equipo": "Capi Uno", "Licencia": "L2"},
        {"Equipo": "Equipo Norte", "Jefe_Equipo": "Capi Uno", "Licencia": "M1"},
        {"Equipo": "Equipo Sur", "Jefe_Equipo": "Capi Dos", "Licencia": "L3"},
        {"Equipo": "Equipo Sur", "Jefe_Equipo": "Capi Dos", "Licencia": "L5"},
        {"Equipo": "Equipo Sur", "Jefe_Equipo": "Capi Dos", "Licencia": "M2"},
        {"Equipo": "Equipo Este", "Jefe_Equipo": "Capi Tres", "Licencia": "L4"},
        {"Equipo": "Equipo Este", "Jefe_Equipo": "Capi Tres", "Licencia": "M3"},
        {"Equipo": "", "Jefe_Equipo": "", "Licencia": ""},
    ]


@pytest.fixture
def competition(competition_rows, membership_rows) -> CompetitionSnapshot:
    """Loaded competition snapshot."""
    return snapshot_from_rows(
        competition_rows,
        membership_rows,
        categories=["110", "120"],
        competition="SEDE",
    )
