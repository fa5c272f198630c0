"""Canonicalize result sheet columns into the logical row schema."""

from collections.abc import Iterable, Mapping
from typing import Any

from showjumping.models.result import ResultRow
from showjumping.models.scoring import is_blank
from showjumping.models.team import TeamMembershipRecord

# Logical field -> column names, in precedence order. The logical name is
# always first so that normalizing a normalized row changes nothing.
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "license": ("license", "Licencia", "Lic"),
    "score": ("score", "Faltas", "Puntos"),
    "time": ("time", "Tiempo"),
    "placement": ("placement", "Cl", "Posicion", "Clasificacion"),
    "mount_number": ("mount_number", "Dorsal", "No. caballo"),
    "rider_name": ("rider_name", "Atleta", "Jinete", "NOMBRE JINETE"),
    "mount": ("mount", "Caballo", "Cab"),
    "club": ("club", "Club"),
    "run_order": ("run_order", "O.S.", "OS", "O S"),
}

MEMBERSHIP_ALIASES: dict[str, tuple[str, ...]] = {
    "team": ("team", "Equipo"),
    "captain": ("captain", "Jefe_Equipo", "Jefe Equipo"),
    "license": ("license", "Licencia"),
}


def _column_key(name: object) -> str:
    return str(name).strip().casefold()


def _first_present(
    row: Mapping[str, Any],
    aliases: tuple[str, ...],
) -> tuple[bool, Any]:
    """Find the first alias with a non-empty value (column names case-insensitive)."""
    columns: dict[str, str] = {}
    for column in row:
        columns.setdefault(_column_key(column), column)

    for alias in aliases:
        column = columns.get(_column_key(alias))
        if column is None:
            continue
        value = row[column]
        if not is_blank(value):
            return True, value
    return False, None


def _normalize(
    raw: Mapping[str, Any],
    alias_table: dict[str, tuple[str, ...]],
) -> dict[str, Any]:
    normalized = dict(raw)
    for field, aliases in alias_table.items():
        found, value = _first_present(raw, aliases)
        if found:
            normalized[field] = value
    return normalized


def normalize_row(raw: Mapping[str, Any]) -> dict[str, Any]:
    """
    Populate the logical fields of a result row from its column variants.

    All original columns are kept. Missing fields stay absent.

    Args:
        raw: Row mapping as read from a sheet (column name -> value)

    Returns:
        New mapping with logical fields added
    """
    return _normalize(raw, FIELD_ALIASES)


def is_empty_row(raw: Mapping[str, Any]) -> bool:
    """Check if every value of a row is blank (spreadsheet filler lines)."""
    return all(is_blank(value) for value in raw.values())


def to_result_row(raw: Mapping[str, Any]) -> ResultRow:
    """Normalize a raw row and build a ResultRow from it."""
    normalized = normalize_row(raw)
    logical = {field: normalized[field] for field in FIELD_ALIASES if field in normalized}
    extra = {
        str(column): value
        for column, value in normalized.items()
        if column not in FIELD_ALIASES
    }
    return ResultRow(**logical, extra=extra)


def normalize_rows(rows: Iterable[Mapping[str, Any]]) -> list[ResultRow]:
    """Normalize all non-empty rows of a sheet."""
    return [to_result_row(row) for row in rows if not is_empty_row(row)]


def normalize_membership_row(raw: Mapping[str, Any]) -> TeamMembershipRecord | None:
    """
    Build a membership record from a teams sheet row.

    Returns:
        The record, or None when the team or the license is missing
    """
    normalized = _normalize(raw, MEMBERSHIP_ALIASES)
    record = TeamMembershipRecord(
        team=normalized.get("team"),
        captain=normalized.get("captain"),
        license=normalized.get("license"),
    )
    if not record.team or not record.license:
        return None
    return record
