"""Load result sheets and the team roster from a competition directory."""

import csv
import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from showjumping.exceptions import DataLoadError, SheetParseError
from showjumping.models.competition import THREE_DAY_FORMAT, CompetitionFormat
from showjumping.models.result import DayResult
from showjumping.models.snapshot import CompetitionSnapshot
from showjumping.models.team import TeamMembershipRecord
from showjumping.processor.normalizer import normalize_membership_row, normalize_rows

logger = logging.getLogger(__name__)

# Tried in order for every sheet
SHEET_SUFFIXES = (".csv", ".json")


def read_sheet_rows(path: str | Path) -> list[dict[str, Any]]:
    """
    Read the rows of a sheet file.

    CSV files are read with their header row as column names; JSON files
    must hold a list of objects.

    Args:
        path: Path to a .csv or .json sheet

    Returns:
        Row mappings (column name -> value)
    """
    path = Path(path)
    try:
        if path.suffix.lower() == ".json":
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
                raise SheetParseError(f"Invalid JSON sheet, expected a list of rows: {path}")
            return data

        with path.open(encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            return [
                {column: value for column, value in row.items() if column is not None}
                for row in reader
            ]
    except (UnicodeDecodeError, csv.Error, json.JSONDecodeError) as e:
        raise SheetParseError(f"Failed to read sheet {path}: {e}") from e


def find_sheet(directory: Path, base_name: str) -> Path | None:
    """Find a sheet by base name, trying each supported suffix."""
    for suffix in SHEET_SUFFIXES:
        candidate = directory / f"{base_name}{suffix}"
        if candidate.exists():
            return candidate
    return None


def load_day_sheet(path: str | Path, day: str, category: str) -> DayResult:
    """Load and normalize one day/category sheet."""
    path = Path(path)
    try:
        rows = normalize_rows(read_sheet_rows(path))
    except ValidationError as e:
        raise SheetParseError(f"Invalid row in {path}: {e}") from e
    return DayResult(day=day, category=category, rows=tuple(rows), source=path.name)


def load_membership(
    rows: Iterable[Mapping[str, Any]],
    source: str | Path = "team roster",
) -> list[TeamMembershipRecord]:
    """Build roster records, skipping rows without team or license."""
    records: list[TeamMembershipRecord] = []
    for row in rows:
        try:
            record = normalize_membership_row(row)
        except ValidationError as e:
            raise SheetParseError(f"Invalid row in {source}: {e}") from e
        if record is not None:
            records.append(record)
    return records


def load_competition_from_directory(
    directory: str | Path,
    competition_format: CompetitionFormat = THREE_DAY_FORMAT,
    categories: list[str] | None = None,
    teams_sheet: str = "EQUIPOS",
) -> CompetitionSnapshot:
    """
    Load every sheet of a competition.

    Sheets are named ``<DAY><CATEGORY>`` (e.g. ``SABADO110.csv``). Missing
    sheets are recorded in the snapshot, not treated as errors.

    Args:
        directory: Competition directory
        competition_format: Format providing the day set and categories
        categories: Categories to load (defaults to the format's)
        teams_sheet: Base name of the team roster sheet

    Returns:
        Snapshot of all loaded sheets

    Raises:
        DataLoadError: If the directory does not exist or holds no sheets
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise DataLoadError(f"Competition directory not found: {directory}")

    categories = categories or competition_format.categories
    sheets: list[DayResult] = []
    missing: list[str] = []

    for day in competition_format.days:
        for category in categories:
            base_name = f"{day}{category}"
            path = find_sheet(directory, base_name)
            if path is None:
                missing.append(base_name)
                continue
            sheets.append(load_day_sheet(path, day, category))

    if not sheets:
        raise DataLoadError(f"No result sheets found in {directory}")

    membership: list[TeamMembershipRecord] = []
    teams_path = find_sheet(directory, teams_sheet)
    if teams_path is not None:
        membership = load_membership(read_sheet_rows(teams_path), teams_path)
    else:
        missing.append(teams_sheet)

    logger.info(
        f"Loaded {len(sheets)} sheets and {len(membership)} roster entries "
        f"from {directory} ({len(missing)} missing)"
    )

    return CompetitionSnapshot(
        competition=directory.name,
        categories=list(categories),
        sheets=sheets,
        membership=membership,
        missing=missing,
    )


def snapshot_from_rows(
    rows_by_sheet: Mapping[tuple[str, str], Iterable[Mapping[str, Any]]],
    membership_rows: Iterable[Mapping[str, Any]] = (),
    categories: list[str] | None = None,
    competition: str = "",
) -> CompetitionSnapshot:
    """
    Build a snapshot from already-read rows.

    Args:
        rows_by_sheet: (day, category) -> raw row mappings
        membership_rows: Raw team roster rows
        categories: Category order (defaults to first appearance)
        competition: Competition name

    Returns:
        Snapshot with normalized rows
    """
    sheets = [
        DayResult(day=day, category=category, rows=tuple(normalize_rows(rows)))
        for (day, category), rows in rows_by_sheet.items()
    ]
    if categories is None:
        categories = list(dict.fromkeys(sheet.category for sheet in sheets))

    return CompetitionSnapshot(
        competition=competition,
        categories=categories,
        sheets=sheets,
        membership=load_membership(membership_rows),
    )


def load_format_from_json(json_path: str | Path) -> CompetitionFormat:
    """
    Load a competition format from a JSON file.

    Args:
        json_path: Path to the JSON file

    Returns:
        The competition format
    """
    json_path = Path(json_path)
    if not json_path.exists():
        raise FileNotFoundError(f"JSON file not found: {json_path}")

    with json_path.open(encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError("Invalid JSON format: expected an object")

    return CompetitionFormat.model_validate(data)
