"""Configuration loading and settings."""

from showjumping.config.loader import (
    load_competition_from_directory,
    load_day_sheet,
    load_format_from_json,
    load_membership,
    read_sheet_rows,
    snapshot_from_rows,
)
from showjumping.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "load_competition_from_directory",
    "load_day_sheet",
    "load_format_from_json",
    "load_membership",
    "read_sheet_rows",
    "snapshot_from_rows",
]
