"""Locate team members in day sheets from the license written in the roster."""

import logging
from dataclasses import dataclass
from enum import IntEnum

from showjumping.models.result import DayResult, ResultRow

logger = logging.getLogger(__name__)

# Shorter licenses are too ambiguous to match as a prefix
MIN_PREFIX_LENGTH = 4


class MatchKind(IntEnum):
    """How a sheet row matched a roster license; lower wins."""

    EXACT = 1
    MOUNT_IN_LICENSE = 2
    SUFFIXED = 3
    PREFIX = 4


@dataclass(frozen=True)
class RiderReference:
    """Rider and horse captured on the reference day."""

    rider_name: str = ""
    mount: str = ""


@dataclass(frozen=True)
class RiderMatch:
    """A located sheet row."""

    row: ResultRow
    sheet: DayResult
    kind: MatchKind


def _canonical(value: object) -> str:
    return str(value).strip().upper()


def match_identity(license: str, row: ResultRow) -> MatchKind | None:
    """
    Check whether a sheet row belongs to a roster license.

    Precedence:
        1. exact license match
        2. the row's horse name appears inside the roster license (rosters
           where the license column was filled with the horse)
        3. the row license is the roster license with an ``_N`` suffix
        4. the roster license (4+ characters) is a prefix of the row license

    Returns:
        The kind of match, or None
    """
    wanted = license.strip()
    recorded = row.license.strip()
    mount = _canonical(row.mount) if row.mount else ""

    if recorded == wanted:
        return MatchKind.EXACT
    if mount and mount in wanted.upper():
        return MatchKind.MOUNT_IN_LICENSE
    if recorded.startswith(f"{wanted}_"):
        return MatchKind.SUFFIXED
    if len(wanted) >= MIN_PREFIX_LENGTH and recorded.startswith(wanted):
        return MatchKind.PREFIX
    return None


def is_consistent(row: ResultRow, reference: RiderReference | None) -> bool:
    """
    Check a candidate row against the rider seen on the reference day.

    A row is rejected when its rider name is present and differs, or when
    both horse names are present and differ.
    """
    if reference is None or not reference.rider_name:
        return True

    rider_name = _canonical(row.rider_name) if row.rider_name else ""
    if rider_name and rider_name != _canonical(reference.rider_name):
        return False

    reference_mount = _canonical(reference.mount) if reference.mount else ""
    mount = _canonical(row.mount) if row.mount else ""
    return not (reference_mount and mount and mount != reference_mount)


def find_rider(
    license: str,
    sheets: list[DayResult],
    reference: RiderReference | None = None,
) -> RiderMatch | None:
    """
    Find the best matching row for a license across a day's sheets.

    The strongest match kind wins; among equally strong matches the first
    in sheet order wins.

    Args:
        license: License as written in the team roster
        sheets: All sheets of the day to search
        reference: Rider/horse from the reference day, used to reject rows
            of other riders sharing a license-like value

    Returns:
        The match, or None when no row matches
    """
    best: RiderMatch | None = None

    for sheet in sheets:
        for row in sheet.rows:
            if not is_consistent(row, reference):
                continue
            kind = match_identity(license, row)
            if kind is None:
                continue
            if best is None or kind < best.kind:
                best = RiderMatch(row=row, sheet=sheet, kind=kind)
                if kind is MatchKind.EXACT:
                    break
            elif kind is best.kind:
                logger.debug(
                    f"Ambiguous {kind.name} match for {license}: kept "
                    f"{best.row.rider_name} ({best.sheet.category}), skipped "
                    f"{row.rider_name} ({sheet.category})"
                )
        if best is not None and best.kind is MatchKind.EXACT:
            break

    if best is None:
        logger.debug(f"License {license} not found in {len(sheets)} sheets")
    else:
        logger.debug(
            f"License {license} matched {best.row.rider_name} "
            f"({best.sheet.category}) by {best.kind.name}"
        )
    return best
