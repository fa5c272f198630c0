"""Ordering of riders tied on total penalties."""

from collections.abc import Callable, Hashable, Sequence
from typing import TypeVar

from showjumping.models.competition import CompetitionFormat, TieBreakMode
from showjumping.models.result import RiderDayEntry
from showjumping.models.scoring import (
    ELIMINATED_TIEBREAK_SCORE,
    MISSING_TIEBREAK_SCORE,
    MISSING_TIME_SECONDS,
    NO_RESULT,
    is_blank,
    is_elimination,
    parse_time_seconds,
    to_number,
)
from showjumping.models.standings import RiderStanding

T = TypeVar("T")


def tiebreak_score_value(token: object) -> float:
    """
    Sort value of a jump-off score token.

    Missing jump-off sorts last, an eliminated jump-off just before it.
    """
    if is_blank(token) or token == NO_RESULT:
        return MISSING_TIEBREAK_SCORE
    if is_elimination(token):
        return ELIMINATED_TIEBREAK_SCORE
    number = to_number(token)
    if number is None:
        return MISSING_TIEBREAK_SCORE
    return number


def time_to_seconds(token: object) -> float:
    """Parse a time token for ordering; missing or unparseable sorts last."""
    seconds = parse_time_seconds(token)
    if seconds is None:
        return MISSING_TIME_SECONDS
    return seconds


def entry_tiebreak_key(
    entry: RiderDayEntry,
    mode: TieBreakMode = TieBreakMode.SCORE_THEN_TIME,
) -> tuple[float, ...]:
    """Tie-break key of a single day entry."""
    if mode is TieBreakMode.TIME_ONLY:
        return (time_to_seconds(entry.time),)
    return (tiebreak_score_value(entry.score), time_to_seconds(entry.time))


def rider_tiebreak_key(
    competition_format: CompetitionFormat,
) -> Callable[[RiderStanding], tuple[float, ...]]:
    """
    Build the tie-break key function for a competition format.

    In time-only mode the score is ignored and only the time of the
    configured day orders the riders.
    """
    mode = competition_format.tiebreak_mode
    day = (
        competition_format.time_day
        if mode is TieBreakMode.TIME_ONLY
        else competition_format.tiebreak_day
    )

    def key(standing: RiderStanding) -> tuple[float, ...]:
        entry = standing.get_day(day) if day else RiderDayEntry.missing()
        return entry_tiebreak_key(entry, mode)

    return key


def group_by_total(
    entries: Sequence[T],
    total: Callable[[T], Hashable],
) -> list[list[T]]:
    """
    Group consecutive entries with equal totals, preserving order.

    Args:
        entries: Entries already sorted by total
        total: Function returning an entry's total

    Returns:
        List of groups, each in arrival order
    """
    groups: list[list[T]] = []
    for entry in entries:
        if groups and total(groups[-1][0]) == total(entry):
            groups[-1].append(entry)
        else:
            groups.append([entry])
    return groups


def apply_tiebreak(
    groups: list[list[T]],
    key: Callable[[T], tuple[float, ...]],
) -> list[T]:
    """Sort each group with more than one entry by the tie-break key and flatten."""
    ordered: list[T] = []
    for group in groups:
        if len(group) == 1:
            ordered.extend(group)
        else:
            ordered.extend(sorted(group, key=key))
    return ordered


def sort_with_tiebreak(
    entries: Sequence[T],
    total: Callable[[T], float],
    key: Callable[[T], tuple[float, ...]],
) -> list[T]:
    """Stable sort by total ascending, then order tied groups by tie-break."""
    by_total = sorted(entries, key=total)
    return apply_tiebreak(group_by_total(by_total, total), key)


def shared_ranks(
    entries: Sequence[T],
    rank_key: Callable[[T], Hashable],
) -> list[int]:
    """
    Ranks for an ordered sequence, shared by runs of identical keys.

    A rank is the 1-based position of the first entry of its run.
    """
    ranks: list[int] = []
    previous: Hashable | None = None
    current = 0
    for position, entry in enumerate(entries, start=1):
        value = rank_key(entry)
        if position == 1 or value != previous:
            current = position
            previous = value
        ranks.append(current)
    return ranks
