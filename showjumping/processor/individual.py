"""Individual standings calculation."""

import logging
from collections.abc import Iterable

from showjumping.models.competition import THREE_DAY_FORMAT, CompetitionFormat
from showjumping.models.provider import ResultsProvider
from showjumping.models.result import ResultRow, RiderDayEntry
from showjumping.models.scoring import (
    NO_RESULT,
    coerce_score,
    is_blank,
    is_elimination,
    parse_run_order,
    to_number,
)
from showjumping.models.standings import CategoryStandings, RiderStanding
from showjumping.processor.elimination import substitute_individual
from showjumping.processor.tiebreak import (
    group_by_total,
    rider_tiebreak_key,
    shared_ranks,
    sort_with_tiebreak,
)

logger = logging.getLogger(__name__)


def pick_rows_per_rider(rows: Iterable[ResultRow]) -> dict[str, ResultRow]:
    """
    Collapse duplicate entries of a rider on one day.

    The row with the lowest run order (O.S.) wins; rows without a run order
    sort as 9999 and ties keep the first row of the sheet. Rows without a
    license are ignored.

    Args:
        rows: Rows of one day/category sheet

    Returns:
        License -> chosen row, in order of first appearance
    """
    by_license: dict[str, list[ResultRow]] = {}
    for row in rows:
        if not row.license:
            continue
        by_license.setdefault(row.license, []).append(row)

    return {
        license: min(candidates, key=lambda r: parse_run_order(r.run_order))
        for license, candidates in by_license.items()
    }


def build_day_entry(
    row: ResultRow,
    day: str,
    category: str,
    provider: ResultsProvider,
    competition_format: CompetitionFormat,
) -> RiderDayEntry:
    """
    Build a rider's entry for one day from the chosen sheet row.

    Eliminations on scoring days are scored as the worst valid score of the
    day and category plus the elimination penalty. The jump-off always keeps
    the score as recorded.
    """
    original = row.score
    time = NO_RESULT if is_blank(row.time) else row.time
    mount = row.mount or NO_RESULT

    if day == competition_format.tiebreak_day and day not in competition_format.scoring_days:
        return RiderDayEntry(
            score=NO_RESULT if is_blank(original) else original,
            original_score=original,
            time=time,
            mount=mount,
            placement=NO_RESULT if is_blank(row.placement) else row.placement,
        )

    if is_elimination(original):
        code = str(original).strip().upper()
        score = substitute_individual(
            original,
            day,
            category,
            provider,
            penalty=competition_format.elimination_penalty,
        )
        return RiderDayEntry(
            score=score,
            original_score=original,
            time=time,
            mount=mount,
            placement=code,
        )

    return RiderDayEntry(
        score=coerce_score(original),
        original_score=original,
        time=time,
        mount=mount,
        placement=NO_RESULT if is_blank(row.placement) else row.placement,
    )


def has_sheet(provider: ResultsProvider, day: str, category: str) -> bool:
    """Check if a day/category sheet exists and has rows."""
    sheet = provider.get_day_results(day, category)
    return sheet is not None and not sheet.is_empty


def required_days(
    category: str,
    provider: ResultsProvider,
    competition_format: CompetitionFormat,
) -> list[str]:
    """Days a rider of the category must have a result for to be ranked."""
    days = list(competition_format.required_days)
    for day in competition_format.conditional_days:
        if has_sheet(provider, day, category):
            days.append(day)
    return days


def is_rank_displayable(
    category: str,
    provider: ResultsProvider,
    competition_format: CompetitionFormat,
) -> bool:
    """Final placements are shown only once every scoring-day sheet is in."""
    return all(
        has_sheet(provider, day, category) for day in competition_format.scoring_days
    )


def collect_rider_entries(
    category: str,
    provider: ResultsProvider,
    competition_format: CompetitionFormat,
) -> dict[str, RiderStanding]:
    """
    Merge the day sheets of a category into one unranked standing per rider.

    Rider name, horse and club come from the first day the rider appears.
    """
    riders: dict[str, RiderStanding] = {}

    for day in competition_format.days:
        sheet = provider.get_day_results(day, category)
        if sheet is None:
            continue

        for license, row in pick_rows_per_rider(sheet.rows).items():
            if license not in riders:
                riders[license] = RiderStanding(
                    license=license,
                    rider_name=row.rider_name,
                    mount=row.mount,
                    club=row.club,
                    tiebreak_day=competition_format.tiebreak_day,
                )
            riders[license].days[day] = build_day_entry(
                row, day, category, provider, competition_format
            )

    for standing in riders.values():
        for day in competition_format.days:
            standing.days.setdefault(day, RiderDayEntry.missing())

    return riders


def _total(standing: RiderStanding, scoring_days: list[str]) -> tuple[int | float, int]:
    total: int | float = 0
    valid_results = 0
    for day in scoring_days:
        score = to_number(standing.get_day(day).score)
        if score is None:
            continue
        total += score
        valid_results += 1
    return total, valid_results


def rank_individuals(
    category: str,
    provider: ResultsProvider,
    competition_format: CompetitionFormat = THREE_DAY_FORMAT,
) -> list[RiderStanding]:
    """
    Rank the riders of a category across the competition days.

    Riders are left out when they miss a required day or were eliminated
    more than ``max_eliminations`` times. Scores that are neither numeric nor
    elimination codes are kept on the day entry but do not add to the total.

    Args:
        category: Category identifier
        provider: Source of day/category sheets
        competition_format: Day set and ranking rules

    Returns:
        Standings sorted by total, jump-off score, jump-off time
    """
    riders = collect_rider_entries(category, provider, competition_format)
    days_needed = required_days(category, provider, competition_format)
    show_rank = is_rank_displayable(category, provider, competition_format)

    standings: list[RiderStanding] = []
    for standing in riders.values():
        missing = [day for day in days_needed if not standing.get_day(day).has_result]
        if missing:
            logger.info(
                f"Not ranked: {standing.rider_name} ({standing.license}) "
                f"has no result for {', '.join(missing)}"
            )
            continue

        eliminations = sum(
            1
            for day in competition_format.scoring_days
            if standing.get_day(day).is_elimination
        )
        if eliminations:
            logger.info(
                f"Elimination: {standing.rider_name} ({standing.license}) "
                f"- {eliminations} in category {category}"
            )
        if eliminations > competition_format.max_eliminations:
            logger.info(
                f"Excluded: {standing.rider_name} ({standing.license}) "
                f"- {eliminations} eliminations"
            )
            continue

        standing.total, standing.valid_results = _total(
            standing, competition_format.scoring_days
        )
        standing.eliminations = eliminations
        standing.show_rank = show_rank
        standings.append(standing)

    return _calculate_ranks(standings, competition_format)


def _calculate_ranks(
    standings: list[RiderStanding],
    competition_format: CompetitionFormat,
) -> list[RiderStanding]:
    """
    Sort standings and assign shared ranks.

    Args:
        standings: Unranked standings

    Returns:
        Sorted list with rank and tiebreak_rank set
    """
    if not standings:
        return standings

    tiebreak_key = rider_tiebreak_key(competition_format)
    ordered = sort_with_tiebreak(standings, lambda s: s.total, tiebreak_key)

    ranks = shared_ranks(ordered, lambda s: (s.total, *tiebreak_key(s)))
    for standing, rank in zip(ordered, ranks, strict=True):
        standing.rank = rank

    for group in group_by_total(ordered, lambda s: s.total):
        for position, standing in enumerate(group, start=1):
            standing.tiebreak_rank = position

    return ordered


def build_category_standings(
    category: str,
    provider: ResultsProvider,
    competition_format: CompetitionFormat = THREE_DAY_FORMAT,
) -> CategoryStandings:
    """Rank one category and wrap the result with its display metadata."""
    return CategoryStandings(
        category=category,
        format_name=competition_format.name,
        standings=rank_individuals(category, provider, competition_format),
        show_rank=is_rank_displayable(category, provider, competition_format),
    )


def build_all_standings(
    provider: ResultsProvider,
    competition_format: CompetitionFormat = THREE_DAY_FORMAT,
) -> dict[str, CategoryStandings]:
    """Rank every category of the competition."""
    return {
        category: build_category_standings(category, provider, competition_format)
        for category in provider.get_categories()
    }
