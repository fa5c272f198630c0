"""Team roster building and selection of the members that count."""

import logging
from collections.abc import Iterable

from showjumping.models.competition import (
    THREE_DAY_FORMAT,
    CategoryGroups,
    CompetitionFormat,
)
from showjumping.models.provider import ResultsProvider
from showjumping.models.result import DayResult
from showjumping.models.scoring import (
    NO_RESULT,
    coerce_score,
    is_blank,
    is_elimination,
    to_number,
)
from showjumping.models.team import Team, TeamMember, TeamMembershipRecord
from showjumping.processor.matching import RiderReference, find_rider
from showjumping.processor.tiebreak import time_to_seconds

logger = logging.getLogger(__name__)

# Members counting towards a team total unless the format says otherwise
FULL_TEAM_SIZE = 3


def day_sheets(
    provider: ResultsProvider,
    day: str,
    categories: Iterable[str],
) -> list[DayResult]:
    """All available sheets of a day, in category order."""
    sheets: list[DayResult] = []
    for category in categories:
        sheet = provider.get_day_results(day, category)
        if sheet is not None:
            sheets.append(sheet)
    return sheets


def group_membership(
    records: Iterable[TeamMembershipRecord],
) -> dict[str, tuple[str, list[str]]]:
    """
    Group roster records by team, in order of first appearance.

    Returns:
        Team name -> (captain, licenses)
    """
    teams: dict[str, tuple[str, list[str]]] = {}
    for record in records:
        if record.team not in teams:
            teams[record.team] = (record.captain, [])
        teams[record.team][1].append(record.license)
    return teams


def locate_member(
    license: str,
    reference_sheets: list[DayResult],
    result_sheets: list[DayResult],
) -> TeamMember | None:
    """
    Build a team member from the reference day and the team result day.

    The reference day provides rider name, category and horse. The result
    day row must agree with them.

    Returns:
        The member, or None when no name and category could be resolved
    """
    rider_name = ""
    category = ""
    mount = ""

    reference_match = find_rider(license, reference_sheets)
    if reference_match is not None:
        rider_name = reference_match.row.rider_name
        category = reference_match.sheet.category
        mount = reference_match.row.mount
    else:
        logger.info(f"License {license} not found on the reference day")

    score: object = NO_RESULT
    original_score: object = None
    time: object = "0"

    result_match = find_rider(
        license,
        result_sheets,
        RiderReference(rider_name=rider_name, mount=mount),
    )
    if result_match is not None:
        original_score = result_match.row.score
        if is_elimination(original_score):
            score = str(original_score).strip().upper()
        else:
            score = coerce_score(original_score)
        if not is_blank(result_match.row.time):
            time = result_match.row.time
    else:
        logger.info(
            f"No team result for {rider_name or license} ({category or '?'}) "
            f"- license {license}, horse {mount or '?'}"
        )

    if not rider_name or not category:
        logger.info(
            f"Member dropped: license {license} has no rider name or category"
        )
        return None

    return TeamMember(
        license=license,
        rider_name=rider_name,
        category=category,
        mount=mount,
        score=score,
        original_score=original_score,
        time=time,
    )


def _score_value(member: TeamMember) -> float:
    number = to_number(member.score)
    return float("inf") if number is None else number


def _performance_key(member: TeamMember) -> tuple[float, float]:
    return (_score_value(member), time_to_seconds(member.time))


def _mark(member: TeamMember, valid: bool) -> None:
    member.valid_for_total = valid
    member.struck = not valid


def select_counting_members(
    members: list[TeamMember],
    category_groups: CategoryGroups,
    counting_members: int = FULL_TEAM_SIZE,
) -> list[TeamMember]:
    """
    Decide which members count towards the team total.

    Teams of up to ``counting_members`` count everybody. Larger teams keep
    one member per category group (not eliminated first, then score, then
    time), every member of an ungrouped category, and top up from the struck
    members when fewer than ``counting_members`` remain. When no group holds
    more than one member the best ``counting_members`` by score and time
    count.

    Args:
        members: Team members, updated in place
        category_groups: Interchangeable categories
        counting_members: Members a team counts

    Returns:
        The same list
    """
    for member in members:
        _mark(member, False)

    if len(members) <= counting_members:
        for member in members:
            _mark(member, True)
        return members

    groups: dict[str, list[TeamMember]] = {}
    for member in members:
        groups.setdefault(category_groups.group_key(member.category), []).append(member)

    shared = {key: group for key, group in groups.items() if len(group) > 1}
    if not shared:
        for member in sorted(members, key=_performance_key)[:counting_members]:
            _mark(member, True)
        return members

    selected = 0
    for key, group in groups.items():
        if key in shared:
            best = min(group, key=lambda m: (m.is_eliminated, *_performance_key(m)))
            logger.debug(
                f"Group {key}: counting {best.rider_name}, striking "
                f"{', '.join(m.rider_name for m in group if m is not best)}"
            )
            _mark(best, True)
        else:
            _mark(group[0], True)
        selected += 1

    if selected < counting_members:
        struck = sorted((m for m in members if m.struck), key=_performance_key)
        for member in struck[: counting_members - selected]:
            _mark(member, True)

    return members


def build_roster(
    records: Iterable[TeamMembershipRecord],
    provider: ResultsProvider,
    competition_format: CompetitionFormat = THREE_DAY_FORMAT,
) -> list[Team]:
    """
    Build every team with located members and counting members selected.

    Teams without any located member are left out. Totals are not computed
    here.

    Args:
        records: Team roster records
        provider: Source of day/category sheets
        competition_format: Reference/result days and category groups

    Returns:
        Teams in roster order
    """
    categories = provider.get_categories()
    reference_sheets = day_sheets(
        provider, competition_format.team_reference_day, categories
    )
    result_sheets = day_sheets(provider, competition_format.team_result_day, categories)

    teams: list[Team] = []
    for name, (captain, licenses) in group_membership(records).items():
        members: list[TeamMember] = []
        for license in licenses:
            member = locate_member(license, reference_sheets, result_sheets)
            if member is not None:
                members.append(member)

        if not members:
            logger.warning(f"Team {name}: no rostered member located, not ranked")
            continue
        if len(members) < competition_format.team_counting_members:
            logger.warning(
                f"Team {name}: only {len(members)} members located, "
                f"totals sum fewer than {competition_format.team_counting_members}"
            )
        else:
            logger.info(f"Team {name}: {len(members)} members located")
        select_counting_members(
            members,
            competition_format.category_groups,
            competition_format.team_counting_members,
        )
        teams.append(Team(name=name, captain=captain, members=members))

    return teams
