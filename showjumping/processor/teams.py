"""Team totals and team ranking."""

import logging

from showjumping.models.competition import THREE_DAY_FORMAT, CompetitionFormat
from showjumping.models.provider import MembershipProvider, ResultsProvider
from showjumping.models.scoring import (
    TEAM_ELIMINATED,
    is_elimination,
    parse_time_seconds,
    to_number,
)
from showjumping.models.team import Team
from showjumping.processor.elimination import substitute_team
from showjumping.processor.roster import build_roster
from showjumping.processor.tiebreak import shared_ranks

logger = logging.getLogger(__name__)


def score_eliminated_members(
    team: Team,
    provider: ResultsProvider,
    competition_format: CompetitionFormat = THREE_DAY_FORMAT,
) -> None:
    """Replace the elimination codes of counting members with a numeric score."""
    for member in team.valid_members:
        if is_elimination(member.score):
            member.score = substitute_team(
                member.score,
                member.category,
                provider,
                day=competition_format.team_result_day,
                penalty=competition_format.elimination_penalty,
            )


def calculate_team_totals(team: Team) -> Team:
    """
    Sum the counting members of a team.

    A team is eliminated as soon as one counting member was eliminated; its
    total then becomes the elimination marker and its time zero.
    """
    team.eliminated = any(m.is_eliminated for m in team.valid_members)
    if team.eliminated:
        team.total_score = TEAM_ELIMINATED
        team.total_time_seconds = 0
        logger.info(f"Team {team.name} eliminated")
        return team

    total_score: int | float = 0
    total_time = 0.0
    for member in team.valid_members:
        score = to_number(member.score)
        if score is not None:
            total_score += score
        seconds = parse_time_seconds(member.time)
        if seconds is not None:
            total_time += seconds

    team.total_score = total_score
    team.total_time_seconds = total_time
    return team


def order_teams(teams: list[Team]) -> list[Team]:
    """
    Sort teams by total score then total time; eliminated teams go last.

    Eliminated teams keep their relative order and get no rank.
    """
    active = sorted(
        (t for t in teams if not t.eliminated),
        key=lambda t: (t.total_score, t.total_time_seconds),
    )
    eliminated = [t for t in teams if t.eliminated]

    ranks = shared_ranks(active, lambda t: (t.total_score, t.total_time_seconds))
    for team, rank in zip(active, ranks, strict=True):
        team.rank = rank
    for team in eliminated:
        team.rank = None

    return active + eliminated


def rank_teams(
    provider: ResultsProvider,
    membership_provider: MembershipProvider,
    competition_format: CompetitionFormat = THREE_DAY_FORMAT,
) -> list[Team]:
    """
    Rank all teams of the competition.

    Args:
        provider: Source of day/category sheets
        membership_provider: Source of the team roster
        competition_format: Team days, category groups and penalties

    Returns:
        Teams sorted by total score and time, eliminated teams last
    """
    teams = build_roster(
        membership_provider.get_membership(), provider, competition_format
    )
    for team in teams:
        score_eliminated_members(team, provider, competition_format)
        calculate_team_totals(team)
    return order_teams(teams)
