"""Elimination detection and penalty substitution."""

from collections.abc import Iterable

from showjumping.models.competition import SATURDAY
from showjumping.models.provider import ResultsProvider
from showjumping.models.result import ResultRow
from showjumping.models.scoring import is_elimination, to_number

__all__ = [
    "DEFAULT_ELIMINATION_PENALTY",
    "is_elimination",
    "substitute",
    "substitute_individual",
    "substitute_team",
    "worst_valid_score",
]

DEFAULT_ELIMINATION_PENALTY = 20


def worst_valid_score(rows: Iterable[ResultRow]) -> int | float:
    """
    Highest numeric score among the non-eliminated rows.

    Args:
        rows: Rows of the scope to scan

    Returns:
        Worst (highest) score, or 0 when no row has a numeric score
    """
    worst: int | float = 0
    for row in rows:
        if row.is_elimination:
            continue
        score = to_number(row.score)
        if score is not None and score > worst:
            worst = score
    return worst


def substitute(
    token: object,  # noqa: ARG001
    rows: Iterable[ResultRow],
    penalty: int = DEFAULT_ELIMINATION_PENALTY,
) -> int | float:
    """
    Score an elimination as the worst valid score of the scope plus a penalty.

    The caller is responsible for passing the correctly scoped rows.
    """
    return worst_valid_score(rows) + penalty


def substitute_individual(
    token: object,
    day: str,
    category: str,
    provider: ResultsProvider,
    penalty: int = DEFAULT_ELIMINATION_PENALTY,
) -> int | float:
    """Substituted score for an individual ranking, scoped to the day and category."""
    sheet = provider.get_day_results(day, category)
    rows = sheet.rows if sheet is not None else ()
    return substitute(token, rows, penalty)


def substitute_team(
    token: object,
    category: str,
    provider: ResultsProvider,
    day: str = SATURDAY,
    penalty: int = DEFAULT_ELIMINATION_PENALTY,
) -> int | float:
    """
    Substituted score for a team member.

    Team results are always scored against the team result day (Saturday by
    default) of the member's category, regardless of the individual scope.
    """
    sheet = provider.get_day_results(day, category)
    rows = sheet.rows if sheet is not None else ()
    return substitute(token, rows, penalty)
