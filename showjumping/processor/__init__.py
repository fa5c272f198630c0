"""Ranking passes: normalization, individual and team standings."""

from showjumping.processor.elimination import (
    substitute,
    substitute_individual,
    substitute_team,
    worst_valid_score,
)
from showjumping.processor.individual import (
    build_all_standings,
    build_category_standings,
    pick_rows_per_rider,
    rank_individuals,
)
from showjumping.processor.matching import MatchKind, find_rider, match_identity
from showjumping.processor.normalizer import (
    normalize_membership_row,
    normalize_row,
    normalize_rows,
    to_result_row,
)
from showjumping.processor.output import (
    generate_all_output,
    generate_individual_output,
    generate_team_output,
)
from showjumping.processor.roster import build_roster, select_counting_members
from showjumping.processor.teams import calculate_team_totals, rank_teams

__all__ = [
    "MatchKind",
    "build_all_standings",
    "build_category_standings",
    "build_roster",
    "calculate_team_totals",
    "find_rider",
    "generate_all_output",
    "generate_individual_output",
    "generate_team_output",
    "match_identity",
    "normalize_membership_row",
    "normalize_row",
    "normalize_rows",
    "pick_rows_per_rider",
    "rank_individuals",
    "rank_teams",
    "select_counting_members",
    "substitute",
    "substitute_individual",
    "substitute_team",
    "to_result_row",
    "worst_valid_score",
]
