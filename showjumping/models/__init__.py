"""Data models for show jumping standings."""

from showjumping.models.competition import (
    DEFAULT_CATEGORIES,
    DEFAULT_CATEGORY_GROUPS,
    DEFAULT_FORMAT_REGISTRY,
    FRIDAY,
    JUMP_OFF,
    SATURDAY,
    SUNDAY,
    THREE_DAY_FORMAT,
    TWO_DAY_FORMAT,
    CategoryGroups,
    CompetitionFormat,
    FormatRegistry,
    TieBreakMode,
)
from showjumping.models.provider import MembershipProvider, ResultsProvider
from showjumping.models.result import DayResult, ResultRow, RiderDayEntry
from showjumping.models.scoring import (
    ELIMINATION_CODES,
    NO_RESULT,
    TEAM_ELIMINATED,
    category_display,
    format_seconds,
    is_elimination,
    parse_time_seconds,
)
from showjumping.models.snapshot import CompetitionSnapshot
from showjumping.models.standings import CategoryStandings, RiderStanding
from showjumping.models.team import Team, TeamMember, TeamMembershipRecord

__all__ = [  # noqa: RUF022
    # Result models
    "ResultRow",
    "DayResult",
    "RiderDayEntry",
    "CompetitionSnapshot",
    # Provider interfaces
    "ResultsProvider",
    "MembershipProvider",
    # Scoring tokens
    "ELIMINATION_CODES",
    "NO_RESULT",
    "TEAM_ELIMINATED",
    "category_display",
    "format_seconds",
    "is_elimination",
    "parse_time_seconds",
    # Standings models
    "RiderStanding",
    "CategoryStandings",
    # Team models
    "TeamMembershipRecord",
    "TeamMember",
    "Team",
    # Competition formats
    "CategoryGroups",
    "CompetitionFormat",
    "FormatRegistry",
    "TieBreakMode",
    "DEFAULT_CATEGORIES",
    "DEFAULT_CATEGORY_GROUPS",
    "DEFAULT_FORMAT_REGISTRY",
    "THREE_DAY_FORMAT",
    "TWO_DAY_FORMAT",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
    "JUMP_OFF",
]
