"""Competition format configuration: days, eligibility and team rules."""

from collections.abc import Mapping
from enum import StrEnum

from pydantic import BaseModel, Field, computed_field, model_validator

# Day identifiers as used in sheet names (e.g. SABADO110.csv)
FRIDAY = "VIERNES"
SATURDAY = "SABADO"
SUNDAY = "DOMINGO"
JUMP_OFF = "DESEMPATE"

DEFAULT_CATEGORIES: list[str] = ["080", "100", "110", "120", "130"]


class TieBreakMode(StrEnum):
    """Which jump-off fields order riders tied on total."""

    SCORE_THEN_TIME = "score_then_time"
    TIME_ONLY = "time_only"


class CategoryGroups(BaseModel):
    """
    Categories that share one slot in a team.

    Categories missing from every group form a group of their own.
    """

    groups: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Group identifier -> interchangeable categories",
    )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "CategoryGroups":
        """Build from a category -> group identifier mapping."""
        groups: dict[str, list[str]] = {}
        for category, group in mapping.items():
            groups.setdefault(group, []).append(category)
        return cls(groups=groups)

    def group_of(self, category: str) -> str | None:
        """Get the configured group of a category (case-insensitive)."""
        wanted = category.strip().upper()
        for group, categories in self.groups.items():
            for candidate in categories:
                if candidate.strip().upper() == wanted:
                    return group
        return None

    def group_key(self, category: str) -> str:
        """Group identifier, or a singleton key for ungrouped categories."""
        return self.group_of(category) or f"individual_{category}"


DEFAULT_CATEGORY_GROUPS = CategoryGroups(
    groups={
        "grupo1": ["Adultos", "Juveniles1"],
        "grupo2": ["Juveniles", "Veteranos1"],
        "grupo3": ["Alevines", "Infantiles", "Veteranos"],
    }
)


class CompetitionFormat(BaseModel):
    """Day set and ranking rules of a competition."""

    name: str = Field(..., description="Format identifier")
    scoring_days: list[str] = Field(..., min_length=1)
    required_days: list[str] = Field(
        default_factory=list,
        description="Days every ranked rider must have a result for",
    )
    conditional_days: list[str] = Field(
        default_factory=list,
        description="Days required only when the category sheet exists",
    )
    tiebreak_day: str | None = Field(default=JUMP_OFF)
    tiebreak_mode: TieBreakMode = Field(default=TieBreakMode.SCORE_THEN_TIME)
    tiebreak_time_day: str | None = Field(
        default=None,
        description="Day whose time orders ties in time-only mode "
        "(defaults to the jump-off day)",
    )
    max_eliminations: int = Field(
        default=1,
        ge=0,
        description="Riders with more eliminations than this are not ranked",
    )
    elimination_penalty: int = Field(
        default=20,
        ge=0,
        description="Added to the worst valid score to score an elimination",
    )
    categories: list[str] = Field(default_factory=lambda: DEFAULT_CATEGORIES.copy())
    team_reference_day: str = Field(
        default=FRIDAY, description="Day used to identify team members"
    )
    team_result_day: str = Field(
        default=SATURDAY, description="Day whose results count for teams"
    )
    team_counting_members: int = Field(default=3, ge=1)
    category_groups: CategoryGroups = Field(
        default_factory=lambda: DEFAULT_CATEGORY_GROUPS.model_copy(deep=True)
    )

    @model_validator(mode="after")
    def _check_days(self) -> "CompetitionFormat":
        for day in [*self.required_days, *self.conditional_days]:
            if day not in self.scoring_days:
                raise ValueError(f"Eligibility day {day} is not a scoring day")
        return self

    @computed_field
    @property
    def days(self) -> list[str]:
        """Scoring days followed by the jump-off day."""
        if self.tiebreak_day and self.tiebreak_day not in self.scoring_days:
            return [*self.scoring_days, self.tiebreak_day]
        return list(self.scoring_days)

    @property
    def time_day(self) -> str | None:
        """Day whose time breaks ties."""
        return self.tiebreak_time_day or self.tiebreak_day


THREE_DAY_FORMAT = CompetitionFormat(
    name="three_day",
    scoring_days=[FRIDAY, SATURDAY, SUNDAY],
    required_days=[FRIDAY, SATURDAY],
    conditional_days=[SUNDAY],
    tiebreak_day=JUMP_OFF,
)

TWO_DAY_FORMAT = CompetitionFormat(
    name="two_day",
    scoring_days=[SATURDAY, SUNDAY],
    required_days=[SATURDAY],
    conditional_days=[SUNDAY],
    tiebreak_day=JUMP_OFF,
    tiebreak_mode=TieBreakMode.TIME_ONLY,
    team_reference_day=SATURDAY,
)


class FormatRegistry(BaseModel):
    """Registry of known competition formats."""

    formats: list[CompetitionFormat] = Field(default_factory=list)
    default_format: str = Field(default="three_day")

    def get_format(self, name: str) -> CompetitionFormat | None:
        """Get format by name."""
        for competition_format in self.formats:
            if competition_format.name == name:
                return competition_format
        return None

    def add_format(self, competition_format: CompetitionFormat) -> None:
        """Add a format, replacing one with the same name."""
        self.formats = [f for f in self.formats if f.name != competition_format.name]
        self.formats.append(competition_format)

    @property
    def names(self) -> list[str]:
        """Names of all registered formats."""
        return [f.name for f in self.formats]


DEFAULT_FORMAT_REGISTRY = FormatRegistry(
    formats=[THREE_DAY_FORMAT, TWO_DAY_FORMAT],
    default_format="three_day",
)
