"""Team roster and team standings data models."""

from pydantic import BaseModel, Field, computed_field, field_validator

from showjumping.models.scoring import (
    NO_RESULT,
    TEAM_ELIMINATED,
    RawValue,
    category_display,
    format_seconds,
    is_elimination,
)


class TeamMembershipRecord(BaseModel):
    """One rostered athlete of a team, as listed in the teams sheet."""

    team: str = Field(..., description="Team name")
    captain: str = Field(default="", description="Team captain (chef d'equipe)")
    license: str = Field(..., description="Member license as written in the roster")

    @field_validator("team", "captain", "license", mode="before")
    @classmethod
    def _strip(cls, value: object) -> str:
        if value is None:
            return ""
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value).strip()


class TeamMember(BaseModel):
    """A roster entry enriched with the member's located results."""

    license: str = Field(...)
    rider_name: str = Field(...)
    category: str = Field(...)
    mount: str = Field(default="")
    score: RawValue = Field(default=NO_RESULT, description="Score counted for the team")
    original_score: RawValue = Field(
        default=None, description="Score token as recorded on the result day"
    )
    time: RawValue = Field(default="0")
    valid_for_total: bool = Field(default=False)
    struck: bool = Field(default=False, description="Shown struck through")

    @computed_field
    @property
    def is_eliminated(self) -> bool:
        """Eliminated when either the time or the recorded score is a code."""
        recorded = self.original_score if self.original_score is not None else self.score
        return is_elimination(self.time) or is_elimination(recorded)

    @computed_field
    @property
    def category_display(self) -> str:
        """Human-readable category label."""
        return category_display(self.category)


class Team(BaseModel):
    """A team with its members and aggregated result."""

    name: str = Field(...)
    captain: str = Field(default="")
    members: list[TeamMember] = Field(default_factory=list)
    total_score: int | float | str = Field(default=0)
    total_time_seconds: float = Field(default=0, ge=0)
    eliminated: bool = Field(default=False)
    rank: int | None = Field(default=None, description="None for eliminated teams")

    @property
    def valid_members(self) -> list[TeamMember]:
        """Members whose results count towards the team total."""
        return [m for m in self.members if m.valid_for_total]

    @property
    def struck_members(self) -> list[TeamMember]:
        """Members discarded from the team total."""
        return [m for m in self.members if m.struck]

    @computed_field
    @property
    def total_time_display(self) -> str:
        """Format total time as M:SS."""
        if self.eliminated:
            return NO_RESULT
        return format_seconds(self.total_time_seconds)

    @computed_field
    @property
    def total_score_display(self) -> str:
        """Total score, or the elimination marker."""
        if self.eliminated:
            return TEAM_ELIMINATED
        return str(self.total_score)
