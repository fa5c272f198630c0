"""Individual standings data models."""

from pydantic import BaseModel, Field, computed_field

from showjumping.models.result import RiderDayEntry
from showjumping.models.scoring import category_display, is_elimination, is_numeric


class RiderStanding(BaseModel):
    """Standing of a rider in one category across the competition days."""

    license: str = Field(..., description="Federation license")
    rider_name: str = Field(default="")
    mount: str = Field(default="")
    club: str = Field(default="")
    days: dict[str, RiderDayEntry] = Field(
        default_factory=dict,
        description="Day identifier -> entry, scoring days first then tie-break",
    )
    tiebreak_day: str | None = Field(default=None)
    total: int | float = Field(
        default=0, description="Sum of numeric scoring-day scores"
    )
    valid_results: int = Field(default=0, ge=0)
    eliminations: int = Field(default=0, ge=0)
    rank: int = Field(default=0, ge=0)  # Set after sorting
    tiebreak_rank: int = Field(default=0, ge=0)
    show_rank: bool = Field(
        default=False,
        description="Whether every scoring-day sheet for the category is complete",
    )

    @property
    def tiebreak(self) -> RiderDayEntry:
        """Jump-off entry (missing when the format has no jump-off)."""
        if self.tiebreak_day is None:
            return RiderDayEntry.missing()
        return self.days.get(self.tiebreak_day, RiderDayEntry.missing())

    def get_day(self, day: str) -> RiderDayEntry:
        """Get the entry for a day, or a no-result entry."""
        return self.days.get(day, RiderDayEntry.missing())

    @computed_field
    @property
    def rank_display(self) -> str:
        """Rank, hidden while some scoring day is still missing."""
        return str(self.rank) if self.show_rank else ""

    @computed_field
    @property
    def has_valid_tiebreak(self) -> bool:
        """Jump-off was ridden: numeric score or elimination code."""
        score = self.tiebreak.score
        return is_elimination(score) or is_numeric(score)


class CategoryStandings(BaseModel):
    """Ranked riders of one category."""

    category: str = Field(...)
    format_name: str = Field(default="")
    standings: list[RiderStanding] = Field(default_factory=list)
    show_rank: bool = Field(default=False)

    @computed_field
    @property
    def category_display(self) -> str:
        """Human-readable category label."""
        return category_display(self.category)

    @property
    def leader(self) -> RiderStanding | None:
        """Get the current leader."""
        if self.standings:
            return self.standings[0]
        return None

    def get_by_license(self, license: str) -> RiderStanding | None:
        """Find standing by license."""
        for standing in self.standings:
            if standing.license == license:
                return standing
        return None
