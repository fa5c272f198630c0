"""In-memory snapshot of a competition's loaded sheets."""

from pydantic import BaseModel, Field

from showjumping.models.competition import DEFAULT_CATEGORIES
from showjumping.models.result import DayResult
from showjumping.models.team import TeamMembershipRecord


class CompetitionSnapshot(BaseModel):
    """
    All result sheets and the team roster of a competition.

    Serves as both results and membership provider for the ranking passes.
    """

    competition: str = Field(default="")
    categories: list[str] = Field(default_factory=lambda: DEFAULT_CATEGORIES.copy())
    sheets: list[DayResult] = Field(default_factory=list)
    membership: list[TeamMembershipRecord] = Field(default_factory=list)
    missing: list[str] = Field(
        default_factory=list,
        description="Sheets that were expected but not found",
    )

    def get_day_results(self, day: str, category: str) -> DayResult | None:
        """Return the sheet for a day and category, or None when absent."""
        for sheet in self.sheets:
            if sheet.day == day and sheet.category == category:
                return sheet
        return None

    def get_categories(self) -> list[str]:
        """Categories of the competition."""
        return list(self.categories)

    def get_membership(self) -> list[TeamMembershipRecord]:
        """Team roster records."""
        return list(self.membership)

    def get_day_sheets(self, day: str) -> list[DayResult]:
        """All sheets of a day, in category order."""
        return [
            sheet
            for category in self.categories
            if (sheet := self.get_day_results(day, category)) is not None
        ]
