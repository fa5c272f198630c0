"""Interfaces the ranking passes read competition data through."""

from typing import Protocol, runtime_checkable

from showjumping.models.result import DayResult
from showjumping.models.team import TeamMembershipRecord


@runtime_checkable
class ResultsProvider(Protocol):
    """Source of day/category result sheets."""

    def get_day_results(self, day: str, category: str) -> DayResult | None:
        """Return the sheet for a day and category, or None when absent."""
        ...

    def get_categories(self) -> list[str]:
        """Categories known to the competition, in display order."""
        ...


@runtime_checkable
class MembershipProvider(Protocol):
    """Source of the team roster."""

    def get_membership(self) -> list[TeamMembershipRecord]:
        """Return one record per rostered athlete."""
        ...
