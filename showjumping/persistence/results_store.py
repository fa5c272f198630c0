"""Read-through cache of a competition's loaded sheets."""

import logging
from collections.abc import Callable
from pathlib import Path

from showjumping.config.loader import load_competition_from_directory
from showjumping.models.competition import THREE_DAY_FORMAT, CompetitionFormat
from showjumping.models.result import DayResult
from showjumping.models.snapshot import CompetitionSnapshot
from showjumping.models.team import TeamMembershipRecord

logger = logging.getLogger(__name__)

SnapshotLoader = Callable[[], CompetitionSnapshot]


class ResultsStore:
    """
    Results and membership provider backed by a loader.

    The loaded snapshot is kept in a single cache slot until ``invalidate``
    is called, so every ranking pass between two refreshes sees the same
    data. A failing load raises and leaves the slot empty.
    """

    def __init__(self, loader: SnapshotLoader):
        """
        Initialize the store.

        Args:
            loader: Callable returning a freshly loaded snapshot
        """
        self._loader = loader
        self._snapshot: CompetitionSnapshot | None = None

    @classmethod
    def from_directory(
        cls,
        directory: str | Path,
        competition_format: CompetitionFormat = THREE_DAY_FORMAT,
        teams_sheet: str = "EQUIPOS",
    ) -> "ResultsStore":
        """Store that loads sheets from a competition directory."""
        return cls(
            lambda: load_competition_from_directory(
                directory,
                competition_format,
                teams_sheet=teams_sheet,
            )
        )

    @property
    def is_loaded(self) -> bool:
        """Whether a snapshot is cached."""
        return self._snapshot is not None

    @property
    def snapshot(self) -> CompetitionSnapshot:
        """Cached snapshot, loaded on first access."""
        if self._snapshot is None:
            self._snapshot = self._loader()
            logger.info(
                f"Loaded competition {self._snapshot.competition or '-'}: "
                f"{len(self._snapshot.sheets)} sheets"
            )
        return self._snapshot

    def invalidate(self) -> None:
        """Drop the cached snapshot; the next access reloads."""
        if self._snapshot is not None:
            logger.info("Results cache invalidated")
        self._snapshot = None

    def refresh(self) -> CompetitionSnapshot:
        """Reload the data immediately."""
        self.invalidate()
        return self.snapshot

    def get_day_results(self, day: str, category: str) -> DayResult | None:
        """Return the sheet for a day and category, or None when absent."""
        return self.snapshot.get_day_results(day, category)

    def get_categories(self) -> list[str]:
        """Categories of the competition."""
        return self.snapshot.get_categories()

    def get_membership(self) -> list[TeamMembershipRecord]:
        """Team roster records."""
        return self.snapshot.get_membership()

    def get_missing(self) -> list[str]:
        """Sheets that were expected but not found."""
        return list(self.snapshot.missing)
