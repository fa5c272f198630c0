#!/usr/bin/env python3
"""Compute standings from a local competition directory and write JSON output."""

import logging
import sys

from showjumping.config import get_settings, load_format_from_json
from showjumping.exceptions import DataLoadError
from showjumping.generator import ReportGenerator
from showjumping.models import DEFAULT_FORMAT_REGISTRY, CompetitionFormat
from showjumping.models.standings import CategoryStandings
from showjumping.models.team import Team
from showjumping.persistence import ResultsStore
from showjumping.processor import build_all_standings, generate_all_output, rank_teams

logger = logging.getLogger(__name__)


def resolve_format() -> CompetitionFormat:
    """Get the competition format selected in settings."""
    settings = get_settings()
    if settings.format_file is not None:
        return load_format_from_json(settings.format_file)

    competition_format = DEFAULT_FORMAT_REGISTRY.get_format(settings.format_name)
    if competition_format is None:
        raise SystemExit(
            f"Unknown format {settings.format_name!r}; "
            f"available: {', '.join(DEFAULT_FORMAT_REGISTRY.names)}"
        )
    return competition_format


def print_category(standings: CategoryStandings) -> None:
    """Print a category table."""
    print(f"\n== {standings.category_display} ({len(standings.standings)} riders)")
    for s in standings.standings:
        days = "  ".join(str(entry.score) for entry in s.days.values())
        print(f"{s.rank_display:>3}  {s.rider_name:<30} {s.total:>6}  {days}")


def print_teams(teams: list[Team]) -> None:
    """Print the team table."""
    print(f"\n== Equipos ({len(teams)})")
    for team in teams:
        rank = team.rank if team.rank is not None else "-"
        print(
            f"{rank:>3}  {team.name:<30} {team.total_score_display:>6}  "
            f"{team.total_time_display}"
        )
        for member in team.members:
            mark = "x" if member.struck else " "
            print(
                f"       [{mark}] {member.rider_name:<28} {member.category:<6} "
                f"{member.score!s:>5}  {member.time}"
            )


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    competition_format = resolve_format()
    store = ResultsStore.from_directory(
        settings.competition_dir,
        competition_format,
        teams_sheet=settings.teams_sheet,
    )

    try:
        store.snapshot
    except DataLoadError as e:
        logger.error(f"Error loading competition data: {e}")
        return 1

    missing = store.get_missing()
    if missing:
        print(f"Missing sheets: {', '.join(missing)}", flush=True)

    category_standings = build_all_standings(store, competition_format)
    for standings in category_standings.values():
        print_category(standings)

    teams = rank_teams(store, store, competition_format)
    if teams:
        print_teams(teams)

    output_files = generate_all_output(
        category_standings,
        teams,
        competition_format,
        settings.output_dir,
    )
    if settings.generate_html:
        generator = ReportGenerator(
            settings.output_dir,
            championship_name=settings.championship_name,
        )
        output_files.extend(
            generator.generate_all(category_standings, teams, competition_format)
        )

    print(f"\nWrote {len(output_files)} files to {settings.output_dir}", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
