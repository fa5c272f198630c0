"""JSON output generation for individual and team standings."""

import json
from datetime import datetime
from pathlib import Path

from showjumping.models.competition import CompetitionFormat
from showjumping.models.standings import CategoryStandings
from showjumping.models.team import Team


def _category_standings_to_dict(
    standings: CategoryStandings,
    competition_format: CompetitionFormat,
) -> dict:
    """Convert category standings to dictionary for JSON output."""
    return {
        "category": standings.category,
        "category_display": standings.category_display,
        "format": competition_format.name,
        "show_rank": standings.show_rank,
        "total_riders": len(standings.standings),
        "standings": [
            {
                "rank": s.rank_display,
                "license": s.license,
                "rider_name": s.rider_name,
                "mount": s.mount,
                "club": s.club,
                "total": s.total,
                "valid_results": s.valid_results,
                "eliminations": s.eliminations,
                "days": {
                    day: {
                        "score": s.get_day(day).score,
                        "time": s.get_day(day).time,
                        "mount": s.get_day(day).mount,
                        "placement": s.get_day(day).placement,
                    }
                    for day in competition_format.days
                },
                "tiebreak": s.tiebreak.tiebreak_display if s.has_valid_tiebreak else "",
            }
            for s in standings.standings
        ],
    }


def generate_individual_output(
    standings: CategoryStandings,
    competition_format: CompetitionFormat,
    output_dir: str | Path,
) -> Path:
    """
    Generate JSON output file for one category.

    Args:
        standings: Ranked riders of the category
        competition_format: Format the standings were computed with
        output_dir: Output directory

    Returns:
        Path to generated JSON file
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    output_data = {
        "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
        **_category_standings_to_dict(standings, competition_format),
    }

    output_file = output_dir / f"clasificacion_{standings.category}.json"
    with output_file.open("w", encoding="utf-8") as f:
        json.dump(output_data, f, indent=2, default=str, ensure_ascii=False)

    return output_file


def _team_to_dict(team: Team) -> dict:
    """Convert a team to dictionary for JSON output."""
    return {
        "rank": team.rank,
        "team": team.name,
        "captain": team.captain,
        "total_score": team.total_score_display,
        "total_time_seconds": team.total_time_seconds,
        "total_time": team.total_time_display,
        "eliminated": team.eliminated,
        "members": [
            {
                "license": m.license,
                "rider_name": m.rider_name,
                "category": m.category,
                "mount": m.mount,
                "score": m.score,
                "time": m.time,
                "valid_for_total": m.valid_for_total,
                "struck": m.struck,
            }
            for m in team.members
        ],
    }


def generate_team_output(
    teams: list[Team],
    output_dir: str | Path,
) -> Path:
    """
    Generate JSON output file for the team standings.

    Args:
        teams: Ranked teams
        output_dir: Output directory

    Returns:
        Path to generated JSON file
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    output_data = {
        "last_updated": datetime.now().strftime("%Y-%m-%d %H:%M"),
        "total_teams": len(teams),
        "teams": [_team_to_dict(t) for t in teams],
    }

    output_file = output_dir / "clasificacion_equipos.json"
    with output_file.open("w", encoding="utf-8") as f:
        json.dump(output_data, f, indent=2, default=str, ensure_ascii=False)

    return output_file


def generate_all_output(
    category_standings: dict[str, CategoryStandings],
    teams: list[Team],
    competition_format: CompetitionFormat,
    output_dir: str | Path,
) -> list[Path]:
    """
    Generate all output files (one per category + teams).

    Returns:
        List of generated file paths
    """
    output_files: list[Path] = [
        generate_individual_output(standings, competition_format, output_dir)
        for standings in category_standings.values()
    ]
    output_files.append(generate_team_output(teams, output_dir))
    return output_files
