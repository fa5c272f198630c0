"""Jinja2 template rendering for printable standings pages."""

from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from showjumping.models.competition import CompetitionFormat
from showjumping.models.standings import CategoryStandings
from showjumping.models.team import Team

# Row highlighting stops after this many riders
HIGHLIGHTED_ROWS = 10

# Categories awarding rosettes beyond the podium
EXTENDED_PODIUM_CATEGORIES = frozenset({"120", "130"})

MEDALS = {1: "🥇", 2: "🥈", 3: "🥉"}
ROSETTE = "🏅"

DAY_LABELS = {
    "VIERNES": "Viernes",
    "SABADO": "Sábado",
    "DOMINGO": "Domingo",
    "DESEMPATE": "Desempate",
}


def medal_icon(position: int, category: str, show_rank: bool) -> str:
    """
    Medal shown next to a rider, by position in the table.

    Args:
        position: 1-based position in the table
        category: Category of the table
        show_rank: Whether final placements are shown

    Returns:
        The icon, or an empty string
    """
    if not show_rank:
        return ""
    if position in MEDALS:
        return MEDALS[position]
    if category in EXTENDED_PODIUM_CATEGORIES and position <= 5:
        return ROSETTE
    return ""


def row_class(position: int, show_rank: bool) -> str:
    """CSS class highlighting the leading rows."""
    if show_rank and position <= HIGHLIGHTED_ROWS:
        return f"top-{position}"
    return ""


def day_label(day: str) -> str:
    return DAY_LABELS.get(day, day.capitalize())


def create_jinja_env(template_dir: str | Path | None = None) -> Environment:
    """
    Create Jinja2 environment for template rendering.

    Args:
        template_dir: Path to templates directory

    Returns:
        Configured Jinja2 Environment
    """
    if template_dir is None:
        template_dir = Path(__file__).parent / "templates"

    env = Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.globals["medal_icon"] = medal_icon
    env.globals["row_class"] = row_class
    env.filters["day_label"] = day_label
    return env


class ReportGenerator:
    """Generate printable HTML standings pages."""

    def __init__(
        self,
        output_dir: str | Path,
        template_dir: str | Path | None = None,
        championship_name: str | None = None,
    ):
        """
        Initialize report generator.

        Args:
            output_dir: Directory to write generated HTML files
            template_dir: Path to Jinja2 templates (defaults to package templates)
            championship_name: Title shown on every page
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        self.env = create_jinja_env(template_dir)
        self.championship_name = championship_name or "Campeonato"

    def _get_base_context(self) -> dict:
        """Get base context for all templates."""
        return {
            "championship_name": self.championship_name,
            "generated_on": datetime.now().strftime("%d/%m/%Y"),
        }

    def _render_template(self, template_name: str, context: dict) -> str:
        """Render a template with context (includes base context)."""
        template = self.env.get_template(template_name)
        full_context = {**self._get_base_context(), **context}
        return template.render(**full_context)

    def _write_html(self, filename: str, content: str) -> Path:
        """Write HTML content to file."""
        output_path = self.output_dir / filename
        output_path.write_text(content, encoding="utf-8")
        return output_path

    def generate_category_page(
        self,
        standings: CategoryStandings,
        competition_format: CompetitionFormat,
    ) -> Path:
        """
        Generate the standings page of one category.

        Args:
            standings: Ranked riders of the category
            competition_format: Format providing the day columns

        Returns:
            Path to generated file
        """
        context = {
            "standings": standings,
            "scoring_days": competition_format.scoring_days,
            "tiebreak_day": competition_format.tiebreak_day,
        }
        content = self._render_template("category.html", context)
        return self._write_html(f"clasificacion_{standings.category}.html", content)

    def generate_team_page(self, teams: list[Team]) -> Path:
        """
        Generate the team standings page.

        Args:
            teams: Ranked teams

        Returns:
            Path to generated file
        """
        content = self._render_template("teams.html", {"teams": teams})
        return self._write_html("clasificacion_equipos.html", content)

    def generate_index(
        self,
        category_standings: dict[str, CategoryStandings],
        teams: list[Team],
    ) -> Path:
        """Generate index.html linking every standings page."""
        context = {
            "categories": list(category_standings.values()),
            "has_teams": bool(teams),
        }
        content = self._render_template("index.html", context)
        return self._write_html("index.html", content)

    def generate_all(
        self,
        category_standings: dict[str, CategoryStandings],
        teams: list[Team],
        competition_format: CompetitionFormat,
    ) -> list[Path]:
        """
        Generate all pages.

        Returns:
            List of generated file paths
        """
        generated_files = [self.generate_index(category_standings, teams)]
        for standings in category_standings.values():
            generated_files.append(
                self.generate_category_page(standings, competition_format)
            )
        if teams:
            generated_files.append(self.generate_team_page(teams))
        return generated_files
