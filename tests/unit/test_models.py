"""Tests for data models."""

import pytest
from pydantic import ValidationError

from showjumping.models import (
    DEFAULT_CATEGORY_GROUPS,
    DEFAULT_FORMAT_REGISTRY,
    THREE_DAY_FORMAT,
    CategoryGroups,
    CompetitionFormat,
    MembershipProvider,
    ResultRow,
    ResultsProvider,
    RiderDayEntry,
    RiderStanding,
    TeamMember,
)


class TestResultRow:
    """Tests for ResultRow model."""

    def test_text_fields_stringified(self):
        """Test numeric licenses read from spreadsheets become strings."""
        row = ResultRow(license=12345.0, club=None, rider_name="  Ana ")

        assert row.license == "12345"
        assert row.club == ""
        assert row.rider_name == "Ana"

    def test_frozen(self):
        """Test rows cannot be modified."""
        row = ResultRow(license="1")
        with pytest.raises(ValidationError):
            row.license = "2"


class TestRiderDayEntry:
    """Tests for RiderDayEntry model."""

    def test_missing_entry(self):
        """Test the no-result entry."""
        entry = RiderDayEntry.missing()

        assert entry.has_result is False
        assert entry.is_elimination is False
        assert entry.tooltip == "Sin resultado"

    def test_tooltip(self):
        """Test the result summary lines."""
        entry = RiderDayEntry(score=4, time="61.2", mount="Tornado", placement=3)

        assert entry.tooltip == (
            "Caballo: TORNADO\nTiempo: 61.2\nPuntos: 4\nClasificación: 3"
        )

    def test_substituted_entry_is_elimination(self):
        """Test elimination is read from the recorded score."""
        entry = RiderDayEntry(score=28, original_score="el")
        assert entry.is_elimination is True

    def test_tiebreak_display(self):
        """Test jump-off labels."""
        assert RiderDayEntry(score=0, time="40.5").tiebreak_display == "0/40.5"
        assert RiderDayEntry(score="EL").tiebreak_display == "Eliminado"
        assert RiderDayEntry(score="nc").tiebreak_display == "NO CONTINUA"

    def test_serialization_includes_display_fields(self):
        """Test computed fields are part of the dumped model."""
        data = RiderDayEntry(score=4, time="60").model_dump()
        assert data["has_result"] is True
        assert "tooltip" in data


class TestRiderStanding:
    """Tests for RiderStanding model."""

    def test_tiebreak_defaults_to_missing(self):
        """Test a standing without jump-off entry."""
        standing = RiderStanding(license="1", tiebreak_day="DESEMPATE")

        assert standing.tiebreak.has_result is False
        assert standing.has_valid_tiebreak is False

    def test_valid_tiebreak(self):
        """Test numeric jump-off scores count as ridden."""
        standing = RiderStanding(
            license="1",
            tiebreak_day="DESEMPATE",
            days={"DESEMPATE": RiderDayEntry(score="4", time="40")},
        )
        assert standing.has_valid_tiebreak is True

    def test_rank_display(self):
        """Test the rank is hidden until results are complete."""
        assert RiderStanding(license="1", rank=2).rank_display == ""
        assert RiderStanding(license="1", rank=2, show_rank=True).rank_display == "2"


class TestTeamMember:
    """Tests for TeamMember model."""

    def test_is_eliminated_from_recorded_score(self):
        """Test a substituted score still reports the elimination."""
        member = TeamMember(
            license="1", rider_name="A", category="110", score=24, original_score="RET"
        )
        assert member.is_eliminated is True

    def test_not_eliminated(self):
        """Test a finished round."""
        member = TeamMember(license="1", rider_name="A", category="110", score=4)
        assert member.is_eliminated is False
        assert member.category_display == "1,10m"


class TestCategoryGroups:
    """Tests for CategoryGroups."""

    def test_default_groups(self):
        """Test the default team category groups."""
        groups = DEFAULT_CATEGORY_GROUPS
        assert groups.group_of("Adultos") == groups.group_of("Juveniles1") == "grupo1"
        assert groups.group_of("veteranos") == "grupo3"
        assert groups.group_of("Juveniles") == "grupo2"

    def test_ungrouped_category(self):
        """Test ungrouped categories get a key of their own."""
        assert DEFAULT_CATEGORY_GROUPS.group_of("110") is None
        assert DEFAULT_CATEGORY_GROUPS.group_key("110") == "individual_110"

    def test_from_mapping(self):
        """Test building groups from a category mapping."""
        groups = CategoryGroups.from_mapping({"100": "low", "110": "low", "130": "high"})

        assert groups.groups == {"low": ["100", "110"], "high": ["130"]}
        assert groups.group_key("110") == "low"


class TestCompetitionFormat:
    """Tests for CompetitionFormat and the registry."""

    def test_three_day_days(self):
        """Test the default format's day order."""
        assert THREE_DAY_FORMAT.days == ["VIERNES", "SABADO", "DOMINGO", "DESEMPATE"]
        assert THREE_DAY_FORMAT.time_day == "DESEMPATE"

    def test_eligibility_days_must_score(self):
        """Test required days outside the scoring days are rejected."""
        with pytest.raises(ValidationError, match="not a scoring day"):
            CompetitionFormat(
                name="bad",
                scoring_days=["SABADO"],
                required_days=["VIERNES"],
            )

    def test_registry(self):
        """Test built-in formats are registered."""
        assert DEFAULT_FORMAT_REGISTRY.names == ["three_day", "two_day"]
        assert DEFAULT_FORMAT_REGISTRY.get_format("missing") is None
        two_day = DEFAULT_FORMAT_REGISTRY.get_format("two_day")
        assert two_day is not None
        assert two_day.days == ["SABADO", "DOMINGO", "DESEMPATE"]

    def test_registry_replaces_by_name(self):
        """Test adding a format with a known name replaces it."""
        registry = DEFAULT_FORMAT_REGISTRY.model_copy(deep=True)
        registry.add_format(THREE_DAY_FORMAT.model_copy(update={"max_eliminations": 2}))

        assert registry.names == ["two_day", "three_day"]
        assert registry.get_format("three_day").max_eliminations == 2


class TestProviders:
    """Tests for the provider interfaces."""

    def test_snapshot_is_provider(self, competition):
        """Test the snapshot serves as results and membership provider."""
        assert isinstance(competition, ResultsProvider)
        assert isinstance(competition, MembershipProvider)
