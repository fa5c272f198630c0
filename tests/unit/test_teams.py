"""Tests for team totals and team ranking."""

import logging

from showjumping.models.team import Team, TeamMember, TeamMembershipRecord
from showjumping.processor.teams import calculate_team_totals, order_teams, rank_teams


def create_team(name: str, *results: tuple[object, object]) -> Team:
    """Helper to create a team whose members all count."""
    members = [
        TeamMember(
            license=f"{name}{i}",
            rider_name=f"Rider {i}",
            category="110",
            score=score,
            original_score=score,
            time=time,
            valid_for_total=True,
        )
        for i, (score, time) in enumerate(results)
    ]
    return Team(name=name, members=members)


class TestCalculateTeamTotals:
    """Tests for calculate_team_totals."""

    def test_sums_counting_members(self):
        """Test scores and times of counting members are summed."""
        team = create_team("A", (4, "59.0"), (0, "1:01"), (8, "55"))

        calculate_team_totals(team)

        assert team.total_score == 12
        assert team.total_time_seconds == 175.0
        assert team.total_time_display == "2:55"
        assert team.total_score_display == "12"
        assert team.eliminated is False

    def test_struck_members_ignored(self):
        """Test struck members do not add to the total."""
        team = create_team("A", (4, "60"), (0, "60"), (8, "60"), (12, "60"))
        team.members[3].valid_for_total = False
        team.members[3].struck = True

        calculate_team_totals(team)

        assert team.total_score == 12
        assert team.total_time_seconds == 180.0

    def test_eliminated_member_eliminates_team(self):
        """Test a counting member with an elimination eliminates the team."""
        team = create_team("A", (4, "60"), ("EL", ""), (0, "60"))

        calculate_team_totals(team)

        assert team.eliminated is True
        assert team.total_score == "ELI"
        assert team.total_time_seconds == 0
        assert team.total_score_display == "ELI"
        assert team.total_time_display == "-"

    def test_elimination_in_time_column(self):
        """Test a code written in the time column also eliminates."""
        team = create_team("A", (4, "60"), (0, "RET"), (0, "60"))

        calculate_team_totals(team)

        assert team.eliminated is True

    def test_unparseable_time_skipped(self):
        """Test times that cannot be parsed add nothing."""
        team = create_team("A", (0, "60"), (0, "n/a"), (0, "-"))

        calculate_team_totals(team)

        assert team.total_time_seconds == 60.0

    def test_missing_score_counts_nothing(self):
        """Test a member without a result adds nothing to the score."""
        team = create_team("A", (4, "60"), ("-", "0"), (0, "60"))

        calculate_team_totals(team)

        assert team.total_score == 4
        assert team.eliminated is False


class TestOrderTeams:
    """Tests for order_teams."""

    def test_score_then_time(self):
        """Test teams are ordered by score, then time."""
        slow = calculate_team_totals(create_team("slow", (4, "70"), (0, "70")))
        fast = calculate_team_totals(create_team("fast", (4, "60"), (0, "60")))
        best = calculate_team_totals(create_team("best", (0, "90"), (0, "90")))

        ordered = order_teams([slow, fast, best])

        assert [t.name for t in ordered] == ["best", "fast", "slow"]
        assert [t.rank for t in ordered] == [1, 2, 3]

    def test_identical_totals_share_rank(self):
        """Test identical score and time share a rank."""
        first = calculate_team_totals(create_team("first", (4, "60")))
        second = calculate_team_totals(create_team("second", (4, "60")))
        third = calculate_team_totals(create_team("third", (8, "60")))

        ordered = order_teams([first, second, third])

        assert [t.rank for t in ordered] == [1, 1, 3]

    def test_eliminated_last_in_input_order(self):
        """Test eliminated teams follow all others, unranked."""
        out_b = calculate_team_totals(create_team("out_b", ("EL", "")))
        ok = calculate_team_totals(create_team("ok", (20, "90")))
        out_a = calculate_team_totals(create_team("out_a", ("RET", "")))

        ordered = order_teams([out_b, ok, out_a])

        assert [t.name for t in ordered] == ["ok", "out_b", "out_a"]
        assert [t.rank for t in ordered] == [1, None, None]


class TestRankTeams:
    """Tests for rank_teams on the sample competition."""

    def test_ranking(self, competition):
        """Test the full team ranking pass."""
        teams = rank_teams(competition, competition)

        assert [t.name for t in teams] == ["Equipo Norte", "Equipo Sur", "Equipo Este"]
        norte, sur, este = teams
        assert norte.rank == 1
        assert norte.total_score == 4
        assert norte.total_time_display == "2:55"
        assert sur.eliminated is True
        assert sur.rank is None
        assert este.eliminated is True

    def test_eliminated_member_scored_on_result_day(self, competition):
        """Test eliminated members show their substituted team score."""
        sur = rank_teams(competition, competition)[1]
        gael = next(m for m in sur.members if m.license == "M2")

        assert gael.score == 20
        assert gael.original_score == "NC"
        assert gael.is_eliminated is True

    def test_no_membership(self, competition):
        """Test a competition without a roster has no teams."""
        competition.membership = []
        assert rank_teams(competition, competition) == []

    def test_team_without_located_members_not_ranked(self, competition):
        """Test a team whose licenses match nobody is left out of the ranking."""
        competition.membership.append(
            TeamMembershipRecord(team="Equipo Fantasma", license="999")
        )

        teams = rank_teams(competition, competition)

        assert "Equipo Fantasma" not in [t.name for t in teams]
        assert teams[0].name == "Equipo Norte"
        assert teams[0].rank == 1

    def test_short_team_logged(self, competition, caplog):
        """Test teams with fewer located members than counted are reported."""
        with caplog.at_level(logging.WARNING, logger="showjumping.processor.roster"):
            rank_teams(competition, competition)

        assert "Equipo Este: only" in caplog.text
        assert "Equipo Norte" not in caplog.text
