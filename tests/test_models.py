import pytest

from ligapro.models import (
    NUM_PLAYERS,
    NUM_TEAMS,
    Match,
    Player,
    Team,
    default_teams,
)


def test_default_teams_count_and_order():
    teams = default_teams()
    assert len(teams) == NUM_TEAMS
    assert teams[0].name == "Aucas"
    assert teams[-1].name == "Vinotinto Ecuador"


def test_default_rosters_fit_squad_size():
    assert all(0 < len(team.players) <= NUM_PLAYERS for team in default_teams())


def test_default_roster_content():
    macara = next(team for team in default_teams() if team.name == "Macara")
    names = [player.name for _, player in macara.active_players()]
    assert names == ["Ricardo Prieto", "Jimmy Montanero", "Wilson Paredes", "José Cevallos"]


def test_default_teams_start_with_zero_statistics():
    for team in default_teams():
        assert (team.played, team.points, team.goals_for, team.goals_against) == (0, 0, 0, 0)
        assert all(player.goals == 0 for player in team.players)


def test_default_teams_are_independent():
    first = default_teams()
    first[0].players[0].goals = 5
    assert default_teams()[0].players[0].goals == 0


def test_goal_difference_fresh_team_is_zero():
    assert Team("X").goal_difference() == 0


def test_goal_difference_follows_goals():
    team = Team("X", goals_for=7, goals_against=9)
    assert team.goal_difference() < 0
    team.goals_for += 2
    assert team.goal_difference() == 0


def test_active_players_skips_empty_slots():
    team = Team("X", [Player("A"), Player(""), Player("B")])
    assert [index for index, _ in team.active_players()] == [0, 2]
    assert [player.name for _, player in team.active_players()] == ["A", "B"]


def test_too_many_players_rejected():
    with pytest.raises(ValueError):
        Team("X", [Player(str(n)) for n in range(NUM_PLAYERS + 1)])


def test_match_goal_counts_follow_scorers():
    match = Match(0, 1, (0, 0, 2), (1,))
    assert match.home_goals == len((0, 0, 2))
    assert match.away_goals == len((1,))