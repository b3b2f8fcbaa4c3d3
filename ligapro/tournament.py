"""League state: recording matches, standings and scorer rankings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations

from .models import MAX_GOALS_PER_MATCH, MAX_MATCHES, Match, Player, Team, default_teams

POINTS_WIN = 3
POINTS_DRAW = 1


class InvalidMatchError(ValueError):
    """Raised when a match result cannot be recorded."""


def _apply_result(team: Team, scored: int, conceded: int) -> None:
    team.played += 1
    team.goals_for += scored
    team.goals_against += conceded
    if scored > conceded:
        team.won += 1
        team.points += POINTS_WIN
    elif scored < conceded:
        team.lost += 1
    else:
        team.drawn += 1
        team.points += POINTS_DRAW


def _rank_key(team: Team) -> tuple[int, int]:
    return team.points, team.goal_difference()


class Tournament:
    """A season: the participating teams and the matches played so far."""

    def __init__(self, teams: Iterable[Team] | None = None) -> None:
        self.teams: list[Team] = list(teams) if teams is not None else default_teams()
        self.matches: list[Match] = []

    def record_match(
        self,
        home: int,
        away: int,
        home_scorers: Sequence[int] = (),
        away_scorers: Sequence[int] = (),
    ) -> Match:
        """Record a result given team indices and one squad index per goal."""
        if not 0 <= home < len(self.teams):
            raise InvalidMatchError("Equipo local inválido.")
        if not 0 <= away < len(self.teams) or away == home:
            raise InvalidMatchError("Equipo visitante inválido o igual al local.")
        if len(self.matches) >= MAX_MATCHES:
            raise InvalidMatchError(f"No se pueden registrar más de {MAX_MATCHES} partidos.")

        home_team, away_team = self.teams[home], self.teams[away]
        home_scorers, away_scorers = tuple(home_scorers), tuple(away_scorers)
        for team, scorers in ((home_team, home_scorers), (away_team, away_scorers)):
            if len(scorers) > MAX_GOALS_PER_MATCH:
                raise InvalidMatchError(
                    f"{team.name}: máximo {MAX_GOALS_PER_MATCH} goles por partido."
                )
            valid = {index for index, _ in team.active_players()}
            for scorer in scorers:
                if scorer not in valid:
                    raise InvalidMatchError(f"Jugador inválido para {team.name}: {scorer}")

        for team, scorers in ((home_team, home_scorers), (away_team, away_scorers)):
            for scorer in scorers:
                team.players[scorer].goals += 1

        match = Match(home, away, home_scorers, away_scorers)
        self.matches.append(match)
        _apply_result(home_team, match.home_goals, match.away_goals)
        _apply_result(away_team, match.away_goals, match.home_goals)
        return match

    def standings(self) -> list[Team]:
        """Teams ranked by points, then goal difference.

        Ties keep the order produced by pairwise exchange from the team list.
        """
        ranked = list(self.teams)
        for i, j in combinations(range(len(ranked)), 2):
            if _rank_key(ranked[j]) > _rank_key(ranked[i]):
                ranked[i], ranked[j] = ranked[j], ranked[i]
        return ranked

    def top_scorers(self) -> list[tuple[Team, Player]]:
        """Every player sharing the highest goal tally; empty if nobody scored."""
        best = max((p.goals for team in self.teams for p in team.players), default=0)
        if best <= 0:
            return []
        return [
            (team, player)
            for team in self.teams
            for player in team.players
            if player.goals == best
        ]

    def team_top_scorers(self) -> list[tuple[Team, Player | None]]:
        """For each team its first leading scorer, or None if it has no goals."""
        leaders: list[tuple[Team, Player | None]] = []
        for team in self.teams:
            best = max(team.players, key=lambda player: player.goals, default=None)
            leaders.append((team, best if best is not None and best.goals > 0 else None))
        return leaders