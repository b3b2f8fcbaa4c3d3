"""Interactive menu for managing the league from a terminal."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import Callable, TextIO

from .models import MAX_GOALS_PER_MATCH, Match, Team
from .tournament import InvalidMatchError, Tournament

MENU = (
    "\n--- LIGAPRO SERIE A 2025 ---\n"
    "1. Ingresar resultado de partido y goleadores\n"
    "2. Ver tabla de posiciones\n"
    "3. Ver historial de partidos jugados\n"
    "4. Ver goleador del torneo\n"
    "5. Ver goleador de cada equipo\n"
    "6. Salir\n"
    "Seleccione una opcion: "
)


def format_team_list(teams: Iterable[Team]) -> str:
    lines = ["Lista de equipos:"]
    lines += [f"{number:2d}. {team.name}" for number, team in enumerate(teams, start=1)]
    return "\n".join(lines) + "\n"


def format_players(team: Team) -> str:
    lines = [f"Jugadores de {team.name}:"]
    lines += [f"{index + 1:2d}. {player.name}" for index, player in team.active_players()]
    return "\n".join(lines) + "\n"


def format_standings(tournament: Tournament) -> str:
    lines = ["", f"{'Equipo':<24} PJ  PG  PE  PP  GF  GC  PTS"]
    for t in tournament.standings():
        lines.append(
            f"{t.name:<24} {t.played:2d}  {t.won:2d}  {t.drawn:2d}  {t.lost:2d}  "
            f"{t.goals_for:2d}  {t.goals_against:2d}  {t.points:3d}"
        )
    return "\n".join(lines) + "\n"


def format_history(tournament: Tournament) -> str:
    lines = ["", "HISTORIAL DE PARTIDOS JUGADOS:"]
    if not tournament.matches:
        lines.append("No hay partidos registrados.")
    teams = tournament.teams
    for number, match in enumerate(tournament.matches, start=1):
        lines.append(
            f"{number:2d}. {teams[match.home].name} {match.home_goals} - "
            f"{match.away_goals} {teams[match.away].name}"
        )
    return "\n".join(lines) + "\n"


def format_top_scorers(tournament: Tournament) -> str:
    lines = ["", "Goleador(es) del torneo:"]
    leaders = tournament.top_scorers()
    lines += [f"{player.name} ({team.name}): {player.goals} goles" for team, player in leaders]
    if not leaders:
        lines.append("No hay goles en el torneo.")
    return "\n".join(lines) + "\n"


def format_team_top_scorers(tournament: Tournament) -> str:
    lines = ["", "Goleador de cada equipo:"]
    for team, player in tournament.team_top_scorers():
        if player is None:
            lines.append(f"{team.name}: Sin goles")
        else:
            lines.append(f"{team.name}: {player.name} con {player.goals} goles")
    return "\n".join(lines) + "\n"


def _format_result(tournament: Tournament, match: Match) -> str:
    home = tournament.teams[match.home].name
    away = tournament.teams[match.away].name
    if match.home_goals > match.away_goals:
        return f"Ganador: {home}\n"
    if match.home_goals < match.away_goals:
        return f"Ganador: {away}\n"
    return f"Empate entre {home} y {away}\n"


class _IntReader:
    """Reads whitespace-separated integers across lines; None for non-integers."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens: Iterator[str] = (token for line in stream for token in line.split())

    def read_int(self) -> int | None:
        token = next(self._tokens, None)
        if token is None:
            raise EOFError
        try:
            return int(token)
        except ValueError:
            return None


class _Session:
    def __init__(self, tournament: Tournament, reader: _IntReader, out: TextIO) -> None:
        self.tournament = tournament
        self.reader = reader
        self.out = out

    def write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def ask_index(self, prompt: str) -> int | None:
        self.write(prompt)
        number = self.reader.read_int()
        return None if number is None else number - 1

    def ask_goals(self, team: Team) -> int | None:
        self.write(f"Goles para {team.name}: ")
        goals = self.reader.read_int()
        if goals is None or not 0 <= goals <= MAX_GOALS_PER_MATCH:
            return None
        return goals

    def ask_scorers(self, team: Team, goals: int) -> list[int]:
        valid = {index for index, _ in team.active_players()}
        scorers = []
        for number in range(1, goals + 1):
            self.write(f"Gol {number} de {team.name}: seleccione jugador:\n")
            self.write(format_players(team))
            while True:
                index = self.ask_index("Ingrese el número del jugador: ")
                if index in valid:
                    scorers.append(index)
                    break
                self.write("Jugador inválido. ")
        return scorers

    def record_match(self) -> None:
        teams = self.tournament.teams
        self.write("\nSeleccione el equipo LOCAL:\n")
        self.write(format_team_list(teams))
        home = self.ask_index("Ingrese el número del equipo local: ")
        if home is None or not 0 <= home < len(teams):
            self.write("Equipo local inválido.\n")
            return

        self.write("\nSeleccione el equipo VISITANTE:\n")
        self.write(format_team_list(teams))
        away = self.ask_index("Ingrese el número del equipo visitante: ")
        if away is None or not 0 <= away < len(teams) or away == home:
            self.write("Equipo visitante inválido o igual al local.\n")
            return

        home_goals = self.ask_goals(teams[home])
        away_goals = self.ask_goals(teams[away]) if home_goals is not None else None
        if home_goals is None or away_goals is None:
            self.write("Cantidad de goles inválida.\n")
            return

        home_scorers = self.ask_scorers(teams[home], home_goals)
        away_scorers = self.ask_scorers(teams[away], away_goals)
        try:
            match = self.tournament.record_match(home, away, home_scorers, away_scorers)
        except InvalidMatchError as exc:
            self.write(f"{exc}\n")
            return
        self.write(_format_result(self.tournament, match))

    def run(self) -> None:
        reports: dict[int, Callable[[Tournament], str]] = {
            2: format_standings,
            3: format_history,
            4: format_top_scorers,
            5: format_team_top_scorers,
        }
        try:
            while True:
                self.write(MENU)
                option = self.reader.read_int()
                if option == 1:
                    self.record_match()
                elif option in reports:
                    self.write(reports[option](self.tournament))
                elif option == 6:
                    self.write("Programa finalizado.\n")
                    return
                else:
                    self.write("Opcion invalida.\n")
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Run the interactive league menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="ligapro", description="Registro de resultados de la LigaPro Serie A."
    )
    parser.parse_args(argv)
    _Session(Tournament(), _IntReader(sys.stdin), sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())