import io

from ligapro.cli import (
    format_history,
    format_players,
    format_standings,
    format_team_list,
    format_team_top_scorers,
    format_top_scorers,
    main,
)
from ligapro.models import Player, Team, default_teams
from ligapro.tournament import Tournament


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_format_team_list():
    lines = format_team_list(default_teams()).splitlines()
    assert lines[0] == "Lista de equipos:"
    assert lines[1] == " 1. Aucas"
    assert lines[-1].endswith(". Vinotinto Ecuador")


def test_format_players_skips_empty_slots():
    team = Team("X", [Player("A"), Player(""), Player("B")])
    lines = format_players(team).splitlines()
    assert lines[0] == "Jugadores de X:"
    assert lines[1:] == [" 1. A", " 3. B"]


def test_format_standings_header_and_rows():
    tournament = Tournament()
    tournament.record_match(0, 1, [0], [])
    lines = format_standings(tournament).splitlines()
    assert lines[1].startswith("Equipo") and lines[1].endswith("PTS")
    assert lines[2].startswith("Aucas")
    assert len(lines) == len(tournament.teams) + 2


def test_format_history_empty_and_filled():
    tournament = Tournament()
    assert "No hay partidos registrados." in format_history(tournament)
    tournament.record_match(0, 1, [0, 1], [2])
    assert " 1. Aucas 2 - 1 Barcelona SC" in format_history(tournament).splitlines()


def test_format_top_scorers():
    tournament = Tournament()
    assert "No hay goles en el torneo." in format_top_scorers(tournament)
    tournament.record_match(0, 1, [0], [])
    assert "Hamilton Piedra (Aucas): 1 goles" in format_top_scorers(tournament)


def test_format_team_top_scorers():
    tournament = Tournament()
    tournament.record_match(0, 1, [1], [])
    lines = format_team_top_scorers(tournament).splitlines()
    assert "Aucas: Brian Montenegro con 1 goles" in lines
    assert "Barcelona SC: Sin goles" in lines


def test_main_records_match_and_shows_table(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1\n1\n2\n1\n0\n1\n2\n6\n")
    assert code == 0
    assert "Ganador: Aucas" in out
    assert "Programa finalizado." in out
    table_row = next(line for line in out.splitlines() if line.startswith("Aucas "))
    assert table_row.split()[1] == "1"


def test_main_draw(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "1 1 2 0 0 3 6")
    assert "Empate entre Aucas y Barcelona SC" in out
    assert " 1. Aucas 0 - 0 Barcelona SC" in out


def test_main_invalid_option(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "9\nabc\n6\n")
    assert out.count("Opcion invalida.") == 2


def test_main_invalid_teams(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "1 0 1 1 1 6")
    assert "Equipo local inválido." in out
    assert "Equipo visitante inválido o igual al local." in out


def test_main_reprompts_invalid_scorer(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "1 1 2 1 0 9 1 4 6")
    assert "Jugador inválido. " in out
    assert "Hamilton Piedra (Aucas): 1 goles" in out


def test_main_ends_on_end_of_input(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "3\n")
    assert code == 0
    assert "No hay partidos registrados." in out
    assert "Programa finalizado." not in out