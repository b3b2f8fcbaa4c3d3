"""Teams, players and matches of the league, with the default 2025 rosters."""

from __future__ import annotations

from dataclasses import dataclass, field

NUM_TEAMS = 16
NUM_PLAYERS = 8
MAX_MATCHES = 240
MAX_GOALS_PER_MATCH = 16

_ROSTERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Aucas", ("Hamilton Piedra", "Brian Montenegro", "Stalin Segura", "Michael Carcelén",
               "Jonnathan Mina", "Edson Reséndez", "Ulises Ciccioli", "John Ontaneda")),
    ("Barcelona SC", ("Damián Díaz", "Fidel Martínez", "Mario Pineida", "Gabriel Marques",
                      "Christian Cruz", "Felipe Caicedo", "Byron Castillo", "Jesús Trindade")),
    ("Delfin", ("Jairo Padilla", "Ayrton Preciado", "José Cevallos", "Luis Luna",
                "Romario Caicedo", "Anderson Julio", "Moisés Corozo")),
    ("Deportivo Cuenca", ("Ignacio Bailone", "Agustín Gómez", "Brian Bustos", "Luis Estupiñán",
                          "Marcos López", "Cristian Tobar Luna", "Alejandro Tobar")),
    ("El Nacional", ("Damián Lanza", "Walter Chalá", "William Palacios", "Miguel Parrales",
                     "Jefferson Intriago", "Carlos Arboleda")),
    ("Emelec", ("Bryan Cabezas", "Luis León", "Facundo Barceló", "Aníbal Leguizamón",
                "Sebastián Rodríguez", "José Angulo")),
    ("Independiente del Valle", ("Michael Hoyos", "Jhegson Méndez", "Piero Hincapié",
                                 "Moisés Caicedo", "Matías Zunino", "David Córdova")),
    ("Libertad", ("Eber Caicedo", "Carlos Arboleda", "Luis Amarilla", "Diego Armas", "Esteban Paz")),
    ("Liga de Quito", ("Adrián Gabbarini", "Luis Amarilla", "Hernán Pellerano", "Aníbal Chalá",
                       "Damián Díaz", "Rodrigo Aguirre")),
    ("Macara", ("Ricardo Prieto", "Jimmy Montanero", "Wilson Paredes", "José Cevallos")),
    ("Manta FC", ("Daniel Valencia", "Christian Alemán", "Carlos Garcés", "José Luis Quiñónez")),
    ("Mushuc Runa", ("Ricardo Adalberto", "Washington Corozo", "Jonathan Bauman", "José Madrid")),
    ("Orense", ("Miguel Parrales", "Ángel Mena", "Alexander Domínguez", "José Cevallos")),
    ("Tecnico Universitario", ("Jhonny Quiñónez", "Gabriel Cortez", "Jhon Espinoza",
                               "Anderson Ordóñez")),
    ("Universidad Catolica", ("Byron Palacios", "Ismael Díaz", "Juan Carlos Paredes",
                              "Gabriel Marques")),
    ("Vinotinto Ecuador", ("Rafael Monti", "Danny Luna", "Josué Estrada", "Andrés López")),
)


@dataclass
class Player:
    """A squad member and the goals scored in the tournament."""

    name: str
    goals: int = 0


@dataclass
class Team:
    """A club with its squad and accumulated league statistics."""

    name: str
    players: list[Player] = field(default_factory=list)
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    points: int = 0

    def __post_init__(self) -> None:
        if len(self.players) > NUM_PLAYERS:
            raise ValueError(f"a team holds at most {NUM_PLAYERS} players")

    def goal_difference(self) -> int:
        """Goals scored minus goals conceded."""
        return self.goals_for - self.goals_against

    def active_players(self) -> list[tuple[int, Player]]:
        """Pairs of (squad index, player) for every named squad slot."""
        return [(index, player) for index, player in enumerate(self.players) if player.name]


@dataclass(frozen=True)
class Match:
    """A played match; scorers are squad indices, one entry per goal."""

    home: int
    away: int
    home_scorers: tuple[int, ...] = ()
    away_scorers: tuple[int, ...] = ()

    @property
    def home_goals(self) -> int:
        return len(self.home_scorers)

    @property
    def away_goals(self) -> int:
        return len(self.away_scorers)


def default_teams() -> list[Team]:
    """Fresh teams of the 2025 season with their rosters and zeroed statistics."""
    return [Team(name, [Player(player) for player in roster]) for name, roster in _ROSTERS]