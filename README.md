# ligapro

ligapro is a small console program that keeps track of a football league
season. It starts with the sixteen clubs of the Ecuadorian top flight, and each
club has a squad list of up to eight players. You enter each match result and
the player who scored each goal. The program then keeps the league table, the
match history and the scoring charts up to date.

## Installation

```
pip install .
```

## Running

```
ligapro
```

The program takes no options apart from `--help`. The prompts are in Spanish.
It shows a numbered menu:

1. Enter a match result and its goal scorers
2. Show the league table
3. Show the history of matches played
4. Show the tournament's top scorer(s)
5. Show the top scorer of each team
6. Quit

Recording a match works like this:

- Pick the home team and then the away team by their list number. An unknown
  number, or picking the same team for both sides, cancels the entry.
- Enter the goals for each side, between 0 and 16. Any other value cancels the
  entry.
- For every goal, choose the scorer by number from the squad list. The program
  asks again until you give a valid player.

A win earns three points. A draw earns one point for each side.

The table is ordered by points, then by goal difference. The tournament's top
scorers are every player who shares the highest goal total. A team's top scorer
is the first squad member with that team's highest total. A team with no goals
shows "Sin goles".

The program also ends when standard input runs out.

## Using it as a library

```python
from ligapro.models import default_teams
from ligapro.tournament import Tournament, InvalidMatchError
from ligapro.cli import format_standings, format_top_scorers

tournament = Tournament(default_teams())  # Tournament() does the same

# Home team 0 beats away team 1 by 2-1; scorers are squad indices.
match = tournament.record_match(0, 1, [0, 1], [5])
print(match.home_goals, match.away_goals)  # 2 1

print(format_standings(tournament))
print(format_top_scorers(tournament))
```

What each module holds:

- `ligapro.models` holds the `Player`, `Team` and `Match` dataclasses and
  `default_teams()`. `Team` has `goal_difference()` and `active_players()`.
- `ligapro.tournament` holds `Tournament`. It has the `teams` and `matches`
  lists and the methods `record_match`, `standings`, `top_scorers` and
  `team_top_scorers`.
- `ligapro.cli` holds the text reports `format_team_list`, `format_players`,
  `format_standings`, `format_history`, `format_top_scorers` and
  `format_team_top_scorers`, and the `main` entry point.

Team and squad indices start at zero. A match's goals are the number of scorers
given for each side. `record_match` raises `InvalidMatchError`, a subclass of
`ValueError`, in these cases:

- a team index is out of range
- both sides are the same team
- a side has more than 16 scorers
- a scorer is not a named member of that team's squad
- 240 matches have already been recorded

## Limitations

The season exists only while the program runs. Results are not saved to disk,
and there is no way to load a previous season. The clubs and squads are fixed
at start-up. The menu cannot add or rename them.

## Running the tests

```
pip install .[test]
pytest
```