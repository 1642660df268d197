# minefield

A classic minesweeper game built on pygame.

## Playing

Install the package and start the game from a directory that holds the game's files:

```
pip install .
minefield
```

By default the game looks in the working directory for:

- `config.cfg`: three whitespace-separated integers: columns, rows and number of mines, e.g. `25 16 50`.
- `font.ttf`: the font used for the welcome screen and the leaderboard.
- `images/`: the tile, face, button and digit images (`tile_hidden.png`, `tile_revealed.png`, `flag.png`, `mine.png`, `number_1.png` … `number_8.png`, `face_happy.png`, `face_win.png`, `face_lose.png`, `debug.png`, `pause.png`, `play.png`, `leaderboard.png`, `digits.png`).
- `leaderboard.txt` (optional): lines of the form `MM:SS,Name`. It is created when needed and kept to the five best times.

Each location can be changed on the command line:

```
minefield --config my.cfg --images art/ --font other.ttf --leaderboard scores.txt
```

The game opens with a welcome screen asking for your name (ASCII letters only, up to ten; the first is capitalised, the rest lower case). Press Enter to begin; closing the window quits.

On the board:

- Left-click a tile to reveal it; areas with no neighbouring mines open up automatically.
- Right-click a tile to place or remove a flag.
- The face button starts a new game.
- The debug button shows where the mines are.
- The pause button stops the timer and hides the board.
- The leaderboard button records your current time under your name, saves the five best and shows them in a separate window; your new entry is marked with `*`.

The counter on the left shows mines minus flags placed (it can go negative); the counter on the right shows elapsed seconds, up to 999.

## Using the pieces

The game logic in `minefield.board` and `minefield.tile` has no display dependency and can be driven directly:

```python
from minefield.board import Board

board = Board(cols=9, rows=9, mines=10)
board.reveal_at(4, 4)
print(board.game_over, board.is_win(), board.remaining_mines())
```

`Board.place_mines_at` starts a game with mines at chosen `(x, y)` positions, which is handy for setting up a known layout. `Board.tile(x, y)` and `Board.tiles` give access to the `Tile` objects, whose `revealed`, `flagged`, `mine` and `adjacent_mines` describe their state.

Configuration files are read with `minefield.config.load_config`, which raises `ConfigError` if the file is missing or malformed.

Leaderboard files can be managed with `minefield.leaderboard`:

```python
from minefield.leaderboard import record_time, format_listing

entries = record_time("leaderboard.txt", 83, "Alice")
print(format_listing(entries))
```

`read_leaderboard`, `update_leaderboard` and `write_leaderboard` are the separate steps behind `record_time`; `parse_time` and `format_time` convert between seconds and `MM:SS`.

The timer is `minefield.game.Stopwatch`, which counts whole seconds and leaves paused spans out of the total.

## Tests

```
pip install .[test]
pytest
```