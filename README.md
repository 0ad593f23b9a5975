# minesboomer

Minesweeper for two players. The players take turns revealing cells on a
shared board. A player who reveals a hidden mine scores it and keeps the turn.
A player who reveals any other hidden cell passes the turn to the opponent.
The game ends when one player has found half of the mines, rounded up.

## What is in the package

- `minesboomer.geometry` has `Point`, `Size` and `Grid`. A `Grid` is a fixed-size
  two-dimensional container that you address by `Point`.
- `minesboomer.cell` has `Cell`, `CellKind` and `CellState`.
- `minesboomer.board` has `Board`, a grid of cells with randomly placed mines
  and neighbour counts.
- `minesboomer.game` has `Game`, `Difficulty` and `GameConfiguration`, which
  hold the single-board rules: selecting cells with flood fill, flagging, and
  checking for a loss or a win.
- `minesboomer.player` and `minesboomer.multiplayer` have `Player` and
  `Multiplayer`, the two-player turn and score rules.
- `minesboomer.messages` has the JSON messages that clients and the server
  exchange.
- `minesboomer.hosted_game` and `minesboomer.server` have `HostedGame` and
  `Server`, the aiohttp WebSocket server that lists open games, pairs hosts
  with opponents and relays moves.

The difficulty presets are:

| Difficulty | Board (width × height) | Mines |
|------------|------------------------|-------|
| `EASY`     | 10 × 10                | 21    |
| `MEDIUM`   | 16 × 16                | 101   |
| `HARD`     | 20 × 24                | 250   |

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Running the server

```
minesboomer-server [--host HOST] [--port PORT]
```

By default the server listens on `0.0.0.0`. If `--port` is not given, the port
comes from the `PORT` environment variable, and if that is not set either, it
is `8080`. Clients connect over WebSocket at `/ws`. Every other path serves a
static file from the directory named in `DIST_PATH`, and a directory path
serves the `index.html` inside it. If `DIST_PATH` is not set, the server uses a
`dist` directory next to the package when one exists, and otherwise `/dist`.

When a client connects, the server sends it `{"name":"connected"}`. After that
the server reacts to these messages:

- `SimpleMessage` with the name `games_request`: the server replies with an
  `OpenGamesMessage`.
- `CreateGameMessage`: the server creates a game, replies with `waiting_enemy`,
  and sends the updated list of open games to every other connection.
- `JoinGameMessage`: the server pairs the sender with the host and sends each
  player a `GameStartMessage`.
- `CellSelectedMessage`: the server applies the move and sends a
  `CellSelectedMessage` to both players.

When a player disconnects, a game that player hosts is removed. A player who
had joined a game is taken out of it.

## Playing a game in code

```python
from minesboomer.game import Difficulty, Game
from minesboomer.geometry import Point

game = Game.new(Difficulty.EASY)
game.selected_at(Point(x=3, y=4))     # reveal a cell; empty areas open up
game.toggle_flagged(Point(x=0, y=0))
print(game.board)                     # text rendering of the board
print(game.is_game_over(), game.is_win(), game.remaining_mines())
```

Two players:

```python
from minesboomer.multiplayer import Multiplayer

match = Multiplayer("game-1", "Alice", "Bob", Difficulty.EASY)
match.player_selected(Point(x=2, y=2))
print(match.current_player.name, match.total_mines_to_win(), match.winner())
```

## Messages

Each message class in `minesboomer.messages` has `to_json()` and a static
`from_json(text)`. `from_json` raises `MessageError`, which is a subclass of
`ValueError`, when the text is not a well-formed message of that kind. The
classes are `SimpleMessage`, `CellSelectedMessage`, `GameStartMessage`,
`OpenGamesMessage`, `CreateGameMessage` and `JoinGameMessage`.
`CreateGameMessage.create(name, difficulty)` and
`JoinGameMessage.create(game_id, client_name)` build the two request messages.

## What the package does not do

The package has no graphical client. It does not draw the board or take mouse
input, and it does not ship the static web files that the server can serve.
Anything that speaks the JSON messages above over a WebSocket can act as a
client. Games are held in memory only and are gone when the server stops.

## Running the tests

```
pytest
```