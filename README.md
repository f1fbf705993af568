# selfplaychess

A compact chess board with legal-move generation, a small feed-forward
neural network, and self-play simulations that record every game as a list
of moves in long algebraic notation (`e2e4`, `a7a8q`, ...).

## Contents

- `selfplaychess.board`
  - `ChessBoard` holds a position (the standard start when created) and two
    counters for the 50-move rule. It generates pseudo-legal and legal moves
    (`pseudo_legal_moves`, `valid_moves`, `valid_destinations`,
    `movable_pieces`), detects check (`is_in_check`, `is_square_attacked`),
    and reports the state of the game with `game_result`.
  - `GameResult` is one of `Draw (Insufficient Material)`,
    `White wins (Checkmate)`, `Black wins (Checkmate)`, `Draw (Stalemate)`,
    `Draw (50-move rule)` or `Game continues`.
  - `Piece`, `Coord` and `Move` describe squares and moves. `Coord` is
    `(row, col)` with row 0 being White's back rank and column 0 file `a`.
  - `ChessBoard.to_san` writes a move such as `e2e4`, adding `q` when a pawn
    reaches the last rank; `render` returns the board as text.
- `selfplaychess.matrix`
  - `Matrix`, a numpy-backed 2-D matrix with `+`, `@` (matrix product),
    `*` (by a scalar), `transpose`, `hadamard`, `sigmoid`,
    `sigmoid_derivative`, `softmax` and `softmax_derivative`.
  - `Activation`, the activation used by a network layer.
- `selfplaychess.network`
  - `NeuralNetwork(input_size, output_size, hidden_sizes, rng)` with sigmoid
    hidden layers and a softmax output, `forward`, `forward_layers`, and
    single-sample gradient descent with `backprop`.
- `selfplaychess.bot`
  - `ChessBot(is_white, rng)` encodes a board into 772 inputs (12 per square,
    the side it plays, and progress toward the 50-move rule), runs a
    772-500-500-128 network, and picks the movable piece and then the legal
    destination it scores highest (`decide_move`).
- `selfplaychess.simulate`
  - `simulate_random_game`, `simulate_random_game_by_piece` and
    `simulate_bot_vs_bot` each return `(GameResult, list_of_moves)`.
  - `dump_random_games(count, directory, rng)` plays random games and writes
    them to `moveset0.lan`, `moveset1.lan`, ... in the directory.
  - `write_lines(lines, filename)` writes one move per line.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
selfplaychess [--games N] [--output DIR] [--seed SEED]
```

Plays up to `N` games (default 300) between two freshly initialised network
bots. After each game it prints the result and writes the game's moves to
`DIR/moveset.lan` (default directory `movesets`), overwriting the previous
game. It stops early at the first game that does not end in
`Draw (50-move rule)` and prints how many games that took. `--seed` makes
the run reproducible.

## Using it from Python

```python
import numpy as np

from selfplaychess.board import ChessBoard, Coord
from selfplaychess.bot import ChessBot

board = ChessBoard()
print(board.render())

board.make_move(Coord(1, 4), Coord(3, 4))     # e2e4
print(board.valid_destinations(Coord(6, 3)))  # squares the d7 pawn can reach

bot = ChessBot(False, np.random.default_rng(0))
move = bot.decide_move(board)
print(board.to_san(move.origin, move.target))
print(board.game_result(True))
```

Every function that takes `rng` expects a `numpy.random.Generator`, or
`None` for a fresh unseeded one.

## What it does not do

- No castling, en passant or under-promotion; pawns always promote to queens.
- Threefold repetition is not detected.
- The bots are never trained during play: the command only plays games with
  randomly initialised networks. `NeuralNetwork.backprop` is available for
  training of your own, but network weights cannot be saved or loaded.
- There is no way to play against the bots interactively.