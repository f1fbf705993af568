"""Self-play games between random players and network bots."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

import numpy as np

from selfplaychess.board import ChessBoard, Coord, GameResult, Move
from selfplaychess.bot import ChessBot


def write_lines(lines: Iterable[str], filename: str | Path) -> int:
    """Write each line followed by a newline; return how many were written."""
    lines = list(lines)
    with open(filename, "w", encoding="utf-8") as handle:
        for line in lines:
            handle.write(f"{line}\n")
    print(f"Successfully wrote {len(lines)} lines to '{filename}'")
    return len(lines)


def _rng(rng: np.random.Generator | None) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def _legal_moves(board: ChessBoard, white: bool) -> list[Move]:
    moves = []
    for row in range(8):
        for col in range(8):
            piece = board.piece_at(row, col)
            if not (board.is_white_piece(piece) if white else board.is_black_piece(piece)):
                continue
            origin = Coord(row, col)
            moves.extend(Move(origin, target) for target in board.valid_destinations(origin))
    return moves


def simulate_random_game(
    rng: np.random.Generator | None = None,
) -> tuple[GameResult, list[str]]:
    """Play uniformly random legal moves until the game ends."""
    rng = _rng(rng)
    board = ChessBoard()
    history: list[str] = []
    white_turn = True
    while True:
        moves = _legal_moves(board, white_turn)
        result = board.game_result(white_turn)
        if result is not GameResult.ONGOING:
            return result, history
        origin, target = moves[int(rng.integers(len(moves)))]
        history.append(board.to_san(origin, target))
        board.make_move(origin, target)
        white_turn = not white_turn


def simulate_random_game_by_piece(
    rng: np.random.Generator | None = None,
) -> tuple[GameResult, list[str]]:
    """Play random games by first picking a movable piece, then one of its targets."""
    rng = _rng(rng)
    board = ChessBoard()
    history: list[str] = []
    white_turn = True
    while True:
        result = board.game_result(white_turn)
        if result is not GameResult.ONGOING:
            return result, history
        pieces = board.movable_pieces(white_turn)
        origin = pieces[int(rng.integers(len(pieces)))]
        options = board.valid_destinations(origin)
        target = options[int(rng.integers(len(options)))]
        history.append(board.to_san(origin, target))
        board.make_move(origin, target)
        white_turn = not white_turn


def simulate_bot_vs_bot(
    rng: np.random.Generator | None = None,
) -> tuple[GameResult, list[str]]:
    """Play two freshly initialised bots against each other."""
    rng = _rng(rng)
    bots = {True: ChessBot(True, rng), False: ChessBot(False, rng)}
    board = ChessBoard()
    history: list[str] = []
    white_turn = True
    while True:
        result = board.game_result(white_turn)
        if result is not GameResult.ONGOING:
            return result, history
        origin, target = bots[white_turn].decide_move(board)
        history.append(board.to_san(origin, target))
        board.make_move(origin, target)
        white_turn = not white_turn


def dump_random_games(
    count: int,
    directory: str | Path = "movesets",
    rng: np.random.Generator | None = None,
) -> list[Path]:
    """Play random games and write each to ``moveset<N>.lan`` in directory."""
    rng = _rng(rng)
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for number in range(count):
        result, history = simulate_random_game(rng)
        print(result)
        path = directory / f"moveset{number}.lan"
        write_lines(history, path)
        paths.append(path)
    return paths


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play network bots against each other.")
    parser.add_argument("--games", type=int, default=300, help="number of games to play")
    parser.add_argument("--output", default="movesets", help="directory for the move list")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = np.random.default_rng(args.seed)
    directory = Path(args.output)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        print(f"Error: Could not create the directory '{directory}': {error}", file=sys.stderr)
        return 1

    for number in range(args.games):
        result, history = simulate_bot_vs_bot(rng)
        print(result)
        path = directory / "moveset.lan"
        try:
            write_lines(history, path)
        except OSError:
            print(f"Error: Could not open the file '{path}'", file=sys.stderr)
        if result is not GameResult.FIFTY_MOVE_RULE:
            print(f"took {number} games")
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())