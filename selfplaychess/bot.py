"""A chess player that picks its moves with a neural network."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from selfplaychess.board import ChessBoard, Coord, Move, Piece
from selfplaychess.matrix import Matrix
from selfplaychess.network import NeuralNetwork

# 768 for the board (64 squares x 12 piece kinds), 2 for the side to move,
# 2 for progress toward the 50-move rule.
INPUT_SIZE = 772
# 64 scores for the square to move from, 64 for the square to move to.
OUTPUT_SIZE = 128
HIDDEN_SIZES = (500, 500)

_PIECE_KINDS = 12


class ChessBot:
    """Chooses a piece and then a destination by the network's highest scores."""

    def __init__(self, is_white: bool, rng: np.random.Generator | None = None) -> None:
        self.is_white = is_white
        self.chessnet = NeuralNetwork(INPUT_SIZE, OUTPUT_SIZE, HIDDEN_SIZES, rng)

    def encode_board(self, board: ChessBoard) -> Matrix:
        """Encode the board, the side this bot plays and the 50-move counters."""
        encoding: list[float] = []
        for row in board.board:
            for piece in row:
                block = [0.0] * _PIECE_KINDS
                if piece is not Piece.EMPTY:
                    block[int(piece) - 1] = 1.0
                encoding.extend(block)

        encoding.append(1.0 if self.is_white else 0.0)
        encoding.append(0.0 if self.is_white else 1.0)
        encoding.append(board.fifty_move_progress_captures())
        encoding.append(board.fifty_move_progress_pawns())
        return Matrix.from_vector(encoding)

    @staticmethod
    def _score(output: Matrix, coord: Sequence[int], offset: int) -> float:
        row, col = coord
        return float(output.data[row * 8 + col + offset, 0])

    def most_confident_position(
        self, output: Matrix, choices: Sequence[Coord], is_destination: bool
    ) -> Coord:
        """The choice with the highest score; destinations use the second half of the output."""
        if not choices:
            raise ValueError("bot has no possible choices")
        offset = 64 if is_destination else 0
        best = max(choices, key=lambda coord: self._score(output, coord, offset))
        return Coord(*best)

    def destination_decision(self, output: Matrix, choices: Sequence[Coord]) -> Coord:
        """The choice with the highest score in the first half of the output."""
        if not choices:
            raise ValueError("bot has no possible choices")
        best = max(choices, key=lambda coord: self._score(output, coord, 0))
        return Coord(*best)

    def decide_move(self, board: ChessBoard) -> Move:
        """Pick a legal move for this bot's side."""
        inputs = self.encode_board(board)
        movable = board.movable_pieces(self.is_white)
        if not movable:
            raise ValueError("bot has run out of possible moves; the game should have ended")
        output = self.chessnet.forward(inputs)
        origin = self.most_confident_position(output, movable, False)
        target = self.most_confident_position(output, board.valid_destinations(origin), True)
        return Move(origin, target)