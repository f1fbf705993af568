"""Chess board state, move generation and game-end detection."""

from __future__ import annotations

import enum
from typing import NamedTuple


class Piece(enum.IntEnum):
    """Contents of a square; white pieces come before black ones."""

    EMPTY = 0
    WHITE_PAWN = 1
    WHITE_ROOK = 2
    WHITE_KNIGHT = 3
    WHITE_BISHOP = 4
    WHITE_QUEEN = 5
    WHITE_KING = 6
    BLACK_PAWN = 7
    BLACK_ROOK = 8
    BLACK_KNIGHT = 9
    BLACK_BISHOP = 10
    BLACK_QUEEN = 11
    BLACK_KING = 12

    @property
    def symbol(self) -> str:
        """One-letter symbol: upper case for white, lower case for black, '.' if empty."""
        return _SYMBOLS[self]


_SYMBOLS = {
    Piece.EMPTY: ".",
    Piece.WHITE_PAWN: "P",
    Piece.WHITE_ROOK: "R",
    Piece.WHITE_KNIGHT: "N",
    Piece.WHITE_BISHOP: "B",
    Piece.WHITE_QUEEN: "Q",
    Piece.WHITE_KING: "K",
    Piece.BLACK_PAWN: "p",
    Piece.BLACK_ROOK: "r",
    Piece.BLACK_KNIGHT: "n",
    Piece.BLACK_BISHOP: "b",
    Piece.BLACK_QUEEN: "q",
    Piece.BLACK_KING: "k",
}


class Coord(NamedTuple):
    """A square, with row 0 being rank 1 and col 0 being file a."""

    row: int
    col: int


class Move(NamedTuple):
    origin: Coord
    target: Coord


class GameResult(enum.Enum):
    INSUFFICIENT_MATERIAL = "Draw (Insufficient Material)"
    BLACK_WINS = "Black wins (Checkmate)"
    WHITE_WINS = "White wins (Checkmate)"
    STALEMATE = "Draw (Stalemate)"
    FIFTY_MOVE_RULE = "Draw (50-move rule)"
    ONGOING = "Game continues"

    def __str__(self) -> str:
        return self.value


_KNIGHT_STEPS = ((-2, 1), (-1, 2), (1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1))
_KING_STEPS = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0))
_DIAGONALS = ((1, 1), (1, -1), (-1, 1), (-1, -1))
_STRAIGHTS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_SLIDES = {
    Piece.WHITE_BISHOP: _DIAGONALS,
    Piece.BLACK_BISHOP: _DIAGONALS,
    Piece.WHITE_ROOK: _STRAIGHTS,
    Piece.BLACK_ROOK: _STRAIGHTS,
    Piece.WHITE_QUEEN: _STRAIGHTS + _DIAGONALS,
    Piece.BLACK_QUEEN: _STRAIGHTS + _DIAGONALS,
}
_MINOR_PIECES = frozenset(
    {Piece.WHITE_BISHOP, Piece.BLACK_BISHOP, Piece.WHITE_KNIGHT, Piece.BLACK_KNIGHT}
)
_BACK_RANK = (
    Piece.WHITE_ROOK,
    Piece.WHITE_KNIGHT,
    Piece.WHITE_BISHOP,
    Piece.WHITE_QUEEN,
    Piece.WHITE_KING,
    Piece.WHITE_BISHOP,
    Piece.WHITE_KNIGHT,
    Piece.WHITE_ROOK,
)


class ChessBoard:
    """An 8x8 board in the standard starting position, with move counters."""

    def __init__(self) -> None:
        self.board: list[list[Piece]] = [[Piece.EMPTY] * 8 for _ in range(8)]
        self.board[0] = list(_BACK_RANK)
        self.board[1] = [Piece.WHITE_PAWN] * 8
        self.board[6] = [Piece.BLACK_PAWN] * 8
        self.board[7] = [Piece(piece + 6) for piece in _BACK_RANK]
        self.moves_since_pawn_movement = 0
        self.moves_since_capture = 0

    def copy(self) -> ChessBoard:
        other = ChessBoard.__new__(ChessBoard)
        other.board = [list(row) for row in self.board]
        other.moves_since_pawn_movement = self.moves_since_pawn_movement
        other.moves_since_capture = self.moves_since_capture
        return other

    @staticmethod
    def is_inside(row: int, col: int) -> bool:
        return 0 <= row < 8 and 0 <= col < 8

    @staticmethod
    def is_white_piece(piece: Piece) -> bool:
        return Piece.WHITE_PAWN <= piece <= Piece.WHITE_KING

    @staticmethod
    def is_black_piece(piece: Piece) -> bool:
        return Piece.BLACK_PAWN <= piece <= Piece.BLACK_KING

    @staticmethod
    def same_color(a: Piece, b: Piece) -> bool:
        if a is Piece.EMPTY or b is Piece.EMPTY:
            return False
        return ChessBoard.is_white_piece(a) == ChessBoard.is_white_piece(b)

    def _squares(self):
        for row, pieces in enumerate(self.board):
            for col, piece in enumerate(pieces):
                yield Coord(row, col), piece

    def make_move(self, origin: Coord, target: Coord) -> None:
        """Move a piece, promoting pawns to queens; squares off the board are ignored."""
        if not (self.is_inside(*origin) and self.is_inside(*target)):
            return
        (fr, fc), (tr, tc) = origin, target

        moving = self.board[fr][fc]
        if moving is Piece.WHITE_PAWN and tr == 7:
            self.board[fr][fc] = Piece.WHITE_QUEEN
        elif moving is Piece.BLACK_PAWN and tr == 0:
            self.board[fr][fc] = Piece.BLACK_QUEEN

        if self.board[tr][tc] is not Piece.EMPTY:
            self.moves_since_capture = 0
        else:
            self.moves_since_capture += 1

        if self.board[fr][fc] in (Piece.WHITE_PAWN, Piece.BLACK_PAWN):
            self.moves_since_pawn_movement = 0
        else:
            self.moves_since_pawn_movement += 1

        self.board[tr][tc] = self.board[fr][fc]
        self.board[fr][fc] = Piece.EMPTY

    def valid_moves(self, origin: Coord) -> set[Coord]:
        """Targets of the piece at origin that do not leave its own king in check."""
        if not self.is_inside(*origin):
            return set()
        piece = self.board[origin[0]][origin[1]]
        if piece is Piece.EMPTY:
            return set()
        white = self.is_white_piece(piece)
        legal = set()
        for target in self.pseudo_legal_moves(origin):
            trial = self.copy()
            trial.make_move(origin, target)
            if not trial.is_in_check(white):
                legal.add(target)
        return legal

    def pseudo_legal_moves(self, origin: Coord) -> set[Coord]:
        """Targets of the piece at origin, ignoring whether its king ends in check."""
        if not self.is_inside(*origin):
            return set()
        r, c = origin
        piece = self.board[r][c]
        moves: set[Coord] = set()
        if piece is Piece.EMPTY:
            return moves

        if piece in (Piece.WHITE_PAWN, Piece.BLACK_PAWN):
            white = piece is Piece.WHITE_PAWN
            step, start = (1, 1) if white else (-1, 6)
            is_enemy = self.is_black_piece if white else self.is_white_piece
            ahead = r + step
            if self.is_inside(ahead, c) and self.board[ahead][c] is Piece.EMPTY:
                moves.add(Coord(ahead, c))
                if r == start and self.board[r + 2 * step][c] is Piece.EMPTY:
                    moves.add(Coord(r + 2 * step, c))
            for dc in (-1, 1):
                if self.is_inside(ahead, c + dc) and is_enemy(self.board[ahead][c + dc]):
                    moves.add(Coord(ahead, c + dc))
        elif piece in (Piece.WHITE_KNIGHT, Piece.BLACK_KNIGHT, Piece.WHITE_KING, Piece.BLACK_KING):
            steps = _KNIGHT_STEPS if piece in (Piece.WHITE_KNIGHT, Piece.BLACK_KNIGHT) else _KING_STEPS
            for dr, dc in steps:
                nr, nc = r + dr, c + dc
                if self.is_inside(nr, nc) and not self.same_color(piece, self.board[nr][nc]):
                    moves.add(Coord(nr, nc))
        else:
            for dr, dc in _SLIDES[piece]:
                nr, nc = r + dr, c + dc
                while self.is_inside(nr, nc):
                    occupant = self.board[nr][nc]
                    if occupant is Piece.EMPTY:
                        moves.add(Coord(nr, nc))
                    else:
                        if not self.same_color(piece, occupant):
                            moves.add(Coord(nr, nc))
                        break
                    nr, nc = nr + dr, nc + dc
        return moves

    def render(self) -> str:
        """The board as text, rank 8 at the top."""
        files = "  a b c d e f g h\n"
        lines = [files]
        for r in range(7, -1, -1):
            symbols = "".join(f"{piece.symbol} " for piece in self.board[r])
            lines.append(f"{r + 1} {symbols}{r + 1}\n")
        lines.append(files)
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def piece_at(self, row: int, col: int) -> Piece:
        if not self.is_inside(row, col):
            return Piece.EMPTY
        return self.board[row][col]

    def is_square_attacked(self, target: Coord, by_white: bool) -> bool:
        return any(
            piece is not Piece.EMPTY
            and self.is_white_piece(piece) == by_white
            and target in self.pseudo_legal_moves(origin)
            for origin, piece in self._squares()
        )

    def is_in_check(self, white: bool) -> bool:
        """Whether the given side's king is attacked; a missing king counts as check."""
        king = Piece.WHITE_KING if white else Piece.BLACK_KING
        square = next((coord for coord, piece in self._squares() if piece is king), None)
        if square is None:
            return True
        return self.is_square_attacked(square, not white)

    def _own_pieces(self, white: bool):
        for coord, piece in self._squares():
            if piece is not Piece.EMPTY and self.is_white_piece(piece) == white:
                yield coord

    def has_legal_moves(self, white: bool) -> bool:
        return any(self.valid_moves(coord) for coord in self._own_pieces(white))

    def insufficient_material(self) -> bool:
        pieces = [piece for _, piece in self._squares() if piece is not Piece.EMPTY]
        if len(pieces) == 2:
            return True
        return len(pieces) == 3 and any(piece in _MINOR_PIECES for piece in pieces)

    def game_result(self, white_turn: bool) -> GameResult:
        if self.insufficient_material():
            return GameResult.INSUFFICIENT_MATERIAL
        if not self.has_legal_moves(white_turn):
            if self.is_in_check(white_turn):
                return GameResult.BLACK_WINS if white_turn else GameResult.WHITE_WINS
            return GameResult.STALEMATE
        if self.moves_since_capture >= 50 and self.moves_since_pawn_movement >= 50:
            return GameResult.FIFTY_MOVE_RULE
        return GameResult.ONGOING

    @staticmethod
    def coord_to_str(coord: Coord) -> str:
        row, col = coord
        return chr(ord("a") + col) + chr(ord("1") + row)

    def to_san(self, origin: Coord, target: Coord) -> str:
        """Long algebraic notation of a move, with 'q' appended for a promotion."""
        notation = self.coord_to_str(origin) + self.coord_to_str(target)
        moving = self.piece_at(*origin)
        if (moving is Piece.WHITE_PAWN and target[0] == 7) or (
            moving is Piece.BLACK_PAWN and target[0] == 0
        ):
            notation += "q"
        return notation

    def movable_pieces(self, white: bool) -> list[Coord]:
        """Squares of the given side's pieces that have a legal move, row by row."""
        return [coord for coord in self._own_pieces(white) if self.valid_moves(coord)]

    def valid_destinations(self, origin: Coord) -> list[Coord]:
        """Legal targets of the piece at origin, row by row."""
        return sorted(self.valid_moves(origin))

    def fifty_move_progress_pawns(self) -> float:
        return self.moves_since_pawn_movement / 50.0

    def fifty_move_progress_captures(self) -> float:
        return self.moves_since_capture / 50.0