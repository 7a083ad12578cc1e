"""Chess pieces and the moves each one may make on a board."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, ClassVar, Iterable

if TYPE_CHECKING:
    from .game import Game

BOARD_SIZE = 8

Square = tuple[int, int]

_DIAGONALS: tuple[Square, ...] = ((1, 1), (-1, -1), (-1, 1), (1, -1))
_STRAIGHTS: tuple[Square, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))
_KNIGHT_JUMPS: tuple[Square, ...] = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1),
)


class Color(enum.Enum):
    """The side a piece plays for."""

    BLACK = 0
    WHITE = 1

    @property
    def opponent(self) -> Color:
        return Color.WHITE if self is Color.BLACK else Color.BLACK


class PieceType(enum.Enum):
    """The kind of a chess piece."""

    KING = "king"
    QUEEN = "queen"
    BISHOP = "bishop"
    KNIGHT = "knight"
    ROOK = "rook"
    PAWN = "pawn"


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class ChessPiece:
    """A piece of one colour standing on a square of the board."""

    kind: ClassVar[PieceType | None] = None
    name: ClassVar[str] = ""

    def __init__(self, color: Color, row: int = 0, col: int = 0) -> None:
        self.color = color
        self.row = row
        self.col = col
        self.selected = False

    @property
    def position(self) -> Square:
        return (self.row, self.col)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color.name}, {self.row}, {self.col})"

    def valid_moves(self, game: Game) -> list[Square]:
        """Squares this piece may move to; a bare piece has none."""
        return []

    def _slide(self, game: Game, directions: Iterable[Square]) -> list[Square]:
        moves: list[Square] = []
        for dr, dc in directions:
            row, col = self.row + dr, self.col + dc
            while _on_board(row, col):
                other = game.get_piece(row, col)
                if other is None:
                    moves.append((row, col))
                else:
                    if other.color is not self.color:
                        moves.append((row, col))
                    break
                row += dr
                col += dc
        return moves

    def _can_land(self, game: Game, row: int, col: int) -> bool:
        other = game.get_piece(row, col)
        return other is None or other.color is not self.color


class Pawn(ChessPiece):
    kind = PieceType.PAWN
    name = "Pion"

    def valid_moves(self, game: Game) -> list[Square]:
        moves: list[Square] = []
        step = -1 if self.color is Color.WHITE else 1
        start_row = 6 if self.color is Color.WHITE else 1
        ahead = self.row + step

        if game.get_piece(ahead, self.col) is None:
            moves.append((ahead, self.col))
            two_ahead = self.row + 2 * step
            if self.row == start_row and game.get_piece(two_ahead, self.col) is None:
                moves.append((two_ahead, self.col))

        for col in (self.col + 1, self.col - 1):
            other = game.get_piece(ahead, col)
            if other is not None and other.color is not self.color:
                moves.append((ahead, col))
        return moves


class Rook(ChessPiece):
    kind = PieceType.ROOK
    name = "Toren"

    def valid_moves(self, game: Game) -> list[Square]:
        return self._slide(game, _STRAIGHTS)


class Knight(ChessPiece):
    kind = PieceType.KNIGHT
    name = "Paard"

    def valid_moves(self, game: Game) -> list[Square]:
        return [
            (self.row + dr, self.col + dc)
            for dr, dc in _KNIGHT_JUMPS
            if _on_board(self.row + dr, self.col + dc)
            and self._can_land(game, self.row + dr, self.col + dc)
        ]


class Bishop(ChessPiece):
    kind = PieceType.BISHOP
    name = "Loper"

    def valid_moves(self, game: Game) -> list[Square]:
        return self._slide(game, _DIAGONALS)


class King(ChessPiece):
    kind = PieceType.KING
    name = "Koning"

    def valid_moves(self, game: Game) -> list[Square]:
        return [
            (self.row + dr, self.col + dc)
            for dr in (-1, 0, 1)
            for dc in (-1, 0, 1)
            if _on_board(self.row + dr, self.col + dc)
            and self._can_land(game, self.row + dr, self.col + dc)
        ]


class Queen(ChessPiece):
    kind = PieceType.QUEEN
    name = "Koningin"

    def valid_moves(self, game: Game) -> list[Square]:
        return self._slide(game, _DIAGONALS) + self._slide(game, _STRAIGHTS)