"""The state of a chess game: the board and the rules about check."""

from __future__ import annotations

from typing import Iterator

from .pieces import (
    BOARD_SIZE,
    Bishop,
    ChessPiece,
    Color,
    King,
    Knight,
    Pawn,
    PieceType,
    Queen,
    Rook,
    Square,
)

_BACK_RANK = (Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook)


class Game:
    """A chess board mapping squares to the pieces standing on them."""

    def __init__(self) -> None:
        self._board: dict[Square, ChessPiece] = {}
        self.set_start_board()

    def set_start_board(self) -> None:
        """Put all pieces on their starting squares."""
        for color, back_row, pawn_row in ((Color.WHITE, 7, 6), (Color.BLACK, 0, 1)):
            for col, piece_class in enumerate(_BACK_RANK):
                self._place(piece_class(color), back_row, col)
            for col in range(BOARD_SIZE):
                self._place(Pawn(color), pawn_row, col)

    def _place(self, piece: ChessPiece, row: int, col: int) -> None:
        piece.row, piece.col = row, col
        self._board[(row, col)] = piece

    def _squares(self) -> Iterator[tuple[Square, ChessPiece]]:
        yield from sorted(self._board.items(), key=lambda item: item[0])

    def _pieces_of(self, color: Color) -> Iterator[tuple[Square, ChessPiece]]:
        return ((sq, p) for sq, p in self._squares() if p.color is color)

    def get_piece(self, row: int, col: int) -> ChessPiece | None:
        """The piece on the square, or None when it is empty."""
        return self._board.get((row, col))

    def set_piece(self, row: int, col: int, piece: ChessPiece | None) -> None:
        """Put a piece on the square, replacing what stood there; None empties it."""
        if piece is None:
            self._board.pop((row, col), None)
        else:
            self._board[(row, col)] = piece

    def clear(self) -> None:
        """Remove every piece from the board."""
        self._board.clear()

    def snapshot(self) -> dict[Square, ChessPiece]:
        """A copy of the square-to-piece mapping."""
        return dict(self._board)

    def restore(self, board: dict[Square, ChessPiece | None]) -> None:
        """Replace the board with the given mapping, moving pieces to their keys."""
        entries = list(board.items())
        self.clear()
        for (row, col), piece in entries:
            if piece is not None:
                self._place(piece, row, col)

    def move(self, piece: ChessPiece, row: int, col: int) -> bool:
        """Move a piece to (row, col) if that leaves its own king safe.

        Returns True when the move was made; otherwise the board is unchanged.
        """
        if piece.kind is PieceType.KING:
            if (
                self.checkmate(Color.WHITE)
                or self.checkmate(Color.BLACK)
                or self.stalemate(Color.WHITE)
                or self.stalemate(Color.BLACK)
            ):
                return False
            threatened = {
                square
                for _, enemy in self._pieces_of(piece.color.opponent)
                for square in enemy.valid_moves(self)
            }
            if (row, col) in threatened:
                return False

        origin_row, origin_col = piece.row, piece.col
        captured = self.get_piece(row, col)

        self.set_piece(row, col, piece)
        self.set_piece(origin_row, origin_col, None)
        piece.row, piece.col = row, col

        if not self.in_check(piece.color):
            return True

        self.set_piece(origin_row, origin_col, piece)
        self.set_piece(row, col, captured)
        piece.row, piece.col = origin_row, origin_col
        return False

    def in_check(self, color: Color) -> bool:
        """Whether the king of this colour is attacked."""
        kings = [
            square
            for square, piece in self._pieces_of(color)
            if piece.kind is PieceType.KING
        ]
        for square in kings:
            for _, enemy in self._pieces_of(color.opponent):
                if square in enemy.valid_moves(self):
                    return True
        return False

    def checkmate(self, color: Color) -> bool:
        """Whether this colour is in check with no move out of it."""
        return self.in_check(color) and not self.has_legal_move(color)

    def stalemate(self, color: Color) -> bool:
        """Whether this colour has no legal move while not in check."""
        return not self.in_check(color) and not self.has_legal_move(color)

    def has_legal_move(self, color: Color) -> bool:
        """Whether some piece of this colour can move without leaving its king in check."""
        for (row, col), piece in self._pieces_of(color):
            for target in piece.valid_moves(self):
                original = self.get_piece(*target)
                self.set_piece(*target, piece)
                self.set_piece(row, col, None)

                still_in_check = self.in_check(color)

                self.set_piece(row, col, piece)
                self.set_piece(*target, original)

                if not still_in_check:
                    return True
        return False