"""A display-independent model of the chessboard scene: pieces, markings and colours."""

from __future__ import annotations

from typing import Callable

from .pieces import BOARD_SIZE, ChessPiece, Color, PieceType, Square

RGB = tuple[int, int, int]

DEFAULT_PIECE_WIDTH = 45
RESOURCE_PATH = "../resources/"

LIGHT_SQUARE: RGB = (255, 255, 255)
DARK_SQUARE: RGB = (160, 160, 164)
DARK_SQUARE_FOCUS: RGB = (100, 100, 170)
LIGHT_SQUARE_FOCUS: RGB = (100, 100, 255)
DARK_SQUARE_FOCUS_DANGER: RGB = (170, 100, 100)
LIGHT_SQUARE_FOCUS_DANGER: RGB = (255, 100, 100)
DARK_SQUARE_SELECTED: RGB = (100, 170, 100)
LIGHT_SQUARE_SELECTED: RGB = (100, 255, 100)

LIGHT_PIECE: RGB = (0, 0, 0)
DARK_PIECE: RGB = (0, 0, 0)
LIGHT_PIECE_THREAT: RGB = (100, 0, 0)
DARK_PIECE_THREAT: RGB = (100, 0, 0)


def piece_filename(kind: PieceType | None, color: Color) -> str:
    """Path of the image for a piece; empty when there is no piece."""
    if kind is None:
        return ""
    side = "white" if color is Color.WHITE else "black"
    return f"{RESOURCE_PATH}{side}-{kind.value}.svg"


def _check_square(row: int, col: int) -> Square:
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise IndexError(f"square ({row}, {col}) is off the board")
    return (row, col)


class BoardView:
    """What the board shows: a piece per square and four kinds of marking."""

    def __init__(
        self,
        piece_width: int = DEFAULT_PIECE_WIDTH,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.piece_width = piece_width
        self.on_change = on_change
        self._pieces: dict[Square, tuple[PieceType, Color]] = {}
        self._focus: set[Square] = set()
        self._threat: set[Square] = set()
        self._select: set[Square] = set()
        self._piece_threat: set[Square] = set()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()

    @staticmethod
    def _mark(marks: set[Square], square: Square, flag: bool) -> None:
        if flag:
            marks.add(square)
        else:
            marks.discard(square)

    def piece_at(self, row: int, col: int) -> tuple[PieceType, Color] | None:
        """The kind and colour of the piece shown on the square, if any."""
        return self._pieces.get(_check_square(row, col))

    def set_item(self, row: int, col: int, piece: ChessPiece | None) -> None:
        """Show a piece on the square; None empties it."""
        square = _check_square(row, col)
        if piece is None or piece.kind is None:
            self._pieces.pop(square, None)
        else:
            self._pieces[square] = (piece.kind, piece.color)
        self._notify()

    def remove_item(self, row: int, col: int) -> None:
        self.set_item(row, col, None)

    def clear_board(self) -> None:
        """Remove every piece from the view; markings stay."""
        self._pieces.clear()
        self._notify()

    def set_tile_focus(self, row: int, col: int, flag: bool = True) -> None:
        self._mark(self._focus, _check_square(row, col), flag)
        self._notify()

    def set_tile_threat(self, row: int, col: int, flag: bool = True) -> None:
        self._mark(self._threat, _check_square(row, col), flag)
        self._notify()

    def set_tile_select(self, row: int, col: int, flag: bool) -> None:
        self._mark(self._select, _check_square(row, col), flag)
        self._notify()

    def set_piece_threat(self, row: int, col: int, flag: bool) -> None:
        self._mark(self._piece_threat, _check_square(row, col), flag)
        self._notify()

    def remove_all_marking(self) -> None:
        for marks in (self._focus, self._select, self._piece_threat, self._threat):
            marks.clear()
        self._notify()

    def remove_all_tile_danger(self) -> None:
        self._threat.clear()
        self._notify()

    def remove_all_tile_focus(self) -> None:
        self._focus.clear()
        self._notify()

    def remove_all_tile_selection(self) -> None:
        self._select.clear()
        self._notify()

    def remove_all_piece_threats(self) -> None:
        self._piece_threat.clear()
        self._notify()

    def has_tile_focus(self, row: int, col: int) -> bool:
        return _check_square(row, col) in self._focus

    def has_tile_threat(self, row: int, col: int) -> bool:
        return _check_square(row, col) in self._threat

    def has_tile_select(self, row: int, col: int) -> bool:
        return _check_square(row, col) in self._select

    def has_piece_threat(self, row: int, col: int) -> bool:
        return _check_square(row, col) in self._piece_threat

    def tile_color(self, row: int, col: int) -> RGB:
        """Background colour of the square given its markings."""
        square = _check_square(row, col)
        light = row % 2 == col % 2
        if square in self._select:
            return LIGHT_SQUARE_SELECTED if light else DARK_SQUARE_SELECTED
        if square in self._focus:
            if square in self._threat:
                return LIGHT_SQUARE_FOCUS_DANGER if light else DARK_SQUARE_FOCUS_DANGER
            return LIGHT_SQUARE_FOCUS if light else DARK_SQUARE_FOCUS
        return LIGHT_SQUARE if light else DARK_SQUARE

    def piece_tint(self, row: int, col: int) -> RGB | None:
        """Colour the piece image is tinted with, or None for an empty square."""
        shown = self.piece_at(row, col)
        if shown is None:
            return None
        threatened = (row, col) in self._piece_threat
        if shown[1] is Color.WHITE:
            return LIGHT_PIECE_THREAT if threatened else LIGHT_PIECE
        return DARK_PIECE_THREAT if threatened else DARK_PIECE

    def cell_from_point(self, x: float, y: float) -> Square | None:
        """The square under a point in scene coordinates, or None outside the board."""
        limit = BOARD_SIZE * self.piece_width
        if x < 0 or y < 0 or x > limit or y > limit:
            return None
        row = int(y) // self.piece_width
        col = int(x) // self.piece_width
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return (row, col)
        return None