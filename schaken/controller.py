"""Game flow behind the board: selecting, moving, marking, undo and redo."""

from __future__ import annotations

from os import PathLike
from typing import Callable, Union

from .board import BoardView
from .game import Game
from .pieces import BOARD_SIZE, ChessPiece, Color, Square
from .savefile import SaveFileError, load_game, save_game

PathArg = Union[str, "PathLike[str]"]
Board = dict[Square, ChessPiece]


def _on_board(square: Square) -> bool:
    row, col = square
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class ChessController:
    """Handles clicks and menu commands and keeps the board view in step with the game."""

    def __init__(
        self,
        view: BoardView | None = None,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self.game = Game()
        self.view = view if view is not None else BoardView()
        self.notify = notify
        self.messages: list[str] = []
        self.selected: ChessPiece | None = None
        self.turn = Color.WHITE
        self.display_moves = True
        self.display_kills = True
        self.display_threats = True
        self.moves_history: list[Board] = []
        self.redo_history: list[Board] = []
        self.update()

    def _message(self, text: str) -> None:
        self.messages.append(text)
        if self.notify is not None:
            self.notify(text)

    def _moves_of(self, piece: ChessPiece) -> list[Square]:
        return [square for square in piece.valid_moves(self.game) if _on_board(square)]

    def _pieces(self) -> list[tuple[Square, ChessPiece]]:
        return sorted(self.game.snapshot().items(), key=lambda item: item[0])

    def _announce(self) -> None:
        game = self.game
        if game.checkmate(Color.WHITE):
            self._message("Checkmate! Black wins!")
        elif game.checkmate(Color.BLACK):
            self._message("Checkmate! White wins!")
        elif game.in_check(Color.BLACK):
            self._message("Black is in check!")
        elif game.in_check(Color.WHITE):
            self._message("White is in check!")
        elif game.stalemate(self.turn):
            self._message("No more moves, It's a draw! ")

    def _mark_threatened(self) -> None:
        for _, attacker in self._pieces():
            if attacker.color is self.turn:
                continue
            for row, col in self._moves_of(attacker):
                target = self.game.get_piece(row, col)
                if target is not None and target.color is self.turn:
                    self.view.set_piece_threat(row, col, True)

    def clicked(self, row: int, col: int) -> None:
        """Handle a click on a square: select a piece, or move the selected one."""
        self.moves_history.append(self.game.snapshot())
        if self.selected is None:
            piece = self.game.get_piece(row, col)
            if piece is None:
                self._message("No piece selected. Click on a valid piece.")
                return
            if piece.color is not self.turn:
                self._message("Wrong color selected.")
                return
            self.selected = piece
            self.view.set_tile_select(row, col, True)
            if self.display_moves:
                for r, c in self._moves_of(piece):
                    self.view.set_tile_focus(r, c, True)
        else:
            piece = self.selected
            moves = self._moves_of(piece)
            if (row, col) in moves:
                prev_row, prev_col = piece.position
                if self.game.move(piece, row, col):
                    self.view.clear_board()
                    self.update()
                    self.turn = self.turn.opponent
                    self._announce()
                self.view.set_tile_select(prev_row, prev_col, False)
                self.view.set_tile_threat(prev_row, prev_col, False)
            else:
                self._message("Invalid move.")
            for r, c in moves:
                self.view.set_tile_focus(r, c, False)
            self.selected = None

        if self.display_threats:
            self._mark_threatened()
        self.update()
        self.redo_history.append(self.game.snapshot())

    def new_game(self) -> None:
        """Clear all markings and set up the starting position with white to move."""
        self.game.clear()
        self.view.remove_all_marking()
        self.view.remove_all_piece_threats()
        self.game.set_start_board()
        self.turn = Color.WHITE
        self.update()

    def undo(self) -> None:
        """Step back to the previous recorded board."""
        if not self.moves_history or len(self.redo_history) < 2:
            self._message("No undos available.")
            return
        self.turn = self.turn.opponent
        self.moves_history.append(self.redo_history.pop())
        self.game.clear()
        self.game.restore(self.redo_history[-1])
        self.update()
        self._message("You have chosen to undo.")

    def redo(self) -> None:
        """Step forward to the most recently undone board."""
        if not self.moves_history:
            self._message("No redos available.")
            return
        self.turn = self.turn.opponent
        latest = self.moves_history[-1]
        self.redo_history.append(latest)
        self.game.clear()
        self.game.restore(latest)
        self.moves_history.pop()
        self.update()
        self._message("You have chosen to redo.")

    def visualization_change(self) -> None:
        """Report the current state of the three display options."""
        flags = "".join(
            "T" if flag else "F"
            for flag in (self.display_moves, self.display_kills, self.display_threats)
        )
        self._message(f"Visualization changed : {flags}")

    def update(self) -> None:
        """Make the pieces shown on the view match the game."""
        self.view.clear_board()
        for (row, col), piece in self._pieces():
            self.view.set_item(row, col, piece)

    def save(self, path: PathArg) -> bool:
        """Write the board to a file; False and a message when that fails."""
        try:
            save_game(self.game, path)
        except SaveFileError as exc:
            self._message(str(exc))
            return False
        return True

    def open(self, path: PathArg) -> bool:
        """Load the board from a file; False and a message when that fails."""
        try:
            load_game(self.game, path)
        except SaveFileError as exc:
            self._message(str(exc))
            return False
        self.update()
        self._message("Game loaded successfully")
        return True