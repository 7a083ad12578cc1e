"""The desktop window: a canvas showing the board, with file, game and display menus."""

from __future__ import annotations

import tkinter as tk
from tkinter import filedialog, messagebox
from typing import Any, Sequence

from .board import BoardView
from .controller import ChessController
from .pieces import BOARD_SIZE, Color, PieceType

_FILE_TYPES = [("Chess File", "*.chs"), ("All Files", "*")]
_EXIT_TITLE = "Spel verlaten"
_EXIT_QUESTION = (
    "Bent u zeker dat u het spel wil verlaten?\n"
    "Niet opgeslagen wijzigingen gaan verloren."
)

_GLYPHS = {
    (PieceType.KING, Color.WHITE): "\u2654",
    (PieceType.QUEEN, Color.WHITE): "\u2655",
    (PieceType.ROOK, Color.WHITE): "\u2656",
    (PieceType.BISHOP, Color.WHITE): "\u2657",
    (PieceType.KNIGHT, Color.WHITE): "\u2658",
    (PieceType.PAWN, Color.WHITE): "\u2659",
    (PieceType.KING, Color.BLACK): "\u265a",
    (PieceType.QUEEN, Color.BLACK): "\u265b",
    (PieceType.ROOK, Color.BLACK): "\u265c",
    (PieceType.BISHOP, Color.BLACK): "\u265d",
    (PieceType.KNIGHT, Color.BLACK): "\u265e",
    (PieceType.PAWN, Color.BLACK): "\u265f",
}


def _hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


class _TkDialogs:
    """Message boxes and file pickers parented to the main window."""

    def __init__(self, root: tk.Misc) -> None:
        self.root = root

    def show(self, text: str) -> None:
        messagebox.showinfo("Schaken", text, parent=self.root)

    def confirm(self, title: str, text: str) -> bool:
        return bool(messagebox.askyesno(title, text, parent=self.root))

    def ask_open_path(self) -> str:
        return filedialog.askopenfilename(
            parent=self.root, title="Load game", filetypes=_FILE_TYPES
        ) or ""

    def ask_save_path(self) -> str:
        return filedialog.asksaveasfilename(
            parent=self.root, title="Save game", filetypes=_FILE_TYPES
        ) or ""


class ChessWindow:
    """Draws the board and turns mouse clicks and menu commands into game actions."""

    def __init__(
        self,
        controller: ChessController | None = None,
        *,
        dialogs: Any = None,
        canvas: Any = None,
    ) -> None:
        self.controller = controller if controller is not None else ChessController(BoardView())
        self.controller.notify = self._show
        self._dialogs = dialogs
        self.canvas = canvas
        self.root: tk.Tk | None = None
        self._flags: dict[str, tk.BooleanVar] = {}
        if canvas is not None:
            self.redraw()

    def _show(self, text: str) -> None:
        if self._dialogs is not None:
            self._dialogs.show(text)

    def attach(self, root: tk.Tk) -> None:
        """Build the canvas and menus inside a Tk root window."""
        self.root = root
        if self._dialogs is None:
            self._dialogs = _TkDialogs(root)
        root.title("Schaken")
        size = BOARD_SIZE * self.controller.view.piece_width
        self.canvas = tk.Canvas(root, width=size, height=size, highlightthickness=0)
        self.canvas.pack()
        self.canvas.bind("<Button-1>", self.on_click)
        self._build_menus(root)
        root.protocol("WM_DELETE_WINDOW", self.confirm_exit)
        self.redraw()

    def _build_menus(self, root: tk.Tk) -> None:
        menubar = tk.Menu(root)

        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="New", underline=0, accelerator="Ctrl+N", command=self.new_game)
        file_menu.add_command(label="Open", underline=0, accelerator="Ctrl+O", command=self.open_file)
        file_menu.add_command(label="Save", underline=0, accelerator="Ctrl+S", command=self.save_file)
        file_menu.add_command(label="Exit", underline=0, accelerator="Ctrl+Q", command=self.confirm_exit)
        menubar.add_cascade(label="File", underline=0, menu=file_menu)

        game_menu = tk.Menu(menubar, tearoff=False)
        game_menu.add_command(label="Undo", underline=0, accelerator="Ctrl+Z", command=self._undo)
        game_menu.add_command(label="redo", underline=0, accelerator="Ctrl+Y", command=self._redo)
        menubar.add_cascade(label="Game", underline=0, menu=game_menu)

        visualize_menu = tk.Menu(menubar, tearoff=False)
        for attr, label, underline in (
            ("display_moves", "valid moves", 0),
            ("display_kills", "threathed enemy", 9),
            ("display_threats", "threathed player", 9),
        ):
            var = tk.BooleanVar(root, value=getattr(self.controller, attr))
            self._flags[attr] = var
            visualize_menu.add_checkbutton(
                label=label,
                underline=underline,
                variable=var,
                command=self._visualization_changed,
            )
        menubar.add_cascade(label="Visualize", underline=0, menu=visualize_menu)
        root.config(menu=menubar)

        for key, action in (
            ("<Control-n>", self.new_game),
            ("<Control-o>", self.open_file),
            ("<Control-s>", self.save_file),
            ("<Control-q>", self.confirm_exit),
            ("<Control-z>", self._undo),
            ("<Control-y>", self._redo),
        ):
            root.bind(key, lambda _event, act=action: act())

    def _visualization_changed(self) -> None:
        for attr, var in self._flags.items():
            setattr(self.controller, attr, bool(var.get()))
        self.controller.visualization_change()
        self.redraw()

    def _undo(self) -> None:
        self.controller.undo()
        self.redraw()

    def _redo(self) -> None:
        self.controller.redo()
        self.redraw()

    def on_click(self, event: Any) -> None:
        """Pass a mouse click on the board to the controller."""
        cell = self.controller.view.cell_from_point(event.x, event.y)
        if cell is None:
            return
        self.controller.clicked(*cell)
        self.redraw()

    def new_game(self) -> None:
        self.controller.new_game()
        self.redraw()

    def open_file(self) -> bool:
        """Ask for a file and load the game from it; False when nothing was loaded."""
        if self._dialogs is None:
            return False
        path = self._dialogs.ask_open_path()
        if not path:
            return False
        loaded = self.controller.open(path)
        self.redraw()
        return loaded

    def save_file(self) -> bool:
        """Ask for a file and save the game to it; False when nothing was saved."""
        if self._dialogs is None:
            return False
        path = self._dialogs.ask_save_path()
        if not path:
            return False
        return self.controller.save(path)

    def confirm_exit(self) -> bool:
        """Ask whether to leave the game and close the window if so."""
        if self._dialogs is not None and not self._dialogs.confirm(_EXIT_TITLE, _EXIT_QUESTION):
            return False
        if self.root is not None:
            self.root.destroy()
        return True

    def redraw(self) -> None:
        """Paint every square and piece of the board view onto the canvas."""
        if self.canvas is None:
            return
        view = self.controller.view
        width = view.piece_width
        self.canvas.delete("all")
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                x0, y0 = col * width, row * width
                self.canvas.create_rectangle(
                    x0, y0, x0 + width, y0 + width,
                    fill=_hex(view.tile_color(row, col)),
                    outline="",
                )
                shown = view.piece_at(row, col)
                tint = view.piece_tint(row, col)
                if shown is not None and tint is not None:
                    self.canvas.create_text(
                        x0 + width / 2, y0 + width / 2,
                        text=_GLYPHS[shown],
                        fill=_hex(tint),
                        font=("DejaVu Sans", width * 2 // 3),
                    )


def main(argv: Sequence[str] | None = None) -> int:
    """Open the chess window and run until it is closed."""
    root = tk.Tk()
    ChessWindow().attach(root)
    root.mainloop()
    return 0