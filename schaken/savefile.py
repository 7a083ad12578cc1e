"""Reading and writing games as a sequence of length-prefixed UTF-16 strings."""

from __future__ import annotations

import struct
from os import PathLike
from pathlib import Path
from typing import Iterator, Union

from .game import Game
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

FILE_SUFFIX = ".chs"
EMPTY_CODE = "."

_NULL_LENGTH = 0xFFFFFFFF
_LENGTH = struct.Struct(">I")

_TYPE_LETTERS = {
    PieceType.ROOK: "R",
    PieceType.KNIGHT: "H",
    PieceType.BISHOP: "B",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
    PieceType.PAWN: "P",
}
_COLOR_LETTERS = {Color.WHITE: "w", Color.BLACK: "b"}
_CLASSES = {cls.kind: cls for cls in (Rook, Knight, Bishop, Queen, King, Pawn)}
_TYPES_BY_LETTER = {letter: kind for kind, letter in _TYPE_LETTERS.items()}
_COLORS_BY_LETTER = {letter: color for color, letter in _COLOR_LETTERS.items()}

PathArg = Union[str, "PathLike[str]"]


class SaveFileError(Exception):
    """A saved game could not be read or written."""


def piece_code(piece: ChessPiece | None) -> str:
    """Two-letter code of a piece, such as "Rw"; "." for an empty square."""
    if piece is None or piece.kind is None:
        return EMPTY_CODE
    return _TYPE_LETTERS[piece.kind] + _COLOR_LETTERS[piece.color]


def piece_from_code(code: str) -> ChessPiece | None:
    """A new piece for a two-letter code; None for anything else."""
    if len(code) != 2:
        return None
    kind = _TYPES_BY_LETTER.get(code[0])
    color = _COLORS_BY_LETTER.get(code[1])
    if kind is None or color is None:
        return None
    return _CLASSES[kind](color)


def _encode_string(text: str) -> bytes:
    raw = text.encode("utf-16-be")
    return _LENGTH.pack(len(raw)) + raw


def _decode_strings(data: bytes, count: int) -> Iterator[str]:
    offset = 0
    for _ in range(count):
        if offset + _LENGTH.size > len(data):
            raise SaveFileError("saved game is truncated")
        (length,) = _LENGTH.unpack_from(data, offset)
        offset += _LENGTH.size
        if length == _NULL_LENGTH:
            yield ""
            continue
        if length % 2:
            raise SaveFileError(f"string of odd byte length {length} at offset {offset}")
        end = offset + length
        if end > len(data):
            raise SaveFileError("saved game is truncated")
        try:
            yield data[offset:end].decode("utf-16-be")
        except UnicodeDecodeError as exc:
            raise SaveFileError(f"bad text at offset {offset}") from exc
        offset = end


def encode_board(game: Game) -> bytes:
    """The board row by row, one code string per square."""
    return b"".join(
        _encode_string(piece_code(game.get_piece(row, col)))
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
    )


def decode_board(data: bytes) -> dict[Square, ChessPiece]:
    """Fresh pieces keyed by square from encoded board data."""
    squares = ((row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE))
    board: dict[Square, ChessPiece] = {}
    for (row, col), code in zip(squares, _decode_strings(data, BOARD_SIZE * BOARD_SIZE)):
        piece = piece_from_code(code)
        if piece is not None:
            piece.row, piece.col = row, col
            board[(row, col)] = piece
    return board


def save_game(game: Game, path: PathArg) -> None:
    """Write the board of a game to a file."""
    try:
        Path(path).write_bytes(encode_board(game))
    except OSError as exc:
        raise SaveFileError(f"Unable to open file: {exc}") from exc


def load_game(game: Game, path: PathArg) -> None:
    """Replace the board of a game with the one stored in a file."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise SaveFileError(f"Unable to open file: {exc}") from exc
    game.restore(decode_board(data))