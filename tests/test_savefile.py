import pytest

from schaken.game import Game
from schaken.pieces import Color, Knight, Pawn, Rook
from schaken.savefile import (
    SaveFileError,
    decode_board,
    encode_board,
    load_game,
    piece_code,
    piece_from_code,
    save_game,
)


def _layout(board):
    return {square: (type(p), p.color) for square, p in board.items()}


def test_piece_code():
    assert piece_code(Rook(Color.WHITE)) == "Rw"
    assert piece_code(Knight(Color.BLACK)) == "Hb"
    assert piece_code(None) == "."


def test_piece_from_code():
    piece = piece_from_code("Hb")
    assert isinstance(piece, Knight)
    assert piece.color is Color.BLACK
    assert piece_from_code(".") is None
    assert piece_from_code("Xw") is None
    assert piece_from_code("Rwx") is None


@pytest.mark.parametrize("code", ["Rw", "Hw", "Bw", "Qw", "Kw", "Pw", "Rb", "Hb", "Bb", "Qb", "Kb", "Pb"])
def test_code_round_trip(code):
    assert piece_code(piece_from_code(code)) == code


def test_empty_square_encoding():
    game = Game()
    game.clear()
    data = encode_board(game)
    chunk = b"\x00\x00\x00\x02\x00."
    assert data == chunk * 64


def test_board_round_trip():
    game = Game()
    decoded = decode_board(encode_board(game))
    assert _layout(decoded) == _layout(game.snapshot())
    assert all(p.position == square for square, p in decoded.items())


def test_null_strings_are_empty_squares():
    assert decode_board(b"\xff\xff\xff\xff" * 64) == {}


def test_truncated_data_raises():
    data = encode_board(Game())
    with pytest.raises(SaveFileError):
        decode_board(data[:-3])


def test_odd_length_raises():
    with pytest.raises(SaveFileError):
        decode_board(b"\x00\x00\x00\x03\x00.\x00")


def test_save_and_load(tmp_path):
    game = Game()
    pawn = game.get_piece(6, 4)
    assert game.move(pawn, 4, 4)
    path = tmp_path / "game.chs"
    save_game(game, path)

    loaded = Game()
    load_game(loaded, path)
    assert _layout(loaded.snapshot()) == _layout(game.snapshot())
    moved = loaded.get_piece(4, 4)
    assert isinstance(moved, Pawn)
    assert moved.position == (4, 4)
    assert loaded.get_piece(6, 4) is None


def test_load_missing_file_raises(tmp_path):
    game = Game()
    before = _layout(game.snapshot())
    with pytest.raises(SaveFileError):
        load_game(game, tmp_path / "missing.chs")
    assert _layout(game.snapshot()) == before


def test_load_bad_file_leaves_game(tmp_path):
    path = tmp_path / "bad.chs"
    path.write_bytes(b"\x00\x00")
    game = Game()
    before = _layout(game.snapshot())
    with pytest.raises(SaveFileError):
        load_game(game, path)
    assert _layout(game.snapshot()) == before


def test_save_to_directory_raises(tmp_path):
    with pytest.raises(SaveFileError):
        save_game(Game(), tmp_path)