import pytest

from schaken.game import Game
from schaken.pieces import (
    Bishop,
    ChessPiece,
    Color,
    King,
    Knight,
    Pawn,
    Queen,
    Rook,
)


def empty_game():
    game = Game()
    game.clear()
    return game


def place(game, cls, color, row, col):
    piece = cls(color, row, col)
    game.set_piece(row, col, piece)
    return piece


def test_base_piece_has_no_moves():
    game = empty_game()
    piece = place(game, ChessPiece, Color.WHITE, 3, 3)
    assert piece.valid_moves(game) == []


def test_color_opponent_swaps():
    game = empty_game()
    pawn = place(game, Pawn, Color.WHITE, 4, 4)
    place(game, Pawn, Color.WHITE.opponent, 3, 5)
    place(game, Pawn, Color.BLACK.opponent, 3, 3)
    moves = pawn.valid_moves(game)
    assert Color.WHITE.opponent is Color.BLACK
    assert Color.BLACK.opponent is Color.WHITE
    assert (3, 5) in moves
    assert (3, 3) not in moves


def test_rook_on_empty_board_covers_row_and_column():
    game = empty_game()
    rook = place(game, Rook, Color.WHITE, 3, 3)
    moves = rook.valid_moves(game)
    expected = {(3, c) for c in range(8) if c != 3} | {(r, 3) for r in range(8) if r != 3}
    assert set(moves) == expected
    assert len(moves) == len(set(moves))


def test_rook_stops_at_friend_and_captures_enemy():
    game = empty_game()
    rook = place(game, Rook, Color.WHITE, 3, 3)
    place(game, Pawn, Color.WHITE, 3, 5)
    place(game, Pawn, Color.BLACK, 3, 1)
    moves = rook.valid_moves(game)
    assert (3, 4) in moves
    assert (3, 5) not in moves
    assert (3, 6) not in moves
    assert (3, 2) in moves
    assert (3, 1) in moves
    assert (3, 0) not in moves


def test_bishop_moves_only_diagonally():
    game = empty_game()
    bishop = place(game, Bishop, Color.BLACK, 4, 2)
    moves = bishop.valid_moves(game)
    assert moves
    for row, col in moves:
        assert abs(row - 4) == abs(col - 2)
        assert 0 <= row < 8 and 0 <= col < 8
    assert len(moves) == len(set(moves))


def test_bishop_blocked_by_own_piece():
    game = empty_game()
    bishop = place(game, Bishop, Color.BLACK, 4, 2)
    place(game, Knight, Color.BLACK, 5, 3)
    moves = bishop.valid_moves(game)
    assert (5, 3) not in moves
    assert (6, 4) not in moves


@pytest.mark.parametrize("square", [(0, 0), (3, 4), (7, 6)])
def test_queen_combines_bishop_and_rook(square):
    game = empty_game()
    queen = place(game, Queen, Color.WHITE, *square)
    bishop = Bishop(Color.WHITE, *square)
    rook = Rook(Color.WHITE, *square)
    assert queen.valid_moves(game) == bishop.valid_moves(game) + rook.valid_moves(game)


def test_knight_from_corner():
    game = empty_game()
    knight = place(game, Knight, Color.WHITE, 0, 0)
    assert set(knight.valid_moves(game)) == {(1, 2), (2, 1)}


def test_knight_jump_shape_and_friend_exclusion():
    game = empty_game()
    knight = place(game, Knight, Color.WHITE, 4, 4)
    place(game, Pawn, Color.WHITE, 2, 3)
    place(game, Pawn, Color.BLACK, 2, 5)
    moves = knight.valid_moves(game)
    for row, col in moves:
        assert sorted((abs(row - 4), abs(col - 4))) == [1, 2]
    assert (2, 3) not in moves
    assert (2, 5) in moves


def test_king_in_centre():
    game = empty_game()
    king = place(game, King, Color.BLACK, 4, 4)
    moves = king.valid_moves(game)
    assert len(moves) == 8
    assert all(max(abs(r - 4), abs(c - 4)) == 1 for r, c in moves)


def test_king_in_corner_stays_on_board_and_spares_friends():
    game = empty_game()
    king = place(game, King, Color.WHITE, 7, 7)
    place(game, Rook, Color.WHITE, 7, 6)
    moves = king.valid_moves(game)
    assert all(0 <= r < 8 and 0 <= c < 8 for r, c in moves)
    assert (7, 6) not in moves
    assert (7, 7) not in moves
    assert (6, 6) in moves


def test_white_pawn_from_start():
    game = empty_game()
    pawn = place(game, Pawn, Color.WHITE, 6, 3)
    assert set(pawn.valid_moves(game)) == {(5, 3), (4, 3)}


def test_black_pawn_mirrors_white():
    game = empty_game()
    white = place(game, Pawn, Color.WHITE, 6, 3)
    black = place(game, Pawn, Color.BLACK, 1, 3)
    mirrored = {(7 - r, c) for r, c in white.valid_moves(game)}
    assert set(black.valid_moves(game)) == mirrored


def test_pawn_blocked_in_front():
    game = empty_game()
    pawn = place(game, Pawn, Color.WHITE, 6, 3)
    place(game, Rook, Color.BLACK, 5, 3)
    assert pawn.valid_moves(game) == []


def test_pawn_double_step_blocked():
    game = empty_game()
    pawn = place(game, Pawn, Color.WHITE, 6, 3)
    place(game, Rook, Color.BLACK, 4, 3)
    assert pawn.valid_moves(game) == [(5, 3)]


def test_pawn_off_start_row_has_no_double_step():
    game = empty_game()
    pawn = place(game, Pawn, Color.WHITE, 5, 2)
    moves = pawn.valid_moves(game)
    assert (4, 2) in moves
    assert (3, 2) not in moves


def test_pawn_captures_enemies_diagonally_only():
    game = empty_game()
    pawn = place(game, Pawn, Color.WHITE, 4, 4)
    place(game, Pawn, Color.BLACK, 3, 5)
    place(game, Pawn, Color.WHITE, 3, 3)
    moves = pawn.valid_moves(game)
    assert (3, 5) in moves
    assert (3, 3) not in moves
    assert (3, 4) in moves