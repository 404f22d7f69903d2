from checkers_engine.board import CheckersBoard, DARK, LIGHT, KING
from checkers_engine.rules import CheckersRules
from checkers_common.notation import parse_square


def sq(token):
    return parse_square(token, 8)


def empty_board():
    return CheckersBoard(8)


def test_man_capture_forward_and_backward():
    b = empty_board()
    b.place_piece(sq("C3"), DARK)
    b.place_piece(sq("D4"), LIGHT)
    assert CheckersRules.has_capture(b, sq("C3"))

    # Men capture backwards too
    b = empty_board()
    b.place_piece(sq("D4"), DARK)
    b.place_piece(sq("C3"), LIGHT)
    assert CheckersRules.has_capture(b, sq("D4"))


def test_man_capture_needs_empty_landing():
    b = empty_board()
    b.place_piece(sq("C3"), DARK)
    b.place_piece(sq("D4"), LIGHT)
    b.place_piece(sq("E5"), LIGHT)
    assert not CheckersRules.has_capture(b, sq("C3"))
    assert not CheckersRules.has_capture(b, sq("F6"))  # empty square


def test_king_captures_from_a_distance():
    b = empty_board()
    b.place_piece(sq("A1"), DARK, KING)
    b.place_piece(sq("C3"), LIGHT)
    assert CheckersRules.has_capture(b, sq("A1"))


def test_king_cannot_capture_two_pieces_without_gap():
    b = empty_board()
    b.place_piece(sq("A1"), DARK, KING)
    b.place_piece(sq("C3"), LIGHT)
    b.place_piece(sq("D4"), LIGHT)
    assert not CheckersRules.has_capture(b, sq("A1"))


def test_king_blocked_by_friend():
    b = empty_board()
    b.place_piece(sq("A1"), DARK, KING)
    b.place_piece(sq("B2"), DARK)
    b.place_piece(sq("C3"), LIGHT)
    assert not CheckersRules.has_capture(b, sq("A1"))


def test_simple_moves_from_start_position():
    b = empty_board()
    b.setup_pieces()
    assert CheckersRules.simple_moves(b, sq("C3")) == [sq("B4"), sq("D4")]
    assert CheckersRules.simple_moves(b, sq("C1")) == []
    # Light moves down the board
    assert CheckersRules.simple_moves(b, sq("B6")) == [sq("C5"), sq("A5")]


def test_mandatory_capture_hides_simple_moves():
    b = empty_board()
    b.place_piece(sq("C3"), DARK)
    b.place_piece(sq("D4"), LIGHT)
    b.place_piece(sq("G1"), DARK)
    assert CheckersRules.must_capture(b, DARK)
    for pos in b.pieces_of(DARK):
        assert CheckersRules.simple_moves(b, pos) == [], f"simple moves offered for {pos}"


def test_king_simple_slides():
    b = empty_board()
    b.place_piece(sq("D4"), DARK, KING)
    moves = CheckersRules.simple_moves(b, sq("D4"))
    assert len(moves) == 13
    assert sq("H8") in moves and sq("A1") in moves


def test_stuck_player():
    b = empty_board()
    b.place_piece(sq("B2"), DARK)
    b.place_piece(sq("A3"), LIGHT)
    b.place_piece(sq("C3"), LIGHT)
    b.place_piece(sq("D4"), LIGHT)
    assert not CheckersRules.has_capture(b, sq("B2"))
    assert CheckersRules.is_stuck(b, DARK)
    assert not CheckersRules.is_stuck(b, LIGHT)


def test_far_row():
    b = empty_board()
    assert CheckersRules.far_row(b, DARK) == 0
    assert CheckersRules.far_row(b, LIGHT) == 7
