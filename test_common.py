import pytest

from checkers_engine.board import DARK, LIGHT
from checkers_engine.errors import BoardSizeMismatch, InvalidCoordinate, SaveFileError
from checkers_engine.game import CheckersGame
from checkers_common.notation import format_square, parse_square
from checkers_common.render import render_board
from checkers_common.savefile import load_game, read_record, save_game, savefile_path, write_record


def test_parse_square():
    assert parse_square("C3", 8) == (5, 2)
    assert parse_square(" c3\n", 8) == (5, 2)
    assert parse_square("A1", 8) == (7, 0)
    assert parse_square("H8", 8) == (0, 7)
    assert parse_square("Z26", 26) == (0, 25)
    assert parse_square("", 8) is None
    assert parse_square("   ", 8) is None


@pytest.mark.parametrize("token", ["I1", "A0", "A9", "3C", "A", "AA", "A-1", "#1"])
def test_parse_square_rejects_bad_tokens(token):
    with pytest.raises(InvalidCoordinate):
        parse_square(token, 8)


def test_format_square():
    assert format_square((5, 2), 8) == "C3"
    assert format_square((0, 9), 10) == "J10"
    assert parse_square(format_square((3, 4), 8), 8) == (3, 4)


def test_savefile_layout():
    text = write_record(CheckersGame(8).to_record())
    lines = text.splitlines()
    assert lines[0] == "8"
    assert lines[1] == "01010101"
    assert lines[8] == "20202020"
    assert lines[9:] == ["12", "12", "1"]


def test_read_record():
    text = "4\n0100\n0000\n0000\n4000\n1\n1\n0\n"
    record = read_record(text)
    assert record.side == 4
    assert record.cells[0, 1] == 1 and record.cells[3, 0] == 4
    assert record.turn == LIGHT

    game = CheckersGame(4)
    game.load_record(record)
    assert game.board.piece_at((3, 0)) == 2 * DARK
    assert game.pieces == {DARK: 1, LIGHT: 1}


@pytest.mark.parametrize("text", ["", "x\n", "4\n0100\n", "4\n010\n0000\n0000\n4000\n1\n1\n0\n",
                                  "4\n0100\n0000\n0000\n4000\n1\n1\n7\n"])
def test_read_record_rejects_garbage(text):
    with pytest.raises(SaveFileError):
        read_record(text)


def test_savefile_path():
    assert savefile_path("game") == "game.save"
    assert savefile_path("game.save") == "game.save"
    with pytest.raises(SaveFileError):
        savefile_path("  ")


def test_save_and_load(tmp_path):
    game = CheckersGame()
    game.move((5, 2), (4, 3))
    path = save_game(game, str(tmp_path / "match"))
    assert path.endswith(".save")

    restored = CheckersGame()
    load_game(restored, str(tmp_path / "match"))
    assert (restored.board.get_state() == game.board.get_state()).all()
    assert restored.current_player == LIGHT


def test_load_other_board_size(tmp_path):
    save_game(CheckersGame(10), str(tmp_path / "big"))
    game = CheckersGame(8)
    before = game.board.get_state()
    with pytest.raises(BoardSizeMismatch):
        load_game(game, str(tmp_path / "big"))
    assert (game.board.get_state() == before).all()


def test_load_missing_file(tmp_path):
    with pytest.raises(SaveFileError):
        load_game(CheckersGame(), str(tmp_path / "nothing"))


def test_render_board():
    game = CheckersGame()
    text = render_board(game.board)
    lines = text.splitlines()
    assert len(lines) == 9
    assert lines[0].startswith(" 8")
    assert " l " in lines[0] and " d " in lines[7]
    assert lines[-1].split() == list("ABCDEFGH")

    game.select((5, 2))
    text = render_board(game.board)
    assert "[d]" in text
    assert text.count(" * ") == 2
