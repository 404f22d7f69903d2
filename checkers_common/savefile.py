"""
Savefile codec.

Layout (plain text, one value per line):
    side
    <side lines of side digits: 0 empty, 1 light man, 2 dark man, 3 light king, 4 dark king>
    light piece count
    dark piece count
    player to move (0 light, 1 dark)
"""

import os
import numpy as np
from typing import List

from checkers_engine.board import DARK, LIGHT
from checkers_engine.errors import SaveFileError
from checkers_engine.game import CheckersGame, GameRecord

EXTENSION = ".save"

TURN_CODES = {LIGHT: 0, DARK: 1}
TURN_OF_CODE = {code: player for player, code in TURN_CODES.items()}


def savefile_path(name: str) -> str:
    """Append the .save extension unless the name already carries it."""
    name = name.strip()
    if not name:
        raise SaveFileError("Empty save name")
    return name if name.endswith(EXTENSION) else name + EXTENSION


def write_record(record: GameRecord) -> str:
    lines = [str(record.side)]
    for row in np.asarray(record.cells):
        lines.append("".join(str(int(code)) for code in row))
    lines.append(str(record.light_count))
    lines.append(str(record.dark_count))
    lines.append(str(TURN_CODES[record.turn]))
    return "\n".join(lines) + "\n"


def read_record(text: str) -> GameRecord:
    lines: List[str] = [line.strip() for line in text.splitlines() if line.strip()]
    try:
        side = int(lines[0])
        rows = lines[1:side + 1]
        light_count, dark_count, turn = (int(v) for v in lines[side + 1:side + 4])
    except (IndexError, ValueError) as e:
        raise SaveFileError(f"Malformed savefile: {e}") from e

    if len(rows) != side or any(len(row) != side or not row.isdigit() for row in rows):
        raise SaveFileError("Malformed savefile: bad board rows")
    if turn not in TURN_OF_CODE:
        raise SaveFileError(f"Malformed savefile: bad turn {turn}")

    cells = np.array([[int(ch) for ch in row] for row in rows], dtype=np.int8)
    return GameRecord(side, cells, light_count, dark_count, TURN_OF_CODE[turn])


def save_game(game: CheckersGame, name: str) -> str:
    """Write `game` to `name` (+ .save). Returns the path written."""
    path = savefile_path(name)
    with open(path, "w") as f:
        f.write(write_record(game.to_record()))
    return path


def load_game(game: CheckersGame, name: str) -> str:
    """
    Restore `game` from `name` (+ .save). Returns the path read.
    Raises SaveFileError or BoardSizeMismatch; `game` is unchanged on failure.
    """
    path = savefile_path(name)
    if not os.path.exists(path):
        raise SaveFileError(f"Couldn't open savefile {path}")
    with open(path) as f:
        record = read_record(f.read())
    game.load_record(record)
    return path
