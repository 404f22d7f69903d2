"""
Collaborators around the rules engine: notation, rendering, savefiles.
"""

from .notation import parse_square, format_square
from .render import render_board, print_board
from .savefile import save_game, load_game, read_record, write_record

__all__ = [
    "parse_square",
    "format_square",
    "render_board",
    "print_board",
    "save_game",
    "load_game",
    "read_record",
    "write_record",
]
