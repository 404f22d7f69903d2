from .board import CheckersBoard, DARK, LIGHT, MAN, KING
from .rules import CheckersRules
from .move_tree import MoveTree, build_tree, mark_squares, unmark_squares
from .resolver import Hop, Resolution, resolve
from .game import CheckersGame, GameRecord, MoveResult

__all__ = [
    'CheckersBoard',
    'CheckersRules',
    'CheckersGame',
    'GameRecord',
    'MoveResult',
    'MoveTree',
    'Hop',
    'Resolution',
    'build_tree',
    'mark_squares',
    'unmark_squares',
    'resolve',
    'DARK',
    'LIGHT',
    'MAN',
    'KING',
]
