import numpy as np
from typing import Iterator, List, Optional, Tuple

from .errors import BoardError

Square = Tuple[int, int]

# Players
DARK = 1   # bottom rows, moves toward row 0, moves first
LIGHT = -1  # top rows

# Ranks (abs value of a square)
MAN = 1
KING = 2

DEFAULT_SIDE = 8
MIN_SIDE = 4
MAX_SIDE = 26

# 0 - top left, 1 - top right, 2 - bottom right, 3 - bottom left
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, 1), (1, -1))


def opposite(direction: int) -> int:
    """Direction index pointing back along the same diagonal."""
    return (direction + 2) % 4


class CheckersBoard:
    """
    Board graph of dark squares.

    Occupancy lives in ``self.board`` (0 empty, +-1 man, +-2 king, sign = owner).
    ``self.highlight`` holds the per-square reachability marks used by the
    renderer and by destination resolution; ``self.selected`` is the square of
    the piece currently in motion.
    """

    def __init__(self, side: int = DEFAULT_SIDE):
        self.initialize(side)

    def initialize(self, side: int):
        if not MIN_SIDE <= side <= MAX_SIDE:
            raise ValueError(f"Board side must be between {MIN_SIDE} and {MAX_SIDE}, got {side}")
        self.side = side
        rows, cols = np.indices((side, side))
        self.playable = (rows + cols) % 2 == 1
        self.board = np.zeros((side, side), dtype=np.int8)
        self.highlight = np.zeros((side, side), dtype=np.int32)
        self.selected: Optional[Square] = None
        return self.board

    def setup_pieces(self):
        """Standard opening position. Returns {DARK: n, LIGHT: m}."""
        self.board[:] = 0
        self.clear_marks()
        rows = (4 * self.side) // 10

        # Light on the top rows, Dark on the bottom rows
        for r in range(rows):
            self.board[r][self.playable[r]] = LIGHT
        for r in range(self.side - rows, self.side):
            self.board[r][self.playable[r]] = DARK

        return {DARK: self.count(DARK), LIGHT: self.count(LIGHT)}

    # ------------------------------------------------------------------
    # Graph structure
    # ------------------------------------------------------------------
    def on_board(self, pos: Square) -> bool:
        r, c = pos
        return 0 <= r < self.side and 0 <= c < self.side

    def is_playable(self, pos: Square) -> bool:
        return self.on_board(pos) and bool(self.playable[pos])

    def neighbor(self, pos: Square, direction: int) -> Optional[Square]:
        """Adjacent dark square in `direction`, or None across the edge."""
        dr, dc = DIRECTIONS[direction]
        nxt = (pos[0] + dr, pos[1] + dc)
        return nxt if self.on_board(nxt) else None

    def squares(self) -> Iterator[Square]:
        for r in range(self.side):
            for c in range(self.side):
                if self.playable[r, c]:
                    yield (r, c)

    # ------------------------------------------------------------------
    # Occupancy
    # ------------------------------------------------------------------
    def piece_at(self, pos: Square) -> int:
        return int(self.board[pos])

    def is_empty(self, pos: Square) -> bool:
        return bool(self.board[pos] == 0)

    def color_of(self, pos: Square) -> int:
        return int(np.sign(self.board[pos]))

    def rank_of(self, pos: Square) -> int:
        return abs(int(self.board[pos]))

    def is_enemy(self, pos: Square, player: int) -> bool:
        val = self.board[pos]
        return bool(val != 0 and np.sign(val) == -player)

    def pieces_of(self, player: int) -> List[Square]:
        return [pos for pos in self.squares() if self.color_of(pos) == player]

    def count(self, player: int) -> int:
        return int(np.sum(np.sign(self.board) == player))

    def place_piece(self, pos: Square, player: int, rank: int = MAN):
        if player not in (DARK, LIGHT) or rank not in (MAN, KING):
            raise ValueError(f"Invalid piece: player={player}, rank={rank}")
        if not self.is_playable(pos):
            raise BoardError(f"{pos} is not a playable square")
        if not self.is_empty(pos):
            raise BoardError(f"{pos} is already occupied")
        self.board[pos] = player * rank

    def remove_piece(self, pos: Square) -> int:
        if not self.is_playable(pos) or self.is_empty(pos):
            raise BoardError(f"No piece to remove at {pos}")
        piece = int(self.board[pos])
        self.board[pos] = 0
        if self.selected == pos:
            self.selected = None
        return piece

    def move_piece(self, src: Square, dst: Square):
        """Move the piece on `src` to `dst`. No rule checks, only occupancy."""
        if not self.is_playable(src) or self.is_empty(src):
            raise BoardError(f"No piece to move at {src}")
        if not self.is_playable(dst) or not self.is_empty(dst):
            raise BoardError(f"Destination {dst} is not free")

        self.board[dst] = self.board[src]
        self.board[src] = 0
        if self.selected == src:
            self.selected = dst

    def promote(self, pos: Square):
        if self.rank_of(pos) != MAN:
            raise BoardError(f"No man to promote at {pos}")
        self.board[pos] = self.board[pos] * KING

    # ------------------------------------------------------------------
    # Marks (rendering / resolution)
    # ------------------------------------------------------------------
    def highlight_count(self, pos: Square) -> int:
        return int(self.highlight[pos])

    def clear_marks(self):
        self.highlight[:] = 0
        self.selected = None

    def get_state(self):
        return self.board.copy()
