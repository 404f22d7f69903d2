import numpy as np
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from .board import CheckersBoard, DARK, DEFAULT_SIDE, KING, LIGHT, MAN, Square
from .errors import (
    BoardSizeMismatch,
    IllegalDestination,
    InvalidSelection,
    NoLegalMove,
    SaveFileError,
)
from .move_tree import MoveTree, build_tree, mark_squares, unmark_squares
from .resolver import Hop, resolve
from .rules import CheckersRules

# Occupant codes used by savefiles: 0 empty, 1..4 piece variants
CODE_OF_VALUE: Dict[int, int] = {0: 0, LIGHT * MAN: 1, DARK * MAN: 2, LIGHT * KING: 3, DARK * KING: 4}
VALUE_OF_CODE: Dict[int, int] = {code: value for value, code in CODE_OF_VALUE.items()}


class GameRecord(NamedTuple):
    """Everything needed to restore a game between turns."""
    side: int
    cells: np.ndarray  # side x side occupant codes
    light_count: int
    dark_count: int
    turn: int  # player to move


class MoveResult(NamedTuple):
    path: List[Square]        # origin followed by every landing square
    captured: List[Square]
    continues: bool           # same piece must keep capturing this turn
    partial: bool             # destination was resolved one hop at a time
    promoted: bool
    winner: int               # 0 while the game goes on


class CheckersGame:
    """
    Turn/game state machine around CheckersBoard + CheckersRules.

    A turn is driven by `select` (pick a piece) and one or more `choose`
    calls (pick destinations). During a capture chain the same piece keeps
    the turn until it has nothing left to capture.
    """

    def __init__(self, side: int = DEFAULT_SIDE, on_hop: Optional[Callable[["CheckersGame", Hop], None]] = None):
        self.board = CheckersBoard(side)
        # Called after every executed hop (presentation pacing)
        self.on_hop = on_hop
        self.tree: Optional[MoveTree] = None
        self.reset()

    # ------------------------------------------------------------------
    # Basic helpers
    # ------------------------------------------------------------------
    def reset(self):
        """Reset to starting position and return the board array."""
        self.pieces = self.board.setup_pieces()
        self.current_player = DARK
        self.done = False
        self.winner = 0
        self.move_count = 0
        self._clear_selection()
        return self.board.get_state()

    @property
    def side(self) -> int:
        return self.board.side

    def _clear_selection(self):
        if self.tree is not None:
            unmark_squares(self.board, self.tree)
        self.board.clear_marks()
        self.tree = None
        self.selected: Optional[Square] = None
        self.chain_in_progress = False

    def must_capture(self, player: Optional[int] = None) -> bool:
        return CheckersRules.must_capture(self.board, self.current_player if player is None else player)

    def is_stuck(self, player: Optional[int] = None) -> bool:
        return CheckersRules.is_stuck(self.board, self.current_player if player is None else player)

    def check_game_over(self) -> Tuple[bool, int]:
        """
        Evaluated before `current_player` moves. Returns (done, winner):
        a player without pieces or without any legal move loses.
        """
        player = self.current_player
        if self.pieces[player] == 0:
            return True, -player
        if CheckersRules.is_stuck(self.board, player):
            return True, -player
        return False, 0

    def destinations(self) -> List[Square]:
        if self.tree is None:
            return []
        return self.tree.destinations()

    # ------------------------------------------------------------------
    # Turn flow
    # ------------------------------------------------------------------
    def _build(self, pos: Square, capture: bool) -> int:
        tree = build_tree(self.board, pos, capture)
        count = mark_squares(self.board, tree)
        if count == 0:
            unmark_squares(self.board, tree)
            raise NoLegalMove(f"Piece on {pos} cannot move")

        self.tree = tree
        self.selected = pos
        self.board.selected = pos
        return count

    def select(self, pos: Square) -> int:
        """Pick the piece to move. Returns the number of offered destinations."""
        if self.done:
            raise InvalidSelection("The game is over")
        if self.chain_in_progress:
            if pos != self.selected:
                raise InvalidSelection(f"The piece on {self.selected} must keep capturing")
            return len(self.tree.destinations())

        board = self.board
        if not board.is_playable(pos) or board.is_empty(pos):
            raise InvalidSelection(f"No piece on {pos}")
        if board.color_of(pos) != self.current_player:
            raise InvalidSelection(f"Piece on {pos} belongs to the opponent")

        capture = CheckersRules.has_capture(board, pos)
        if not capture and CheckersRules.must_capture(board, self.current_player):
            raise InvalidSelection("A capture is mandatory and this piece cannot capture")

        self._clear_selection()
        return self._build(pos, capture)

    def cancel(self):
        """Abandon the current selection and go back to piece selection."""
        if self.chain_in_progress:
            raise InvalidSelection(f"The piece on {self.selected} must keep capturing")
        self._clear_selection()

    def choose(self, pos: Square) -> MoveResult:
        """Move the selected piece toward `pos`."""
        if self.done:
            raise InvalidSelection("The game is over")
        if self.tree is None or self.selected is None:
            raise IllegalDestination("No piece selected")
        if not self.board.is_playable(pos) or not self.board.is_empty(pos):
            raise IllegalDestination(f"{pos} is not an available square")

        resolution = resolve(self.board, self.tree, pos)

        # Nothing below may fail: the chain only uses squares checked by the builder
        unmark_squares(self.board, self.tree)
        self.tree = None
        current = self.selected
        path = [current]
        captured: List[Square] = []
        for hop in resolution.chain:
            self.board.move_piece(current, hop.landing)
            if hop.victim is not None:
                victim = self.board.color_of(hop.victim)
                self.board.remove_piece(hop.victim)
                self.pieces[victim] -= 1
                captured.append(hop.victim)
            current = hop.landing
            path.append(current)
            if self.on_hop is not None:
                self.on_hop(self, hop)

        self.selected = current
        if captured and CheckersRules.has_capture(self.board, current):
            self.chain_in_progress = True
            self._build(current, capture=True)
            return MoveResult(path, captured, True, resolution.partial, False, 0)

        promoted = self._promote_if_eligible(current)
        self._end_turn()
        return MoveResult(path, captured, False, resolution.partial, promoted, self.winner)

    def move(self, src: Square, dst: Square) -> MoveResult:
        """Select `src` and move it toward `dst` in one call."""
        self.select(src)
        try:
            return self.choose(dst)
        except IllegalDestination:
            if not self.chain_in_progress:
                self._clear_selection()
            raise

    def _promote_if_eligible(self, pos: Square) -> bool:
        player = self.board.color_of(pos)
        if self.board.rank_of(pos) == MAN and pos[0] == CheckersRules.far_row(self.board, player):
            self.board.promote(pos)
            return True
        return False

    def _end_turn(self):
        self._clear_selection()
        self.current_player *= -1
        self.move_count += 1
        self.done, self.winner = self.check_game_over()

    # ------------------------------------------------------------------
    # Persistence shape
    # ------------------------------------------------------------------
    def to_record(self) -> GameRecord:
        cells = np.zeros_like(self.board.board)
        for value, code in CODE_OF_VALUE.items():
            cells[self.board.board == value] = code
        return GameRecord(self.side, cells, self.pieces[LIGHT], self.pieces[DARK], self.current_player)

    def load_record(self, record: GameRecord):
        """Restore `record`. The game is left untouched when it is rejected."""
        if record.side != self.side:
            raise BoardSizeMismatch(self.side, record.side)

        cells = np.asarray(record.cells)
        if cells.shape != (self.side, self.side):
            raise SaveFileError(f"Expected {self.side}x{self.side} cells, got {cells.shape}")
        if not np.isin(cells, list(VALUE_OF_CODE)).all():
            raise SaveFileError("Unknown piece code in savefile")
        if (cells[~self.board.playable] != 0).any():
            raise SaveFileError("Piece on a light square in savefile")
        if record.turn not in (DARK, LIGHT):
            raise SaveFileError(f"Invalid player to move: {record.turn}")

        values = np.zeros((self.side, self.side), dtype=np.int8)
        for code, value in VALUE_OF_CODE.items():
            values[cells == code] = value
        counts = {
            DARK: int(np.sum(np.sign(values) == DARK)),
            LIGHT: int(np.sum(np.sign(values) == LIGHT)),
        }
        if counts[DARK] != record.dark_count or counts[LIGHT] != record.light_count:
            raise SaveFileError("Piece counts do not match the board")

        self._clear_selection()
        self.board.board[:] = values
        self.pieces = counts
        self.current_player = record.turn
        self.move_count = 0
        self.done, self.winner = self.check_game_over()
