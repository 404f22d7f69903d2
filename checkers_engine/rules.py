from typing import List, Tuple

from .board import CheckersBoard, DARK, KING, MAN, Square


class CheckersRules:
    @staticmethod
    def forward_directions(player: int) -> Tuple[int, ...]:
        """Direction indices a man of `player` may use for simple moves."""
        return (0, 1) if player == DARK else (2, 3)

    @staticmethod
    def far_row(board: CheckersBoard, player: int) -> int:
        """Row on which a man of `player` is promoted."""
        return 0 if player == DARK else board.side - 1

    @staticmethod
    def _man_has_capture(board: CheckersBoard, pos: Square, player: int) -> bool:
        for d in range(4):
            mid = board.neighbor(pos, d)
            if mid is None or not board.is_enemy(mid, player):
                continue
            land = board.neighbor(mid, d)
            if land is not None and board.is_empty(land):
                return True
        return False

    @staticmethod
    def _king_has_capture(board: CheckersBoard, pos: Square, player: int) -> bool:
        for d in range(4):
            # Slide until the first occupied square or the edge
            sq = board.neighbor(pos, d)
            while sq is not None and board.is_empty(sq):
                sq = board.neighbor(sq, d)
            if sq is None or not board.is_enemy(sq, player):
                continue
            land = board.neighbor(sq, d)
            if land is not None and board.is_empty(land):
                return True
        return False

    @staticmethod
    def has_capture(board: CheckersBoard, pos: Square) -> bool:
        """True if the piece on `pos` can capture right now."""
        if not board.is_playable(pos) or board.is_empty(pos):
            return False
        player = board.color_of(pos)
        if board.rank_of(pos) == KING:
            return CheckersRules._king_has_capture(board, pos, player)
        return CheckersRules._man_has_capture(board, pos, player)

    @staticmethod
    def must_capture(board: CheckersBoard, player: int) -> bool:
        """Capture is mandatory for `player` if any of its pieces can capture."""
        return any(CheckersRules.has_capture(board, pos) for pos in board.pieces_of(player))

    @staticmethod
    def simple_moves(board: CheckersBoard, pos: Square) -> List[Square]:
        """
        Non-capturing destinations of the piece on `pos`.
        Empty whenever its owner has a capture anywhere on the board.
        """
        if not board.is_playable(pos) or board.is_empty(pos):
            return []
        player = board.color_of(pos)
        if CheckersRules.must_capture(board, player):
            return []

        moves = []
        if board.rank_of(pos) == MAN:
            for d in CheckersRules.forward_directions(player):
                sq = board.neighbor(pos, d)
                if sq is not None and board.is_empty(sq):
                    moves.append(sq)
        else:
            for d in range(4):
                sq = board.neighbor(pos, d)
                while sq is not None and board.is_empty(sq):
                    moves.append(sq)
                    sq = board.neighbor(sq, d)
        return moves

    @staticmethod
    def has_simple_move(board: CheckersBoard, pos: Square) -> bool:
        if not board.is_playable(pos) or board.is_empty(pos):
            return False
        if board.rank_of(pos) == KING:
            directions = range(4)
        else:
            directions = CheckersRules.forward_directions(board.color_of(pos))
        for d in directions:
            sq = board.neighbor(pos, d)
            if sq is not None and board.is_empty(sq):
                return True
        return False

    @staticmethod
    def can_move(board: CheckersBoard, pos: Square) -> bool:
        return CheckersRules.has_capture(board, pos) or CheckersRules.has_simple_move(board, pos)

    @staticmethod
    def is_stuck(board: CheckersBoard, player: int) -> bool:
        """True if `player` has no legal move with any of its pieces."""
        return not any(CheckersRules.can_move(board, pos) for pos in board.pieces_of(player))
