from typing import FrozenSet, List, Optional

from .board import CheckersBoard, KING, Square, opposite
from .rules import CheckersRules

ROOT = 0


class MoveNode:
    """
    One reachable landing square of the selected piece.
    The root node holds the piece's own square and is never a destination.
    """
    def __init__(self, square: Square, victim: Optional[Square] = None,
                 direction: Optional[int] = None):
        self.square = square
        self.victim = victim        # captured square on the edge leading here
        self.direction = direction  # direction of the edge from the parent
        self.children: List[int] = []


class MoveTree:
    """
    Arena of MoveNodes addressed by integer handles.
    Lives for exactly one destination pick; rebuilt after every executed hop group.
    """
    def __init__(self, origin: Square, capture: bool):
        self.origin = origin
        self.capture = capture
        self.nodes: List[MoveNode] = [MoveNode(origin)]

    def __len__(self) -> int:
        """Number of landing nodes (root excluded)."""
        return len(self.nodes) - 1

    def add(self, parent: int, square: Square, direction: int, victim: Optional[Square] = None) -> int:
        handle = len(self.nodes)
        self.nodes.append(MoveNode(square, victim, direction))
        self.nodes[parent].children.append(handle)
        return handle

    def node(self, handle: int) -> MoveNode:
        return self.nodes[handle]

    def children(self, handle: int) -> List[int]:
        return self.nodes[handle].children

    def depth_to(self, target: Square, handle: int = ROOT) -> int:
        """
        Hop count at which `target` is first reached below (or at) `handle`,
        counting `handle` itself as one hop unless it is the root. 0 if unreachable.
        """
        node = self.nodes[handle]
        if handle != ROOT and node.square == target:
            return 1

        best = 0
        for child in node.children:
            steps = self.depth_to(target, child)
            if steps > 0 and (best == 0 or steps < best):
                best = steps
        return best + (handle != ROOT) if best > 0 else 0

    def contains(self, target: Square) -> bool:
        return self.depth_to(target) > 0

    def destinations(self) -> List[Square]:
        """Distinct landing squares a player may pick, in tree order."""
        seen = []
        for node in self.nodes[1:]:
            if node.square != self.origin and node.square not in seen:
                seen.append(node.square)
        return seen


class MoveTreeBuilder:
    """Builds the search tree of one selected piece."""

    def __init__(self, board: CheckersBoard):
        self.board = board

    def build(self, pos: Square, capture: bool) -> MoveTree:
        tree = MoveTree(pos, capture)
        player = self.board.color_of(pos)
        king = self.board.rank_of(pos) == KING

        if capture:
            if king:
                self._king_captures(tree, ROOT, pos, player, None, frozenset())
            else:
                self._man_captures(tree, ROOT, pos, player, None, frozenset())
        elif king:
            self._king_slides(tree, pos)
        else:
            self._man_steps(tree, pos, player)
        return tree

    # ------------------------------------------------------------------
    # Simple moves
    # ------------------------------------------------------------------
    def _man_steps(self, tree: MoveTree, pos: Square, player: int):
        for d in CheckersRules.forward_directions(player):
            sq = self.board.neighbor(pos, d)
            if sq is not None and self.board.is_empty(sq):
                tree.add(ROOT, sq, d)

    def _king_slides(self, tree: MoveTree, pos: Square):
        for d in range(4):
            sq = self.board.neighbor(pos, d)
            while sq is not None and self.board.is_empty(sq):
                tree.add(ROOT, sq, d)
                sq = self.board.neighbor(sq, d)

    # ------------------------------------------------------------------
    # Captures
    # ------------------------------------------------------------------
    def _vacant(self, tree: MoveTree, sq: Square) -> bool:
        # The mover's origin is empty once it has left it
        return sq == tree.origin or self.board.is_empty(sq)

    def _man_captures(self, tree: MoveTree, parent: int, pos: Square, player: int,
                      forbidden: Optional[int], captured: FrozenSet[Square]):
        for d in range(4):
            if d == forbidden:
                continue
            mid = self.board.neighbor(pos, d)
            if mid is None or mid in captured or not self.board.is_enemy(mid, player):
                continue
            land = self.board.neighbor(mid, d)
            if land is None or not self._vacant(tree, land):
                continue

            child = tree.add(parent, land, d, victim=mid)
            self._man_captures(tree, child, land, player, opposite(d), captured | {mid})

    def _king_captures(self, tree: MoveTree, parent: int, pos: Square, player: int,
                       forbidden: Optional[int], captured: FrozenSet[Square]):
        for d in range(4):
            if d == forbidden:
                continue
            target = self.board.neighbor(pos, d)
            while target is not None and self._vacant(tree, target):
                target = self.board.neighbor(target, d)
            if target is None or target in captured or not self.board.is_enemy(target, player):
                continue

            # Every vacant square past the victim is a landing of its own
            land = self.board.neighbor(target, d)
            while land is not None and self._vacant(tree, land):
                child = tree.add(parent, land, d, victim=target)
                self._king_captures(tree, child, land, player, opposite(d), captured | {target})
                land = self.board.neighbor(land, d)


def build_tree(board: CheckersBoard, pos: Square, capture: bool) -> MoveTree:
    return MoveTreeBuilder(board).build(pos, capture)


def mark_squares(board: CheckersBoard, tree: MoveTree) -> int:
    """
    Highlight every landing square of `tree` once per node reaching it.
    Returns the number of distinct offered destinations.
    """
    offered = set()
    for node in tree.nodes[1:]:
        # The vacated origin can be crossed but never picked
        if board.is_empty(node.square):
            board.highlight[node.square] += 1
            offered.add(node.square)
    return len(offered)


def unmark_squares(board: CheckersBoard, tree: MoveTree):
    for node in tree.nodes[1:]:
        board.highlight[node.square] = 0
