"""
Turns a picked destination square into the concrete route the piece takes.

A destination reachable along exactly one direction at every junction is
walked all the way. When several directions lead to it, only a direct
neighbour of the piece is accepted (one hop at a time); anything further is
rejected so the player has to pick the intermediate square first.
"""

from typing import Dict, List, NamedTuple, Optional, Tuple

from .board import CheckersBoard, Square
from .errors import AmbiguousDestination, IllegalDestination
from .move_tree import ROOT, MoveTree


class Hop(NamedTuple):
    landing: Square
    victim: Optional[Square]


class Resolution(NamedTuple):
    chain: List[Hop]
    # True when only part of the way was resolved and the tree must be rebuilt
    partial: bool


def _routes(tree: MoveTree, handle: int, target: Square) -> Dict[int, Tuple[int, int]]:
    """direction -> (shortest depth to target, child handle) for every direction reaching it."""
    routes: Dict[int, Tuple[int, int]] = {}
    for child in tree.children(handle):
        depth = tree.depth_to(target, child)
        if depth == 0:
            continue
        d = tree.node(child).direction
        if d not in routes or depth < routes[d][0]:
            routes[d] = (depth, child)
    return routes


def resolve(board: CheckersBoard, tree: MoveTree, target: Square) -> Resolution:
    if target == tree.origin or not tree.contains(target):
        raise IllegalDestination(f"{target} is not an available square")

    chain: List[Hop] = []
    handle = ROOT
    while True:
        routes = _routes(tree, handle, target)
        direction = min(routes, key=lambda d: (routes[d][0], d))
        depth, child = routes[direction]
        node = tree.node(child)
        hop = Hop(node.square, node.victim)

        if len(routes) == 1:
            chain.append(hop)
            if node.square == target:
                return Resolution(chain, partial=len(chain) == 1 and board.highlight_count(target) > 1)
            handle = child
            continue

        if depth == 1 and handle == ROOT:
            chain.append(hop)
            return Resolution(chain, partial=True)

        raise AmbiguousDestination(
            "You cannot move to ambiguous destination in more than one move away!"
        )
