#!/usr/bin/env python3
"""
Play checkers in the terminal: two humans, one keyboard.

During play, type a square such as C3, an empty line to drop the current
selection, `save` to write a savefile or `exit` to quit.
"""
import sys
import time
import argparse
from typing import Optional

from checkers_engine.board import DARK, DEFAULT_SIDE, MAX_SIDE, MIN_SIDE, Square
from checkers_engine.errors import (
    AmbiguousDestination,
    BoardSizeMismatch,
    CheckersError,
    IllegalDestination,
    InvalidSelection,
    NoLegalMove,
    SaveFileError,
)
from checkers_engine.game import CheckersGame, MoveResult
from checkers_common.notation import format_square, parse_square
from checkers_common.render import print_board
from checkers_common.savefile import load_game, save_game

NAMES = {DARK: "Dark", -DARK: "Light"}


def board_side(value: str) -> int:
    try:
        side = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Board side must be a number, got {value!r}")
    if side > MAX_SIDE:
        raise argparse.ArgumentTypeError(f"Board cannot be more than {MAX_SIDE} cells per side")
    if side < MIN_SIDE:
        raise argparse.ArgumentTypeError(f"Board cannot be less than {MIN_SIDE} cells per side")
    return side


def prompt_square(game: CheckersGame, prompt: str) -> Optional[Square]:
    """Read squares until one parses. Handles the `save` and `exit` commands."""
    while True:
        token = input(prompt).strip()
        if token.lower() == "exit":
            sys.exit(0)
        if token.lower() == "save":
            name = input("Enter save name: ")
            try:
                print(f"Saved to {save_game(game, name)}")
            except (SaveFileError, OSError) as e:
                print(f"Not Saved: {e}")
            continue
        try:
            return parse_square(token, game.side)
        except CheckersError as e:
            print(f"⚠️  {e}")


def pick_destination(game: CheckersGame) -> Optional[MoveResult]:
    """Drive one selected piece to the end of its turn. None if the player backs out."""
    while True:
        print_board(game.board)
        print(f"{NAMES[game.current_player]}'s move")
        dest = prompt_square(game, "Pick destination: ")
        if dest is None:
            try:
                game.cancel()
                return None
            except InvalidSelection as e:
                print(f"⚠️  {e}")
                continue

        try:
            result = game.choose(dest)
        except AmbiguousDestination as e:
            print(f"⚠️  {e}")
            continue
        except IllegalDestination:
            continue

        if not result.continues:
            return result


def play_turn(game: CheckersGame) -> MoveResult:
    while True:
        print_board(game.board)
        print(f"{NAMES[game.current_player]}'s move")
        pos = prompt_square(game, "Pick a piece: ")
        if pos is None:
            continue
        try:
            game.select(pos)
        except (InvalidSelection, NoLegalMove) as e:
            print(f"⚠️  {e}")
            continue

        result = pick_destination(game)
        if result is not None:
            return result


def restore(game: CheckersGame) -> bool:
    """Ask for savefiles until one loads. False if the player gives up (empty name)."""
    while True:
        name = input("Enter save name: ")
        if not name.strip():
            return False
        try:
            path = load_game(game, name)
        except BoardSizeMismatch:
            print("Savefile has different board size")
            continue
        except SaveFileError as e:
            print(f"Couldn't open savefile: {e}")
            continue
        print(f"Loaded {path}")
        return True


def menu(game: CheckersGame, load: Optional[str]) -> bool:
    """New / Load / Exit. Returns False on Exit."""
    if load:
        try:
            load_game(game, load)
            return True
        except CheckersError as e:
            print(f"Couldn't load {load}: {e}")

    while True:
        choice = input("New / Load / Exit: ").strip().lower()
        if choice in ("n", "new"):
            game.reset()
            return True
        if choice in ("l", "load") and restore(game):
            return True
        if choice in ("e", "exit"):
            return False


def main():
    parser = argparse.ArgumentParser(description="Two-player checkers in the terminal.")
    parser.add_argument("side", nargs="?", type=board_side, default=DEFAULT_SIDE,
                        help=f"Board side length ({MIN_SIDE}-{MAX_SIDE})")
    parser.add_argument("--load", type=str, default=None, help="Savefile to resume")
    parser.add_argument("--delay", type=float, default=0.1, help="Pause between capture hops (seconds)")
    args = parser.parse_args()

    def show_hop(game, hop):
        print_board(game.board)
        time.sleep(args.delay)

    game = CheckersGame(args.side, on_hop=show_hop if args.delay > 0 else None)
    print_board(game.board)
    if not menu(game, args.load):
        return

    while not game.done:
        result = play_turn(game)
        steps = " -> ".join(format_square(p, game.side) for p in result.path)
        print(f"Executed: {steps}" + (" (crowned)" if result.promoted else ""))

    print_board(game.board)
    print(f"\n🏆 {NAMES[game.winner].upper()}'S VICTORY")


if __name__ == "__main__":
    main()
