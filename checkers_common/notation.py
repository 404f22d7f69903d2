"""
Square notation utility for converting player input to board coordinates.
Columns are letters (A = column 0), rows are numbers counted from the bottom.
"""

from typing import Optional, Tuple

from checkers_engine.errors import InvalidCoordinate

Square = Tuple[int, int]


def parse_square(token: str, side: int) -> Optional[Square]:
    """
    Parse a square token such as "C3".

    Args:
        token: Raw player input (surrounding whitespace ignored, case-insensitive)
        side: Board side length

    Returns:
        (row, col) on the internal board, or None for a blank token (cancel)

    Raises:
        InvalidCoordinate: if the token is malformed or off the board
    """
    token = token.strip()
    if not token:
        return None

    letter, digits = token[0].upper(), token[1:]
    if not ("A" <= letter <= "Z"):
        raise InvalidCoordinate(f"Column must be a letter: {token!r}")
    col = ord(letter) - ord("A")
    if col >= side:
        raise InvalidCoordinate(f"Column {letter} is off the board")

    if not (digits.isascii() and digits.isdigit()):
        raise InvalidCoordinate(f"Row must be a number: {token!r}")
    number = int(digits)
    if not 1 <= number <= side:
        raise InvalidCoordinate(f"Row {number} is off the board")

    return side - number, col


def format_square(pos: Square, side: int) -> str:
    """
    Inverse of parse_square.

    Args:
        pos: (row, col) tuple
        side: Board side length

    Returns:
        Token such as "C3"
    """
    row, col = pos
    return f"{chr(ord('A') + col)}{side - row}"
