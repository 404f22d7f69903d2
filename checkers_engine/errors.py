class CheckersError(Exception):
    """Base class for every recoverable rules-engine error."""


class BoardError(CheckersError):
    """Structural violation on the board (occupied target, empty source, bad square)."""


class InvalidSelection(CheckersError):
    """The picked square does not hold a piece the current player may move."""


class IllegalDestination(CheckersError):
    """The picked square is not offered by the current move tree."""


class AmbiguousDestination(IllegalDestination):
    """The square is reachable by several routes and is more than one hop away."""


class NoLegalMove(CheckersError):
    """The selected piece has nowhere to go."""


class BoardSizeMismatch(CheckersError):
    def __init__(self, expected: int, found: int):
        super().__init__(f"Savefile has different board size ({found}, expected {expected})")
        self.expected = expected
        self.found = found


class SaveFileError(CheckersError):
    """Savefile could not be opened or parsed."""


class InvalidCoordinate(CheckersError):
    """Malformed or out-of-range square token."""
