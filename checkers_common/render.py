from checkers_engine.board import CheckersBoard, DARK, KING, LIGHT

SYMBOLS = {DARK: "d", LIGHT: "l"}


def _cell(board: CheckersBoard, pos) -> str:
    if not board.playable[pos]:
        return "   "
    if board.is_empty(pos):
        marks = board.highlight_count(pos)
        if marks == 1:
            return " * "
        if marks > 1:
            return " ? "
        return " . "

    symbol = SYMBOLS[board.color_of(pos)]
    if board.rank_of(pos) == KING:
        symbol = symbol.upper()
    if board.selected == pos:
        return f"[{symbol}]"
    return f" {symbol} "


def render_board(board: CheckersBoard) -> str:
    """
    Text picture of the board: rank numbers on the left, file letters below.
    Reachable squares show '*', squares reachable by several routes '?'.
    """
    lines = []
    for r in range(board.side):
        cells = "".join(_cell(board, (r, c)) for c in range(board.side))
        lines.append(f"{board.side - r:>2} {cells}")
    letters = "".join(f" {chr(ord('A') + c)} " for c in range(board.side))
    lines.append(f"   {letters}")
    return "\n".join(lines)


def print_board(board: CheckersBoard):
    print("\n" + render_board(board))
