"""Plain-text board rendering for the console mode."""

from ..engine.state import Color

SYMBOLS = {0: ".", int(Color.BLACK): "X", int(Color.WHITE): "O"}


def format_board(state):
    """Board as text; the last move is bracketed, winning stones are marked '*'."""
    winning = set(state.phase.winning_cells)
    last = state.last_move
    width = len(str(state.size - 1))
    header = " " * (width + 1) + " ".join(f"{c % 10}" for c in range(state.size))
    lines = [header]
    for r, row in enumerate(state.board):
        cells = []
        for c, stone in enumerate(row):
            sym = "*" if (r, c) in winning else SYMBOLS[stone]
            cells.append(sym)
        line = " ".join(cells)
        if last is not None and last.row == r:
            # Bracket the last stone in place of the separating spaces
            pos = last.col * 2
            left = line[:pos - 1] + "[" if pos else "["
            line = left + line[pos] + "]" + line[pos + 2:]
        lines.append(f"{r:>{width}} {line}")
    return "\n".join(lines)


def format_status(state):
    score = state.score
    return f"Score: Black {score.black} - White {score.white}"


class TextView:
    def __init__(self, output=print):
        self.output = output

    def render(self, state):
        self.output(format_board(state))
        self.output(format_status(state))
