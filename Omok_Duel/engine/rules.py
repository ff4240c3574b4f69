"""Five-in-a-row win detection and full-board draw detection."""

from ..Board import Board

# Fixed check order: horizontal, vertical, diagonal, anti-diagonal as (d_row, d_col)
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))
WIN_LENGTH = 5
# A run through the placed stone never needs more than four steps on either side.
MAX_STEPS = WIN_LENGTH - 1


def _walk(board: Board, row: int, col: int, dr: int, dc: int, color: int) -> list[tuple[int, int]]:
    """Collect up to MAX_STEPS contiguous cells of color from (row, col), exclusive, in (dr, dc)."""
    cells = []
    r, c = row + dr, col + dc
    while len(cells) < MAX_STEPS and board.in_bounds(r, c) and board.cells[r][c] == color:
        cells.append((r, c))
        r += dr
        c += dc
    return cells


def line_through(board: Board, row: int, col: int, dr: int, dc: int, color: int) -> list[tuple[int, int]]:
    """
    The run of color through (row, col) along one direction, ordered from the
    backward end to the forward end. (row, col) itself is always included.
    """
    backward = _walk(board, row, col, -dr, -dc, color)
    forward = _walk(board, row, col, dr, dc, color)
    return backward[::-1] + [(row, col)] + forward


def find_winning_run(board: Board, row: int, col: int, color: int) -> list[tuple[int, int]] | None:
    """
    Return the winning run created by color's stone at (row, col), or None.
    Assumes the stone is already placed. Overlines win and report every matched
    cell; when several directions qualify, the first in DIRECTIONS is reported.
    """
    for dr, dc in DIRECTIONS:
        run = line_through(board, row, col, dr, dc, color)
        if len(run) >= WIN_LENGTH:
            return run
    return None


def is_draw(board: Board) -> bool:
    """Board full. Only meaningful after the win check for the last move failed."""
    return board.is_full()

