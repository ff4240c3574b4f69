"""Move validation: game-over and occupancy verdicts for a proposed stone."""

from ..Board import Board, EMPTY
from .state import Phase, RejectKind


def check_move(move, board: Board, phase: Phase):
    """
    Validate a move against the phase and board occupancy.
    Returns None for a legal move or the RejectKind explaining the refusal.
    Raises OutOfBounds for coordinates off the board.
    """
    if phase.is_terminal:
        return RejectKind.GAME_OVER

    row, col = move
    if board.get(row, col) != EMPTY:
        return RejectKind.CELL_OCCUPIED

    return None
