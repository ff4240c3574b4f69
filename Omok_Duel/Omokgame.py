"""Game engine: turn sequencing, win/draw detection, history, undo and score."""

import logging

from .Board import Board, EMPTY
from .engine import referee, rules
from .engine.state import (
    IN_PROGRESS,
    Color,
    GameSnapshot,
    Move,
    Phase,
    PlaceResult,
    Score,
    UndoResult,
)


LOGGER = logging.getLogger(__name__)


class Omokgame:
    def __init__(self, board_size=15):
        self._board = Board(size=board_size)
        self.history = []
        self.current_player = Color.BLACK
        self.phase = IN_PROGRESS
        self.score = Score()

    def new_game(self, size=None):
        """Start a fresh game on an empty board. The score carries over."""
        # Board.reset validates before clearing, so a bad size leaves this game intact.
        self._board.reset(size)
        self.history = []
        self.current_player = Color.BLACK
        self.phase = IN_PROGRESS
        LOGGER.debug("new game on %dx%d board", self._board.size, self._board.size)

    def reset_score(self):
        self.score = Score()

    def place_stone(self, row, col):
        """
        Place the current player's stone at (row, col).

        Rejections (game over, occupied cell) come back as a PlaceResult with
        accepted=False and leave the game untouched. Coordinates off the board
        raise OutOfBounds.
        """
        reason = referee.check_move((row, col), self._board, self.phase)
        if reason is not None:
            LOGGER.debug("rejected %s at (%d, %d): %s", self.current_player.label, row, col, reason.value)
            return PlaceResult(accepted=False, phase=self.phase, reason=reason)

        color = self.current_player
        move = Move(row, col, color, len(self.history))
        self._board.set(row, col, color.value)
        self.history.append(move)

        run = rules.find_winning_run(self._board, row, col, color.value)
        if run is not None:
            self.phase = Phase.won(color, run)
            self.score = self.score.credit(color)
            LOGGER.debug("%s wins with %s", color.label, run)
        elif rules.is_draw(self._board):
            self.phase = Phase.drawn()
            LOGGER.debug("board full after move %d: draw", move.index + 1)
        else:
            self.current_player = color.opponent()

        return PlaceResult(accepted=True, phase=self.phase, move=move)

    def undo(self):
        """Take back the last move. Disabled once the game has ended."""
        if not self.history or self.phase.is_terminal:
            return UndoResult(accepted=False, phase=self.phase)

        move = self.history.pop()
        self._board.set(move.row, move.col, EMPTY)
        self.current_player = move.player
        LOGGER.debug("undid move %d by %s at (%d, %d)", move.index + 1, move.player.label, move.row, move.col)
        return UndoResult(accepted=True, phase=self.phase, move=move)

    def current_state(self):
        return GameSnapshot(
            board=self._board.rows(),
            size=self._board.size,
            current_player=self.current_player,
            phase=self.phase,
            history=tuple(self.history),
            score=self.score,
        )
