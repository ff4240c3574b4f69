"""Session loop: feed controller actions into the engine and report outcomes."""

from .Omokgame import Omokgame
from .Player import NEW_GAME, PLACE, QUIT, RESET_SCORE, UNDO
from .engine.state import PhaseKind


def describe_phase(phase):
    if phase.kind is PhaseKind.WON:
        return f"{phase.winner.label} wins"
    if phase.kind is PhaseKind.DRAWN:
        return "Draw (board full)"
    return "In progress"


class Session:
    """Runs games back to back on one engine until a controller asks to quit."""

    def __init__(self, game: Omokgame, controller, logger=print, renderer=None, closer=None):
        self.game = game
        self.controller = controller
        self.logger = logger
        self.renderer = renderer
        self.closer = closer

    def _render(self):
        if self.renderer:
            self.renderer(self.game.current_state())

    def apply(self, action):
        """Apply one action. Returns False once the session should stop."""
        game = self.game
        if action.kind == QUIT:
            return False

        if action.kind == NEW_GAME:
            game.new_game()
            self.logger("New game")
        elif action.kind == UNDO:
            result = game.undo()
            if result.accepted:
                mv = result.move
                self.logger(f"Undo move {mv.index + 1}: {mv.player.label} ({mv.row}, {mv.col})")
            elif result.phase.is_terminal:
                self.logger("Undo disabled: game over")
            else:
                self.logger("Nothing to undo")
        elif action.kind == RESET_SCORE:
            game.reset_score()
            self.logger("Score reset")
        elif action.kind == PLACE:
            mover = game.current_player
            result = game.place_stone(action.row, action.col)
            if not result.accepted:
                self.logger(f"Rejected {mover.label} ({action.row}, {action.col}): {result.reason.value}")
            else:
                mv = result.move
                self.logger(f"Move {mv.index + 1}: {mv.player.label[0]} ({mv.row}, {mv.col})")
                if result.phase.is_terminal:
                    score = game.score
                    self.logger(f"Result: {describe_phase(result.phase)} | Score B {score.black} - W {score.white}")
        else:
            raise ValueError(f"Unsupported action: {action.kind}")
        return True

    def run(self):
        """Loop until quit; returns the final score."""
        try:
            while True:
                self._render()
                try:
                    action = self.controller.next_action(self.game.current_state())
                except ValueError as exc:
                    self.logger(str(exc))
                    continue
                if not self.apply(action):
                    break
            return self.game.score
        finally:
            if self.closer:
                self.closer()
