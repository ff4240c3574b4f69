"""Tests for the session loop: scripted controllers, logging, rendering, and quitting."""

import pytest

from Omok_Duel.Omokgame import Omokgame
from Omok_Duel.Player import NEW_GAME, QUIT, RESET_SCORE, UNDO, Action, Player
from Omok_Duel.engine.state import Color, PhaseKind, Score
from Omok_Duel.session import Session, describe_phase


class SeqPlayer(Player):
    """Deterministic controller that replays a fixed action script."""

    def __init__(self, actions):
        self._actions = list(actions)
        self._idx = 0

    def next_action(self, state):
        if self._idx >= len(self._actions):
            return Action(QUIT)
        action = self._actions[self._idx]
        self._idx += 1
        if isinstance(action, Exception):
            raise action
        return action


def places(moves):
    return [Action.place(r, c) for r, c in moves]


def test_session_plays_two_games_and_keeps_score():
    black = [(7, c) for c in range(5)]
    white = [(0, c) for c in range(4)]
    first = places([mv for pair in zip(black, white) for mv in pair] + [black[-1]])
    second = places([(1, 1), (9, 0), (2, 2), (9, 1), (3, 3), (9, 2), (4, 4), (9, 3), (13, 13), (9, 4)])
    script = first + [Action(NEW_GAME)] + second

    logs = []
    frames = []
    closed = []
    session = Session(
        Omokgame(),
        SeqPlayer(script),
        logger=logs.append,
        renderer=frames.append,
        closer=lambda: closed.append(True),
    )
    score = session.run()

    assert score == Score(1, 1)
    assert closed == [True]
    assert "New game" in logs
    assert any(line.startswith("Result: Black wins") for line in logs)
    assert any(line.startswith("Result: White wins") for line in logs)
    assert frames[-1].phase.winner is Color.WHITE


def test_rejections_and_undo_are_logged():
    script = places([(3, 3), (3, 3)]) + [Action(UNDO), Action(UNDO), Action(UNDO)]
    logs = []
    game = Omokgame()
    Session(game, SeqPlayer(script), logger=logs.append).run()

    assert logs[0] == "Move 1: B (3, 3)"
    assert logs[1] == "Rejected White (3, 3): cell_occupied"
    assert logs[2] == "Undo move 1: Black (3, 3)"
    assert logs[3] == "Nothing to undo"
    assert game.current_state().history == ()


def test_bad_input_is_logged_and_session_continues():
    script = [ValueError("Invalid input"), Action.place(7, 7)]
    logs = []
    game = Omokgame()
    Session(game, SeqPlayer(script), logger=logs.append).run()
    assert logs[0] == "Invalid input"
    assert len(game.current_state().history) == 1


def test_closer_runs_when_controller_fails():
    closed = []

    class Broken(Player):
        def next_action(self, state):
            raise RuntimeError("window lost")

    session = Session(Omokgame(), Broken(), logger=lambda _: None, closer=lambda: closed.append(True))
    with pytest.raises(RuntimeError):
        session.run()
    assert closed == [True]


def test_unknown_action_rejected():
    session = Session(Omokgame(), SeqPlayer([]), logger=lambda _: None)
    with pytest.raises(ValueError):
        session.apply(Action("teleport"))


def test_describe_phase():
    game = Omokgame()
    assert describe_phase(game.phase) == "In progress"
    for mv in [(7, 0), (0, 0), (7, 1), (0, 1), (7, 2), (0, 2), (7, 3), (0, 3), (7, 4)]:
        game.place_stone(*mv)
    assert game.phase.kind is PhaseKind.WON
    assert describe_phase(game.phase) == "Black wins"


def test_undo_after_win_reports_game_over():
    moves = [(7, 0), (0, 0), (7, 1), (0, 1), (7, 2), (0, 2), (7, 3), (0, 3), (7, 4)]
    logs = []
    Session(Omokgame(), SeqPlayer(places(moves) + [Action(UNDO)]), logger=logs.append).run()
    assert logs[-1] == "Undo disabled: game over"


def test_reset_score_action_clears_scoreboard():
    moves = [(7, 0), (0, 0), (7, 1), (0, 1), (7, 2), (0, 2), (7, 3), (0, 3), (7, 4)]
    logs = []
    game = Omokgame()
    score = Session(game, SeqPlayer(places(moves) + [Action(RESET_SCORE)]), logger=logs.append).run()
    assert logs[-1] == "Score reset"
    assert score == Score(0, 0)
    assert game.phase.winner is Color.BLACK
