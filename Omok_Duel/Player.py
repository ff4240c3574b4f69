"""Input controllers: turn console or GUI input into game actions."""

from dataclasses import dataclass
from typing import Optional

PLACE = "place"
UNDO = "undo"
NEW_GAME = "new"
QUIT = "quit"
RESET_SCORE = "reset"


@dataclass(frozen=True)
class Action:
    kind: str
    row: Optional[int] = None
    col: Optional[int] = None

    @classmethod
    def place(cls, row, col):
        return cls(PLACE, row, col)


COMMANDS = {
    "u": Action(UNDO),
    "undo": Action(UNDO),
    "n": Action(NEW_GAME),
    "new": Action(NEW_GAME),
    "r": Action(RESET_SCORE),
    "reset": Action(RESET_SCORE),
    "q": Action(QUIT),
    "quit": Action(QUIT),
}


def parse_command(raw):
    """Parse 'row col' or a command word; raise ValueError on anything else."""
    text = raw.strip().lower()
    if text in COMMANDS:
        return COMMANDS[text]
    try:
        row_str, col_str = text.split()
        return Action.place(int(row_str), int(col_str))
    except ValueError as exc:
        raise ValueError("Invalid input; expected 'row col', 'u', 'n', 'r' or 'q'") from exc


class Player:
    def next_action(self, state):
        """Return the next Action for the player to move in `state`."""
        raise NotImplementedError


class HumanPlayer(Player):
    """Console player; both colours share the keyboard."""

    def __init__(self, prompt_fn=None):
        self.prompt_fn = prompt_fn or input

    def next_action(self, state):
        if state.phase.is_terminal:
            prompt = "Game over. 'n' for a new game, 'r' to clear the score, 'q' to quit: "
        else:
            prompt = f"{state.current_player.label} to move, enter 'row col' (0-indexed), 'u' to undo: "
        try:
            raw = self.prompt_fn(prompt)
        except EOFError:
            return Action(QUIT)
        action = parse_command(raw)
        if action.kind == PLACE and not (0 <= action.row < state.size and 0 <= action.col < state.size):
            raise ValueError(f"Move out of bounds; rows and columns run 0..{state.size - 1}")
        return action


class GuiHumanPlayer(Player):
    def __init__(self, view):
        self.view = view

    def next_action(self, state):
        return self.view.wait_for_action(state)
