"""Omok_Duel package exports."""

from .Board import Board, BoardError, InvalidSize, OutOfBounds
from .Omokgame import Omokgame
from .Player import Action, Player, HumanPlayer, GuiHumanPlayer
from .session import Session

# Subpackages for rules, presentation, and helpers
from . import engine, gui, utils

__all__ = [
    "Board",
    "BoardError",
    "InvalidSize",
    "OutOfBounds",
    "Omokgame",
    "Action",
    "Player",
    "HumanPlayer",
    "GuiHumanPlayer",
    "Session",
    "engine",
    "gui",
    "utils",
]
