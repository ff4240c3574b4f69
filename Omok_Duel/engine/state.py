"""Value types exchanged between the game engine and its callers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

Cell = Tuple[int, int]


class Color(IntEnum):
    """A player's colour; values match the stone encoding on the board."""

    BLACK = -1
    WHITE = 1

    def opponent(self) -> "Color":
        return Color(-self.value)

    @property
    def label(self) -> str:
        return self.name.capitalize()


class PhaseKind(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


class RejectKind(Enum):
    CELL_OCCUPIED = "cell_occupied"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Phase:
    kind: PhaseKind = PhaseKind.IN_PROGRESS
    winner: Optional[Color] = None
    winning_cells: Tuple[Cell, ...] = ()

    @property
    def is_terminal(self) -> bool:
        return self.kind is not PhaseKind.IN_PROGRESS

    @classmethod
    def won(cls, winner: Color, cells) -> "Phase":
        return cls(PhaseKind.WON, winner, tuple(cells))

    @classmethod
    def drawn(cls) -> "Phase":
        return cls(PhaseKind.DRAWN)


IN_PROGRESS = Phase()


@dataclass(frozen=True)
class Move:
    row: int
    col: int
    player: Color
    index: int


@dataclass(frozen=True)
class PlaceResult:
    accepted: bool
    phase: Phase
    reason: Optional[RejectKind] = None
    move: Optional[Move] = None

    @property
    def winning_cells(self) -> Tuple[Cell, ...]:
        return self.phase.winning_cells


@dataclass(frozen=True)
class UndoResult:
    accepted: bool
    phase: Phase
    move: Optional[Move] = None


@dataclass(frozen=True)
class Score:
    black: int = 0
    white: int = 0

    def get(self, color: Color) -> int:
        return self.black if color is Color.BLACK else self.white

    def credit(self, color: Color) -> "Score":
        if color is Color.BLACK:
            return Score(self.black + 1, self.white)
        return Score(self.black, self.white + 1)


@dataclass(frozen=True)
class GameSnapshot:
    """Everything a renderer needs; copies only, never the live board."""

    board: Tuple[Tuple[int, ...], ...]
    size: int
    current_player: Color
    phase: Phase
    history: Tuple[Move, ...]
    score: Score

    @property
    def last_move(self) -> Optional[Move]:
        return self.history[-1] if self.history else None
