"""
Phases of the game flow.

    MainMenu -> Turn -> Turn -> ... -> Victory | Draw -> Exit
         \\-> Exit

Each phase is an immutable value; the controller computes the next one
instead of changing the current one.
"""

from dataclasses import dataclass
from typing import Union

from .game_state import Board, Player


@dataclass(frozen=True)
class MainMenu:
    """The start screen."""


@dataclass(frozen=True)
class Turn:
    """A player is asked for a cell."""
    board: Board
    player: Player


@dataclass(frozen=True)
class Victory:
    """Game won by `player`; `board` is the final position."""
    board: Board
    player: Player


@dataclass(frozen=True)
class Draw:
    """Board full without a winning line."""
    board: Board


@dataclass(frozen=True)
class Exit:
    """End of the run."""


Phase = Union[MainMenu, Turn, Victory, Draw, Exit]

TERMINAL_PHASES = (Victory, Draw, Exit)
