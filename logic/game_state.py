"""
Game state for the Tic-Tac-Toe console game.
Defines the slots, the players and the immutable 3x3 board.
"""

from enum import Enum
from typing import Iterator, Tuple
from dataclasses import dataclass, field, replace


# The board is always 3x3
BOARD_CELLS = 9


class Slot(Enum):
    """Content of one board cell. The value is the character drawn for it."""
    EMPTY = " "
    X = "X"
    O = "O"


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    def slot(self) -> Slot:
        """Get the mark this player places on the board."""
        return Slot.X if self == Player.X else Slot.O


# Who moves first in every game
STARTING_PLAYER = Player.O


class GameState(Enum):
    """Outcome of evaluating a board."""
    UNFINISHED = "unfinished"
    VICTORY = "victory"
    DRAW = "draw"


@dataclass(frozen=True)
class Board:
    """
    The 3x3 game board.

    Cells are stored row-major:

        0 | 1 | 2
        3 | 4 | 5
        6 | 7 | 8

    A Board never changes. Placing a mark returns a new Board, so earlier
    boards can be kept around (e.g. for rendering the final position).
    """

    cells: Tuple[Slot, ...] = field(
        default_factory=lambda: (Slot.EMPTY,) * BOARD_CELLS
    )

    def __post_init__(self):
        cells = tuple(self.cells)
        if len(cells) != BOARD_CELLS:
            raise ValueError(
                f"A board needs exactly {BOARD_CELLS} cells, got {len(cells)}"
            )
        # Accept any sequence but always store a tuple
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Board":
        """Create a board with every cell empty."""
        return cls()

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> Slot:
        return self.cells[self._check_index(index)]

    def __iter__(self) -> Iterator[Slot]:
        return iter(self.cells)

    def is_empty(self, index: int) -> bool:
        """Check if the cell at the given index holds no mark."""
        return self[index] == Slot.EMPTY

    def place(self, index: int, mark: Slot) -> "Board":
        """
        Place a mark at the given index.

        Occupancy is not checked here - callers use is_empty() first.

        Args:
            index: Cell index (0-8).
            mark: The slot value to put in the cell.

        Returns:
            A new Board. This board is left untouched.
        """
        index = self._check_index(index)
        cells = list(self.cells)
        cells[index] = mark
        return replace(self, cells=tuple(cells))

    @staticmethod
    def _check_index(index: int) -> int:
        # Negative indices would silently wrap around on a tuple
        if not 0 <= index < BOARD_CELLS:
            raise IndexError(f"Cell index {index} is out of range (0-8)")
        return index
