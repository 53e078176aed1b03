"""
Move validator for the Tic-Tac-Toe console game.
Validates that a typed move names an empty cell.
"""

from typing import Optional
from dataclasses import dataclass
from .game_state import Board
from .input_parser import parse_cell_reference, cell_reference_for


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    index: Optional[int] = None  # Board index when the move is valid


class MoveValidator:
    """
    Validates Tic-Tac-Toe moves.

    Rules:
    1. The move must be one of the 9 cell references (A1..C3)
    2. Can only place on empty cells
    """

    def validate_move(self, board: Board, text: str) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            text: The cell reference typed by the player.

        Returns:
            ValidationResult with is_valid, error_message and the board index.
        """
        index = parse_cell_reference(text)
        if index is None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell reference {text.strip()!r}. Use A1-C3."
            )

        if not board.is_empty(index):
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Cell {cell_reference_for(index)} is already occupied "
                    f"by {board[index].value}"
                )
            )

        return ValidationResult(is_valid=True, index=index)
