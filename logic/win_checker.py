"""
Win checker for the Tic-Tac-Toe console game.
Checks if a board has a winning line, a free cell, or is a draw.
"""

from typing import Optional, Tuple
from .game_state import Board, GameState, Slot


class WinChecker:
    """
    Checks for win conditions in Tic-Tac-Toe.

    Win condition: 3 equal marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as board indices)
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def has_win(self, board: Board) -> bool:
        """Check if any line holds three equal marks."""
        return self.get_winning_line(board) is not None

    def has_free_cell(self, board: Board) -> bool:
        """Check if at least one cell is still empty."""
        return Slot.EMPTY in board

    def evaluate(self, board: Board) -> GameState:
        """
        Evaluate the board.

        A win is checked before fullness, so a last move that both
        completes a line and fills the board counts as a victory.

        Args:
            board: The board to evaluate.

        Returns:
            GameState.VICTORY, GameState.DRAW or GameState.UNFINISHED.
        """
        if self.has_win(board):
            return GameState.VICTORY
        if self.has_free_cell(board):
            return GameState.UNFINISHED
        return GameState.DRAW

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            board: The board to check.

        Returns:
            The first winning line as a tuple of indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line):
                return line
        return None

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> bool:
        a, b, c = (board[i] for i in line)
        return a != Slot.EMPTY and a == b == c


_checker = WinChecker()


def has_win(board: Board) -> bool:
    return _checker.has_win(board)


def has_free_cell(board: Board) -> bool:
    return _checker.has_free_cell(board)


def evaluate(board: Board) -> GameState:
    return _checker.evaluate(board)
