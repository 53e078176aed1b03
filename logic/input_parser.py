"""
Input parsing for the Tic-Tac-Toe console game.
Turns raw lines typed by a player into menu selections and board indices.
"""

from enum import Enum
from typing import Optional


class MenuSelection(Enum):
    """Choices offered by the main menu."""
    START_GAME = "1"
    QUIT_GAME = "2"


# Cell references in board index order: column letter + row digit
CELL_REFERENCES = ("A1", "B1", "C1", "A2", "B2", "C2", "A3", "B3", "C3")

_INDEX_BY_REFERENCE = {ref: index for index, ref in enumerate(CELL_REFERENCES)}


def parse_menu_selection(text: str) -> Optional[MenuSelection]:
    """
    Parse a main menu selection.

    Args:
        text: Raw input line.

    Returns:
        The MenuSelection, or None if the text is not a valid choice.
    """
    text = text.strip()
    for selection in MenuSelection:
        if selection.value == text:
            return selection
    return None


def parse_cell_reference(text: str) -> Optional[int]:
    """
    Parse a cell reference such as 'B2' into a board index.

    Matching is exact and case-sensitive ('b2' is not accepted).

    Args:
        text: Raw input line.

    Returns:
        Board index (0-8), or None if the text is not a cell reference.
    """
    return _INDEX_BY_REFERENCE.get(text.strip())


def cell_reference_for(index: int) -> str:
    """Get the cell reference for a board index."""
    if not 0 <= index < len(CELL_REFERENCES):
        raise IndexError(f"Cell index {index} is out of range (0-8)")
    return CELL_REFERENCES[index]
