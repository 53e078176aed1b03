"""
Logic module for the Tic-Tac-Toe console game.
Handles the board, rules, input parsing, and game phases.
"""

from .game_state import Board, GameState, Player, Slot, STARTING_PLAYER
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .input_parser import (
    CELL_REFERENCES,
    MenuSelection,
    cell_reference_for,
    parse_cell_reference,
    parse_menu_selection,
)
from .phases import MainMenu, Turn, Victory, Draw, Exit, Phase, TERMINAL_PHASES
