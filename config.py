"""
Game configuration for the Tic-Tac-Toe console game.
All the texts shown to the players and the logging settings.
"""

import logging

from logic.game_state import STARTING_PLAYER


class GameConfig:
    """
    Configuration class for the console game.
    Subclass it and override values to change texts.
    """

    # ==================== RULES ====================
    # Who moves first (the board itself is always 3x3)
    STARTING_PLAYER = STARTING_PLAYER

    # ==================== MAIN MENU ====================
    TITLE = "Tic-Tac-Toe"
    BANNER_WIDTH = 19
    MENU_PROMPT = "Please enter a selection:"
    MENU_PLAY = "[1] Play"
    MENU_QUIT = "[2] Quit"

    # ==================== TURN MENU ====================
    TURN_HEADING = "Current turn: {player}"
    TURN_PROMPT = "Please enter a cell e.g. 'B2':"

    # ==================== OUTCOMES ====================
    VICTORY_MESSAGE = "Player {player} wins the game! Congratulations!"
    DRAW_MESSAGE = "Game ends in a draw! Better luck next time!"
    FAREWELL_MESSAGE = "Bye!"

    # ==================== LOGGING ====================
    # Logs go to stderr (or --log-file), never to the game output
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    LOG_LEVEL = logging.WARNING
    VERBOSE_LOG_LEVEL = logging.DEBUG
