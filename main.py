"""
Main game controller for the Tic-Tac-Toe console game.

This script ties together:
- Logic (board, win checking, move validation, phases)
- Text UI (menus, board grid, messages)
- Line based input and output

Run this script to play Tic-Tac-Toe against a friend in the terminal!
"""

import logging
import sys
from typing import Callable, Optional, Type

from config import GameConfig
from ui import TextRenderer

# Logic imports
from logic.game_state import Board, GameState
from logic.input_parser import MenuSelection, parse_menu_selection
from logic.move_validator import MoveValidator
from logic.phases import Draw, Exit, MainMenu, Phase, Turn, Victory, TERMINAL_PHASES
from logic.win_checker import WinChecker


logger = logging.getLogger(__name__)

OutputFn = Callable[[str], None]
InputFn = Callable[[], str]


class TicTacToeGame:
    """
    Main controller for the Tic-Tac-Toe game.

    Game flow:
    1. Main menu: play or quit
    2. Players take turns typing a cell (A1..C3)
    3. Invalid or occupied cells are asked again
    4. A line of three wins; a full board is a draw
    5. Say goodbye
    """

    def __init__(
        self,
        output: OutputFn,
        input: InputFn,
        config: Type[GameConfig] = GameConfig,
        renderer: Optional[TextRenderer] = None,
    ):
        """
        Initialize the game.

        Args:
            output: Called once per message to show it.
            input: Called to read one line typed by the player.
            config: Texts and rules.
            renderer: Turns phases into messages (default: TextRenderer).
        """
        self.output = output
        self.input = input
        self.config = config
        self.renderer = renderer or TextRenderer(config)

        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self.phase: Phase = MainMenu()

    def run(self):
        """Play from the main menu until the run exits."""
        self.phase = MainMenu()
        while not isinstance(self.phase, Exit):
            next_phase = self.step(self.phase)
            if next_phase != self.phase:
                logger.debug("Phase %s -> %s", _name(self.phase), _name(next_phase))
            self.phase = next_phase

        self._write(self.renderer.farewell())

    def step(self, phase: Phase) -> Phase:
        """
        Render a phase and compute the next one.

        Terminal phases are shown once and never read input.

        Args:
            phase: The current phase.

        Returns:
            The next phase.
        """
        if isinstance(phase, Exit):
            return phase

        self._write(self.renderer.render(phase))

        if isinstance(phase, TERMINAL_PHASES):
            return Exit()
        elif isinstance(phase, MainMenu):
            return self._handle_main_menu(self.input())
        elif isinstance(phase, Turn):
            return self._handle_turn(self.input(), phase)

        raise TypeError(f"Unknown phase: {phase!r}")

    def resolve_turn(self, phase: Turn, index: int) -> Phase:
        """
        Apply a move to a turn.

        Args:
            phase: The turn being played.
            index: Board index the player picked (0-8).

        Returns:
            The same turn if the cell is taken, otherwise the turn of the
            other player or the game outcome.
        """
        if not phase.board.is_empty(index):
            logger.debug("Cell %d is occupied, asking %s again", index, phase.player.value)
            return phase

        board = phase.board.place(index, phase.player.slot())
        state = self.win_checker.evaluate(board)

        if state == GameState.VICTORY:
            logger.info(
                "Player %s wins on line %s",
                phase.player.value, self.win_checker.get_winning_line(board)
            )
            return Victory(board, phase.player)
        if state == GameState.DRAW:
            logger.info("Game ends in a draw")
            return Draw(board)
        return Turn(board, phase.player.opposite())

    def _handle_main_menu(self, text: str) -> Phase:
        selection = parse_menu_selection(text)

        if selection == MenuSelection.START_GAME:
            logger.info("New game, %s starts", self.config.STARTING_PLAYER.value)
            return Turn(Board.empty(), self.config.STARTING_PLAYER)
        if selection == MenuSelection.QUIT_GAME:
            logger.info("Quit from main menu")
            return Exit()

        logger.debug("Invalid menu selection %r", text)
        return MainMenu()

    def _handle_turn(self, text: str, phase: Turn) -> Phase:
        result = self.validator.validate_move(phase.board, text)
        if not result.is_valid:
            logger.debug("Rejected move by %s: %s", phase.player.value, result.error_message)
            return phase
        return self.resolve_turn(phase, result.index)

    def _write(self, messages):
        for message in messages:
            self.output(message)


def _name(phase: Phase) -> str:
    return type(phase).__name__


def run(output: OutputFn, input: InputFn):
    """
    Run a full game with the given output and input.

    Returns once the run exits and the farewell has been written.
    Errors raised by `input` are not caught.
    """
    TicTacToeGame(output, input).run()


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic-Tac-Toe for two players")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every phase change and rejected move"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file instead of stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=GameConfig.VERBOSE_LOG_LEVEL if args.verbose else GameConfig.LOG_LEVEL,
        format=GameConfig.LOG_FORMAT,
        filename=args.log_file,
    )

    try:
        run(print, input)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        return 130
    except EOFError:
        print("\n\nNo more input, stopping.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
