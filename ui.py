"""
Text UI for the Tic-Tac-Toe console game.

Turns game phases into the lines shown to the players:
- Main menu with the title banner
- Board grid with A-C / 1-3 labels
- Turn prompt, victory and draw messages
- Farewell
"""

from typing import List, Type

from config import GameConfig
from logic.game_state import Board, Player
from logic.phases import Draw, Exit, MainMenu, Phase, Turn, Victory


class TextRenderer:
    """
    Renders game phases as text messages.

    Every method returns a list of messages; the caller writes them out
    in order, one output call per message.
    """

    def __init__(self, config: Type[GameConfig] = GameConfig):
        self.config = config

    def render(self, phase: Phase) -> List[str]:
        """Render any phase. Exit renders nothing (the farewell is separate)."""
        if isinstance(phase, MainMenu):
            return self.main_menu()
        elif isinstance(phase, Turn):
            return self.turn(phase.board, phase.player)
        elif isinstance(phase, Victory):
            return self.victory(phase.board, phase.player)
        elif isinstance(phase, Draw):
            return self.draw(phase.board)
        elif isinstance(phase, Exit):
            return []
        raise TypeError(f"Cannot render {phase!r}")

    def main_menu(self) -> List[str]:
        cfg = self.config
        border = "=" * cfg.BANNER_WIDTH
        title = f" {cfg.TITLE} ".center(cfg.BANNER_WIDTH, "=")
        return [
            border,
            title,
            border,
            "",
            cfg.MENU_PROMPT,
            cfg.MENU_PLAY,
            cfg.MENU_QUIT,
        ]

    def board(self, board: Board) -> str:
        """
        Draw the board as one multi-line string:

              | A | B | C |
            ------------------
            1 | X |   | O | 1
            ...
        """
        header = "  | A | B | C |"
        separator = "-" * 18
        lines = ["", header, separator]
        for row in range(3):
            chars = [board[row * 3 + col].value for col in range(3)]
            lines.append(f"{row + 1} | {' | '.join(chars)} | {row + 1}")
            lines.append(separator)
        lines.append(header + "  ")
        lines.append("")
        return "\n".join(lines)

    def turn(self, board: Board, player: Player) -> List[str]:
        return [
            self.config.TURN_HEADING.format(player=player.value),
            self.board(board),
            "",
            self.config.TURN_PROMPT,
        ]

    def victory(self, board: Board, player: Player) -> List[str]:
        return [
            self.board(board),
            "",
            self.config.VICTORY_MESSAGE.format(player=player.value),
        ]

    def draw(self, board: Board) -> List[str]:
        return [self.board(board), "", self.config.DRAW_MESSAGE]

    def farewell(self) -> List[str]:
        return [self.config.FAREWELL_MESSAGE]
