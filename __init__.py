"""
Tic-Tac-Toe Console Project
===========================
A two-player Tic-Tac-Toe game for the terminal.
Players type cell references (A1..C3) to place their marks;
three in a row wins, a full board without one is a draw.

O always moves first.
"""

__version__ = "1.0.0"
