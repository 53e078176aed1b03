"""
Tests for the Tic-Tac-Toe logic modules.
Board, win checker, input parsing and move validation.

Usage:
    pytest test_modules.py
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from logic.game_state import Board, GameState, Player, Slot, STARTING_PLAYER
from logic.input_parser import (
    CELL_REFERENCES,
    MenuSelection,
    cell_reference_for,
    parse_cell_reference,
    parse_menu_selection,
)
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker, evaluate, has_free_cell, has_win

E, X, O = Slot.EMPTY, Slot.X, Slot.O


def board_of(*cells) -> Board:
    return Board(cells)


# ==================== BOARD ====================

def test_empty_board():
    board = Board.empty()
    assert len(board) == 9
    assert all(slot == Slot.EMPTY for slot in board)
    assert board == Board()


def test_board_rejects_wrong_size():
    with pytest.raises(ValueError):
        Board((E,) * 8)
    with pytest.raises(ValueError):
        Board((E,) * 10)


def test_place_returns_new_board():
    board = Board.empty()
    placed = board.place(4, X)

    assert board == Board.empty()
    assert placed[4] == X
    assert [i for i in range(9) if placed[i] != board[i]] == [4]


def test_place_on_filled_board_only_changes_index():
    board = board_of(X, O, E, E, X, E, O, E, E)
    placed = board.place(8, O)
    assert board[8] == E
    for i in range(8):
        assert placed[i] == board[i]
    assert placed[8] == O


def test_board_is_hashable_value():
    a = Board.empty().place(0, X)
    b = Board.empty().place(0, X)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Board.empty().place(0, O)


def test_is_empty():
    board = board_of(X, E, O, E, E, E, E, E, E)
    assert not board.is_empty(0)
    assert board.is_empty(1)
    assert not board.is_empty(2)


@pytest.mark.parametrize("index", [-1, 9, 42])
def test_index_out_of_range(index):
    with pytest.raises(IndexError):
        Board.empty().place(index, X)
    with pytest.raises(IndexError):
        Board.empty().is_empty(index)


def test_players():
    assert Player.X.opposite() == Player.O
    assert Player.O.opposite() == Player.X
    assert Player.X.slot() == Slot.X
    assert Player.O.slot() == Slot.O
    assert STARTING_PLAYER == Player.O


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
@pytest.mark.parametrize("mark", [X, O])
def test_every_line_wins(line, mark):
    board = Board.empty()
    for i in line:
        board = board.place(i, mark)
    assert has_win(board)
    assert WinChecker().get_winning_line(board) == line


@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
def test_every_line_wins_with_other_cells_filled(line):
    filler = [O, X, X, X, O, O, O, X, X]
    cells = [X if i in line else filler[i] for i in range(9)]
    assert has_win(Board(cells))


@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
def test_mixed_line_does_not_win(line):
    board = Board.empty().place(line[0], X).place(line[1], O).place(line[2], X)
    assert not has_win(board)


def test_empty_board_has_no_win():
    assert not has_win(Board.empty())


@pytest.mark.parametrize("index", range(9))
def test_has_free_cell_with_one_gap(index):
    cells = [X] * 9
    cells[index] = E
    assert has_free_cell(Board(cells))


@pytest.mark.parametrize("index", range(9))
def test_has_free_cell_on_full_board(index):
    cells = [X] * 9
    cells[index] = O
    assert not has_free_cell(Board(cells))


def test_evaluate_unfinished():
    assert evaluate(Board.empty()) == GameState.UNFINISHED
    assert evaluate(board_of(X, O, X, E, E, E, E, E, E)) == GameState.UNFINISHED


def test_evaluate_draw():
    board = board_of(
        O, X, O,
        O, X, X,
        X, O, O,
    )
    assert not has_win(board)
    assert evaluate(board) == GameState.DRAW


def test_evaluate_full_board_with_line_is_victory():
    board = board_of(
        O, X, O,
        X, O, X,
        X, O, O,
    )
    assert not has_free_cell(board)
    assert has_win(board)
    assert evaluate(board) == GameState.VICTORY


# ==================== INPUT PARSING ====================

def test_parse_menu_selection():
    assert parse_menu_selection("1") == MenuSelection.START_GAME
    assert parse_menu_selection("2") == MenuSelection.QUIT_GAME
    assert parse_menu_selection("  2\n") == MenuSelection.QUIT_GAME


@pytest.mark.parametrize("text", ["", "0", "3", "12", "play", "1 2"])
def test_parse_menu_selection_invalid(text):
    assert parse_menu_selection(text) is None


def test_cell_references_map_to_distinct_indices():
    indices = [parse_cell_reference(ref) for ref in CELL_REFERENCES]
    assert indices == list(range(9))
    for index in range(9):
        assert parse_cell_reference(cell_reference_for(index)) == index


def test_cell_reference_row_major():
    assert parse_cell_reference("A1") == 0
    assert parse_cell_reference("C1") == 2
    assert parse_cell_reference("A2") == 3
    assert parse_cell_reference("B2") == 4
    assert parse_cell_reference("C3") == 8
    assert parse_cell_reference(" B3 \n") == 7


@pytest.mark.parametrize("text", ["", "A0", "A4", "D1", "AA", "11", "a1", "b2", "A", "A1B1", "Z9"])
def test_parse_cell_reference_invalid(text):
    assert parse_cell_reference(text) is None


def test_cell_reference_for_out_of_range():
    with pytest.raises(IndexError):
        cell_reference_for(9)
    with pytest.raises(IndexError):
        cell_reference_for(-1)


# ==================== MOVE VALIDATOR ====================

def test_validate_move():
    validator = MoveValidator()
    board = Board.empty().place(4, O)

    result = validator.validate_move(board, "A1")
    assert result.is_valid
    assert result.index == 0
    assert result.error_message is None

    result = validator.validate_move(board, "B2")
    assert not result.is_valid
    assert "B2" in result.error_message
    assert "occupied" in result.error_message

    result = validator.validate_move(board, "b2")
    assert not result.is_valid
    assert result.index is None
    assert "Invalid" in result.error_message

