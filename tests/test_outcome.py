import itertools

import pytest

from app.core.exceptions import InvalidBoard
from app.engine.board import Player, create_empty_board
from app.engine.outcome import (
    Outcome, OutcomeStatus, classify, find_winning_line, iter_lines
)

X = Player.X
O = Player.O
_ = None


class TestClassify:

    def test_row_win_with_empty_cells_left(self):
        board = [
            [X, X, X],
            [_, _, _],
            [_, _, _],
        ]
        outcome = classify(board)
        assert outcome.status == OutcomeStatus.WIN
        assert outcome.winner == X
        assert outcome.line == [(0, 0), (0, 1), (0, 2)]

    def test_column_win_4x4(self):
        board = [
            [X, _, O, _],
            [X, _, O, _],
            [_, X, O, _],
            [X, _, O, X],
        ]
        outcome = classify(board)
        assert outcome.winner == O
        assert outcome.line == [(0, 2), (1, 2), (2, 2), (3, 2)]

    def test_main_diagonal_win_5x5(self):
        board = create_empty_board(5)
        for i in range(5):
            board[i][i] = X
        board[0][4] = O
        board[4][0] = O
        assert classify(board) == Outcome.win(X, [(i, i) for i in range(5)])

    def test_anti_diagonal_win(self):
        board = [
            [X, X, O],
            [_, O, _],
            [O, _, X],
        ]
        outcome = classify(board)
        assert outcome.winner == O
        assert outcome.line == [(0, 2), (1, 1), (2, 0)]

    def test_draw(self):
        board = [
            [X, O, X],
            [O, X, O],
            [O, X, O],
        ]
        assert classify(board) == Outcome.draw()

    def test_full_board_with_line_is_a_win(self):
        board = [
            [X, X, X],
            [O, O, X],
            [X, O, O],
        ]
        outcome = classify(board)
        assert outcome.status == OutcomeStatus.WIN
        assert outcome.winner == X

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_empty_board_is_undecided(self, size):
        assert classify(create_empty_board(size)) == Outcome.undecided()

    def test_undecided(self):
        board = [
            [X, O, X],
            [_, O, _],
            [_, X, _],
        ]
        outcome = classify(board)
        assert outcome.status == OutcomeStatus.UNDECIDED
        assert outcome.winner is None
        assert outcome.line is None

    def test_string_marks(self):
        board = [
            ["O", "X", None],
            ["O", "X", None],
            ["O", None, "X"],
        ]
        outcome = classify(board)
        assert outcome.winner is Player.O

    def test_does_not_modify_board(self):
        board = [
            [X, X, X],
            [O, O, _],
            [_, _, _],
        ]
        snapshot = [list(row) for row in board]
        classify(board)
        assert board == snapshot

    @pytest.mark.parametrize("board", [
        [[_, _, _], [_, _, _]],
        [[_, _], [_, _]],
        [[_, _, _], [_, _, _], [_, _]],
        [[_] * 6 for _row in range(6)],
        [[_, _, _], [_, 1, _], [_, _, _]],
    ])
    def test_malformed_board(self, board):
        with pytest.raises(InvalidBoard):
            classify(board)


class TestWinningLinePriority:
    """Several completed lines only appear on hand-built boards."""

    def test_row_before_row(self):
        board = [
            [X, X, X],
            [_, _, _],
            [O, O, O],
        ]
        assert classify(board).winner == X

    def test_upper_row_wins_even_for_second_player(self):
        board = [
            [O, O, O],
            [_, _, _],
            [X, X, X],
        ]
        assert classify(board).winner == O

    def test_row_before_column(self):
        board = [
            [X, _, _],
            [X, _, _],
            [X, X, X],
        ]
        assert classify(board).line == [(2, 0), (2, 1), (2, 2)]

    def test_column_before_column(self):
        board = [
            [O, _, X],
            [O, _, X],
            [O, _, X],
        ]
        outcome = classify(board)
        assert outcome.winner == O
        assert outcome.line == [(0, 0), (1, 0), (2, 0)]

    def test_column_before_diagonal(self):
        board = [
            [X, _, X],
            [_, X, X],
            [_, _, X],
        ]
        assert classify(board).line == [(0, 2), (1, 2), (2, 2)]

    def test_diagonal_before_anti_diagonal(self):
        board = [
            [X, _, _, O],
            [_, X, O, _],
            [_, O, X, _],
            [O, _, _, X],
        ]
        outcome = classify(board)
        assert outcome.winner == X
        assert outcome.line == [(0, 0), (1, 1), (2, 2), (3, 3)]


class TestClassifyExhaustive3x3:

    def test_all_boards(self):
        """Every 3x3 board, checked against a direct line count."""
        lines = list(iter_lines(3))
        for cells in itertools.product((_, X, O), repeat=9):
            board = [list(cells[0:3]), list(cells[3:6]), list(cells[6:9])]
            outcome = classify(board)

            completed = [
                line for line in lines
                if board[line[0][0]][line[0][1]] is not None
                and len({board[r][c] for r, c in line}) == 1
            ]
            if completed:
                assert outcome.status == OutcomeStatus.WIN
                assert outcome.line == completed[0]
            elif all(cell is not None for cell in cells):
                assert outcome.status == OutcomeStatus.DRAW
            else:
                assert outcome.status == OutcomeStatus.UNDECIDED


class TestOutcomeHelpers:

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_iter_lines(self, size):
        lines = list(iter_lines(size))
        assert len(lines) == 2 * size + 2
        assert all(len(line) == size for line in lines)
        assert lines[0] == [(0, c) for c in range(size)]
        assert lines[size] == [(r, 0) for r in range(size)]
        assert lines[-1] == [(i, size - 1 - i) for i in range(size)]

    def test_find_winning_line(self):
        board = [
            [_, O, _],
            [X, O, X],
            [_, O, _],
        ]
        assert find_winning_line(board) == [(0, 1), (1, 1), (2, 1)]
        assert find_winning_line(create_empty_board(3)) is None

    def test_result_for(self):
        outcome = Outcome.win(X, [(0, 0), (0, 1), (0, 2)])
        assert outcome.result_for(X) == "win"
        assert outcome.result_for(O) == "loss"
        assert Outcome.draw().result_for(X) == "draw"
        assert Outcome.undecided().result_for(O) is None

    def test_is_terminal(self):
        assert not Outcome.undecided().is_terminal
        assert Outcome.draw().is_terminal
        assert Outcome.win(O, [(0, 0), (1, 1), (2, 2)]).is_terminal
