"""Tests for the minimax move search."""

from tictactoe_engine.ai_player import AIPlayer, SearchResult, search
from tictactoe_engine.board import Mark, Status, board_from_string, empty_board, get_empty_cells, place
from tictactoe_engine.win_checker import evaluate


def test_blocks_immediate_win_on_two_x_board():
    # X at 0 and 1, no O yet. Every O reply loses (X forks with 4 after
    # the block), so the tie goes to the lowest index: the block at 2.
    result = search(board_from_string("XX_" "___" "___"), Mark.O)
    assert result.move == 2
    assert result.value == -1


def test_blocks_immediate_win_and_holds_draw():
    result = search(board_from_string("XX_" "_O_" "___"), Mark.O)
    assert result == SearchResult(value=0, move=2)


def test_empty_board_is_forced_draw():
    result = search(empty_board(), Mark.O)
    assert result.value == 0
    # Every opening draws, so the lowest index is kept
    assert result.move == 0

    assert search(empty_board(), Mark.X).value == 0


def test_takes_win_when_available():
    result = search(board_from_string("OO_" "XX_" "X__"), Mark.O)
    assert result == SearchResult(value=1, move=2)

    result = search(board_from_string("XX_" "OO_" "___"), Mark.X)
    assert result == SearchResult(value=-1, move=2)


def test_terminal_board_has_no_move():
    assert search(board_from_string("XXX" "OO_" "___"), Mark.O) == SearchResult(value=-1)
    assert search(board_from_string("OX_" "OX_" "O_X"), Mark.X) == SearchResult(value=1)
    assert search(board_from_string("XOX" "XOO" "OXX"), Mark.O) == SearchResult(value=0)


def test_search_does_not_modify_board():
    board = [Mark.X, None, None, None, None, None, None, None, None]
    search(board, Mark.O)
    assert board == [Mark.X] + [None] * 8


def test_search_is_deterministic():
    board = board_from_string("X__" "___" "___")
    assert search(board, Mark.O) == search(board, Mark.O)


def test_computer_never_loses_against_any_x_line():
    ai = AIPlayer(Mark.O)
    seen = set()

    def play_all(board):
        if board in seen:
            return
        seen.add(board)
        for index in get_empty_cells(board):
            after_x = place(board, index, Mark.X)
            outcome = evaluate(after_x)
            assert outcome.winner != Mark.X
            if outcome.is_terminal:
                continue
            after_o = place(after_x, ai.get_best_move(after_x), Mark.O)
            if not evaluate(after_o).is_terminal:
                play_all(after_o)

    play_all(empty_board())


def test_optimal_self_play_draws():
    board = empty_board()
    mark = Mark.X
    while not evaluate(board).is_terminal:
        board = place(board, search(board, mark).move, mark)
        mark = mark.opposite()
    assert evaluate(board).status == Status.DRAW


def test_ai_player_returns_none_without_moves():
    assert AIPlayer(Mark.O).get_best_move(board_from_string("XOX" "XOO" "OXX")) is None
