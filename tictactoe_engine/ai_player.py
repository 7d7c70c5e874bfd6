"""
AI player for the TicTacToe engine.
Uses the Minimax algorithm to choose the best move.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .board import Board, Mark, Status, get_empty_cells, place
from .win_checker import evaluate

log = logging.getLogger(__name__)

# Values are always from O's point of view
O_WIN_VALUE = 1
X_WIN_VALUE = -1
DRAW_VALUE = 0


@dataclass(frozen=True)
class SearchResult:
    """Best value reachable and the move that reaches it (None on terminal boards)."""
    value: int
    move: Optional[int] = None


@lru_cache(maxsize=None)
def _minimax(board: Board, mark_to_move: Mark) -> SearchResult:
    """
    Full-depth minimax, no pruning.

    O maximizes, X minimizes. A child only replaces the best move on a
    strict improvement, so ties go to the lowest index.
    """
    outcome = evaluate(board)

    if outcome.status == Status.WON:
        return SearchResult(O_WIN_VALUE if outcome.winner == Mark.O else X_WIN_VALUE)
    if outcome.status == Status.DRAW:
        return SearchResult(DRAW_VALUE)

    is_maximizing = mark_to_move == Mark.O
    best_value = float('-inf') if is_maximizing else float('inf')
    best_move = None

    for index in get_empty_cells(board):
        child = _minimax(place(board, index, mark_to_move), mark_to_move.opposite())

        if is_maximizing and child.value > best_value:
            best_value, best_move = child.value, index
        elif not is_maximizing and child.value < best_value:
            best_value, best_move = child.value, index

    return SearchResult(int(best_value), best_move)


def search(board: Board, mark_to_move: Mark) -> SearchResult:
    """
    Find the game-theoretically optimal move.

    Args:
        board: 9-cell board tuple. Never modified.
        mark_to_move: The mark whose turn it is.

    Returns:
        SearchResult with value +1 (O wins), -1 (X wins) or 0 (draw)
        under optimal play, and the move index (None if the board is
        already terminal).
    """
    return _minimax(tuple(board), mark_to_move)


class AIPlayer:
    """
    An AI that plays one mark using the Minimax search.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(self, mark: Mark = Mark.O):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI controls (default: O)
        """
        self.mark = mark

    def get_best_move(self, board: Board) -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            board: Current board, with self.mark to move.

        Returns:
            Cell index of the best move, or None if no moves are available.
        """
        result = search(board, self.mark)
        info = _minimax.cache_info()
        log.debug(
            "AI (%s) picked move %s (value %d); positions cached: %d",
            self.mark.value, result.move, result.value, info.currsize,
        )
        return result.move


# Quick test
if __name__ == "__main__":
    from .board import board_from_string, format_board

    ai = AIPlayer(Mark.O)

    # X is about to win with 2
    board = board_from_string("XX_" "_O_" "___")
    print(format_board(board))
    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"

    # Empty board is a forced draw
    print(f"Empty board: {search(board_from_string('_' * 9), Mark.O)}")
