"""
Win checker for the TicTacToe engine.
Checks if a mark has completed a line or if the game is a draw.
"""

from typing import Optional

from .board import Board, Line, Mark, Outcome, Status, get_empty_cells


# All possible winning lines, in the order they are checked
WINNING_LINES = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally).

    Lines are always checked in WINNING_LINES order and the first
    complete one wins, so results are deterministic even for boards
    that could not come from legal play.
    """

    WINNING_LINES = WINNING_LINES

    def evaluate(self, board: Board) -> Outcome:
        """
        Evaluate a board.

        Args:
            board: The 9-cell board.

        Returns:
            Won with the mark and first complete line, Draw if the board
            is full, otherwise InProgress.
        """
        for line in self.WINNING_LINES:
            mark = self._check_line(board, line)
            if mark is not None:
                return Outcome.won(mark, line)

        if not get_empty_cells(board):
            return Outcome.draw()

        return Outcome.in_progress()

    def check_winner(self, board: Board) -> Optional[Mark]:
        """The winning mark, or None if no line is complete."""
        return self.evaluate(board).winner

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """The first complete line, or None."""
        return self.evaluate(board).line

    def check_draw(self, board: Board) -> bool:
        """True when the board is full and no line is complete."""
        return self.evaluate(board).status == Status.DRAW

    def _check_line(self, board: Board, line: Line) -> Optional[Mark]:
        """
        Check if a single line is complete.

        Returns:
            The mark if all 3 cells hold it, None otherwise.
        """
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None


_checker = WinChecker()


def evaluate(board: Board) -> Outcome:
    """Module-level shortcut for WinChecker().evaluate(board)."""
    return _checker.evaluate(board)


# Quick test
if __name__ == "__main__":
    from .board import board_from_string, format_board

    for text in ("XXXOO____", "XOXXOOOXX", "_________", "OX_OX_O__"):
        board = board_from_string(text)
        print(format_board(board))
        print(f"-> {evaluate(board)}\n")
