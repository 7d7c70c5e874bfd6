"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass

from .board import BOARD_CELLS, Board, Mark, Outcome


class ErrorKind(Enum):
    """Why a move or computer request was rejected."""
    INVALID_MOVE = "invalid_move"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    ILLEGAL_COMPUTER_REQUEST = "illegal_computer_request"
    STALE_REQUEST = "stale_request"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[ErrorKind] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Index must be a cell on the board (0-8)
    2. Game must not be over
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        board: Board,
        outcome: Outcome,
        index: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            outcome: Current outcome of that board.
            index: Cell to place the mark in.

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        # bool is an int subclass but never a cell index
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error=ErrorKind.INDEX_OUT_OF_RANGE,
                error_message=f"Invalid position {index!r}. Must be 0-{BOARD_CELLS - 1}."
            )

        if outcome.is_terminal:
            return ValidationResult(
                is_valid=False,
                error=ErrorKind.INVALID_MOVE,
                error_message="Game is already over!"
            )

        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error=ErrorKind.INVALID_MOVE,
                error_message=f"Cell {index} is already occupied by {board[index].value}"
            )

        return ValidationResult(is_valid=True)

    def validate_computer_request(
        self,
        computer_mode: bool,
        computer_mark: Mark,
        turn: Mark,
        outcome: Outcome
    ) -> ValidationResult:
        """
        Validate a request for the computer to move.

        Args:
            computer_mode: True when playing against the computer.
            computer_mark: The mark the computer plays.
            turn: The mark to move.
            outcome: Current outcome.

        Returns:
            ValidationResult.
        """
        if not computer_mode:
            return ValidationResult(
                is_valid=False,
                error=ErrorKind.ILLEGAL_COMPUTER_REQUEST,
                error_message="Computer moves are only available against the computer"
            )

        if outcome.is_terminal:
            return ValidationResult(
                is_valid=False,
                error=ErrorKind.INVALID_MOVE,
                error_message="Game is already over!"
            )

        if turn != computer_mark:
            return ValidationResult(
                is_valid=False,
                error=ErrorKind.ILLEGAL_COMPUTER_REQUEST,
                error_message=f"It's {turn.value}'s turn, the computer plays {computer_mark.value}"
            )

        return ValidationResult(is_valid=True)
