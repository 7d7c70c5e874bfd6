"""
Board representation for the TicTacToe engine.
Marks, cells, the 9-cell board and game outcomes.
"""

from enum import Enum
from typing import Optional, Tuple, List
from dataclasses import dataclass


class Mark(Enum):
    """The two marks players place."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X


# A cell is either empty (None) or holds a mark
Cell = Optional[Mark]

# Row-major 3x3 grid: 0,1,2 / 3,4,5 / 6,7,8
Board = Tuple[Cell, ...]
Line = Tuple[int, int, int]

BOARD_CELLS = 9


class Status(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    winner and line are only set when status is WON.
    """
    status: Status
    winner: Optional[Mark] = None
    line: Optional[Line] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(Status.IN_PROGRESS)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(Status.DRAW)

    @classmethod
    def won(cls, mark: Mark, line: Line) -> "Outcome":
        return cls(Status.WON, winner=mark, line=tuple(line))

    @property
    def is_terminal(self) -> bool:
        return self.status != Status.IN_PROGRESS


def empty_board() -> Board:
    """A fresh board with every cell empty."""
    return (None,) * BOARD_CELLS


def get_empty_cells(board: Board) -> List[int]:
    """Indices of empty cells, in ascending order."""
    return [i for i, cell in enumerate(board) if cell is None]


def place(board: Board, index: int, mark: Mark) -> Board:
    """
    Return a new board with mark placed at index.

    The given board is never modified.
    """
    cells = list(board)
    cells[index] = mark
    return tuple(cells)


def count_marks(board: Board, mark: Mark) -> int:
    return sum(1 for cell in board if cell == mark)


def is_well_formed(board: Board) -> bool:
    """
    Check that a board could come from legal play order.

    X always moves first, so X count minus O count is 0 or 1.
    """
    if len(board) != BOARD_CELLS:
        return False
    if any(cell is not None and not isinstance(cell, Mark) for cell in board):
        return False
    diff = count_marks(board, Mark.X) - count_marks(board, Mark.O)
    return diff in (0, 1)


def board_from_string(text: str) -> Board:
    """
    Build a board from a 9 character string like "XX_O_____".

    Any character other than X or O is treated as empty.
    """
    text = text.replace("\n", "").replace(" ", "")
    if len(text) != BOARD_CELLS:
        raise ValueError(f"Board string must have {BOARD_CELLS} cells, got {len(text)}")
    cells = []
    for ch in text.upper():
        if ch == "X":
            cells.append(Mark.X)
        elif ch == "O":
            cells.append(Mark.O)
        else:
            cells.append(None)
    return tuple(cells)


def format_board(board: Board) -> str:
    """Text drawing of the board, empty cells shown by their index."""
    rows = []
    for row in range(3):
        cells = []
        for col in range(3):
            index = row * 3 + col
            cell = board[index]
            cells.append(cell.value if cell is not None else str(index))
        rows.append(" | ".join(cells))
    return "\n---------\n".join(rows)
