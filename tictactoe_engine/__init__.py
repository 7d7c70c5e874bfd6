"""
TicTacToe Engine
================
Game logic for 3x3 TicTacToe: board state, win/draw detection, an
optimal minimax opponent, and a session that keeps score across games.

The engine is a library; a UI layer renders snapshots and forwards clicks.
"""

from .board import Mark, Status, Outcome, empty_board
from .win_checker import WinChecker, WINNING_LINES, evaluate
from .ai_player import AIPlayer, SearchResult, search
from .move_validator import ErrorKind, MoveValidator, ValidationResult
from .config import EngineConfig, configure_logging
from .session import (
    GameSession,
    MoveResult,
    PlayMode,
    SessionConsistencyError,
    SessionSnapshot,
)
from .scheduler import ComputerMoveScheduler, PendingComputerMove
from .api import (
    new_session,
    apply_move,
    request_computer_move,
    restart,
    set_mode,
    snapshot,
)

__version__ = "1.0.0"
