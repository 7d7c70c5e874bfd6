"""
Game session for the TicTacToe engine.
Owns the board, turn, outcome, score tally and play mode.
"""

import logging
import threading
from enum import Enum
from typing import Dict, Optional
from dataclasses import dataclass

from .ai_player import AIPlayer
from .board import Board, Mark, Outcome, Status, empty_board, place
from .config import EngineConfig
from .move_validator import ErrorKind, MoveValidator
from .win_checker import WinChecker

log = logging.getLogger(__name__)


class PlayMode(Enum):
    """Who controls the second mark."""
    HUMAN_VS_HUMAN = "user"
    HUMAN_VS_COMPUTER = "cpu"


class SessionConsistencyError(RuntimeError):
    """The session reached a state legal play can't produce."""


@dataclass
class MoveResult:
    """
    Result of a move or computer move request.

    Rejected requests carry error and error_message; outcome is then
    the unchanged current outcome.
    """
    ok: bool
    outcome: Outcome
    error: Optional[ErrorKind] = None
    error_message: Optional[str] = None
    move: Optional[int] = None


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session for rendering."""
    board: Board
    turn: Mark
    outcome: Outcome
    score: Dict[Mark, int]
    mode: PlayMode
    player_names: Dict[Mark, str]


class GameSession:
    """
    The complete state of one TicTacToe session.

    State machine:
    - IN_PROGRESS -> WON / DRAW through apply_move
    - any state -> IN_PROGRESS through restart (and set_mode)

    The score tally and player names survive restarts. Every restart
    bumps the generation, which tags scheduled computer moves so a
    move computed for an old board is never applied to a new one.
    """

    def __init__(
        self,
        mode: PlayMode = PlayMode.HUMAN_VS_HUMAN,
        config: Optional[EngineConfig] = None
    ):
        """
        Initialize the session.

        Args:
            mode: Initial play mode.
            config: Engine settings (default: EngineConfig()).
        """
        self.config = config or EngineConfig()
        self.mode = PlayMode(mode)
        self.computer_mark: Mark = self.config.COMPUTER_MARK

        self.score: Dict[Mark, int] = {Mark.X: 0, Mark.O: 0}
        self.player_names: Dict[Mark, str] = dict(self.config.DEFAULT_PLAYER_NAMES)

        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(self.computer_mark)

        self._lock = threading.RLock()
        self.generation = 0
        self.board: Board = empty_board()
        self.turn: Mark = Mark.X
        self.outcome: Outcome = Outcome.in_progress()

    # ==================== STATE ====================

    @property
    def status(self) -> Status:
        return self.outcome.status

    def is_computer_turn(self) -> bool:
        """True when the UI should schedule a computer move."""
        with self._lock:
            return (
                self.mode == PlayMode.HUMAN_VS_COMPUTER
                and not self.outcome.is_terminal
                and self.turn == self.computer_mark
            )

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                board=self.board,
                turn=self.turn,
                outcome=self.outcome,
                score=dict(self.score),
                mode=self.mode,
                player_names={mark: self.player_name(mark) for mark in Mark},
            )

    # ==================== MOVES ====================

    def apply_move(self, index: int) -> MoveResult:
        """
        Place the current turn's mark at index.

        Args:
            index: Cell index (0-8).

        Returns:
            MoveResult with the new outcome, or the rejection reason.
        """
        with self._lock:
            validation = self.validator.validate_move(self.board, self.outcome, index)
            if not validation.is_valid:
                log.debug("Rejected move %r: %s", index, validation.error_message)
                return MoveResult(
                    ok=False,
                    outcome=self.outcome,
                    error=validation.error,
                    error_message=validation.error_message,
                )

            mark = self.turn
            previous = self.outcome
            self.board = place(self.board, index, mark)
            self.turn = mark.opposite()
            self.outcome = self.win_checker.evaluate(self.board)

            # Score only on the transition into a win
            if self.outcome.status == Status.WON and previous.status == Status.IN_PROGRESS:
                self.score[self.outcome.winner] += 1
                log.info("%s wins on line %s", self.outcome.winner.value, self.outcome.line)
            elif self.outcome.status == Status.DRAW:
                log.info("Game drawn")

            log.debug("%s played %d", mark.value, index)
            return MoveResult(ok=True, outcome=self.outcome, move=index)

    def request_computer_move(self, generation: Optional[int] = None) -> MoveResult:
        """
        Let the computer pick and play its move.

        Args:
            generation: Generation the request was scheduled in. If the
                session was restarted since, the request is discarded.

        Returns:
            MoveResult of the applied move, or the rejection reason.

        Raises:
            SessionConsistencyError: the game is in progress but the
                search found no move.
        """
        with self._lock:
            if generation is not None and generation != self.generation:
                log.debug(
                    "Discarding computer move from generation %d (now %d)",
                    generation, self.generation,
                )
                return MoveResult(
                    ok=False,
                    outcome=self.outcome,
                    error=ErrorKind.STALE_REQUEST,
                    error_message="Session was restarted since this move was requested",
                )

            validation = self.validator.validate_computer_request(
                self.mode == PlayMode.HUMAN_VS_COMPUTER,
                self.computer_mark,
                self.turn,
                self.outcome,
            )
            if not validation.is_valid:
                log.debug("Rejected computer move: %s", validation.error_message)
                return MoveResult(
                    ok=False,
                    outcome=self.outcome,
                    error=validation.error,
                    error_message=validation.error_message,
                )

            move = self.ai.get_best_move(self.board)
            if move is None:
                log.error("No move found on an in-progress board: %s", self.board)
                raise SessionConsistencyError(
                    f"Game is in progress but no empty cell exists: {self.board}"
                )

            return self.apply_move(move)

    # ==================== SESSION CONTROL ====================

    def restart(self) -> None:
        """Clear the board, X to move. Score and names are kept."""
        with self._lock:
            self.board = empty_board()
            self.turn = Mark.X
            self.outcome = Outcome.in_progress()
            self.generation += 1
            log.debug("Session restarted (generation %d)", self.generation)

    def set_mode(self, mode: PlayMode) -> None:
        """Switch play mode; always starts a new game."""
        with self._lock:
            self.mode = PlayMode(mode)
            log.info("Play mode set to %s", self.mode.name)
            self.restart()

    # ==================== PLAYERS ====================

    def set_player_name(self, mark: Mark, name: str) -> None:
        name = (name or "").strip()
        if not name:
            raise ValueError(f"Name for {mark.value} can't be blank")
        with self._lock:
            self.player_names[mark] = name

    def player_name(self, mark: Mark) -> str:
        """Display name; the computer's mark shows the computer name."""
        if self.mode == PlayMode.HUMAN_VS_COMPUTER and mark == self.computer_mark:
            return self.config.COMPUTER_NAME
        return self.player_names[mark]

    def status_text(self) -> str:
        """One-line status message for the UI."""
        with self._lock:
            if self.outcome.status == Status.WON:
                return f"Winner: {self.player_name(self.outcome.winner)}"
            if self.outcome.status == Status.DRAW:
                return "It's a draw!"
            return f"Next player: {self.player_name(self.turn)}"
