"""
Delayed computer moves for the TicTacToe engine.

The UI waits a moment before the computer answers so the human can see
their own move land. The wait runs on a timer thread; each pending move
remembers the session generation it was scheduled in and is discarded
if the session was restarted before it fires.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, Optional

from .move_validator import ErrorKind
from .session import GameSession, MoveResult

log = logging.getLogger(__name__)


@dataclass
class PendingComputerMove:
    """A scheduled computer move."""
    generation: int
    status: str = "pending"  # pending, running, applied, discarded, failed, cancelled
    result: Optional[MoveResult] = None
    timer: Optional[threading.Timer] = field(default=None, repr=False)


class ComputerMoveScheduler:
    """
    Schedules the computer's reply on a cancellable timer.

    Only one move is pending at a time; scheduling again cancels the
    previous one.
    """

    def __init__(
        self,
        session: GameSession,
        delay_s: Optional[float] = None,
        on_complete: Optional[Callable[[PendingComputerMove, MoveResult], None]] = None
    ):
        """
        Args:
            session: Session to play in.
            delay_s: Wait before moving (default: session config).
            on_complete: Called from the timer thread after the move was
                applied or discarded.
        """
        self.session = session
        self.delay_s = session.config.COMPUTER_MOVE_DELAY_S if delay_s is None else delay_s
        self.on_complete = on_complete
        self.pending: Optional[PendingComputerMove] = None
        self._lock = threading.Lock()

    def schedule(self) -> PendingComputerMove:
        """Start the timer for a computer move in the current generation."""
        with self._lock:
            if self.pending is not None and self.pending.status == "pending":
                self._cancel_locked()

            pending = PendingComputerMove(generation=self.session.generation)
            timer = threading.Timer(self.delay_s, self._run, args=(pending,))
            timer.daemon = True
            pending.timer = timer
            self.pending = pending

        log.debug("Computer move scheduled in %.2fs (generation %d)", self.delay_s, pending.generation)
        timer.start()
        return pending

    def maybe_schedule(self) -> Optional[PendingComputerMove]:
        """Schedule only if it is the computer's turn."""
        if not self.session.is_computer_turn():
            return None
        return self.schedule()

    def cancel(self) -> None:
        """Stop the pending move before it fires."""
        with self._lock:
            self._cancel_locked()

    def wait(self, timeout: Optional[float] = None) -> Optional[PendingComputerMove]:
        """Block until the pending move has fired (or was cancelled)."""
        pending = self.pending
        if pending is not None and pending.timer is not None:
            pending.timer.join(timeout)
        return pending

    def _cancel_locked(self) -> None:
        pending = self.pending
        if pending is None or pending.status != "pending":
            return
        pending.timer.cancel()
        pending.status = "cancelled"
        log.debug("Computer move cancelled (generation %d)", pending.generation)

    def _run(self, pending: PendingComputerMove) -> None:
        with self._lock:
            if pending.status != "pending":
                return
            pending.status = "running"

        try:
            result = self.session.request_computer_move(generation=pending.generation)
        except Exception:
            pending.status = "failed"
            log.exception("Computer move failed")
            raise

        pending.result = result
        if result.ok:
            pending.status = "applied"
        elif result.error == ErrorKind.STALE_REQUEST:
            pending.status = "discarded"
        else:
            pending.status = "failed"
            log.warning("Computer move rejected: %s", result.error_message)

        if self.on_complete is not None:
            self.on_complete(pending, result)
