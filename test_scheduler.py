"""Tests for delayed, cancellable computer moves."""

import threading

from tictactoe_engine.board import Mark, empty_board
from tictactoe_engine.config import EngineConfig
from tictactoe_engine.scheduler import ComputerMoveScheduler
from tictactoe_engine.session import GameSession, PlayMode


def _cpu_session(delay_s=0.0):
    return GameSession(PlayMode.HUMAN_VS_COMPUTER, EngineConfig(COMPUTER_MOVE_DELAY_S=delay_s))


def test_scheduled_move_is_applied():
    session = _cpu_session()
    done = threading.Event()
    calls = []

    def on_complete(pending, result):
        calls.append((pending.status, result.ok))
        done.set()

    scheduler = ComputerMoveScheduler(session, on_complete=on_complete)
    session.apply_move(0)

    pending = scheduler.maybe_schedule()
    assert pending is not None
    assert done.wait(5)

    assert pending.status == "applied"
    assert calls == [("applied", True)]
    assert session.board[4] == Mark.O
    assert session.turn == Mark.X


def test_nothing_scheduled_on_human_turn():
    session = _cpu_session()
    scheduler = ComputerMoveScheduler(session)
    assert scheduler.maybe_schedule() is None
    assert scheduler.pending is None


def test_restart_discards_pending_move():
    session = _cpu_session(delay_s=0.3)
    scheduler = ComputerMoveScheduler(session)
    session.apply_move(0)

    pending = scheduler.schedule()
    session.restart()
    scheduler.wait(5)

    assert pending.status == "discarded"
    assert session.board == empty_board()
    assert session.turn == Mark.X


def test_set_mode_discards_pending_move():
    session = _cpu_session(delay_s=0.3)
    scheduler = ComputerMoveScheduler(session)
    session.apply_move(0)

    pending = scheduler.schedule()
    session.set_mode(PlayMode.HUMAN_VS_HUMAN)
    scheduler.wait(5)

    assert pending.status == "discarded"
    assert session.board == empty_board()


def test_cancel_before_fire():
    session = _cpu_session(delay_s=5)
    scheduler = ComputerMoveScheduler(session)
    session.apply_move(0)

    pending = scheduler.schedule()
    scheduler.cancel()
    scheduler.wait(5)

    assert pending.status == "cancelled"
    assert pending.result is None
    assert session.board.count(None) == 8


def test_rescheduling_cancels_previous():
    session = _cpu_session(delay_s=0.2)
    scheduler = ComputerMoveScheduler(session)
    session.apply_move(0)

    first = scheduler.schedule()
    second = scheduler.schedule()
    scheduler.wait(5)

    assert first.status == "cancelled"
    assert second.status == "applied"
    assert session.board.count(Mark.O) == 1
