"""
Function-style API for UI layers.
Thin wrappers around GameSession.
"""

from typing import Optional

from .config import EngineConfig
from .session import GameSession, MoveResult, PlayMode, SessionSnapshot


def new_session(
    mode: PlayMode = PlayMode.HUMAN_VS_HUMAN,
    config: Optional[EngineConfig] = None
) -> GameSession:
    return GameSession(mode, config)


def apply_move(session: GameSession, index: int) -> MoveResult:
    return session.apply_move(index)


def request_computer_move(session: GameSession, generation: Optional[int] = None) -> MoveResult:
    return session.request_computer_move(generation)


def restart(session: GameSession) -> None:
    session.restart()


def set_mode(session: GameSession, mode: PlayMode) -> None:
    session.set_mode(mode)


def snapshot(session: GameSession) -> SessionSnapshot:
    return session.snapshot()
