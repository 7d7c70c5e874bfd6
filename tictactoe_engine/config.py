"""
Engine configuration for the TicTacToe engine.
Defaults for the computer opponent, player names and logging.
"""

import logging

from .board import Mark


class EngineConfig:
    """
    Configuration class for engine settings.

    Class attributes are the defaults; pass keyword arguments to
    override them for one session, e.g. EngineConfig(COMPUTER_MOVE_DELAY_S=0).
    """

    # ==================== COMPUTER OPPONENT ====================
    # Which mark the computer plays in HUMAN_VS_COMPUTER mode
    COMPUTER_MARK = Mark.O

    # Pause before the computer answers a human move (seconds)
    COMPUTER_MOVE_DELAY_S = 0.5

    # ==================== PLAYERS ====================
    DEFAULT_PLAYER_NAMES = {
        Mark.X: "Player 1",
        Mark.O: "Player 2",
    }
    COMPUTER_NAME = "CPU"

    # ==================== LOGGING ====================
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    def __init__(self, **overrides):
        for key, value in overrides.items():
            if not key.isupper() or not hasattr(type(self), key):
                raise ValueError(f"Unknown config setting: {key}")
            setattr(self, key, value)

        if not isinstance(self.COMPUTER_MARK, Mark):
            raise ValueError(f"COMPUTER_MARK must be a Mark, got {self.COMPUTER_MARK!r}")
        if self.COMPUTER_MOVE_DELAY_S < 0:
            raise ValueError("COMPUTER_MOVE_DELAY_S must be >= 0")


def configure_logging(config: EngineConfig = None) -> None:
    """Console logging for callers that don't set up their own handlers."""
    config = config or EngineConfig()
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
