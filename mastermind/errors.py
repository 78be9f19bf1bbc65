"""
Typed failures raised by the engine.

All of them are precondition violations: nothing is retryable and the
session is left exactly as it was before the call.
"""


class GameError(ValueError):
    """Base class for every error the engine raises."""


class ConfigurationError(GameError):
    """color_count / slot_count / max_moves do not describe a playable game."""


class InvalidGuess(GameError):
    """Guess has the wrong number of slots or a color outside the palette."""


class IncompleteGuess(GameError):
    """Guess still has empty slots."""


class SessionNotActive(GameError):
    """Action needs an in-progress game; call start() first."""


class SessionExhausted(GameError):
    """Move log is already full. Only reachable by bypassing the state machine."""


class InvalidResign(GameError):
    """Resign requested before any guess was made."""


class ResignAfterGameOver(InvalidResign, SessionNotActive):
    """Resign requested on a game that already ended."""


class InvalidResultClass(GameError):
    """Result class index outside [0, total_classes)."""
