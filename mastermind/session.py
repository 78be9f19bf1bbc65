"""
One play-through: secret, move log, and the status machine around them.

    start()         any state        -> in_progress
    submit_guess()  in_progress      -> in_progress | won | lost
    resign()        in_progress (>=1 guess) -> resigned

won / lost / resigned only accept start(). Every rejected call raises a
GameError and leaves the session untouched.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .classifier import classify
from .config import GameConfig
from .engine import check_guess, generate_secret, is_guess_complete, is_win, score_guess
from .errors import (
    IncompleteGuess,
    InvalidResign,
    ResignAfterGameOver,
    SessionExhausted,
    SessionNotActive,
)
from .types import (
    IN_PROGRESS,
    LOST,
    RESIGNED,
    TERMINAL_STATUSES,
    WON,
    Color,
    GameStatus,
    Guess,
    Secret,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    guess: Tuple[Color, ...]
    exact: int
    color_only: int

    def __post_init__(self) -> None:
        slots = len(self.guess)
        if self.exact < 0 or self.color_only < 0:
            raise ValueError("Match counts cannot be negative.")
        if self.exact + self.color_only > slots:
            raise ValueError(f"exact + color_only cannot exceed {slots}.")
        if self.exact == slots and self.color_only != 0:
            raise ValueError("A full exact match leaves nothing for color-only matches.")

    @property
    def result_class(self) -> int:
        return classify(self.exact, self.color_only, len(self.guess))


class MoveLog:
    """Append-only list of moves, capped at max_moves."""

    def __init__(self, max_moves: int) -> None:
        self.max_moves = max_moves
        self._moves: List[Move] = []

    def append(self, move: Move) -> None:
        if self.is_full():
            raise SessionExhausted(f"All {self.max_moves} moves have been used.")
        self._moves.append(move)

    def is_full(self) -> bool:
        return len(self._moves) >= self.max_moves

    def moves(self) -> Tuple[Move, ...]:
        return tuple(self._moves)

    def last(self) -> Optional[Move]:
        return self._moves[-1] if self._moves else None

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self):
        return iter(self._moves)


@dataclass(frozen=True)
class SessionView:
    """Read-only snapshot handed to whoever draws the board."""
    status: GameStatus
    move_index: int
    moves: Tuple[Move, ...]
    secret: Optional[Tuple[Color, ...]] = None  # only once the game is over

    @property
    def is_over(self) -> bool:
        return self.status in TERMINAL_STATUSES


class GameSession:
    def __init__(self, config: Optional[GameConfig] = None, rng=None) -> None:
        self.config = config or GameConfig()
        self._rng = rng if rng is not None else random.Random()
        self._secret: Secret = []
        self._log = MoveLog(self.config.max_moves)
        self._status: GameStatus = IN_PROGRESS
        self._move_index = 0
        self.start()

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def move_index(self) -> int:
        return self._move_index

    @property
    def is_over(self) -> bool:
        return self._status in TERMINAL_STATUSES

    def moves(self) -> Tuple[Move, ...]:
        return self._log.moves()

    def revealed_secret(self) -> Optional[Tuple[Color, ...]]:
        """The secret, but only after the game has ended."""
        if not self.is_over:
            return None
        return tuple(self._secret)

    def view(self) -> SessionView:
        return SessionView(
            status=self._status,
            move_index=self._move_index,
            moves=self._log.moves(),
            secret=self.revealed_secret(),
        )

    def start(self) -> SessionView:
        self._secret = generate_secret(self.config.color_count, self.config.slot_count, self._rng)
        self._log = MoveLog(self.config.max_moves)
        self._move_index = 0
        self._status = IN_PROGRESS
        logger.debug("New game started (%d colors, %d slots, %d moves)",
                     self.config.color_count, self.config.slot_count, self.config.max_moves)
        return self.view()

    def submit_guess(self, guess: Guess) -> SessionView:
        if self.is_over:
            raise SessionNotActive(f"Game {self._status}. Start a new game to keep playing.")

        check_guess(guess, self.config.slot_count, self.config.color_count)
        if not is_guess_complete(guess):
            raise IncompleteGuess("Fill every slot before submitting the guess.")
        if self._log.is_full():
            raise SessionExhausted(f"All {self.config.max_moves} moves have been used.")

        exact, color_only = score_guess(self._secret, guess, self.config.color_count)
        self._log.append(Move(guess=tuple(guess), exact=exact, color_only=color_only))

        if is_win(exact, self.config.slot_count):
            self._status = WON
            logger.info("Game won in %d move(s)", len(self._log))
        elif self._move_index >= self.config.max_moves - 1:
            # Stay on the last row so it can still be drawn
            self._status = LOST
            logger.info("Game lost after %d moves", len(self._log))
        else:
            self._move_index += 1

        return self.view()

    def resign(self) -> SessionView:
        if self.is_over:
            raise ResignAfterGameOver(f"Game {self._status}. Nothing to resign.")
        if len(self._log) == 0:
            raise InvalidResign("Make at least one guess before resigning.")

        self._status = RESIGNED
        logger.info("Game resigned after %d move(s)", len(self._log))
        return self.view()

    def last_guess(self) -> Optional[Guess]:
        """Copy of the previous row's guess, for pre-filling the next one."""
        last = self._log.last()
        if last is None:
            return None
        return list(last.guess)
