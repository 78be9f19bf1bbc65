"""
In-memory store
Holds every live GameSession keyed by id, plus the scoreboard.

Sessions themselves do no locking, so every call goes through one RLock here.
The store also owns the process-wide random generator the sessions share.
"""

import logging
import random
from dataclasses import dataclass, replace
from threading import RLock
from typing import Dict, Optional, Tuple
from uuid import uuid4

from .config import GameConfig
from .errors import GameError
from .session import GameSession, SessionView
from .types import IN_PROGRESS, LOST, RESIGNED, WON, GameStatus, Guess

logger = logging.getLogger(__name__)


@dataclass
class Stats:
    games_started: int = 0
    games_won: int = 0
    games_lost: int = 0
    games_resigned: int = 0

    current_streak: int = 0
    best_streak: int = 0

    total_guesses_in_wins: int = 0
    fastest_win_moves: Optional[int] = None

    @property
    def average_guesses_to_win(self) -> Optional[float]:
        if self.games_won == 0:
            return None
        return self.total_guesses_in_wins / self.games_won


class SessionStore:
    def __init__(self, config: Optional[GameConfig] = None, rng=None) -> None:
        self.config = config or GameConfig()
        self._rng = rng if rng is not None else random.Random()
        self._sessions: Dict[str, GameSession] = {}
        self._lock = RLock()
        self._stats = Stats()

    def create(self) -> Tuple[str, SessionView]:
        new_id = str(uuid4())
        with self._lock:
            session = GameSession(self.config, rng=self._rng)
            self._sessions[new_id] = session
            self._stats.games_started += 1
            return new_id, session.view()

    def get(self, session_id: str) -> Optional[SessionView]:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            return session.view()

    def restart(self, session_id: str) -> Optional[SessionView]:
        """
        Start a fresh game in an existing session.

        Walking away from a game that already has guesses counts as resigning it.
        A game with no guesses yet is just replaced and is not counted twice.
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None

            if session.status == IN_PROGRESS and session.moves():
                self._record_transition(IN_PROGRESS, session.resign())
                logger.info("Session %s abandoned mid-game; counted as resigned", session_id)

            # An untouched game is replaced, not counted a second time
            if session.is_over:
                self._stats.games_started += 1

            return session.start()

    def guess(self, session_id: str, guess: Guess) -> Optional[SessionView]:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None

            old_status = session.status
            try:
                view = session.submit_guess(guess)
            except GameError as exc:
                logger.warning("Guess rejected for %s: %s", session_id, exc)
                raise

            self._record_transition(old_status, view)
            return view

    def resign(self, session_id: str) -> Optional[SessionView]:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None

            old_status = session.status
            try:
                view = session.resign()
            except GameError as exc:
                logger.warning("Resign rejected for %s: %s", session_id, exc)
                raise

            self._record_transition(old_status, view)
            return view

    def last_guess(self, session_id: str) -> Optional[Guess]:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            return session.last_guess()

    # Scoreboard changes exactly once, on the move into a terminal status
    def _record_transition(self, old_status: GameStatus, view: SessionView) -> None:
        if old_status == view.status or not view.is_over:
            return

        if view.status == WON:
            self._stats.games_won += 1
            self._stats.current_streak += 1
            if self._stats.current_streak > self._stats.best_streak:
                self._stats.best_streak = self._stats.current_streak

            guesses_used = len(view.moves)
            self._stats.total_guesses_in_wins += guesses_used
            if self._stats.fastest_win_moves is None or guesses_used < self._stats.fastest_win_moves:
                self._stats.fastest_win_moves = guesses_used
        else:
            if view.status == LOST:
                self._stats.games_lost += 1
            elif view.status == RESIGNED:
                self._stats.games_resigned += 1
            self._stats.current_streak = 0

    def get_stats(self) -> Stats:
        """Snapshot of the scoreboard; later games do not change it."""
        with self._lock:
            return replace(self._stats)

    def reset_stats(self) -> None:
        with self._lock:
            self._stats = Stats()
