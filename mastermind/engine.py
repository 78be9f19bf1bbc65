"""
Pure game logic (no HTTP, no storage).

Two feedback numbers are computed for each guess:
- exact: how many slots hold the right color in the right place
- color_only: how many more guess pegs share a color with the secret once the
  exact matches have been taken out

The secret never repeats a color. Guesses may.
"""

from typing import List, Optional

from .errors import ConfigurationError, IncompleteGuess, InvalidGuess
from .types import EMPTY, Guess, Score, Secret


def generate_secret(color_count: int, slot_count: int, rng) -> Secret:
    """
    Pick slot_count distinct colors in random order.

    rng is anything with a randrange() method (random.Random, SystemRandom...),
    seeded by the caller so tests can replay a secret.
    """
    if slot_count > color_count:
        raise ConfigurationError(
            f"Cannot pick {slot_count} distinct colors out of {color_count}."
        )

    used = [False] * color_count
    secret: List[int] = []

    # Keep drawing until every slot is filled; repeats are simply thrown away
    while len(secret) < slot_count:
        color = rng.randrange(color_count)
        if not used[color]:
            used[color] = True
            secret.append(color)

    return secret


def is_guess_complete(guess: Guess) -> bool:
    """True when no slot is empty."""
    for slot in guess:
        if slot is EMPTY:
            return False
    return True


def _check_color(color, color_count: int) -> bool:
    return not isinstance(color, bool) and isinstance(color, int) and 0 <= color < color_count


def check_guess(guess: Guess, slot_count: int, color_count: int) -> None:
    """
    Raise InvalidGuess for a wrong-sized guess or a color outside the palette.
    Empty slots are allowed here; completeness is a separate check.
    """
    if len(guess) != slot_count:
        raise InvalidGuess(f"Guess must have exactly {slot_count} slots.")
    for slot in guess:
        if slot is EMPTY:
            continue
        if not _check_color(slot, color_count):
            raise InvalidGuess(f"Each color must be between 0 and {color_count - 1} inclusive.")


def score_guess(secret: Secret, guess: Guess, color_count: Optional[int] = None) -> Score:
    """
    Example:
      secret = [4, 5, 2, 3]
      guess  = [4, 2, 5, 3]
      exact      = 2  (slots 0 and 3)
      color_only = 2  (the 2 and the 5, both in the wrong place)
      Returns a tuple: (exact, color_only)

    Without color_count the count tables are sized to the largest color seen.
    """
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise InvalidGuess("Secret and guess must be the same non-zero length.")
    if not is_guess_complete(guess):
        raise IncompleteGuess("Fill every slot before asking for a score.")

    if color_count is None:
        # Negative or non-int colors fail the range check below
        color_count = max(
            [c + 1 for c in list(secret) + list(guess) if isinstance(c, int) and not isinstance(c, bool)],
            default=0,
        )
    for color in secret:
        if not _check_color(color, color_count):
            raise ConfigurationError(f"Secret colors must be between 0 and {color_count - 1} inclusive.")
    for color in guess:
        if not _check_color(color, color_count):
            raise InvalidGuess(f"Each color must be between 0 and {color_count - 1} inclusive.")

    # 1. Count how often each color shows up on both sides
    guess_counts = [0] * color_count
    secret_counts = [0] * color_count
    for i in range(n):
        guess_counts[guess[i]] += 1
        secret_counts[secret[i]] += 1

    # 2. Exact matches use up one peg of that color on both sides
    exact = 0
    for i in range(n):
        if guess[i] == secret[i]:
            exact += 1
            guess_counts[guess[i]] -= 1
            secret_counts[secret[i]] -= 1

    # 3. Whatever is left over pairs up by color
    color_only = 0
    for color in range(color_count):
        color_only += min(guess_counts[color], secret_counts[color])

    return (exact, color_only)


def is_win(exact: int, slot_count: int) -> bool:
    """Every slot matched exactly."""
    return exact == slot_count


def feedback_message(exact: int, color_only: int) -> str:
    # Says how many, never which
    if exact == 0 and color_only == 0:
        return "all incorrect"
    return f"{exact} exact match(es) and {color_only} color-only match(es)"
