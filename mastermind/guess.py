"""
Helpers for building a guess one peg at a time.

A UI drops pegs into the active row, swaps two pegs within it, or copies
the previous row. All of these return a new list and never touch the
argument, so the caller can keep the row as plain state.
"""

from .engine import is_guess_complete
from .errors import InvalidGuess
from .types import COLOR_NAMES, EMPTY, Color, Guess

__all__ = [
    "color_name",
    "empty_guess",
    "place_peg",
    "clear_peg",
    "swap_pegs",
    "is_guess_complete",
]


def color_name(color: Color) -> str:
    if 0 <= color < len(COLOR_NAMES):
        return COLOR_NAMES[color]
    return f"color {color}"


def empty_guess(slot_count: int) -> Guess:
    return [EMPTY] * slot_count


def _check_slot(guess: Guess, slot: int) -> None:
    if slot < 0 or slot >= len(guess):
        raise InvalidGuess(f"Slot must be between 0 and {len(guess) - 1}, got {slot}.")


def place_peg(guess: Guess, slot: int, color: Color) -> Guess:
    _check_slot(guess, slot)
    updated = list(guess)
    updated[slot] = color
    return updated


def clear_peg(guess: Guess, slot: int) -> Guess:
    _check_slot(guess, slot)
    updated = list(guess)
    updated[slot] = EMPTY
    return updated


def swap_pegs(guess: Guess, first: int, second: int) -> Guess:
    """Exchange two slots; an empty slot swaps like any other."""
    _check_slot(guess, first)
    _check_slot(guess, second)
    updated = list(guess)
    updated[first], updated[second] = updated[second], updated[first]
    return updated
