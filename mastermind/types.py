"""
Labels for clarity.
"""

from typing import List, Literal, Optional, Tuple

Color = int  # 0 -> color_count - 1
Slot = Optional[Color]  # None while the slot is still empty
Guess = List[Slot]
Secret = List[Color]
Score = Tuple[int, int]  # (exact, color_only)
GameStatus = Literal["in_progress", "won", "lost", "resigned"]

EMPTY: Slot = None

IN_PROGRESS: GameStatus = "in_progress"
WON: GameStatus = "won"
LOST: GameStatus = "lost"
RESIGNED: GameStatus = "resigned"
TERMINAL_STATUSES = (WON, LOST, RESIGNED)

# Default palette, in peg order
COLOR_NAMES = ("black", "blue", "green", "yellow", "red", "white")
