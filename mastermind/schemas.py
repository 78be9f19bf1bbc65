"""
Explicit validation & Pydantic models
- Models are used to validate and serialize/deserialize data
  exchanged between the engine host and a UI.
- Defines the structure of API requests and responses.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from .classifier import total_classes
from .engine import feedback_message
from .session import Move, SessionView
from .types import LOST, RESIGNED, WON

Status = Literal["in_progress", "won", "lost", "resigned"]


# 1. Validates player's guess
class GuessRequest(BaseModel):
    guess: List[Optional[int]] = Field(
        ..., description="One color per slot (0..color_count-1); null marks an empty slot."
    )

    @field_validator("guess")
    @classmethod
    def validate_colors(cls, guess_list: List[Optional[int]]) -> List[Optional[int]]:
        """
        Only negative colors are rejected here. The upper bound and the length
        depend on the game's configuration, so the engine checks those.
        """
        for color in guess_list:
            if color is not None and color < 0:
                raise ValueError("Colors cannot be negative.")
        return guess_list

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": [4, 2, 5, 3]},
                {"guess": [0, None, 1, None]},  # rejected: incomplete
            ]
        }
    }


# 2. One scored guess
class MoveOut(BaseModel):
    guess: List[int] = Field(..., description="The player's guess")
    exact: int = Field(..., description="Pegs right in both color and position")
    color_only: int = Field(..., description="Further pegs right in color only")
    result_class: int = Field(..., description="Dense index of the (exact, color_only) outcome")
    message: str = Field(..., description="Feedback message")


# 3. Overall state of one session
class GameStateOut(BaseModel):
    game_id: str = Field(..., description="Unique ID for the session")
    status: Status = Field(..., description="Current state of the game")
    move_index: int = Field(..., description="Row the next guess goes into (last row once over)")
    moves_left: int = Field(..., description="How many guesses remain")
    moves: List[MoveOut] = Field(..., description="All guesses so far with feedback")
    secret: Optional[List[int]] = Field(None, description="The secret (only revealed when the game is over)")
    note: Optional[str] = Field(None, description="Extra note, e.g. 'Winner!'")


# 4. Guess to pre-fill the next row with
class LastGuessOut(BaseModel):
    guess: Optional[List[int]] = Field(None, description="Previous row's guess, or null before the first guess")


# 5. Classification lookups
class ResultClassOut(BaseModel):
    exact: int
    color_only: int
    result_class: Optional[int] = Field(None, description="null when the pair cannot happen")
    total_classes: int


# 6. Scoreboard
class StatsOut(BaseModel):
    games_started: int = Field(..., description="Total games started since the process began (a game replaced before its first guess counts once)")
    games_won: int = Field(..., description="Total games won")
    games_lost: int = Field(..., description="Total games lost by running out of moves")
    games_resigned: int = Field(..., description="Total games resigned, including games left mid-play for a new one")

    current_streak: int = Field(..., description="Current consecutive wins")
    best_streak: int = Field(..., description="Best consecutive wins")

    average_guesses_to_win: Optional[float] = Field(None, description="Average number of guesses used in wins")
    fastest_win_moves: Optional[int] = Field(None, description="Fewest guesses taken to win a game")


def to_move_out(move: Move) -> MoveOut:
    return MoveOut(
        guess=list(move.guess),
        exact=move.exact,
        color_only=move.color_only,
        result_class=move.result_class,
        message=feedback_message(move.exact, move.color_only),
    )


def to_game_state(game_id: str, view: SessionView, max_moves: int) -> GameStateOut:
    note = None
    if view.status == WON:
        note = "Winner!"
    elif view.status in (LOST, RESIGNED):
        note = "Loser!"

    return GameStateOut(
        game_id=game_id,
        status=view.status,
        move_index=view.move_index,
        moves_left=max_moves - len(view.moves),
        moves=[to_move_out(m) for m in view.moves],
        secret=list(view.secret) if view.secret is not None else None,
        note=note,
    )


def to_result_class(exact: int, color_only: int, result_class: Optional[int], slot_count: int) -> ResultClassOut:
    return ResultClassOut(
        exact=exact,
        color_only=color_only,
        result_class=result_class,
        total_classes=total_classes(slot_count),
    )
