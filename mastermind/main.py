'''
Mastermind engine host

Endpoints:
POST /games                    -> start a session
GET  /games/{id}               -> read state & history
POST /games/{id}/guess         -> submit a guess
POST /games/{id}/resign        -> give up (needs at least one guess)
POST /games/{id}/start         -> new game in the same session
GET  /games/{id}/last-guess    -> previous row, to pre-fill the next one

Lookups:
GET  /results/classify         -> (exact, color_only) -> result class
GET  /results/{class_id}       -> result class -> (exact, color_only)

Extras:
GET  /stats                    -> scoreboard
POST /stats/reset              -> reset scoreboard

Everything lives in memory; restarting the process starts from scratch.
'''

import logging
import random

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .classifier import NO_CLASS, classify, declassify
from .config import load_settings
from .errors import GameError, IncompleteGuess, InvalidGuess, InvalidResultClass
from .random_client import fetch_seed
from .store import SessionStore
from .schemas import (
    GameStateOut,
    GuessRequest,
    LastGuessOut,
    ResultClassOut,
    StatsOut,
    to_game_state,
    to_result_class,
)

settings = load_settings()

if settings.app_env == "local":
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

logger = logging.getLogger(__name__)

app = FastAPI(title="Mastermind Engine", version="1.0.0")

# Allow everything in dev so the docs and a local front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

# One generator per process, seeded once
_store = SessionStore(settings.game, rng=random.Random(fetch_seed(settings.seed_source)))


def get_store() -> SessionStore:
    return _store


# ---------------- Errors ----------------

@app.exception_handler(GameError)
async def _game_error(request: Request, exc: GameError) -> JSONResponse:
    # Bad input -> 400, wrong moment (game over, nothing to resign...) -> 409
    if isinstance(exc, (InvalidGuess, IncompleteGuess, InvalidResultClass)):
        status_code = 400
    else:
        status_code = 409
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="Game not found")


# ---------------- Routes ----------------

@app.post("/games", response_model=GameStateOut, summary="Start a new session")
def start_game(store: SessionStore = Depends(get_store)) -> GameStateOut:
    game_id, view = store.create()
    logger.info("Session %s created", game_id)
    return to_game_state(game_id, view, store.config.max_moves)


@app.get("/games/{game_id}", response_model=GameStateOut, summary="Get current game state")
def get_game(game_id: str, store: SessionStore = Depends(get_store)) -> GameStateOut:
    view = store.get(game_id)
    if view is None:
        raise _not_found()
    return to_game_state(game_id, view, store.config.max_moves)


@app.post("/games/{game_id}/guess", response_model=GameStateOut, summary="Submit a guess")
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    store: SessionStore = Depends(get_store),
) -> GameStateOut:
    # store.guess() raises GameError for bad or ill-timed guesses
    view = store.guess(game_id, payload.guess)
    if view is None:
        raise _not_found()
    return to_game_state(game_id, view, store.config.max_moves)


@app.post("/games/{game_id}/resign", response_model=GameStateOut, summary="Resign the current game")
def resign_game(game_id: str, store: SessionStore = Depends(get_store)) -> GameStateOut:
    view = store.resign(game_id)
    if view is None:
        raise _not_found()
    return to_game_state(game_id, view, store.config.max_moves)


@app.post("/games/{game_id}/start", response_model=GameStateOut, summary="Start a new game in this session")
def restart_game(game_id: str, store: SessionStore = Depends(get_store)) -> GameStateOut:
    """A game left with guesses on it is scored as resigned first."""
    view = store.restart(game_id)
    if view is None:
        raise _not_found()
    return to_game_state(game_id, view, store.config.max_moves)


@app.get("/games/{game_id}/last-guess", response_model=LastGuessOut, summary="Previous guess, for copying down")
def last_guess(game_id: str, store: SessionStore = Depends(get_store)) -> LastGuessOut:
    if store.get(game_id) is None:
        raise _not_found()
    return LastGuessOut(guess=store.last_guess(game_id))


@app.get("/results/classify", response_model=ResultClassOut, summary="Result class for a score")
def classify_result(
    exact: int,
    color_only: int,
    store: SessionStore = Depends(get_store),
) -> ResultClassOut:
    slot_count = store.config.slot_count
    result_class = classify(exact, color_only, slot_count)
    return to_result_class(
        exact, color_only, None if result_class == NO_CLASS else result_class, slot_count
    )


@app.get("/results/{class_id}", response_model=ResultClassOut, summary="Score for a result class")
def declassify_result(class_id: int, store: SessionStore = Depends(get_store)) -> ResultClassOut:
    slot_count = store.config.slot_count
    exact, color_only = declassify(class_id, slot_count)
    return to_result_class(exact, color_only, class_id, slot_count)


@app.get("/stats", response_model=StatsOut, summary="Get scoreboard")
def get_stats(store: SessionStore = Depends(get_store)) -> StatsOut:
    stats = store.get_stats()
    return StatsOut(
        games_started=stats.games_started,
        games_won=stats.games_won,
        games_lost=stats.games_lost,
        games_resigned=stats.games_resigned,
        current_streak=stats.current_streak,
        best_streak=stats.best_streak,
        average_guesses_to_win=stats.average_guesses_to_win,
        fastest_win_moves=stats.fastest_win_moves,
    )


@app.post("/stats/reset", summary="Reset the scoreboard")
def reset_stats(store: SessionStore = Depends(get_store)) -> dict:
    store.reset_stats()
    return {"message": "Stats reset."}
