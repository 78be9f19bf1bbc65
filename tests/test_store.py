"""
Testing in-memory store
- Create sessions, make guesses, and check status/history/scoreboard.
- The store fixture pins every secret to [0, 1, 2, 3].
"""

import pytest

from mastermind.errors import IncompleteGuess, InvalidResign, SessionNotActive


def test_store_create_and_guess_basic(store):
    game_id, view = store.create()
    assert view.status == "in_progress"

    # Wrong guess -> history grows, game continues
    view = store.guess(game_id, [5, 4, 3, 2])
    assert view.status == "in_progress"
    assert len(view.moves) == 1
    assert store.get(game_id).move_index == 1

    # Winning guess ends the game
    view = store.guess(game_id, [0, 1, 2, 3])
    assert view.status == "won"
    assert view.secret == (0, 1, 2, 3)


def test_store_unknown_id(store):
    assert store.get("nope") is None
    assert store.guess("nope", [0, 1, 2, 3]) is None
    assert store.resign("nope") is None
    assert store.restart("nope") is None
    assert store.last_guess("nope") is None


def test_sessions_are_independent(store):
    first, _ = store.create()
    second, _ = store.create()
    store.guess(first, [0, 1, 2, 3])
    assert store.get(first).status == "won"
    assert store.get(second).status == "in_progress"
    assert store.get(second).moves == ()


def test_store_stats_update_on_win_loss_and_resign(store):
    # Game A: win in 2 guesses
    game_a, _ = store.create()
    store.guess(game_a, [4, 4, 4, 4])
    store.guess(game_a, [0, 1, 2, 3])

    stats = store.get_stats()
    assert stats.games_started == 1
    assert stats.games_won == 1
    assert stats.current_streak == 1
    assert stats.best_streak == 1
    assert stats.total_guesses_in_wins == 2
    assert stats.fastest_win_moves == 2
    assert stats.average_guesses_to_win == 2.0

    # Game B: ten misses -> lost
    game_b, _ = store.create()
    for _ in range(10):
        store.guess(game_b, [4, 4, 4, 4])

    # Game C: resign after one guess
    game_c, _ = store.create()
    store.guess(game_c, [4, 4, 4, 4])
    store.resign(game_c)

    stats = store.get_stats()
    assert stats.games_started == 3
    assert stats.games_won == 1
    assert stats.games_lost == 1
    assert stats.games_resigned == 1
    assert stats.current_streak == 0
    assert stats.best_streak == 1


def test_rejected_actions_do_not_touch_stats(store):
    game_id, _ = store.create()

    with pytest.raises(InvalidResign):
        store.resign(game_id)
    with pytest.raises(IncompleteGuess):
        store.guess(game_id, [0, None, 2, 3])

    store.guess(game_id, [0, 1, 2, 3])
    with pytest.raises(SessionNotActive):
        store.guess(game_id, [0, 1, 2, 3])

    stats = store.get_stats()
    assert stats.games_won == 1
    assert stats.games_lost == 0
    assert stats.games_resigned == 0


def test_restart_starts_a_fresh_game(store):
    game_id, _ = store.create()
    store.guess(game_id, [0, 1, 2, 3])

    view = store.restart(game_id)
    assert view.status == "in_progress"
    assert view.moves == ()
    assert store.get_stats().games_started == 2


def test_last_guess(store):
    game_id, _ = store.create()
    assert store.last_guess(game_id) is None
    store.guess(game_id, [3, 3, 1, 0])
    assert store.last_guess(game_id) == [3, 3, 1, 0]


def test_reset_stats(store):
    game_id, _ = store.create()
    store.guess(game_id, [0, 1, 2, 3])
    store.reset_stats()
    stats = store.get_stats()
    assert stats.games_started == 0
    assert stats.games_won == 0
    assert stats.average_guesses_to_win is None


def test_stats_are_a_snapshot(store):
    game_id, _ = store.create()
    store.guess(game_id, [0, 1, 2, 3])
    before = store.get_stats()
    assert before.games_won == 1

    # Later games leave an earlier snapshot alone
    other_id, _ = store.create()
    store.guess(other_id, [0, 1, 2, 3])
    assert before.games_won == 1
    assert before.games_started == 1
    assert store.get_stats().games_won == 2

    # Editing a snapshot does not reach the store
    before.games_won = 99
    assert store.get_stats().games_won == 2


def test_restart_mid_game_counts_as_resigned(store):
    game_id, _ = store.create()
    store.guess(game_id, [0, 1, 2, 3])
    other_id, _ = store.create()
    store.guess(other_id, [5, 4, 3, 2])
    assert store.get_stats().current_streak == 1

    view = store.restart(other_id)
    assert view.status == "in_progress"
    assert view.moves == ()

    stats = store.get_stats()
    assert stats.games_started == 3
    assert stats.games_won == 1
    assert stats.games_resigned == 1
    assert stats.current_streak == 0
    assert stats.best_streak == 1


def test_restart_before_first_guess_is_not_counted(store):
    game_id, _ = store.create()
    store.restart(game_id)
    store.restart(game_id)

    stats = store.get_stats()
    assert stats.games_started == 1
    assert stats.games_resigned == 0
