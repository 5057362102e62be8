"""Day mapper tests — epoch, known dates, monotonicity, inverse."""

from datetime import date, timedelta

import pytest

from wordlebot.core.day_mapping import (
    MAX_GAME_NUMBER, WORDLE_EPOCH, game_number_for, wordle_date, wordle_day,
)


def test_game_zero_is_epoch():
    assert wordle_date(0) == WORDLE_EPOCH == date(2021, 6, 19)


def test_known_puzzle_dates():
    assert wordle_day(1) == "2021-06-20"
    assert wordle_day(1000) == "2024-03-15"
    assert wordle_day(1234) == "2024-11-04"


def test_consecutive_games_are_consecutive_days():
    for n in range(0, 2000, 37):
        assert wordle_date(n + 1) == wordle_date(n) + timedelta(days=1)


def test_inverse_mapping():
    for n in (0, 1, 365, 1234):
        assert game_number_for(wordle_date(n)) == n


def test_negative_game_number_raises():
    with pytest.raises(ValueError):
        wordle_date(-1)


def test_last_game_maps_to_last_date():
    assert wordle_date(MAX_GAME_NUMBER) == date.max
    with pytest.raises(ValueError):
        wordle_date(MAX_GAME_NUMBER + 1)


def test_date_before_epoch_raises():
    with pytest.raises(ValueError):
        game_number_for(date(2021, 6, 18))
