import io
import random
import threading

import pytest

from cnake.app import input_loop, main, movement_loop
from cnake.board import Point
from cnake.game import Direction, Game


def make_game(width=4, height=3):
    return Game(width, height, apples=False, stream=io.StringIO(), rng=random.Random(1))


def test_movement_loop_stops_at_wall():
    game = make_game()
    stop = threading.Event()
    sleeps = []
    score = movement_loop(game, stop, sleeps.append)
    assert stop.is_set()
    assert sleeps == [pytest.approx(0.5)]
    assert score == 0
    assert game.position == Point(4, 0)


def test_movement_loop_speeds_up_after_apple():
    game = make_game()
    game.board[Point(4, 0)] = "+"
    stop = threading.Event()
    sleeps = []
    score = movement_loop(game, stop, sleeps.append)
    assert score == 1
    assert sleeps == [pytest.approx(0.49)]
    assert stop.is_set()


def test_movement_loop_does_nothing_when_already_stopped():
    game = make_game()
    stop = threading.Event()
    stop.set()
    sleeps = []
    movement_loop(game, stop, sleeps.append)
    assert sleeps == []
    assert game.position == Point(4, 1)


def test_input_loop_applies_keys_until_end_of_input():
    game = make_game()
    stop = threading.Event()
    keys = iter(["x", None, "d", "q", ""])
    input_loop(game, stop, lambda: next(keys))
    assert game.direction is Direction.RIGHT
    assert list(keys) == []


def test_input_loop_ends_when_stop_is_set():
    game = make_game()
    stop = threading.Event()
    calls = []

    def reader():
        calls.append(1)
        if len(calls) == 3:
            stop.set()
        return None

    input_loop(game, stop, reader)
    assert len(calls) == 3
    assert game.direction is Direction.UP


def test_input_loop_skips_reading_when_stopped():
    game = make_game()
    stop = threading.Event()
    stop.set()
    calls = []
    input_loop(game, stop, lambda: calls.append(1) or "d")
    assert calls == []
    assert game.direction is Direction.UP


@pytest.mark.parametrize("argv", [["--width", "0"], ["--width", "3"], ["--height", "-2"]])
def test_main_rejects_bad_dimensions(argv):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2