import math

import pytest

from raycub.context import Key
from raycub.movement import (
    handle_key,
    move_backward,
    move_forward,
    move_left,
    move_right,
    turn_left,
    turn_right,
)
from raycub.world import Game

MAP = [
    "1111111",
    "1000001",
    "1000001",
    "100N001",
    "1000001",
    "1000001",
    "1111111",
]


@pytest.fixture
def game():
    return Game.from_lines(MAP)


def test_forward_then_backward_returns(game):
    move_forward(game, 0.1)
    assert game.pos_y < 3.5
    assert game.pos_x == 3.5
    move_backward(game, 0.1)
    assert game.pos_y == pytest.approx(3.5)
    assert game.pos_x == pytest.approx(3.5)


def test_forward_is_blocked_by_wall(game):
    for _ in range(100):
        move_forward(game, 0.1)
    assert 1.2 <= game.pos_y < 1.5
    assert game.is_free(game.pos_x, game.pos_y)


def test_backward_is_blocked_by_wall(game):
    for _ in range(100):
        move_backward(game, 0.1)
    assert 5.5 < game.pos_y <= 5.8


def test_strafe_left_and_right(game):
    move_left(game, 0.1)
    assert game.pos_x < 3.5
    assert game.pos_y == 3.5
    move_right(game, 0.1)
    assert game.pos_x == pytest.approx(3.5)


def test_strafe_is_blocked_by_wall(game):
    for _ in range(100):
        move_right(game, 0.1)
    assert 5.5 < game.pos_x <= 5.8


def test_turn_right_then_left_restores(game):
    turn_right(game, 0.03)
    assert game.dir_x > 0
    turn_left(game, 0.03)
    assert game.dir_x == pytest.approx(0.0, abs=1e-12)
    assert game.dir_y == pytest.approx(-1.0)
    assert game.plane_x == pytest.approx(0.66)
    assert game.plane_y == pytest.approx(0.0, abs=1e-12)


def test_turning_preserves_lengths_and_perpendicularity(game):
    for _ in range(50):
        turn_left(game, 0.03)
    assert math.hypot(game.dir_x, game.dir_y) == pytest.approx(1.0)
    assert math.hypot(game.plane_x, game.plane_y) == pytest.approx(0.66)
    assert game.dir_x * game.plane_x + game.dir_y * game.plane_y == pytest.approx(
        0.0, abs=1e-12
    )


def test_handle_key_escape_requests_quit(game):
    assert handle_key(game, Key.ESCAPE) is False
    assert (game.pos_x, game.pos_y) == (3.5, 3.5)


def test_handle_key_moves(game):
    assert handle_key(game, Key.W) is True
    assert game.pos_y < 3.5
    handle_key(game, Key.S)
    assert game.pos_y == pytest.approx(3.5)
    handle_key(game, Key.A)
    assert game.pos_x < 3.5
    handle_key(game, Key.D)
    assert game.pos_x == pytest.approx(3.5)


def test_handle_key_turns(game):
    handle_key(game, Key.RIGHT)
    assert game.dir_x > 0
    handle_key(game, Key.LEFT)
    handle_key(game, Key.LEFT)
    assert game.dir_x < 0


def test_handle_key_ignores_other_keys(game):
    assert handle_key(game, Key.SPACE) is True
    assert (game.pos_x, game.pos_y, game.dir_x, game.dir_y) == (3.5, 3.5, 0, -1)