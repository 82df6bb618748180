import math

import pytest

from cubwalk.config import MOVE_SPEED, ROT_SPEED, GameMap, new_game
from cubwalk.movement import (
    move_backward,
    move_forward,
    move_left,
    move_right,
    rotate_left,
    rotate_right,
)
from cubwalk.world import set_orientation

ROOM = ["11111", "10001", "10001", "10001", "11111"]


def make_game(x=2.5, y=2.5, direction="E"):
    game = new_game()
    game.map = GameMap(grid=list(ROOM), width=5, height=5)
    game.player.x = x
    game.player.y = y
    set_orientation(game.player, direction)
    return game


def test_move_forward_east():
    game = make_game()
    move_forward(game)
    assert game.player.x == pytest.approx(2.5 + MOVE_SPEED)
    assert game.player.y == 2.5


def test_move_forward_then_backward_returns():
    game = make_game(direction="N")
    move_forward(game)
    assert game.player.y == pytest.approx(2.5 - MOVE_SPEED)
    move_backward(game)
    assert game.player.x == pytest.approx(2.5)
    assert game.player.y == pytest.approx(2.5)


def test_wall_blocks_forward():
    game = make_game(x=3.95)
    move_forward(game)
    assert game.player.x == 3.95
    assert game.player.y == 2.5


def test_wall_blocks_backward():
    game = make_game(x=1.05)
    move_backward(game)
    assert game.player.x == 1.05


def test_slides_along_wall():
    game = make_game(x=3.95, y=2.5)
    # facing diagonally into the east wall: x blocked, y still moves
    game.player.dir_x, game.player.dir_y = 1.0, 1.0
    move_forward(game)
    assert game.player.x == 3.95
    assert game.player.y == pytest.approx(2.5 + MOVE_SPEED)


def test_strafe_follows_camera_plane():
    game = make_game(direction="E")
    move_right(game)
    assert game.player.x == 2.5
    assert game.player.y > 2.5
    move_left(game)
    assert game.player.x == 2.5
    assert game.player.y == pytest.approx(2.5)


def test_strafe_blocked_by_wall():
    game = make_game(y=3.99, direction="E")
    move_right(game)
    assert game.player.y == 3.99


def test_rotate_left_then_right_restores():
    game = make_game(direction="N")
    p = game.player
    before = (p.dir_x, p.dir_y, p.plane_x, p.plane_y)
    rotate_left(game)
    assert (p.dir_x, p.dir_y) != pytest.approx(before[:2])
    rotate_right(game)
    assert (p.dir_x, p.dir_y, p.plane_x, p.plane_y) == pytest.approx(before)


def test_rotation_angle_and_invariants():
    game = make_game(direction="E")
    p = game.player
    rotate_left(game)
    assert math.atan2(p.dir_y, p.dir_x) == pytest.approx(ROT_SPEED)
    assert math.hypot(p.dir_x, p.dir_y) == pytest.approx(1.0)
    assert math.hypot(p.plane_x, p.plane_y) == pytest.approx(0.66)
    assert p.dir_x * p.plane_x + p.dir_y * p.plane_y == pytest.approx(0.0)
    rotate_right(game)
    rotate_right(game)
    assert math.atan2(p.dir_y, p.dir_x) == pytest.approx(-ROT_SPEED)


def test_rotation_does_not_move_player():
    game = make_game()
    rotate_left(game)
    rotate_right(game)
    rotate_right(game)
    assert (game.player.x, game.player.y) == (2.5, 2.5)