"""Moving and turning the player, with walls blocking movement per axis."""

from __future__ import annotations

import math

from cubwalk.config import MOVE_SPEED, ROT_SPEED, WALL, Game


def _is_wall(game: Game, x: float, y: float) -> bool:
    return game.map.grid[int(y)][int(x)] == WALL


def _step(game: Game, dx: float, dy: float) -> None:
    """Move by (dx, dy), each axis on its own so the player slides along walls."""
    player = game.player
    if not _is_wall(game, player.x + dx, player.y):
        player.x += dx
    if not _is_wall(game, player.x, player.y + dy):
        player.y += dy


def move_forward(game: Game) -> None:
    """Step along the facing direction."""
    p = game.player
    _step(game, p.dir_x * MOVE_SPEED, p.dir_y * MOVE_SPEED)


def move_backward(game: Game) -> None:
    """Step against the facing direction."""
    p = game.player
    _step(game, -(p.dir_x * MOVE_SPEED), -(p.dir_y * MOVE_SPEED))


def move_left(game: Game) -> None:
    """Step against the camera plane."""
    p = game.player
    _step(game, -(p.plane_x * MOVE_SPEED), -(p.plane_y * MOVE_SPEED))


def move_right(game: Game) -> None:
    """Step along the camera plane."""
    p = game.player
    _step(game, p.plane_x * MOVE_SPEED, p.plane_y * MOVE_SPEED)


def _rotate(game: Game, angle: float) -> None:
    p = game.player
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    p.dir_x, p.dir_y = p.dir_x * cos_a - p.dir_y * sin_a, p.dir_x * sin_a + p.dir_y * cos_a
    p.plane_x, p.plane_y = (
        p.plane_x * cos_a - p.plane_y * sin_a,
        p.plane_x * sin_a + p.plane_y * cos_a,
    )


def rotate_left(game: Game) -> None:
    """Turn the direction and plane by the rotation speed."""
    _rotate(game, ROT_SPEED)


def rotate_right(game: Game) -> None:
    """Turn the direction and plane by minus the rotation speed."""
    _rotate(game, -ROT_SPEED)