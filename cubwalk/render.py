"""Raycasting a frame: background, DDA wall search and textured wall strips."""

from __future__ import annotations

import math
import sys
from array import array
from dataclasses import dataclass

from cubwalk.config import SCREEN_HEIGHT, SCREEN_WIDTH, WALL, Game
from cubwalk.movement import (
    move_backward,
    move_forward,
    move_left,
    move_right,
    rotate_left,
    rotate_right,
)


@dataclass
class Ray:
    """One ray's direction and the state of its walk through the grid."""

    dir_x: float
    dir_y: float
    map_x: int
    map_y: int
    step_x: int
    step_y: int
    side_dist_x: float
    side_dist_y: float
    delta_x: float
    delta_y: float
    side: int = 0

    @property
    def perp_dist(self) -> float:
        """Distance to the hit wall, perpendicular to the camera plane."""
        if self.side == 0:
            return self.side_dist_x - self.delta_x
        return self.side_dist_y - self.delta_y


class Frame:
    """A picture of packed 0xRRGGBB pixels, stored row by row."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"bad frame size {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside a {self.width}x{self.height} frame")
        return y * self.width + x

    def get(self, x: int, y: int) -> int:
        """The colour at ``(x, y)``."""
        return self.pixels[self._index(x, y)]

    def set(self, x: int, y: int, color: int) -> None:
        """Paint ``(x, y)`` with ``color``."""
        self.pixels[self._index(x, y)] = color & 0xFFFFFFFF

    def to_rgb_bytes(self) -> bytes:
        """The pixels as consecutive R, G, B bytes."""
        raw = array("I", (p & 0xFFFFFFFF for p in self.pixels)).tobytes()
        size = array("I").itemsize
        r, g, b = (2, 1, 0) if sys.byteorder == "little" else (size - 3, size - 2, size - 1)
        rgb = bytearray(len(self.pixels) * 3)
        rgb[0::3] = raw[r::size]
        rgb[1::3] = raw[g::size]
        rgb[2::3] = raw[b::size]
        return bytes(rgb)


def _inverse(d: float) -> float:
    return abs(1 / d) if d else math.inf


def _hits_wall(game: Game, map_x: int, map_y: int) -> bool:
    grid = game.map.grid
    if not 0 <= map_y < len(grid) or not 0 <= map_x < len(grid[map_y]):
        return True
    return grid[map_y][map_x] == WALL


def cast_ray(game: Game, x: int) -> Ray:
    """Cast the ray for screen column ``x`` and walk it to the first wall."""
    p = game.player
    camera_x = 2.0 * x / SCREEN_WIDTH - 1
    dir_x = p.dir_x + p.plane_x * camera_x
    dir_y = p.dir_y + p.plane_y * camera_x
    if dir_x == 0 and dir_y == 0:
        raise ValueError("the ray has no direction")
    map_x, map_y = int(p.x), int(p.y)
    delta_x, delta_y = _inverse(dir_x), _inverse(dir_y)
    step_x = -1 if dir_x < 0 else 1
    step_y = -1 if dir_y < 0 else 1
    if math.isinf(delta_x):
        side_dist_x = math.inf
    else:
        side_dist_x = ((p.x - map_x) if dir_x < 0 else (map_x + 1.0 - p.x)) * delta_x
    if math.isinf(delta_y):
        side_dist_y = math.inf
    else:
        side_dist_y = ((p.y - map_y) if dir_y < 0 else (map_y + 1.0 - p.y)) * delta_y
    ray = Ray(dir_x, dir_y, map_x, map_y, step_x, step_y,
              side_dist_x, side_dist_y, delta_x, delta_y)
    while True:
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.side_dist_y += ray.delta_y
            ray.map_y += ray.step_y
            ray.side = 1
        if _hits_wall(game, ray.map_x, ray.map_y):
            return ray


def draw_background(game: Game, frame: Frame) -> None:
    """Fill the upper half with the ceiling colour and the lower half with the floor."""
    split = (frame.height // 2 + (frame.height % 2)) * frame.width
    total = frame.width * frame.height
    frame.pixels[:split] = [game.config.ceiling.to_int()] * split
    frame.pixels[split:] = [game.config.floor.to_int()] * (total - split)


def _texture_index(ray: Ray) -> int:
    if ray.side == 0 and ray.dir_x > 0:
        return 1
    if ray.side == 0 and ray.dir_x < 0:
        return 0
    if ray.side == 1 and ray.dir_y > 0:
        return 3
    return 2


def draw_wall_strip(game: Game, frame: Frame, ray: Ray, x: int) -> None:
    """Draw the textured wall slice that ``ray`` hit into column ``x``."""
    if not 0 <= x < frame.width:
        raise IndexError(f"column {x} outside a frame {frame.width} wide")
    height = frame.height
    perp = ray.perp_dist
    line_height = int(height / perp) if perp > 0 else height
    start = max(-(line_height // 2) + height // 2, 0)
    end = min(line_height // 2 + height // 2, height - 1)
    if line_height <= 0 or start >= end:
        return

    p = game.player
    wall_x = p.y + perp * ray.dir_y if ray.side == 0 else p.x + perp * ray.dir_x
    wall_x -= math.floor(wall_x)

    tex = game.config.textures[_texture_index(ray)]
    if tex.width <= 0 or tex.height <= 0:
        raise ValueError("wall texture is not loaded")
    tex_x = int(wall_x * tex.width)
    if (ray.side == 0 and ray.dir_x > 0) or (ray.side == 1 and ray.dir_y < 0):
        tex_x = tex.width - tex_x - 1

    step = tex.height / line_height
    tex_pos = (start - height // 2 + line_height // 2) * step
    pixels, width = frame.pixels, frame.width
    for y in range(start, end):
        tex_y = max(int(tex_pos) % tex.height, 0)
        pixels[y * width + x] = tex.pixels[tex_y * tex.width + tex_x]
        tex_pos += step


def handle_input(game: Game) -> bool:
    """Apply held keys to the player; False when escape asks to quit."""
    keys = game.keys
    if keys.esc:
        return False
    if keys.w:
        move_forward(game)
    if keys.s:
        move_backward(game)
    if keys.a:
        move_left(game)
    if keys.d:
        move_right(game)
    if keys.left:
        rotate_right(game)
    if keys.right:
        rotate_left(game)
    return True


def render_frame(game: Game, frame: Frame) -> bool:
    """Handle input and draw one frame; False when the game should end."""
    if not handle_input(game):
        return False
    draw_background(game, frame)
    for x in range(min(SCREEN_WIDTH, frame.width)):
        draw_wall_strip(game, frame, cast_ray(game, x), x)
    return True