"""Game state: colours, textures, configuration, keys, map and player."""

from __future__ import annotations

from dataclasses import dataclass, field

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 700

KEY_ESC = 65307
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_LEFT = 65361
KEY_RIGHT = 65363
MAX_KEYS = 256

COLOR_FLOOR = 0x222222
COLOR_CEILING = 0x888888

MOVE_SPEED = 0.07
ROT_SPEED = 0.07

WALL = "1"
EMPTY = "0"

_KEY_FIELDS = {
    KEY_ESC: "esc",
    KEY_W: "w",
    KEY_S: "s",
    KEY_A: "a",
    KEY_D: "d",
    KEY_LEFT: "left",
    KEY_RIGHT: "right",
}


@dataclass
class Color:
    """An RGB colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def to_int(self) -> int:
        """The colour packed as 0xRRGGBB."""
        return (self.r << 16) | (self.g << 8) | self.b


@dataclass
class Texture:
    """A wall image stored as packed 0xRRGGBB pixels, row by row."""

    width: int = 0
    height: int = 0
    pixels: list[int] = field(default_factory=list)

    def pixel(self, x: int, y: int) -> int:
        """The colour at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside a {self.width}x{self.height} texture"
            )
        return self.pixels[y * self.width + x]


def _empty_textures() -> list[Texture]:
    return [Texture() for _ in range(4)]


@dataclass
class Config:
    """Texture paths, loaded textures and floor/ceiling colours."""

    no_path: str = "./wall1.xpm"
    so_path: str = "./wall2.xpm"
    we_path: str = "./wall3.xpm"
    ea_path: str = "./wall4.xpm"
    textures: list[Texture] = field(default_factory=_empty_textures)
    floor: Color = field(default_factory=lambda: Color(244, 190, 118))
    ceiling: Color = field(default_factory=lambda: Color(230, 150, 100))
    has_floor: bool = True
    has_ceiling: bool = True

    @property
    def paths(self) -> tuple[str, str, str, str]:
        """Texture paths in the order north, south, west, east."""
        return (self.no_path, self.so_path, self.we_path, self.ea_path)


@dataclass
class Keys:
    """Which of the game's keys are currently held down."""

    w: bool = False
    s: bool = False
    a: bool = False
    d: bool = False
    left: bool = False
    right: bool = False
    esc: bool = False

    def _set(self, keycode: int, state: bool) -> None:
        name = _KEY_FIELDS.get(keycode)
        if name is not None:
            setattr(self, name, state)

    def press(self, keycode: int) -> None:
        """Mark the key with ``keycode`` as held; unknown codes are ignored."""
        self._set(keycode, True)

    def release(self, keycode: int) -> None:
        """Mark the key with ``keycode`` as released; unknown codes are ignored."""
        self._set(keycode, False)


@dataclass
class GameMap:
    """The map as rows of characters, with its width and height."""

    grid: list[str] = field(default_factory=list)
    width: int = 0
    height: int = 0


@dataclass
class Player:
    """Position, facing direction and camera plane of the player."""

    x: float = 0.0
    y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0


@dataclass
class Game:
    """Everything the game loop works on."""

    config: Config = field(default_factory=Config)
    map: GameMap = field(default_factory=GameMap)
    player: Player = field(default_factory=Player)
    keys: Keys = field(default_factory=Keys)


def new_game() -> Game:
    """A game with the default configuration, an empty map and the player at the origin."""
    return Game()