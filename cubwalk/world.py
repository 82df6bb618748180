"""The built-in map, player placement and text dumps of the game state."""

from __future__ import annotations

from collections.abc import Sequence

from cubwalk.config import EMPTY, Config, Game, GameMap, Player

_DEFAULT_ROWS = (
    "        1111111111111111111111111    ",
    "        1000000000110000000E00001    ",
    "        1011000000000000000000001    ",
    "        1001000000000000001000001    ",
    "111111111101100000111000000000001    ",
    "100000000011000000000000000001111    ",
    "11110111111111000000000000001        ",
    "11110111111111011101010010001        ",
    "11000000110101000000000010001        ",
    "10000000000000001100000000001        ",
    "10000000000000001101010010001        ",
    "11000001110101011111011110001        ",
    "11110111 1110101 101111010001        ",
    "11111111 1111111 111111111111        ",
)

# direction -> (dir_x, dir_y, plane_x, plane_y)
_ORIENTATIONS = {
    "N": (0.0, -1.0, 0.66, 0.0),
    "S": (0.0, 1.0, -0.66, 0.0),
    "E": (1.0, 0.0, 0.0, 0.66),
    "W": (-1.0, 0.0, 0.0, -0.66),
}

_RULE = "-" * 22


def longest_line_length(rows: Sequence[str] | None) -> int:
    """Length of the longest row, 0 for no rows."""
    if not rows:
        return 0
    return max(len(row) for row in rows)


def default_map() -> GameMap:
    """A fresh copy of the built-in map."""
    rows = list(_DEFAULT_ROWS)
    return GameMap(grid=rows, width=longest_line_length(rows), height=len(rows))


def set_orientation(player: Player, direction: str) -> None:
    """Point ``player`` north, south, east or west; other letters change nothing."""
    orientation = _ORIENTATIONS.get(direction)
    if orientation is None:
        return
    player.dir_x, player.dir_y, player.plane_x, player.plane_y = orientation


def place_player(game: Game) -> tuple[int, int] | None:
    """Put the player on the first start cell (N, S, E or W) of the map.

    The player stands in the middle of the cell, which becomes empty floor.
    Returns the (row, column) of the cell, or None when the map has none.
    """
    game_map = game.map
    for i, row in enumerate(game_map.grid[:game_map.height]):
        for j, cell in enumerate(row[:game_map.width]):
            if cell in _ORIENTATIONS:
                game.player.x = j + 0.5
                game.player.y = i + 0.5
                set_orientation(game.player, cell)
                game_map.grid[i] = row[:j] + EMPTY + row[j + 1:]
                return i, j
    return None


def format_map(game_map: GameMap) -> str:
    """The map between two rules, headed by its line count."""
    lines = [f"Map ({game_map.height} lines):", _RULE, *game_map.grid, _RULE]
    return "\n".join(lines) + "\n"


def format_config(config: Config) -> str:
    """Texture paths and colours, one per line."""
    floor, ceiling = config.floor, config.ceiling
    lines = [
        "Texture Paths:",
        f"NO: {config.no_path}",
        f"SO: {config.so_path}",
        f"WE: {config.we_path}",
        f"EA: {config.ea_path}",
        f"Floor Color: {floor.r},{floor.g},{floor.b}",
        f"Ceiling Color: {ceiling.r},{ceiling.g},{ceiling.b}",
    ]
    return "\n".join(lines) + "\n"