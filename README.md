# cubwalk

cubwalk is a small first-person walker in the style of the classic raycasting
games. You stand inside a tile map and walk around it. Every wall is drawn
with one of four XPM textures, and the texture is chosen by the side of the
wall that the ray hit.

## Installing

```
pip install .
```

The window is drawn with pygame, which is installed along with the package.

## Running

```
cubwalk
```

The window is 800 by 700 pixels and runs at up to 60 frames a second. It
opens on the built-in map with the player facing east.

The wall textures are read from four files in the current directory:

- `wall1.xpm` for north walls
- `wall2.xpm` for south walls
- `wall3.xpm` for west walls
- `wall4.xpm` for east walls

If any of them cannot be read or decoded, the command prints an error to
standard error and exits with status 1.

The XPM reader accepts these colours:

- `#RGB`, `#RRGGBB` and `#RRRRGGGGBBBB` values
- the names `none`, `black`, `white`, `red`, `green`, `blue`, `yellow`, `cyan` and `magenta`

The ceiling and the floor are filled with flat colours.

## Controls

| Key         | Action              |
|-------------|---------------------|
| W / S       | walk forward / back |
| A / D       | step left / right   |
| Left, Right | turn                |
| Esc         | quit                |

Closing the window also quits.

Movement is checked against the map one axis at a time. You cannot walk into
a wall tile (`1`), but you can slide along one.

## What it does not do

- The map is built in. There is no reader for map or scene files, so you cannot load a map of your own.
- The floor and ceiling colours are fixed defaults in `cubwalk.config.Config`.
- No texture images come with the package. You have to supply the four XPM files yourself.

## Using it as a library

You can use the pieces without opening a window:

- `cubwalk.config.new_game()` builds a `Game` with the default configuration.
- `cubwalk.world.default_map()` returns a fresh copy of the built-in map.
- `cubwalk.world.place_player(game)` puts the player on the start tile. It returns the tile's (row, column).
- `cubwalk.movement` has `move_forward`, `move_backward`, `move_left`, `move_right`, `rotate_left` and `rotate_right`.
- `cubwalk.textures.load_textures(config)` loads the four textures. `parse_xpm(text)` decodes XPM text.
- `cubwalk.render.render_frame(game, frame)` applies the held keys and draws one frame into a `Frame`. It returns False when Esc is held. The textures must be loaded first.
- `cubwalk.world.format_map` and `cubwalk.world.format_config` produce text dumps of the state.

```python
from cubwalk.config import new_game
from cubwalk.world import default_map, place_player
from cubwalk.movement import move_forward

game = new_game()
game.map = default_map()
place_player(game)
move_forward(game)
print(game.player.x, game.player.y)
```

The package also contains the helpers the game is built on:

- `cubwalk.chars`: character tests, case conversion, `atoi` and `itoa`.
- `cubwalk.memory`: operations on byte buffers (`memset`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`, ...).
- `cubwalk.textops`: string operations (`strchr`, `strncmp`, `substr`, `split`, `strlcpy`, `strlcat`, ...).
- `cubwalk.output`: writing characters, strings and numbers to a stream.
- `cubwalk.linked`: a singly linked list, `LinkedList`.
- `cubwalk.lines`: `LineReader`, which reads lines from a file descriptor or a stream through a fixed-size buffer.

## Tests

```
pip install .[test]
pytest
```