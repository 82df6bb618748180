"""Loading wall textures from XPM images."""

from __future__ import annotations

import re
from os import PathLike

from cubwalk.config import Config, Texture

_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_STRING = re.compile(r'"((?:[^"\\]|\\.)*)"')
_COLOR_KEYS = ("c", "m", "g", "g4", "s")
_NAMED_COLORS = {
    "none": 0x000000,
    "black": 0x000000,
    "white": 0xFFFFFF,
    "red": 0xFF0000,
    "green": 0x00FF00,
    "blue": 0x0000FF,
    "yellow": 0xFFFF00,
    "cyan": 0x00FFFF,
    "magenta": 0xFF00FF,
}


class TextureError(Exception):
    """A texture could not be read or decoded."""


def _parse_color(spec: str) -> int:
    if spec.startswith("#"):
        digits = spec[1:]
        try:
            value = int(digits, 16)
        except ValueError:
            raise TextureError(f"bad colour {spec!r}") from None
        if len(digits) == 6:
            return value
        if len(digits) == 3:
            r, g, b = (int(d, 16) * 17 for d in digits)
            return (r << 16) | (g << 8) | b
        if len(digits) == 12:
            r, g, b = (int(digits[i:i + 4], 16) >> 8 for i in (0, 4, 8))
            return (r << 16) | (g << 8) | b
        raise TextureError(f"bad colour {spec!r}")
    try:
        return _NAMED_COLORS[spec.lower()]
    except KeyError:
        raise TextureError(f"unknown colour {spec!r}") from None


def _color_of(definition: str) -> int:
    """Pick the colour from the part of a colour line after its pixel key."""
    values: dict[str, list[str]] = {}
    current: list[str] | None = None
    for token in definition.split():
        if token in _COLOR_KEYS:
            current = values.setdefault(token, [])
        elif current is not None:
            current.append(token)
        else:
            raise TextureError(f"bad colour definition {definition!r}")
    for key in ("c", "g", "g4", "m"):
        if values.get(key):
            return _parse_color(" ".join(values[key]))
    raise TextureError(f"no colour in definition {definition!r}")


def parse_xpm(text: str) -> Texture:
    """Decode the text of an XPM image into a texture of packed 0xRRGGBB pixels."""
    strings = _STRING.findall(_COMMENT.sub("", text))
    if not strings:
        raise TextureError("no XPM data found")
    try:
        width, height, ncolors, cpp = (int(v) for v in strings[0].split()[:4])
    except ValueError:
        raise TextureError(f"bad XPM header {strings[0]!r}") from None
    if min(width, height, ncolors, cpp) <= 0:
        raise TextureError(f"bad XPM header {strings[0]!r}")
    if len(strings) < 1 + ncolors + height:
        raise TextureError("XPM data is truncated")

    palette = {}
    for line in strings[1:1 + ncolors]:
        if len(line) < cpp:
            raise TextureError(f"bad colour line {line!r}")
        palette[line[:cpp]] = _color_of(line[cpp:])

    pixels: list[int] = []
    for row in strings[1 + ncolors:1 + ncolors + height]:
        if len(row) != width * cpp:
            raise TextureError(f"pixel row of length {len(row)}, expected {width * cpp}")
        for start in range(0, len(row), cpp):
            key = row[start:start + cpp]
            try:
                pixels.append(palette[key])
            except KeyError:
                raise TextureError(f"undefined pixel {key!r}") from None
    return Texture(width=width, height=height, pixels=pixels)


def load_xpm(path: str | PathLike) -> Texture:
    """Read and decode the XPM image at ``path``."""
    try:
        with open(path, encoding="ascii", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        raise TextureError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(text)


def load_textures(config: Config) -> list[Texture]:
    """Load the north, south, west and east textures into ``config``."""
    config.textures = [load_xpm(path) for path in config.paths]
    return config.textures