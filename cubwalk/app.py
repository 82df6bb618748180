"""The game window: key handling, the frame loop and the command entry point."""

from __future__ import annotations

import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from cubwalk.config import (  # noqa: E402
    KEY_A,
    KEY_D,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_W,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Game,
    new_game,
)
from cubwalk.render import Frame, render_frame  # noqa: E402
from cubwalk.textures import TextureError, load_textures  # noqa: E402
from cubwalk.world import default_map, place_player  # noqa: E402

_KEYMAP = {
    pygame.K_ESCAPE: KEY_ESC,
    pygame.K_w: KEY_W,
    pygame.K_a: KEY_A,
    pygame.K_s: KEY_S,
    pygame.K_d: KEY_D,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
}


def translate_key(key: int) -> int | None:
    """The game keycode for a pygame key, or None for keys the game ignores."""
    return _KEYMAP.get(key)


def _handle_events(game: Game) -> bool:
    """Apply pending window events; False when the window was closed."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            keycode = translate_key(event.key)
            if keycode is None:
                continue
            if event.type == pygame.KEYDOWN:
                game.keys.press(keycode)
            else:
                game.keys.release(keycode)
    return True


def run(game: Game) -> int:
    """Open the window and play until it is closed or escape is pressed.

    Returns the number of frames shown.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("cub3D")
        frame = Frame()
        clock = pygame.time.Clock()
        shown = 0
        while _handle_events(game) and render_frame(game, frame):
            surface = pygame.image.frombuffer(
                frame.to_rgb_bytes(), (frame.width, frame.height), "RGB"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            shown += 1
            clock.tick(60)
        return shown
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the game on the built-in map; returns the exit status."""
    game = new_game()
    game.map = default_map()
    place_player(game)
    try:
        load_textures(game.config)
    except TextureError as exc:
        print(f"Error\nFailed to load textures: {exc}", file=sys.stderr)
        return 1
    run(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())