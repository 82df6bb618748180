import pytest

from cubwalk.config import (
    KEY_A,
    KEY_D,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_W,
    Color,
    Keys,
    Texture,
    new_game,
)


def test_new_game_texture_paths():
    game = new_game()
    assert game.config.paths == (
        "./wall1.xpm",
        "./wall2.xpm",
        "./wall3.xpm",
        "./wall4.xpm",
    )
    assert game.config.no_path == "./wall1.xpm"
    assert game.config.ea_path == "./wall4.xpm"


def test_new_game_colours():
    config = new_game().config
    assert config.floor == Color(244, 190, 118)
    assert config.ceiling == Color(230, 150, 100)
    assert config.has_floor and config.has_ceiling


def test_new_game_empty_textures_map_and_player():
    game = new_game()
    assert len(game.config.textures) == 4
    assert all(t.width == 0 and t.height == 0 for t in game.config.textures)
    assert game.map.grid == []
    assert (game.map.width, game.map.height) == (0, 0)
    p = game.player
    assert (p.x, p.y, p.dir_x, p.dir_y, p.plane_x, p.plane_y) == (0, 0, 0, 0, 0, 0)


def test_new_games_do_not_share_state():
    first, second = new_game(), new_game()
    first.config.textures[0].width = 64
    first.map.grid.append("111")
    assert second.config.textures[0].width == 0
    assert second.map.grid == []


@pytest.mark.parametrize("color", [Color(0, 0, 0), Color(255, 255, 255), Color(18, 52, 86)])
def test_color_to_int_channels(color):
    packed = color.to_int()
    assert packed >> 16 == color.r
    assert (packed >> 8) & 0xFF == color.g
    assert packed & 0xFF == color.b


def test_texture_pixel_row_major():
    tex = Texture(width=2, height=2, pixels=[10, 20, 30, 40])
    assert tex.pixel(0, 0) == 10
    assert tex.pixel(1, 0) == 20
    assert tex.pixel(0, 1) == 30
    assert tex.pixel(1, 1) == 40


@pytest.mark.parametrize("x,y", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_texture_pixel_out_of_range(x, y):
    tex = Texture(width=2, height=2, pixels=[1, 2, 3, 4])
    with pytest.raises(IndexError):
        tex.pixel(x, y)


@pytest.mark.parametrize(
    "keycode,name",
    [
        (KEY_W, "w"),
        (KEY_S, "s"),
        (KEY_A, "a"),
        (KEY_D, "d"),
        (KEY_LEFT, "left"),
        (KEY_RIGHT, "right"),
        (KEY_ESC, "esc"),
    ],
)
def test_keys_press_and_release(keycode, name):
    keys = Keys()
    keys.press(keycode)
    assert getattr(keys, name) is True
    pressed = [n for n in ("w", "s", "a", "d", "left", "right", "esc") if getattr(keys, n)]
    assert pressed == [name]
    keys.release(keycode)
    assert getattr(keys, name) is False


def test_keys_unknown_code_ignored():
    keys = Keys()
    keys.press(12345)
    assert keys == Keys()
    keys.press(KEY_W)
    keys.release(12345)
    assert keys.w is True