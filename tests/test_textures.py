import pytest

from cubwalk.config import Config
from cubwalk.textures import TextureError, load_textures, load_xpm, parse_xpm

SIMPLE = """/* XPM */
static char *wall[] = {
/* width height ncolors cpp */
"2 2 2 1",
"a c #FF0000",
"b c #0000FF",
"ab",
"ba"
};
"""


def _xpm(color: str) -> str:
    return f'static char *w[] = {{\n"1 1 1 1",\n"x c {color}",\n"x"\n}};\n'


def test_parse_simple():
    tex = parse_xpm(SIMPLE)
    assert (tex.width, tex.height) == (2, 2)
    assert tex.pixels == [0xFF0000, 0x0000FF, 0x0000FF, 0xFF0000]
    assert tex.pixel(1, 0) == 0x0000FF


def test_parse_two_chars_per_pixel():
    text = '"2 1 2 2",\n"aa c #112233",\n"bb c #445566",\n"bbaa"\n'
    tex = parse_xpm(text)
    assert tex.pixels == [0x445566, 0x112233]


def test_named_colors():
    assert parse_xpm(_xpm("black")).pixels == [0x000000]
    assert parse_xpm(_xpm("white")).pixels == [0xFFFFFF]


def test_short_hex_expands():
    assert parse_xpm(_xpm("#F00")).pixels == parse_xpm(_xpm("#FF0000")).pixels


def test_long_hex_takes_high_bytes():
    assert parse_xpm(_xpm("#FFFF00000000")).pixels == parse_xpm(_xpm("#FF0000")).pixels


@pytest.mark.parametrize(
    "text",
    [
        "",
        '"a b c d"',
        '"2 2 1 1",\n"a c #000000",\n"aa"',
        '"2 1 1 1",\n"a c #000000",\n"a"',
        '"1 1 1 1",\n"a c #000000",\n"b"',
        '"1 1 1 1",\n"a c nosuchcolour",\n"a"',
    ],
)
def test_bad_data_raises(text):
    with pytest.raises(TextureError):
        parse_xpm(text)


def test_load_xpm_round_trip(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(SIMPLE)
    assert load_xpm(path) == parse_xpm(SIMPLE)


def test_load_missing_file(tmp_path):
    with pytest.raises(TextureError):
        load_xpm(tmp_path / "absent.xpm")


def test_load_textures(tmp_path):
    config = Config()
    paths = []
    for i, color in enumerate(["#010101", "#020202", "#030303", "#040404"]):
        path = tmp_path / f"w{i}.xpm"
        path.write_text(_xpm(color))
        paths.append(str(path))
    config.no_path, config.so_path, config.we_path, config.ea_path = paths
    textures = load_textures(config)
    assert config.textures is textures
    assert [t.pixels[0] for t in textures] == [0x010101, 0x020202, 0x030303, 0x040404]


def test_load_textures_missing(tmp_path):
    config = Config(no_path=str(tmp_path / "none.xpm"))
    with pytest.raises(TextureError):
        load_textures(config)