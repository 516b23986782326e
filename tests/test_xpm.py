import pytest

from solong.xpm import (
    XpmError,
    strip_comments,
    xpm_file_to_image,
    xpm_text_to_image,
    xpm_to_image,
)

SIMPLE = [
    "2 2 2 1",
    ". c #FF0000",
    "x c None",
    ".x",
    "x.",
]

XPM_TEXT = """/* XPM */
static char *tile[] = {
/* columns rows colours chars-per-pixel */
"2 2 2 1",
". c #FF0000",
"x c None",
/* pixels */
".x",
"x."
};
"""


def test_simple_dimensions():
    image = xpm_to_image(SIMPLE)
    assert (image.width, image.height) == (2, 2)


def test_simple_pixels():
    image = xpm_to_image(SIMPLE)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 1) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == 0xFF000000


def test_named_two_word_colour():
    image = xpm_to_image(["1 1 1 1", ". c light blue", "."])
    assert image.get_pixel(0, 0) == 0xADD8E6


def test_unknown_colour_name_is_black():
    image = xpm_to_image(["1 1 1 1", ". c nosuchcolour", "."])
    assert image.get_pixel(0, 0) == 0


def test_unknown_pixel_key_is_black():
    image = xpm_to_image(["2 1 1 1", ". c white", ".?"])
    assert image.get_pixel(0, 0) == 0xFFFFFF
    assert image.get_pixel(1, 0) == 0


def test_two_chars_per_pixel_last_definition_wins():
    lines = ["1 1 2 2", "ab c red", "ab c blue", "ab"]
    assert xpm_to_image(lines).get_pixel(0, 0) == 0xFF


def test_three_chars_per_pixel_first_definition_wins():
    lines = ["2 1 3 3", "abc c red", "abc c blue", "xyz c white", "abcxyz"]
    image = xpm_to_image(lines)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFFFFFF


def test_text_matches_lines():
    from_text = xpm_text_to_image(XPM_TEXT)
    from_lines = xpm_to_image(SIMPLE)
    assert from_text.data == from_lines.data


def test_file_round_trip(tmp_path):
    path = tmp_path / "tile.xpm"
    path.write_text(XPM_TEXT)
    image = xpm_file_to_image(path)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF000000


def test_missing_file(tmp_path):
    with pytest.raises(XpmError):
        xpm_file_to_image(tmp_path / "absent.xpm")


@pytest.mark.parametrize(
    "lines",
    [
        ["0 2 1 1", ". c red", ".", "."],
        ["2 2 1"],
        ["abc 2 1 1", ". c red", "..", ".."],
        [],
    ],
)
def test_bad_header(lines):
    with pytest.raises(XpmError):
        xpm_to_image(lines)


def test_colour_line_without_key():
    with pytest.raises(XpmError):
        xpm_to_image(["1 1 1 1", ". red", "."])


def test_colour_line_without_value():
    with pytest.raises(XpmError):
        xpm_to_image(["1 1 1 1", ". c", "."])


def test_short_pixel_row():
    with pytest.raises(XpmError):
        xpm_to_image(["3 1 1 1", ". c red", ".."])


def test_missing_pixel_rows():
    with pytest.raises(XpmError):
        xpm_to_image(["1 3 1 1", ". c red", "."])


def test_strip_block_comment_keeps_length():
    text = "a/*b*/c"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result == "a" + " " * 5 + "c"


def test_strip_comment_inside_quotes_is_kept():
    text = '"/* keep */" /* drop */'
    result = strip_comments(text)
    assert result.startswith('"/* keep */"')
    assert "drop" not in result


def test_strip_line_comment():
    result = strip_comments("x // note\ny")
    assert result.startswith("x")
    assert result.endswith("y")
    assert "note" not in result


def test_strip_without_comments_is_identity():
    text = '"2 2 2 1",\n". c red",'
    assert strip_comments(text) == text