import pytest

from typtea.styles import (
    BOLD,
    TEXT_BOX,
    Align,
    Style,
    join_horizontal,
    join_vertical,
    place,
    visible_width,
)


def test_visible_width_ignores_escape_sequences():
    assert visible_width("\x1b[1mabc\x1b[0m") == 3


def test_visible_width_takes_widest_line():
    assert visible_width("ab\nabcd\na") == 4


def test_plain_style_leaves_text_unchanged():
    assert Style().render("abc") == "abc"


def test_bold_uses_sgr_one():
    assert BOLD.render("x") == "\x1b[1mx\x1b[0m"


def test_standard_and_bright_foreground_colours():
    assert "\x1b[31m" in Style(foreground="1").render("x")
    assert "\x1b[94m" in Style(foreground="12").render("x")


def test_hex_colour_uses_true_colour():
    rendered = Style(foreground="#000").render("x")
    assert "38;2;0;0;0" in rendered


def test_width_pads_each_line():
    rendered = Style(width=10).render("ab\nabcd")
    assert [visible_width(line) for line in rendered.split("\n")] == [10, 10]


@pytest.mark.parametrize("align", [Align.LEFT, Align.CENTER, Align.RIGHT])
def test_alignment_keeps_text(align):
    rendered = Style(width=9, align=align).render("ab")
    assert rendered.strip() == "ab"
    assert visible_width(rendered) == 9
    if align is Align.LEFT:
        assert rendered.startswith("ab")
    if align is Align.RIGHT:
        assert rendered.endswith("ab")


def test_padding_adds_rows_and_columns():
    rendered = Style(padding=(1, 2)).render("ab")
    lines = rendered.split("\n")
    assert len(lines) == 3
    assert lines[1] == "  ab  "
    assert lines[0].strip() == ""


def test_margin_left_prefixes_spaces():
    rendered = Style(margin_left=4).render("a\nb")
    assert all(line.startswith("    ") for line in rendered.split("\n"))


def test_text_box_has_fixed_size():
    lines = TEXT_BOX.render("abc").split("\n")
    assert len(lines) == TEXT_BOX.height
    assert {visible_width(line) for line in lines} == {
        TEXT_BOX.margin_left + TEXT_BOX.width
    }


def test_join_vertical_right_aligns():
    joined = join_vertical(Align.RIGHT, "a", "abc")
    assert joined.split("\n") == ["  a", "abc"]


def test_join_vertical_center_aligns():
    joined = join_vertical(Align.CENTER, "a", "abc")
    assert joined.split("\n") == [" a ", "abc"]


def test_join_horizontal_top_aligns_blocks():
    joined = join_horizontal(Align.TOP, "a\nb", "xy")
    assert joined.split("\n") == ["axy", "b  "]


def test_join_horizontal_bottom_aligns_blocks():
    joined = join_horizontal(Align.BOTTOM, "a\nb", "xy")
    assert joined.split("\n") == ["a  ", "bxy"]


def test_place_fills_area_and_keeps_content():
    placed = place(20, 7, "ab\ncd")
    lines = placed.split("\n")
    assert len(lines) == 7
    assert all(visible_width(line) == 20 for line in lines)
    assert [line.strip() for line in lines if line.strip()] == ["ab", "cd"]


def test_place_in_too_small_area_keeps_content():
    assert place(0, 0, "abc") == "abc"