import pytest

from mpattern.palette import DEFAULT_PALETTE, RESET, Palette, fg256


def test_default_palette_has_eight_256_color_tokens():
    assert len(DEFAULT_PALETTE) == 8
    assert DEFAULT_PALETTE.color_at(0) == "\x1b[38;5;196m"
    assert DEFAULT_PALETTE.color_at(7) == "\x1b[38;5;154m"
    assert DEFAULT_PALETTE.reset == "\x1b[0m"


@pytest.mark.parametrize("index", [-17, -1, 0, 5, 8, 9, 1000])
def test_color_at_wraps_any_integer(index):
    assert DEFAULT_PALETTE.color_at(index) == DEFAULT_PALETTE.colors[index % 8]


def test_negative_index_selects_from_the_end():
    palette = Palette(("a", "b", "c"))
    assert palette.color_at(-1) == "c"
    assert palette.color_at(-3) == "a"


def test_paint_wraps_text_in_color_and_reset():
    palette = Palette.from_codes([10, 20])
    assert palette.paint(3, "x") == fg256(20) + "x" + RESET


def test_empty_palette_rejected():
    with pytest.raises(ValueError):
        Palette(())


def test_list_input_is_stored_as_tuple():
    palette = Palette(["red"])
    assert palette.colors == ("red",)
    hash(palette)
