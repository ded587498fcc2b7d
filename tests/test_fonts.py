import pytest

from togos.fonts import FONT_5X7, FONT_8X8, Font


def test_5x7_dimensions():
    glyph = FONT_5X7.glyph(ord("A"))
    assert len(glyph) == FONT_5X7.width == 5
    assert FONT_5X7.height == 7


def test_8x8_dimensions():
    glyph = FONT_8X8.glyph(ord("A"))
    assert len(glyph) == FONT_8X8.width == 8
    assert FONT_8X8.height == 8


@pytest.mark.parametrize("font", [FONT_5X7, FONT_8X8])
def test_fonts_cover_printable_ascii(font):
    assert len(font) == 126 - 32 + 1
    for code in range(32, 127):
        assert len(font.glyph(code)) == font.width


@pytest.mark.parametrize("font", [FONT_5X7, FONT_8X8])
def test_space_is_blank(font):
    assert font.glyph(ord(" ")) == bytes(font.width)


@pytest.mark.parametrize("font", [FONT_5X7, FONT_8X8])
@pytest.mark.parametrize("code", [0, 31, 127, 200])
def test_codes_without_glyph_render_as_space(font, code):
    assert font.glyph(code) == font.glyph(ord(" "))


def test_5x7_glyphs_from_table():
    assert FONT_5X7.glyph(ord("!")) == bytes([0x00, 0x00, 0x5F, 0x00, 0x00])
    assert FONT_5X7.glyph(ord("A")) == bytes([0x7E, 0x09, 0x09, 0x09, 0x7E])
    assert FONT_5X7.glyph(ord("~")) == bytes([0x02, 0x01, 0x02, 0x04, 0x02])


def test_8x8_glyphs_from_table():
    assert FONT_8X8.glyph(ord("A")) == bytes([0x7C, 0x12, 0x12, 0x12, 0x12, 0x7C, 0x00, 0x00])
    assert FONT_8X8.glyph(ord("`")) == bytes([0x3C, 0x42, 0x99, 0xA5, 0xA5, 0x81, 0x42, 0x3C])
    assert FONT_8X8.glyph(ord("~")) == bytes([0x00, 0x00, 0x04, 0x02, 0x04, 0x02, 0x00, 0x00])


def test_glyphs_are_distinct_for_letters():
    letters = [FONT_5X7.glyph(code) for code in range(ord("A"), ord("Z") + 1)]
    assert len(set(letters)) == len(letters)


def test_custom_font_round_trip():
    font = Font(bytes([2, 3, 0x01, 0x02, 0x03, 0x04]))
    assert font.width == 2
    assert font.height == 3
    assert len(font) == 2
    assert font.glyph(32) == bytes([0x01, 0x02])
    assert font.glyph(33) == bytes([0x03, 0x04])


def test_ragged_font_data_rejected():
    with pytest.raises(ValueError):
        Font(bytes([5, 7, 1, 2]))


def test_missing_header_rejected():
    with pytest.raises(ValueError):
        Font(bytes([5]))


def test_zero_width_rejected():
    with pytest.raises(ValueError):
        Font(bytes([0, 7]))