import pytest

from gnuscript.specs import DepthSpecs, FontSpecs, OffsetSpecs, Specs


def test_specs_is_abstract():
    with pytest.raises(TypeError):
        Specs()


def test_depth_specs_cases():
    default_depth = DepthSpecs()
    default_depth.back()

    depth = DepthSpecs()
    assert depth.repr() == default_depth.repr()

    depth.front()
    assert depth.repr() == "front"

    depth.back()
    assert depth.repr() == "back"

    depth.behind()
    assert depth.repr() == "behind"


def test_depth_default_is_back():
    assert DepthSpecs().repr() == "back"


def test_depth_methods_chain():
    depth = DepthSpecs()
    assert depth.front() is depth
    assert depth.behind().repr() == "behind"


def test_str_matches_repr():
    depth = DepthSpecs().front()
    assert str(depth) == "front"


def test_font_default_is_empty():
    assert FontSpecs().repr() == ""


def test_font_name_only():
    assert FontSpecs().font_name("Arial").repr() == "font 'Arial,'"


def test_font_size_only():
    assert FontSpecs().font_size(14).repr() == "font ',14'"


def test_font_name_and_size():
    font = FontSpecs()
    assert font.font_name("Times").font_size(19) is font
    assert font.repr() == "font 'Times,19'"


def test_font_size_negative_rejected():
    with pytest.raises(ValueError):
        FontSpecs().font_size(-1)


def test_offset_default_is_empty():
    assert OffsetSpecs().repr() == ""


def test_offset_zero_shift_is_empty():
    assert OffsetSpecs().shift_along_x(0.0).shift_along_y(0).repr() == ""


def test_offset_chars():
    offset = OffsetSpecs().shift_along_x(1.5)
    assert offset.repr() == "offset 1.5, 0"
    offset.shift_along_y(2.0)
    assert offset.repr() == "offset 1.5, 2"


def test_offset_graph_coordinates():
    offset = OffsetSpecs().shift_along_graph_x(0.25).shift_along_graph_y(0.5)
    assert offset.repr() == "offset graph 0.25, graph 0.5"


def test_offset_screen_coordinates():
    offset = OffsetSpecs().shift_along_screen_y(0.1)
    assert offset.repr() == "offset 0, screen 0.1"
    offset.shift_along_screen_x(0.3)
    assert offset.repr() == "offset screen 0.3, screen 0.1"


def test_offset_chaining_returns_same_object():
    offset = OffsetSpecs()
    assert offset.shift_along_x(1) is offset
    assert str(offset) == "offset 1, 0"