import pytest

from gnuscript.styles import FillSpecs, LayoutSpecs


def test_fill_default_is_empty():
    assert FillSpecs().repr() == ""


def test_fill_empty():
    assert FillSpecs().fill_empty().repr() == "fillstyle empty"


def test_fill_solid():
    assert FillSpecs().fill_solid().repr() == "fillstyle solid"


def test_fill_intensity_selects_solid():
    tokens = FillSpecs().fill_empty().fill_intensity(0.5).repr().split()
    assert tokens[0] == "fillstyle"
    assert "solid" in tokens
    assert tokens[-1] == "0.5"


@pytest.mark.parametrize("value, clamped", [(1.7, 1), (-0.2, 0), (5, 1)])
def test_fill_intensity_is_clamped(value, clamped):
    assert FillSpecs().fill_intensity(value).repr() == FillSpecs().fill_intensity(clamped).repr()


def test_fill_transparent_without_mode_becomes_solid():
    tokens = FillSpecs().fill_transparent().repr().split()
    assert tokens[:3] == ["fillstyle", "transparent", "solid"]


def test_fill_transparent_keeps_pattern():
    tokens = FillSpecs().fill_pattern(23).fill_transparent().repr().split()
    assert "pattern" in tokens
    assert "transparent" in tokens
    assert "solid" not in tokens
    assert tokens[-1] == "23"


def test_fill_transparent_off_removes_keyword():
    specs = FillSpecs().fill_pattern(23).fill_transparent()
    specs.fill_transparent(False)
    assert "transparent" not in specs.repr()
    assert specs.repr().endswith("pattern 23")


def test_fill_empty_ignores_transparency():
    specs = FillSpecs().fill_transparent().fill_empty()
    assert specs.repr() == "fillstyle empty"


def test_fill_color_comes_first():
    text = FillSpecs().fill_solid().fill_color("red").repr()
    assert text.startswith("fillcolor 'red'")
    assert "solid" in text


def test_border_show_and_options():
    specs = FillSpecs().fill_pattern(23).border_show()
    assert specs.repr().endswith("border")
    specs.border_line_color("red")
    assert specs.repr().endswith("border linecolor 'red'")
    specs.border_line_width(2)
    assert specs.repr().endswith("border linecolor 'red' linewidth 2")


def test_border_hide():
    specs = FillSpecs().fill_pattern(23).border_line_color("red").border_show()
    specs.border_hide()
    text = specs.repr()
    assert text.endswith("noborder")
    assert "linecolor" not in text


def test_fill_methods_chain():
    specs = FillSpecs()
    assert specs.fill_solid().fill_color("blue").border_hide() is specs


def test_fill_str_matches_repr():
    specs = FillSpecs().fill_pattern(4).border_show()
    assert str(specs) == specs.repr()


def test_layout_default_is_empty():
    assert LayoutSpecs().repr() == ""


def test_layout_origin():
    assert LayoutSpecs().origin(0.0, 0.5).repr() == "set origin 0,0.5\n"


def test_layout_size_line():
    text = LayoutSpecs().size(0.5, 0.25).repr()
    assert text.startswith("set size ")
    assert text.endswith("\n")
    assert text.count("\n") == 1


def test_layout_default_margins_are_auto():
    lines = LayoutSpecs().margins_absolute().repr().splitlines()
    assert [line.split()[1] for line in lines] == ["lmargin", "rmargin", "tmargin", "bmargin"]
    assert all(line.split()[-1] == "-1" for line in lines)
    assert all("at screen" not in line for line in lines)


def test_layout_margins_values_in_order():
    lines = LayoutSpecs().margins_absolute(0, 3, -1, 7).repr().splitlines()
    assert [line.split()[-1] for line in lines] == ["0", "3", "-1", "7"]


def test_layout_section_order_is_fixed():
    specs = LayoutSpecs().margins_absolute(0, 0).size(0.5, 0.5).origin(0.0, 0.5)
    commands = [line.split()[1] for line in specs.repr().splitlines()]
    assert commands == ["origin", "size", "lmargin", "rmargin", "tmargin", "bmargin"]


def test_layout_last_call_wins():
    specs = LayoutSpecs().origin(1, 1).origin(0.0, 0.5)
    assert specs.repr() == LayoutSpecs().origin(0.0, 0.5).repr()


def test_layout_methods_chain():
    specs = LayoutSpecs()
    assert specs.origin(0, 0).size(1, 1).margins_absolute() is specs