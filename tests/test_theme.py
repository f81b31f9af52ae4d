from dataclasses import replace

import pytest

from nvpfa.theme import Direction, Style, default_colors, default_style


def test_mobile_scrollbar_and_grab_are_large():
    style = default_style(True)
    assert style.scrollbar_size == pytest.approx(48.60000038146973)
    assert style.grab_min_size == pytest.approx(40.700000047683716)


def test_desktop_scrollbar_and_grab_are_small():
    style = default_style(False)
    assert style.scrollbar_size == pytest.approx(20.60000038146973)
    assert style.grab_min_size == pytest.approx(12.700000047683716)


def test_mobile_and_desktop_differ_only_in_touch_sizes():
    mobile = default_style(True)
    desktop = default_style(False)
    assert replace(
        desktop,
        scrollbar_size=mobile.scrollbar_size,
        grab_min_size=mobile.grab_min_size,
    ) == mobile


def test_shared_metrics():
    style = default_style(False)
    assert style.window_padding == (12.0, 12.0)
    assert style.window_rounding == 11.5
    assert style.grab_rounding == 8.0
    assert style.window_menu_button_position is Direction.RIGHT
    assert style.color_button_position is Direction.RIGHT


def test_text_colour_is_white():
    assert default_colors()["Text"] == (1.0, 1.0, 1.0, 1.0)


def test_check_mark_colour():
    assert default_colors()["CheckMark"] == pytest.approx(
        (0.9725490212440491, 1.0, 0.4980392158031464, 1.0)
    )


def test_all_channels_in_unit_range():
    colors = default_colors()
    assert len(colors) == 53
    for rgba in colors.values():
        assert len(rgba) == 4
        assert all(0.0 <= ch <= 1.0 for ch in rgba)


def test_only_dim_backgrounds_are_translucent():
    translucent = {name for name, rgba in default_colors().items() if rgba[3] < 1.0}
    assert translucent == {"NavWindowingDimBg", "ModalWindowDimBg"}


def test_default_colors_returns_independent_copies():
    first = default_colors()
    first["Text"] = (0.0, 0.0, 0.0, 0.0)
    assert default_colors()["Text"] == (1.0, 1.0, 1.0, 1.0)


def test_style_colors_not_shared_between_instances():
    a = default_style()
    b = default_style()
    a.colors["Text"] = (0.0, 0.0, 0.0, 0.0)
    assert b.colors["Text"] == (1.0, 1.0, 1.0, 1.0)
    assert Style().colors == default_colors()


def test_default_is_mobile():
    assert default_style() == default_style(True)