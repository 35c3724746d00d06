import io

import pytest

from cafelogico.screen import (
    BOX_DISABLE,
    BOX_ENABLE,
    BOX_HLINE,
    CLEAR_SCREEN,
    ESC,
    HIDE_CURSOR,
    HOME_CURSOR,
    MAXX,
    MAXY,
    SHOW_CURSOR,
    Color,
    Screen,
)


def _emitted(method, *args):
    """Call a Screen method on a fresh in-memory screen and return its output."""
    out = io.StringIO()
    method(Screen(out), *args)
    return out.getvalue()


def test_gotoxy_in_range():
    assert _emitted(Screen.gotoxy, 5, 7) == "\x1b[f\x1b[7B\x1b[5C"


def test_gotoxy_clamps_negative():
    assert _emitted(Screen.gotoxy, -3, -9) == "\x1b[f\x1b[0B\x1b[0C"


def test_gotoxy_clamps_large():
    result = _emitted(Screen.gotoxy, MAXX + 20, MAXY + 20)
    assert result == f"{ESC}[f{ESC}[{MAXY}B{ESC}[{MAXX - 1}C"


def test_gotoxy_keeps_max_row():
    result = _emitted(Screen.gotoxy, 1, MAXY)
    assert result.endswith(f"[{MAXY}B{ESC}[1C")


def test_clear_sequence():
    assert _emitted(Screen.clear) == ESC + HOME_CURSOR + ESC + CLEAR_SCREEN


def test_cursor_visibility():
    assert _emitted(Screen.hide_cursor) == ESC + HIDE_CURSOR
    assert _emitted(Screen.show_cursor) == ESC + SHOW_CURSOR


@pytest.mark.parametrize("base", list(Color)[:8])
def test_bright_colors_use_bold_intensity(base):
    dim = _emitted(Screen.set_color, base, Color.BLACK)
    bright = _emitted(Screen.set_color, Color(base + 8), Color.BLACK)
    assert dim.startswith("\x1b[0;")
    assert bright == dim.replace("[0;", "[1;", 1)


def test_set_color_red_on_black():
    assert _emitted(Screen.set_color, Color.RED, Color.BLACK) == "\x1b[0;31;40m"


def test_destroy_resets_colours_and_shows_cursor():
    text = _emitted(Screen.destroy)
    assert text.startswith("\x1b[0;39;49m")
    assert text.endswith(ESC + SHOW_CURSOR)


def test_draw_box_corners_and_edges():
    text = _emitted(Screen.draw_box, 2, 2, 6, 5)
    for corner in "┌┐└┘":
        assert text.count(corner) == 1
    assert text.count("─") == 2 * (6 - 2 - 1)
    assert text.count("│") == 2 * (5 - 2 - 1)


def test_draw_borders_wraps_in_box_mode():
    text = _emitted(Screen.draw_borders)
    assert text.startswith(ESC + HOME_CURSOR + ESC + CLEAR_SCREEN + ESC + BOX_ENABLE)
    assert text.endswith(ESC + BOX_DISABLE)
    assert text.count(chr(BOX_HLINE)) == 2 * (MAXX - 2)


def test_init_without_borders():
    text = _emitted(Screen.init, False)
    assert BOX_ENABLE not in text
    assert text.endswith(ESC + HOME_CURSOR + ESC + HIDE_CURSOR)


def test_init_with_borders():
    text = _emitted(Screen.init, True)
    assert ESC + BOX_ENABLE in text
    assert text.endswith(ESC + HOME_CURSOR + ESC + HIDE_CURSOR)


def test_write_passthrough():
    assert _emitted(Screen.write, "abc") == "abc"


def test_update_emits_nothing():
    assert _emitted(Screen.update) == ""