from core.desktop.devtools.interface.tui_controller import FrameLine
from core.desktop.devtools.interface.tui_display import DisplayMixin
from core.desktop.devtools.interface.tui_render import render_frame


class TUI(DisplayMixin):
    mono_select = False


def _lines(formatted):
    return "".join(text for _, text in formatted).split("\n")


def test_render_frame_draws_box_and_rows():
    lines = _lines(render_frame(TUI(), [FrameLine(False, "A", True), FrameLine(True, "B", False)], 30))
    assert lines[0].startswith("┌─ TODO ")
    assert lines[1].startswith("│>> [ ] A")
    assert lines[2].startswith("│   [x] B")
    assert lines[-1].startswith("└")
    assert all(TUI._display_width(line) == 30 for line in lines)


def test_render_frame_empty_hint():
    lines = _lines(render_frame(TUI(), [], 60))
    assert "no todos yet" in lines[1]


def test_render_frame_trims_long_titles():
    lines = _lines(render_frame(TUI(), [FrameLine(False, "x" * 200, False)], 30))
    assert lines[1].endswith("…│")
    assert TUI._display_width(lines[1]) == 30


def test_highlight_styles_follow_done_flag_and_mono():
    open_row = render_frame(TUI(), [FrameLine(False, "A", True)], 30)
    assert ("class:selected.open", "[ ] ") in list(open_row)

    mono = TUI()
    mono.mono_select = True
    mono_row = render_frame(mono, [FrameLine(True, "A", True)], 30)
    assert ("class:selected", "[x] ") in list(mono_row)


def test_wide_characters_are_measured_by_cell_width():
    tui = TUI()
    assert tui._display_width("日本") == 4
    assert tui._pad_display("日本語テキスト", 6) == "日本…" + " "
