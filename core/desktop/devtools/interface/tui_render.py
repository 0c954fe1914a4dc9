"""List renderer for TodoTUI: turns controller frames into formatted text."""

from typing import List, Optional, Sequence, Tuple

from prompt_toolkit.formatted_text import FormattedText

from .tui_controller import FrameLine

HIGHLIGHT_SYMBOL = ">> "
TITLE = "TODO"


def _row_style(line: FrameLine, mono: bool) -> Tuple[str, str]:
    """(checkbox style, title style) for a row."""
    if line.highlighted:
        if mono:
            return "class:selected", "class:selected"
        selected = "class:selected.done" if line.done else "class:selected.open"
        return selected, "class:selected"
    if line.done:
        return "class:checkbox.done", "class:text.done"
    return "class:checkbox.open", "class:text"


def render_frame(
    tui,
    frame: Sequence[FrameLine],
    width: int,
    offset: int = 0,
    limit: Optional[int] = None,
) -> FormattedText:
    """Full redraw: header rule, one row per visible item, closing rule.

    Rows are ``[x] title`` / ``[ ] title``; the highlighted row is prefixed with
    ``>> `` and styled as selected across the full width. Only
    ``frame[offset:offset + limit]`` is drawn when ``limit`` is given.
    """
    width = max(20, width)
    inner = width - 2
    result: List[Tuple[str, str]] = []

    header = f"─ {TITLE} "
    result.append(("class:border", "┌"))
    result.append(("class:header", header))
    result.append(("class:border", "─" * max(0, inner - tui._display_width(header)) + "┐\n"))

    if not frame:
        result.append(("class:border", "│"))
        result.append(("class:text.dim", tui._pad_display("  (no todos yet, add one with: todo add \"title\")", inner)))
        result.append(("class:border", "│\n"))

    prefix_width = tui._display_width(HIGHLIGHT_SYMBOL)
    end = len(frame) if limit is None else offset + max(0, limit)
    for line in frame[offset:end]:
        box_style, title_style = _row_style(line, getattr(tui, "mono_select", False))
        prefix = HIGHLIGHT_SYMBOL if line.highlighted else " " * prefix_width
        checkbox = "[x] " if line.done else "[ ] "
        title_width = max(0, inner - prefix_width - len(checkbox))
        result.append(("class:border", "│"))
        result.append((title_style, prefix))
        result.append((box_style, checkbox))
        result.append((title_style, tui._pad_display(line.title, title_width)))
        result.append(("class:border", "│\n"))

    result.append(("class:border", "└" + "─" * inner + "┘"))
    return FormattedText(result)


__all__ = ["render_frame", "HIGHLIGHT_SYMBOL", "TITLE"]
