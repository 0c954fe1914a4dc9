"""Footer renderer for TodoTUI."""

from prompt_toolkit.formatted_text import FormattedText

KEY_HINTS = [
    ("↑/k", "up"),
    ("↓/j", "down"),
    ("t", "toggle"),
    ("d", "delete"),
    ("q", "save & quit"),
]


def build_footer_text(tui) -> FormattedText:
    items = tui.controller.items.items
    done = sum(1 for item in items if item.done)
    workspace = getattr(tui, "workspace", None) or "default"

    parts = []
    for idx, (key, label) in enumerate(KEY_HINTS):
        if idx:
            parts.append(("class:border", " · "))
        parts.append(("class:header", key))
        parts.append(("class:text.dim", f" {label}"))
    parts.append(("", "\n"))
    parts.append(("class:text.dim", f"{done}/{len(items)} done"))
    parts.append(("class:border", " · "))
    parts.append(("class:text.dim", f"workspace: {workspace}"))
    return FormattedText(parts)


__all__ = ["build_footer_text", "KEY_HINTS"]
