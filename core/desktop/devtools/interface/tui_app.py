#!/usr/bin/env python3
"""Full-screen to-do list session built on prompt_toolkit.

Each keypress is routed through ``ListController``; the whole list is
redrawn after every batch of keys. The quit key saves the current items
through the ``on_quit`` callback before the application exits.
"""

import argparse
import logging
import os
from typing import Callable, Iterable, List, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.styles import Style

from config import get_user_mono_select, get_user_theme
from core import Item
from core.desktop.devtools.application.todo_manager import TodoManager
from infrastructure.file_repository import StorageError

from .cli_io import structured_error
from .tui_controller import Effect, KEYMAP, ListController
from .tui_display import DisplayMixin
from .tui_footer import build_footer_text
from .tui_render import render_frame
from .tui_themes import DEFAULT_THEME, THEMES, build_style


logger = logging.getLogger("todo.tui")


class TodoTUI(DisplayMixin):
    FOOTER_HEIGHT = 2

    @classmethod
    def build_style(cls, theme: str) -> Style:
        return build_style(theme)

    def __init__(
        self,
        items: Iterable[Item],
        on_quit: Callable[[List[Item]], None],
        *,
        workspace: Optional[str] = None,
        theme: str = DEFAULT_THEME,
        mono_select: bool = False,
        input=None,
        output=None,
    ):
        self.controller = ListController(items)
        self.on_quit = on_quit
        self.workspace = workspace
        self.theme_name = theme
        self.mono_select = mono_select
        self.style = self.build_style(theme)
        self.list_view_offset = 0

        kb = KeyBindings()
        for key in KEYMAP:
            self._bind(kb, key)

        self.list_window = Window(
            content=FormattedTextControl(self.get_list_text),
            always_hide_cursor=True,
            wrap_lines=False,
        )
        self.footer = Window(
            content=FormattedTextControl(self.get_footer_text),
            height=Dimension(min=self.FOOTER_HEIGHT, max=self.FOOTER_HEIGHT),
            always_hide_cursor=True,
        )
        root = HSplit([self.list_window, self.footer])

        self.app = Application(
            layout=Layout(root),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            input=input,
            output=output,
        )
        # Arrow keys arrive as escape sequences; keep the disambiguation window short.
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("TODO_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

    def _bind(self, kb: KeyBindings, key: str) -> None:
        @kb.add(key)
        def _(event):
            self.dispatch_key(event.app, key)

    def get_terminal_width(self) -> int:
        """Columns of the output the application draws on."""
        return self.app.output.get_size().columns

    def get_terminal_height(self) -> int:
        return self.app.output.get_size().rows

    def _visible_row_limit(self) -> int:
        """Item rows that fit between the box borders above the footer."""
        return max(1, self.get_terminal_height() - self.FOOTER_HEIGHT - 2)

    def _ensure_selection_visible(self) -> None:
        total = len(self.controller.items)
        visible = self._visible_row_limit()
        selected = self.controller.items.selected
        if total <= visible or selected is None:
            self.list_view_offset = 0
            return
        max_offset = max(0, total - visible)
        if selected < self.list_view_offset:
            self.list_view_offset = selected
        elif selected >= self.list_view_offset + visible:
            self.list_view_offset = selected - visible + 1
        self.list_view_offset = max(0, min(self.list_view_offset, max_offset))

    def force_render(self) -> None:
        app = getattr(self, "app", None)
        if app:
            app.invalidate()

    def dispatch_key(self, app: Application, key: str) -> None:
        if self.controller.handle_key(key) is Effect.QUIT:
            self.quit(app)
            return
        self.force_render()

    def quit(self, app: Application) -> None:
        """Persist the current items, then end the session.

        A failing save is handed to ``app.exit`` so ``run()`` re-raises it
        once the terminal has been restored.
        """
        items = self.controller.snapshot()
        try:
            self.on_quit(items)
        except Exception as exc:
            logger.error("Saving %d item(s) failed: %s", len(items), exc)
            app.exit(exception=exc)
            return
        logger.debug("Saved %d item(s) on quit", len(items))
        app.exit()

    def get_list_text(self) -> FormattedText:
        self._ensure_selection_visible()
        return render_frame(
            self,
            self.controller.frame(),
            self.get_terminal_width(),
            offset=self.list_view_offset,
            limit=self._visible_row_limit(),
        )

    def get_footer_text(self) -> FormattedText:
        return build_footer_text(self)

    def run(self) -> List[Item]:
        self.app.run()
        return self.controller.snapshot()


def run_session(items: Iterable[Item], save: Callable[[List[Item]], None], **kwargs) -> List[Item]:
    """Run one interactive session over ``items``; ``save`` is called once, on quit."""
    return TodoTUI(items, save, **kwargs).run()


def cmd_tui(args: argparse.Namespace) -> int:
    manager = TodoManager(data_dir=getattr(args, "data_dir", None))
    try:
        items = manager.load_items()
    except (StorageError, ValueError, OSError) as exc:
        return structured_error("list", str(exc), payload={"path": str(manager.location())})
    theme = getattr(args, "theme", None) or get_user_theme() or DEFAULT_THEME
    if theme not in THEMES:
        theme = DEFAULT_THEME
    try:
        run_session(
            items,
            manager.save_items,
            workspace=manager.workspace,
            theme=theme,
            mono_select=bool(getattr(args, "mono_select", False) or get_user_mono_select()),
        )
    except OSError as exc:
        return structured_error("list", f"Save failed: {exc}", payload={"path": str(manager.db_path)})
    return 0


__all__ = ["TodoTUI", "run_session", "cmd_tui"]
