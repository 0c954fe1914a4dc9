#!/usr/bin/env python3
"""Unit tests for the key dispatch table and ListController."""

import pytest

from core import Item
from core.desktop.devtools.interface.tui_controller import (
    Action,
    Effect,
    FrameLine,
    KEYMAP,
    ListController,
    action_for_key,
)


def _run(items, keys):
    controller = ListController(items)
    effects = [controller.handle_key(k) for k in keys]
    return controller, effects


class TestKeymap:
    @pytest.mark.parametrize(
        "key,action",
        [
            ("q", Action.QUIT),
            ("up", Action.UP),
            ("down", Action.DOWN),
            ("t", Action.TOGGLE),
            ("d", Action.DELETE),
            ("k", Action.UP),
            ("j", Action.DOWN),
        ],
    )
    def test_known_keys(self, key, action):
        assert action_for_key(key) is action

    def test_unknown_key_is_ignored(self):
        assert action_for_key("x") is None
        assert "x" not in KEYMAP


class TestListController:
    def test_selects_first_item_on_construction(self):
        controller = ListController([Item("A"), Item("B")])
        assert controller.items.selected == 0

    def test_empty_collection_has_no_selection(self):
        controller = ListController([])
        assert controller.items.selected is None
        assert controller.frame() == []

    def test_down_up_move_cursor(self):
        controller, _ = _run([Item("A"), Item("B"), Item("C")], ["down", "down"])
        assert controller.items.selected == 2
        controller.handle_key("up")
        assert controller.items.selected == 1

    def test_toggle_flips_current_item(self):
        controller, _ = _run([Item("A"), Item("B")], ["down", "t"])
        assert [i.done for i in controller.snapshot()] == [False, True]

    def test_delete_removes_current_item(self):
        controller, _ = _run([Item("A"), Item("B"), Item("C")], ["down", "down", "d"])
        assert [i.title for i in controller.snapshot()] == ["A", "B"]
        assert controller.items.selected == 1

    def test_unknown_keys_change_nothing(self):
        controller, effects = _run([Item("A"), Item("B")], ["x", "enter", "Q"])
        assert effects == [Effect.NONE] * 3
        assert controller.items.selected == 0
        assert controller.finished is False

    def test_quit_reports_effect_and_finishes(self):
        controller, effects = _run([Item("A")], ["q"])
        assert effects == [Effect.QUIT]
        assert controller.finished is True

    def test_actions_after_quit_are_ignored(self):
        controller, effects = _run([Item("A"), Item("B")], ["q", "t", "d", "q"])
        assert effects == [Effect.QUIT, Effect.NONE, Effect.NONE, Effect.NONE]
        assert [(i.title, i.done) for i in controller.snapshot()] == [("A", False), ("B", False)]

    def test_empty_collection_all_keys_noop(self):
        controller, effects = _run([], ["up", "down", "t", "d", "q"])
        assert effects[-1] is Effect.QUIT
        assert controller.snapshot() == []
        assert controller.items.selected is None

    def test_toggle_down_quit_on_single_item(self):
        controller, effects = _run([Item("Buy milk")], ["t", "down", "q"])
        assert effects[-1] is Effect.QUIT
        assert controller.snapshot() == [Item("Buy milk", True)]
        assert controller.items.selected == 0

    def test_frame_marks_highlighted_row(self):
        controller = ListController([Item("A"), Item("B", done=True)])
        controller.handle(Action.DOWN)
        assert controller.frame() == [
            FrameLine(False, "A", False),
            FrameLine(True, "B", True),
        ]

    def test_handle_none_is_noop(self):
        controller = ListController([Item("A")])
        assert controller.handle(None) is Effect.NONE
