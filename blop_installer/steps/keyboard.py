from __future__ import annotations

from typing import List

from ..context import WizardContext
from ..lib.keyboard import list_keyboard_layouts, set_keyboard_layout
from ..navigator import Screen
from .base import SelectionStep


class KeyboardStep(SelectionStep):
    screen = Screen.KEYBOARD_SELECT
    kind = "keyboard_layout"
    title = "Keyboard Layout"
    prompt = "Choose a keyboard layout"
    noun = "keyboard layout"
    plural = "keyboard layouts"

    def list_options(self, ctx: WizardContext) -> List[str]:
        cfg = ctx.config
        return list_keyboard_layouts(cfg.keymap_dir, pattern=cfg.keymap_pattern, sort=cfg.sort_layouts)

    def apply(self, ctx: WizardContext, value: str) -> None:
        set_keyboard_layout(ctx.gateway, value)
