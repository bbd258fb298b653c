from __future__ import annotations

import logging
from enum import Enum
from typing import List, Tuple

from .errors import NavigationError

logger = logging.getLogger(__name__)


class Screen(str, Enum):
    INTRO = "intro"
    LIVE_ENVIRONMENT_MENU = "live_environment_menu"
    KEYBOARD_SELECT = "keyboard_select"
    TIMEZONE_SELECT = "timezone_select"
    DISK_SETUP = "disk_setup"


class Navigator:
    """Owns the screen stack. The top of the stack is the active screen.

    replace_top() is the only mutation, so the stack never grows across
    repeated navigation and never becomes empty.
    """

    def __init__(self, initial: Screen = Screen.INTRO) -> None:
        self._stack: List[Screen] = []
        self.replace_top(initial)

    @property
    def active(self) -> Screen:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def stack(self) -> Tuple[Screen, ...]:
        return tuple(self._stack)

    def replace_top(self, screen: Screen) -> Screen:
        if not isinstance(screen, Screen):
            raise NavigationError(f"Unknown screen: {screen!r}")

        previous = self._stack.pop() if self._stack else None
        self._stack.append(screen)
        logger.info("Navigate %s -> %s", previous.value if previous else None, screen.value)
        return screen

    def back(self) -> Screen:
        # The wizard is shallow: back always lands on the live environment menu.
        return self.replace_top(Screen.LIVE_ENVIRONMENT_MENU)
