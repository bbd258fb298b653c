from __future__ import annotations

from ..errors import NavigationError
from ..navigator import Screen
from .base import SelectionStep, Step
from .disks import DiskSetupStep
from .intro import IntroStep
from .keyboard import KeyboardStep
from .live_env import LiveEnvironmentStep
from .timezone import TimezoneStep


def build_step(screen: Screen) -> Step:
    if screen is Screen.INTRO:
        return IntroStep()
    elif screen is Screen.LIVE_ENVIRONMENT_MENU:
        return LiveEnvironmentStep()
    elif screen is Screen.KEYBOARD_SELECT:
        return KeyboardStep()
    elif screen is Screen.TIMEZONE_SELECT:
        return TimezoneStep()
    elif screen is Screen.DISK_SETUP:
        return DiskSetupStep()
    raise NavigationError(f"No step for screen {screen!r}")


__all__ = [
    "build_step",
    "Step",
    "SelectionStep",
    "IntroStep",
    "LiveEnvironmentStep",
    "KeyboardStep",
    "TimezoneStep",
    "DiskSetupStep",
]
