from __future__ import annotations

import logging
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Any, Callable, ContextManager, Dict, List, Optional, Tuple

from .config import InstallerConfig
from .lib.command import Gateway
from .navigator import Navigator, Screen

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notice:
    """A dismissible message shown on top of the active screen."""

    message: str
    title: str = "Error"


@dataclass(frozen=True)
class AppliedSetting:
    kind: str
    value: str
    ok: bool


@dataclass(frozen=True)
class Action:
    action_id: str
    label: str


@dataclass(frozen=True)
class StepView:
    """What the renderer needs to draw one screen."""

    screen: Screen
    title: str
    text: str = ""
    options: Tuple[str, ...] = ()
    actions: Tuple[Action, ...] = ()


@dataclass
class WizardContext:
    """Everything the steps share, owned by the top-level run loop."""

    navigator: Navigator
    gateway: Gateway
    config: InstallerConfig = field(default_factory=InstallerConfig)
    notices: List[Notice] = field(default_factory=list)
    options: Dict[Screen, List[str]] = field(default_factory=dict)
    applied: List[AppliedSetting] = field(default_factory=list)
    # Releases the terminal to an interactive child process.
    terminal_handoff: Callable[[], ContextManager[Any]] = nullcontext

    @property
    def notice(self) -> Optional[Notice]:
        return self.notices[0] if self.notices else None

    def notify(self, message: str, title: str = "Error") -> None:
        self.notices.append(Notice(message=message, title=title))

    def dismiss_notice(self) -> Optional[Notice]:
        return self.notices.pop(0) if self.notices else None

    def record(self, kind: str, value: str, ok: bool) -> None:
        self.applied.append(AppliedSetting(kind=kind, value=value, ok=ok))

    def current_setting(self, kind: str) -> Optional[str]:
        for setting in reversed(self.applied):
            if setting.kind == kind and setting.ok:
                return setting.value
        return None
