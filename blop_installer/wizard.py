from __future__ import annotations

import logging
from typing import Optional

from .config import InstallerConfig
from .context import Notice, StepView, WizardContext
from .lib.command import Gateway
from .navigator import Navigator, Screen
from .steps import Step, build_step

logger = logging.getLogger(__name__)


def create_context(config: Optional[InstallerConfig] = None, *, gateway: Optional[Gateway] = None) -> WizardContext:
    cfg = config or InstallerConfig()
    return WizardContext(
        navigator=Navigator(Screen.INTRO),
        gateway=gateway if gateway is not None else Gateway(dry_run=cfg.dry_run),
        config=cfg,
    )


class Wizard:
    """Dispatches user input to the step behind the active screen.

    Renderers only call view(), press(), select() and dismiss(); they
    never touch the navigator directly.
    """

    def __init__(self, ctx: WizardContext) -> None:
        self.ctx = ctx

    @property
    def screen(self) -> Screen:
        return self.ctx.navigator.active

    @property
    def step(self) -> Step:
        return build_step(self.screen)

    @property
    def notice(self) -> Optional[Notice]:
        return self.ctx.notice

    def view(self) -> StepView:
        return self.step.view(self.ctx)

    def press(self, action_id: str) -> None:
        logger.debug("Action %s on %s", action_id, self.screen.value)
        self.step.press(self.ctx, action_id)

    def select(self, value: str) -> None:
        logger.debug("Selected %r on %s", value, self.screen.value)
        self.step.select(self.ctx, value)

    def dismiss(self) -> Optional[Notice]:
        return self.ctx.dismiss_notice()
