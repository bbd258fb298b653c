from __future__ import annotations

import logging

from ..context import Action, StepView, WizardContext
from ..errors import InstallerError
from ..navigator import Screen
from .base import BACK, NoSelectionMixin, unknown_action

logger = logging.getLogger(__name__)


class DiskSetupStep(NoSelectionMixin):
    """Hands the terminal to an interactive partitioning tool.

    Partitioning itself is entirely up to the chosen tool.
    """

    screen = Screen.DISK_SETUP

    def view(self, ctx: WizardContext) -> StepView:
        tools = tuple(Action(t, t) for t in ctx.config.disk_tools)
        return StepView(
            screen=self.screen,
            title="Disk Setup",
            text="Partition disks using one of the following tools:",
            actions=tools + (BACK,),
        )

    def press(self, ctx: WizardContext, action_id: str) -> None:
        if action_id == BACK.action_id:
            ctx.navigator.back()
            return
        if action_id not in ctx.config.disk_tools:
            raise unknown_action(self.screen, action_id)

        logger.info("Handing terminal over to %s", action_id)
        try:
            with ctx.terminal_handoff():
                r = ctx.gateway.run_interactive(action_id)
        except InstallerError as e:
            logger.error("Unable to hand terminal to %s: %s", action_id, e)
            ctx.notify(f"Failed to run {action_id}: {e}")
            return

        if not r.ok:
            logger.error("Partitioning tool %s failed: %s", action_id, r.describe(action_id))
            ctx.notify(f"Failed to run {action_id}: {r.describe(action_id)}")
