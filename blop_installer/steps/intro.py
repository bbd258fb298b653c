from __future__ import annotations

from ..context import Action, StepView, WizardContext
from ..navigator import Screen
from .base import NoSelectionMixin, unknown_action

BEGIN = Action("begin", "Begin Installation")


class IntroStep(NoSelectionMixin):
    screen = Screen.INTRO

    def view(self, ctx: WizardContext) -> StepView:
        return StepView(
            screen=self.screen,
            title="BLOP - Arch Linux Installer",
            text="Hi there! Welcome to Blop; an easier way to install Arch Linux.",
            actions=(BEGIN,),
        )

    def press(self, ctx: WizardContext, action_id: str) -> None:
        if action_id != BEGIN.action_id:
            raise unknown_action(self.screen, action_id)
        ctx.navigator.replace_top(Screen.LIVE_ENVIRONMENT_MENU)
