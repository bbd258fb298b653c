from __future__ import annotations

from ..context import Action, StepView, WizardContext
from ..navigator import Screen
from .base import NoSelectionMixin, unknown_action
from .keyboard import KeyboardStep
from .timezone import TimezoneStep

KEYBOARD = Action("keyboard", "Keyboard Layout")
TIMEZONE = Action("timezone", "Timezone")
NEXT = Action("next", "Next")


class LiveEnvironmentStep(NoSelectionMixin):
    screen = Screen.LIVE_ENVIRONMENT_MENU

    def view(self, ctx: WizardContext) -> StepView:
        layout = ctx.current_setting(KeyboardStep.kind) or "unchanged"
        timezone = ctx.current_setting(TimezoneStep.kind) or "unchanged"
        return StepView(
            screen=self.screen,
            title="Live environment Setup",
            text=f"Keyboard layout: {layout}\nTimezone: {timezone}",
            actions=(KEYBOARD, TIMEZONE, NEXT),
        )

    def press(self, ctx: WizardContext, action_id: str) -> None:
        if action_id == KEYBOARD.action_id:
            KeyboardStep().enter(ctx)
        elif action_id == TIMEZONE.action_id:
            TimezoneStep().enter(ctx)
        elif action_id == NEXT.action_id:
            ctx.navigator.replace_top(Screen.DISK_SETUP)
        else:
            raise unknown_action(self.screen, action_id)
