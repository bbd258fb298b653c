from __future__ import annotations

import logging
from typing import List, Protocol

from ..context import Action, StepView, WizardContext
from ..errors import InstallerError, NavigationError
from ..navigator import Screen

logger = logging.getLogger(__name__)

BACK = Action("back", "Back")


class Step(Protocol):
    """One wizard screen: builds its view and reacts to user input."""

    screen: Screen

    def view(self, ctx: WizardContext) -> StepView:
        ...

    def press(self, ctx: WizardContext, action_id: str) -> None:
        ...

    def select(self, ctx: WizardContext, value: str) -> None:
        ...


def unknown_action(screen: Screen, action_id: str) -> NavigationError:
    return NavigationError(f"{screen.value} has no action {action_id!r}")


class NoSelectionMixin:
    screen: Screen

    def select(self, ctx: WizardContext, value: str) -> None:
        raise NavigationError(f"{self.screen.value} has nothing to select")


class SelectionStep:
    """A screen offering a single choice from an enumerated option list.

    Subclasses provide list_options() and apply(); everything else
    (fallback on enumeration failure, holding position on apply failure)
    is shared.
    """

    screen: Screen
    kind: str = ""
    title: str = ""
    prompt: str = ""
    noun: str = ""
    plural: str = ""

    def list_options(self, ctx: WizardContext) -> List[str]:
        raise NotImplementedError

    def apply(self, ctx: WizardContext, value: str) -> None:
        raise NotImplementedError

    def enter(self, ctx: WizardContext) -> None:
        try:
            options = self.list_options(ctx)
        except InstallerError as e:
            logger.error("Failed to list %s: %s", self.plural, e)
            ctx.notify(f"Failed to list {self.plural}: {e}")
            # Nothing to choose from, so never show the selection screen.
            ctx.navigator.back()
            return

        ctx.options[self.screen] = options
        ctx.navigator.replace_top(self.screen)

    def view(self, ctx: WizardContext) -> StepView:
        return StepView(
            screen=self.screen,
            title=self.title,
            text=self.prompt,
            options=tuple(ctx.options.get(self.screen) or ()),
            actions=(BACK,),
        )

    def select(self, ctx: WizardContext, value: str) -> None:
        # No whitelist check against the listed options.
        try:
            self.apply(ctx, value)
        except InstallerError as e:
            logger.error("Failed to set %s to %s: %s", self.noun, value, e)
            ctx.record(self.kind, value, ok=False)
            ctx.notify(f"Failed to set {self.noun}: {e}")
            return

        ctx.record(self.kind, value, ok=True)
        ctx.navigator.back()

    def press(self, ctx: WizardContext, action_id: str) -> None:
        if action_id != BACK.action_id:
            raise unknown_action(self.screen, action_id)
        ctx.navigator.back()
