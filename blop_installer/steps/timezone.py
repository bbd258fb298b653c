from __future__ import annotations

from typing import List

from ..context import WizardContext
from ..lib.timezone import list_timezones, set_timezone
from ..navigator import Screen
from .base import SelectionStep


class TimezoneStep(SelectionStep):
    screen = Screen.TIMEZONE_SELECT
    kind = "timezone"
    title = "Timezone"
    prompt = "Choose your timezone"
    noun = "timezone"
    plural = "timezones"

    def list_options(self, ctx: WizardContext) -> List[str]:
        return list_timezones(ctx.gateway)

    def apply(self, ctx: WizardContext, value: str) -> None:
        set_timezone(ctx.gateway, value)
