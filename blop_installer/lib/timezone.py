from __future__ import annotations

import logging
from typing import List

from ..errors import CommandError, EnumerationError
from .command import FailureReason, Gateway
from .env import PRIVILEGE_HINT

logger = logging.getLogger(__name__)


def list_timezones(gateway: Gateway) -> List[str]:
    r = gateway.run("timedatectl", ["list-timezones"], read_only=True)
    if not r.ok:
        raise EnumerationError(r.describe("timedatectl"))

    # timedatectl never prints blank lines, so no filtering here.
    timezones = r.stdout.splitlines()
    if not timezones:
        raise EnumerationError("timedatectl returned no timezones")
    return timezones


def set_timezone(gateway: Gateway, timezone: str) -> None:
    r = gateway.run("timedatectl", ["set-timezone", timezone])
    if r.ok:
        logger.info("Timezone set to %s", timezone)
        return

    msg = r.describe("timedatectl")
    if r.reason is FailureReason.NON_ZERO_EXIT:
        msg = f"{msg} ({PRIVILEGE_HINT})"
    raise CommandError(msg, failure=r)
