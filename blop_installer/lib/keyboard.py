from __future__ import annotations

import fnmatch
import logging
import os
from typing import List

from ..errors import CommandError, EnumerationError
from .command import FailureReason, Gateway
from .env import KEYMAP_SUFFIX, PATHS, PRIVILEGE_HINT

logger = logging.getLogger(__name__)


def _raise(err: OSError) -> None:
    raise err


def list_keyboard_layouts(
    keymap_dir: str = PATHS.keymap_dir,
    *,
    pattern: str = "*" + KEYMAP_SUFFIX,
    sort: bool = False,
) -> List[str]:
    """Return console keymap names found under keymap_dir.

    Names are file names with the keymap suffix stripped, in directory walk
    order unless sort=True (which also drops duplicates).
    """

    if not os.path.isdir(keymap_dir):
        raise EnumerationError(f"keymap directory {keymap_dir} does not exist")

    layouts: List[str] = []
    try:
        for _root, _dirs, files in os.walk(keymap_dir, onerror=_raise):
            for name in files:
                if fnmatch.fnmatch(name, pattern):
                    layouts.append(name[: -len(KEYMAP_SUFFIX)] if name.endswith(KEYMAP_SUFFIX) else name)
    except OSError as e:
        raise EnumerationError(f"unable to read {keymap_dir}: {e.strerror or e}") from e

    if not layouts:
        raise EnumerationError(f"no keyboard layouts found in {keymap_dir}")

    if sort:
        layouts = sorted(set(layouts))

    logger.info("Found %d keyboard layouts in %s", len(layouts), keymap_dir)
    return layouts


def set_keyboard_layout(gateway: Gateway, layout: str) -> None:
    r = gateway.run("loadkeys", [layout])
    if r.ok:
        logger.info("Keyboard layout set to %s", layout)
        return

    msg = r.describe("loadkeys")
    if r.reason is FailureReason.NON_ZERO_EXIT:
        msg = f"{msg} ({PRIVILEGE_HINT})"
    raise CommandError(msg, failure=r)
