from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from .config import InstallerConfig

HANDLER_NAME = "blop-installer"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _open_log_file(log_path: str, fallback_path: str) -> Tuple[logging.FileHandler, str]:
    """Open log_path, or fallback_path when the first is not writable."""

    error: Optional[OSError] = None
    for candidate in (log_path, fallback_path):
        try:
            Path(candidate).parent.mkdir(parents=True, exist_ok=True)
            return logging.FileHandler(candidate, encoding="utf-8"), candidate
        except OSError as e:
            error = e
    assert error is not None
    raise error


def configure_logging(
    config: InstallerConfig,
    *,
    debug: bool = False,
    also_console: bool = False,
) -> str:
    """Send all installer logging to the configured log file.

    The wizard owns the terminal while it runs, so console output is off
    by default. Live media usually allow writing to /var/log as root; an
    unprivileged dry run ends up in config.log_fallback_path instead.

    Calling this again keeps the existing file. Returns the path in use.
    """

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    for h in root.handlers:
        if h.get_name() == HANDLER_NAME and isinstance(h, logging.FileHandler):
            return h.baseFilename

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")

    file_handler, chosen_path = _open_log_file(config.log_path, config.log_fallback_path)
    file_handler.set_name(HANDLER_NAME)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        root.addHandler(console)

    logging.getLogger(__name__).info(
        "Logging initialized (requested=%s, actual=%s)", config.log_path, chosen_path
    )
    return file_handler.baseFilename
