from __future__ import annotations

import argparse
import logging
from typing import Optional

from .config import InstallerConfig, load_installer_config
from .logging_utils import configure_logging
from .tui import InstallerApp
from .wizard import Wizard, create_context

logger = logging.getLogger(__name__)


def run(config: InstallerConfig, *, debug: bool = False) -> None:
    """Run the wizard until the user quits."""

    actual_log_path = configure_logging(config, debug=debug)
    logger.info("Starting wizard (dry_run=%s, log=%s)", config.dry_run, actual_log_path)

    ctx = create_context(config)
    app = InstallerApp(Wizard(ctx))

    try:
        app.run()
    except Exception:
        logger.exception("Installer failed")
        raise
    finally:
        logger.info("Applied settings: %s", [(s.kind, s.value, s.ok) for s in ctx.applied])


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="blop-installer")
    p.add_argument("--config", default=None, help="Path to installer config (yaml)")
    p.add_argument("--log", default=None, help="Path to installer log")
    p.add_argument("--dry-run", action="store_true", help="Log external commands instead of running them")
    p.add_argument("--debug", action="store_true", help="Log command output and every user action")

    args = p.parse_args(argv)

    config = load_installer_config(args.config).with_overrides(
        log_path=args.log,
        dry_run=True if args.dry_run else None,
    )
    run(config, debug=args.debug)
    return 0
