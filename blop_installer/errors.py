from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .lib.command import Failure


class InstallerError(Exception):
    """Base class for recoverable installer errors."""


class CommandError(InstallerError):
    """An external tool could not apply a setting."""

    def __init__(self, message: str, failure: Optional["Failure"] = None) -> None:
        super().__init__(message)
        self.failure = failure


class EnumerationError(InstallerError):
    """An option list could not be produced."""


class NavigationError(InstallerError):
    """The wizard was asked to go somewhere that does not exist."""


class ConfigError(InstallerError):
    pass


class HandoffError(InstallerError):
    """The terminal could not be handed to an interactive tool."""
