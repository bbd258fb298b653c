from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Mapping, Optional, Sequence, Union

logger = logging.getLogger(__name__)


class FailureReason(str, Enum):
    SPAWN_ERROR = "spawn_error"
    NON_ZERO_EXIT = "non_zero_exit"
    OUTPUT_PARSE_ERROR = "output_parse_error"


@dataclass(frozen=True)
class Success:
    argv: List[str]
    stdout: str = ""

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    argv: List[str]
    reason: FailureReason
    returncode: Optional[int] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return False

    def describe(self, tool: Optional[str] = None) -> str:
        """Human readable reason, e.g. for an error notice."""

        name = tool or (self.argv[0] if self.argv else "command")
        if self.reason is FailureReason.SPAWN_ERROR:
            msg = f"could not start {name}"
        elif self.reason is FailureReason.NON_ZERO_EXIT:
            msg = f"{name} exited with non-zero exit code {self.returncode}"
        else:
            msg = f"{name} produced output that is not valid text"
        if self.detail:
            msg = f"{msg}: {self.detail}"
        return msg


CommandResult = Union[Success, Failure]


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    capture: bool = True,
    env: Mapping[str, str] | None = None,
    dry_run: bool = False,
) -> CommandResult:
    """Run a command synchronously and map the outcome to a result value.

    - Always logs the command.
    - Never raises for process failures; see FailureReason.
    - capture=False leaves stdin/stdout/stderr attached to the terminal
      (used to hand control to interactive tools).
    - dry_run logs but does not execute.

    There is no timeout: a tool that never exits blocks the caller.
    """

    argv_list = list(argv)
    logger.info("CMD %s", _fmt_argv(argv_list))

    if dry_run:
        return Success(argv=argv_list, stdout="")

    pipe = subprocess.PIPE if capture else None
    try:
        p = subprocess.run(
            argv_list,
            stdout=pipe,
            stderr=pipe,
            env=dict(os.environ, **(env or {})),
        )
    except (OSError, ValueError) as e:
        # ValueError: arguments the OS cannot accept, e.g. an embedded NUL byte.
        logger.warning("Unable to start %s: %s", argv_list[0] if argv_list else "<empty>", e)
        detail = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        return Failure(argv=argv_list, reason=FailureReason.SPAWN_ERROR, detail=detail)

    if p.stderr:
        logger.debug("STDERR %s", p.stderr.decode("utf-8", "replace").strip())

    if p.returncode != 0:
        logger.warning("Command failed (%s): %s", p.returncode, _fmt_argv(argv_list))
        return Failure(argv=argv_list, reason=FailureReason.NON_ZERO_EXIT, returncode=p.returncode)

    raw = p.stdout or b""
    try:
        stdout = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning("Undecodable output from %s: %s", _fmt_argv(argv_list), e)
        return Failure(argv=argv_list, reason=FailureReason.OUTPUT_PARSE_ERROR, returncode=0, detail=str(e))

    if stdout:
        logger.debug("STDOUT %s", stdout.strip())
    return Success(argv=argv_list, stdout=stdout)


@dataclass
class Gateway:
    """Entry point for every external program the wizard starts.

    Steps only talk to this object, so tests (or a future asynchronous
    runner) can swap it out without touching step logic.
    """

    dry_run: bool = False
    env: Mapping[str, str] = field(default_factory=dict)

    def run(self, program: str, args: Sequence[str] = (), *, read_only: bool = False) -> CommandResult:
        """Run program with args and capture its output.

        read_only marks queries (listing timezones, ...) that still run in
        dry-run mode; everything else is treated as a mutation.
        """

        return run_cmd([program, *args], env=self.env, dry_run=self.dry_run and not read_only)

    def run_interactive(self, program: str, args: Sequence[str] = ()) -> CommandResult:
        return run_cmd([program, *args], capture=False, env=self.env, dry_run=self.dry_run)
