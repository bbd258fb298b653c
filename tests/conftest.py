from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

import pytest

from blop_installer.config import InstallerConfig
from blop_installer.context import WizardContext
from blop_installer.lib.command import CommandResult, Failure, FailureReason, Success
from blop_installer.navigator import Navigator, Screen
from blop_installer.wizard import Wizard


class FakeGateway:
    """Records every invocation and answers with scripted results."""

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.interactive_calls: List[List[str]] = []
        self.read_only_calls: List[List[str]] = []
        self._results: Dict[str, Callable[[List[str]], CommandResult]] = {}

    def on(
        self,
        program: str,
        *,
        stdout: str = "",
        returncode: int = 0,
        reason: Optional[FailureReason] = None,
    ) -> None:
        def _result(argv: List[str]) -> CommandResult:
            if reason is not None:
                return Failure(argv=argv, reason=reason, returncode=returncode or None, detail="scripted")
            if returncode != 0:
                return Failure(argv=argv, reason=FailureReason.NON_ZERO_EXIT, returncode=returncode)
            return Success(argv=argv, stdout=stdout)

        self._results[program] = _result

    def _answer(self, argv: List[str]) -> CommandResult:
        handler = self._results.get(argv[0])
        return handler(argv) if handler else Success(argv=argv, stdout="")

    def run(self, program: str, args: Sequence[str] = (), *, read_only: bool = False) -> CommandResult:
        argv = [program, *args]
        self.calls.append(argv)
        if read_only:
            self.read_only_calls.append(argv)
        return self._answer(argv)

    def run_interactive(self, program: str, args: Sequence[str] = ()) -> CommandResult:
        argv = [program, *args]
        self.interactive_calls.append(argv)
        return self._answer(argv)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def keymap_dir(tmp_path: Path) -> Path:
    root = tmp_path / "keymaps"
    (root / "i386" / "qwerty").mkdir(parents=True)
    (root / "i386" / "qwertz").mkdir(parents=True)
    (root / "i386" / "include").mkdir(parents=True)
    (root / "i386" / "qwerty" / "us.map.gz").write_bytes(b"")
    (root / "i386" / "qwertz" / "de.map.gz").write_bytes(b"")
    (root / "i386" / "include" / "linux-keys-bare.inc").write_bytes(b"")
    return root


@pytest.fixture
def ctx(gateway: FakeGateway, keymap_dir: Path) -> WizardContext:
    config = InstallerConfig(raw={"keyboard": {"keymap_dir": str(keymap_dir)}})
    return WizardContext(navigator=Navigator(Screen.INTRO), gateway=gateway, config=config)  # type: ignore[arg-type]


@pytest.fixture
def wizard(ctx: WizardContext) -> Wizard:
    return Wizard(ctx)
