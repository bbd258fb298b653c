import stat
import sys
from pathlib import Path

from blop_installer.lib.command import Failure, FailureReason, Gateway, Success, run_cmd


def test_exit_zero_with_text_is_success() -> None:
    r = Gateway().run(sys.executable, ["-c", "print('hello')"])

    assert isinstance(r, Success)
    assert r.ok
    assert r.stdout == "hello\n"
    assert r.argv == [sys.executable, "-c", "print('hello')"]


def test_exit_one_is_non_zero_exit() -> None:
    r = Gateway().run(sys.executable, ["-c", "import sys; sys.exit(1)"])

    assert isinstance(r, Failure)
    assert not r.ok
    assert r.reason is FailureReason.NON_ZERO_EXIT
    assert r.returncode == 1


def test_missing_program_is_spawn_error() -> None:
    r = Gateway().run("blop-definitely-not-installed", ["--help"])

    assert isinstance(r, Failure)
    assert r.reason is FailureReason.SPAWN_ERROR
    assert r.returncode is None


def test_unexecutable_program_is_spawn_error(tmp_path: Path) -> None:
    script = tmp_path / "not-executable"
    script.write_text("#!/bin/sh\nexit 0\n")
    script.chmod(stat.S_IRUSR | stat.S_IWUSR)

    r = Gateway().run(str(script))

    assert isinstance(r, Failure)
    assert r.reason is FailureReason.SPAWN_ERROR


def test_undecodable_output_is_parse_error_despite_exit_zero() -> None:
    r = Gateway().run(sys.executable, ["-c", "import sys; sys.stdout.buffer.write(b'\\xff\\xfe')"])

    assert isinstance(r, Failure)
    assert r.reason is FailureReason.OUTPUT_PARSE_ERROR
    assert r.returncode == 0


def test_dry_run_does_not_execute() -> None:
    r = Gateway(dry_run=True).run("blop-definitely-not-installed", ["set-timezone", "UTC"])

    assert isinstance(r, Success)
    assert r.stdout == ""


def test_env_is_passed_to_child() -> None:
    r = Gateway(env={"BLOP_TEST_VALUE": "42"}).run(
        sys.executable, ["-c", "import os; print(os.environ['BLOP_TEST_VALUE'])"]
    )

    assert isinstance(r, Success)
    assert r.stdout.strip() == "42"


def test_interactive_maps_exit_code() -> None:
    gw = Gateway()

    ok = gw.run_interactive(sys.executable, ["-c", "pass"])
    failed = gw.run_interactive(sys.executable, ["-c", "import sys; sys.exit(3)"])

    assert isinstance(ok, Success)
    assert isinstance(failed, Failure)
    assert failed.reason is FailureReason.NON_ZERO_EXIT
    assert failed.returncode == 3


def test_run_cmd_never_raises_for_empty_output() -> None:
    r = run_cmd([sys.executable, "-c", "pass"])

    assert isinstance(r, Success)
    assert r.stdout == ""


def test_describe_failures() -> None:
    non_zero = Failure(argv=["loadkeys", "us"], reason=FailureReason.NON_ZERO_EXIT, returncode=1)
    spawn = Failure(argv=["gdisk"], reason=FailureReason.SPAWN_ERROR, detail="No such file or directory")
    parse = Failure(argv=["timedatectl", "list-timezones"], reason=FailureReason.OUTPUT_PARSE_ERROR, returncode=0)

    assert non_zero.describe() == "loadkeys exited with non-zero exit code 1"
    assert spawn.describe() == "could not start gdisk: No such file or directory"
    assert parse.describe("timedatectl") == "timedatectl produced output that is not valid text"


def test_nul_byte_in_argument_is_spawn_error() -> None:
    r = Gateway().run("loadkeys", ["u\x00s"])

    assert isinstance(r, Failure)
    assert r.reason is FailureReason.SPAWN_ERROR
    assert "null" in r.detail


def test_dry_run_still_runs_read_only_queries() -> None:
    gw = Gateway(dry_run=True)

    query = gw.run(sys.executable, ["-c", "print('UTC')"], read_only=True)
    mutation = gw.run("blop-definitely-not-installed", ["set-timezone", "UTC"])

    assert isinstance(query, Success)
    assert query.stdout == "UTC\n"
    assert isinstance(mutation, Success)
    assert mutation.stdout == ""
