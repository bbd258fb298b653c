import pytest

from blop_installer.errors import CommandError, EnumerationError
from blop_installer.lib.command import FailureReason
from blop_installer.lib.timezone import list_timezones, set_timezone
from tests.conftest import FakeGateway


def test_lists_timezones_from_timedatectl(gateway: FakeGateway) -> None:
    gateway.on("timedatectl", stdout="UTC\nEurope/Oslo\n")

    assert list_timezones(gateway) == ["UTC", "Europe/Oslo"]  # type: ignore[arg-type]
    assert gateway.calls == [["timedatectl", "list-timezones"]]
    assert gateway.read_only_calls == [["timedatectl", "list-timezones"]]


def test_listing_failure_is_enumeration_error(gateway: FakeGateway) -> None:
    gateway.on("timedatectl", reason=FailureReason.OUTPUT_PARSE_ERROR)

    with pytest.raises(EnumerationError, match="not valid text"):
        list_timezones(gateway)  # type: ignore[arg-type]


def test_empty_listing_is_enumeration_error(gateway: FakeGateway) -> None:
    gateway.on("timedatectl", stdout="")

    with pytest.raises(EnumerationError, match="no timezones"):
        list_timezones(gateway)  # type: ignore[arg-type]


def test_set_timezone_argv(gateway: FakeGateway) -> None:
    set_timezone(gateway, "Europe/Oslo")  # type: ignore[arg-type]

    assert gateway.calls == [["timedatectl", "set-timezone", "Europe/Oslo"]]
    assert gateway.read_only_calls == []


def test_set_timezone_failure(gateway: FakeGateway) -> None:
    gateway.on("timedatectl", returncode=1)

    with pytest.raises(CommandError, match=r"are you running as an elevated user\?"):
        set_timezone(gateway, "Europe/Oslo")  # type: ignore[arg-type]
