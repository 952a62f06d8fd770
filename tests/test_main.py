"""Tests for the local runner's argument handling."""

from datetime import timedelta, timezone

import pytest

from etl_santa.main import parse_args, parse_now

from tests.factories import utc


def test_parse_now_defaults_to_utc() -> None:
    assert parse_now("2024-12-25T10:51:00") == utc(2024, 12, 25, 10, 51)


def test_parse_now_keeps_offset() -> None:
    moment = parse_now("2024-12-25T11:51:00+01:00")

    assert moment.utcoffset() == timedelta(hours=1)
    assert moment == utc(2024, 12, 25, 10, 51)
    assert moment.astimezone(timezone.utc).hour == 10


def test_parse_now_rejects_garbage() -> None:
    with pytest.raises(SystemExit):
        parse_now("christmas eve")


def test_parse_now_without_value() -> None:
    assert parse_now(None) is None


def test_parse_args_flags() -> None:
    args = parse_args(["--debug", "--now", "2024-12-25T10:00:00Z"])

    assert args.debug is True
    assert args.now == "2024-12-25T10:00:00Z"
    assert parse_args([]).debug is False
