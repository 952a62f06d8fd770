"""Tests for pinning the yearless schedule to a reference year."""

from etl_santa.schedule import EPOCH, Stop, from_epoch_ms, normalise_epoch_ms, normalise_year

from tests.factories import TOKYO, epoch_ms, make_waypoint, utc


def test_from_epoch_ms_is_utc_aware() -> None:
    assert from_epoch_ms(0) == EPOCH
    assert from_epoch_ms(epoch_ms(utc(2024, 12, 25, 10, 0))) == utc(2024, 12, 25, 10, 0)


def test_same_month_day_time_in_different_years_compare_equal() -> None:
    older = normalise_epoch_ms(epoch_ms(utc(2019, 12, 24, 22, 30)), 2024)
    newer = normalise_epoch_ms(epoch_ms(utc(2023, 12, 24, 22, 30)), 2024)

    assert older == newer == utc(2024, 12, 24, 22, 30)


def test_leap_day_rolls_over_in_common_year() -> None:
    assert normalise_year(utc(2024, 2, 29, 6, 0), 2025) == utc(2025, 3, 1, 6, 0)
    assert normalise_year(utc(2024, 2, 29, 6, 0), 2028) == utc(2028, 2, 29, 6, 0)


def test_stop_window_is_inclusive() -> None:
    waypoint = make_waypoint("Tokyo", "Japan", TOKYO, utc(2019, 12, 25, 10, 0), utc(2019, 12, 25, 10, 5))
    stop = Stop.pin(waypoint, 2024)

    assert stop.arrival == utc(2024, 12, 25, 10, 0)
    assert stop.is_present(utc(2024, 12, 25, 10, 0))
    assert stop.is_present(utc(2024, 12, 25, 10, 5))
    assert not stop.is_present(utc(2024, 12, 25, 10, 6))
    assert stop.is_upcoming(utc(2024, 12, 25, 9, 59))
