"""Tests for contract window arithmetic"""

from datetime import UTC, datetime, timedelta

import pytest

from app.domain.value_objects.contract_window import (
    ContractWindow,
    as_utc,
    compute_contract_window,
)

START = datetime(2025, 1, 1, tzinfo=UTC)
END = datetime(2025, 6, 30, tzinfo=UTC)


def test_running_contract_close_to_expiry():
    """Contract ending in 12 days is active and expiring soon"""
    window = compute_contract_window(START, END, END - timedelta(days=12))

    assert window == ContractWindow(is_active=True, days_until_expiry=12, is_expiring_soon=True)
    assert window.is_expired is False


def test_contract_expired_thirty_days_ago():
    window = compute_contract_window(START, END, END + timedelta(days=30))

    assert window.is_active is False
    assert window.days_until_expiry == -30
    assert window.is_expiring_soon is False
    assert window.is_expired is True


def test_contract_not_started_yet():
    window = compute_contract_window(START, END, START - timedelta(days=5))

    assert window.is_active is False
    assert window.days_until_expiry > 30
    assert window.is_expiring_soon is False


def test_active_is_inclusive_on_both_bounds():
    assert compute_contract_window(START, END, START).is_active is True
    assert compute_contract_window(START, END, END).is_active is True
    assert compute_contract_window(START, END, END + timedelta(microseconds=1)).is_active is False
    assert compute_contract_window(START, END, START - timedelta(microseconds=1)).is_active is False


def test_days_until_expiry_rounds_partial_days_up():
    """Any remaining fraction of a day counts as a whole day"""
    assert compute_contract_window(START, END, END - timedelta(hours=1)).days_until_expiry == 1
    assert compute_contract_window(START, END, END - timedelta(days=2, hours=3)).days_until_expiry == 3


def test_zero_days_left_at_contract_end():
    window = compute_contract_window(START, END, END)

    assert window.days_until_expiry == 0
    assert window.is_expiring_soon is False
    assert window.is_expired is True


@pytest.mark.parametrize(
    ("days_left", "expected"),
    [(31, False), (30, True), (1, True), (0, False), (-1, False)],
)
def test_expiring_soon_window_boundaries(days_left, expected):
    window = compute_contract_window(START, END, END - timedelta(days=days_left))

    assert window.days_until_expiry == days_left
    assert window.is_expiring_soon is expected


def test_days_until_expiry_never_increases_as_time_passes():
    previous = None
    for hours in range(0, 24 * 200, 7):
        days = compute_contract_window(START, END, START + timedelta(hours=hours)).days_until_expiry
        if previous is not None:
            assert days <= previous
        previous = days


def test_expiring_soon_and_expired_are_exclusive():
    for days in range(-40, 40):
        window = compute_contract_window(START, END, END - timedelta(days=days, hours=5))
        assert not (window.is_expiring_soon and window.is_expired)


def test_naive_datetimes_are_treated_as_utc():
    naive = compute_contract_window(
        START.replace(tzinfo=None), END.replace(tzinfo=None), END.replace(tzinfo=None) - timedelta(days=3)
    )
    aware = compute_contract_window(START, END, END - timedelta(days=3))

    assert naive == aware
    assert as_utc(datetime(2025, 1, 1)) == START


def test_days_until_expiry_drops_by_one_each_day():
    previous = compute_contract_window(START, END, START).days_until_expiry
    now = START + timedelta(days=1)
    while now <= END + timedelta(days=10):
        current = compute_contract_window(START, END, now).days_until_expiry
        assert previous - current == 1
        previous = current
        now += timedelta(days=1)


@pytest.mark.parametrize(
    ("now", "days_left", "expiring_soon", "active"),
    [
        (datetime(2025, 5, 20, tzinfo=UTC), 12, True, True),
        (datetime(2025, 7, 1, tzinfo=UTC), -30, False, False),
    ],
)
def test_contract_from_january_to_june(now, days_left, expiring_soon, active):
    window = compute_contract_window(
        datetime(2025, 1, 1, tzinfo=UTC), datetime(2025, 6, 1, tzinfo=UTC), now
    )

    assert window.days_until_expiry == days_left
    assert window.is_expiring_soon is expiring_soon
    assert window.is_active is active
