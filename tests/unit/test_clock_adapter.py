from datetime import UTC, datetime, timedelta

from appointbot.adapters.clock import FrozenClock, SystemClock


def test_system_clock_utc():
    now = SystemClock().now_utc()
    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta(0)
    # Sanity check: is it close to real now?
    diff = abs((datetime.now(UTC) - now).total_seconds())
    assert diff < 1.0


def test_frozen_clock(frozen_clock):
    assert frozen_clock.now_utc() == datetime(2026, 6, 15, 12, 0, 0, tzinfo=UTC)
    assert frozen_clock.now_utc() == frozen_clock.now_utc()


def test_frozen_clock_naive_is_utc():
    clock = FrozenClock(datetime(2026, 1, 1, 9, 30))
    assert clock.now_utc() == datetime(2026, 1, 1, 9, 30, tzinfo=UTC)


def test_frozen_clock_advance(frozen_clock):
    frozen_clock.advance(timedelta(days=1, minutes=5))
    assert frozen_clock.now_utc() == datetime(2026, 6, 16, 12, 5, 0, tzinfo=UTC)


def test_clocks_expose_only_utc():
    assert not hasattr(SystemClock(), "now")
    assert not hasattr(FrozenClock(datetime(2026, 1, 1, tzinfo=UTC)), "now")
