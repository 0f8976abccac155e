"""Shared fixtures for the Hijri regional mapping tests."""

from datetime import date, timedelta
from typing import List, Tuple

import pytest

from hijri_mapping.calendar_systems import CalendarConverter, GregorianDate
from hijri_mapping.config import get_settings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "round_trip: conversions that go Gregorian -> Hijri -> Gregorian"
    )


class RecordingBridge:
    """Bridge with a fixed offset that records every call.

    Hijri dates are modelled as the Gregorian date shifted back 579 years with
    30-day months, which is enough to check the orchestration logic without
    depending on real Umm al-Qura tables.
    """

    EPOCH = date(2000, 1, 1)

    def __init__(self) -> None:
        """Initialize call log."""
        self.calls: List[Tuple[str, Tuple[int, int, int]]] = []

    def gregorian_to_hijri_raw(self, year: int, month: int, day: int):
        """Map a Gregorian day to a 360-day toy calendar."""
        self.calls.append(("g2h", (year, month, day)))
        offset = (date(year, month, 1) - self.EPOCH).days + day - 1
        years, rest = divmod(offset, 360)
        return 1420 + years, rest // 30 + 1, rest % 30 + 1

    def hijri_to_gregorian_raw(self, year: int, month: int, day: int):
        """Inverse of ``gregorian_to_hijri_raw``."""
        self.calls.append(("h2g", (year, month, day)))
        offset = (year - 1420) * 360 + (month - 1) * 30 + (day - 1)
        result = self.EPOCH + timedelta(days=offset)
        return result.year, result.month, result.day


class ExplodingBridge:
    """Bridge that always fails."""

    def gregorian_to_hijri_raw(self, year: int, month: int, day: int):
        """Raise a non-engine error."""
        raise RuntimeError("bridge offline")

    def hijri_to_gregorian_raw(self, year: int, month: int, day: int):
        """Raise a non-engine error."""
        raise RuntimeError("bridge offline")


@pytest.fixture
def converter() -> CalendarConverter:
    """Converter backed by the real Umm al-Qura bridge."""
    return CalendarConverter()


@pytest.fixture
def recording_bridge() -> RecordingBridge:
    """Fresh recording bridge."""
    return RecordingBridge()


@pytest.fixture
def fake_converter(recording_bridge: RecordingBridge) -> CalendarConverter:
    """Converter backed by the recording bridge."""
    return CalendarConverter(bridge=recording_bridge)


@pytest.fixture
def exploding_converter() -> CalendarConverter:
    """Converter whose bridge always raises."""
    return CalendarConverter(bridge=ExplodingBridge())


@pytest.fixture
def new_year_2024() -> GregorianDate:
    """1 January 2024, 19 Jumada al-thani 1445 in Umm al-Qura."""
    return GregorianDate(2024, 1, 1)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Keep settings read from the environment isolated per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
