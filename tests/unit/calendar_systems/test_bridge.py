"""Test the Umm al-Qura bridge."""

import pytest
from hijri_converter import Hijri

from hijri_mapping.calendar_systems import HijriConverterBridge, TabularIslamicCalendar


class TestHijriConverterBridge:
    """Test raw conversions against known Umm al-Qura dates."""

    def setup_method(self):
        """Set up bridge."""
        self.bridge = HijriConverterBridge()

    @pytest.mark.parametrize(
        "gregorian,hijri",
        [
            ((2024, 1, 1), (1445, 6, 19)),
            ((2024, 3, 11), (1445, 9, 1)),  # 1 Ramadan 1445
            ((2024, 4, 10), (1445, 10, 1)),  # Eid al-Fitr 1445
        ],
    )
    def test_known_dates(self, gregorian, hijri):
        """Known dates convert in both directions."""
        assert self.bridge.gregorian_to_hijri_raw(*gregorian) == hijri
        assert self.bridge.hijri_to_gregorian_raw(*hijri) == gregorian

    def test_gregorian_day_overflow_rolls_forward(self):
        """30 February is read as 2 March."""
        assert self.bridge.gregorian_to_hijri_raw(
            2023, 2, 30
        ) == self.bridge.gregorian_to_hijri_raw(2023, 3, 2)

    def test_gregorian_month_overflow_rolls_into_next_year(self):
        """Month 13 is January of the following year."""
        assert self.bridge.gregorian_to_hijri_raw(
            2023, 13, 1
        ) == self.bridge.gregorian_to_hijri_raw(2024, 1, 1)

    def test_hijri_day_past_month_end_rolls_forward(self):
        """The day after the last day of a Hijri month is the 1st of the next."""
        length = Hijri(1444, 9, 1).month_length()

        assert self.bridge.hijri_to_gregorian_raw(
            1444, 9, length + 1
        ) == self.bridge.hijri_to_gregorian_raw(1444, 10, 1)

    @pytest.mark.parametrize(
        "gregorian",
        [(1, 1, 1), (622, 7, 19), (1900, 1, 1), (1924, 7, 31), (2077, 11, 17), (2100, 1, 1), (9999, 12, 31)],
    )
    def test_dates_outside_tables_round_trip(self, gregorian):
        """Dates the Umm al-Qura tables do not cover still convert both ways."""
        hijri = self.bridge.gregorian_to_hijri_raw(*gregorian)

        assert self.bridge.hijri_to_gregorian_raw(*hijri) == gregorian

    def test_gregorian_before_tables_uses_tabular_calendar(self):
        """1 January 1900 falls in 1317 AH."""
        assert self.bridge.gregorian_to_hijri_raw(1900, 1, 1)[0] == 1317

    def test_hijri_after_tables(self):
        """Hijri years past 1500 are converted arithmetically."""
        assert self.bridge.hijri_to_gregorian_raw(1600, 1, 1)[0] == 2173

    def test_day_before_epoch_crosses_year_one(self):
        """Day overflow below 1 January 1 CE is carried into year 0."""
        hijri = self.bridge.gregorian_to_hijri_raw(1, 1, 0)

        assert self.bridge.hijri_to_gregorian_raw(*hijri) == (0, 12, 31)


class TestTabularIslamicCalendar:
    """Test the arithmetic Islamic calendar."""

    def setup_method(self):
        """Set up calendar."""
        self.calendar = TabularIslamicCalendar()

    def test_julian_day_of_known_gregorian_date(self):
        """1 January 2000 is JDN 2451545."""
        assert self.calendar.gregorian_to_jdn(2000, 1, 1) == 2451545
        assert self.calendar.jdn_to_gregorian(2451545) == (2000, 1, 1)

    def test_epoch(self):
        """1 Muharram 1 AH is 19 July 622 in the proleptic Gregorian calendar."""
        assert self.calendar.islamic_to_jdn(1, 1, 1) == TabularIslamicCalendar.EPOCH
        assert self.calendar.jdn_to_islamic(TabularIslamicCalendar.EPOCH) == (1, 1, 1)
        assert self.calendar.jdn_to_gregorian(TabularIslamicCalendar.EPOCH) == (622, 7, 19)

    def test_month_lengths_alternate(self):
        """Odd months have 30 days and even months 29."""
        muharram = self.calendar.islamic_to_jdn(1445, 1, 1)
        safar = self.calendar.islamic_to_jdn(1445, 2, 1)
        rabi = self.calendar.islamic_to_jdn(1445, 3, 1)

        assert safar - muharram == 30
        assert rabi - safar == 29

    def test_leap_year_has_355_days(self):
        """Year 2 of the 30-year cycle is a leap year."""
        assert self.calendar.islamic_to_jdn(3, 1, 1) - self.calendar.islamic_to_jdn(2, 1, 1) == 355
        assert self.calendar.islamic_to_jdn(2, 1, 1) - self.calendar.islamic_to_jdn(1, 1, 1) == 354

    def test_gregorian_month_overflow(self):
        """Month 13 and day 0 are carried arithmetically."""
        assert self.calendar.gregorian_to_jdn(2023, 13, 1) == self.calendar.gregorian_to_jdn(2024, 1, 1)
        assert self.calendar.gregorian_to_jdn(2024, 3, 0) == self.calendar.gregorian_to_jdn(2024, 2, 29)

    @pytest.mark.parametrize("jdn", [1721426, 1948439, 2415021, 2451545, 5373484])
    def test_islamic_round_trip(self, jdn):
        """Every day maps to exactly one tabular date and back."""
        assert self.calendar.islamic_to_jdn(*self.calendar.jdn_to_islamic(jdn)) == jdn
