"""Day-count bridge between the Gregorian and Hijri calendars.

The bridge knows nothing about regions or validation. It only maps a day in
one calendar to the same day in the other. Inside the Umm al-Qura tables
(1343-1500 AH) it uses ``hijri_converter``; outside them it falls back to the
arithmetic (tabular) Islamic calendar so that every date has an answer.
"""

from typing import Protocol, Tuple

from hijri_converter import Gregorian, Hijri, ummalqura

DateTuple = Tuple[int, int, int]


class JulianDayBridge(Protocol):
    """Protocol defining the raw calendar transform."""

    def gregorian_to_hijri_raw(self, year: int, month: int, day: int) -> DateTuple:
        """Convert a Gregorian date to a Hijri date."""

    def hijri_to_gregorian_raw(self, year: int, month: int, day: int) -> DateTuple:
        """Convert a Hijri date to a Gregorian date."""


def _roll_month(year: int, month: int) -> Tuple[int, int]:
    """Carry month overflow into the year (month 13 -> January next year)."""
    carry, month_index = divmod(month - 1, 12)
    return year + carry, month_index + 1


class TabularIslamicCalendar:
    """Arithmetic Islamic calendar on Julian Day Numbers.

    30-year cycle with leap years 2, 5, 7, 10, 13, 16, 18, 21, 24, 26 and 29.
    Works for any integer year, including years before 1 AH.
    """

    # JDN of 1 Muharram 1 AH (16 July 622, Julian calendar)
    EPOCH = 1948440

    @staticmethod
    def gregorian_to_jdn(year: int, month: int, day: int) -> int:
        """Convert a proleptic Gregorian date to a Julian Day Number.

        Month and day overflow are carried arithmetically, so (2023, 2, 30)
        and (2023, 13, 1) are accepted.
        """
        a = (14 - month) // 12
        y = year + 4800 - a
        m = month + 12 * a - 3

        return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045

    @staticmethod
    def jdn_to_gregorian(jdn: int) -> DateTuple:
        """Convert a Julian Day Number to a proleptic Gregorian date."""
        a = jdn + 32044
        b = (4 * a + 3) // 146097
        c = a - (146097 * b) // 4
        d = (4 * c + 3) // 1461
        e = c - (1461 * d) // 4
        m = (5 * e + 2) // 153

        day = e - (153 * m + 2) // 5 + 1
        month = m + 3 - 12 * (m // 10)
        year = 100 * b + d - 4800 + m // 10

        return year, month, day

    @classmethod
    def islamic_to_jdn(cls, year: int, month: int, day: int) -> int:
        """Convert a tabular Islamic date to a Julian Day Number."""
        return (
            day
            + (59 * (month - 1) + 1) // 2  # ceil(29.5 * (month - 1))
            + (year - 1) * 354
            + (3 + 11 * year) // 30
            + cls.EPOCH
            - 1
        )

    @classmethod
    def jdn_to_islamic(cls, jdn: int) -> DateTuple:
        """Convert a Julian Day Number to a tabular Islamic date."""
        year = (30 * (jdn - cls.EPOCH) + 10646) // 10631
        elapsed = jdn - 29 - cls.islamic_to_jdn(year, 1, 1)
        month = min(12, -((-2 * elapsed) // 59) + 1)  # ceil(elapsed / 29.5) + 1
        day = jdn - cls.islamic_to_jdn(year, month, 1) + 1

        return year, month, day


class HijriConverterBridge:
    """Umm al-Qura bridge backed by the ``hijri_converter`` library.

    Day numbers past the end of a month are counted forward from the first of
    that month, so 2023-02-30 is read as 2023-03-02. Dates outside the
    library's Umm al-Qura range use ``TabularIslamicCalendar``.
    """

    def __init__(self) -> None:
        """Initialize bridge with the Umm al-Qura table bounds."""
        self.gregorian_range = ummalqura.GREGORIAN_RANGE
        self.hijri_years = (ummalqura.HIJRI_RANGE[0][0], ummalqura.HIJRI_RANGE[1][0])
        self.tabular = TabularIslamicCalendar()

    def gregorian_to_hijri_raw(self, year: int, month: int, day: int) -> DateTuple:
        """Convert a Gregorian date to a Hijri date."""
        jdn = self.tabular.gregorian_to_jdn(year, month, day)
        actual = self.tabular.jdn_to_gregorian(jdn)

        if self.gregorian_range[0] <= actual <= self.gregorian_range[1]:
            hijri = Gregorian(*actual).to_hijri()
            return hijri.year, hijri.month, hijri.day

        return self.tabular.jdn_to_islamic(jdn)

    def hijri_to_gregorian_raw(self, year: int, month: int, day: int) -> DateTuple:
        """Convert a Hijri date to a Gregorian date."""
        year, month = _roll_month(year, month)

        if self.hijri_years[0] <= year <= self.hijri_years[1]:
            first = Hijri(year, month, 1).to_gregorian()
            first_jdn = self.tabular.gregorian_to_jdn(first.year, first.month, first.day)
        else:
            first_jdn = self.tabular.islamic_to_jdn(year, month, 1)

        return self.tabular.jdn_to_gregorian(first_jdn + day - 1)
