"""Structural validation of Gregorian and Hijri dates."""

import calendar
from typing import List

from .types import DateValidationResult, GregorianDate, HijriDate

GREGORIAN_MIN_YEAR = 1
GREGORIAN_MAX_YEAR = 9999
HIJRI_MIN_YEAR = 1
HIJRI_MAX_YEAR = 2000
# Month lengths are not tracked for Hijri dates, only the upper bound.
HIJRI_MAX_DAY = 30


def is_gregorian_leap_year(year: int) -> bool:
    """Check a year against the proleptic Gregorian leap rule."""
    return calendar.isleap(year)


def days_in_gregorian_month(year: int, month: int) -> int:
    """Get number of days in a Gregorian month.

    Works for any year, unlike ``calendar.monthrange`` which is limited to the
    range of ``datetime.date``.
    """
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return calendar.mdays[month]


class DateValidator:
    """Validation helpers. Never raise; always return a result."""

    @staticmethod
    def validate_gregorian(date: GregorianDate) -> DateValidationResult:
        """Validate a Gregorian date, collecting every violation."""
        errors: List[str] = []

        if not GREGORIAN_MIN_YEAR <= date.year <= GREGORIAN_MAX_YEAR:
            errors.append(
                f"Year must be between {GREGORIAN_MIN_YEAR} and {GREGORIAN_MAX_YEAR}"
            )

        month_ok = 1 <= date.month <= 12
        if not month_ok:
            errors.append("Month must be between 1 and 12")

        if date.day < 1:
            errors.append("Day must be greater than 0")
        elif month_ok and date.day > days_in_gregorian_month(date.year, date.month):
            errors.append(f"Day {date.day} is invalid for month {date.month}")

        return DateValidationResult(is_valid=not errors, errors=tuple(errors))

    @staticmethod
    def validate_hijri(date: HijriDate) -> DateValidationResult:
        """Validate a Hijri date against the structural bounds."""
        errors: List[str] = []

        if not HIJRI_MIN_YEAR <= date.year <= HIJRI_MAX_YEAR:
            errors.append(
                f"Hijri year must be between {HIJRI_MIN_YEAR} and {HIJRI_MAX_YEAR}"
            )

        if not 1 <= date.month <= 12:
            errors.append("Month must be between 1 and 12")

        if not 1 <= date.day <= HIJRI_MAX_DAY:
            errors.append(f"Day must be between 1 and {HIJRI_MAX_DAY}")

        return DateValidationResult(is_valid=not errors, errors=tuple(errors))
