"""Custom exceptions for the Hijri regional mapping engine."""

from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence, Tuple, Union

if TYPE_CHECKING:
    from hijri_mapping.calendar_systems.types import (
        CalendarType,
        GregorianDate,
        HijriDate,
    )


class HijriMappingException(Exception):
    """Base exception for all engine exceptions."""

    def __init__(self, message: str, code: Optional[str] = None):
        """Initialize exception.

        Args:
            message: Error message
            code: Optional error code
        """
        super().__init__(message)
        self.message = message
        self.code = code


class ConversionError(HijriMappingException):
    """Raised when a calendar conversion cannot produce a result.

    Carries the input date and the calendar it was being converted to so
    callers can report them back.
    """

    def __init__(
        self,
        message: str,
        code: str,
        original_date: Union["GregorianDate", "HijriDate", None],
        target_calendar: Optional["CalendarType"],
    ):
        """Initialize ConversionError."""
        super().__init__(message, code)
        self.original_date = original_date
        self.target_calendar = target_calendar

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the error as a JSON-ready dictionary."""
        original: Optional[Dict[str, Any]] = None
        if self.original_date is not None:
            original = self.original_date.to_dict()
        return {
            "code": self.code,
            "message": self.message,
            "originalDate": original,
            "targetCalendar": (
                self.target_calendar.value if self.target_calendar else None
            ),
        }


class InvalidDateError(ConversionError):
    """Raised in strict mode when the input date fails validation."""

    def __init__(
        self,
        message: str,
        code: str,
        original_date: Union["GregorianDate", "HijriDate"],
        target_calendar: "CalendarType",
        errors: Sequence[str] = (),
    ):
        """Initialize InvalidDateError."""
        super().__init__(message, code, original_date, target_calendar)
        self.errors: Tuple[str, ...] = tuple(errors)


class UnmappedRegionError(ConversionError):
    """Raised when a region has no mapping and fallback is disabled."""

    def __init__(
        self,
        region: str,
        original_date: Union["GregorianDate", "HijriDate"],
        target_calendar: "CalendarType",
    ):
        """Initialize UnmappedRegionError."""
        super().__init__(
            f"No mapping available for region: {region}",
            "NO_REGIONAL_MAPPING",
            original_date,
            target_calendar,
        )
        self.region = region


class ConversionFailedError(ConversionError):
    """Wraps any unexpected failure raised while converting."""

    def __init__(
        self,
        message: str,
        original_date: Union["GregorianDate", "HijriDate", None],
        target_calendar: Optional["CalendarType"],
    ):
        """Initialize ConversionFailedError."""
        super().__init__(
            f"Conversion failed: {message}",
            "CONVERSION_FAILED",
            original_date,
            target_calendar,
        )


class DateParseError(HijriMappingException):
    """Raised when a date string cannot be parsed."""

    def __init__(self, message: str = "Could not parse date"):
        """Initialize DateParseError."""
        super().__init__(message, "INVALID_DATE_FORMAT")
