"""Hijri regional mapping engine."""

from hijri_mapping.calendar_systems import (
    CalendarConverter,
    CalendarType,
    Confidence,
    ConversionOptions,
    ConversionResult,
    DateValidationResult,
    GregorianDate,
    HijriDate,
    Region,
    RegionalMapping,
)
from hijri_mapping.utils.exceptions import (
    ConversionError,
    ConversionFailedError,
    DateParseError,
    HijriMappingException,
    InvalidDateError,
    UnmappedRegionError,
)

__version__ = "0.1.0"

__all__ = [
    "CalendarConverter",
    "CalendarType",
    "Confidence",
    "ConversionOptions",
    "ConversionResult",
    "DateValidationResult",
    "GregorianDate",
    "HijriDate",
    "Region",
    "RegionalMapping",
    "HijriMappingException",
    "ConversionError",
    "InvalidDateError",
    "UnmappedRegionError",
    "ConversionFailedError",
    "DateParseError",
]
