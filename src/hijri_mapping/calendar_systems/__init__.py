"""Gregorian and Hijri calendar conversion with regional sighting policies.

Conversions follow the Umm al-Qura calendar and then apply the offset of the
requested region (for example Indonesia's rukyat-based calendar, which tends
to run one day behind). Every result carries a confidence level describing
how much regional approximation was involved.
"""

from .bridge import HijriConverterBridge, JulianDayBridge, TabularIslamicCalendar
from .converter import CalendarConverter
from .mapping import CalendarMappingRecord, MappingBatch, build_mapping_records
from .months import get_hijri_month_name, get_hijri_month_names
from .regions import RegionalMappingRegistry, resolve_region
from .types import (
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
from .validation import DateValidator, days_in_gregorian_month, is_gregorian_leap_year

__all__ = [
    "CalendarType",
    "Confidence",
    "Region",
    "GregorianDate",
    "HijriDate",
    "RegionalMapping",
    "ConversionOptions",
    "ConversionResult",
    "DateValidationResult",
    "DateValidator",
    "is_gregorian_leap_year",
    "days_in_gregorian_month",
    "RegionalMappingRegistry",
    "resolve_region",
    "JulianDayBridge",
    "HijriConverterBridge",
    "TabularIslamicCalendar",
    "CalendarConverter",
    "CalendarMappingRecord",
    "MappingBatch",
    "build_mapping_records",
    "get_hijri_month_name",
    "get_hijri_month_names",
]
