"""Calendar conversion types and data classes."""

from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple, Union

if TYPE_CHECKING:
    from hijri_mapping.config import Settings


class CalendarType(str, Enum):
    """Calendars a conversion can read from or produce."""

    GREGORIAN = "gregorian"
    HIJRI = "hijri"  # Umm al-Qura
    HIJRI_INDONESIA = "hijri_indonesia"  # Rukyat-adjusted


class Region(str, Enum):
    """Regions with a registered sighting policy."""

    GLOBAL = "global"
    INDONESIA = "indonesia"
    SAUDI_ARABIA = "saudi_arabia"
    MALAYSIA = "malaysia"


class Confidence(str, Enum):
    """How much regional approximation went into a result."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class GregorianDate:
    """Date in the Gregorian calendar.

    Instances are not validated on construction; use
    ``DateValidator.validate_gregorian`` for that.
    """

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value: date) -> "GregorianDate":
        """Build from a ``datetime.date`` (or ``datetime``)."""
        return cls(year=value.year, month=value.month, day=value.day)

    def to_date(self) -> date:
        """Return the equivalent ``datetime.date``; raises ValueError if invalid."""
        return date(self.year, self.month, self.day)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dictionary."""
        return {"year": self.year, "month": self.month, "day": self.day}

    def __str__(self) -> str:
        """Return ISO-like string representation."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class HijriDate:
    """Date in the Hijri calendar.

    ``month_name`` is display-only and ignored by equality.
    """

    year: int
    month: int
    day: int
    month_name: Optional[str] = field(default=None, compare=False)

    def with_month_name(self, month_name: Optional[str]) -> "HijriDate":
        """Return a copy carrying ``month_name``."""
        return replace(self, month_name=month_name)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dictionary."""
        data: Dict[str, Any] = {
            "year": self.year,
            "month": self.month,
            "day": self.day,
        }
        if self.month_name is not None:
            data["monthName"] = self.month_name
        return data

    def __str__(self) -> str:
        """Return ISO-like string representation with the AH era."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d} AH"


AnyDate = Union[GregorianDate, HijriDate]


@dataclass(frozen=True)
class RegionalMapping:
    """Adjustment policy of one region."""

    region: Region
    adjustment_days: int  # +/- days from the Umm al-Qura calculation
    rukyat_based: bool
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dictionary."""
        return {
            "region": self.region.value,
            "adjustmentDays": self.adjustment_days,
            "rukyatBased": self.rukyat_based,
            "description": self.description,
        }


@dataclass(frozen=True)
class ConversionOptions:
    """Caller-supplied conversion settings.

    ``region`` may be a raw string; strings that do not name a known region
    are kept as-is and handled by the fallback policy.
    """

    region: Optional[Union[Region, str]] = Region.GLOBAL  # None or "" means GLOBAL
    allow_fallback: bool = True
    include_month_names: Optional[bool] = None  # None: not chosen, treated as False
    strict: bool = False

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ConversionOptions":
        """Build default options from configuration."""
        region: Union[Region, str] = settings.default_region
        try:
            region = Region(settings.default_region)
        except ValueError:
            pass  # unknown name, left to fallback
        return cls(
            region=region,
            allow_fallback=settings.allow_fallback,
            include_month_names=settings.include_month_names,
            strict=settings.strict_validation,
        )


@dataclass(frozen=True)
class DateValidationResult:
    """Outcome of structural date validation."""

    is_valid: bool
    errors: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ConversionResult:
    """Result of a single conversion."""

    original_date: AnyDate
    converted_date: AnyDate
    source_calendar: CalendarType
    target_calendar: CalendarType
    region: Union[Region, str]
    confidence: Confidence
    notes: Optional[str] = None
    fallback_used: bool = False

    def with_notes(self, notes: Optional[str]) -> "ConversionResult":
        """Return a copy with ``notes`` replaced."""
        return replace(self, notes=notes)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dictionary."""
        region = self.region.value if isinstance(self.region, Region) else self.region
        return {
            "originalDate": self.original_date.to_dict(),
            "convertedDate": self.converted_date.to_dict(),
            "sourceCalendar": self.source_calendar.value,
            "targetCalendar": self.target_calendar.value,
            "region": region,
            "confidence": self.confidence.value,
            "notes": self.notes,
            "fallbackUsed": self.fallback_used,
        }
