"""Calendar converter with regional Hijri adjustments."""

from dataclasses import replace
from datetime import date
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

from hijri_mapping.utils.date_parser import parse_gregorian_date
from hijri_mapping.utils.exceptions import (
    ConversionError,
    ConversionFailedError,
    DateParseError,
    InvalidDateError,
    UnmappedRegionError,
)
from hijri_mapping.utils.logging import get_logger

from .bridge import HijriConverterBridge, JulianDayBridge
from .mapping import CalendarMappingRecord
from .months import get_hijri_month_name
from .regions import RegionalMappingRegistry, resolve_region
from .types import (
    AnyDate,
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
from .validation import DateValidator

if TYPE_CHECKING:
    from hijri_mapping.config import Settings

logger = get_logger(__name__)

FALLBACK_NOTE = "Using fallback global mapping"
SIGHTING_NOTE = "Adjusted for local sighting practices"
REVERSE_SIGHTING_NOTE = "Reverse-adjusted for local sighting practices"
INDONESIA_NOTE = (
    "Indonesian rukyat-based calendar may vary based on local moon sighting."
)


class CalendarConverter:
    """Converts dates between Gregorian and Hijri with regional policies.

    The converter holds no mutable state after construction and can be shared
    between threads. Pass a custom ``bridge`` to swap the underlying
    Umm al-Qura implementation.
    """

    def __init__(
        self,
        bridge: Optional[JulianDayBridge] = None,
        registry: Optional[RegionalMappingRegistry] = None,
        default_options: Optional[ConversionOptions] = None,
    ) -> None:
        """Initialize calendar converter."""
        self.bridge: JulianDayBridge = bridge or HijriConverterBridge()
        self.registry = registry or RegionalMappingRegistry()
        self.default_options = default_options or ConversionOptions()
        self.validator = DateValidator()

    @classmethod
    def from_settings(
        cls,
        settings: Optional["Settings"] = None,
        bridge: Optional[JulianDayBridge] = None,
    ) -> "CalendarConverter":
        """Build a converter whose defaults come from configuration."""
        if settings is None:
            from hijri_mapping.config import get_settings

            settings = get_settings()
        return cls(
            bridge=bridge, default_options=ConversionOptions.from_settings(settings)
        )

    def convert(
        self,
        date_value: Union[GregorianDate, HijriDate, date, str],
        options: Optional[ConversionOptions] = None,
    ) -> ConversionResult:
        """
        Convert a date to the other calendar.

        Args:
            date_value: Gregorian or Hijri date; ``datetime.date`` objects and
                strings are read as Gregorian
            options: Conversion options (converter defaults if omitted)

        Returns:
            Conversion result

        Raises:
            ConversionError: If the conversion cannot produce a result
        """
        if isinstance(date_value, HijriDate):
            return self.hijri_to_gregorian(date_value, options)
        if isinstance(date_value, GregorianDate):
            return self.gregorian_to_hijri(date_value, options)
        if isinstance(date_value, date):
            return self.gregorian_to_hijri(GregorianDate.from_date(date_value), options)
        if isinstance(date_value, str):
            try:
                gregorian_date = parse_gregorian_date(date_value)
            except DateParseError as e:
                raise ConversionFailedError(e.message, None, CalendarType.HIJRI) from e
            return self.gregorian_to_hijri(gregorian_date, options)

        raise ConversionFailedError(
            f"Unsupported date value: {date_value!r}", None, None
        )

    def gregorian_to_hijri(
        self, gregorian_date: GregorianDate, options: Optional[ConversionOptions] = None
    ) -> ConversionResult:
        """Convert a Gregorian date to a Hijri date."""
        options = options or self.default_options
        target = CalendarType.HIJRI
        try:
            logger.debug("converting_gregorian_to_hijri", date=str(gregorian_date))

            validation = self.validator.validate_gregorian(gregorian_date)
            self._check_validation(
                validation, gregorian_date, options, "INVALID_GREGORIAN_DATE", target
            )

            region = resolve_region(options.region or Region.GLOBAL)
            if region == Region.INDONESIA:
                target = CalendarType.HIJRI_INDONESIA
            mapping, fallback_used = self._resolve_mapping(
                region, options, gregorian_date, target
            )

            year, month, day = self.bridge.gregorian_to_hijri_raw(
                gregorian_date.year, gregorian_date.month, gregorian_date.day
            )
            hijri_date = HijriDate(year, month, day)

            confidence = Confidence.HIGH
            notes: Optional[str] = None
            if mapping.adjustment_days != 0:
                hijri_date = self.adjust_hijri_date(hijri_date, mapping.adjustment_days)
                if mapping.rukyat_based:
                    confidence = Confidence.MEDIUM
                    notes = SIGHTING_NOTE

            if fallback_used:
                confidence = Confidence.LOW
                notes = FALLBACK_NOTE

            if options.include_month_names:
                hijri_date = hijri_date.with_month_name(
                    get_hijri_month_name(hijri_date.month)
                )

            result = ConversionResult(
                original_date=gregorian_date,
                converted_date=hijri_date,
                source_calendar=CalendarType.GREGORIAN,
                target_calendar=target,
                region=region,
                confidence=confidence,
                notes=notes,
                fallback_used=fallback_used,
            )
            logger.info(
                "gregorian_to_hijri_converted",
                date=str(gregorian_date),
                result=str(hijri_date),
                region=str(getattr(region, "value", region)),
                confidence=confidence.value,
            )
            return result

        except ConversionError:
            raise
        except Exception as e:
            logger.error(
                "gregorian_to_hijri_failed", date=str(gregorian_date), error=str(e)
            )
            raise ConversionFailedError(str(e), gregorian_date, target) from e

    def hijri_to_gregorian(
        self, hijri_date: HijriDate, options: Optional[ConversionOptions] = None
    ) -> ConversionResult:
        """Convert a Hijri date to a Gregorian date."""
        options = options or self.default_options
        target = CalendarType.GREGORIAN
        try:
            logger.debug("converting_hijri_to_gregorian", date=str(hijri_date))

            validation = self.validator.validate_hijri(hijri_date)
            self._check_validation(
                validation, hijri_date, options, "INVALID_HIJRI_DATE", target
            )

            region = resolve_region(options.region or Region.GLOBAL)
            mapping, fallback_used = self._resolve_mapping(
                region, options, hijri_date, target
            )

            # The bridge only knows the canonical calendar, so undo the
            # regional offset first.
            canonical = self.adjust_hijri_date(hijri_date, -mapping.adjustment_days)

            year, month, day = self.bridge.hijri_to_gregorian_raw(
                canonical.year, canonical.month, canonical.day
            )
            gregorian_date = GregorianDate(year, month, day)

            confidence = Confidence.HIGH
            notes: Optional[str] = None
            if fallback_used:
                confidence = Confidence.LOW
                notes = FALLBACK_NOTE
            elif mapping.rukyat_based:
                confidence = Confidence.MEDIUM
                notes = REVERSE_SIGHTING_NOTE

            result = ConversionResult(
                original_date=hijri_date,
                converted_date=gregorian_date,
                source_calendar=CalendarType.HIJRI,
                target_calendar=target,
                region=region,
                confidence=confidence,
                notes=notes,
                fallback_used=fallback_used,
            )
            logger.info(
                "hijri_to_gregorian_converted",
                date=str(hijri_date),
                result=str(gregorian_date),
                region=str(getattr(region, "value", region)),
                confidence=confidence.value,
            )
            return result

        except ConversionError:
            raise
        except Exception as e:
            logger.error("hijri_to_gregorian_failed", date=str(hijri_date), error=str(e))
            raise ConversionFailedError(str(e), hijri_date, target) from e

    def convert_for_indonesia(
        self, gregorian_date: GregorianDate, options: Optional[ConversionOptions] = None
    ) -> ConversionResult:
        """Convert to the Indonesian rukyat-based Hijri calendar.

        Month names are included unless the caller set
        ``include_month_names`` explicitly.
        """
        options = options or self.default_options
        include_month_names = options.include_month_names
        if include_month_names is None:
            include_month_names = True
        indonesian_options = replace(
            options, region=Region.INDONESIA, include_month_names=include_month_names
        )

        result = self.gregorian_to_hijri(gregorian_date, indonesian_options)
        notes = f"{result.notes}. {INDONESIA_NOTE}" if result.notes else INDONESIA_NOTE
        return result.with_notes(notes)

    def adjust_hijri_date(self, hijri_date: HijriDate, adjustment_days: int) -> HijriDate:
        """Shift a Hijri date by whole days through the Gregorian calendar."""
        if adjustment_days == 0:
            return hijri_date

        g_year, g_month, g_day = self.bridge.hijri_to_gregorian_raw(
            hijri_date.year, hijri_date.month, hijri_date.day
        )
        # day overflow is carried by the bridge
        year, month, day = self.bridge.gregorian_to_hijri_raw(
            g_year, g_month, g_day + adjustment_days
        )
        return HijriDate(year, month, day, month_name=hijri_date.month_name)

    def map_date_all_regions(self, gregorian_date: GregorianDate) -> CalendarMappingRecord:
        """Convert one Gregorian date for every registered region."""
        regional = {}
        for region in self.registry.list_regions():
            options = replace(
                self.default_options,
                region=region,
                allow_fallback=False,
                include_month_names=True,
            )
            regional[region] = self.gregorian_to_hijri(gregorian_date, options)

        return CalendarMappingRecord(
            gregorian_date=gregorian_date,
            hijri_date=regional[Region.GLOBAL].converted_date,
            indonesian_date=regional[Region.INDONESIA].converted_date,
            regional_results=regional,
        )

    def validate_gregorian_date(self, gregorian_date: GregorianDate) -> DateValidationResult:
        """Validate a Gregorian date."""
        return self.validator.validate_gregorian(gregorian_date)

    def validate_hijri_date(self, hijri_date: HijriDate) -> DateValidationResult:
        """Validate a Hijri date."""
        return self.validator.validate_hijri(hijri_date)

    def get_available_regions(self) -> List[Region]:
        """Get available regions for conversion."""
        return self.registry.list_regions()

    def get_regional_mapping(self, region: Union[Region, str]) -> Optional[RegionalMapping]:
        """Get regional mapping information."""
        return self.registry.get_mapping(region)

    def get_hijri_month_name(self, month: int, language: str = "en") -> str:
        """Get Hijri month name."""
        return get_hijri_month_name(month, language)

    def _check_validation(
        self,
        validation: DateValidationResult,
        original_date: AnyDate,
        options: ConversionOptions,
        code: str,
        target: CalendarType,
    ) -> None:
        """Raise on invalid input in strict mode, otherwise just log it."""
        if validation.is_valid:
            return

        if options.strict:
            calendar_name = "Gregorian" if code == "INVALID_GREGORIAN_DATE" else "Hijri"
            raise InvalidDateError(
                f"Invalid {calendar_name} date: {', '.join(validation.errors)}",
                code,
                original_date,
                target,
                validation.errors,
            )

        logger.warning(
            "invalid_date_best_effort",
            date=str(original_date),
            errors=list(validation.errors),
        )

    def _resolve_mapping(
        self,
        region: Union[Region, str],
        options: ConversionOptions,
        original_date: AnyDate,
        target: CalendarType,
    ) -> Tuple[RegionalMapping, bool]:
        """Find the mapping for a region, applying the fallback policy.

        Returns the mapping to use and whether the global fallback was taken.
        """
        mapping = self.registry.get_mapping(region)
        if mapping is not None:
            return mapping, False

        if not options.allow_fallback:
            raise UnmappedRegionError(str(region), original_date, target)

        logger.warning("regional_mapping_fallback", region=str(region))
        global_mapping = self.registry.get_mapping(Region.GLOBAL)
        if global_mapping is None:
            raise UnmappedRegionError(Region.GLOBAL.value, original_date, target)
        return global_mapping, True
