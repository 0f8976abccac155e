"""Per-date calendar mapping records.

A record holds one Gregorian date together with its Hijri date in every
registered region, the shape the event ingestion job stores alongside each
event.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Tuple

from hijri_mapping.utils.exceptions import ConversionError
from hijri_mapping.utils.logging import get_logger

from .types import ConversionResult, GregorianDate, HijriDate, Region

if TYPE_CHECKING:
    from .converter import CalendarConverter

logger = get_logger(__name__)


@dataclass(frozen=True)
class CalendarMappingRecord:
    """One Gregorian date and its Hijri equivalents."""

    gregorian_date: GregorianDate
    hijri_date: HijriDate
    indonesian_date: HijriDate
    regional_results: Dict[Region, ConversionResult] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dictionary."""
        return {
            "gregorianDate": self.gregorian_date.to_dict(),
            "hijriDate": self.hijri_date.to_dict(),
            "indonesianDate": self.indonesian_date.to_dict(),
            "regions": {
                region.value: result.to_dict()
                for region, result in self.regional_results.items()
            },
        }


@dataclass
class MappingBatch:
    """Outcome of mapping many dates."""

    records: List[CalendarMappingRecord] = field(default_factory=list)
    failures: List[Tuple[GregorianDate, ConversionError]] = field(
        default_factory=list
    )

    @property
    def total(self) -> int:
        """Number of dates processed."""
        return len(self.records) + len(self.failures)


def build_mapping_records(
    converter: "CalendarConverter", dates: Iterable[GregorianDate]
) -> MappingBatch:
    """
    Build mapping records for a sequence of dates.

    Dates that fail to convert are collected in ``failures`` instead of
    aborting the batch.

    Args:
        converter: Converter to use
        dates: Gregorian dates to map

    Returns:
        Records and failures
    """
    batch = MappingBatch()
    for gregorian_date in dates:
        try:
            batch.records.append(converter.map_date_all_regions(gregorian_date))
        except ConversionError as e:
            logger.warning(
                "mapping_record_failed",
                date=str(gregorian_date),
                code=e.code,
                error=e.message,
            )
            batch.failures.append((gregorian_date, e))

    logger.info(
        "mapping_records_built",
        total=batch.total,
        succeeded=len(batch.records),
        failed=len(batch.failures),
    )
    return batch
