"""Registry of per-region Hijri adjustment policies."""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

from .types import Region, RegionalMapping

DEFAULT_REGIONAL_MAPPINGS = (
    RegionalMapping(
        region=Region.GLOBAL,
        adjustment_days=0,
        rukyat_based=False,
        description="Standard Umm al-Qura calendar (Saudi Arabia)",
    ),
    RegionalMapping(
        region=Region.INDONESIA,
        adjustment_days=-1,  # local sighting usually lands a day earlier
        rukyat_based=True,
        description="Indonesian rukyat-based Islamic calendar",
    ),
    RegionalMapping(
        region=Region.SAUDI_ARABIA,
        adjustment_days=0,
        rukyat_based=False,
        description="Official Saudi Arabian Umm al-Qura calendar",
    ),
    RegionalMapping(
        region=Region.MALAYSIA,
        adjustment_days=0,  # offset not modelled yet
        rukyat_based=True,
        description="Malaysian Islamic calendar with local adjustments",
    ),
)


def resolve_region(value: Any) -> Any:
    """Turn a region name into a ``Region`` when it names one.

    Unknown names and non-string values are returned unchanged so the
    caller's fallback policy can decide what to do with them.
    """
    if isinstance(value, Region) or not isinstance(value, str):
        return value
    try:
        return Region(value.strip().lower())
    except ValueError:
        return value


class RegionalMappingRegistry:
    """Read-only table from region to adjustment policy.

    Filled once in the constructor; safe to share between threads.
    """

    def __init__(self) -> None:
        """Initialize registry with the built-in regional mappings."""
        mappings: Dict[Region, RegionalMapping] = {}
        for mapping in DEFAULT_REGIONAL_MAPPINGS:
            mappings[mapping.region] = mapping
        self._mappings: Mapping[Region, RegionalMapping] = MappingProxyType(mappings)

    def get_mapping(self, region: Union[Region, str]) -> Optional[RegionalMapping]:
        """Get the mapping for a region, or None if the region is unknown."""
        resolved = resolve_region(region)
        if not isinstance(resolved, Region):
            return None
        return self._mappings.get(resolved)

    def list_regions(self) -> List[Region]:
        """List registered regions in registration order."""
        return list(self._mappings)

    def __contains__(self, region: object) -> bool:
        """Check whether a region has a mapping."""
        if not isinstance(region, str):
            return False
        return self.get_mapping(region) is not None

    def __len__(self) -> int:
        """Return the number of registered regions."""
        return len(self._mappings)
