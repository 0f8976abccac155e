"""Date string parsing.

Year-first numeric dates are read literally (without validation) so that
malformed input can still reach the lenient conversion path. Anything else
goes through ``dateutil``.
"""

import re
from datetime import datetime
from typing import Optional, cast

from dateutil import parser as dateutil_parser

from hijri_mapping.calendar_systems.types import GregorianDate, HijriDate
from hijri_mapping.config import get_settings
from hijri_mapping.utils.exceptions import DateParseError
from hijri_mapping.utils.logging import get_logger

logger = get_logger(__name__)

_YMD_PATTERN = re.compile(r"^(\d{1,4})[-/.](\d{1,2})[-/.](\d{1,2})$")
_AH_SUFFIX = re.compile(r"\s*(AH|H|هـ)$", re.IGNORECASE)


def parse_gregorian_date(
    date_string: str, dayfirst: Optional[bool] = None
) -> GregorianDate:
    """
    Parse a Gregorian date string.

    Args:
        date_string: The date string to parse
        dayfirst: Read ambiguous numeric dates as day-first; defaults to the
            ``date_parse_dayfirst`` setting

    Returns:
        Parsed date

    Raises:
        DateParseError: If the string cannot be parsed
    """
    if not date_string or not date_string.strip():
        raise DateParseError("Empty date string")

    date_string = date_string.strip()

    match = _YMD_PATTERN.match(date_string)
    if match:
        year, month, day = (int(part) for part in match.groups())
        return GregorianDate(year, month, day)

    if dayfirst is None:
        dayfirst = get_settings().date_parse_dayfirst

    try:
        parsed = cast(datetime, dateutil_parser.parse(date_string, dayfirst=dayfirst))
    except (ValueError, OverflowError, TypeError) as e:
        logger.debug("dateutil_parse_failed", value=date_string, error=str(e))
        raise DateParseError(f"Could not parse date: {date_string}") from e

    return GregorianDate.from_date(parsed)


def parse_hijri_date(date_string: str) -> HijriDate:
    """Parse a year-first Hijri date such as ``1445-09-01`` or ``1445/9/1 AH``."""
    if not date_string or not date_string.strip():
        raise DateParseError("Empty date string")

    cleaned = _AH_SUFFIX.sub("", date_string.strip())
    match = _YMD_PATTERN.match(cleaned)
    if not match:
        raise DateParseError(f"Could not parse Hijri date: {date_string}")

    year, month, day = (int(part) for part in match.groups())
    return HijriDate(year, month, day)
