#!/usr/bin/env python3
"""Hijri Regional Mapping CLI.

Command-line interface for converting dates between the Gregorian and Hijri
calendars with regional sighting adjustments.
"""

import json
import sys
from dataclasses import replace
from typing import Optional

import click

from hijri_mapping.calendar_systems import (
    CalendarConverter,
    ConversionOptions,
    ConversionResult,
    HijriDate,
)
from hijri_mapping.utils.date_parser import parse_gregorian_date, parse_hijri_date
from hijri_mapping.utils.exceptions import HijriMappingException
from hijri_mapping.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_CONVERSION_ERROR = 2
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _build_options(
    converter: CalendarConverter,
    region: Optional[str],
    strict: bool,
    no_fallback: bool,
    month_names: bool,
) -> ConversionOptions:
    """Overlay command-line flags on the configured defaults."""
    options = converter.default_options
    if region:
        options = replace(options, region=region)
    if strict:
        options = replace(options, strict=True)
    if no_fallback:
        options = replace(options, allow_fallback=False)
    if month_names:
        options = replace(options, include_month_names=True)
    return options


def _echo_result(result: ConversionResult, as_json: bool) -> None:
    """Print a conversion result."""
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    converted = result.converted_date
    line = str(converted)
    if isinstance(converted, HijriDate) and converted.month_name:
        line = f"{line} ({converted.month_name})"
    click.echo(line)
    region = getattr(result.region, "value", result.region)
    click.echo(f"  Region: {region}")
    click.echo(f"  Calendar: {result.target_calendar.value}")
    click.echo(f"  Confidence: {result.confidence.value}")
    if result.fallback_used:
        click.echo("  Fallback: yes")
    if result.notes:
        click.echo(f"  Notes: {result.notes}")


def _fail(error: HijriMappingException) -> None:
    """Report an engine error and exit."""
    click.echo(f"Error [{error.code}]: {error.message}", err=True)
    sys.exit(EXIT_CONVERSION_ERROR)


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    show_default=True,
    help="Log level for diagnostic output (written to stderr)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """Hijri Regional Mapping Tools."""
    setup_logging(log_level=log_level, stream=sys.stderr)
    ctx.obj = CalendarConverter.from_settings()


@cli.command("to-hijri")
@click.argument("date")
@click.option("--region", "-r", help="Region (global, indonesia, saudi_arabia, malaysia)")
@click.option("--strict", is_flag=True, help="Reject invalid dates instead of guessing")
@click.option("--no-fallback", is_flag=True, help="Fail on unknown regions")
@click.option("--month-names", is_flag=True, help="Include the Hijri month name")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_obj
def to_hijri(
    converter: CalendarConverter,
    date: str,
    region: Optional[str],
    strict: bool,
    no_fallback: bool,
    month_names: bool,
    as_json: bool,
) -> None:
    """Convert a Gregorian DATE (YYYY-MM-DD) to Hijri."""
    try:
        gregorian = parse_gregorian_date(date)
        options = _build_options(converter, region, strict, no_fallback, month_names)
        result = converter.gregorian_to_hijri(gregorian, options)
    except HijriMappingException as e:
        _fail(e)
        return

    _echo_result(result, as_json)


@cli.command("to-gregorian")
@click.argument("date")
@click.option("--region", "-r", help="Region the Hijri date was observed in")
@click.option("--strict", is_flag=True, help="Reject invalid dates instead of guessing")
@click.option("--no-fallback", is_flag=True, help="Fail on unknown regions")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_obj
def to_gregorian(
    converter: CalendarConverter,
    date: str,
    region: Optional[str],
    strict: bool,
    no_fallback: bool,
    as_json: bool,
) -> None:
    """Convert a Hijri DATE (YYYY-MM-DD) to Gregorian."""
    try:
        hijri = parse_hijri_date(date)
        options = _build_options(converter, region, strict, no_fallback, False)
        result = converter.hijri_to_gregorian(hijri, options)
    except HijriMappingException as e:
        _fail(e)
        return

    _echo_result(result, as_json)


@cli.command()
@click.pass_obj
def regions(converter: CalendarConverter) -> None:
    """List regions and their adjustment policies."""
    for region in converter.get_available_regions():
        mapping = converter.get_regional_mapping(region)
        if mapping is None:
            continue
        rukyat = "yes" if mapping.rukyat_based else "no"
        click.echo(
            f"{region.value:<14} {mapping.adjustment_days:+d} day(s)  "
            f"rukyat={rukyat}  {mapping.description}"
        )


@cli.command()
@click.argument("date")
@click.option("--hijri", is_flag=True, help="Treat DATE as a Hijri date")
@click.pass_obj
def validate(converter: CalendarConverter, date: str, hijri: bool) -> None:
    """Validate DATE without converting it."""
    try:
        if hijri:
            validation = converter.validate_hijri_date(parse_hijri_date(date))
        else:
            validation = converter.validate_gregorian_date(parse_gregorian_date(date))
    except HijriMappingException as e:
        _fail(e)
        return

    if validation.is_valid:
        click.echo("Valid")
        return

    click.echo("Invalid:")
    for error in validation.errors:
        click.echo(f"  - {error}")
    sys.exit(1)


@cli.command("map")
@click.argument("date")
@click.option("--json", "as_json", is_flag=True, help="Print the record as JSON")
@click.pass_obj
def map_date(converter: CalendarConverter, date: str, as_json: bool) -> None:
    """Show a Gregorian DATE in every region's Hijri calendar."""
    try:
        record = converter.map_date_all_regions(parse_gregorian_date(date))
    except HijriMappingException as e:
        _fail(e)
        return

    if as_json:
        click.echo(json.dumps(record.to_dict(), indent=2, ensure_ascii=False))
        return

    click.echo(f"Gregorian: {record.gregorian_date}")
    for region, result in record.regional_results.items():
        click.echo(
            f"  {region.value:<14} {result.converted_date} "
            f"[{result.confidence.value}]"
        )


if __name__ == "__main__":
    cli()
