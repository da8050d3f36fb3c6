"""CLI entry point: astro-positions positions|ephemeris|timestamp subcommands."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Callable
from typing import NoReturn, TextIO, cast

from astro_positions.bodies import parse_body
from astro_positions.constants import DEFAULT_INTERVAL
from astro_positions.errors import AstroPositionsError
from astro_positions.report import generate_ephemeris, write_positions
from astro_positions.time_utils import parse_utc_time
from astro_positions.utc_time import current_timestamp, resolve_utc_timestamp

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or ASTRO_POSITIONS_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('ASTRO_POSITIONS_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _run_with_output(output_path: str | None, write: Callable[[TextIO], object]) -> int:
    """Call ``write`` with stdout or the output file; report errors as exit code 1."""
    try:
        if output_path is not None:
            with open(output_path, 'w') as f:
                write(f)
        else:
            write(sys.stdout)
    except (AstroPositionsError, ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


def _positions_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print positions of the requested bodies at one time (positions subcommand).

    Parameters:
        parser: Argument parser (unused).
        args: Parsed args; time, body, output.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        instant = parse_utc_time(args.time) if args.time else current_timestamp()
    except (AstroPositionsError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return _run_with_output(args.output, lambda out: write_positions(instant, out, args.body))


def _ephemeris_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print a table of positions of one body over a time range (ephemeris subcommand)."""
    try:
        start = parse_utc_time(args.start)
        stop = parse_utc_time(args.stop)
    except (AstroPositionsError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return _run_with_output(
        args.output,
        lambda out: generate_ephemeris(
            args.body, start, stop, out, interval=args.interval, time_unit=args.time_unit
        ),
    )


def _timestamp_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Resolve a UTC date/time to a Unix timestamp (timestamp subcommand)."""
    try:
        instant = resolve_utc_timestamp(
            args.year, args.month, args.day, args.hour, args.minute, args.second
        )
    except (AstroPositionsError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    print(instant.timestamp)
    print(instant.time_string_inet())
    print(f'JD {instant.julian_date():.5f}')
    return 0


def main() -> int:
    """Entry point for astro-positions CLI (positions | ephemeris | timestamp).

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='astro-positions',
        description='Approximate positions of the Sun, Moon and planets.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    pos_parser = subparsers.add_parser('positions', help='Position table at one time')
    pos_parser.add_argument(
        '--time', type=str, default='', help='UTC date/time (default: now)'
    )
    pos_parser.add_argument(
        '--body',
        type=parse_body,
        nargs='+',
        default=None,
        help='Body names (default: Sun, Moon and the planets)',
    )
    pos_parser.add_argument('-o', '--output', type=str, default=None, help='Output file')
    pos_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    pos_parser.set_defaults(func=_positions_cmd)

    ephem_parser = subparsers.add_parser('ephemeris', help='Position table over a time range')
    ephem_parser.add_argument('--body', type=parse_body, required=True, help='Body name')
    ephem_parser.add_argument('--start', type=str, required=True, help='Start time (UTC)')
    ephem_parser.add_argument('--stop', type=str, required=True, help='Stop time (UTC)')
    ephem_parser.add_argument(
        '--interval', type=float, default=DEFAULT_INTERVAL, help='Time step'
    )
    ephem_parser.add_argument(
        '--time-unit',
        type=str,
        default='hour',
        choices=['sec', 'min', 'hour', 'day'],
    )
    ephem_parser.add_argument('-o', '--output', type=str, default=None, help='Output file')
    ephem_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    ephem_parser.set_defaults(func=_ephemeris_cmd)

    ts_parser = subparsers.add_parser('timestamp', help='Unix timestamp of a UTC date/time')
    ts_parser.add_argument('year', type=int, help='Year (negative for BC, no year 0)')
    ts_parser.add_argument('month', type=int)
    ts_parser.add_argument('day', type=int)
    ts_parser.add_argument('hour', type=int, nargs='?', default=0)
    ts_parser.add_argument('minute', type=int, nargs='?', default=0)
    ts_parser.add_argument('second', type=int, nargs='?', default=0)
    ts_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    ts_parser.set_defaults(func=_timestamp_cmd)

    args = parser.parse_args()
    _configure_logging(verbose=args.verbose)
    return cast(int, args.func(parser, args))


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
