"""Current time and date in a named time zone, with a small command line."""

from __future__ import annotations

import argparse
import re
import sys
from datetime import datetime, timedelta, timezone as dt_timezone, tzinfo
from typing import Callable, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

RFC1123 = "Mon, 02 Jan 2006 15:04:05 MST"
DATE_ONLY = "2006-01-02"

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _offset(moment: datetime, colon: bool, minutes: bool, zulu: bool) -> str:
    delta = moment.utcoffset() or timedelta(0)
    total = int(delta.total_seconds()) // 60
    if zulu and total == 0:
        return "Z"
    sign = "-" if total < 0 else "+"
    hours, mins = divmod(abs(total), 60)
    text = f"{sign}{hours:02d}"
    if minutes:
        text += f":{mins:02d}" if colon else f"{mins:02d}"
    return text


def _hour12(moment: datetime) -> int:
    return moment.hour % 12 or 12


def _zone_name(moment: datetime) -> str:
    return moment.tzname() or _offset(moment, False, True, False)


_FORMATTERS: dict[str, Callable[[datetime], str]] = {
    "2006": lambda d: f"{d.year:04d}",
    "06": lambda d: f"{d.year % 100:02d}",
    "January": lambda d: _MONTHS[d.month - 1],
    "Jan": lambda d: _MONTHS[d.month - 1][:3],
    "01": lambda d: f"{d.month:02d}",
    "1": lambda d: str(d.month),
    "Monday": lambda d: _DAYS[d.weekday()],
    "Mon": lambda d: _DAYS[d.weekday()][:3],
    "002": lambda d: f"{d.timetuple().tm_yday:03d}",
    "02": lambda d: f"{d.day:02d}",
    "_2": lambda d: f"{d.day:>2}",
    "2": lambda d: str(d.day),
    "15": lambda d: f"{d.hour:02d}",
    "03": lambda d: f"{_hour12(d):02d}",
    "3": lambda d: str(_hour12(d)),
    "04": lambda d: f"{d.minute:02d}",
    "4": lambda d: str(d.minute),
    "05": lambda d: f"{d.second:02d}",
    "5": lambda d: str(d.second),
    "PM": lambda d: "PM" if d.hour >= 12 else "AM",
    "pm": lambda d: "pm" if d.hour >= 12 else "am",
    "MST": _zone_name,
    "-07:00": lambda d: _offset(d, True, True, False),
    "-0700": lambda d: _offset(d, False, True, False),
    "-07": lambda d: _offset(d, False, False, False),
    "Z07:00": lambda d: _offset(d, True, True, True),
    "Z0700": lambda d: _offset(d, False, True, True),
    "Z07": lambda d: _offset(d, False, False, True),
}
_TOKENS = sorted(_FORMATTERS, key=len, reverse=True)
_FRACTION = re.compile(r"\.(0+|9+)(?!\d)")


def _fraction(moment: datetime, spec: str) -> str:
    digits = f"{moment.microsecond:06d}000"[: len(spec)].ljust(len(spec), "0")
    if spec[0] == "0":
        return "." + digits
    digits = digits.rstrip("0")
    return "." + digits if digits else ""


def _format_layout(moment: datetime, layout: str) -> str:
    """Format ``moment`` after a reference-time layout such as ``2006-01-02``."""
    out: list[str] = []
    i = 0
    while i < len(layout):
        fraction = _FRACTION.match(layout, i)
        if fraction:
            out.append(_fraction(moment, fraction.group(1)))
            i = fraction.end()
            continue
        for token in _TOKENS:
            if layout.startswith(token, i):
                out.append(_FORMATTERS[token](moment))
                i += len(token)
                break
        else:
            out.append(layout[i])
            i += 1
    return "".join(out)


def _load_zone(name: str) -> tzinfo:
    if name in ("", "UTC"):
        return dt_timezone.utc
    if name == "Local":
        local = datetime.now().astimezone().tzinfo
        return local if local is not None else dt_timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"unknown time zone {name}") from None


def time_in_timezone(timezone: str) -> str:
    """Current time in ``timezone`` in RFC 1123 form."""
    return _format_layout(datetime.now(_load_zone(timezone)), RFC1123)


def date_in_timezone(timezone: str, fmt: str = "") -> str:
    """Current date in ``timezone``, as ``YYYY-MM-DD`` or after the layout ``fmt``."""
    moment = datetime.now(_load_zone(timezone))
    return _format_layout(moment, fmt or DATE_ONLY)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tz", description="Tools for looking up the time in other time zones."
    )
    parser.add_argument("-t", "--toggle", action="store_true", help="Help message for toggle")
    commands = parser.add_subparsers(dest="command")
    zone = commands.add_parser(
        "timezone",
        help="Get the current time in a given timezone",
        description="Print the current date in the given time zone.",
    )
    zone.add_argument("timezone")
    zone.add_argument(
        "--date",
        default="",
        help="returns the date in a time zone in a specified format",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1
    if args.command is None:
        parser.print_help()
        return 0
    try:
        date = date_in_timezone(args.timezone, args.date)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Current date in {args.timezone}: {date}\n: ", end="")
    return 0