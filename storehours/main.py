#main.py
"""

CLI entrypoint:
- Reads a schedule (file path arg or stdin)
- Evaluates it at --at (default: now) in --tz (default: $STOREHOURS_TZ or local)
- Prints "aberta"/"fechada" with the hours governing that day
- Emits concise log messages and exit codes

Exit codes:
 0 = open
 1 = closed
 2 = input error (e.g., file missing, no stdin, bad JSON, bad --at/--tz)
"""

import argparse
import logging
import os
import sys

from dateutil import parser as dateparser
from dateutil import tz as dateutil_tz

from storehours.core.evaluator import ScheduleEvaluator, current_time
from storehours.infra.constants import DAY_LABELS, STATUS_CLOSED, STATUS_OPEN
from storehours.infra.logger import LoggerFactory
from storehours.pdio.reader import ScheduleFormatError, ScheduleReader
from storehours.utils.daynames import DayResolver

log = logging.getLogger(__name__)


def _build_arg_parser():
    ap = argparse.ArgumentParser(
        prog="storehours",
        description="Tell whether a store is open from its weekly opening hours.",
    )
    ap.add_argument("path", nargs="?", help="schedule JSON file (default: stdin)")
    ap.add_argument("--at", dest="at", help='instant to evaluate, e.g. "2026-10-18 23:30"')
    ap.add_argument("--tz", dest="tz", default=os.getenv("STOREHOURS_TZ"),
                    help="IANA zone for the wall clock (default: $STOREHOURS_TZ or local)")
    return ap


def _read_schedule(path, reader):
    """File path or stdin; error if neither."""
    if path:
        return reader.read(path)
    if sys.stdin.isatty():
        raise RuntimeError("No input provided. Pass a file path or pipe JSON via stdin.")
    return reader.parse(sys.stdin.read())


def _resolve_zone(name):
    if not name:
        return None
    zone = dateutil_tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown time zone: {name}")
    return zone


def _resolve_instant(at, zone):
    """Parse --at with dateutil; naive values are wall time in zone."""
    if not at:
        return current_time(zone)
    try:
        moment = dateparser.parse(at)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid --at value {at!r}: {e}") from e
    if zone is None:
        return moment
    if moment.tzinfo is None:
        return moment.replace(tzinfo=zone)
    return moment.astimezone(zone)


def describe(schedule, now, evaluator):
    """One status line, e.g. "aberta (segunda-feira: 08:00-12:00 / 14:00-18:00)"."""
    is_open = evaluator.is_open(schedule, now)
    status = STATUS_OPEN if is_open else STATUS_CLOSED
    if not schedule:
        return is_open, f"{status} (sem horário configurado)"

    day_label = DAY_LABELS[DayResolver.weekday_index(now)]
    entry = evaluator.entry_for(schedule, now)
    if entry is None:
        return is_open, f"{status} (sem horário para {day_label})"
    if not entry.is_open:
        return is_open, f"{status} ({day_label}: fechado)"
    return is_open, f"{status} ({day_label}: {' / '.join(evaluator.periods(entry))})"


def main(argv):
    args = _build_arg_parser().parse_args(argv[1:])

    try:
        schedule = _read_schedule(args.path, ScheduleReader())
        zone = _resolve_zone(args.tz)
        now = _resolve_instant(args.at, zone)
    except (OSError, RuntimeError, ScheduleFormatError, ValueError) as e:
        log.error(str(e))
        return 2

    is_open, line = describe(schedule, now, ScheduleEvaluator())
    print(line)
    log.debug("Evaluated %d entr(ies) at %s", len(schedule), now.isoformat())
    return 0 if is_open else 1


def run():
    LoggerFactory.configure()
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
