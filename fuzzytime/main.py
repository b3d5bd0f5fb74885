from __future__ import annotations

import argparse
import sys
import time
from typing import Optional

if __package__ in (None, ""):
    # Allow both:
    # - python -m fuzzytime.main ...
    # - python fuzzytime/main.py ...
    import os

    sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from fuzzytime.phrase import format_fuzzy_time
from fuzzytime.render import render_text, to_data, write_json
from fuzzytime.time import ClockTime, now, parse_hhmm, resolve_zone, seconds_until_next_minute


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fuzzytime",
        description="Tell the time in words: \"quarter past three\", \"ten to noon\".",
    )

    p.add_argument("--selftest", action="store_true", help="run built-in sanity checks")

    time_group = p.add_mutually_exclusive_group(required=False)
    time_group.add_argument("--time", help="Wall-clock time in HH:MM")
    time_group.add_argument("--now", action="store_true", help="use the current time (default)")

    p.add_argument("--tz", help="IANA time zone for --now, e.g. Europe/London")
    p.add_argument(
        "--watch",
        action="store_true",
        help="redraw at every minute boundary until interrupted",
    )
    p.add_argument("--count", type=int, help="(watch) stop after this many redraws")

    p.add_argument("--json", dest="json_path", help="write result to JSON file")

    return p


def run_selftest() -> int:
    assert format_fuzzy_time(0, 0) == "midnight"
    assert format_fuzzy_time(12, 0) == "noon"
    assert format_fuzzy_time(3, 0) == "three o'clock"
    assert format_fuzzy_time(3, 15) == "quarter past three"
    assert format_fuzzy_time(3, 45) == "quarter to four"
    assert format_fuzzy_time(0, 5) == "five past midnight"
    assert format_fuzzy_time(23, 58) == "eleven o'clock"

    data = to_data(ClockTime(hour=11, minute=50))
    assert data.get("time") == "11:50"
    assert data.get("phrase") == "ten to noon"

    sys.stdout.buffer.write(b"SELFTEST OK\n")
    return 0


def _write(text: str) -> None:
    sys.stdout.buffer.write(text.encode("utf-8", errors="replace"))
    sys.stdout.buffer.flush()


def _draw(clock: ClockTime, json_path: Optional[str]) -> None:
    data = to_data(clock)
    _write(render_text(data))
    if json_path:
        write_json(data, json_path)


def watch(tz: Optional[str], json_path: Optional[str], count: Optional[int] = None) -> int:
    drawn = 0
    try:
        while True:
            _draw(now(tz), json_path)
            drawn += 1
            if count is not None and drawn >= count:
                break
            time.sleep(seconds_until_next_minute(time.time()))
    except KeyboardInterrupt:
        pass
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.selftest:
        return run_selftest()

    if args.tz and args.time:
        parser.error("--tz only applies to the current time")
    if args.watch and args.time:
        parser.error("--watch reads the current time; drop --time")
    if args.count is not None and not args.watch:
        parser.error("--count requires --watch")
    if args.count is not None and args.count < 1:
        parser.error("--count must be at least 1")

    try:
        resolve_zone(args.tz)
        clock = parse_hhmm(args.time) if args.time else None
    except ValueError as exc:
        parser.error(str(exc))

    if args.watch:
        return watch(args.tz, args.json_path, args.count)

    if clock is None:
        clock = now(args.tz)
    _draw(clock, args.json_path)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
