from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _fail(err: Exception) -> int:
    print(f"anniv: error: {err}", file=sys.stderr)
    return 2


def _days_parser(prog: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description="Day count for an anniversary")
    p.add_argument("date", help="YYYY-MM-DD (solar, or lunar with --lunar)")
    p.add_argument("--lunar", action="store_true", help="date is a lunisolar date")
    p.add_argument("--leap", action="store_true", help="lunisolar date is in a leap month")
    p.add_argument("--countdown", action="store_true", help="count down to the next occurrence")
    p.add_argument("--today", default=None, help="reference date YYYY-MM-DD (default: local today)")
    p.add_argument("--lang", choices=["en", "zh"], default=None)
    p.add_argument("--backend", default=None)
    p.add_argument("--json", action="store_true", help="print the record enrichment as JSON")
    return p


def cmd_days(argv: list[str]) -> int:
    import json
    import anniv

    args = _days_parser("anniv days").parse_args(argv)
    calendar_type = "lunar" if args.lunar else "solar"
    direction = "countdown" if args.countdown else "countup"
    try:
        if args.json:
            out = anniv.describe_event(
                args.date, calendar_type, direction, args.today,
                is_leap_month=args.leap, lang=args.lang, backend=args.backend,
            )
            print(json.dumps(out, ensure_ascii=False, indent=2))
            return 0
        res = anniv.calculate_days(
            args.date, calendar_type, direction, args.today,
            is_leap_month=args.leap, lang=args.lang, backend=args.backend,
        )
    except anniv.AnnivError as e:
        return _fail(e)

    print(res.display_label)
    print(f"  phase      = {res.phase}")
    print(f"  days       = {res.magnitude}")
    print(f"  solar date = {res.resolved_solar_date.isoformat()}")
    return 0


def cmd_lunar(argv: list[str]) -> int:
    import anniv

    p = argparse.ArgumentParser(prog="anniv lunar", description="Solar -> lunisolar date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--backend", default=None)
    args = p.parse_args(argv)

    try:
        info = anniv.solar_to_lunar(args.date, backend=args.backend)
    except anniv.AnnivError as e:
        return _fail(e)

    leap = " (leap)" if info.is_leap_month else ""
    print(f"{info.year:04d}-{info.month:02d}-{info.day:02d}{leap}")
    print(f"  {info.year_ganzhi}年 {info.month_chinese}月{info.day_chinese}")
    return 0


def cmd_solar(argv: list[str]) -> int:
    import anniv

    p = argparse.ArgumentParser(prog="anniv solar", description="Lunisolar -> solar date")
    p.add_argument("date", help="YYYY-MM-DD (lunar)")
    p.add_argument("--leap", action="store_true", help="date is in a leap month")
    p.add_argument("--backend", default=None)
    args = p.parse_args(argv)

    try:
        print(anniv.lunar_to_solar(args.date, is_leap_month=args.leap, backend=args.backend))
    except anniv.AnnivError as e:
        return _fail(e)
    return 0


def cmd_check(argv: list[str]) -> int:
    import anniv

    p = argparse.ArgumentParser(prog="anniv check", description="Validate a solar or lunar date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--lunar", action="store_true")
    args = p.parse_args(argv)

    errors = anniv.date_errors(args.date, "lunar" if args.lunar else "solar")
    if errors:
        for e in errors:
            print(f"{e['field']}: {e['message']}")
        return 1
    print("ok")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if "--verbose" in argv:
        argv = [a for a in argv if a != "--verbose"]
        logging.basicConfig(level=logging.DEBUG)

    # Shorthand: `anniv YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_days(argv)

    p = argparse.ArgumentParser(
        prog="anniv",
        description="Anniversary day counter (solar and lunisolar).",
        epilog="--verbose anywhere on the command line turns on debug logging.",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("days", help="Day count for an anniversary", add_help=False)
    sub.add_parser("lunar", help="Solar -> lunisolar date", add_help=False)
    sub.add_parser("solar", help="Lunisolar -> solar date", add_help=False)
    sub.add_parser("check", help="Validate a date", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-months"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "days":
        return cmd_days(rest)

    if args.cmd == "lunar":
        return cmd_lunar(rest)

    if args.cmd == "solar":
        return cmd_solar(rest)

    if args.cmd == "check":
        return cmd_check(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "anniv.diagnostics.round_trip",
            "leap-months": "anniv.diagnostics.leap_months",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
