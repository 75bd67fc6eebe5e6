from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _setup_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format="%(levelname)s %(name)s: %(message)s")


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


def cmd_day(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich day", description="Gregorian -> lunar day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--engine", default="vietnam")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    info = amlich.day_info(d, engine=args.engine, attributes=tuple(args.attr), annotate=True, debug=args.debug)
    t = info.lunar
    a = info.annotation

    print(f"Dương lịch : {d.isoformat()}")
    print(f"Âm lịch    : {t}")
    print(f"Ngày       : {a.day_can_chi}   Tháng: {a.month_can_chi}   Năm: {a.year_can_chi}")
    print(f"Nạp âm     : {a.five_element}")
    print(f"Sao        : {a.lunar_mansion}   Trực: {a.day_activity}")
    print(f"Tiết khí   : {a.solar_term}")
    print(f"Giờ tốt    : {', '.join(a.auspicious_hours)}")
    for h in amlich.holidays_for(d, engine=args.engine):
        print(f"Ngày lễ    : {h.title}")
    if info.attributes:
        for k, v in info.attributes.items():
            print(f"{k}: {v}")
    if info.debug:
        print(info.debug)
    return 0


def cmd_lunar(argv: list[str]) -> int:
    import amlich

    p = argparse.ArgumentParser(prog="amlich lunar", description="Lunar -> Gregorian date")
    p.add_argument("day", type=int)
    p.add_argument("month", type=int)
    p.add_argument("year", type=int)
    p.add_argument("--leap", action="store_true", help="Only match the leap month")
    p.add_argument("--regular", action="store_true", help="Only match the regular month")
    p.add_argument("--engine", default="vietnam")
    args = p.parse_args(argv)

    if args.leap and args.regular:
        raise SystemExit("--leap and --regular are mutually exclusive")
    leap = True if args.leap else (False if args.regular else None)

    d = amlich.find_civil_date(args.day, args.month, args.year, leap=leap, engine=args.engine)
    if d is None:
        print(f"No civil date for lunar {args.day}/{args.month}/{args.year}")
        return 1
    print(d.isoformat())
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Backward compatibility: `amlich YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        _setup_logging("WARNING")
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="amlich", description="Vietnamese lunisolar calendar toolkit CLI.")
    p.add_argument("--log-level", choices=_LOG_LEVELS, default="WARNING")
    sub = p.add_subparsers(dest="cmd", required=True)

    # day
    p_day = sub.add_parser("day", help="Gregorian -> lunar day label with Can-Chi annotation")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--engine", default="vietnam")
    p_day.add_argument("--debug", action="store_true")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")

    sub.add_parser("lunar", help="Lunar -> Gregorian date (DAY MONTH YEAR [--leap|--regular])")

    # diagnostics (non-ephem)
    sub.add_parser("month", help="Print lunar/Gregorian month calendars (diagnostics)")
    sub.add_parser("new-years", help="Print New Year table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools (no ephemeris required)")
    p_diag.add_argument(
        "tool",
        choices=["leap-months", "round-trip"],
        help="Which diagnostic to run",
    )

    # ephem diagnostics
    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument(
        "tool",
        choices=["validate-new-moons"],
        help="Which ephemeris diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.log_level)

    if args.cmd == "day":
        day_argv = [args.date]
        if args.engine != "vietnam":
            day_argv += ["--engine", args.engine]
        if args.debug:
            day_argv += ["--debug"]
        for a in args.attr:
            day_argv += ["--attr", a]
        day_argv += rest
        return cmd_day(day_argv)

    if args.cmd == "lunar":
        return cmd_lunar(rest)

    if args.cmd == "month":
        return _run_module_main("amlich.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("amlich.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "leap-months": "amlich.diagnostics.leap_months",
            "round-trip": "amlich.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate-new-moons": "amlich.diagnostics.ephem.validate_new_moons",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
