from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from .core.errors import LichTaError

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    y, m, d = map(int, s.split("-"))
    return y, m, d


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


def _params(utc_offset: float | None):
    from .engines.specs import VIETNAM

    return VIETNAM if utc_offset is None else VIETNAM.with_fixed_offset(utc_offset)


def cmd_day(argv: list[str]) -> int:
    import lichta
    from lichta.core.time import from_jdn, gregorian_to_jdn

    p = argparse.ArgumentParser(prog="lichta day", description="Gregorian -> Lich Ta day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--utc-offset", type=float, default=None, help="Reckon on a fixed meridian instead of the historical one")
    p.add_argument("--debug", action="store_true")
    args = p.parse_args(argv)

    y, m, d = _parse_ymd(args.date)
    params = _params(args.utc_offset)
    if args.debug:
        d0 = from_jdn(gregorian_to_jdn(y, m, d))
        for k, v in lichta.explain(d0, params=params).items():
            print(f"{k:24s} {v}")
        return 0

    t = lichta.convert_gregorian_to_lichta(y, m, d, params=params)
    print(t)
    return 0


def cmd_year(argv: list[str]) -> int:
    import lichta
    from lichta.core.time import from_jdn

    p = argparse.ArgumentParser(prog="lichta year", description="Print the lunar months of a Lich Ta year.")
    p.add_argument("year", type=int)
    p.add_argument("--utc-offset", type=float, default=None)
    args = p.parse_args(argv)

    months = lichta.months_in_year(args.year, params=_params(args.utc_offset))
    print(f"Lunar year {args.year}: {len(months)} months")
    for mo in months:
        leap_tag = "n" if mo.is_leap else " "
        first = from_jdn(mo.start_jdn)
        last = from_jdn(mo.end_jdn - 1)
        print(f"  {mo.ordinal:2d}{leap_tag}  {first.isoformat()} .. {last.isoformat()}  ({mo.length} days)")
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import lichta

    p = argparse.ArgumentParser(prog="lichta to-gregorian", description="Lich Ta -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--leap", action="store_true", help="The month is the intercalary instance")
    p.add_argument("--utc-offset", type=float, default=None)
    args = p.parse_args(argv)

    t = lichta.LichTaDate(year=args.year, month=args.month, is_leap=args.leap, day=args.day)
    print(lichta.to_gregorian(t, params=_params(args.utc_offset)).isoformat())
    return 0


def cmd_astro(argv: list[str]) -> int:
    from lichta.core.time import civil_day, from_jdn
    from lichta.reference import solar
    from lichta.reference.astro_args import lunation_index
    from lichta.reference.lunar import new_moon

    p = argparse.ArgumentParser(prog="lichta astro", description="Print solar longitude and the nearest new moon at a JD (UT).")
    p.add_argument("--jd", type=float, default=2451545.0, help="Julian Date, UT (default: J2000.0 = 2451545.0)")
    p.add_argument("--utc-offset", type=float, default=7.0, help="Meridian for civil dates (default: 7)")
    args = p.parse_args(argv)

    jd = args.jd
    coords = solar.solar_longitude(jd)
    term = solar.major_term_index(jd)
    last_term = solar.major_term_jdn(term, jd)
    k = lunation_index(jd)
    nm = new_moon(k)

    print(f"JD = {jd:.6f}")
    print()
    print("Solar Position (degrees):")
    print(f"  True Longitude     (L_true) = {coords.L_true_deg:.6f}")
    print(f"  Apparent Longitude (L_app)  = {coords.L_app_deg:.6f}")
    print(f"  Major term index            = {term}")
    print(f"  Last crossing               = {last_term:.6f}  ({from_jdn(civil_day(last_term, args.utc_offset))})")
    print()
    print("Nearest new moon:")
    print(f"  k = {k}  ->  JD = {nm:.6f}  ({from_jdn(civil_day(nm, args.utc_offset))})")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `lichta YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return _guarded(cmd_day, argv)

    p = argparse.ArgumentParser(prog="lichta", description="Vietnamese lunisolar calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Lich Ta day label")
    sub.add_parser("year", help="Print the months of a lunar year")
    sub.add_parser("to-gregorian", help="Lich Ta -> Gregorian date")
    sub.add_parser("astro", help="Print solar longitude and nearest new moon at a JD")

    # diagnostics
    sub.add_parser("pretty-month", help="Print lunar/Gregorian month calendars (diagnostics)")
    sub.add_parser("new-years", help="Print Tet date table (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["leap-months", "round-trip"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "day": cmd_day,
        "year": cmd_year,
        "to-gregorian": cmd_to_gregorian,
        "astro": cmd_astro,
    }
    if args.cmd in commands:
        return _guarded(commands[args.cmd], rest)

    if args.cmd == "pretty-month":
        return _guarded(lambda a: _run_module_main("lichta.diagnostics.pretty_month", a), rest)

    if args.cmd == "new-years":
        return _guarded(lambda a: _run_module_main("lichta.diagnostics.new_years_table", a), rest)

    if args.cmd == "diag":
        tool_map = {
            "leap-months": "lichta.diagnostics.leap_months",
            "round-trip": "lichta.diagnostics.round_trip",
        }
        return _guarded(lambda a: _run_module_main(tool_map[args.tool], a), rest)

    raise RuntimeError("unreachable")


def _guarded(fn, argv: list[str]) -> int:
    try:
        return fn(argv)
    except LichTaError as e:
        logger.debug("command failed", exc_info=True)
        raise SystemExit(f"lichta: {e}") from e


if __name__ == "__main__":
    raise SystemExit(main())
