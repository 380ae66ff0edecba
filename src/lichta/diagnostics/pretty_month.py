from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import lichta
from lichta.core.time import from_jdn


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def to_weeks(first: date, cells: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(first.weekday())]  # Monday=0
    for top, bot in cells:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def lunar_month_calendar(Y: int, M: int, is_leap: bool, cache: lichta.LunarYearCache) -> None:
    mo = lichta.month_bounds(Y, M, is_leap=is_leap, cache=cache)
    d0 = from_jdn(mo.start_jdn)
    d1 = from_jdn(mo.end_jdn - 1)

    cells = []
    d = d0
    while d <= d1:
        t = lichta.from_date(d, cache=cache)
        cells.append((f"{t.day:2d}", f"{d.month:02d}-{d.day:02d}"))
        d += timedelta(days=1)

    leap_tag = "n" if is_leap else ""
    print_grid(f"Lunar month  Y={Y}  M={M}{leap_tag}   ({d0} .. {d1})", to_weeks(d0, cells))


def gregorian_month_calendar(gy: int, gm: int, cache: lichta.LunarYearCache) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    cells = []
    d = first
    while d <= last:
        t = lichta.from_date(d, cache=cache)
        leap_tag = "n" if t.is_leap else ""
        cells.append((f"{d.day:2d}", f"{t.month:02d}{leap_tag}-{t.day:02d}"))
        d += timedelta(days=1)

    print_grid(f"Gregorian month  {gy}-{gm:02d}", to_weeks(first, cells))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"),
                   help="Lunar month to print: Y M (e.g. 2026 1)")
    p.add_argument("--leap", action="store_true",
                   help="If set, lunar month is the leap instance.")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2026 2)")
    args = p.parse_args(argv)

    cache = lichta.LunarYearCache()

    if not args.lunar and not args.greg:
        # sensible default demo
        lunar_month_calendar(2026, 1, False, cache)
        gregorian_month_calendar(2026, 2, cache)
        return 0

    if args.lunar:
        Y, M = args.lunar
        lunar_month_calendar(Y, M, args.leap, cache)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy, gm, cache)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
