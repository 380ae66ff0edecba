from __future__ import annotations

from datetime import date
import argparse
from typing import List, Tuple

import lichta
from lichta.engines.specs import VIETNAM, CalendarParams


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_meridians(arg: str) -> List[Tuple[str, CalendarParams]]:
    """
    Parse extra comparison meridians from CLI.
    Example:
      --compare "8,9"  ->  columns UTC+8 and UTC+9
    """
    out: List[Tuple[str, CalendarParams]] = []
    for it in (x.strip() for x in arg.split(",")):
        if not it:
            continue
        hours = float(it)
        out.append((f"UTC{hours:+g}", VIETNAM.with_fixed_offset(hours)))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Tet (lunar New Year) date table, optionally against other meridians."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--compare",
        type=str,
        default="",
        help='Comma list of fixed UTC offsets to add as columns, e.g. "8".',
    )
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    columns: List[Tuple[str, CalendarParams]] = [("Vietnam", VIETNAM)] + parse_meridians(args.compare)
    cache = lichta.LunarYearCache()

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [name for name, _ in columns] + ["Leap"]
    colw = [5] + [max(10, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    differ: list[int] = []
    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0])]
        days = []
        for (_, params), w in zip(columns, colw[1:]):
            d = lichta.new_year_day(Y, params=params, cache=cache)
            days.append(d)
            row.append(fmt(d).ljust(w))
        leap = lichta.leap_month(Y, cache=cache)
        row.append(str(leap) if leap is not None else "-")
        if len(set(days)) > 1:
            differ.append(Y)
        print("  ".join(row))

    if len(columns) > 1:
        print("\nYears where the columns disagree:")
        print(", ".join(map(str, differ)) if differ else "(none)")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
