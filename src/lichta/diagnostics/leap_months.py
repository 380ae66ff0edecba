#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import lichta
from lichta.engines.specs import VIETNAM, CalendarParams


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "lichta[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "lichta[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    params: CalendarParams
    marker: str
    size: float
    hollow: bool
    color: str = "0.15"
    lw: float = 1.2
    alpha: float = 0.95


DEFAULT_STYLES: Dict[str, Style] = {
    "vietnam": Style("Vietnam (UTC+8 / UTC+7)", VIETNAM, marker="o", size=22, hollow=False),
    "utc7": Style("UTC+7", VIETNAM.with_fixed_offset(7.0), marker="s", size=80, hollow=True),
    "utc8": Style("UTC+8", VIETNAM.with_fixed_offset(8.0), marker="o", size=95, hollow=True),
}


def parse_meridians(s: str) -> List[str]:
    out = [x.strip() for x in s.split(",") if x.strip()]
    if not (1 <= len(out) <= 3):
        raise SystemExit("--meridians must contain 1 to 3 comma-separated names")
    return out


def build_points(np, params: CalendarParams, start_year: int, end_year: int,
                 cache: lichta.LunarYearCache) -> Tuple["np.ndarray", "np.ndarray"]:
    xs, ys = [], []
    for Y in range(start_year, end_year + 1):
        M = lichta.leap_month(Y, params=params, cache=cache)
        if M is not None:
            xs.append(Y)
            ys.append(M)
    return np.array(xs, dtype=int), np.array(ys, dtype=int)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Leap-month barcode diagram across meridians."
    )
    p.add_argument("--start-year", type=int, default=1960)
    p.add_argument("--end-year", type=int, default=2030)
    p.add_argument("--out", default="leapmonth_barcode.png")
    p.add_argument("--title", default="Leap month pattern")
    p.add_argument(
        "--meridians",
        default="vietnam,utc8",
        help=f"Comma list of 1-3 of {sorted(DEFAULT_STYLES)} (default: vietnam,utc8).",
    )
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    styles: List[Style] = []
    for name in parse_meridians(args.meridians):
        if name not in DEFAULT_STYLES:
            raise SystemExit(f"Unknown meridian '{name}'. Known: {sorted(DEFAULT_STYLES.keys())}")
        styles.append(DEFAULT_STYLES[name])

    fig, ax = plt.subplots(figsize=(16, 3.6))

    # square cell grid
    x_edges = np.arange(start_year - 0.5, end_year + 1.5, 1.0)
    y_edges = np.arange(0.5, 13.5, 1.0)
    Z = np.zeros((12, end_year - start_year + 1), dtype=float)
    ax.pcolormesh(
        x_edges, y_edges, Z,
        shading="flat", cmap="Greys", vmin=0, vmax=1,
        edgecolors="0.88", linewidth=0.6, antialiased=True, zorder=0,
    )
    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, 12.5)
    ax.tick_params(axis="both", which="both", length=0)
    ax.set_xlabel("Lunar year")
    ax.set_ylabel("Leap month (month number)")
    ax.set_yticks([1, 3, 6, 9, 12])

    cache = lichta.LunarYearCache()
    for st in styles:
        x, m = build_points(np, st.params, start_year, end_year, cache)
        if st.hollow:
            ax.scatter(x, m, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=st.lw, alpha=st.alpha, label=st.label, zorder=5)
        else:
            ax.scatter(x, m, s=st.size, marker=st.marker, c=st.color,
                       linewidths=0.0, alpha=st.alpha, label=st.label, zorder=5)

    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
