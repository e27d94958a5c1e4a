#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import anniv


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "anniv[diagnostics]"') from e


def leap_table(start_year: int, end_year: int, *, backend: Optional[str] = None) -> List[Tuple[int, Optional[int]]]:
    return [(Y, anniv.leap_month(Y, backend=backend)) for Y in range(start_year, end_year + 1)]


def plot_table(rows: List[Tuple[int, Optional[int]]], out: str, title: str) -> None:
    plt = _need_matplotlib()
    xs = [Y for Y, M in rows if M is not None]
    ys = [M for Y, M in rows if M is not None]

    fig, ax = plt.subplots(figsize=(16, 3.6))
    ax.scatter(xs, ys, s=30, marker="o", c="0.15", linewidths=0.0, zorder=5)
    ax.set_xlim(rows[0][0] - 0.5, rows[-1][0] + 0.5)
    ax.set_ylim(0.5, 12.5)
    ax.set_yticks([1, 3, 6, 9, 12])
    ax.set_xlabel("Lunar year")
    ax.set_ylabel("Leap month")
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(out, dpi=250)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap months of the lunisolar calendar per lunar year.")
    p.add_argument("--start-year", type=int, default=2000)
    p.add_argument("--end-year", type=int, default=2040)
    p.add_argument("--backend", default=None)
    p.add_argument("--all", action="store_true", help="Also list years without a leap month.")
    p.add_argument("--plot", default=None, metavar="OUT", help="Save a scatter plot (needs matplotlib).")
    p.add_argument("--title", default="Leap months of the lunisolar calendar")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    rows = leap_table(args.start_year, args.end_year, backend=args.backend)
    print(f"{'year':>6}  leap")
    for Y, M in rows:
        if M is None and not args.all:
            continue
        print(f"{Y:>6}  {'-' if M is None else M}")

    if args.plot:
        plot_table(rows, args.plot, args.title)
        print(f"Saved: {args.plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
