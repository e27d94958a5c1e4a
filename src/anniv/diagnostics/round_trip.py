from __future__ import annotations

import argparse
import random
from typing import List, Optional

from anniv import converter
from anniv.core.time import from_jdn, to_jdn
from anniv.core.types import CalendarDate
from anniv.dates import parse_date


def random_date(start: CalendarDate, end: CalendarDate) -> CalendarDate:
    return from_jdn(random.randint(to_jdn(start), to_jdn(end)))


def roundtrip_test(
    N: int,
    start: CalendarDate,
    end: CalendarDate,
    seed: int,
    *,
    backend: Optional[str] = None,
    max_failures: int,
) -> int:
    """solar -> lunar -> solar on N random dates; returns the number of failures."""
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        lunar = converter.solar_to_lunar(d0, backend=backend)
        back = converter.lunar_to_solar(lunar.as_date(), backend=backend)
        valid = converter.is_valid_lunar_date(lunar.as_date(), backend=backend)
        if back != d0 or not valid:
            failures += 1
            print("\nFAIL")
            print("d0:", d0.isoformat())
            print("lunar:", lunar)
            print("back:", back.isoformat())
            print("valid:", valid)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: solar -> lunar -> solar.")
    p.add_argument("--N", type=int, default=2000, help="Number of trials.")
    p.add_argument("--start", type=str, default="1901-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2099-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--backend", default=None)
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)
    if to_jdn(end) < to_jdn(start):
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(args.N, start, end, args.seed, backend=args.backend, max_failures=args.max_failures)
    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
