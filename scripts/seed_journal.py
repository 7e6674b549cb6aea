#!/usr/bin/env python3
"""
Seed a running workout journal through its HTTP endpoints.

Inserts a 5x5-style block of squat / bench / row sessions, adding 5 lbs per
session, using the same /insert route the browser uses.

Usage examples:
  - Against a local server:
      python scripts/seed_journal.py --base-url http://localhost:3000
  - Start from an empty table first:
      python scripts/seed_journal.py --base-url http://localhost:3000 --reset
"""

from __future__ import annotations

import argparse
import datetime as dt
import sys
from typing import List, Tuple

try:
    import requests  # type: ignore
except Exception as exc:  # pragma: no cover
    print("This script requires the 'requests' package.\nInstall with: pip install requests", file=sys.stderr)
    raise


# (name, starting weight in lbs)
SESSION_A: List[Tuple[str, int]] = [("Squat", 135), ("Bench Press", 95), ("Barbell Row", 95)]
SESSION_B: List[Tuple[str, int]] = [("Squat", 135), ("Overhead Press", 65), ("Deadlift", 135)]
INCREMENT_LBS = 5


def get(base_url: str, path: str, params: dict | None = None) -> None:
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    r = requests.get(url, params=params, timeout=15)
    if r.status_code >= 400:
        raise RuntimeError(f"{path} -> HTTP {r.status_code}: {r.text}")


def session_days(start: dt.date, weeks: int) -> List[dt.date]:
    """Mon/Wed/Fri for `weeks` weeks starting at the Monday of `start`."""
    monday = start - dt.timedelta(days=start.weekday())
    return [monday + dt.timedelta(weeks=w, days=d) for w in range(weeks) for d in (0, 2, 4)]


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed workout journal entries over HTTP")
    ap.add_argument("--base-url", required=True, help="Server base URL (e.g., http://localhost:3000)")
    ap.add_argument("--weeks", type=int, default=4, help="Number of weeks to seed (default 4)")
    ap.add_argument("--reset", action="store_true", help="Drop and recreate the table first")
    args = ap.parse_args()

    if args.reset:
        get(args.base_url, "reset-table")

    start = dt.date.today() - dt.timedelta(weeks=args.weeks)
    added = 0
    for i, day in enumerate(session_days(start, args.weeks)):
        lifts = SESSION_A if i % 2 == 0 else SESSION_B
        for name, base_weight in lifts:
            payload = {
                "name": name,
                "weight": str(base_weight + INCREMENT_LBS * (i // 2)),
                "units": "1",
                "reps": "5",
                "date": day.isoformat(),
            }
            get(args.base_url, "insert", payload)
            added += 1

    print(f"Seed complete: {added} entries created.")


if __name__ == "__main__":
    main()
