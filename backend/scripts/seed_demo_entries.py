from datetime import date, timedelta
import random

from journal.db import SessionLocal
from journal.store import EntryStore

# name, weight range (lbs), reps choices; None weight = bodyweight
LIFTS = [
    ("Squat", (135, 225), [5, 8]),
    ("Bench Press", (95, 185), [5, 8, 10]),
    ("Deadlift", (185, 315), [3, 5]),
    ("Overhead Press", (65, 115), [5, 8]),
    ("Pull-up", None, [6, 8, 10]),
]


def seed_demo_entries(store: EntryStore, weeks: int = 4) -> int:
    """Insert three sessions a week (Mon/Wed/Fri) of random lifts."""
    today = date.today()
    start_day = today - timedelta(weeks=weeks)
    count = 0

    for week in range(weeks + 1):
        week_start = start_day + timedelta(weeks=week)
        for offset in (0, 2, 4):
            d = week_start + timedelta(days=offset)
            # Skip future days
            if d > today:
                continue
            for name, weight_range, reps in random.sample(LIFTS, 3):
                weight = random.randrange(*weight_range, 5) if weight_range else None
                store.insert(
                    name=name,
                    reps=random.choice(reps),
                    weight=weight,
                    lbs=True,
                    date=d,
                )
                count += 1
    return count


def main():
    db = SessionLocal()
    try:
        store = EntryStore(db)
        store.reset_schema()
        added = seed_demo_entries(store)
    finally:
        db.close()
    print(f"Seeded {added} demo entries")


if __name__ == "__main__":
    main()
