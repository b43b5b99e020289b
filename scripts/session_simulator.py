#!/usr/bin/env python3
"""
Focus Session Simulator for the Focus Analytics demo.

Generates a realistic history of focus sessions for one or more users
and writes it as CSV, ready for scripts/populate_databases.py.

Users have habits: preferred hours, favourite places, and a tendency to
run over or stop early. Most sessions complete, some are cancelled and
a few are still planned.

Usage:
    python scripts/session_simulator.py --days 90
    python scripts/session_simulator.py --users user-1 user-2 --days 30 --seed 7
    python scripts/session_simulator.py --output CSV_Data/focus_sessions.csv
"""

import csv
import random
import argparse
import uuid
from datetime import datetime, timedelta
from pathlib import Path


BASE_DIR = Path(__file__).parent.parent
DEFAULT_OUTPUT = BASE_DIR / "CSV_Data" / "focus_sessions.csv"

CSV_COLUMNS = [
    "session_id",
    "user_id",
    "title",
    "description",
    "start_time",
    "end_time",
    "duration",
    "actual_duration",
    "status",
    "location_name",
    "location_address",
    "location_type",
    "tags",
    "notes",
    "rating",
    "focus",
    "energy",
    "mood",
    "distractions",
    "active",
]

# Places a session can happen at, with the type used for breakdowns
LOCATIONS = [
    {"name": "Home Office", "address": "", "type": "home"},
    {"name": "Central Library", "address": "12 Main St", "type": "library"},
    {"name": "Blue Bottle", "address": "48 Market St", "type": "coffee shop"},
    {"name": "Campus Study Hall", "address": "1 University Ave", "type": "library"},
    {"name": "WeWork Downtown", "address": "200 Pine St", "type": "coworking"},
]

SESSION_TITLES = [
    "Deep work",
    "Write report",
    "Study session",
    "Code review",
    "Reading",
    "Plan the week",
    "Language practice",
]

SESSION_TAGS = ["work", "study", "writing", "coding", "reading", "admin"]

PLANNED_DURATIONS = [25, 45, 50, 60, 90]

# Probability of each status for a generated session
STATUS_WEIGHTS = {
    "completed": 0.8,
    "cancelled": 0.15,
    "planned": 0.05,
}

SESSION_SPECS = {
    "sessions_per_day": (0, 4),
    "preferred_hours": [7, 8, 10, 14, 15, 19, 22],
    "completion_ratio": (0.6, 1.5),
    "rating_range": (1, 5),
    "metric_range": (1, 10),
    "distraction_range": (0, 12),
    "metric_skip_chance": 0.15,  # Users sometimes skip a metric
    "no_location_chance": 0.1,
}


def pick_status(rng: random.Random) -> str:
    """Pick a session status by the configured weights."""
    statuses = list(STATUS_WEIGHTS.keys())
    weights = list(STATUS_WEIGHTS.values())
    return rng.choices(statuses, weights=weights, k=1)[0]


def optional_metric(rng: random.Random, low: int, high: int):
    """Return a metric in [low, high], or None when the user skipped it."""
    if rng.random() < SESSION_SPECS["metric_skip_chance"]:
        return None
    return rng.randint(low, high)


def create_session(rng: random.Random, user_id: str, start_time: datetime) -> dict:
    """
    Create one CSV row for a session starting at start_time.

    Completed sessions carry an actual duration, end time and the
    self-reported metrics; other statuses leave them blank.
    """
    status = pick_status(rng)
    duration = rng.choice(PLANNED_DURATIONS)

    location = None
    if rng.random() >= SESSION_SPECS["no_location_chance"]:
        location = rng.choice(LOCATIONS)

    row = {column: "" for column in CSV_COLUMNS}
    row.update(
        {
            "session_id": str(uuid.UUID(int=rng.getrandbits(128))),
            "user_id": user_id,
            "title": rng.choice(SESSION_TITLES),
            "start_time": start_time.isoformat(timespec="seconds"),
            "duration": duration,
            "status": status,
            "tags": ",".join(rng.sample(SESSION_TAGS, k=rng.randint(0, 2))),
            "active": "1",
        }
    )

    if location:
        row["location_name"] = location["name"]
        row["location_address"] = location["address"]
        row["location_type"] = location["type"]

    if status == "completed":
        low, high = SESSION_SPECS["completion_ratio"]
        actual_duration = max(1, round(duration * rng.uniform(low, high)))
        row["actual_duration"] = actual_duration
        row["end_time"] = (start_time + timedelta(minutes=actual_duration)).isoformat(timespec="seconds")

        rating_low, rating_high = SESSION_SPECS["rating_range"]
        metric_low, metric_high = SESSION_SPECS["metric_range"]
        distraction_low, distraction_high = SESSION_SPECS["distraction_range"]

        for column, value in (
            ("rating", optional_metric(rng, rating_low, rating_high)),
            ("focus", optional_metric(rng, metric_low, metric_high)),
            ("energy", optional_metric(rng, metric_low, metric_high)),
            ("mood", optional_metric(rng, metric_low, metric_high)),
            ("distractions", optional_metric(rng, distraction_low, distraction_high)),
        ):
            row[column] = "" if value is None else value

    return row


def generate_user_sessions(rng: random.Random, user_id: str, days: int, end: datetime) -> list[dict]:
    """Generate a user's sessions for the `days` days ending at `end`."""
    rows = []
    first_day = (end - timedelta(days=days - 1)).replace(hour=0, minute=0, second=0, microsecond=0)
    low, high = SESSION_SPECS["sessions_per_day"]

    for offset in range(days):
        day = first_day + timedelta(days=offset)
        for _ in range(rng.randint(low, high)):
            hour = rng.choice(SESSION_SPECS["preferred_hours"])
            start_time = day.replace(hour=hour, minute=rng.choice([0, 15, 30, 45]))
            rows.append(create_session(rng, user_id, start_time))

    rows.sort(key=lambda r: r["start_time"])
    return rows


def write_csv(rows: list[dict], output: Path) -> None:
    """Write generated sessions to a CSV file, creating its directory."""
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        writer.writerows(rows)


def main():
    parser = argparse.ArgumentParser(
        description="Focus Session Simulator for the Focus Analytics demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 90 days of history for the demo user
  python scripts/session_simulator.py --days 90

  # Two users, reproducible output
  python scripts/session_simulator.py --users user-1 user-2 --seed 7
        """,
    )

    parser.add_argument(
        "--users",
        nargs="+",
        default=["demo-user"],
        help="User IDs to generate sessions for (default: demo-user)",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=90,
        help="Days of history to generate (default: 90)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible output",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"CSV file to write (default: {DEFAULT_OUTPUT.relative_to(BASE_DIR)})",
    )

    args = parser.parse_args()

    if args.days < 1:
        parser.error("--days must be at least 1")

    print("=" * 60)
    print("Focus Session Simulator")
    print("=" * 60)

    rng = random.Random(args.seed)
    end = datetime.now()

    rows = []
    for user_id in args.users:
        user_rows = generate_user_sessions(rng, user_id, args.days, end)
        print(f"[INFO] {user_id}: {len(user_rows)} sessions")
        rows.extend(user_rows)

    write_csv(rows, args.output)
    print(f"\n[INFO] Wrote {len(rows)} sessions to {args.output}")


if __name__ == "__main__":
    main()
