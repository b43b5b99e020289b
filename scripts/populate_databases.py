#!/usr/bin/env python3
"""
Populate the focus session SQLite database from CSV.

This script creates the database file the Focus Analytics API reads,
with every column stored as TEXT.

Usage:
    python scripts/session_simulator.py
    python scripts/populate_databases.py
"""
import csv
import sqlite3
import os
from pathlib import Path


# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent

# CSV to Database mappings
DATABASE_CONFIGS = [
    {
        "csv_file": "CSV_Data/focus_sessions.csv",
        "db_file": "focus_sessions.db",
        "table_name": "focus_sessions",
    },
]


def sanitize_column_name(name: str) -> str:
    """Sanitize column name for SQL compatibility."""
    # Replace non-alphanumeric characters with underscores
    sanitized = "".join(c if c.isalnum() else "_" for c in name)
    # Ensure it doesn't start with a number
    if sanitized and sanitized[0].isdigit():
        sanitized = "_" + sanitized
    return sanitized.lower()


def populate_database(config: dict, base_dir: Path = BASE_DIR) -> int:
    """
    Create and populate a SQLite database from a CSV file.

    Args:
        config: Dictionary with csv_file, db_file, and table_name
        base_dir: Directory the config paths are relative to

    Returns:
        Number of rows inserted
    """
    csv_path = base_dir / config["csv_file"]
    db_path = base_dir / config["db_file"]
    table_name = config["table_name"]

    # Check CSV exists
    if not csv_path.exists():
        print(f"  ERROR: CSV file not found: {csv_path}")
        return 0

    # Remove existing database file
    if db_path.exists():
        os.remove(db_path)
        print(f"  Removed existing: {db_path.name}")

    # Read CSV headers and data
    with open(csv_path, "r", newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f)
        headers = next(reader)
        sanitized_headers = [sanitize_column_name(h) for h in headers]
        rows = list(reader)

    conn = sqlite3.connect(db_path)
    try:
        cursor = conn.cursor()

        columns = [f"{header} TEXT" for header in sanitized_headers]
        cursor.execute(f"CREATE TABLE {table_name} ({', '.join(columns)})")

        # Range queries filter each user's sessions by start time
        if {"user_id", "start_time"} <= set(sanitized_headers):
            cursor.execute(
                f"CREATE INDEX idx_{table_name}_user_start ON {table_name} (user_id, start_time)"
            )

        placeholders = ", ".join(["?"] * len(sanitized_headers))
        insert_sql = f"INSERT INTO {table_name} ({', '.join(sanitized_headers)}) VALUES ({placeholders})"
        cursor.executemany(insert_sql, rows)
        conn.commit()

        cursor.execute(f"SELECT COUNT(*) FROM {table_name}")
        count = cursor.fetchone()[0]
    finally:
        conn.close()

    return count


def main():
    """Populate the focus session database."""
    print("=" * 60)
    print("Focus Analytics Database Population Script")
    print("=" * 60)
    print(f"\nBase directory: {BASE_DIR}\n")

    total_rows = 0

    for config in DATABASE_CONFIGS:
        print(f"Processing: {config['csv_file']} -> {config['db_file']}")

        row_count = populate_database(config)
        total_rows += row_count

        print(f"  Created table: {config['table_name']}")
        print(f"  Rows inserted: {row_count}")
        print()

    print("=" * 60)
    print(f"Complete! Total rows: {total_rows}")
    print("=" * 60)

    print("\nDatabase files created:")
    for config in DATABASE_CONFIGS:
        db_path = BASE_DIR / config["db_file"]
        if db_path.exists():
            size_kb = db_path.stat().st_size / 1024
            print(f"  {db_path} ({size_kb:.1f} KB)")


if __name__ == "__main__":
    main()
