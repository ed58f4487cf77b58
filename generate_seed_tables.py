#!/usr/bin/env python
"""
Generate the preset users and orders seed tables as JSON fixtures.

Usage:
    python generate_seed_tables.py

Output:
    seed_users.json, seed_orders.json - fixtures for loading into a test database
"""

import json
from datetime import date
from pathlib import Path

from seed_data.cli import write_frame
from seed_data.config import SeedConfig
from seed_data.presets import ORDERS_TABLE, USERS_TABLE
from seed_data.tables import build_table


def main():
    """Generate preset tables and save each to JSON."""
    config = SeedConfig(seed=42, reference=date(2024, 1, 1))  # Fixed for reproducibility

    for spec in (USERS_TABLE, ORDERS_TABLE):
        print(f"Generating {spec.rows} rows for {spec.name}...")
        frame = build_table(spec, config=config)

        output_file = Path(f"seed_{spec.name}.json")
        write_frame(frame, "json", output_file)

        print(f"  - Saved to: {output_file.absolute()}")
        print(f"  - Columns: {', '.join(frame.columns)}")

    users = json.loads(Path("seed_users.json").read_text())
    active = sum(1 for u in users if u["is_active"])
    print(f"\nActive users: {active}/{len(users)} ({active / len(users):.0%})")


if __name__ == "__main__":
    main()
