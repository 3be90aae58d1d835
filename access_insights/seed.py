"""Create and seed the access_events table from a CSV export.

Usage:
    python -m access_insights.seed --csv access_events.csv
"""

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from access_insights.config.schema import ACCESS_EVENTS, INSERT_COLUMNS, build_table_ddl
from access_insights.config.settings import Settings, get_settings
from access_insights.infrastructure.database.connection import connect
from access_insights.infrastructure.logging.logger import setup_logging
from access_insights.services.sql.models import AccessEvent

logger = logging.getLogger(__name__)


def load_events(csv_path: Path) -> tuple[list[AccessEvent], int]:
    """
    Read access events from ``csv_path``.

    Returns:
        Tuple of (valid events, number of rows skipped as invalid)

    Raises:
        FileNotFoundError: If the CSV file does not exist
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found at {csv_path}")

    events: list[AccessEvent] = []
    skipped = 0
    with csv_path.open(newline="", encoding="utf-8") as f:
        for line_no, row in enumerate(csv.DictReader(f), start=2):
            try:
                events.append(AccessEvent.model_validate(row))
            except ValidationError as e:
                skipped += 1
                logger.error(f"Invalid row at line {line_no}: {row} ({e.error_count()} error(s))")
    return events, skipped


def _insert_params(event: AccessEvent) -> tuple[Any, ...]:
    values = event.model_dump(mode="python")
    values["credential_type"] = event.credential_type.value
    return tuple(values[column] for column in INSERT_COLUMNS)


def seed(settings: Settings, csv_path: Path) -> int:
    """Create the table if needed and insert every valid CSV row. Returns rows inserted."""
    events, skipped = load_events(csv_path)

    placeholders = ", ".join("?" for _ in INSERT_COLUMNS)
    insert_sql = (
        f"INSERT INTO {ACCESS_EVENTS.table_name} ({', '.join(INSERT_COLUMNS)}) "
        f"VALUES ({placeholders})"
    )

    inserted = 0
    with connect(settings) as conn:
        conn.autocommit = True
        cursor = conn.cursor()
        try:
            cursor.execute(build_table_ddl())
            logger.info(f'Created "{ACCESS_EVENTS.table_name}" table')

            for event in events:
                try:
                    cursor.execute(insert_sql, _insert_params(event))
                    inserted += 1
                except Exception as e:
                    logger.error(f"Error inserting row for {event.full_name} at {event.local_timestamp}: {e}")
        finally:
            cursor.close()

    logger.info(f"Seeded {inserted} access events ({skipped} invalid row(s) skipped)")
    return inserted


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the access_events table from a CSV file")
    parser.add_argument(
        "--csv",
        type=Path,
        default=Path.cwd() / "access_events.csv",
        help="Path to the CSV export (default: ./access_events.csv)",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(level=settings.log_level, json_output=False)

    try:
        seed(settings, args.csv)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
