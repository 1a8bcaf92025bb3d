"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, course_registry.configs
System role: Database schema initialization

Usage:
    python -m course_registry.boundary.db.create_tables
    python -m course_registry.boundary.db.create_tables --drop
"""

import argparse
import asyncio

from course_registry.boundary.db.connection import drop_models, get_async_engine, init_models


async def _main(drop: bool) -> None:
    if drop:
        await drop_models()
        print("All tables dropped successfully.")
    await init_models()
    print("All tables created successfully.")
    await get_async_engine().dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Create course registration tables")
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop existing tables first (development only, deletes all data)",
    )
    args = parser.parse_args()
    asyncio.run(_main(args.drop))


if __name__ == "__main__":
    main()
