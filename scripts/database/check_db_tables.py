"""List the tables visible through DATABASE_URL and flag missing ones."""

import asyncio
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from dotenv import load_dotenv

load_dotenv()

from sqlalchemy import inspect
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine

from libs.common.config import get_settings

REQUIRED_TABLES = {
    "profiles",
    "users",
    "supporters",
    "withdrawals",
    "wishlist",
    "wishlist_images",
    "admin_users",
}


async def check_tables() -> int:
    db_url = get_settings().DATABASE_URL
    # Mask password for logging
    print(f"Connecting to: {make_url(db_url).render_as_string(hide_password=True)}")

    engine = create_async_engine(db_url, echo=False)
    try:
        async with engine.connect() as conn:

            def get_tables(sync_conn):
                return inspect(sync_conn).get_table_names()

            tables = await conn.run_sync(get_tables)
    except Exception as e:
        print(f"Error connecting to database: {e}")
        return 1
    finally:
        await engine.dispose()

    print("Tables found:")
    for table in sorted(tables):
        print(f"- {table}")

    missing = sorted(REQUIRED_TABLES - set(tables))
    if missing:
        print(f"\nWARNING: missing tables: {missing}")
        return 1
    print("\nAll dashboard tables are present.")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(check_tables()))
