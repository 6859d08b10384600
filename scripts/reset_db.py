"""Database reset script.

Run this script to drop all tables and recreate them empty.
This will delete all data.

Usage:
    python -m scripts.reset_db
    or
    python scripts/reset_db.py (after pip install -e .)
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from collab.core.config import get_settings
from collab.db.session import Database


async def main() -> None:
    """Reset the database by dropping all tables and recreating them."""
    database = Database.from_settings(get_settings())

    try:
        print("Dropping all database tables...")
        await database.drop_all_tables()
        print("All tables dropped successfully!")

        print("Recreating tables...")
        await database.create_all_tables()
        print("Database reinitialized successfully!")
    finally:
        await database.close()


if __name__ == "__main__":
    asyncio.run(main())
