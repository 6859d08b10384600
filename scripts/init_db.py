"""Database initialization script.

Run this script to create any missing database tables.

Usage:
    python -m scripts.init_db
    or
    python scripts/init_db.py (after pip install -e .)
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
    """Initialize the database."""
    database = Database.from_settings(get_settings())
    try:
        await database.create_all_tables()
    finally:
        await database.close()
    print("Database initialized successfully!")


if __name__ == "__main__":
    asyncio.run(main())
