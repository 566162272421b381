"""Create the default categories for a user.

Usage: python scripts/seed_categories.py <user_id>
"""

import asyncio
import sys

from finance_tracker.config import settings
from finance_tracker.core.logging import setup_logging
from finance_tracker.db.session import Database
from finance_tracker.services.category import CategoryService


async def seed_categories(user_id: int) -> int:
    database = Database.from_settings(settings)
    if not database.available:
        print("Error: DATABASE_URL is not configured", file=sys.stderr)
        return 1

    print(f"Creating default categories for user {user_id}...")
    try:
        async for session in database.session():
            if session is None:
                print("Error: could not connect to the database", file=sys.stderr)
                return 1
            created = await CategoryService(session).seed_defaults(user_id)
    finally:
        await database.dispose()

    print(f"\n✅ Created {len(created)} default categories")
    return 0


def main() -> None:
    if len(sys.argv) != 2 or not sys.argv[1].isdigit():
        print("Usage: python scripts/seed_categories.py <user_id>", file=sys.stderr)
        sys.exit(1)

    setup_logging(settings.log_level)
    sys.exit(asyncio.run(seed_categories(int(sys.argv[1]))))


if __name__ == "__main__":
    main()
