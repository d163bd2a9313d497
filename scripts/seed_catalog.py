# scripts/seed_catalog.py
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

import argparse
import asyncio
from literacy.core.database import session_manager
from literacy.utils.seed.seed_catalog import seed_catalog


async def main(force: bool):
    """Load the course catalog without starting the API."""
    await session_manager.init()
    try:
        async with session_manager.get_session() as db:
            written = await seed_catalog(db, force=force)
        print(f"Catalog seeded, {written} questions written")
    finally:
        await session_manager.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed modules and quiz questions")
    parser.add_argument("--force", action="store_true", help="replace existing questions")
    args = parser.parse_args()
    asyncio.run(main(args.force))
