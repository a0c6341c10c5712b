#!/usr/bin/env python3
"""
Empty or recreate the products table.

Usage: python database/scripts/clear.py [clear|drop]
"""

import asyncio
import sys
from pathlib import Path

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from dotenv import load_dotenv
from sqlalchemy import delete

from product_api.core.config import Config
from product_api.db.database import Database
from product_api.models.product import Product


class ProductDatabaseCleaner:
    def __init__(self, database: Database):
        self.database = database

    async def connect(self):
        """Open the database"""
        print("Connecting to database...")
        await self.database.connect()
        print("Successfully connected to database!")

    async def clear_all_data(self) -> int:
        """Delete every product row"""
        print("Clearing all products...")
        async with self.database.session() as session:
            result = await session.execute(delete(Product))
            await session.commit()
        print(f"Deleted {result.rowcount} rows from 'products' table")
        return result.rowcount

    async def drop_all_tables(self):
        """Drop and recreate the products table, resetting ids"""
        print("Dropping and recreating tables...")
        await self.database.reset()
        print("Tables recreated successfully!")

    async def close(self):
        """Close database connection"""
        await self.database.close()
        print("Database connection closed")


async def main():
    load_dotenv()
    settings = Config()
    cleaner = ProductDatabaseCleaner(Database(settings.database_url))
    operation = sys.argv[1] if len(sys.argv) > 1 else "clear"

    try:
        print("=" * 50)
        print("Product Database Cleaner")
        print("=" * 50)

        await cleaner.connect()

        if operation == "drop":
            await cleaner.drop_all_tables()
        else:
            await cleaner.clear_all_data()

        print("=" * 50)
        print(f"Product database {operation} completed!")
        print("=" * 50)
    except Exception as error:
        print(f"Product database {operation} failed: {error}")
        sys.exit(1)
    finally:
        await cleaner.close()


if __name__ == "__main__":
    asyncio.run(main())
