#!/usr/bin/env python3
"""
Seed the products table with sample data.

Usage: python database/scripts/seed.py
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

SAMPLE_PRODUCTS = [
    {"name": "Monitor Curvo de 49 Pulgadas", "price": 300},
    {"name": "Teclado Mecánico", "price": 120},
    {"name": "Mouse Inalámbrico", "price": 50},
    {"name": "Audífonos con Cancelación de Ruido", "price": 250},
    {"name": "Webcam HD", "price": 80, "availability": False},
]


class ProductDatabaseSeeder:
    def __init__(self, database: Database):
        self.database = database

    async def connect(self):
        """Open the database"""
        print("Connecting to database...")
        await self.database.connect()
        print("Successfully connected to database!")

    async def seed_data(self):
        """Main seeding method"""
        print("Seeding product data...")
        await self.clear_data()
        count = await self.seed_products()
        print(f"Successfully seeded {count} products")
        return count

    async def clear_data(self):
        """Clear existing product data"""
        print("Clearing existing product data...")
        async with self.database.session() as session:
            result = await session.execute(delete(Product))
            await session.commit()
        print(f"Deleted {result.rowcount} existing products")

    async def seed_products(self) -> int:
        """Insert the sample products"""
        async with self.database.session() as session:
            session.add_all([Product(**product) for product in SAMPLE_PRODUCTS])
            await session.commit()
        return len(SAMPLE_PRODUCTS)

    async def close(self):
        """Close database connection"""
        await self.database.close()
        print("Database connection closed")


async def main():
    load_dotenv()
    settings = Config()
    seeder = ProductDatabaseSeeder(Database(settings.database_url))

    try:
        await seeder.connect()
        await seeder.seed_data()
    except Exception as error:
        print(f"Error seeding product data: {error}")
        sys.exit(1)
    finally:
        await seeder.close()


if __name__ == "__main__":
    asyncio.run(main())
