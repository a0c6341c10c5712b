"""
Product repository for data access layer following Repository pattern
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.logger import logger
from product_api.models.product import Product
from product_api.schemas.product import ProductCreate, ProductUpdate


class ProductRepository:
    """Repository for product data access operations"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Product]:
        """Return every product, newest first"""
        try:
            result = await self.session.execute(select(Product).order_by(Product.id.desc()))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Database error listing products: {e}")
            raise

    async def get_by_id(self, product_id: Optional[int]) -> Optional[Product]:
        """Get product by primary key"""
        if product_id is None:
            return None
        try:
            return await self.session.get(Product, product_id)
        except SQLAlchemyError as e:
            logger.error(f"Database error getting product: {e}")
            raise

    async def create(self, product_data: ProductCreate) -> Product:
        """Insert a new product; new products always start available"""
        try:
            product = Product(**product_data.model_dump(), availability=True)
            self.session.add(product)
            await self.session.commit()
            await self.session.refresh(product)
            return product
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error creating product: {e}")
            raise

    async def update(self, product: Product, product_data: ProductUpdate) -> Product:
        """Overwrite name, price and availability of an existing product"""
        for field, value in product_data.model_dump().items():
            setattr(product, field, value)
        return await self.save(product)

    async def save(self, product: Product) -> Product:
        """Persist pending changes on a loaded product"""
        try:
            await self.session.commit()
            await self.session.refresh(product)
            return product
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error updating product: {e}")
            raise

    async def delete(self, product: Product) -> None:
        """Remove a product row"""
        try:
            await self.session.delete(product)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error deleting product: {e}")
            raise
