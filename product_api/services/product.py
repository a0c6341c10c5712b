"""
Product service containing business logic layer
"""

from typing import List, Optional

from product_api.core.errors import ErrorResponse
from product_api.core.logger import logger
from product_api.models.product import Product
from product_api.repositories.product import ProductRepository
from product_api.schemas.product import ProductCreate, ProductUpdate, ProductResponse

PRODUCT_NOT_FOUND = "Producto no encontrado"
DELETE_FAILED = "Error al borrar producto"
PRODUCT_DELETED = "Producto Eliminado"


class ProductService:
    """Service layer for product business logic"""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def _get_or_404(self, product_id: Optional[int], message: str = PRODUCT_NOT_FOUND) -> Product:
        product = await self.repository.get_by_id(product_id)
        if product is None:
            raise ErrorResponse(message, status_code=404)
        return product

    async def list_products(self) -> List[ProductResponse]:
        """Return every product"""
        products = await self.repository.list_all()

        logger.info(
            f"Listed {len(products)} products",
            metadata={"event": "list_products", "count": len(products)}
        )

        return [ProductResponse.model_validate(product) for product in products]

    async def get_product(self, product_id: Optional[int]) -> ProductResponse:
        """Get product by ID"""
        product = await self._get_or_404(product_id)

        logger.info(
            f"Fetched product {product_id}",
            metadata={"event": "get_product", "product_id": product_id}
        )

        return ProductResponse.model_validate(product)

    async def create_product(self, product_data: ProductCreate) -> ProductResponse:
        """Create a new product; it starts out available"""
        product = await self.repository.create(product_data)

        logger.info(
            f"Created product {product.id}",
            metadata={"event": "create_product", "product_id": product.id}
        )

        return ProductResponse.model_validate(product)

    async def update_product(self, product_id: Optional[int], product_data: ProductUpdate) -> ProductResponse:
        """Replace name, price and availability of a product"""
        product = await self._get_or_404(product_id)
        product = await self.repository.update(product, product_data)

        logger.info(
            f"Updated product {product_id}",
            metadata={"event": "update_product", "product_id": product_id}
        )

        return ProductResponse.model_validate(product)

    async def toggle_availability(self, product_id: Optional[int]) -> ProductResponse:
        """
        Flip the availability of a product.

        Not idempotent: a second call restores the previous value.
        """
        product = await self._get_or_404(product_id)
        product.availability = not product.availability
        product = await self.repository.save(product)

        logger.info(
            f"Toggled availability of product {product_id}",
            metadata={
                "event": "toggle_availability",
                "product_id": product_id,
                "availability": product.availability,
            }
        )

        return ProductResponse.model_validate(product)

    async def delete_product(self, product_id: Optional[int]) -> str:
        """Delete a product and return the confirmation message"""
        product = await self._get_or_404(product_id, DELETE_FAILED)
        await self.repository.delete(product)

        logger.info(
            f"Deleted product {product_id}",
            metadata={"event": "delete_product", "product_id": product_id}
        )

        return PRODUCT_DELETED
