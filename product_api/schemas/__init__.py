from .product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductDataResponse,
    ProductListResponse,
    MessageResponse,
)

__all__ = [
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductDataResponse",
    "ProductListResponse",
    "MessageResponse",
]
