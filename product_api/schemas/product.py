"""
API schemas for Product endpoints
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ProductCreate(BaseModel):
    """Schema for creating a new product"""
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    name: str = Field(..., min_length=1, max_length=100, examples=["Monitor Curvo 49 Pulgadas"])
    price: float = Field(..., gt=0, examples=[399])


class ProductUpdate(BaseModel):
    """Schema for replacing every editable field of a product"""
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    name: str = Field(..., min_length=1, max_length=100, examples=["Monitor Curvo 49 Pulgadas"])
    price: float = Field(..., gt=0, examples=[399])
    availability: bool = Field(..., examples=[True])


class ProductResponse(BaseModel):
    """Schema for product responses including all fields"""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., examples=[1])
    name: str
    price: float
    availability: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductDataResponse(BaseModel):
    """Envelope for a single product"""
    data: ProductResponse


class ProductListResponse(BaseModel):
    """Envelope for the product list"""
    data: List[ProductResponse]


class MessageResponse(BaseModel):
    """Envelope for operations that answer with a plain message"""
    data: str = Field(..., examples=["Producto Eliminado"])
