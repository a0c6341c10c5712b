"""
Product API endpoints

Each route runs its validation chain as a dependency before the handler,
then performs exactly one service call.
"""

from fastapi import APIRouter, Depends, Path, status

from product_api.core.errors import ErrorResponseModel, ValidationErrorResponseModel
from product_api.dependencies.product import get_product_service, to_schema, validate_request
from product_api.services.product import ProductService
from product_api.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductDataResponse,
    ProductListResponse,
    MessageResponse,
)
from product_api.validators.product import (
    GET_PRODUCT_RULES,
    PRODUCT_ID_RULES,
    CREATE_PRODUCT_RULES,
    UPDATE_PRODUCT_RULES,
    parse_product_id,
)
from product_api.validators.rules import RequestInput

router = APIRouter()

BAD_REQUEST = {400: {"model": ValidationErrorResponseModel, "description": "Bad Request - invalid ID or input data"}}
NOT_FOUND = {404: {"model": ErrorResponseModel, "description": "Product Not Found"}}


def json_body(schema) -> dict:
    """Document a JSON request body that is validated by a rule chain rather than by FastAPI"""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }


@router.get(
    "",
    response_model=ProductListResponse,
    summary="Get a list of products",
)
async def get_products(service: ProductService = Depends(get_product_service)):
    """Return every product."""
    return {"data": await service.list_products()}


@router.get(
    "/{id}",
    response_model=ProductDataResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Get a product by ID",
    dependencies=[Depends(validate_request(GET_PRODUCT_RULES))],
)
async def get_product_by_id(
    id: str = Path(..., description="The ID of the product"),
    service: ProductService = Depends(get_product_service),
):
    """Return a product based on its unique ID."""
    return {"data": await service.get_product(parse_product_id(id))}


@router.post(
    "",
    response_model=ProductDataResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Create a new product",
    openapi_extra=json_body(ProductCreate),
)
async def create_product(
    request_input: RequestInput = Depends(validate_request(CREATE_PRODUCT_RULES)),
    service: ProductService = Depends(get_product_service),
):
    """
    Create a new product. The product starts out available.
    """
    return {"data": await service.create_product(to_schema(ProductCreate, request_input))}


@router.put(
    "/{id}",
    response_model=ProductDataResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Update a product with user input",
    openapi_extra=json_body(ProductUpdate),
)
async def update_product(
    id: str = Path(..., description="The ID of the product"),
    request_input: RequestInput = Depends(validate_request(UPDATE_PRODUCT_RULES)),
    service: ProductService = Depends(get_product_service),
):
    """
    Replace name, price and availability of an existing product.
    """
    product_data = to_schema(ProductUpdate, request_input)
    return {"data": await service.update_product(parse_product_id(id), product_data)}


@router.patch(
    "/{id}",
    response_model=ProductDataResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Toggle product availability",
    dependencies=[Depends(validate_request(PRODUCT_ID_RULES))],
)
async def update_availability(
    id: str = Path(..., description="The ID of the product"),
    service: ProductService = Depends(get_product_service),
):
    """
    Flip the availability of a product. Calling it twice restores the previous value.
    """
    return {"data": await service.toggle_availability(parse_product_id(id))}


@router.delete(
    "/{id}",
    response_model=MessageResponse,
    responses={**BAD_REQUEST, 404: {"model": ErrorResponseModel, "description": "Product could not be deleted"}},
    summary="Delete a product",
    dependencies=[Depends(validate_request(PRODUCT_ID_RULES))],
)
async def delete_product(
    id: str = Path(..., description="The ID of the product"),
    service: ProductService = Depends(get_product_service),
):
    """Delete a product from the database."""
    return {"data": await service.delete_product(parse_product_id(id))}
