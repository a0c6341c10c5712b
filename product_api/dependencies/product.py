"""
Dependency injection for the product routes: database session, repository,
service and request validation
"""

import json
from typing import Any, AsyncIterator, Callable, Sequence, Type, TypeVar

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.errors import ErrorResponse, RequestValidationFailed
from product_api.db.database import Database
from product_api.repositories.product import ProductRepository
from product_api.services.product import ProductService
from product_api.validators.rules import BODY, RequestInput, Rule, build_input, to_json_value, validate

SchemaT = TypeVar("SchemaT", bound=BaseModel)

INVALID_JSON = "El cuerpo de la petición no es JSON válido"


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {token}")


def get_database(request: Request) -> Database:
    """Get the database handle the application was built with"""
    return request.app.state.database


async def get_session(database: Database = Depends(get_database)) -> AsyncIterator[AsyncSession]:
    """Open one session per request"""
    async with database.session() as session:
        yield session


async def get_product_repository(session: AsyncSession = Depends(get_session)) -> ProductRepository:
    """Get product repository instance"""
    return ProductRepository(session)


async def get_product_service(
    repository: ProductRepository = Depends(get_product_repository)
) -> ProductService:
    """Get product service instance"""
    return ProductService(repository)


async def read_json_body(request: Request) -> Any:
    """Parse a JSON request body; bodies that are empty or not declared as JSON read as {}"""
    if "json" not in request.headers.get("content-type", ""):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        raise ErrorResponse(INVALID_JSON, status_code=400)


def validate_request(rules: Sequence[Rule]) -> Callable:
    """
    Build a dependency that runs a validation chain against the
    request's path parameters and JSON body.

    The dependency raises RequestValidationFailed carrying every violated
    rule, or returns the RequestInput for the handler to use.
    """
    async def dependency(request: Request) -> RequestInput:
        request_input = build_input(request.path_params, await read_json_body(request))
        errors = validate(rules, request_input)
        if errors:
            raise RequestValidationFailed(errors)
        return request_input

    return dependency


def to_schema(schema: Type[SchemaT], request_input: RequestInput) -> SchemaT:
    """Convert a validated body into its typed schema"""
    try:
        return schema.model_validate(request_input.body)
    except ValidationError as e:
        raise RequestValidationFailed([
            {
                "type": "field",
                "value": to_json_value(error.get("input")),
                "msg": error["msg"],
                "path": ".".join(str(part) for part in error["loc"]),
                "location": BODY,
            }
            for error in e.errors()
        ])
