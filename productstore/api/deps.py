# productstore/api/deps.py
from typing import Any

from fastapi import Body, Depends, Request
from pydantic import ValidationError as SchemaError

from productstore.data.database import Database
from productstore.domain.errors import ForbiddenError, ValidationError
from productstore.domain.schemas import ProductIn
from productstore.repos.product_repo import ProductRepo
from productstore.services.auth import CredentialVerifier
from productstore.services.product_service import ProductService
from productstore.utils.settings import API_KEY_HEADER

FORBIDDEN_MESSAGE = "Forbidden - Invalid API KEY"
INVALID_PRODUCT_MESSAGE = "Invalid product data"


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_service(db: Database = Depends(get_database)) -> ProductService:
    return ProductService(ProductRepo(db.products))


def get_verifier(request: Request) -> CredentialVerifier:
    return request.app.state.verifier


def check_api_key(request: Request, verifier: CredentialVerifier = Depends(get_verifier)) -> None:
    """Guard for write routes, runs before body validation."""
    if not verifier.verify(request.headers.get(API_KEY_HEADER)):
        raise ForbiddenError(FORBIDDEN_MESSAGE)


def validate_product(
    _: None = Depends(check_api_key),
    payload: Any = Body(None),
) -> ProductIn:
    """
    Shape check of a product body.
    The body is taken untyped so that a wrong key is reported (403) before
    a wrong body, and every shape problem gets the same 400.
    """
    try:
        return ProductIn.model_validate(payload)
    except SchemaError:
        raise ValidationError(INVALID_PRODUCT_MESSAGE)
