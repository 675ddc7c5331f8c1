# productstore/api/routers/products.py
from fastapi import APIRouter, Depends, Query

from productstore.api.deps import check_api_key, get_service, validate_product
from productstore.domain.schemas import ProductDeleted, ProductIn, ProductOut, ProductPage
from productstore.services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=ProductPage)
def list_products(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    category: str | None = Query(None),
    in_stock: str | None = Query(None, alias="inStock"),
    svc: ProductService = Depends(get_service),
):
    """
    Paginated listing with optional exact-match filters.
    page/limit stay strings here, the service decides on fallbacks.
    """
    return svc.list_products(page=page, limit=limit, category=category, in_stock=in_stock)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str, svc: ProductService = Depends(get_service)):
    return svc.get_product(product_id)


@router.post("", response_model=ProductOut, status_code=201)
def create_product(
    payload: ProductIn = Depends(validate_product),
    svc: ProductService = Depends(get_service),
):
    return svc.create_product(payload)


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
    product_id: str,
    payload: ProductIn = Depends(validate_product),
    svc: ProductService = Depends(get_service),
):
    return svc.update_product(product_id, payload)


@router.delete("/{product_id}", response_model=ProductDeleted, dependencies=[Depends(check_api_key)])
def delete_product(product_id: str, svc: ProductService = Depends(get_service)):
    return svc.delete_product(product_id)
