# productstore/services/product_service.py
from typing import Any, Dict

from bson import ObjectId

from productstore.domain.errors import NotFoundError, ValidationError
from productstore.domain.schemas import ProductDeleted, ProductIn, ProductOut, ProductPage
from productstore.repos.product_repo import ProductRepo
from productstore.utils.settings import DEFAULT_PAGE, DEFAULT_LIMIT
from productstore.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCT_NOT_FOUND = "Product not found"
INVALID_PRODUCT_ID = "Invalid product id"
INVALID_PAGINATION = "page and limit must be positive integers"

# largest skip/limit BSON can encode
MAX_BSON_INT = 2**63 - 1


def parse_positive_int(raw: str | None, default: int) -> int:
    """
    Parse a pagination parameter.
    Missing or non-integer input falls back to the default,
    zero, negatives and values past the BSON int64 range are rejected.
    """
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default

    if value <= 0 or value > MAX_BSON_INT:
        raise ValidationError(INVALID_PAGINATION)
    return value


def to_object_id(product_id: str) -> ObjectId:
    if not ObjectId.is_valid(product_id):
        raise ValidationError(INVALID_PRODUCT_ID)
    return ObjectId(product_id)


def to_product(document: Dict[str, Any]) -> ProductOut:
    return ProductOut(
        id=str(document["_id"]),
        name=document["name"],
        description=document["description"],
        price=document["price"],
        category=document["category"],
        in_stock=document["inStock"],
    )


class ProductService:
    """
    Use cases for the Product resource.
    Queries (list, get) only read; commands (create, update, delete) write a
    single document. Errors are raised, never answered here.
    """

    def __init__(self, repo: ProductRepo):
        self.repo = repo

    #query
    def list_products(
        self,
        page: str | None = None,
        limit: str | None = None,
        category: str | None = None,
        in_stock: str | None = None,
    ) -> ProductPage:
        page_no = parse_positive_int(page, DEFAULT_PAGE)
        page_size = parse_positive_int(limit, DEFAULT_LIMIT)
        skip = (page_no - 1) * page_size
        if skip > MAX_BSON_INT:
            raise ValidationError(INVALID_PAGINATION)

        query: Dict[str, Any] = {}
        if category:
            query["category"] = category
        if in_stock is not None:
            query["inStock"] = in_stock == "true"

        documents = self.repo.find(query, skip=skip, limit=page_size)
        total = self.repo.count(query)

        return ProductPage(
            page=page_no,
            limit=page_size,
            total=total,
            data=[to_product(d) for d in documents],
        )

    def get_product(self, product_id: str) -> ProductOut:
        document = self.repo.get(to_object_id(product_id))
        if not document:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return to_product(document)

    #commands
    def create_product(self, payload: ProductIn) -> ProductOut:
        created = self.repo.create(payload.to_document())
        logger.info(f"Created product {created['_id']}")
        return to_product(created)

    def update_product(self, product_id: str, payload: ProductIn) -> ProductOut:
        oid = to_object_id(product_id)
        updated = self.repo.update(oid, payload.to_document())
        if not updated:
            raise NotFoundError(PRODUCT_NOT_FOUND)

        logger.info(f"Updated product {oid}")
        return to_product(updated)

    def delete_product(self, product_id: str) -> ProductDeleted:
        oid = to_object_id(product_id)
        deleted = self.repo.delete(oid)
        if not deleted:
            raise NotFoundError(PRODUCT_NOT_FOUND)

        logger.info(f"Deleted product {oid}")
        return ProductDeleted(product=to_product(deleted))
