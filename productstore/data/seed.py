# productstore/data/seed.py
from productstore.data.database import Database
from productstore.domain.schemas import ProductIn
from productstore.repos.product_repo import ProductRepo
from productstore.utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_PRODUCTS = [
    {"name": "Pen", "description": "Blue pen", "price": 1.5, "category": "stationery", "inStock": True},
    {"name": "Notebook", "description": "A5 ruled notebook", "price": 4.99, "category": "stationery", "inStock": True},
    {"name": "Stapler", "description": "Desk stapler", "price": 12, "category": "stationery", "inStock": False},
    {"name": "Keyboard", "description": "Mechanical keyboard", "price": 199.99, "category": "electronics", "inStock": True},
    {"name": "Monitor", "description": "27 inch monitor", "price": 899.0, "category": "electronics", "inStock": False},
]


def seed(database: Database) -> int:
    """Insert the sample products into an empty collection. Returns how many were added."""
    repo = ProductRepo(database.products)

    # not forcing: only seed if empty
    if not repo.is_empty():
        logger.info("Products collection not empty, skipping seed")
        return 0

    for raw in SAMPLE_PRODUCTS:
        repo.create(ProductIn.model_validate(raw).to_document())

    logger.info(f"Seeded {len(SAMPLE_PRODUCTS)} products")
    return len(SAMPLE_PRODUCTS)


if __name__ == "__main__":
    db = Database()
    db.connect()
    try:
        seed(db)
    finally:
        db.close()
