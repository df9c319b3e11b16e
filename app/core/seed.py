# app/core/seed.py
import logging

from sqlmodel import Session

from app.models.product import Product
from app.repositories.product_repo import ProductRepository

logger = logging.getLogger(__name__)

MOCK_PRODUCTS: list[dict] = [
    {
        "name": "Classic Vibe Tee",
        "price": 25.00,
        "image": "https://placehold.co/400x400/2D3748/E2E8F0?text=Vibe+Tee",
    },
    {
        "name": "Retro Vibe Hoodie",
        "price": 55.00,
        "image": "https://placehold.co/400x400/4A5568/E2E8F0?text=Vibe+Hoodie",
    },
    {
        "name": "Vibe Snapback Cap",
        "price": 18.50,
        "image": "https://placehold.co/400x400/718096/E2E8F0?text=Vibe+Cap",
    },
    {
        "name": "Aesthetic Vibe Mug",
        "price": 12.99,
        "image": "https://placehold.co/400x400/2D3748/E2E8F0?text=Vibe+Mug",
    },
    {
        "name": "Vibe-On-The-Go Tumbler",
        "price": 22.00,
        "image": "https://placehold.co/400x400/4A5568/E2E8F0?text=Vibe+Tumbler",
    },
    {
        "name": "Minimalist Vibe Print",
        "price": 30.00,
        "image": "https://placehold.co/400x400/718096/E2E8F0?text=Vibe+Print",
    },
]


def seed_products(
    session: Session,
    repo: ProductRepository | None = None,
) -> int:
    """
    Insert MOCK_PRODUCTS if the catalog is empty.

    Safe to run on every startup: a populated catalog is left alone.

    Returns:
        Number of products inserted (0 when skipped).
    """
    repo = repo or ProductRepository()

    if repo.count(session) > 0:
        logger.info("Catalog already contains products. Skipping seed.")
        return 0

    logger.info("No products found. Seeding catalog...")
    products = repo.create_many(
        session, [Product(**data) for data in MOCK_PRODUCTS]
    )
    logger.info("Catalog seeded with %d mock products.", len(products))
    return len(products)
