# seed_db.py
import logging

from sqlmodel import Session

from app.core.seed import seed_products
from app.database import create_db_and_tables, engine

# Import models so SQLModel metadata is populated before create_all()
from app.models import product as _product_models  # noqa: F401
from app.models import cart as _cart_models  # noqa: F401


def main():
    logging.basicConfig(level=logging.INFO)

    create_db_and_tables()
    with Session(engine) as session:
        inserted = seed_products(session)

    print(f"Inserted {inserted} product(s).")


if __name__ == "__main__":
    main()
