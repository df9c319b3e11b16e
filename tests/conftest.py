"""
Pytest configuration and fixtures.

Every test gets a fresh in-memory SQLite database. The API client shares
the test's session so data set up in a test is visible to requests.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from app.database import get_session
from app.main import app
from app.models.product import Product
from app.repositories.cart_repo import CartRepository
from app.repositories.product_repo import ProductRepository
from app.services.cart_service import CartService


def make_product(session: Session, name: str, price: float) -> Product:
    product = Product(
        name=name,
        price=price,
        image=f"https://placehold.co/400x400?text={name.replace(' ', '+')}",
    )
    session.add(product)
    session.commit()
    session.refresh(product)
    return product


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(session):
    """API client wired to the test database (lifespan is not run)."""

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def cart_repo():
    return CartRepository()


@pytest.fixture
def product_repo():
    return ProductRepository()


@pytest.fixture
def cart_service(cart_repo, product_repo):
    return CartService(cart_repo, product_repo)


@pytest.fixture
def tee(session):
    return make_product(session, "Classic Vibe Tee", 25.00)


@pytest.fixture
def mug(session):
    return make_product(session, "Aesthetic Vibe Mug", 12.99)


@pytest.fixture
def cap(session):
    return make_product(session, "Vibe Snapback Cap", 18.50)
