import uuid

import pytest

from app.core.exceptions import NotFoundError
from app.services.product_service import ProductService


@pytest.fixture
def product_service(product_repo):
    return ProductService(product_repo)


def test_get_product(session, product_service, tee):
    product = product_service.get_product(session, tee.id)

    assert product.name == "Classic Vibe Tee"
    assert product.price == 25.00


def test_get_unknown_product(session, product_service):
    missing = uuid.uuid4()

    with pytest.raises(NotFoundError) as exc_info:
        product_service.get_product(session, missing)

    assert exc_info.value.entity_name == "Product"
    assert exc_info.value.entity_id == str(missing)


def test_list_products(session, product_service, tee, mug):
    names = [p.name for p in product_service.list_products(session)]

    assert sorted(names) == ["Aesthetic Vibe Mug", "Classic Vibe Tee"]
