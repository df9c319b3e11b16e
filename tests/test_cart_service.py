"""
Cart service: joined view, totals and overwrite semantics.
"""
import uuid

import pytest

from app.core.exceptions import NotFoundError, ValidationError
from app.models.cart import CartItem


def quantities(summary):
    return {it.product_id: it.quantity for it in summary.items}


class TestGetCart:
    def test_empty_cart(self, session, cart_service):
        summary = cart_service.get_cart(session)

        assert summary.items == []
        assert summary.total == 0
        assert summary.total_quantity == 0

    def test_total_is_sum_of_price_times_quantity(self, session, cart_service, mug, cap):
        cart_service.add_or_set_quantity(session, mug.id, 1)
        cart_service.add_or_set_quantity(session, cap.id, 3)

        summary = cart_service.get_cart(session)

        # 12.99 + 3 * 18.50
        assert summary.total == 68.49
        assert summary.total_quantity == 4
        line_totals = {it.product_id: it.line_total for it in summary.items}
        assert line_totals == {mug.id: 12.99, cap.id: 55.50}

    def test_total_is_rounded_to_cents(self, session, cart_service, mug):
        cart_service.add_or_set_quantity(session, mug.id, 7)

        # 7 * 12.99 = 90.93, no float noise
        assert cart_service.get_cart(session).total == 90.93

    def test_dangling_item_is_listed_but_not_totalled(self, session, cart_service, tee):
        cart_service.add_or_set_quantity(session, tee.id, 2)
        orphan = CartItem(product_id=uuid.uuid4(), quantity=5)
        session.add(orphan)
        session.commit()

        summary = cart_service.get_cart(session)

        assert len(summary.items) == 2
        orphan_read = next(it for it in summary.items if it.id == orphan.id)
        assert orphan_read.product is None
        assert orphan_read.line_total == 0
        assert summary.total == 50.00


class TestAddOrSetQuantity:
    def test_overwrite_not_accumulate(self, session, cart_service, tee):
        cart_service.add_or_set_quantity(session, tee.id, 2)
        assert cart_service.get_cart(session).total == 50.00

        cart_service.add_or_set_quantity(session, tee.id, 1)
        summary = cart_service.get_cart(session)

        assert summary.total == 25.00
        assert quantities(summary) == {tee.id: 1}

    def test_returns_joined_item(self, session, cart_service, tee):
        item = cart_service.add_or_set_quantity(session, tee.id, 3)

        assert item.product.name == "Classic Vibe Tee"
        assert item.quantity == 3
        assert item.line_total == 75.00

    @pytest.mark.parametrize("quantity", [0, -1, None])
    def test_invalid_quantity(self, session, cart_service, tee, quantity):
        with pytest.raises(ValidationError):
            cart_service.add_or_set_quantity(session, tee.id, quantity)

    def test_missing_product_id(self, session, cart_service):
        with pytest.raises(ValidationError):
            cart_service.add_or_set_quantity(session, None, 1)

    def test_unknown_product(self, session, cart_service):
        with pytest.raises(NotFoundError) as exc_info:
            cart_service.add_or_set_quantity(session, uuid.uuid4(), 1)

        assert exc_info.value.entity_name == "Product"


class TestRemoveItem:
    def test_removed_item_is_gone_from_cart(self, session, cart_service, tee, mug):
        item = cart_service.add_or_set_quantity(session, tee.id, 1)
        cart_service.add_or_set_quantity(session, mug.id, 1)

        removed = cart_service.remove_item(session, str(item.id))

        assert removed.id == item.id
        summary = cart_service.get_cart(session)
        assert [it.product_id for it in summary.items] == [mug.id]
        assert summary.total == 12.99

    def test_unknown_id(self, session, cart_service):
        with pytest.raises(NotFoundError):
            cart_service.remove_item(session, str(uuid.uuid4()))

    def test_malformed_id(self, session, cart_service):
        with pytest.raises(NotFoundError):
            cart_service.remove_item(session, "not-a-uuid")
