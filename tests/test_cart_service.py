"""Testy serwisu i repo koszyka: merge, optimistic locking, retry."""

import pytest
from sqlalchemy import text

from app.data.models.cart import CartModel
from app.domain.errors import BadRequestError, CartConflictError, NotFoundError
from app.repos.cart_repo import CartRepo
from app.repos.product_repo import ProductRepo
from app.services.cart_service import CartService, merge_line
from app.utils.settings import CART_SAVE_ATTEMPTS


class FlakyCartRepo(CartRepo):
    """Pierwsze `failures` zapisow konczy sie konfliktem, jak przy rownoleglym zapisie."""

    def __init__(self, db, failures):
        super().__init__(db)
        self.failures = failures
        self.calls = 0

    def save_cart(self, cart):
        self.calls += 1
        if self.calls <= self.failures:
            self.db.rollback()
            raise CartConflictError()
        return super().save_cart(cart)


def _service(db, repo=None):
    return CartService(carts=repo or CartRepo(db), products=ProductRepo(db))


class TestMergeLine:
    def test_merges_existing_product(self):
        cart = CartModel(user_id=1, version=1)
        merge_line(cart, 5, 2)
        merge_line(cart, 5, 3)

        assert [(i.product_id, i.quantity) for i in cart.items] == [(5, 5)]

    def test_appends_new_product_at_the_end(self):
        cart = CartModel(user_id=1, version=1)
        merge_line(cart, 5, 2)
        merge_line(cart, 6, 1)

        assert [(i.product_id, i.quantity) for i in cart.items] == [(5, 2), (6, 1)]


class TestCartService:
    def test_add_creates_and_merges(self, db):
        svc = _service(db)
        svc.add_product(1, 5, 2)
        cart = svc.add_product(1, 5, 3)

        assert [(l["product_id"], l["quantity"]) for l in cart["products"]] == [(5, 5)]

    @pytest.mark.parametrize("product_id,quantity", [(None, 1), (5, None), (0, 1), (5, 0)])
    def test_missing_fields(self, db, product_id, quantity):
        with pytest.raises(BadRequestError):
            _service(db).add_product(1, product_id, quantity)

    def test_get_and_clear_missing_cart(self, db):
        svc = _service(db)

        with pytest.raises(NotFoundError):
            svc.get_cart(1)
        with pytest.raises(NotFoundError):
            svc.clear_cart(1)

    def test_conflict_is_retried_on_fresh_state(self, db):
        _service(db).add_product(1, 5, 2)
        repo = FlakyCartRepo(db, failures=1)

        cart = _service(db, repo).add_product(1, 5, 3)

        assert repo.calls == 2
        # quantity z nieudanej proby nie moze sie doliczyc drugi raz
        assert cart["products"][0]["quantity"] == 5

    def test_conflict_on_first_cart_is_retried(self, db):
        repo = FlakyCartRepo(db, failures=1)

        cart = _service(db, repo).add_product(1, 5, 3)

        assert repo.calls == 2
        assert cart["products"][0]["quantity"] == 3

    def test_gives_up_after_configured_attempts(self, db):
        repo = FlakyCartRepo(db, failures=CART_SAVE_ATTEMPTS)

        with pytest.raises(CartConflictError):
            _service(db, repo).add_product(1, 5, 3)

        assert repo.calls == CART_SAVE_ATTEMPTS


class TestCartRepo:
    def test_stale_version_is_a_conflict(self, db):
        repo = CartRepo(db)
        _service(db, repo).add_product(1, 5, 2)

        cart = repo.find_cart_by_user(1)
        # ktos inny zapisal w miedzyczasie, obiekt w pamieci ma stara wersje
        db.execute(text("UPDATE carts SET version = version + 1 WHERE user_id = 1"))
        merge_line(cart, 5, 1)

        with pytest.raises(CartConflictError):
            repo.save_cart(cart)

        assert repo.find_cart_by_user(1).items[0].quantity == 2

    def test_duplicate_cart_for_user_is_a_conflict(self, db):
        repo = CartRepo(db)
        repo.save_cart(CartModel(user_id=1, version=1))

        with pytest.raises(CartConflictError):
            repo.save_cart(CartModel(user_id=1, version=1))

    def test_save_bumps_version(self, db):
        repo = CartRepo(db)
        cart = repo.save_cart(CartModel(user_id=1, version=1))
        merge_line(cart, 5, 1)

        assert repo.save_cart(cart).version == 2

    def test_delete_cart(self, db):
        repo = CartRepo(db)
        repo.save_cart(CartModel(user_id=1, version=1))

        assert repo.delete_cart(1) is True
        assert repo.delete_cart(1) is False
        assert repo.find_cart_by_user(1) is None
