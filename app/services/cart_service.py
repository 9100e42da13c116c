# app/services/cart_service.py
from typing import Dict, Any

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.domain.errors import BadRequestError, NotFoundError
from app.domain.schemas import ProductOut
from app.repos.product_repo import ProductRepo
from app.repos.stores import CartStore
from app.utils.retry import cart_conflict_retry
from app.utils.logging import get_logger

logger = get_logger(__name__)


def merge_line(cart: CartModel, product_id: int, quantity: int) -> CartItemModel:
    """
    Jedna pozycja na product_id: istniejaca dostaje += quantity,
    nowa idzie na koniec. Bez limitu wzgledem stanu magazynu.
    """
    for item in cart.items:
        if item.product_id == product_id:
            item.quantity += quantity
            return item

    item = CartItemModel(product_id=product_id, quantity=quantity)
    cart.items.append(item)
    return item


class CartService:
    """
    Use case'y koszyka: get (query), add_product i clear_cart (commands).
    Jeden koszyk na usera, tworzony leniwie przy pierwszym dodaniu.
    """

    def __init__(self, carts: CartStore, products: ProductRepo):
        self.carts = carts
        self.products = products

    #query
    def get_cart(self, user_id: int) -> Dict[str, Any]:
        cart = self.carts.find_cart_by_user(user_id)
        if not cart:
            raise NotFoundError("Cart not found")
        return self._to_dict(cart)

    #commands
    def add_product(self, user_id: int, product_id: int | None, quantity: int | None) -> Dict[str, Any]:
        if not product_id or not quantity:
            raise BadRequestError("Product ID and quantity are required")

        return self._merge_and_save(user_id, product_id, quantity)

    @cart_conflict_retry()
    def _merge_and_save(self, user_id: int, product_id: int, quantity: int) -> Dict[str, Any]:
        # kazda proba czyta koszyk od nowa, po konflikcie sesja jest po rollbacku
        cart = self.carts.find_cart_by_user(user_id)
        if not cart:
            logger.info(f"Creating cart for user {user_id}")
            cart = CartModel(user_id=user_id, version=1)

        item = merge_line(cart, product_id, quantity)
        saved = self.carts.save_cart(cart)

        logger.info(
            f"Cart {saved.id}: product {product_id} quantity now {item.quantity}, "
            f"version {saved.version}"
        )
        return self._to_dict(saved)

    def clear_cart(self, user_id: int) -> None:
        if not self.carts.delete_cart(user_id):
            raise NotFoundError("Cart not found")
        logger.info(f"Cart of user {user_id} cleared")

    def _to_dict(self, cart: CartModel) -> Dict[str, Any]:
        # odpowiednik populate, produkt usuniety z katalogu -> None
        catalog = self.products.get_products_by_ids(i.product_id for i in cart.items)

        return {
            "id": cart.id,
            "user_id": cart.user_id,
            "products": [
                {
                    "product_id": i.product_id,
                    "quantity": i.quantity,
                    "product": (
                        ProductOut.model_validate(catalog[i.product_id])
                        if i.product_id in catalog
                        else None
                    ),
                }
                for i in cart.items
            ],
            "created_at": cart.created_at,
            "updated_at": cart.updated_at,
        }
