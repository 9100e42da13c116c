# app/repos/stores.py
"""
Waskie interfejsy persystencji uzywane przez serwisy.
Implementacje SQLAlchemy: CartRepo, OrderRepo; w testach mozna podstawic cokolwiek
co ma te same metody.
"""
from typing import List, Protocol

from app.data.models.cart import CartModel
from app.data.models.order import OrderModel


class CartStore(Protocol):
    def find_cart_by_user(self, user_id: int) -> CartModel | None: ...

    def save_cart(self, cart: CartModel) -> CartModel: ...

    def delete_cart(self, user_id: int) -> bool: ...


class OrderStore(Protocol):
    def create_order(self, order: OrderModel) -> OrderModel: ...

    def find_orders_by_user(self, user_id: int) -> List[OrderModel]: ...

    def get_order(self, order_id: int) -> OrderModel | None: ...

    def update_order_status(self, order_id: int, status: str) -> OrderModel | None: ...
