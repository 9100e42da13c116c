# app/services/order_service.py
from typing import List

from app.data.models.order import OrderModel
from app.domain.errors import ForbiddenError, NotFoundError
from app.domain.schemas import OrderCreate, OrderLine, OrderStatus
from app.repos.product_repo import ProductRepo
from app.repos.stores import OrderStore
from app.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    Zamowienie to snapshot tego co przyslal klient, bez powiazania z koszykiem.
    """

    def __init__(self, orders: OrderStore, products: ProductRepo):
        self.orders = orders
        self.products = products

    def create_order(self, user_id: int, payload: OrderCreate) -> OrderModel:
        """
        Use Case: Tworzenie zamówienia.

        Produkty i kwota zapisywane dokladnie tak jak przyszly, bez przeliczania
        ceny i bez zdejmowania ze stanu. Braki na magazynie tylko logujemy.
        """
        self._warn_on_oversell(payload.products)

        order = OrderModel(
            user_id=user_id,
            products=[line.model_dump(by_alias=True) for line in payload.products],
            amount=payload.amount,
            address=payload.address,
            status=OrderStatus.PENDING.value,
        )

        created = self.orders.create_order(order)

        logger.info(f"Order {created.id} created for user {user_id}, amount {created.amount}")
        return created

    def get_orders_for_user(self, user_id: int) -> List[OrderModel]:
        orders = self.orders.find_orders_by_user(user_id)
        if not orders:
            raise NotFoundError("Orders not found")
        return orders

    def get_order(self, order_id: int, user_id: int) -> OrderModel:
        """
        Use Case: Pobranie zamówienia (Query).
        """
        order = self.orders.get_order(order_id)

        if not order:
            raise NotFoundError("Order not found")

        if order.user_id != user_id:
            raise ForbiddenError("Access to this order is denied")

        return order

    def update_status(self, order_id: int, status: OrderStatus) -> OrderModel:
        order = self.orders.update_order_status(order_id, status.value)
        if not order:
            raise NotFoundError("Order not found")

        logger.info(f"Order {order_id} status set to {status.value}")
        return order

    def _warn_on_oversell(self, lines: List[OrderLine]):
        catalog = self.products.get_products_by_ids(line.product_id for line in lines)
        for line in lines:
            product = catalog.get(line.product_id)
            if product is None:
                logger.warning(f"Order line references unknown product {line.product_id}")
            elif line.quantity > product.count_in_stock:
                logger.warning(
                    f"Order line for product {line.product_id} exceeds stock "
                    f"({line.quantity} > {product.count_in_stock})"
                )
