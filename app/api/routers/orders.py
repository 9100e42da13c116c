# app/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.data.database import get_db
from app.domain.errors import BadRequestError
from app.domain.schemas import MessageOut, OrderCreate, OrderOut, OrderStatusIn, UserRead
from app.repos.order_repo import OrderRepo
from app.repos.product_repo import ProductRepo
from app.services.order_service import OrderService
from app.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(OrderRepo(db), ProductRepo(db))


@router.post(
    "",
    response_model=OrderOut,
    status_code=201,
    responses={400: {"model": MessageOut, "description": "Bad request"}},
)
def create_order(
    payload: OrderCreate,
    user: UserRead = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Tworzy zamówienie z przyslanych pozycji, kwoty i adresu.
    """
    svc = get_service(db)
    try:
        return svc.create_order(user.id, payload)
    except SQLAlchemyError:
        # blad zapisu to dla klienta zwykle 400, szczegoly tylko w logu
        logger.exception("Order could not be saved")
        db.rollback()
        raise BadRequestError("Bad request")


@router.get(
    "/user/{user_id}",
    response_model=List[OrderOut],
    responses={404: {"model": MessageOut, "description": "Orders not found"}},
)
def get_user_orders(
    user_id: int,
    user: UserRead = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return get_service(db).get_orders_for_user(user_id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int,
    user: UserRead = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Pobiera szczegóły zamówienia.
    """
    return get_service(db).get_order(order_id, user.id)


@router.put("/{order_id}/status", response_model=OrderOut)
def update_order_status(
    order_id: int,
    payload: OrderStatusIn,
    user: UserRead = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return get_service(db).update_status(order_id, payload.status)
