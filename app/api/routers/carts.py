#app/api/routers/carts.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.data.database import get_db
from app.domain.schemas import (
    CartItemIn,
    CartOut,
    MessageOut,
    UserRead,
)
from app.repos.cart_repo import CartRepo
from app.repos.product_repo import ProductRepo
from app.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(
        carts=CartRepo(db),
        products=ProductRepo(db),
    )


@router.get(
    "",
    response_model=CartOut,
    responses={404: {"model": MessageOut, "description": "Cart not found"}},
)
def get_cart(
    user: UserRead = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Koszyk zalogowanego usera z danymi produktow."""
    return get_service(db).get_cart(user.id)


@router.post(
    "",
    response_model=CartOut,
    responses={400: {"model": MessageOut, "description": "Invalid input"}},
)
def add_item(
    payload: CartItemIn,
    user: UserRead = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Dodaje produkt, ilosci tego samego produktu sie sumuja."""
    svc = get_service(db)
    return svc.add_product(
        user_id=user.id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )


@router.delete(
    "",
    response_model=MessageOut,
    responses={404: {"model": MessageOut, "description": "Cart not found"}},
)
def clear_cart(
    user: UserRead = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    get_service(db).clear_cart(user.id)
    return {"message": "Cart cleared successfully"}
