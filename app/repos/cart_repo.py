# app/repos/cart_repo.py
from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from app.data.models.cart import CartModel
from app.domain.errors import CartConflictError


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def find_cart_by_user(self, user_id: int) -> CartModel | None:
        return self.db.execute(
            select(CartModel)
            .where(CartModel.user_id == user_id)
            .options(selectinload(CartModel.items))
        ).scalar_one_or_none()

    def save_cart(self, cart: CartModel) -> CartModel:
        """
        Zapis z optimistic lockingiem.
        Nowy koszyk: INSERT, drugi rownolegly INSERT dla tego samego usera wpada na unique(user_id).
        Istniejacy: UPDATE ... SET version = version + 1 WHERE id = :id AND version = :odczytana.
        """
        try:
            if cart.id is None:
                self.db.add(cart)
                self.db.flush()
            else:
                self.db.flush()
                rowcount = self.db.execute(
                    update(CartModel)
                    .where(CartModel.id == cart.id, CartModel.version == cart.version)
                    .values(
                        version=CartModel.version + 1,
                        updated_at=datetime.now(timezone.utc),
                    )
                    .execution_options(synchronize_session=False)
                ).rowcount

                if rowcount == 0:
                    self.db.rollback()
                    raise CartConflictError()

            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise CartConflictError() from e

        self.db.refresh(cart)
        return cart

    def delete_cart(self, user_id: int) -> bool:
        cart = self.find_cart_by_user(user_id)
        if not cart:
            return False
        self.db.delete(cart)
        self.db.commit()
        return True
