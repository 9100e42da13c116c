# app/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.data.database import get_db
from app.domain.schemas import MessageOut, ProductCreate, ProductOut, ProductUpdate, UserRead
from app.repos.product_repo import ProductRepo
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def get_service(db: Session):
    return ProductService(ProductRepo(db))


@router.get("", response_model=List[ProductOut])
def list_products(
    category: str | None = Query(None),
    db: Session = Depends(get_db),
):
    return get_service(db).list_products(category)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return get_service(db).get_product(product_id)


@router.post("", response_model=ProductOut, status_code=201)
def create_product(
    payload: ProductCreate,
    user: UserRead = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return get_service(db).create_product(payload)


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    user: UserRead = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return get_service(db).update_product(product_id, payload)


@router.delete("/{product_id}", response_model=MessageOut)
def delete_product(
    product_id: int,
    user: UserRead = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    get_service(db).delete_product(product_id)
    return {"message": "Product deleted"}
