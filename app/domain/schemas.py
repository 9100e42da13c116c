# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr
from pydantic.alias_generators import to_camel
from typing import List, Dict, Any
from decimal import Decimal
from datetime import datetime
from enum import Enum


class CamelModel(BaseModel):
    """Baza dla schem API: camelCase na zewnatrz, snake_case w kodzie."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageOut(CamelModel):
    message: str


# ---------------------------------------------------------------- auth

class UserCreate(CamelModel):
    """Schema dla rejestracji użytkownika."""

    name: str = Field(..., min_length=1, max_length=100, description="Imię użytkownika")
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)


class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserRead(CamelModel):
    """Schema dla użytkownika (response)."""

    id: int
    name: str
    email: str


class TokenOut(CamelModel):
    token: str
    user: UserRead


# ------------------------------------------------------------- products

class ProductCreate(CamelModel):
    name: str = Field(..., min_length=1, examples=["Keyboard"])
    description: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, examples=[199.99])
    category: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1)
    count_in_stock: int = Field(0, ge=0)


class ProductUpdate(CamelModel):
    """Czesciowa aktualizacja, pola pominiete zostaja bez zmian."""

    name: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    category: str | None = Field(None, min_length=1)
    image_url: str | None = Field(None, min_length=1)
    count_in_stock: int | None = Field(None, ge=0)


class ProductOut(CamelModel):
    id: int
    name: str
    description: str
    price: float
    category: str
    image_url: str
    count_in_stock: int
    created_at: datetime
    updated_at: datetime


# ----------------------------------------------------------------- cart

class CartItemIn(CamelModel):
    """
    Schema dla dodawania produktu do koszyka.
    Oba pola opcjonalne na poziomie schemy, brak sprawdza serwis (400 z komunikatem).
    """

    product_id: int | None = Field(None, ge=0, description="ID produktu, 0 traktowane jak brak", examples=[1])
    quantity: int | None = Field(None, ge=0, description="Ilość produktu, 0 traktowane jak brak", examples=[2])


class CartLineOut(CamelModel):
    product_id: int
    quantity: int
    # None gdy produkt zostal usuniety z katalogu
    product: ProductOut | None = None


class CartOut(CamelModel):
    """Schema dla koszyka (response)."""

    id: int
    user_id: int
    products: List[CartLineOut]
    created_at: datetime
    updated_at: datetime


# --------------------------------------------------------------- orders

class OrderStatus(str, Enum):
    PENDING = "pending"
    SHIPPED = "shipped"
    DELIVERED = "delivered"


class OrderLine(CamelModel):
    product_id: int = Field(..., gt=0, examples=[1])
    quantity: int = Field(..., gt=0, examples=[2])


class OrderCreate(CamelModel):
    """Schema dla tworzenia zamówienia, przyjmowana bez przeliczania ceny."""

    products: List[OrderLine] = Field(..., min_length=1)
    amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, examples=[59.98])
    address: Dict[str, Any] = Field(
        ...,
        min_length=1,
        examples=[{"street": "123 Main St", "city": "Anytown", "zip": "12345", "country": "USA"}],
    )


class OrderStatusIn(CamelModel):
    status: OrderStatus


class OrderOut(CamelModel):
    """Schema dla zamówienia (response)."""

    id: int
    user_id: int
    products: List[OrderLine]
    amount: float
    address: Dict[str, Any]
    status: OrderStatus
    created_at: datetime
    updated_at: datetime
