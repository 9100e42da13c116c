# app/api/__init__.py
from fastapi import APIRouter
from app.api.routers import auth, products, carts, orders

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(products.router)
api_router.include_router(carts.router)
api_router.include_router(orders.router)
