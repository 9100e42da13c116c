# app/services/product_service.py
from typing import List

from app.data.models.product import ProductModel
from app.domain.errors import NotFoundError
from app.domain.schemas import ProductCreate, ProductUpdate
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    def __init__(self, repo: ProductRepo):
        self.repo = repo

    def list_products(self, category: str | None = None) -> List[ProductModel]:
        return self.repo.list_products(category)

    def get_product(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    def create_product(self, payload: ProductCreate) -> ProductModel:
        created = self.repo.create_product(ProductModel(**payload.model_dump()))
        logger.info(f"Product {created.id} created")
        return created

    def update_product(self, product_id: int, payload: ProductUpdate) -> ProductModel:
        product = self.get_product(product_id)
        # tylko pola ktore klient faktycznie przyslal
        changes = payload.model_dump(exclude_unset=True)
        return self.repo.update_product(product, changes)

    def delete_product(self, product_id: int) -> None:
        """Koszyki i zamowienia trzymaja samo id, nic nie kaskadujemy."""
        product = self.get_product(product_id)
        self.repo.delete_product(product)
        logger.info(f"Product {product_id} deleted")
