"""Product use cases on top of the repository."""

from __future__ import annotations

from .models import CreateResponse, Product
from .repository import ProductRepository


class ProductService:
    """The operations the HTTP layer offers on products."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def all_products(self) -> list[Product]:
        return self._repository.get_products()

    def fetch_product(self, product_id: int) -> Product:
        return self._repository.get_product(product_id)

    def create_product(self, product: Product) -> CreateResponse:
        """Store ``product`` and report its new id, code and name."""
        created = self._repository.create_product(product)
        return CreateResponse(created.id, created.product_code, created.name)

    def delete_product(self, product_id: int) -> None:
        self._repository.delete_product(product_id)

    def delete_all_products(self) -> None:
        self._repository.delete_all_products()

    def update_product(self, product: Product) -> None:
        self._repository.update_product(product)