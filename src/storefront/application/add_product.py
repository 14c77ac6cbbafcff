"""Application service: Add Product use case."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


def next_sequential_id(existing_ids: list[str]) -> str:
    """Next id after the highest numeric id in *existing_ids*."""
    numeric = [int(i) for i in existing_ids if i.isdigit()]
    return str(max(numeric) + 1) if numeric else "1"


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str, image: str = "") -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        product = Product(
            id=next_sequential_id([p.id for p in self._product_repo.list_all()]),
            name=name.strip(),
            price=Money.of(price),
            image=image.strip(),
        )
        if product.price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self._product_repo.save(product)
        return product
