"""
Service layer for products.

``ProductService`` holds the business rules for the product resource:
existence checks, full-replacement updates and the translation of list
requests into repository page queries.  The repository is handed in at
construction time; the service keeps no other state.

The only business error is ``ProductNotFoundError``, raised by the
repository when an id has no row.  It and anything else the repository
raises (e.g. ``sqlite3.Error``) propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from product_api.app.models.product import Product, ProductPage
from product_api.app.repositories.product_repository import ProductRepository


logger = logging.getLogger(__name__)


class ProductService:
    """Service class for managing products."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def create(self, category: Optional[str], name: Optional[str] = None) -> Product:
        """Persist a new product and return it with its generated id."""
        product = self._repository.save(Product(category=category, name=name))
        logger.info("Created product %s in category %r", product.id, product.category)
        return product

    def get_by_id(self, product_id: int) -> Product:
        """Return the product with ``product_id``.

        Raises ``ProductNotFoundError`` when it does not exist.  Update
        and delete go through here so the existence check lives in one
        place.
        """
        return self._repository.find_by_id(product_id)

    def update(self, product_id: int, category: Optional[str], name: Optional[str]) -> Product:
        """Replace both fields of an existing product.

        Values are written as given, so ``None`` clears a field.
        Concurrent updates to the same id are last-write-wins.
        """
        product = self.get_by_id(product_id)
        product.replace(category, name)
        updated = self._repository.save(product)
        logger.info("Updated product %s", product_id)
        return updated

    def delete_by_id(self, product_id: int) -> None:
        product = self.get_by_id(product_id)
        self._repository.delete(product)
        logger.info("Deleted product %s", product_id)

    def list_by_category(self, category: Optional[str], page_index: int, page_size: int) -> ProductPage:
        """Return one page of products in ``category``, sorted by category ascending."""
        return self._repository.find_page(category, page_index, page_size)

    def list_unique_categories(self) -> List[Optional[str]]:
        return self._repository.find_distinct_categories()
