"""In-memory fake repository for testing.

Implements the same abstract interface as the SQLite repository but
keeps everything in a dict.  Values are copied on the way in and out,
so callers never share state with the store.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Optional

from product_api.app.core.exceptions import ProductNotFoundError
from product_api.app.models.product import Product, ProductPage
from product_api.app.repositories.product_repository import (
    ProductRepository,
    check_page_request,
    count_pages,
)


class FakeProductRepository(ProductRepository):

    def __init__(self) -> None:
        self._store: Dict[int, Product] = {}
        self._next_id = 1

    def save(self, product: Product) -> Product:
        if product.id is None:
            product = replace(product, id=self._next_id)
            self._next_id += 1
        elif product.id not in self._store:
            raise ProductNotFoundError()
        self._store[product.id] = replace(product)
        return replace(product)

    def find_by_id(self, product_id: int) -> Product:
        if product_id not in self._store:
            raise ProductNotFoundError()
        return replace(self._store[product_id])

    def delete(self, product: Product) -> None:
        if self._store.pop(product.id, None) is None:
            raise ProductNotFoundError()

    def find_page(self, category: Optional[str], page_index: int, page_size: int) -> ProductPage:
        check_page_request(page_index, page_size)
        matches = sorted(
            (p for p in self._store.values() if p.category == category),
            key=lambda p: p.id,
        )
        start = page_index * page_size
        return ProductPage(
            items=[replace(p) for p in matches[start:start + page_size]],
            total_pages=count_pages(len(matches), page_size),
            total_elements=len(matches),
            page_index=page_index,
        )

    def find_distinct_categories(self) -> List[Optional[str]]:
        # NULL sorts first, as in SQLite.
        return sorted(
            {p.category for p in self._store.values()},
            key=lambda c: (c is not None, c or ""),
        )
