"""
Product repository.

``ProductRepository`` is the abstract store the service layer depends
on.  ``SQLiteProductRepository`` implements it on top of the
``products`` table.  All queries use parameterized statements.  Every
method opens its own connection and closes it before returning, so
there is no session state shared between calls.
"""

from __future__ import annotations

import math
import sqlite3
from abc import ABC, abstractmethod
from typing import List, Optional

from product_api.app.core.db import get_connection, get_database_path
from product_api.app.core.exceptions import ProductNotFoundError
from product_api.app.models.product import Product, ProductPage


def check_page_request(page_index: int, page_size: int) -> None:
    """Reject page coordinates that cannot describe a slice."""
    if page_index < 0:
        raise ValueError("page index must not be less than zero")
    if page_size < 1:
        raise ValueError("page size must not be less than one")


def count_pages(total_elements: int, page_size: int) -> int:
    return math.ceil(total_elements / page_size)


class ProductRepository(ABC):

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Insert a product without an id, or update the row matching its id.

        Returns a fresh ``Product``; on insert it carries the generated
        id.  Raises ``ProductNotFoundError`` when updating an id that
        has no row.
        """

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product:
        """Return the product with ``product_id`` or raise ``ProductNotFoundError``."""

    @abstractmethod
    def delete(self, product: Product) -> None:
        """Remove the row matching ``product.id`` or raise ``ProductNotFoundError``."""

    @abstractmethod
    def find_page(self, category: Optional[str], page_index: int, page_size: int) -> ProductPage:
        """Return one page of products whose category equals ``category``.

        Matching is exact: ``""`` matches only empty categories and
        ``None`` matches only products without a category.  Items are
        ordered by category ascending.
        """

    @abstractmethod
    def find_distinct_categories(self) -> List[Optional[str]]:
        """Return every category in use, once each.

        Products without a category contribute a single ``None`` entry.
        """


class SQLiteProductRepository(ProductRepository):
    """Product repository backed by a SQLite file."""

    def __init__(self, database_path: Optional[str] = None) -> None:
        self._database_path = database_path or get_database_path()

    def save(self, product: Product) -> Product:
        conn = get_connection(self._database_path)
        try:
            cursor = conn.cursor()
            if product.id is None:
                cursor.execute(
                    "INSERT INTO products (category, name) VALUES (?, ?)",
                    (product.category, product.name),
                )
                product_id = cursor.lastrowid
            else:
                cursor.execute(
                    "UPDATE products SET category = ?, name = ? WHERE id = ?",
                    (product.category, product.name, product.id),
                )
                if cursor.rowcount == 0:
                    conn.rollback()
                    raise ProductNotFoundError()
                product_id = product.id
            conn.commit()
            return Product(id=product_id, category=product.category, name=product.name)
        finally:
            conn.close()

    def find_by_id(self, product_id: int) -> Product:
        conn = get_connection(self._database_path)
        try:
            row = conn.execute(
                "SELECT id, category, name FROM products WHERE id = ?",
                (product_id,),
            ).fetchone()
            if row is None:
                raise ProductNotFoundError()
            return self._row_to_product(row)
        finally:
            conn.close()

    def delete(self, product: Product) -> None:
        conn = get_connection(self._database_path)
        try:
            cursor = conn.execute("DELETE FROM products WHERE id = ?", (product.id,))
            if cursor.rowcount == 0:
                conn.rollback()
                raise ProductNotFoundError()
            conn.commit()
        finally:
            conn.close()

    def find_page(self, category: Optional[str], page_index: int, page_size: int) -> ProductPage:
        check_page_request(page_index, page_size)
        # ``IS`` compares NULL to NULL as equal and otherwise behaves like ``=``.
        conn = get_connection(self._database_path)
        try:
            total = conn.execute(
                "SELECT COUNT(*) AS c FROM products WHERE category IS ?",
                (category,),
            ).fetchone()["c"]
            rows = conn.execute(
                """
                SELECT id, category, name FROM products
                WHERE category IS ?
                ORDER BY category ASC, id ASC
                LIMIT ? OFFSET ?
                """,
                (category, page_size, page_index * page_size),
            ).fetchall()
            return ProductPage(
                items=[self._row_to_product(row) for row in rows],
                total_pages=count_pages(total, page_size),
                total_elements=total,
                page_index=page_index,
            )
        finally:
            conn.close()

    def find_distinct_categories(self) -> List[Optional[str]]:
        conn = get_connection(self._database_path)
        try:
            rows = conn.execute(
                """
                SELECT category FROM products
                GROUP BY category
                ORDER BY category ASC
                """
            ).fetchall()
            return [row["category"] for row in rows]
        finally:
            conn.close()

    @staticmethod
    def _row_to_product(row: sqlite3.Row) -> Product:
        return Product(id=row["id"], category=row["category"], name=row["name"])
