"""Product entity and the paged view over it.

A ``Product`` is created without an id; the repository assigns one
when the record is first saved and hands back a fresh value carrying
it.  Only ``category`` and ``name`` ever change, and only through
``replace``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Product:
    """A single product record."""

    category: Optional[str]
    name: Optional[str] = None
    id: Optional[int] = None

    def replace(self, category: Optional[str], name: Optional[str]) -> None:
        """Overwrite both mutable fields.

        This is a full replacement: passing ``None`` clears the field.
        """
        self.category = category
        self.name = name


@dataclass(frozen=True)
class ProductPage:
    """One page of products plus totals for the whole result set."""

    items: List[Product] = field(default_factory=list)
    total_pages: int = 0
    total_elements: int = 0
    page_index: int = 0
