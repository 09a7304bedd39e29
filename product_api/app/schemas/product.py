"""
Pydantic schemas for products.

``ProductCreate`` and ``ProductUpdate`` are the request bodies for the
write endpoints, ``ProductListRequest`` carries the category filter and
page coordinates, and ``ProductRead``/``ProductListResponse`` describe
what the API returns.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from product_api.app.core.config import settings


class ProductCreate(BaseModel):
    """Schema for creating a product.

    ``category`` is expected but not enforced; ``name`` may be omitted.
    """

    category: Optional[str] = Field(None, description="Free-text category label")
    name: Optional[str] = Field(None, description="Product name")


class ProductUpdate(BaseModel):
    """Schema for updating a product.

    Both ``category`` and ``name`` replace the stored values.  Omitting
    one of them clears it; this is not a partial update.
    """

    id: int = Field(..., description="Identifier of the product to update")
    category: Optional[str] = None
    name: Optional[str] = None


class ProductListRequest(BaseModel):
    """Schema for listing one page of a category."""

    category: Optional[str] = Field(None, description="Exact category to match")
    page_index: int = Field(0, ge=0, description="Zero-based page number")
    page_size: int = Field(
        settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Number of items per page",
    )


class ProductRead(BaseModel):
    """Schema for reading a product."""

    id: int
    category: Optional[str]
    name: Optional[str]

    model_config = {
        "from_attributes": True,
    }


class ProductListResponse(BaseModel):
    """A page of products with totals for the whole filtered set."""

    items: List[ProductRead]
    total_pages: int
    total_elements: int
    page_index: int

    model_config = {
        "from_attributes": True,
    }
