"""
Product endpoints for API v1.

These routes expose CRUD operations on products, a paged listing by
category and the list of categories currently in use.  Errors are not
translated here: ``ProductNotFoundError`` and every other exception
reach the handlers registered in ``main.create_app``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from product_api.app.api.deps import get_product_service
from product_api.app.core.config import settings
from product_api.app.schemas.product import (
    ProductCreate,
    ProductListRequest,
    ProductListResponse,
    ProductRead,
    ProductUpdate,
)
from product_api.app.services.product_service import ProductService

router = APIRouter()


@router.post("/", response_model=ProductRead)
async def create_product(
    product_in: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Create a product and return it with its generated id."""
    product = service.create(product_in.category, product_in.name)
    return ProductRead.model_validate(product)


@router.put("/", response_model=ProductRead)
async def update_product(
    product_in: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Replace the category and name of an existing product.

    Both fields are overwritten with the values sent, including
    ``null``.
    """
    product = service.update(product_in.id, product_in.category, product_in.name)
    return ProductRead.model_validate(product)


@router.get("/categories", response_model=List[Optional[str]])
async def list_categories(
    service: ProductService = Depends(get_product_service),
) -> List[Optional[str]]:
    """Return each category used by at least one product.

    Products without a category show up as a single ``null`` entry.
    """
    return service.list_unique_categories()


@router.post("/list", response_model=ProductListResponse)
async def list_products_by_body(
    list_in: ProductListRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductListResponse:
    """Return one page of a category, with the filter sent as a JSON body."""
    page = service.list_by_category(list_in.category, list_in.page_index, list_in.page_size)
    return ProductListResponse.model_validate(page)


@router.get("/", response_model=ProductListResponse)
async def list_products(
    category: Optional[str] = Query(None),
    page_index: int = Query(0, ge=0),
    page_size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    service: ProductService = Depends(get_product_service),
) -> ProductListResponse:
    """Return one page of a category.

    - **category**: exact category to match; omitted matches products
      without a category.
    - **page_index**, **page_size**: zero-based page coordinates.
    """
    page = service.list_by_category(category, page_index, page_size)
    return ProductListResponse.model_validate(page)


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    return ProductRead.model_validate(service.get_by_id(product_id))


@router.delete("/{product_id}", response_model=bool)
async def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> bool:
    """Delete a product permanently and return ``true``."""
    service.delete_by_id(product_id)
    return True
