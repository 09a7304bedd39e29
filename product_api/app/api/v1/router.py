"""
Top‑level router for version 1 of the API.

When new endpoint modules are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import products

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
