"""
Request dependencies shared by the endpoint modules.

``create_app`` builds one ``ProductService`` and stores it on
``app.state``; handlers obtain it through ``get_product_service`` so
they never construct storage objects themselves.
"""

from fastapi import Request

from product_api.app.services.product_service import ProductService


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service
